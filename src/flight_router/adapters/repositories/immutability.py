"""
Read-only flags for the tables held by a graph snapshot.

A snapshot's airports_df and routes_df are shared by every concurrent
query, so their backing arrays are locked after the graph is built.
"""

import numpy as np
import pandas as pd


def make_immutable(df: pd.DataFrame) -> pd.DataFrame:
    """
    Lock every numpy-backed column of a DataFrame in place.

    No data is copied. Writes through the locked arrays raise ValueError
    afterwards; extension-array columns are left as they are.

    Example:
        >>> routes = make_immutable(pd.DataFrame({'distance': [1.0, 2.0]}))
        >>> routes['distance'].values[0] = 0.0  # ValueError: read-only
    """
    for column in df.columns:
        values = df[column].values
        if isinstance(values, np.ndarray) and values.flags.writeable:
            values.flags.writeable = False

    return df


def is_immutable(df: pd.DataFrame) -> bool:
    """True if no numpy-backed column of df is writeable."""
    return not any(
        isinstance(values, np.ndarray) and values.flags.writeable
        for values in (df[column].values for column in df.columns)
    )
