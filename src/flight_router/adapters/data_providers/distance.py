"""
Great-circle distance helpers for route edge weights.

Providers that store routes without a distance column use these to
compute it from the endpoint airports' positions.
"""

import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# Mean Earth radius (IUGG)
EARTH_RADIUS_KM = 6371.0088


def haversine_km(lat1, lon1, lat2, lon2):
    """
    Vectorized haversine distance in kilometers.

    Accepts scalars or numpy arrays (degrees) and broadcasts.

    Examples:
        >>> round(float(haversine_km(0.0, 0.0, 0.0, 1.0)), 2)
        111.19
    """
    lat1, lon1, lat2, lon2 = map(np.radians, (lat1, lon1, lat2, lon2))

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    d = np.sin(dlat * 0.5) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon * 0.5) ** 2
    return 2.0 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(d))


def fill_route_distances(
    routes_df: pd.DataFrame,
    airports_df: pd.DataFrame,
) -> pd.DataFrame:
    """
    Compute missing route distances from airport coordinates.

    Rows that already carry a distance keep it. Rows whose endpoints
    are not in airports_df are left as NaN so validation reports them.

    Args:
        routes_df: Routes with source_id, destination_id and an optional
            distance column.
        airports_df: Airports with id, latitude, longitude.

    Returns:
        New DataFrame with a float distance column.
    """
    result = routes_df.copy()
    if "distance" not in result.columns:
        result["distance"] = np.nan
    result["distance"] = pd.to_numeric(result["distance"], errors="coerce")

    missing = result["distance"].isna()
    if not missing.any():
        return result

    positions = airports_df.set_index("id")[["latitude", "longitude"]]
    src = positions.reindex(result.loc[missing, "source_id"]).to_numpy()
    dst = positions.reindex(result.loc[missing, "destination_id"]).to_numpy()

    result.loc[missing, "distance"] = haversine_km(
        src[:, 0], src[:, 1], dst[:, 0], dst[:, 1]
    )

    logger.debug("Computed %d route distances from coordinates", int(missing.sum()))
    return result
