"""
Data provider adapters for airport and route reference data.
"""

from src.flight_router.adapters.data_providers.dataframe_provider import (
    DataFrameRouteDataProvider,
)
from src.flight_router.adapters.data_providers.sqlite_provider import (
    SQLiteRouteDataProvider,
)

__all__ = ["DataFrameRouteDataProvider", "SQLiteRouteDataProvider"]
