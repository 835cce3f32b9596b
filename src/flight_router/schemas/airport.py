"""
Airport schemas using Pandera.

Defines the contract for airport reference data (graph nodes).
Schema validation happens at layer boundaries only, not per-row.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import pandera as pa
from pandera.typing import DataFrame, Series


class AirportSchema(pa.DataFrameModel):
    """
    Core contract for airport rows.

    Extra columns are allowed and preserved (strict=False).
    """

    id: Series[int] = pa.Field(
        unique=True,
        description="Stable airport identity",
    )
    iata: Series[str] = pa.Field(
        nullable=True,
        str_length={"min_value": 3, "max_value": 3},
        description="IATA code (e.g., 'WAW'), null if unassigned",
    )
    icao: Series[str] = pa.Field(
        nullable=True,
        str_length={"min_value": 4, "max_value": 4},
        description="ICAO code (e.g., 'EPWA'), null if unassigned",
    )
    latitude: Series[float] = pa.Field(
        ge=-90,
        le=90,
        description="Latitude in decimal degrees",
    )
    longitude: Series[float] = pa.Field(
        ge=-180,
        le=180,
        description="Longitude in decimal degrees",
    )

    # Display fields
    name: Optional[Series[str]] = pa.Field(nullable=True)
    city: Optional[Series[str]] = pa.Field(nullable=True)
    country: Optional[Series[str]] = pa.Field(nullable=True)

    class Config:
        strict = False
        coerce = True
        name = "AirportSchema"
        description = "Airport reference data (graph nodes)"


AirportDataFrame = DataFrame[AirportSchema]


@dataclass(frozen=True)
class Airport:
    """
    Immutable graph node.

    Identity is `id`; the codes are lookup keys only. Airports are
    owned by the graph and shared by reference across queries.
    """

    id: int
    iata: Optional[str]
    icao: Optional[str]
    latitude: float
    longitude: float

    # Optional display fields
    name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    @property
    def code(self) -> Optional[str]:
        """Preferred display code: IATA, falling back to ICAO."""
        return self.iata or self.icao

    @property
    def is_addressable(self) -> bool:
        """True if the airport can be looked up by at least one code."""
        return self.code is not None

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for JSON responses."""
        return {
            "id": self.id,
            "iata": self.iata,
            "icao": self.icao,
            "name": self.name,
            "city": self.city,
            "country": self.country,
            "location": {
                "latitude": self.latitude,
                "longitude": self.longitude,
            },
        }
