# greenmo/queries/spirii.py
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from greenmo.queries.position_query import BoundingBox, Position, request_entities
from greenmo.utils.env import REQUEST_TIMEOUT
from greenmo.utils.errors import MalformedEntityError


@dataclass(frozen=True)
class Charger:
    """A cluster of charging points as returned by Spirii (GeoJSON-like)."""
    charger_id: Optional[str]
    available_connectors: int
    coordinates: Tuple[float, float]  # (lon, lat)

    @classmethod
    def from_dict(cls, data):
        try:
            properties = data["properties"]
            lon, lat = data["geometry"]["coordinates"]
            return cls(
                charger_id=properties.get("id"),
                available_connectors=int(properties["availableConnectors"]),
                coordinates=(float(lon), float(lat)),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise MalformedEntityError(f"malformed charger {data!r}") from e


class Spirii:
    name = "Spirii"
    URL = "https://app.spirii.dk/api/v2/clusters"
    HEADERS = {"appversion": "3.6.1"}

    @staticmethod
    def parameters(bbox: BoundingBox) -> Dict[str, str]:
        # zoom 22 makes Spirii return single chargers instead of large clusters
        return {
            "includeOccupied": "false",
            "includeOutOfService": "false",
            "includeRoaming": "false",
            "neCoordinates": f"{bbox.corner1.lat},{bbox.corner2.lon}",
            "swCoordinates": f"{bbox.corner2.lat},{bbox.corner1.lon}",
            "zoom": "22",
        }

    def fetch(self, params, timeout=REQUEST_TIMEOUT) -> List[Charger]:
        return request_entities(self.name, self.URL, params, Charger.from_dict, headers=self.HEADERS, timeout=timeout)

    def filter(self, chargers: List[Charger]) -> List[Charger]:
        return [charger for charger in chargers if charger.available_connectors > 0]

    def map(self, chargers: List[Charger]) -> List[Position]:
        return [Position(lat=charger.coordinates[1], lon=charger.coordinates[0]) for charger in chargers]
