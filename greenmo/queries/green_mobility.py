# greenmo/queries/green_mobility.py
# Shareable cars from GreenMobility, filtered down to the ones that need charging.
from dataclasses import dataclass
from typing import Dict, List, Optional
from greenmo.queries.position_query import BoundingBox, Position, request_entities
from greenmo.utils.env import DEFAULT_FUEL_LEVEL, REQUEST_TIMEOUT
from greenmo.utils.errors import MalformedEntityError


@dataclass(frozen=True)
class Car:
    car_id: Optional[int]
    lat: float
    lon: float
    fuel_level: float

    @classmethod
    def from_dict(cls, data):
        try:
            return cls(
                car_id=data.get("carId"),
                lat=float(data["lat"]),
                lon=float(data["lon"]),
                fuel_level=float(data["fuelLevel"]),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise MalformedEntityError(f"malformed car {data!r}") from e


class GreenMo:
    name = "GreenMo"
    URL = "https://greenmobility.frontend.fleetbird.eu/api/prod/v1.06/map/cars/"

    def __init__(self, desired_fuel_level: int = DEFAULT_FUEL_LEVEL):
        self.desired_fuel_level = desired_fuel_level

    @staticmethod
    def parameters(bbox: BoundingBox) -> Dict[str, str]:
        return {
            "lon1": str(bbox.corner1.lon),
            "lat1": str(bbox.corner1.lat),
            "lon2": str(bbox.corner2.lon),
            "lat2": str(bbox.corner2.lat),
        }

    def fetch(self, params, timeout=REQUEST_TIMEOUT) -> List[Car]:
        return request_entities(self.name, self.URL, params, Car.from_dict, timeout=timeout)

    def filter(self, cars: List[Car]) -> List[Car]:
        return [car for car in cars if car.fuel_level <= self.desired_fuel_level]

    def map(self, cars: List[Car]) -> List[Position]:
        return [Position(lat=car.lat, lon=car.lon) for car in cars]
