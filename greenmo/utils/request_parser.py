# greenmo/utils/request_parser.py
import math
from dataclasses import dataclass
from greenmo.queries.position_query import BoundingBox, Position
from greenmo.utils.env import CARS_BY_DEFAULT, DEFAULT_FUEL_LEVEL
from greenmo.utils.errors import ParseError

MISSING_PARAMETERS_MESSAGE = "The query string parameters are missing."
INVALID_FORMAT_MESSAGE = "The positions are not in a valid format."


@dataclass(frozen=True)
class QueryFlags:
    include_cars: bool = CARS_BY_DEFAULT
    include_chargers: bool = False
    desired_fuel_level: int = DEFAULT_FUEL_LEVEL


def _parse_coordinate(params, field):
    try:
        value = float(params[field])
    except (KeyError, TypeError, ValueError):
        raise ParseError(INVALID_FORMAT_MESSAGE) from None
    if not math.isfinite(value):
        raise ParseError(INVALID_FORMAT_MESSAGE)
    return value


def parse_positions(params) -> BoundingBox:
    """
    Read the two corners of the bounding box from query string parameters
    `lat1`, `lon1`, `lat2`, `lon2`.
    """
    if params is None:
        raise ParseError(MISSING_PARAMETERS_MESSAGE, kind=ParseError.MISSING_PARAMETERS)

    corner1 = Position(lat=_parse_coordinate(params, "lat1"), lon=_parse_coordinate(params, "lon1"))
    corner2 = Position(lat=_parse_coordinate(params, "lat2"), lon=_parse_coordinate(params, "lon2"))
    return BoundingBox(corner1=corner1, corner2=corner2)


def _parse_bool(raw, default):
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return default


def _parse_int(raw, default):
    if isinstance(raw, bool):
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def parse_flags(params, config=None) -> QueryFlags:
    """Optional flags never fail; anything unreadable falls back to the default."""
    params = params or {}
    cars_default = config.cars_by_default if config is not None else CARS_BY_DEFAULT
    fuel_default = config.default_fuel_level if config is not None else DEFAULT_FUEL_LEVEL
    return QueryFlags(
        include_cars=_parse_bool(params.get("cars"), cars_default),
        include_chargers=_parse_bool(params.get("chargers"), False),
        desired_fuel_level=_parse_int(params.get("desiredFuelLevel"), fuel_default),
    )
