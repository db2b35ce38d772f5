# greenmo/queries/position_query.py
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Protocol
from greenmo.utils import upstream
from greenmo.utils.env import REQUEST_TIMEOUT
from greenmo.utils.errors import MalformedEntityError, NetworkingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    lat: float
    lon: float


@dataclass(frozen=True)
class BoundingBox:
    corner1: Position
    corner2: Position

    def center(self) -> Position:
        # corners are not normalized, so this is the plain midpoint of whatever was given
        return Position(
            lat=(self.corner1.lat + self.corner2.lat) / 2,
            lon=(self.corner1.lon + self.corner2.lon) / 2,
        )


class PositionQuery(Protocol):
    """What a location provider has to offer to be run by `run_query`."""
    name: str

    def fetch(self, params: Dict[str, str], timeout: float = REQUEST_TIMEOUT) -> List[Any]: ...

    def filter(self, entities: List[Any]) -> List[Any]: ...

    def map(self, entities: List[Any]) -> List[Position]: ...


def request_entities(name, url, params, factory: Callable[[dict], Any], headers=None, timeout=REQUEST_TIMEOUT):
    """
    Fetch a JSON list from `url` and turn every entry into a typed entity.
    Entries `factory` rejects are logged and skipped.
    """
    response = upstream.get(name, url, params=params, headers=headers, timeout=timeout)
    try:
        data = response.json()
    except ValueError as e:
        logger.error("%s returned a body that is not JSON", name)
        raise NetworkingError(name, message=f"Invalid response body - {name}.") from e
    if not isinstance(data, list):
        logger.error("%s returned %s instead of a list", name, type(data).__name__)
        raise NetworkingError(name, message=f"Invalid response body - {name}.")

    entities = []
    for entry in data:
        try:
            entities.append(factory(entry))
        except MalformedEntityError as e:
            logger.warning("Skipping entry from %s: %s", name, e)
    return entities


def run_query(query: PositionQuery, params: Dict[str, str], timeout: float = REQUEST_TIMEOUT) -> List[Position]:
    entities = query.fetch(params, timeout=timeout)
    filtered = query.filter(entities)
    logger.info("%s: %d of %d entries kept", query.name, len(filtered), len(entities))
    return query.map(filtered)
