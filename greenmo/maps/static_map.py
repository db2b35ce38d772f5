# greenmo/maps/static_map.py
import base64
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple
from greenmo.queries.position_query import Position
from greenmo.utils import upstream
from greenmo.utils.env import REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

MAPS_URL = "https://maps.geoapify.com/v1/staticmap"
MAP_STYLE = "maptiler-3d"
MAP_WIDTH = 600
MAP_HEIGHT = 600
MAP_ZOOM = 14

CAR_MARKER_COLOR = "#3ea635"
CHARGER_MARKER_COLOR = "#f30e0e"


@dataclass(frozen=True)
class MarkerGroup:
    color: str
    positions: Tuple[Position, ...]


@dataclass(frozen=True)
class MapRequestSpec:
    center: Position
    marker_groups: Tuple[MarkerGroup, ...]


def build_map_request(center: Position, car_positions: List[Position], charger_positions: List[Position]) -> MapRequestSpec:
    groups = []
    if car_positions:
        groups.append(MarkerGroup(color=CAR_MARKER_COLOR, positions=tuple(car_positions)))
    if charger_positions:
        groups.append(MarkerGroup(color=CHARGER_MARKER_COLOR, positions=tuple(charger_positions)))
    return MapRequestSpec(center=center, marker_groups=tuple(groups))


def map_parameters(spec: MapRequestSpec, api_key: str) -> Dict[str, str]:
    """Geoapify wants lon before lat everywhere."""
    params = {
        "style": MAP_STYLE,
        "width": str(MAP_WIDTH),
        "height": str(MAP_HEIGHT),
        "center": f"lonlat:{spec.center.lon},{spec.center.lat}",
        "zoom": str(MAP_ZOOM),
    }
    pins = [
        f"lonlat:{pos.lon},{pos.lat};color:{group.color};size:medium"
        for group in spec.marker_groups
        for pos in group.positions
    ]
    if pins:
        params["marker"] = "|".join(pins)
    params["apiKey"] = api_key
    return params


def execute_maps_request(center, car_positions, charger_positions, api_key, timeout=REQUEST_TIMEOUT) -> bytes:
    spec = build_map_request(center, car_positions, charger_positions)
    response = upstream.get("Maps", MAPS_URL, params=map_parameters(spec, api_key), timeout=timeout)
    logger.info("Map generated successfully (%d bytes)", len(response.content))
    return response.content


def transform_image(img: bytes) -> str:
    # API Gateway expects binary bodies as base64 strings and decodes them itself
    return base64.b64encode(img).decode("ascii")
