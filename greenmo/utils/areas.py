# greenmo/utils/areas.py
# Named areas watched by the scheduled notifier.
from greenmo.queries.position_query import BoundingBox, Position

AREAS = {
    "DTU": BoundingBox(
        corner1=Position(lat=55.794430, lon=12.511368),
        corner2=Position(lat=55.779566, lon=12.527933),
    ),
    "Lundto": BoundingBox(
        corner1=Position(lat=55.794551, lon=12.520745),
        corner2=Position(lat=55.792620, lon=12.529628),
    ),
    "Bagsvaerd": BoundingBox(
        corner1=Position(lat=55.759287, lon=12.451061),
        corner2=Position(lat=55.753806, lon=12.458088),
    ),
}
