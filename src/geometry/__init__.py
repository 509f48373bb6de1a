from .polygon import (
    Point2D,
    Polygon,
    point_in_polygon,
    polygon_area,
    segments_intersect,
    polygon_bounds,
    validate_polygon,
    best_zone,
)
from .transform import Transform2D, IDENTITY
from .shapes import (
    CIRCLE_SAMPLES,
    PointShape,
    CircleShape,
    BoxShape,
    PolygonShape,
    Shape,
    shape_contained,
    shape_to_local,
    to_shapely,
)
