"""Natural language processing components for ride search.

This subpackage groups the heuristic tier of query understanding:
vehicle keyword detection, route extraction and intent parsing.
"""

from .intent_parser import parse_query
from .routes import ExtractedRoute, extract_route
from .text import ROUTE_SEPARATOR, contains, has_route_separator, normalize, split_route
from .vehicles import VEHICLE_KEYWORDS, detect_vehicle, find_vehicle_token

__all__ = [
    "parse_query",
    "ExtractedRoute",
    "extract_route",
    "ROUTE_SEPARATOR",
    "contains",
    "has_route_separator",
    "normalize",
    "split_route",
    "VEHICLE_KEYWORDS",
    "detect_vehicle",
    "find_vehicle_token",
]
