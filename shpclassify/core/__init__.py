# shpclassify Core Module
"""
Core classification logic for shpclassify.

Contains:
- Point cloud extent and polygon cropping
- Ray-crossing point-in-polygon test
- Attribute-copy / boolean-membership classifier
- Field writer and point extraction
"""

from shpclassify.core.classifier import (
    ClassifyMode,
    classify_from_shapefile,
    classify_points,
    init_value_buffer,
    polygon_rings,
    resolve_mode,
)
from shpclassify.core.extent import crop_polygons, point_extent
from shpclassify.core.field_writer import PreconditionError, write_field
from shpclassify.core.point_in_polygon import is_degenerate_ring, point_in_polygon
from shpclassify.core.points import extract_points

__all__ = [
    "ClassifyMode",
    "PreconditionError",
    "classify_from_shapefile",
    "classify_points",
    "crop_polygons",
    "extract_points",
    "init_value_buffer",
    "is_degenerate_ring",
    "point_extent",
    "point_in_polygon",
    "polygon_rings",
    "resolve_mode",
    "write_field",
]
