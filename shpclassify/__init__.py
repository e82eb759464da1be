# shpclassify - Source Package
"""
shpclassify: classify point clouds from polygon vector data.

This package provides:
- Polygon loading from shapefiles and other vector sources
- Cropping of polygon collections to a point cloud extent
- Point-in-polygon classification (attribute copy or boolean membership)
"""

from shpclassify.core import (
    ClassifyMode,
    PreconditionError,
    classify_from_shapefile,
    classify_points,
    extract_points,
)
from shpclassify.io import load_polygons

__version__ = "0.1.0"

__all__ = [
    "ClassifyMode",
    "PreconditionError",
    "classify_from_shapefile",
    "classify_points",
    "extract_points",
    "load_polygons",
]
