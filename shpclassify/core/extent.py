"""Extent helpers: point-cloud bounds and polygon cropping."""

from __future__ import annotations

from typing import Optional

import geopandas as gpd
import numpy as np
import pandas as pd
from loguru import logger
from shapely.geometry import LineString, Point, box
from shapely.geometry.base import BaseGeometry

from shpclassify.io import validate_points, validate_polygons


def _extent_geometry(
    xmin: float, ymin: float, xmax: float, ymax: float
) -> BaseGeometry:
    """Build the query geometry, collapsing zero-width extents."""
    if xmin == xmax and ymin == ymax:
        return Point(xmin, ymin)
    if xmin == xmax or ymin == ymax:
        # Single row or column of points.
        return LineString([(xmin, ymin), (xmax, ymax)])
    return box(xmin, ymin, xmax, ymax)


def point_extent(points_df: pd.DataFrame) -> tuple[float, float, float, float]:
    """Compute the axis-aligned extent of a point table.

    Parameters
    ----------
    points_df : pandas.DataFrame
        Point table with ``X`` and ``Y`` columns.

    Returns
    -------
    tuple[float, float, float, float]
        Bounds as ``(xmin, ymin, xmax, ymax)``.
    """
    validate_points(points_df)
    if points_df.empty:
        raise ValueError("points data is empty")
    x_arr = points_df["X"].to_numpy(dtype=float)
    y_arr = points_df["Y"].to_numpy(dtype=float)
    return (
        float(np.nanmin(x_arr)),
        float(np.nanmin(y_arr)),
        float(np.nanmax(x_arr)),
        float(np.nanmax(y_arr)),
    )


def crop_polygons(
    polygons_gdf: gpd.GeoDataFrame,
    bounds: tuple[float, float, float, float],
) -> Optional[gpd.GeoDataFrame]:
    """Keep polygons that intersect a bounding rectangle.

    Geometries are kept whole rather than clipped, so a polygon touching
    the rectangle only along its border is still a candidate.

    Parameters
    ----------
    polygons_gdf : geopandas.GeoDataFrame
        Polygon collection, not modified.
    bounds : tuple[float, float, float, float]
        Rectangle as ``(xmin, ymin, xmax, ymax)``.

    Returns
    -------
    geopandas.GeoDataFrame or None
        Row subset in the original order, or ``None`` when no polygon
        intersects the rectangle.
    """
    validate_polygons(polygons_gdf)
    if polygons_gdf.empty:
        logger.info("Polygon collection is empty, nothing to crop")
        return None

    xmin, ymin, xmax, ymax = bounds
    extent_geom = _extent_geometry(xmin, ymin, xmax, ymax)
    hit_idx = polygons_gdf.sindex.query(extent_geom, predicate="intersects")
    hit_idx = np.sort(np.asarray(hit_idx, dtype=np.int64))
    if hit_idx.size == 0:
        logger.info(f"No polygon intersects extent {bounds}")
        return None

    cropped_gdf = polygons_gdf.iloc[hit_idx]
    geom_series = cropped_gdf.geometry
    cropped_gdf = cropped_gdf[~geom_series.isna() & ~geom_series.is_empty]
    if cropped_gdf.empty:
        return None

    logger.info(f"Cropped polygons: {len(polygons_gdf)} -> {len(cropped_gdf)}")
    return cropped_gdf.copy()
