"""
Classify points from the polygons of a vector source.

A target field that names a polygon attribute copies that attribute onto
every point inside the polygon. Any other name records whether each point
falls inside at least one polygon.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

import geopandas as gpd
import numpy as np
import pandas as pd
from loguru import logger
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from shpclassify.core.extent import crop_polygons, point_extent
from shpclassify.core.field_writer import write_field
from shpclassify.core.point_in_polygon import is_degenerate_ring, point_in_polygon
from shpclassify.io import COORD_COLUMNS, validate_points, validate_polygons


class ClassifyMode(str, Enum):
    """Supported classification modes."""

    ATTRIBUTE = "attribute"
    BOOLEAN = "boolean"


def resolve_mode(polygons_gdf: gpd.GeoDataFrame, field: str) -> ClassifyMode:
    """Pick the mode from the polygon attribute schema.

    Parameters
    ----------
    polygons_gdf : geopandas.GeoDataFrame
        Polygon collection.
    field : str
        Target field name.

    Returns
    -------
    ClassifyMode
        ``ATTRIBUTE`` when ``field`` is a non-geometry column of
        ``polygons_gdf``, ``BOOLEAN`` otherwise.
    """
    attribute_columns = [
        col for col in polygons_gdf.columns if col != polygons_gdf.geometry.name
    ]
    if field in attribute_columns:
        return ClassifyMode.ATTRIBUTE
    return ClassifyMode.BOOLEAN


def _unset_dtype(dtype):
    """Map a polygon column dtype to a dtype able to hold missing values."""
    if isinstance(dtype, (pd.CategoricalDtype, pd.StringDtype)):
        return dtype
    if pd.api.types.is_bool_dtype(dtype):
        return "boolean"
    if pd.api.types.is_integer_dtype(dtype):
        return "Int64"
    if pd.api.types.is_float_dtype(dtype):
        return "Float64"
    return object


def init_value_buffer(
    mode: ClassifyMode,
    polygons_gdf: gpd.GeoDataFrame,
    field: str,
    npoints: int,
) -> Union[pd.Series, np.ndarray]:
    """Allocate the per-point buffer for a classification run.

    Parameters
    ----------
    mode : ClassifyMode
        Resolved classification mode.
    polygons_gdf : geopandas.GeoDataFrame
        Full polygon collection, used for the attribute dtype.
    field : str
        Target field name.
    npoints : int
        Number of points.

    Returns
    -------
    pandas.Series or numpy.ndarray
        Missing-valued ``Series`` in the attribute's value domain for
        ``ATTRIBUTE`` mode; ``int64`` zero counters for ``BOOLEAN`` mode.
    """
    if mode == ClassifyMode.BOOLEAN:
        return np.zeros(npoints, dtype=np.int64)
    dtype = _unset_dtype(polygons_gdf[field].dtype)
    if isinstance(dtype, pd.CategoricalDtype):
        return pd.Series(pd.Categorical([None] * npoints, dtype=dtype))
    if isinstance(dtype, pd.StringDtype):
        return pd.Series([None] * npoints, dtype=dtype)
    return pd.Series(pd.NA, index=pd.RangeIndex(npoints), dtype=dtype)


def polygon_rings(geometry: BaseGeometry) -> list[np.ndarray]:
    """Extract outer ring vertices of a polygon-like geometry.

    Interior rings are ignored.

    Parameters
    ----------
    geometry : shapely.geometry.base.BaseGeometry
        Polygon or MultiPolygon. Empty or ``None`` geometry yields no ring.

    Returns
    -------
    list[numpy.ndarray]
        One ``(K, 2)`` coordinate array per polygon part.
    """
    if geometry is None or geometry.is_empty:
        return []
    if isinstance(geometry, Polygon):
        parts = [geometry]
    elif isinstance(geometry, MultiPolygon):
        parts = list(geometry.geoms)
    else:
        raise ValueError(f"unsupported geometry type: {geometry.geom_type}")
    return [
        np.asarray(part.exterior.coords, dtype=float)[:, :2]
        for part in parts
        if not part.is_empty
    ]


def _contained_mask(
    x_arr: np.ndarray, y_arr: np.ndarray, rings: list[np.ndarray]
) -> np.ndarray:
    """Union of boundary-inclusive containment over the given rings."""
    mask = np.zeros(x_arr.shape, dtype=bool)
    for ring_xy in rings:
        mask |= point_in_polygon(x_arr, y_arr, ring_xy[:, 0], ring_xy[:, 1]) > 0
    return mask


def classify_points(
    points_df: pd.DataFrame,
    polygons_gdf: gpd.GeoDataFrame,
    field: str,
) -> tuple[Union[pd.Series, np.ndarray], ClassifyMode]:
    """Compute per-point classification values without touching the table.

    Polygons are visited in collection order after cropping to the point
    extent. In ``ATTRIBUTE`` mode a later polygon overwrites values written
    by an earlier one on shared points. In ``BOOLEAN`` mode each containing
    polygon adds one hit and the result is ``hits > 0``. Points on an edge
    or a vertex count as contained. Polygons whose outer ring has fewer
    than three distinct vertices are skipped.

    Parameters
    ----------
    points_df : pandas.DataFrame
        Point table with ``X`` and ``Y`` columns.
    polygons_gdf : geopandas.GeoDataFrame
        Polygon collection.
    field : str
        Target field name; selects the mode.

    Returns
    -------
    tuple[pandas.Series | numpy.ndarray, ClassifyMode]
        Value buffer of length ``len(points_df)`` and the resolved mode.
    """
    validate_points(points_df)
    validate_polygons(polygons_gdf)
    if field in COORD_COLUMNS:
        raise ValueError(f"field cannot overwrite coordinate column: {field}")
    if isinstance(points_df, gpd.GeoDataFrame) and field == points_df.geometry.name:
        raise ValueError(f"field cannot overwrite geometry column: {field}")

    npoints = len(points_df)
    mode = resolve_mode(polygons_gdf, field)
    values = init_value_buffer(mode, polygons_gdf, field, npoints)
    logger.debug(f"Classifying {npoints} points into '{field}' ({mode.value} mode)")

    cropped_gdf = None
    if npoints > 0:
        cropped_gdf = crop_polygons(polygons_gdf, point_extent(points_df))

    if cropped_gdf is not None:
        x_arr = points_df["X"].to_numpy(dtype=float)
        y_arr = points_df["Y"].to_numpy(dtype=float)
        geometries = cropped_gdf.geometry.tolist()
        if mode == ClassifyMode.ATTRIBUTE:
            field_values = cropped_gdf[field].tolist()
        else:
            field_values = [None] * len(geometries)

        for poly_label, geometry, field_value in zip(
            cropped_gdf.index, geometries, field_values
        ):
            rings = [
                ring_xy for ring_xy in polygon_rings(geometry)
                if not is_degenerate_ring(ring_xy[:, 0], ring_xy[:, 1])
            ]
            if not rings:
                logger.warning(
                    f"Skipping degenerate polygon {poly_label!r} "
                    "(fewer than 3 distinct vertices)"
                )
                continue

            mask = _contained_mask(x_arr, y_arr, rings)
            if mode == ClassifyMode.ATTRIBUTE:
                values[mask] = field_value
            else:
                values += mask
            logger.debug(f"Polygon {poly_label!r}: {int(mask.sum())} points inside")

    if mode == ClassifyMode.BOOLEAN:
        values = values > 0
        logger.info(f"{int(values.sum())} of {npoints} points inside polygons")
    else:
        logger.info(f"{int(values.notna().sum())} of {npoints} points assigned")
    return values, mode


def classify_from_shapefile(
    points_df: pd.DataFrame,
    polygons_gdf: gpd.GeoDataFrame,
    field: str,
) -> pd.DataFrame:
    """Classify points from polygons and store the result as a new field.

    If ``field`` is an attribute of ``polygons_gdf``, points inside a
    polygon receive that polygon's value and the others a missing value.
    Otherwise the new field is ``True`` for points inside any polygon and
    ``False`` elsewhere. The value column is computed completely before the
    table is modified.

    Parameters
    ----------
    points_df : pandas.DataFrame
        Point table with ``X`` and ``Y`` columns, modified in place.
    polygons_gdf : geopandas.GeoDataFrame
        Polygon collection, e.g. from :func:`shpclassify.io.load_polygons`.
    field : str
        Name of a polygon attribute, or of the new boolean field.

    Returns
    -------
    pandas.DataFrame
        ``points_df`` with column ``field`` added or replaced.

    Examples
    --------
    >>> lakes = load_polygons("lake_polygons_UTM17.shp")
    >>> lidar = classify_from_shapefile(lidar, lakes, "inlake")
    >>> lidar = classify_from_shapefile(lidar, lakes, "LAKENAME_1")
    """
    values, _ = classify_points(points_df, polygons_gdf, field)
    return write_field(points_df, field, values)
