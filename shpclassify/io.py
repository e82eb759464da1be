"""Input helpers for point tables and polygon vector sources."""

from __future__ import annotations

from pathlib import Path

import geopandas as gpd
import pandas as pd
from loguru import logger

COORD_COLUMNS = ("X", "Y")
POLYGON_TYPES = {"Polygon", "MultiPolygon"}


def validate_points(points_df: pd.DataFrame) -> None:
    """Validate point table carries planar coordinate columns.

    Parameters
    ----------
    points_df : pandas.DataFrame
        Point table, one row per point.

    Raises
    ------
    TypeError
        Raised when input is not a DataFrame.
    ValueError
        Raised when ``X`` or ``Y`` column is missing.
    """
    if not isinstance(points_df, pd.DataFrame):
        raise TypeError("points must be a pandas DataFrame")
    missing = [col for col in COORD_COLUMNS if col not in points_df.columns]
    if missing:
        raise ValueError(f"points data is missing coordinate columns: {missing}")


def validate_polygons(polygons_gdf: gpd.GeoDataFrame) -> None:
    """Validate polygon collection geometry types.

    Empty collections and empty/null geometries are accepted; they simply
    contain no point.

    Parameters
    ----------
    polygons_gdf : geopandas.GeoDataFrame
        Polygon collection.

    Raises
    ------
    TypeError
        Raised when input is not a GeoDataFrame.
    ValueError
        Raised when a non-empty geometry is not Polygon or MultiPolygon.
    """
    if not isinstance(polygons_gdf, gpd.GeoDataFrame):
        raise TypeError("polygons must be a GeoDataFrame")
    if polygons_gdf.empty:
        return
    geom_series = polygons_gdf.geometry
    valid_mask = ~geom_series.isna() & ~geom_series.is_empty
    geom_types = set(geom_series[valid_mask].geom_type.unique().tolist())
    if not geom_types.issubset(POLYGON_TYPES):
        raise ValueError(
            f"polygon geometry must be Polygon or MultiPolygon, got {sorted(geom_types)}"
        )


def load_polygons(path: str | Path) -> gpd.GeoDataFrame:
    """Load a polygon vector source such as an ESRI shapefile.

    Parameters
    ----------
    path : str | Path
        Any vector file readable by ``geopandas.read_file``.

    Returns
    -------
    geopandas.GeoDataFrame
        Polygon collection with its attribute columns.

    Examples
    --------
    >>> lakes = load_polygons("lake_polygons_UTM17.shp")
    >>> "LAKENAME_1" in lakes.columns
    True
    """
    polygons_gdf = gpd.read_file(Path(path))
    validate_polygons(polygons_gdf)
    logger.info(f"Loaded {len(polygons_gdf)} polygons from {path}")
    return polygons_gdf
