"""Tests for point and polygon input helpers."""

from pathlib import Path
import warnings

import geopandas as gpd
import pandas as pd
import pytest
from shapely.geometry import LineString, Polygon

from shpclassify.core.classifier import classify_from_shapefile
from shpclassify.io import load_polygons, validate_points, validate_polygons


def test_load_polygons_reads_shapefile_attributes(
    tmp_path: Path, lake_polygons: gpd.GeoDataFrame
) -> None:
    """Loaded polygons keep their attribute fields."""
    shp_path = tmp_path / "lakes.shp"
    lake_polygons.to_file(shp_path)

    loaded_gdf = load_polygons(shp_path)
    assert len(loaded_gdf) == 1
    assert loaded_gdf["name"].tolist() == ["lake"]
    assert loaded_gdf.geometry.iloc[0].geom_type == "Polygon"


def test_loaded_shapefile_classifies_points(
    tmp_path: Path, lake_points: pd.DataFrame, lake_polygons: gpd.GeoDataFrame
) -> None:
    """End to end: shapefile on disk to classified point table."""
    shp_path = tmp_path / "lakes.shp"
    lake_polygons.to_file(shp_path)

    lakes = load_polygons(str(shp_path))
    classify_from_shapefile(lake_points, lakes, "inlake")
    classify_from_shapefile(lake_points, lakes, "name")
    assert lake_points["inlake"].tolist() == [True, False, False, True]
    assert lake_points["name"].notna().tolist() == [True, False, False, True]


def test_load_polygons_rejects_line_source(tmp_path: Path) -> None:
    """Line shapefiles are not polygon collections."""
    lines = gpd.GeoDataFrame(
        {"id": [1]}, geometry=[LineString([(0, 0), (1, 1)])], crs="EPSG:3857"
    )
    shp_path = tmp_path / "lines.shp"
    lines.to_file(shp_path)
    with pytest.raises(ValueError, match="Polygon or MultiPolygon"):
        load_polygons(shp_path)


def test_validate_polygons_accepts_empty_geometry() -> None:
    """Empty and null geometries are ignored by validation."""
    polygons_gdf = gpd.GeoDataFrame(
        {"id": [1, 2, 3]},
        geometry=[Polygon([(0, 0), (1, 0), (1, 1)]), Polygon(), None],
    )
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        validate_polygons(polygons_gdf)


def test_validate_polygons_rejects_plain_dataframe() -> None:
    """A DataFrame without geometry is not a polygon collection."""
    with pytest.raises(TypeError, match="GeoDataFrame"):
        validate_polygons(pd.DataFrame({"id": [1]}))


def test_validate_points_requires_coordinates() -> None:
    """Point tables need X and Y columns."""
    validate_points(pd.DataFrame({"X": [1.0], "Y": [2.0]}))
    with pytest.raises(ValueError, match="'Y'"):
        validate_points(pd.DataFrame({"X": [1.0]}))
    with pytest.raises(TypeError):
        validate_points([(1.0, 2.0)])
