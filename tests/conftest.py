"""Pytest bootstrap helpers shared by all test modules."""

from __future__ import annotations

import sys
from pathlib import Path

import geopandas as gpd
import pandas as pd
import pytest
from shapely.geometry import Polygon


def _append_repo_root() -> None:
    """Ensure repository root is present in import path."""
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_text = str(repo_root)
    if repo_root_text in sys.path:
        return
    sys.path.insert(0, repo_root_text)


_append_repo_root()


@pytest.fixture
def lake_points() -> pd.DataFrame:
    """Four points around a 2x2 lake square."""
    return pd.DataFrame(
        {
            "X": [0.0, 5.0, 100.0, 1.0],
            "Y": [0.0, 5.0, 100.0, 1.0],
            "Z": [10.0, 11.0, 12.0, 13.0],
        }
    )


@pytest.fixture
def lake_polygons() -> gpd.GeoDataFrame:
    """One square lake polygon with a name attribute."""
    square = Polygon([(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)])
    return gpd.GeoDataFrame({"name": ["lake"]}, geometry=[square], crs="EPSG:32617")
