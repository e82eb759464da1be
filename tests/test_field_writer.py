"""Tests for writing value buffers and extracting points."""

import numpy as np
import pandas as pd
import pytest

from shpclassify.core.field_writer import PreconditionError, write_field
from shpclassify.core.points import extract_points


def test_write_field_appends_new_column(lake_points: pd.DataFrame) -> None:
    """A new field should be appended after existing columns."""
    result = write_field(lake_points, "flag", np.array([True, False, True, False]))
    assert result is lake_points
    assert list(result.columns) == ["X", "Y", "Z", "flag"]
    assert result["flag"].tolist() == [True, False, True, False]


def test_write_field_replaces_existing_column(lake_points: pd.DataFrame) -> None:
    """An existing field keeps its position but gets the new values."""
    write_field(lake_points, "Z", [1, 2, 3, 4])
    assert list(lake_points.columns) == ["X", "Y", "Z"]
    assert lake_points["Z"].tolist() == [1, 2, 3, 4]


def test_write_field_uses_series_position_not_label() -> None:
    """Series values are written by position regardless of index labels."""
    points_df = pd.DataFrame({"X": [0.0, 1.0], "Y": [0.0, 1.0]}, index=[10, 20])
    write_field(points_df, "v", pd.Series(["a", "b"]))
    assert points_df["v"].tolist() == ["a", "b"]


def test_write_field_rejects_length_mismatch(lake_points: pd.DataFrame) -> None:
    """Buffer shorter than the point table is a precondition failure."""
    with pytest.raises(PreconditionError, match="4 points"):
        write_field(lake_points, "flag", [True, False])
    assert "flag" not in lake_points.columns
    assert issubclass(PreconditionError, ValueError)


def test_extract_points_filters_rows(lake_points: pd.DataFrame) -> None:
    """Extraction keeps selected rows in order with a fresh index."""
    lake_points["inlake"] = [True, False, False, True]
    forest = extract_points(lake_points, lake_points["inlake"] == False)  # noqa: E712
    assert forest["X"].tolist() == [5.0, 100.0]
    assert forest.index.tolist() == [0, 1]
    assert len(lake_points) == 4


def test_extract_points_treats_missing_as_false(lake_points: pd.DataFrame) -> None:
    """Missing mask values should drop the row."""
    mask = pd.array([True, pd.NA, False, True], dtype="boolean")
    kept = extract_points(lake_points, mask)
    assert kept["Z"].tolist() == [10.0, 13.0]


def test_extract_points_rejects_length_mismatch(lake_points: pd.DataFrame) -> None:
    """Mask length must match the point count."""
    with pytest.raises(PreconditionError):
        extract_points(lake_points, [True])
