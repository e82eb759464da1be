"""Point table filtering helpers."""

from __future__ import annotations

import numpy as np
import pandas as pd

from shpclassify.core.field_writer import PreconditionError
from shpclassify.io import validate_points


def extract_points(points_df: pd.DataFrame, mask) -> pd.DataFrame:
    """Return the rows selected by a boolean mask.

    Parameters
    ----------
    points_df : pandas.DataFrame
        Point table, not modified.
    mask : array-like
        Boolean mask with shape ``(N,)``. Missing values count as ``False``.

    Returns
    -------
    pandas.DataFrame
        New table with selected rows in original order and a fresh index.

    Examples
    --------
    >>> lidar = classify_from_shapefile(lidar, lakes, "inlake")
    >>> forest = extract_points(lidar, lidar["inlake"] == False)
    """
    validate_points(points_df)
    if len(mask) != len(points_df):
        raise PreconditionError(
            f"mask has {len(mask)} entries for {len(points_df)} points"
        )
    if isinstance(mask, pd.Series):
        mask = mask.array
    mask_array = np.asarray(pd.array(mask, dtype="boolean").fillna(False), dtype=bool)
    return points_df.loc[mask_array].reset_index(drop=True)
