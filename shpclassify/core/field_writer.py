"""Attach a per-point value buffer to a point table."""

from __future__ import annotations

import pandas as pd
from loguru import logger


class PreconditionError(ValueError):
    """Raised when per-point inputs do not match the point count."""


def write_field(points_df: pd.DataFrame, field: str, values) -> pd.DataFrame:
    """Write values as a named column of the point table.

    An existing column of the same name is overwritten in place, keeping its
    position; otherwise the column is appended. Row order and all other
    columns are left untouched.

    Parameters
    ----------
    points_df : pandas.DataFrame
        Point table, modified in place.
    field : str
        Output column name.
    values : array-like
        One value per row. ``pandas.Series`` inputs are assigned by
        position, not by index label.

    Returns
    -------
    pandas.DataFrame
        The same ``points_df`` object.

    Raises
    ------
    PreconditionError
        Raised when ``len(values)`` differs from the row count.
    """
    if len(values) != len(points_df):
        raise PreconditionError(
            f"value buffer has {len(values)} entries for {len(points_df)} points"
        )
    if isinstance(values, pd.Series):
        # Keep the buffer dtype so pandas does not re-infer it on assignment.
        values = pd.Series(values.array, index=points_df.index, dtype=values.dtype)
    replaced = field in points_df.columns
    points_df[field] = values
    logger.debug(f"{'Replaced' if replaced else 'Added'} point field '{field}'")
    return points_df
