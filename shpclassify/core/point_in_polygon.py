"""Vectorized ray-crossing point-in-polygon test."""

from __future__ import annotations

import numpy as np

OUTSIDE = 0
INSIDE = 1
ON_EDGE = 2
ON_VERTEX = 3


def _open_ring(ring_x: np.ndarray, ring_y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Drop the closing vertex when the ring repeats its first vertex."""
    if ring_x.size > 1 and ring_x[0] == ring_x[-1] and ring_y[0] == ring_y[-1]:
        return ring_x[:-1], ring_y[:-1]
    return ring_x, ring_y


def is_degenerate_ring(ring_x, ring_y) -> bool:
    """Check whether a ring has fewer than three distinct vertices.

    Parameters
    ----------
    ring_x, ring_y : array-like
        Ring vertex coordinates, closed or open.

    Returns
    -------
    bool
        ``True`` when the ring cannot enclose any area.
    """
    ring_xy = np.column_stack(
        [np.asarray(ring_x, dtype=float), np.asarray(ring_y, dtype=float)]
    )
    if ring_xy.shape[0] < 3:
        return True
    return np.unique(ring_xy, axis=0).shape[0] < 3


def point_in_polygon(x, y, ring_x, ring_y) -> np.ndarray:
    """Locate points relative to a single polygon ring.

    Uses the even-odd ray-crossing rule with a half-open edge test
    (``y1 > y) != (y2 > y)``), then overrides the result for points lying
    exactly on an edge or a vertex. Boundary detection is exact: a point
    is on an edge when the cross product with the edge is zero and the
    point sits inside the edge's bounding box.

    Parameters
    ----------
    x, y : array-like
        Point coordinates with shape ``(N,)``.
    ring_x, ring_y : array-like
        Ring vertex coordinates with shape ``(K,)``. A closing vertex equal
        to the first one is ignored.

    Returns
    -------
    numpy.ndarray
        ``int8`` codes with shape ``(N,)``: ``0`` outside, ``1`` strictly
        inside, ``2`` on an edge, ``3`` on a vertex. Containment is
        ``code > 0``.

    Examples
    --------
    >>> point_in_polygon([1.0, 2.0, 3.0], [1.0, 0.0, 3.0], [0, 2, 2, 0], [0, 0, 2, 2])
    array([1, 3, 0], dtype=int8)
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if x_arr.shape != y_arr.shape:
        raise ValueError("x and y must have the same shape")
    codes = np.zeros(x_arr.shape, dtype=np.int8)

    vx, vy = _open_ring(
        np.asarray(ring_x, dtype=float), np.asarray(ring_y, dtype=float)
    )
    if vx.shape != vy.shape:
        raise ValueError("ring_x and ring_y must have the same shape")
    if is_degenerate_ring(vx, vy):
        return codes

    # Points outside the ring bbox cannot be inside or on the boundary.
    bbox_mask = (
        (x_arr >= vx.min()) & (x_arr <= vx.max())
        & (y_arr >= vy.min()) & (y_arr <= vy.max())
    )
    candidate_idx = np.flatnonzero(bbox_mask)
    if candidate_idx.size == 0:
        return codes
    px = x_arr.ravel()[candidate_idx]
    py = y_arr.ravel()[candidate_idx]

    inside = np.zeros(px.shape, dtype=bool)
    on_edge = np.zeros(px.shape, dtype=bool)
    on_vertex = np.zeros(px.shape, dtype=bool)

    x2_arr = np.roll(vx, -1)
    y2_arr = np.roll(vy, -1)
    for x1, y1, x2, y2 in zip(vx, vy, x2_arr, y2_arr):
        on_vertex |= (px == x1) & (py == y1)

        cross = (x2 - x1) * (py - y1) - (y2 - y1) * (px - x1)
        in_edge_box = (
            (px >= min(x1, x2)) & (px <= max(x1, x2))
            & (py >= min(y1, y2)) & (py <= max(y1, y2))
        )
        on_edge |= (cross == 0) & in_edge_box

        straddle = (y1 > py) != (y2 > py)
        if not straddle.any():
            continue
        # straddle implies y1 != y2, so the division is safe where it matters.
        with np.errstate(divide="ignore", invalid="ignore"):
            x_cross = x1 + (py - y1) * (x2 - x1) / (y2 - y1)
        inside ^= straddle & (px < x_cross)

    candidate_codes = np.where(inside, INSIDE, OUTSIDE).astype(np.int8)
    candidate_codes[on_edge] = ON_EDGE
    candidate_codes[on_vertex] = ON_VERTEX
    codes.ravel()[candidate_idx] = candidate_codes
    return codes
