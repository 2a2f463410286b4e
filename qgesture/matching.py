"""
Cloud matching: greedy weighted point correspondence with lower-bound pruning
and early abandoning.
"""
import math
from typing import Any, List, Sequence

import numpy as np

from .normalize import LUT_CELL_ERROR, lut_cell
from .pointcloud import PointCloud
from .types import Point


def sqr_euclidean_distance(p1: Point, p2: Point) -> float:
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return dx * dx + dy * dy


def _as_xy(points: Any) -> np.ndarray:
    if isinstance(points, PointCloud):
        return points.xy
    if isinstance(points, np.ndarray):
        return points.reshape(-1, 2)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64).reshape(-1, 2)


def sqr_distance_matrix(pts1: Any, pts2: Any) -> np.ndarray:
    """Entry (i, j) is the squared distance between pts1[i] and pts2[j]."""
    xy1 = _as_xy(pts1)
    xy2 = _as_xy(pts2)
    if len(xy1) != len(xy2):
        raise ValueError(f"point sequences differ in length: {len(xy1)} != {len(xy2)}")
    diff = xy2[None, :, :] - xy1[:, None, :]
    return diff[..., 0] ** 2 + diff[..., 1] ** 2


def _greedy_distance(sqr: np.ndarray, start: int, min_so_far: float) -> float:
    n = sqr.shape[0]
    matched = np.zeros(n, dtype=bool)
    total = 0.0
    weight = n
    i = start
    for _ in range(n):
        row = np.where(matched, np.inf, sqr[i])
        j = int(np.argmin(row))  # first minimum, i.e. lowest index on ties
        matched[j] = True
        total += weight * float(row[j])
        if total >= min_so_far:
            return total  # early abandoning
        weight -= 1
        i = (i + 1) % n
    return total


def cloud_distance(pts1: Any, pts2: Any, start: int, min_so_far: float = math.inf) -> float:
    """
    Greedy weighted matching cost from pts1 to pts2, scanning pts1 circularly
    from start.

    Each pts1 point takes the nearest still-unmatched pts2 point. The first
    match is weighted n, the next n - 1, down to 1. Once the running sum
    reaches min_so_far the partial sum is returned.

    Raises:
        ValueError: the sequences differ in length or start is out of range
    """
    sqr = sqr_distance_matrix(pts1, pts2)
    n = sqr.shape[0]
    if not 0 <= start < n:
        raise ValueError(f"start {start} outside [0, {n})")
    return _greedy_distance(sqr, start, min_so_far)


def compute_lower_bound(pts1: Sequence[Point], pts2: Any, step: int, lut: np.ndarray) -> List[float]:
    """
    Lower bounds on the matching cost from pts1 to pts2 for the starting
    offsets 0, step, 2 * step, ...

    lut is the nearest-point table of pts2; pts1 must be normalized points
    carrying discretized coordinates. Entry j is the bound for offset j * step.

    The LUT only finds the point whose cell is nearest, which can be farther
    than the true nearest point by up to 4 * LUT_CELL_ERROR, so that margin is
    taken off the LUT distance before squaring. Every entry is therefore at
    most the exact cloud distance from its offset.
    """
    xy1 = _as_xy(pts1)
    xy2 = _as_xy(pts2)
    n = len(xy1)
    if len(xy2) != n:
        raise ValueError(f"point sequences differ in length: {n} != {len(xy2)}")

    cells = np.array([lut_cell(p) for p in pts1], dtype=np.int64).reshape(-1, 2)
    nearest = lut[cells[:, 0], cells[:, 1]]
    lut_dist = np.sqrt(np.sum((xy2[nearest] - xy1) ** 2, axis=1))
    d = np.maximum(lut_dist - 4.0 * LUT_CELL_ERROR, 0.0) ** 2

    sat = np.cumsum(d)
    bounds = [0.0] * (n // step + 1)
    bounds[0] = float(np.dot(np.arange(n, 0, -1, dtype=np.float64), d))
    for j, i in enumerate(range(step, n, step), start=1):
        bounds[j] = bounds[0] + i * float(sat[n - 1]) - n * float(sat[i - 1])
    return bounds


def cloud_match(candidate: PointCloud, template: PointCloud, min_so_far: float = math.inf) -> float:
    """
    Distance between two clouds, or min_so_far when no tested offset beats it.

    Offsets that are multiples of floor(sqrt(n)) are tried in both directions;
    an offset is only evaluated exactly when its lower bound is below the best
    distance found so far.
    """
    n = candidate.size()
    if template.size() != n:
        raise ValueError(f"clouds differ in size: {n} != {template.size()}")
    step = int(math.floor(math.sqrt(n)))

    lb1 = compute_lower_bound(candidate.points, template.xy, step, template.lut)
    lb2 = compute_lower_bound(template.points, candidate.xy, step, candidate.lut)

    sqr = sqr_distance_matrix(candidate.xy, template.xy)
    sqr_t = sqr.T

    for j, i in enumerate(range(0, n, step)):
        if lb1[j] < min_so_far:
            min_so_far = min(min_so_far, _greedy_distance(sqr, i, min_so_far))
        if lb2[j] < min_so_far:
            min_so_far = min(min_so_far, _greedy_distance(sqr_t, i, min_so_far))

    return min_so_far
