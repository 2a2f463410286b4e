"""
Normalization pipeline and lookup-table construction.

Raw stroke samples go through four stages, each returning a new tuple of
points: resample to NUM_POINTS, scale uniformly to the unit box, translate the
centroid to the origin, and discretize onto the integer grid used to index the
lookup table.
"""
import math
from typing import Any, Iterable, Mapping, Sequence, Tuple

import numpy as np

from .types import DegenerateGestureError, EmptyGestureError, InvalidSampleError, Point


NUM_POINTS = 32
MAX_INT_COORD = 1024  # int_x / int_y range over [0, MAX_INT_COORD - 1]
LUT_SIZE = 64
LUT_SCALE_FACTOR = MAX_INT_COORD // LUT_SIZE
ORIGIN = Point(0.0, 0.0, 0)

# Shorter total path lengths cannot be resampled meaningfully
MIN_PATH_LENGTH = 1e-9

# Largest distance, in normalized units, between a point of a normalized
# cloud and the centre of its LUT cell: half a unit of integer rounding plus
# up to LUT_SCALE_FACTOR - 1 units from cell rounding and clamping, per axis.
LUT_CELL_ERROR = math.hypot(LUT_SCALE_FACTOR - 0.5, LUT_SCALE_FACTOR - 0.5) * 2.0 / (MAX_INT_COORD - 1)


def _parse_sample(sample: Any) -> Point:
    if isinstance(sample, Point):
        return sample
    try:
        if isinstance(sample, Mapping):
            return Point(float(sample["x"]), float(sample["y"]), int(sample.get("stroke_id", 1)))
        if len(sample) == 2:
            return Point(float(sample[0]), float(sample[1]), 1)
        if len(sample) == 3:
            return Point(float(sample[0]), float(sample[1]), int(sample[2]))
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        raise InvalidSampleError(f"malformed sample {sample!r}: {e}") from e
    raise InvalidSampleError(f"malformed sample {sample!r}: expected 2 or 3 values")


def to_point(sample: Any) -> Point:
    """
    Coerce one input sample into a Point.

    Accepts a Point, an (x, y) or (x, y, stroke_id) sequence, or a mapping
    with "x", "y" and optional "stroke_id" keys (stroke 1 when absent).

    Raises:
        InvalidSampleError: the sample has the wrong shape or non-numeric values
        DegenerateGestureError: a coordinate is NaN or infinite
    """
    point = _parse_sample(sample)
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise DegenerateGestureError(f"non-finite sample ({point.x!r}, {point.y!r})")
    return point


def as_points(samples: Iterable[Any]) -> Tuple[Point, ...]:
    return tuple(to_point(sample) for sample in samples)


def euclidean_distance(p1: Point, p2: Point) -> float:
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def path_length(points: Sequence[Point]) -> float:
    """Total drawn length; pen-up gaps between strokes contribute nothing."""
    length = 0.0
    for i in range(1, len(points)):
        if points[i].stroke_id == points[i - 1].stroke_id:
            length += euclidean_distance(points[i - 1], points[i])
    return length


def resample(points: Sequence[Point], n: int = NUM_POINTS) -> Tuple[Point, ...]:
    """
    Resample a multi-stroke sequence to exactly n points spaced evenly along
    the drawn path.

    The walk measures from every interpolated point, so an interpolated point
    acts as the start of the remaining segment. The accumulated distance
    carries over stroke boundaries. When floating-point rounding leaves the
    walk short of n points, the final input point is repeated to fill up.

    Raises:
        EmptyGestureError: no points were given
        DegenerateGestureError: the drawn path has no length or is not finite
    """
    if not points:
        raise EmptyGestureError("cannot resample an empty gesture")

    length = path_length(points)
    if not math.isfinite(length) or length < MIN_PATH_LENGTH:
        raise DegenerateGestureError(f"gesture path length {length!r} cannot be resampled")

    interval = length / (n - 1)
    accumulated = 0.0
    resampled = [points[0]]

    prev = points[0]
    i = 1
    while i < len(points) and len(resampled) < n:
        current = points[i]
        if current.stroke_id == prev.stroke_id:
            d = euclidean_distance(prev, current)
            if accumulated + d >= interval:
                t = (interval - accumulated) / d
                q = Point(
                    prev.x + t * (current.x - prev.x),
                    prev.y + t * (current.y - prev.y),
                    current.stroke_id,
                )
                resampled.append(q)
                accumulated = 0.0
                # Keep measuring from q towards the same input point
                prev = q
                continue
            accumulated += d
        prev = current
        i += 1

    last = points[-1]
    while len(resampled) < n:
        resampled.append(Point(last.x, last.y, last.stroke_id))

    return tuple(resampled)


def bounding_box(points: Sequence[Point]) -> Tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y)."""
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return min(xs), min(ys), max(xs), max(ys)


def scale(points: Sequence[Point]) -> Tuple[Point, ...]:
    """Scale uniformly so the larger bounding-box side becomes 1."""
    min_x, min_y, max_x, max_y = bounding_box(points)
    size = max(max_x - min_x, max_y - min_y)
    if not math.isfinite(size) or size <= 0.0:
        raise DegenerateGestureError(f"gesture bounding box size {size!r} cannot be scaled")

    return tuple(
        Point((p.x - min_x) / size, (p.y - min_y) / size, p.stroke_id)
        for p in points
    )


def centroid(points: Sequence[Point]) -> Point:
    x = sum(p.x for p in points) / len(points)
    y = sum(p.y for p in points) / len(points)
    return Point(x, y, 0)


def translate_to(points: Sequence[Point], pt: Point = ORIGIN) -> Tuple[Point, ...]:
    """Translate the points so their centroid lands on pt."""
    c = centroid(points)
    return tuple(
        Point(p.x + pt.x - c.x, p.y + pt.y - c.y, p.stroke_id)
        for p in points
    )


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def make_int_coords(points: Sequence[Point]) -> Tuple[Point, ...]:
    """Map normalized [-1, 1] coordinates onto the integer grid [0, MAX_INT_COORD - 1]."""
    top = MAX_INT_COORD - 1
    return tuple(
        p.with_int_coords(
            _clamp(round_half_up((p.x + 1.0) / 2.0 * top), 0, top),
            _clamp(round_half_up((p.y + 1.0) / 2.0 * top), 0, top),
        )
        for p in points
    )


def lut_cell(point: Point) -> Tuple[int, int]:
    """LUT row and column for a discretized point."""
    row = round_half_up(point.int_x / LUT_SCALE_FACTOR)
    col = round_half_up(point.int_y / LUT_SCALE_FACTOR)
    return _clamp(row, 0, LUT_SIZE - 1), _clamp(col, 0, LUT_SIZE - 1)


def compute_lut(points: Sequence[Point]) -> np.ndarray:
    """
    Build the LUT_SIZE x LUT_SIZE nearest-point table for a discretized cloud.

    Cell (x, y) holds the index of the point whose own LUT cell is closest in
    squared grid distance; ties go to the lowest point index. The returned
    array is read-only.
    """
    cells = np.array([lut_cell(p) for p in points], dtype=np.int64).reshape(-1, 2)
    grid = np.arange(LUT_SIZE, dtype=np.int64)

    dx = grid[:, None] - cells[:, 0][None, :]  # (LUT_SIZE, n)
    dy = grid[:, None] - cells[:, 1][None, :]
    sqr = dx[:, None, :] ** 2 + dy[None, :, :] ** 2  # (LUT_SIZE, LUT_SIZE, n)

    lut = np.argmin(sqr, axis=2).astype(np.int64)
    lut.setflags(write=False)
    return lut


def normalize(points: Sequence[Point], n: int = NUM_POINTS) -> Tuple[Point, ...]:
    """Run the full pipeline: resample, scale, translate to origin, discretize."""
    normalized = resample(points, n)
    normalized = scale(normalized)
    normalized = translate_to(normalized, ORIGIN)
    return make_int_coords(normalized)
