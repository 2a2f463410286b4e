"""
Point cloud: the normalized, fixed-size representation of one gesture instance.
"""
from typing import Any, Iterable, Sequence, Tuple

import numpy as np

from .normalize import LUT_SIZE, NUM_POINTS, as_points, compute_lut, normalize
from .types import Point


class PointCloud:
    """
    A named gesture instance normalized to NUM_POINTS points plus its LUT.

    Construction runs the whole normalization pipeline; the cloud cannot be
    changed afterwards. Raises GestureError subclasses for empty or
    degenerate input.
    """

    __slots__ = ("_name", "_points", "_lut", "_xy")

    def __init__(self, name: str, points: Iterable[Any]):
        self._name = name
        self._points: Tuple[Point, ...] = normalize(as_points(points))
        self._lut = compute_lut(self._points)

        # Continuous coordinates as an (n, 2) array for distance computations
        xy = np.array([(p.x, p.y) for p in self._points], dtype=np.float64).reshape(-1, 2)
        xy.setflags(write=False)
        self._xy = xy

    @classmethod
    def from_coordinates(cls, name: str, coordinates: Sequence[float]) -> "PointCloud":
        """Build a cloud from a flat [x, y, stroke_id, x, y, stroke_id, ...] list."""
        if len(coordinates) % 3 != 0:
            raise ValueError(f"coordinate list length {len(coordinates)} is not a multiple of 3")
        points = [
            Point(float(coordinates[i]), float(coordinates[i + 1]), int(coordinates[i + 2]))
            for i in range(0, len(coordinates), 3)
        ]
        return cls(name, points)

    @property
    def name(self) -> str:
        return self._name

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def lut(self) -> np.ndarray:
        return self._lut

    @property
    def xy(self) -> np.ndarray:
        return self._xy

    def size(self) -> int:
        return len(self._points)

    def is_valid(self) -> bool:
        """True when the cloud has NUM_POINTS points and every LUT cell indexes one of them."""
        if len(self._points) != NUM_POINTS:
            return False
        if self._lut.shape != (LUT_SIZE, LUT_SIZE):
            return False
        return bool(self._lut.min() >= 0 and self._lut.max() < len(self._points))

    def statistics(self) -> str:
        status = "valid" if self.is_valid() else "invalid"
        return f"{self._name} ({len(self._points)} points, {status})"

    def __repr__(self) -> str:
        return f"PointCloud(name={self._name!r}, points={len(self._points)})"
