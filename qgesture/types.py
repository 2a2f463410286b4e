"""
Type definitions for the point-cloud gesture recognizer.
"""
from dataclasses import dataclass, field


NO_MATCH = "no match"
HIGH_CONFIDENCE = 0.7


class GestureError(ValueError):
    """Gesture input that cannot be turned into a matchable point cloud."""


class EmptyGestureError(GestureError):
    """No samples were supplied."""


class DegenerateGestureError(GestureError):
    """Samples have no extent (zero path length or zero bounding box)."""


class InvalidCloudError(GestureError):
    """Normalization did not produce a well-formed point cloud."""


class InvalidSampleError(GestureError):
    """A sample is not an (x, y[, stroke_id]) sequence or mapping."""


@dataclass(frozen=True)
class Point:
    """
    A 2D sample tagged with the stroke it belongs to.

    int_x / int_y are the discretized grid coordinates used for LUT indexing.
    They are not constructor arguments; only with_int_coords() sets them.
    """
    x: float
    y: float
    stroke_id: int = 1
    int_x: int = field(default=0, init=False)
    int_y: int = field(default=0, init=False)

    def with_int_coords(self, int_x: int, int_y: int) -> "Point":
        """Copy of this point carrying the given grid coordinates."""
        point = Point(self.x, self.y, self.stroke_id)
        object.__setattr__(point, "int_x", int_x)
        object.__setattr__(point, "int_y", int_y)
        return point


@dataclass(frozen=True)
class Result:
    """Outcome of a single recognition."""
    name: str
    score: float
    time_ms: float

    @classmethod
    def no_match(cls, time_ms: float = 0.0) -> "Result":
        return cls(name=NO_MATCH, score=0.0, time_ms=time_ms)

    @property
    def is_recognized(self) -> bool:
        return self.score > 0 and self.name != NO_MATCH

    def is_high_confidence(self, threshold: float = HIGH_CONFIDENCE) -> bool:
        return self.score > threshold

    @property
    def confidence_percentage(self) -> str:
        return f"{self.score * 100:.1f}%"

    def __str__(self) -> str:
        return f"{self.name} ({self.confidence_percentage}, {self.time_ms:.1f}ms)"


@dataclass(frozen=True)
class TemplateInfo:
    """Gallery metadata for one stored template."""
    index: int
    name: str
    is_default: bool
    point_count: int
    is_valid: bool
