"""
Recognizer: owns the template store and matches candidate gestures against it.
"""
import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from .config import RecognizerConfig
from .matching import cloud_match
from .normalize import as_points
from .pointcloud import PointCloud
from .templates import DEFAULT_COUNT, default_clouds
from .types import GestureError, InvalidCloudError, Result, TemplateInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredTemplate:
    """A template cloud and whether it belongs to the built-in set."""
    cloud: PointCloud
    is_default: bool


def _elapsed_ms(t_start: float) -> float:
    return (time.perf_counter() - t_start) * 1000.0


class Recognizer:
    """
    Multi-stroke point-cloud gesture recognizer.

    Features:
    - 16 built-in templates, rebuilt on reset
    - Any number of named variants added at runtime
    - Bad input (empty, degenerate) is reported as "no match", never raised
    - Store mutations are serialized by a lock; recognition matches against
      a snapshot taken under the same lock
    """

    DEFAULT_COUNT = DEFAULT_COUNT

    def __init__(self, cfg: Optional[RecognizerConfig] = None):
        """Initialize the recognizer, loading the built-in templates unless disabled."""
        self.cfg = cfg or RecognizerConfig()
        self._lock = threading.RLock()
        self._templates: List[StoredTemplate] = []

        if self.cfg.load_defaults:
            self._templates = self._default_templates()

        logger.info("Recognizer initialized with %d templates", len(self._templates))
        for index, stored in enumerate(self._templates):
            logger.debug("  [%d] %s", index, stored.cloud.statistics())

    @staticmethod
    def _default_templates() -> List[StoredTemplate]:
        return [StoredTemplate(cloud, True) for cloud in default_clouds()]

    def recognize(self, points: Iterable[Any]) -> Result:
        """
        Classify a gesture against every stored template.

        Args:
            points: Samples of all strokes in drawing order, as Points,
                (x, y, stroke_id) tuples or {"x", "y", "stroke_id"} mappings

        Returns:
            Result with the best template's name and a score in (0, 1], or
            the "no match" result with score 0
        """
        t_start = time.perf_counter()

        try:
            samples = as_points(points)
            if not samples:
                logger.debug("Empty gesture, no match")
                return Result.no_match(_elapsed_ms(t_start))

            candidate = PointCloud("", samples)
            if not candidate.is_valid():
                raise InvalidCloudError(f"candidate cloud is malformed: {candidate.statistics()}")
        except GestureError as e:
            logger.warning("Rejected gesture input: %s", e)
            return Result.no_match(_elapsed_ms(t_start))

        templates = self.templates()

        best_index = -1
        best_distance = math.inf
        for index, template in enumerate(templates):
            distance = cloud_match(candidate, template, best_distance)
            if distance < best_distance:
                best_distance = distance
                best_index = index

        elapsed = _elapsed_ms(t_start)

        if best_index == -1:
            logger.debug("No template produced a finite distance")
            return Result.no_match(elapsed)

        name = templates[best_index].name
        score = 1.0 / best_distance if best_distance > 1.0 else 1.0
        result = Result(name=name, score=score, time_ms=elapsed)
        logger.debug("Recognized %s (distance %.4f)", result, best_distance)
        return result

    def add_gesture(self, name: str, points: Iterable[Any]) -> int:
        """
        Store a new template under name, keeping existing variants.

        Returns:
            Number of stored templates that now share this name

        Raises:
            GestureError: the points cannot be normalized into a valid cloud
        """
        cloud = PointCloud(name, as_points(points))
        if not cloud.is_valid():
            raise InvalidCloudError(f"cannot store malformed cloud: {cloud.statistics()}")

        with self._lock:
            self._templates.append(StoredTemplate(cloud, False))
            count = sum(1 for stored in self._templates if stored.cloud.name == name)

        logger.info("Added gesture '%s' (%d variants total)", name, count)
        return count

    def delete_gesture(self, name: str) -> int:
        """Remove every template called name; returns how many were removed."""
        with self._lock:
            kept = [stored for stored in self._templates if stored.cloud.name != name]
            deleted = len(self._templates) - len(kept)
            self._templates = kept

        logger.info("Deleted %d variants of gesture '%s'", deleted, name)
        return deleted

    def delete_gesture_by_index(self, index: int) -> Optional[str]:
        """Remove the template at index; returns its name, or None when out of range."""
        with self._lock:
            if not 0 <= index < len(self._templates):
                return None
            removed = self._templates.pop(index)

        logger.info("Deleted gesture '%s' at index %d", removed.cloud.name, index)
        return removed.cloud.name

    def reset_to_defaults(self) -> int:
        """Replace the store with the built-in set; returns how many custom templates were dropped."""
        with self._lock:
            custom = sum(1 for stored in self._templates if not stored.is_default)
            self._templates = self._default_templates()

        logger.info("Reset to default gestures, removed %d custom gestures", custom)
        return custom

    def templates(self) -> Tuple[PointCloud, ...]:
        """Snapshot of the stored clouds in store order."""
        with self._lock:
            return tuple(stored.cloud for stored in self._templates)

    def gesture_names(self) -> List[str]:
        return [cloud.name for cloud in self.templates()]

    def gesture_count(self) -> int:
        with self._lock:
            return len(self._templates)

    def metadata(self) -> List[TemplateInfo]:
        """Per-template gallery rows in store order."""
        with self._lock:
            stored_templates = list(self._templates)
        return [
            TemplateInfo(
                index=index,
                name=stored.cloud.name,
                is_default=stored.is_default,
                point_count=stored.cloud.size(),
                is_valid=stored.cloud.is_valid(),
            )
            for index, stored in enumerate(stored_templates)
        ]

    def statistics(self) -> str:
        clouds = self.templates()
        lines = [f"Recognizer: {len(clouds)} gestures"]
        lines.extend(f"  [{index}] {cloud.statistics()}" for index, cloud in enumerate(clouds))
        return "\n".join(lines)
