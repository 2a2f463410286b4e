"""
Multi-stroke Gesture Recognizer

Classifies freehand multi-stroke drawings against a library of named templates
using normalized 32-point clouds, per-cloud lookup tables and lower-bound
pruned greedy cloud matching.
"""

__version__ = "1.0.0"

from .types import (
    NO_MATCH,
    Point,
    Result,
    TemplateInfo,
    GestureError,
    EmptyGestureError,
    DegenerateGestureError,
    InvalidCloudError,
    InvalidSampleError,
)
from .config import load_config, Cfg, RecognizerConfig
from .pointcloud import PointCloud
from .matching import cloud_distance, cloud_match, compute_lower_bound
from .recognizer import Recognizer

__all__ = [
    "NO_MATCH",
    "Point",
    "Result",
    "TemplateInfo",
    "GestureError",
    "EmptyGestureError",
    "DegenerateGestureError",
    "InvalidCloudError",
    "InvalidSampleError",
    "load_config",
    "Cfg",
    "RecognizerConfig",
    "PointCloud",
    "cloud_distance",
    "cloud_match",
    "compute_lower_bound",
    "Recognizer",
]
