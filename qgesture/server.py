"""
HTTP adapter exposing the recognizer to a drawing front end.

The front end captures strokes and renders results; this layer only converts
JSON payloads to engine calls and back.
"""
import logging
from dataclasses import asdict
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .config import Cfg, load_config
from .recognizer import Recognizer
from .types import GestureError, Point

logger = logging.getLogger(__name__)


# Request/Response models
class PointModel(BaseModel):
    x: float
    y: float
    stroke_id: int = 1


class RecognizeRequest(BaseModel):
    points: List[PointModel]


class RecognizeResponse(BaseModel):
    name: str
    score: float
    time_ms: float
    confidence: str
    recognized: bool
    high_confidence: bool


class AddGestureRequest(BaseModel):
    name: str
    points: List[PointModel]


class AddGestureResponse(BaseModel):
    name: str
    variants: int


class DeleteGestureResponse(BaseModel):
    name: str
    deleted: int


class DeleteByIndexResponse(BaseModel):
    index: int
    name: str


class ResetResponse(BaseModel):
    removed: int
    count: int


class TemplateInfoModel(BaseModel):
    index: int
    name: str
    is_default: bool
    point_count: int
    is_valid: bool


def _to_points(points: List[PointModel]) -> List[Point]:
    return [Point(p.x, p.y, p.stroke_id) for p in points]


def create_app(cfg: Optional[Cfg] = None, recognizer: Optional[Recognizer] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        cfg: Configuration; loaded with load_config() when None
        recognizer: Recognizer to serve; created from cfg.recognizer when None
    """
    if cfg is None:
        cfg = load_config()
    if recognizer is None:
        recognizer = Recognizer(cfg.recognizer)

    high_confidence = cfg.recognizer.high_confidence_threshold

    app = FastAPI(
        title=cfg.server.title,
        description="Multi-stroke point-cloud gesture recognition",
        version="1.0.0",
    )
    app.state.recognizer = recognizer

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        """Health check endpoint"""
        return {
            "status": "online",
            "service": cfg.server.title,
            "gesture_count": recognizer.gesture_count(),
        }

    @app.post("/recognize", response_model=RecognizeResponse)
    def recognize(request: RecognizeRequest):
        """Classify the strokes drawn so far"""
        result = recognizer.recognize(_to_points(request.points))
        return RecognizeResponse(
            name=result.name,
            score=result.score,
            time_ms=result.time_ms,
            confidence=result.confidence_percentage,
            recognized=result.is_recognized,
            high_confidence=result.is_high_confidence(high_confidence),
        )

    @app.get("/gestures", response_model=List[TemplateInfoModel])
    def list_gestures():
        """Gallery of stored templates"""
        return [TemplateInfoModel(**asdict(info)) for info in recognizer.metadata()]

    @app.post("/gestures", response_model=AddGestureResponse)
    def add_gesture(request: AddGestureRequest):
        """Train a new variant under a name"""
        name = request.name.strip()
        if not name:
            raise HTTPException(status_code=400, detail="Gesture name must not be empty")

        try:
            variants = recognizer.add_gesture(name, _to_points(request.points))
        except GestureError as e:
            logger.warning(f"⚠️ Rejected training input for '{name}': {e}")
            raise HTTPException(status_code=400, detail=str(e))

        return AddGestureResponse(name=name, variants=variants)

    @app.post("/gestures/reset", response_model=ResetResponse)
    def reset_gestures():
        """Drop all custom gestures and rebuild the built-in set"""
        removed = recognizer.reset_to_defaults()
        return ResetResponse(removed=removed, count=recognizer.gesture_count())

    @app.delete("/gestures/index/{index}", response_model=DeleteByIndexResponse)
    def delete_gesture_by_index(index: int):
        """Delete one stored template by its gallery position"""
        name = recognizer.delete_gesture_by_index(index)
        if name is None:
            raise HTTPException(status_code=404, detail=f"No gesture at index {index}")
        return DeleteByIndexResponse(index=index, name=name)

    @app.delete("/gestures/{name}", response_model=DeleteGestureResponse)
    def delete_gesture(name: str):
        """Delete every variant of a gesture"""
        deleted = recognizer.delete_gesture(name)
        return DeleteGestureResponse(name=name, deleted=deleted)

    logger.info(f"✅ {cfg.server.title} app ready with {recognizer.gesture_count()} gestures")
    return app
