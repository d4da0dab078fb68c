"""AI package: alpha-beta search, difficulty service and Qt worker bridge.

The Qt bridge is imported lazily (``othello.engine.qt_bridge``) so the
search can run without PyQt6 being loaded.
"""

from othello.engine.ai_service import (
    DIFFICULTY_PROFILES,
    AIAnalysis,
    AIService,
    MoveRationale,
    MoveRecommendation,
    SearchProfile,
)
from othello.engine.alpha_beta import AlphaBetaSearch
from othello.engine.search import CancelCheck, IRules, SearchResult

__all__ = [
    "AIAnalysis",
    "AIService",
    "AlphaBetaSearch",
    "CancelCheck",
    "DIFFICULTY_PROFILES",
    "IRules",
    "MoveRationale",
    "MoveRecommendation",
    "SearchProfile",
    "SearchResult",
]
