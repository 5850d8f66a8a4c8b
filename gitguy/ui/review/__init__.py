# gitguy/ui/review/__init__.py
# Interactive ref selection, diff preview & PR generation session

from .review_display import ReviewSession
from .review_input import ReviewInputHandler
from .review_renderer import ReviewRenderer
from .review_state import (
    DiffPreview,
    PendingAction,
    RefSide,
    ReviewScreen,
    ReviewState,
    ReviewStateManager,
)

__all__ = [
    "ReviewSession",
    "ReviewInputHandler",
    "ReviewRenderer",
    "DiffPreview",
    "PendingAction",
    "RefSide",
    "ReviewScreen",
    "ReviewState",
    "ReviewStateManager",
]
