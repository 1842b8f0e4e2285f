"""Session, autoplay and terminal display for patience games."""

from patience.playtest.stuck import StuckDetector
from patience.playtest.display import StateRenderer, MovePresenter, format_card
from patience.playtest.session import GameSession, SessionConfig
from patience.playtest.autoplay import AutoplayResult, autoplay

__all__ = [
    "StuckDetector",
    "StateRenderer",
    "MovePresenter",
    "format_card",
    "GameSession",
    "SessionConfig",
    "AutoplayResult",
    "autoplay",
]
