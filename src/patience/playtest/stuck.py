"""Stuck detection for automated play."""

from __future__ import annotations

from typing import Optional

from patience.simulation.state import GameState


class StuckDetector:
    """Detects games that can no longer make progress.

    The advisor is deterministic, so reaching a position a second time
    means it will cycle forever. The usual cycle is a lone king moved
    between empty columns: the one-card stack move scores 35 every time
    and outranks anything that makes progress. Without lookahead this is
    expected, and most advisor-played deals end "stuck" rather than won.
    """

    def __init__(self, max_steps: int = 1000) -> None:
        self.max_steps = max_steps
        self.steps = 0
        self._seen: set[GameState] = set()

    def start(self, state: GameState) -> None:
        """Forget everything and remember the starting position."""
        self.steps = 0
        self._seen = {state}

    def record(self, state: GameState) -> Optional[str]:
        """Record the position reached by one step.

        Returns:
            A reason string if play should stop, else None
        """
        self.steps += 1
        if state in self._seen:
            return "position repeated"
        self._seen.add(state)
        if self.steps >= self.max_steps:
            return f"step limit reached ({self.max_steps})"
        return None
