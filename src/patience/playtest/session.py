"""Game session management.

A session owns the current GameState and the last suggestion, and is
passed explicitly to whatever drives play (a CLI, a UI, autoplay).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from patience.advisor.advisor import Suggestion, get_suggestion
from patience.rules.defaults import create_klondike_rules
from patience.rules.engine import RulesEngine
from patience.rules.schema import RuleConfig
from patience.simulation.deal import deal_game
from patience.simulation.moves import Move
from patience.simulation.state import GameState
from patience.simulation import transitions

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a game session."""

    seed: Optional[int] = None
    rules: RuleConfig = field(default_factory=create_klondike_rules)

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


class GameSession:
    """Holds the current game and routes every change through the engine."""

    def __init__(self, config: SessionConfig, state: Optional[GameState] = None):
        """Initialize session, dealing a game unless a state is supplied."""
        self.config = config
        self.engine = RulesEngine(config.rules)
        self.seed = config.seed
        self.rng = random.Random(self.seed)
        self.current_suggestion: Optional[Move] = None
        self.state: GameState = state if state is not None else deal_game(rng=self.rng)

    def new_game(self, seed: Optional[int] = None) -> GameState:
        """Discard the current game and deal a fresh one."""
        if seed is not None:
            self.seed = seed
            self.rng = random.Random(seed)
        logger.info("New game started")
        self.state = deal_game(rng=self.rng)
        self.current_suggestion = None
        return self.state

    def _commit(self, new_state: GameState) -> bool:
        """Adopt a transition result; True if anything changed."""
        self.current_suggestion = None
        if new_state is self.state:
            return False
        self.state = new_state
        return True

    # --- User actions ---

    def move_cards(self, from_column: int, from_index: int, to_column: int) -> bool:
        return self._commit(transitions.move_cards(self.state, self.engine, from_column, from_index, to_column))

    def draw_one(self) -> bool:
        return self._commit(transitions.draw_one(self.state, self.engine))

    def move_waste_to_tableau(self, to_column: int) -> bool:
        return self._commit(transitions.move_waste_to_tableau(self.state, self.engine, to_column))

    def move_to_foundation(self, from_column: int, from_index: int, foundation_index: int) -> bool:
        return self._commit(
            transitions.move_to_foundation(self.state, self.engine, from_column, from_index, foundation_index)
        )

    def move_waste_to_foundation(self, foundation_index: int) -> bool:
        return self._commit(transitions.move_waste_to_foundation(self.state, self.engine, foundation_index))

    # --- Hints ---

    def suggest_move(self) -> Suggestion:
        """Ask the advisor for the next move and remember it."""
        suggestion = get_suggestion(self.state, self.engine)
        logger.debug(f"Suggestion generated: {suggestion.move.describe()} {suggestion.message!r}")
        self.current_suggestion = suggestion.move
        return suggestion

    def clear_suggestion(self) -> None:
        self.current_suggestion = None

    def apply_suggested_move(self) -> bool:
        """Play the cached suggestion, if any.

        Returns:
            True if the state changed. The suggestion is cleared either way.
        """
        move = self.current_suggestion
        if move is None:
            return False
        return self._commit(transitions.apply_move(self.state, self.engine, move))

    def check_win(self) -> bool:
        return self.engine.is_game_won(self.state.foundations)
