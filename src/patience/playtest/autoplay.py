"""Automated play by repeatedly applying the advisor's suggestion."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from patience.playtest.session import GameSession
from patience.playtest.stuck import StuckDetector
from patience.simulation.moves import GameWon, Move, NoMove
from patience.simulation.state import GameState
from patience.simulation.validation import find_invariant_violations

logger = logging.getLogger(__name__)

OUTCOME_WON = "won"
OUTCOME_NO_MOVE = "no-move"
OUTCOME_STUCK = "stuck"
OUTCOME_MAX_STEPS = "max-steps"


@dataclass(frozen=True)
class AutoplayResult:
    """Result of an automated game."""

    outcome: str
    steps: int
    moves: tuple[Move, ...]
    final_state: GameState
    stuck_reason: Optional[str] = None

    @property
    def won(self) -> bool:
        return self.outcome == OUTCOME_WON


def autoplay(
    session: GameSession,
    max_steps: int = 1000,
    check_invariants: bool = False,
    on_step: Optional[Callable[[Move, str], None]] = None,
) -> AutoplayResult:
    """Play the session's game with the advisor until it ends.

    The advisor has no lookahead and readily shuffles a lone king between
    empty columns, so most dealt games end as OUTCOME_STUCK with
    "position repeated". A low win rate reflects the heuristic, not an
    engine fault.

    Args:
        session: Session to play (its state is advanced)
        max_steps: Step limit
        check_invariants: Verify structural invariants after every step
        on_step: Called with each applied move and its explanation

    Returns:
        AutoplayResult describing how the game ended
    """
    detector = StuckDetector(max_steps=max_steps)
    detector.start(session.state)
    moves: List[Move] = []
    outcome = OUTCOME_MAX_STEPS
    stuck_reason: Optional[str] = None

    while max_steps > 0:
        suggestion = session.suggest_move()
        if isinstance(suggestion.move, GameWon):
            outcome = OUTCOME_WON
            break
        if isinstance(suggestion.move, NoMove):
            outcome = OUTCOME_NO_MOVE
            break

        if not session.apply_suggested_move():
            logger.warning(f"Suggested move had no effect: {suggestion.move.describe()}")
            outcome = OUTCOME_STUCK
            stuck_reason = "suggested move was rejected"
            break

        moves.append(suggestion.move)
        if on_step is not None:
            on_step(suggestion.move, suggestion.message)

        if check_invariants:
            problems = find_invariant_violations(session.state, session.engine)
            if problems:
                raise RuntimeError(f"Invariants broken after {suggestion.move.describe()}: {problems}")

        stuck_reason = detector.record(session.state)
        if stuck_reason is not None:
            outcome = OUTCOME_STUCK if stuck_reason == "position repeated" else OUTCOME_MAX_STEPS
            break

    if outcome == OUTCOME_MAX_STEPS and session.check_win():
        outcome = OUTCOME_WON

    logger.info(f"Autoplay finished: {outcome} after {len(moves)} moves")
    return AutoplayResult(
        outcome=outcome,
        steps=len(moves),
        moves=tuple(moves),
        final_state=session.state,
        stuck_reason=stuck_reason,
    )
