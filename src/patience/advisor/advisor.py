"""Move advisor - picks the best scoring move and explains it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from patience.advisor.scoring import ScoredMove, score_move
from patience.rules.engine import RulesEngine
from patience.simulation.movegen import enumerate_moves
from patience.simulation.moves import (
    DrawStock,
    GameWon,
    Move,
    NoMove,
    RecycleWaste,
    TableauStackToTableau,
    TableauToFoundation,
    TableauToTableau,
    WasteToFoundation,
    WasteToTableau,
)
from patience.simulation.state import Card, GameState

logger = logging.getLogger(__name__)

# How many candidates the debug log lists
LOG_PREVIEW = 5


@dataclass(frozen=True)
class Suggestion:
    """A suggested move and the sentence explaining it."""

    move: Move
    message: str


def rank_moves(state: GameState, engine: RulesEngine) -> List[Tuple[Move, ScoredMove]]:
    """Score every legal move, best first.

    The sort is stable, so equal scores keep enumeration order.
    """
    moves = enumerate_moves(state, engine)
    scored = [(move, score_move(move, state, engine)) for move in moves]
    scored.sort(key=lambda pair: pair[1].score, reverse=True)
    return scored


def suggest_best_move(state: GameState, engine: RulesEngine) -> Move:
    """Recommend a single next move.

    Returns GameWon when the foundations are complete and NoMove when
    nothing is legal. Ties go to the earliest enumerated move.
    """
    if engine.is_game_won(state.foundations):
        logger.debug("AI: all foundation piles complete")
        return GameWon()

    ranked = rank_moves(state, engine)
    logger.debug(f"AI: enumerated {len(ranked)} moves")
    if not ranked:
        return NoMove()

    if logger.isEnabledFor(logging.DEBUG):
        preview = [
            {**move.describe(), "score": round(scored.score, 2), "reason": scored.reason}
            for move, scored in ranked[:LOG_PREVIEW]
        ]
        logger.debug(f"AI: top moves {preview}")

    best, best_score = ranked[0]
    logger.debug(f"AI: selected {best.describe()} score={best_score.score:.2f} ({best_score.reason})")
    return best


def describe_card(card: Optional[Card], engine: RulesEngine) -> str:
    """Short card description with a color hint, e.g. "red 7"."""
    if card is None:
        return "card"
    color = engine.color_of(card.suit)
    rank = engine.canonical_rank(card.rank) or str(card.rank)
    if color is None:
        return rank
    return f"{color.value} {rank}"


def _tableau_card(state: GameState, column: int, index: int) -> Optional[Card]:
    if not 0 <= column < len(state.tableaus):
        return None
    pile = state.tableaus[column]
    if not 0 <= index < len(pile):
        return None
    return pile[index]


def explain_move(move: Optional[Move], state: GameState, engine: RulesEngine) -> str:
    """Render a fixed sentence for a move, for display only."""
    if move is None:
        return "No move suggested."

    waste_top = state.waste[-1] if state.waste else None
    alternate = "alternate red/black" if engine.config.tableau.alternate_colors else "any color"
    direction = engine.config.tableau.build_direction.value

    if isinstance(move, TableauToFoundation):
        card = _tableau_card(state, move.from_column, move.from_index)
        return (
            f"Move {describe_card(card, engine)} from column {move.from_column + 1} "
            f"to foundation pile {move.foundation_index + 1} - building up by suit."
        )
    elif isinstance(move, WasteToFoundation):
        return (
            f"Move {describe_card(waste_top, engine)} from the waste pile "
            f"to foundation pile {move.foundation_index + 1} - building up by suit."
        )
    elif isinstance(move, TableauToTableau):
        card = _tableau_card(state, move.from_column, move.from_index)
        return (
            f"Move {describe_card(card, engine)} from column {move.from_column + 1} "
            f"to column {move.to_column + 1} - {alternate}, {direction}."
        )
    elif isinstance(move, TableauStackToTableau):
        card = _tableau_card(state, move.from_column, move.from_index)
        return (
            f"Move {move.length}-card stack starting with {describe_card(card, engine)} "
            f"from column {move.from_column + 1} to column {move.to_column + 1} - {alternate}."
        )
    elif isinstance(move, WasteToTableau):
        return (
            f"Move {describe_card(waste_top, engine)} from the waste pile "
            f"to column {move.to_column + 1} - {alternate}, {direction}."
        )
    elif isinstance(move, DrawStock):
        return "Draw from the stock pile to reveal a new card."
    elif isinstance(move, RecycleWaste):
        return "Turn the waste pile back over to restock the stock pile."
    elif isinstance(move, GameWon):
        return "Congratulations! All cards are in the foundation piles!"
    elif isinstance(move, NoMove):
        return "No legal moves available. Start a new game."
    raise TypeError(f"Unknown move: {move!r}")


def get_suggestion(state: GameState, engine: RulesEngine) -> Suggestion:
    """Best move plus its explanation."""
    move = suggest_best_move(state, engine)
    message = explain_move(move, state, engine)
    logger.debug(f"AI: explanation {message!r}")
    return Suggestion(move=move, message=message)
