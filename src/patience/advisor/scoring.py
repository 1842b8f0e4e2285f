"""Heuristic move scoring.

A move's score is a sum of fixed contributions; the reason string lists
the label of each contribution in the order it was applied. Higher is
better. There is no lookahead.
"""

from __future__ import annotations

from dataclasses import dataclass

from patience.rules.engine import RulesEngine
from patience.simulation.moves import (
    DrawStock,
    Move,
    RecycleWaste,
    TableauStackToTableau,
    TableauToFoundation,
    TableauToTableau,
    WasteToFoundation,
    WasteToTableau,
    is_sentinel,
)
from patience.simulation.state import GameState

FOUNDATION_PROGRESS_WEIGHT = 0.2
LOW_FOUNDATION_RANKS = ("ace", "2")


@dataclass(frozen=True)
class ScoredMove:
    """Score and explanation for one candidate move."""

    score: float
    reason: str


class _Tally:
    def __init__(self) -> None:
        self.score: float = 0
        self.parts: list[str] = []

    def add(self, points: float, label: str) -> None:
        self.score += points
        self.parts.append(label)


def _is_face_down(column: tuple, idx: int) -> bool:
    return 0 <= idx < len(column) and not column[idx].face_up


def score_move(move: Move, state: GameState, engine: RulesEngine) -> ScoredMove:
    """Score a candidate move against the state it would be applied to."""
    tally = _Tally()
    tableaus = state.tableaus

    if isinstance(move, TableauToFoundation):
        src = tableaus[move.from_column]
        card = src[move.from_index] if 0 <= move.from_index < len(src) else None
        tally.add(50, "Progress foundation")
        if card is not None and engine.canonical_rank(card.rank) in LOW_FOUNDATION_RANKS:
            tally.add(10, "Low rank foundation build")
        if len(src) == 1:
            tally.add(12, "Free column")
        if len(src) > 1 and _is_face_down(src, len(src) - 2):
            tally.add(25, "Uncovers face-down card")

    elif isinstance(move, WasteToFoundation):
        tally.add(45, "Waste to foundation")
        if state.waste and engine.canonical_rank(state.waste[-1].rank) == "ace":
            tally.add(15, "Ace advancement")

    elif isinstance(move, TableauToTableau):
        src = tableaus[move.from_column]
        if len(src) > 1 and _is_face_down(src, len(src) - 2):
            tally.add(30, "Uncovers face-down card")
        if len(src) == 1:
            tally.add(18, "Creates empty column (King slot)")
        tally.add(8, "Reposition for future sequence")

    elif isinstance(move, TableauStackToTableau):
        src = tableaus[move.from_column]
        if move.from_index > 0 and _is_face_down(src, move.from_index - 1):
            tally.add(35, "Uncovers face-down card beneath stack")
        if move.from_index == 0:
            tally.add(22, "Frees entire column")
        tally.add(min(25, max(move.length, 1) * 3), "Moves multi-card sequence")
        tally.add(10, "Improves sequencing potential")

    elif isinstance(move, WasteToTableau):
        tally.add(12, "Deploy waste card")

    elif isinstance(move, DrawStock):
        tally.add(5, "Reveal new card")

    elif isinstance(move, RecycleWaste):
        tally.add(4, "Recycle waste to restock")

    elif not is_sentinel(move):
        raise TypeError(f"Unknown move: {move!r}")

    tally.add(state.foundation_card_count() * FOUNDATION_PROGRESS_WEIGHT, "Foundation progress weight")

    return ScoredMove(score=tally.score, reason="; ".join(tally.parts))
