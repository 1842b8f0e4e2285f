"""Terminal display for game state and ranked moves."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Sequence, Tuple

from patience.advisor.scoring import ScoredMove
from patience.simulation.moves import Move
from patience.simulation.state import Card, GameState


# Unicode card symbols
SUIT_SYMBOLS = {
    "hearts": "♥",
    "diamonds": "♦",
    "clubs": "♣",
    "spades": "♠",
}

RANK_SHORT = {"ace": "A", "jack": "J", "queen": "Q", "king": "K"}

FACE_DOWN = "##"
EMPTY = "--"


def format_card(card: Optional[Card], reveal: bool = False) -> str:
    """Format card with unicode suit symbol; face-down cards are hidden."""
    if card is None:
        return EMPTY
    if not card.face_up and not reveal:
        return FACE_DOWN
    rank = str(card.rank)
    rank = RANK_SHORT.get(rank.lower(), rank)
    suit = SUIT_SYMBOLS.get(str(card.suit).lower(), "?")
    return f"{rank}{suit}"


class StateRenderer:
    """Renders a game state as text."""

    def render(self, state: GameState, debug: bool = False) -> str:
        """Render stock, waste, foundations and the tableau columns.

        With debug, face-down cards are shown as well.
        """
        lines: list[str] = []

        stock = f"Stock: {len(state.stock)} cards"
        waste = f"Waste: {format_card(state.waste[-1]) if state.waste else EMPTY}"
        foundations = "  ".join(
            format_card(pile[-1]) if pile else EMPTY
            for pile in state.foundations
        )
        lines.append(f"{stock} | {waste} | Foundations: {foundations}")
        lines.append("")

        header = "  ".join(f"{i + 1:>4}" for i in range(len(state.tableaus)))
        lines.append(header)
        for row in zip_longest(*state.tableaus):
            cells = [
                f"{format_card(card, reveal=debug) if card is not None else '':>4}"
                for card in row
            ]
            lines.append("  ".join(cells).rstrip())

        return "\n".join(lines)


class MovePresenter:
    """Presents ranked candidate moves."""

    def present(self, ranked: Sequence[Tuple[Move, ScoredMove]], limit: int = 5) -> str:
        if not ranked:
            return "No legal moves available."

        lines: list[str] = []
        for i, (move, scored) in enumerate(ranked[:limit]):
            lines.append(f"[{i + 1}] {move.move_type.value:<26} {scored.score:6.1f}  {scored.reason}")
        if len(ranked) > limit:
            lines.append(f"... and {len(ranked) - limit} more")
        return "\n".join(lines)
