"""Rules engine - placement, drag, stock and win predicates.

All predicates are pure and total: malformed input (a missing card or an
unknown rank token) makes them return False rather than raise. A suit is
only consulted by the rules that use it: color alternation needs both
colors known, suit matching compares the raw suit tokens.
"""

from __future__ import annotations

from typing import Optional, Sequence

from patience.rules.schema import BuildDirection, Color, RuleConfig
from patience.simulation.state import Card

Pile = Sequence[Card]


class RulesEngine:
    """Answers "is this legal?" for one rule configuration."""

    def __init__(self, config: RuleConfig) -> None:
        self.config = config
        self._values_to_tokens = {v: k for k, v in config.rank_values.items()}

    # --- Lookups ---

    def canonical_rank(self, rank: object) -> Optional[str]:
        """Resolve a rank token or alias to its canonical token."""
        if rank is None or isinstance(rank, bool):
            return None
        if isinstance(rank, int):
            return self._values_to_tokens.get(rank)
        key = str(rank).strip().lower()
        if key in self.config.rank_values:
            return key
        alias = self.config.rank_aliases.get(key)
        if alias is not None and alias in self.config.rank_values:
            return alias
        return None

    def rank_value(self, rank: object) -> Optional[int]:
        """Numeric value of a rank, or None when unrecognized."""
        token = self.canonical_rank(rank)
        if token is None:
            return None
        return self.config.rank_values[token]

    def color_of(self, suit: object) -> Optional[Color]:
        if suit is None:
            return None
        return self.config.suit_colors.get(str(suit).strip().lower())

    def _step_matches(self, card_value: int, top_value: int, direction: BuildDirection) -> bool:
        if direction == BuildDirection.DESCENDING:
            return card_value == top_value - 1
        if direction == BuildDirection.ASCENDING:
            return card_value == top_value + 1
        return False

    # --- Placement ---

    def can_place_on_tableau(self, card: Optional[Card], pile: Optional[Pile]) -> bool:
        """Can `card` (the bottom of a carried run) go on a tableau column?"""
        if card is None:
            return False
        card_value = self.rank_value(card.rank)
        if card_value is None:
            return False

        rules = self.config.tableau
        if not pile:
            allow = rules.allow_on_empty
            if allow is True:
                return True
            if isinstance(allow, str):
                return card_value == self.rank_value(allow)
            return False

        top = pile[-1]
        if top is None:
            return False
        top_value = self.rank_value(top.rank)
        if top_value is None:
            return False

        if rules.alternate_colors:
            card_color = self.color_of(card.suit)
            top_color = self.color_of(top.suit)
            # Unknown suits cannot prove an alternation
            if card_color is None or top_color is None or card_color == top_color:
                return False

        return self._step_matches(card_value, top_value, rules.build_direction)

    def can_place_on_foundation(self, card: Optional[Card], pile: Optional[Pile]) -> bool:
        """Can `card` go on a foundation pile?"""
        if card is None:
            return False
        card_value = self.rank_value(card.rank)
        if card_value is None:
            return False

        rules = self.config.foundation
        if not pile:
            return card_value == self.rank_value(rules.start)

        top = pile[-1]
        if top is None:
            return False
        top_value = self.rank_value(top.rank)
        if top_value is None:
            return False

        if rules.match_suit and top.suit != card.suit:
            return False

        return self._step_matches(card_value, top_value, rules.build_direction)

    def can_place(self, card: Optional[Card], pile: Optional[Pile], is_foundation: bool = False) -> bool:
        """Dispatch to the foundation or tableau placement rule."""
        if is_foundation:
            return self.can_place_on_foundation(card, pile)
        return self.can_place_on_tableau(card, pile)

    def find_foundation_for(self, card: Optional[Card], foundations: Sequence[Pile]) -> Optional[int]:
        """Index of the first foundation accepting a face-up card, else None."""
        if not self.can_drag_card(card):
            return None
        for idx, pile in enumerate(foundations or ()):
            if self.can_place_on_foundation(card, pile):
                return idx
        return None

    # --- Dragging ---

    def can_drag_card(self, card: Optional[Card]) -> bool:
        return card is not None and card.face_up is True

    def can_drag_stack_from(self, column: Optional[Pile], start_index: int) -> bool:
        """Is column[start_index:] a run that may be picked up as a unit?

        The start card and every card up to the second-to-last must be face-up,
        and each consecutive pair must itself be a legal tableau placement.
        """
        if not column or not isinstance(start_index, int) or isinstance(start_index, bool):
            return False
        if start_index < 0 or start_index >= len(column):
            return False
        if not self.can_drag_card(column[start_index]):
            return False

        for i in range(start_index, len(column) - 1):
            current = column[i]
            if not self.can_drag_card(current):
                return False
            if not self.can_place_on_tableau(column[i + 1], (current,)):
                return False
        return True

    def can_drag_from_waste(self, waste: Optional[Pile]) -> bool:
        if not waste:
            return False
        return self.can_drag_card(waste[-1])

    # --- Stock ---

    def can_draw_from_stock(self, stock: Optional[Pile]) -> bool:
        if stock is None:
            return False
        return len(stock) >= self.config.stock.draw_count

    def can_recycle_waste(self, stock: Optional[Pile], waste: Optional[Pile]) -> bool:
        return not stock and bool(waste)

    # --- Win ---

    def is_game_won(self, foundations: Optional[Sequence[Pile]]) -> bool:
        win = self.config.win_condition
        if foundations is None or len(foundations) != win.foundation_piles:
            return False
        return all(
            pile is not None and len(pile) == win.cards_per_pile
            for pile in foundations
        )
