"""Immutable game state representation."""

from dataclasses import dataclass

TABLEAU_COLUMNS = 7
FOUNDATION_PILES = 4
DECK_SIZE = 52


@dataclass(frozen=True)
class Card:
    """Immutable playing card.

    Position is never stored on the card: a card's index is its place in
    the pile tuple that holds it.
    """

    id: int
    suit: str
    rank: str
    face_up: bool = False

    def flipped(self, face_up: bool) -> "Card":
        """Copy of this card facing the given way."""
        if self.face_up == face_up:
            return self
        return Card(id=self.id, suit=self.suit, rank=self.rank, face_up=face_up)

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a deal in progress.

    All piles are tuples; the last element is the top card.
    """

    tableaus: tuple[tuple[Card, ...], ...]
    foundations: tuple[tuple[Card, ...], ...]
    stock: tuple[Card, ...]
    waste: tuple[Card, ...]

    def copy_with(self, **changes) -> "GameState":  # type: ignore
        """Create a new state with specified changes."""
        current = {
            "tableaus": self.tableaus,
            "foundations": self.foundations,
            "stock": self.stock,
            "waste": self.waste,
        }
        current.update(changes)
        return GameState(**current)

    def all_cards(self) -> tuple[Card, ...]:
        """Every card in the state, pile by pile."""
        cards: list[Card] = []
        for column in self.tableaus:
            cards.extend(column)
        for pile in self.foundations:
            cards.extend(pile)
        cards.extend(self.stock)
        cards.extend(self.waste)
        return tuple(cards)

    def card_ids(self) -> list[int]:
        """Sorted ids of every card in the state."""
        return sorted(card.id for card in self.all_cards())

    def foundation_card_count(self) -> int:
        return sum(len(pile) for pile in self.foundations)


def replace_pile(piles: tuple[tuple[Card, ...], ...], idx: int, new_pile: tuple[Card, ...]) -> tuple[tuple[Card, ...], ...]:
    """Return new piles tuple with the pile at idx replaced."""
    return tuple(
        new_pile if i == idx else p
        for i, p in enumerate(piles)
    )


def empty_state() -> GameState:
    """State with no cards anywhere (useful for hand-built positions)."""
    return GameState(
        tableaus=tuple(() for _ in range(TABLEAU_COLUMNS)),
        foundations=tuple(() for _ in range(FOUNDATION_PILES)),
        stock=(),
        waste=(),
    )
