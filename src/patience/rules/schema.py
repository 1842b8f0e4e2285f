"""Rule configuration types and enumerations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class Suit(Enum):
    """Card suits, valued by the tokens cards carry."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class Color(Enum):
    """Suit colors."""

    RED = "red"
    BLACK = "black"


class BuildDirection(Enum):
    """Direction a pile is built in."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


# Canonical rank tokens, lowest first
RANK_TOKENS: tuple[str, ...] = (
    "ace", "2", "3", "4", "5", "6", "7", "8", "9", "10", "jack", "queen", "king",
)

AllowOnEmpty = Union[bool, str]


def _freeze(mapping: Mapping) -> Mapping:
    """Return a read-only copy of a mapping."""
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class TableauRules:
    """Placement policy for the seven tableau columns."""

    allow_on_empty: AllowOnEmpty = "king"  # False, True (any card) or a rank token
    alternate_colors: bool = True
    build_direction: BuildDirection = BuildDirection.DESCENDING


@dataclass(frozen=True)
class FoundationRules:
    """Placement policy for the foundation piles."""

    start: str = "ace"
    match_suit: bool = True
    build_direction: BuildDirection = BuildDirection.ASCENDING


@dataclass(frozen=True)
class StockRules:
    """Stock draw policy."""

    draw_count: int = 1


@dataclass(frozen=True)
class WinCondition:
    """Every one of `foundation_piles` foundations holds `cards_per_pile` cards."""

    foundation_piles: int = 4
    cards_per_pile: int = 13


@dataclass(frozen=True)
class RuleConfig:
    """Complete rule set, loaded once and never mutated by play."""

    rank_values: Mapping[str, int]
    rank_aliases: Mapping[str, str]
    suit_colors: Mapping[str, Color]
    tableau: TableauRules = field(default_factory=TableauRules)
    foundation: FoundationRules = field(default_factory=FoundationRules)
    stock: StockRules = field(default_factory=StockRules)
    win_condition: WinCondition = field(default_factory=WinCondition)
    name: str = "klondike"

    def __post_init__(self):
        """Freeze mappings for immutability."""
        object.__setattr__(self, "rank_values", _freeze(self.rank_values))
        object.__setattr__(self, "rank_aliases", _freeze(self.rank_aliases))
        object.__setattr__(self, "suit_colors", _freeze(self.suit_colors))

    def copy_with(self, **changes) -> "RuleConfig":  # type: ignore
        """Create a new RuleConfig with changes."""
        current = {
            "rank_values": self.rank_values,
            "rank_aliases": self.rank_aliases,
            "suit_colors": self.suit_colors,
            "tableau": self.tableau,
            "foundation": self.foundation,
            "stock": self.stock,
            "win_condition": self.win_condition,
            "name": self.name,
        }
        current.update(changes)
        return RuleConfig(**current)
