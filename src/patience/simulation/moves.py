"""Move types.

Every move is a frozen dataclass; `Move` is the closed union of all of
them. Consumers dispatch with an isinstance chain that ends in a
TypeError, so an unhandled variant never passes silently.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class MoveType(Enum):
    """Move variant names."""

    TABLEAU_TO_FOUNDATION = "tableau-to-foundation"
    WASTE_TO_FOUNDATION = "waste-to-foundation"
    TABLEAU_TO_TABLEAU = "tableau-to-tableau"
    TABLEAU_STACK_TO_TABLEAU = "tableau-stack-to-tableau"
    WASTE_TO_TABLEAU = "waste-to-tableau"
    DRAW_STOCK = "draw-stock"
    RECYCLE_WASTE = "recycle-waste"
    GAME_WON = "game-won"
    NO_MOVE = "no-move"


@dataclass(frozen=True)
class TableauToFoundation:
    """Top card of a tableau column onto a foundation."""

    from_column: int
    from_index: int
    foundation_index: int
    move_type: ClassVar[MoveType] = MoveType.TABLEAU_TO_FOUNDATION

    def describe(self) -> dict:
        return {
            "type": self.move_type.value,
            "from": f"{self.from_column}:{self.from_index}",
            "f": self.foundation_index,
        }


@dataclass(frozen=True)
class WasteToFoundation:
    """Top waste card onto a foundation."""

    foundation_index: int
    move_type: ClassVar[MoveType] = MoveType.WASTE_TO_FOUNDATION

    def describe(self) -> dict:
        return {"type": self.move_type.value, "f": self.foundation_index}


@dataclass(frozen=True)
class TableauToTableau:
    """Top card of one column onto another."""

    from_column: int
    from_index: int
    to_column: int
    move_type: ClassVar[MoveType] = MoveType.TABLEAU_TO_TABLEAU

    def describe(self) -> dict:
        return {
            "type": self.move_type.value,
            "from": f"{self.from_column}:{self.from_index}",
            "to": self.to_column,
        }


@dataclass(frozen=True)
class TableauStackToTableau:
    """A run of `length` cards starting at from_index onto another column."""

    from_column: int
    from_index: int
    to_column: int
    length: int
    move_type: ClassVar[MoveType] = MoveType.TABLEAU_STACK_TO_TABLEAU

    def describe(self) -> dict:
        return {
            "type": self.move_type.value,
            "from": f"{self.from_column}:{self.from_index}",
            "to": self.to_column,
            "len": self.length,
        }


@dataclass(frozen=True)
class WasteToTableau:
    """Top waste card onto a tableau column."""

    to_column: int
    move_type: ClassVar[MoveType] = MoveType.WASTE_TO_TABLEAU

    def describe(self) -> dict:
        return {"type": self.move_type.value, "to": self.to_column}


@dataclass(frozen=True)
class DrawStock:
    move_type: ClassVar[MoveType] = MoveType.DRAW_STOCK

    def describe(self) -> dict:
        return {"type": self.move_type.value}


@dataclass(frozen=True)
class RecycleWaste:
    move_type: ClassVar[MoveType] = MoveType.RECYCLE_WASTE

    def describe(self) -> dict:
        return {"type": self.move_type.value}


@dataclass(frozen=True)
class GameWon:
    """Sentinel: every foundation is complete."""

    move_type: ClassVar[MoveType] = MoveType.GAME_WON

    def describe(self) -> dict:
        return {"type": self.move_type.value}


@dataclass(frozen=True)
class NoMove:
    """Sentinel: nothing legal is left to do."""

    move_type: ClassVar[MoveType] = MoveType.NO_MOVE

    def describe(self) -> dict:
        return {"type": self.move_type.value}


Move = Union[
    TableauToFoundation,
    WasteToFoundation,
    TableauToTableau,
    TableauStackToTableau,
    WasteToTableau,
    DrawStock,
    RecycleWaste,
    GameWon,
    NoMove,
]

SENTINELS = (GameWon, NoMove)


def is_sentinel(move: Move) -> bool:
    return isinstance(move, SENTINELS)
