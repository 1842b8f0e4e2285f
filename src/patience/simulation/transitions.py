"""State transitions.

Each function re-validates its move with the rules engine and returns a
new GameState, or the very same state object when the move is illegal.
Input piles are never modified.
"""

from __future__ import annotations

import logging

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
from patience.simulation.state import Card, GameState, replace_pile

logger = logging.getLogger(__name__)


def _in_range(idx: int, size: int) -> bool:
    return isinstance(idx, int) and not isinstance(idx, bool) and 0 <= idx < size


def flip_top(column: tuple[Card, ...]) -> tuple[Card, ...]:
    """Turn the newly exposed top card of a column face-up."""
    if column and not column[-1].face_up:
        return column[:-1] + (column[-1].flipped(True),)
    return column


def move_cards(
    state: GameState,
    engine: RulesEngine,
    from_column: int,
    from_index: int,
    to_column: int,
) -> GameState:
    """Carry the run column[from_index:] onto another column."""
    tableaus = state.tableaus
    if from_column == to_column:
        return state
    if not _in_range(from_column, len(tableaus)) or not _in_range(to_column, len(tableaus)):
        return state

    source = tableaus[from_column]
    dest = tableaus[to_column]
    if not engine.can_drag_stack_from(source, from_index):
        return state

    moving = source[from_index:]
    if not engine.can_place_on_tableau(moving[0], dest):
        return state

    logger.debug(
        f"Move {len(moving)} card(s) from column {from_column + 1} to column {to_column + 1}: "
        f"{[str(c) for c in moving]}"
    )

    new_source = flip_top(source[:from_index])
    new_dest = dest + moving
    new_tableaus = replace_pile(tableaus, from_column, new_source)
    new_tableaus = replace_pile(new_tableaus, to_column, new_dest)
    return state.copy_with(tableaus=new_tableaus)


def draw_one(state: GameState, engine: RulesEngine) -> GameState:
    """Recycle the waste when the stock is empty, otherwise draw.

    Recycling keeps the waste's order: the card that was on top of the
    waste becomes the top of the stock, face-down.
    """
    if engine.can_recycle_waste(state.stock, state.waste):
        logger.debug(f"Recycling {len(state.waste)} waste cards back to stock")
        new_stock = tuple(card.flipped(False) for card in state.waste)
        return state.copy_with(stock=new_stock, waste=())

    if not engine.can_draw_from_stock(state.stock):
        return state

    count = engine.config.stock.draw_count
    stock = state.stock[:-count]
    # Cards leave the stock one at a time, top card first
    drawn = tuple(card.flipped(True) for card in reversed(state.stock[-count:]))
    logger.debug(f"Drew {[str(c) for c in drawn]} from stock")
    return state.copy_with(stock=stock, waste=state.waste + drawn)


def move_waste_to_tableau(state: GameState, engine: RulesEngine, to_column: int) -> GameState:
    """Move the top waste card onto a tableau column."""
    if not engine.can_drag_from_waste(state.waste):
        return state
    if not _in_range(to_column, len(state.tableaus)):
        return state

    top = state.waste[-1]
    dest = state.tableaus[to_column]
    if not engine.can_place_on_tableau(top, dest):
        return state

    logger.debug(f"Move waste card {top} to column {to_column + 1}")
    new_tableaus = replace_pile(state.tableaus, to_column, dest + (top.flipped(True),))
    return state.copy_with(waste=state.waste[:-1], tableaus=new_tableaus)


def move_to_foundation(
    state: GameState,
    engine: RulesEngine,
    from_column: int,
    from_index: int,
    foundation_index: int,
) -> GameState:
    """Move the top card of a tableau column onto a foundation.

    `from_index` must name the column's current top card; a stale index
    makes this a no-op.
    """
    if not _in_range(from_column, len(state.tableaus)):
        return state
    if not _in_range(foundation_index, len(state.foundations)):
        return state

    source = state.tableaus[from_column]
    if not source or from_index != len(source) - 1:
        return state

    card = source[from_index]
    foundation = state.foundations[foundation_index]
    if not engine.can_drag_card(card) or not engine.can_place_on_foundation(card, foundation):
        return state

    logger.debug(f"Move {card} to foundation pile {foundation_index + 1}")
    new_tableaus = replace_pile(state.tableaus, from_column, flip_top(source[:from_index]))
    new_foundations = replace_pile(state.foundations, foundation_index, foundation + (card,))
    return state.copy_with(tableaus=new_tableaus, foundations=new_foundations)


def move_waste_to_foundation(state: GameState, engine: RulesEngine, foundation_index: int) -> GameState:
    """Move the top waste card onto a foundation."""
    if not engine.can_drag_from_waste(state.waste):
        return state
    if not _in_range(foundation_index, len(state.foundations)):
        return state

    top = state.waste[-1]
    foundation = state.foundations[foundation_index]
    if not engine.can_place_on_foundation(top, foundation):
        return state

    logger.debug(f"Move waste card {top} to foundation pile {foundation_index + 1}")
    new_foundations = replace_pile(state.foundations, foundation_index, foundation + (top,))
    return state.copy_with(waste=state.waste[:-1], foundations=new_foundations)


def apply_move(state: GameState, engine: RulesEngine, move: Move) -> GameState:
    """Apply a previously enumerated move through the matching transition."""
    if isinstance(move, TableauToFoundation):
        return move_to_foundation(state, engine, move.from_column, move.from_index, move.foundation_index)
    elif isinstance(move, WasteToFoundation):
        return move_waste_to_foundation(state, engine, move.foundation_index)
    elif isinstance(move, (TableauToTableau, TableauStackToTableau)):
        return move_cards(state, engine, move.from_column, move.from_index, move.to_column)
    elif isinstance(move, WasteToTableau):
        return move_waste_to_tableau(state, engine, move.to_column)
    elif isinstance(move, DrawStock):
        if not engine.can_draw_from_stock(state.stock):
            return state
        return draw_one(state, engine)
    elif isinstance(move, RecycleWaste):
        if not engine.can_recycle_waste(state.stock, state.waste):
            return state
        return draw_one(state, engine)
    elif is_sentinel(move):
        return state
    raise TypeError(f"Unknown move: {move!r}")
