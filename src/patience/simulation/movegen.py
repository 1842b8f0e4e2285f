"""Legal move generation."""

from typing import List

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
)
from patience.simulation.state import GameState


def enumerate_moves(state: GameState, engine: RulesEngine) -> List[Move]:
    """Generate every legal move in a fixed, reproducible order.

    Order: tableau->foundation, waste->foundation, tableau->tableau,
    tableau-stack->tableau, waste->tableau, then draw or recycle.
    The state is only read.
    """
    moves: List[Move] = []
    tableaus = state.tableaus
    foundations = state.foundations
    waste = state.waste

    # Tableau -> Foundation
    for col_idx, column in enumerate(tableaus):
        if not column:
            continue
        top = column[-1]
        if not engine.can_drag_card(top):
            continue
        for f_idx, foundation in enumerate(foundations):
            if engine.can_place_on_foundation(top, foundation):
                moves.append(TableauToFoundation(
                    from_column=col_idx,
                    from_index=len(column) - 1,
                    foundation_index=f_idx,
                ))

    # Waste -> Foundation
    if engine.can_drag_from_waste(waste):
        top_waste = waste[-1]
        for f_idx, foundation in enumerate(foundations):
            if engine.can_place_on_foundation(top_waste, foundation):
                moves.append(WasteToFoundation(foundation_index=f_idx))

    # Tableau -> Tableau (single top card)
    for from_col, source in enumerate(tableaus):
        if not source:
            continue
        top = source[-1]
        if not engine.can_drag_card(top):
            continue
        for to_col, dest in enumerate(tableaus):
            if from_col == to_col:
                continue
            if engine.can_place_on_tableau(top, dest):
                moves.append(TableauToTableau(
                    from_column=from_col,
                    from_index=len(source) - 1,
                    to_column=to_col,
                ))

    # Tableau stacks: only the bottom card of the run is tested at the destination
    for from_col, source in enumerate(tableaus):
        for start_idx in range(len(source)):
            if not engine.can_drag_stack_from(source, start_idx):
                continue
            run_bottom = source[start_idx]
            for to_col, dest in enumerate(tableaus):
                if from_col == to_col:
                    continue
                if engine.can_place_on_tableau(run_bottom, dest):
                    moves.append(TableauStackToTableau(
                        from_column=from_col,
                        from_index=start_idx,
                        to_column=to_col,
                        length=len(source) - start_idx,
                    ))

    # Waste -> Tableau
    if engine.can_drag_from_waste(waste):
        top_waste = waste[-1]
        for to_col, dest in enumerate(tableaus):
            if engine.can_place_on_tableau(top_waste, dest):
                moves.append(WasteToTableau(to_column=to_col))

    # Stock
    if engine.can_draw_from_stock(state.stock):
        moves.append(DrawStock())
    elif engine.can_recycle_waste(state.stock, waste):
        moves.append(RecycleWaste())

    return moves
