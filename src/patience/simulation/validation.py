"""Structural invariant checks for game states."""

from collections import Counter
from typing import List

from patience.rules.engine import RulesEngine
from patience.simulation.state import DECK_SIZE, GameState


def find_invariant_violations(state: GameState, engine: RulesEngine) -> List[str]:
    """Describe every broken invariant in a state.

    Checks:
    - Card conservation: exactly the ids 1..52, each once
    - Tableau: face-down cards only as a prefix, face-up suffix is a valid run
    - Foundations: single suit, built from the start rank with no gaps
    """
    problems: List[str] = []

    ids = state.card_ids()
    if ids != list(range(1, DECK_SIZE + 1)):
        dupes = sorted(i for i, n in Counter(ids).items() if n > 1)
        missing = sorted(set(range(1, DECK_SIZE + 1)) - set(ids))
        problems.append(f"card conservation broken: duplicates={dupes} missing={missing}")

    for col_idx, column in enumerate(state.tableaus):
        first_up = next((i for i, c in enumerate(column) if c.face_up), len(column))
        if any(not c.face_up for c in column[first_up:]):
            problems.append(f"column {col_idx + 1}: face-down card above a face-up card")
            continue
        if first_up < len(column) and not engine.can_drag_stack_from(column, first_up):
            problems.append(f"column {col_idx + 1}: face-up cards are not a valid run")

    cards_per_pile = engine.config.win_condition.cards_per_pile
    for f_idx, pile in enumerate(state.foundations):
        if len(pile) > cards_per_pile:
            problems.append(f"foundation {f_idx + 1}: holds {len(pile)} cards")
        for i, card in enumerate(pile):
            below = pile[:i]
            if not engine.can_place_on_foundation(card, below):
                problems.append(f"foundation {f_idx + 1}: {card} out of sequence at position {i}")
                break

    return problems
