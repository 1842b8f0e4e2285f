"""Tests for structural invariant checks."""

import pytest

from patience.rules.defaults import create_klondike_rules
from patience.rules.engine import RulesEngine
from patience.simulation.deal import deal_game, make_deck
from patience.simulation.state import Card, empty_state, replace_pile
from patience.simulation.validation import find_invariant_violations


@pytest.fixture
def engine() -> RulesEngine:
    return RulesEngine(create_klondike_rules())


class TestFindInvariantViolations:
    """Tests for find_invariant_violations."""

    def test_fresh_deal_is_clean(self, engine):
        for seed in range(5):
            assert find_invariant_violations(deal_game(seed=seed), engine) == []

    def test_missing_card(self, engine):
        state = deal_game(seed=1)
        state = state.copy_with(stock=state.stock[1:])
        problems = find_invariant_violations(state, engine)
        assert len(problems) == 1
        assert "missing" in problems[0]

    def test_duplicate_card(self, engine):
        state = deal_game(seed=1)
        state = state.copy_with(waste=(state.stock[0].flipped(True),))
        problems = find_invariant_violations(state, engine)
        assert f"duplicates=[{state.stock[0].id}]" in problems[0]

    def test_face_down_above_face_up(self, engine):
        state = deal_game(seed=1)
        column = state.tableaus[1]
        bad = (column[1], column[0])
        state = state.copy_with(tableaus=replace_pile(state.tableaus, 1, bad))
        assert any("face-down card above" in p for p in find_invariant_violations(state, engine))

    def test_broken_run(self, engine):
        column = (
            Card(id=100, suit="spades", rank="8", face_up=True),
            Card(id=101, suit="clubs", rank="7", face_up=True),
        )
        state = empty_state().copy_with(tableaus=replace_pile(empty_state().tableaus, 0, column))
        assert "column 1: face-up cards are not a valid run" in find_invariant_violations(state, engine)

    def test_foundation_out_of_sequence(self, engine):
        deck = make_deck()
        hearts = [c.flipped(True) for c in deck[:13]]
        state = deal_game(seed=1)
        # Swap in a foundation that skips the two
        pile = (hearts[0], hearts[2])
        state = state.copy_with(foundations=replace_pile(state.foundations, 0, pile))
        assert any("out of sequence" in p for p in find_invariant_violations(state, engine))
