"""Integration tests for advisor-driven play."""

import pytest

from patience.playtest.autoplay import (
    OUTCOME_MAX_STEPS,
    OUTCOME_NO_MOVE,
    OUTCOME_STUCK,
    OUTCOME_WON,
    autoplay,
)
from patience.playtest.session import GameSession, SessionConfig
from patience.rules.defaults import create_draw_three_rules
from patience.simulation.deal import make_deck
from patience.simulation.moves import TableauStackToTableau, TableauToFoundation
from patience.simulation.state import Card, empty_state


def near_won_state():
    """Foundations hold ace..queen of every suit; the kings sit in columns 1-4."""
    deck = make_deck()
    suits = [tuple(c.flipped(True) for c in deck[s * 13:(s + 1) * 13]) for s in range(4)]
    foundations = tuple(pile[:12] for pile in suits)
    tableaus = tuple((pile[12],) for pile in suits) + ((), (), ())
    return empty_state().copy_with(tableaus=tableaus, foundations=foundations)


class TestAutoplay:
    """Tests for autoplay."""

    def test_finishes_near_won_game(self):
        session = GameSession(SessionConfig(seed=0), state=near_won_state())
        result = autoplay(session, check_invariants=True)

        assert result.outcome == OUTCOME_WON
        assert result.won
        assert result.steps == 4
        assert all(isinstance(m, TableauToFoundation) for m in result.moves)
        assert session.check_win()

    def test_blocked_game_reports_no_move(self):
        column = (Card(id=1, suit="hearts", rank="5", face_up=True),)
        session = GameSession(SessionConfig(seed=0), state=empty_state().copy_with(
            tableaus=(column,) + ((),) * 6,
        ))
        result = autoplay(session)
        assert result.outcome == OUTCOME_NO_MOVE
        assert result.steps == 0

    def test_lone_king_shuffle_is_stuck(self):
        """A lone king bounces between empty columns until the position repeats."""
        king = (Card(id=1, suit="spades", rank="king", face_up=True),)
        session = GameSession(SessionConfig(seed=0), state=empty_state().copy_with(
            tableaus=(king,) + ((),) * 6,
        ))
        result = autoplay(session)

        assert result.outcome == OUTCOME_STUCK
        assert result.stuck_reason == "position repeated"
        assert result.moves == (
            TableauStackToTableau(from_column=0, from_index=0, to_column=1, length=1),
            TableauStackToTableau(from_column=1, from_index=0, to_column=0, length=1),
        )

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4, 5, 6, 7])
    def test_dealt_games_terminate_with_invariants(self, seed):
        session = GameSession(SessionConfig(seed=seed))
        result = autoplay(session, max_steps=500, check_invariants=True)

        assert result.outcome in (OUTCOME_WON, OUTCOME_NO_MOVE, OUTCOME_STUCK, OUTCOME_MAX_STEPS)
        assert result.steps <= 500
        assert result.final_state is session.state
        assert result.final_state.card_ids() == list(range(1, 53))

    def test_draw_three_games_terminate(self):
        session = GameSession(SessionConfig(seed=3, rules=create_draw_three_rules()))
        result = autoplay(session, max_steps=500, check_invariants=True)
        assert result.steps <= 500

    def test_step_limit(self):
        session = GameSession(SessionConfig(seed=11))
        result = autoplay(session, max_steps=3)
        assert result.steps <= 3
        if result.outcome == OUTCOME_MAX_STEPS:
            assert result.steps == 3
            assert result.stuck_reason == "step limit reached (3)"

    def test_on_step_sees_every_move(self):
        seen = []
        session = GameSession(SessionConfig(seed=0), state=near_won_state())
        result = autoplay(session, on_step=lambda move, message: seen.append((move, message)))
        assert [m for m, _ in seen] == list(result.moves)
        assert all(msg.endswith("building up by suit.") for _, msg in seen)

    def test_deterministic(self):
        first = autoplay(GameSession(SessionConfig(seed=21)), max_steps=200)
        second = autoplay(GameSession(SessionConfig(seed=21)), max_steps=200)
        assert first.moves == second.moves
        assert first.outcome == second.outcome
