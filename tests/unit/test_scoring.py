"""Tests for heuristic move scoring."""

import pytest

from patience.advisor.scoring import score_move
from patience.rules.defaults import create_klondike_rules
from patience.rules.engine import RulesEngine
from patience.simulation.deal import make_deck
from patience.simulation.moves import (
    DrawStock,
    GameWon,
    NoMove,
    RecycleWaste,
    TableauStackToTableau,
    TableauToFoundation,
    TableauToTableau,
    WasteToFoundation,
    WasteToTableau,
)
from patience.simulation.state import Card, GameState, empty_state


def card(rank: str, suit: str = "hearts", face_up: bool = True) -> Card:
    return Card(id=0, suit=suit, rank=rank, face_up=face_up)


def make_state(*columns, foundations=None, stock=(), waste=()) -> GameState:
    tableaus = tuple(tuple(c) for c in columns) + tuple(() for _ in range(7 - len(columns)))
    return empty_state().copy_with(
        tableaus=tableaus,
        foundations=foundations if foundations is not None else ((), (), (), ()),
        stock=tuple(stock),
        waste=tuple(waste),
    )


@pytest.fixture
def engine() -> RulesEngine:
    return RulesEngine(create_klondike_rules())


class TestTableauToFoundation:
    def test_uncovering_a_face_down_card(self, engine):
        state = make_state([card("7", "clubs", face_up=False), card("6", "hearts")])
        scored = score_move(TableauToFoundation(0, 1, 0), state, engine)
        assert scored.score == pytest.approx(75)
        assert scored.reason == "Progress foundation; Uncovers face-down card; Foundation progress weight"

    def test_ace_from_single_card_column(self, engine):
        state = make_state([card("ace", "spades")])
        scored = score_move(TableauToFoundation(0, 0, 0), state, engine)
        assert scored.score == pytest.approx(72)
        assert scored.reason == (
            "Progress foundation; Low rank foundation build; Free column; Foundation progress weight"
        )

    def test_two_counts_as_low_rank(self, engine):
        state = make_state([card("9", "clubs"), card("2", "spades")])
        scored = score_move(TableauToFoundation(0, 1, 0), state, engine)
        assert scored.score == pytest.approx(60)

    def test_plain_build(self, engine):
        state = make_state([card("9", "clubs"), card("6", "hearts")])
        assert score_move(TableauToFoundation(0, 1, 0), state, engine).score == pytest.approx(50)


class TestWasteToFoundation:
    def test_waste_ace(self, engine):
        state = make_state(waste=[card("ace", "clubs")])
        scored = score_move(WasteToFoundation(0), state, engine)
        assert scored.score == pytest.approx(60)
        assert scored.reason == "Waste to foundation; Ace advancement; Foundation progress weight"

    def test_waste_non_ace(self, engine):
        state = make_state(waste=[card("3", "clubs")])
        assert score_move(WasteToFoundation(0), state, engine).score == pytest.approx(45)


class TestTableauToTableau:
    def test_exposes_face_down_card(self, engine):
        state = make_state([card("9", "clubs", face_up=False), card("6", "hearts")], [card("7", "spades")])
        scored = score_move(TableauToTableau(0, 1, 1), state, engine)
        assert scored.score == pytest.approx(38)
        assert scored.reason == (
            "Uncovers face-down card; Reposition for future sequence; Foundation progress weight"
        )

    def test_empties_column(self, engine):
        state = make_state([card("6", "hearts")], [card("7", "spades")])
        scored = score_move(TableauToTableau(0, 0, 1), state, engine)
        assert scored.score == pytest.approx(26)
        assert "Creates empty column (King slot)" in scored.reason

    def test_plain_reposition(self, engine):
        state = make_state([card("9", "clubs"), card("6", "hearts")], [card("7", "spades")])
        assert score_move(TableauToTableau(0, 1, 1), state, engine).score == pytest.approx(8)


class TestTableauStackToTableau:
    def test_whole_column(self, engine):
        column = [card("8", "spades"), card("7", "hearts"), card("6", "clubs")]
        state = make_state(column, [card("9", "diamonds")])
        scored = score_move(TableauStackToTableau(0, 0, 1, 3), state, engine)
        # 22 + 3 * 3 + 10
        assert scored.score == pytest.approx(41)
        assert scored.reason == (
            "Frees entire column; Moves multi-card sequence; "
            "Improves sequencing potential; Foundation progress weight"
        )

    def test_long_stack_over_face_down_card(self, engine):
        column = [card("2", "clubs", face_up=False), card("3", "clubs", face_up=False)]
        column += [card(str(r)) for r in range(10, 0, -1)]
        state = make_state(column)
        scored = score_move(TableauStackToTableau(0, 2, 1, 10), state, engine)
        # 35 + min(25, 30) + 10
        assert scored.score == pytest.approx(70)
        assert scored.reason.startswith("Uncovers face-down card beneath stack")

    def test_stack_above_face_up_card(self, engine):
        state = make_state([card("9", "clubs"), card("8", "hearts")])
        assert score_move(TableauStackToTableau(0, 1, 1, 1), state, engine).score == pytest.approx(13)


class TestStockMoves:
    def test_waste_to_tableau(self, engine):
        state = make_state([card("8", "clubs")], waste=[card("7", "hearts")])
        assert score_move(WasteToTableau(0), state, engine).score == pytest.approx(12)

    def test_draw(self, engine):
        scored = score_move(DrawStock(), make_state(stock=[card("5", face_up=False)]), engine)
        assert scored.score == pytest.approx(5)
        assert scored.reason == "Reveal new card; Foundation progress weight"

    def test_recycle(self, engine):
        scored = score_move(RecycleWaste(), make_state(waste=[card("5")]), engine)
        assert scored.score == pytest.approx(4)
        assert scored.reason == "Recycle waste to restock; Foundation progress weight"


class TestFoundationWeight:
    def test_weight_scales_with_foundation_cards(self, engine):
        deck = make_deck()
        foundations = (tuple(c.flipped(True) for c in deck[:5]), (), (), ())
        state = make_state(stock=[card("5", face_up=False)], foundations=foundations)
        assert score_move(DrawStock(), state, engine).score == pytest.approx(6.0)

    def test_sentinels_only_get_weight(self, engine):
        deck = make_deck()
        foundations = (tuple(c.flipped(True) for c in deck[:13]), (), (), ())
        state = make_state(foundations=foundations)
        assert score_move(GameWon(), state, engine).score == pytest.approx(2.6)
        assert score_move(NoMove(), state, engine).reason == "Foundation progress weight"

    def test_unknown_move_raises(self, engine):
        with pytest.raises(TypeError):
            score_move(object(), make_state(), engine)  # type: ignore

    def test_deterministic(self, engine):
        state = make_state([card("7", "clubs", face_up=False), card("6", "hearts")])
        move = TableauToFoundation(0, 1, 0)
        assert score_move(move, state, engine) == score_move(move, state, engine)
