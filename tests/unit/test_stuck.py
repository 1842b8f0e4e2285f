"""Tests for stuck detection."""

from patience.playtest.stuck import StuckDetector
from patience.simulation.deal import deal_game


def test_new_positions_are_fine():
    detector = StuckDetector(max_steps=10)
    detector.start(deal_game(seed=1))
    assert detector.record(deal_game(seed=2)) is None
    assert detector.steps == 1


def test_repeated_position():
    detector = StuckDetector()
    detector.start(deal_game(seed=1))
    assert detector.record(deal_game(seed=1)) == "position repeated"


def test_step_limit():
    detector = StuckDetector(max_steps=2)
    detector.start(deal_game(seed=0))
    assert detector.record(deal_game(seed=1)) is None
    assert detector.record(deal_game(seed=2)) == "step limit reached (2)"


def test_start_resets():
    detector = StuckDetector(max_steps=5)
    detector.start(deal_game(seed=1))
    detector.record(deal_game(seed=2))
    detector.start(deal_game(seed=2))
    assert detector.steps == 0
    assert detector.record(deal_game(seed=1)) is None
