"""Klondike patience rule engine, move generator and move advisor."""

from patience.rules.engine import RulesEngine
from patience.rules.defaults import create_klondike_rules
from patience.simulation.deal import deal_game
from patience.simulation.movegen import enumerate_moves
from patience.advisor.advisor import get_suggestion, suggest_best_move, explain_move

__version__ = "0.1.0"

__all__ = [
    "RulesEngine",
    "create_klondike_rules",
    "deal_game",
    "enumerate_moves",
    "get_suggestion",
    "suggest_best_move",
    "explain_move",
]
