"""Load-time validation of rule configurations."""

from typing import List

from patience.rules.schema import Color, RuleConfig


class RuleConfigError(ValueError):
    """Raised when a rule configuration cannot be used."""

    def __init__(self, problems: List[str]) -> None:
        self.problems = list(problems)
        super().__init__("Invalid rule configuration: " + "; ".join(self.problems))


def _canonical(config: RuleConfig, token: object) -> bool:
    if not isinstance(token, str):
        return False
    key = token.strip().lower()
    if key in config.rank_values:
        return True
    return config.rank_aliases.get(key) in config.rank_values


def find_rule_problems(config: RuleConfig) -> List[str]:
    """List everything wrong with a configuration (empty when valid)."""
    problems: List[str] = []

    values = list(config.rank_values.values())
    for token, value in config.rank_values.items():
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 13:
            problems.append(f"rank value for {token!r} must be an integer in 1..13, got {value!r}")
    if len(set(values)) != len(values):
        problems.append("rank values must be distinct")

    for alias, target in config.rank_aliases.items():
        if target not in config.rank_values:
            problems.append(f"rank alias {alias!r} points at unknown rank {target!r}")

    for suit, color in config.suit_colors.items():
        if not isinstance(color, Color):
            problems.append(f"suit {suit!r} has unknown color {color!r}")

    allow = config.tableau.allow_on_empty
    if isinstance(allow, str) and not _canonical(config, allow):
        problems.append(f"tableau.allowOnEmpty names unknown rank {allow!r}")
    elif not isinstance(allow, (bool, str)):
        problems.append(f"tableau.allowOnEmpty must be a bool or rank token, got {allow!r}")

    if not _canonical(config, config.foundation.start):
        problems.append(f"foundation.start names unknown rank {config.foundation.start!r}")

    draw_count = config.stock.draw_count
    if isinstance(draw_count, bool) or not isinstance(draw_count, int) or draw_count < 1:
        problems.append(f"stock.drawCount must be an integer >= 1, got {draw_count!r}")

    win = config.win_condition
    if not isinstance(win.foundation_piles, int) or win.foundation_piles < 1:
        problems.append("winCondition.foundationPiles must be a positive integer")
    if not isinstance(win.cards_per_pile, int) or win.cards_per_pile < 1:
        problems.append("winCondition.cardsPerPile must be a positive integer")

    return problems


def validate_rules(config: RuleConfig) -> RuleConfig:
    """Return the configuration unchanged, or raise RuleConfigError.

    Raises:
        RuleConfigError: If any problem is found
    """
    problems = find_rule_problems(config)
    if problems:
        raise RuleConfigError(problems)
    return config
