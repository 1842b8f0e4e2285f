"""JSON serialization for RuleConfig.

The JSON surface uses the camelCase option names of the rules file
(rankValues, tableau.allowOnEmpty, stock.drawCount, ...). Sections left
out fall back to the reference Klondike values.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from patience.rules.defaults import create_klondike_rules
from patience.rules.schema import (
    BuildDirection,
    Color,
    FoundationRules,
    RuleConfig,
    StockRules,
    TableauRules,
    WinCondition,
)
from patience.rules.validation import RuleConfigError, validate_rules


def rules_to_dict(config: RuleConfig) -> Dict[str, Any]:
    """Convert RuleConfig to JSON-serializable dict."""
    return {
        "name": config.name,
        "rankValues": dict(config.rank_values),
        "rankAliases": dict(config.rank_aliases),
        "suitColors": {suit: color.value for suit, color in config.suit_colors.items()},
        "tableau": {
            "allowOnEmpty": config.tableau.allow_on_empty,
            "alternateColors": config.tableau.alternate_colors,
            "buildDirection": config.tableau.build_direction.value,
        },
        "foundation": {
            "start": config.foundation.start,
            "matchSuit": config.foundation.match_suit,
            "buildDirection": config.foundation.build_direction.value,
        },
        "stock": {"drawCount": config.stock.draw_count},
        "winCondition": {
            "foundationPiles": config.win_condition.foundation_piles,
            "cardsPerPile": config.win_condition.cards_per_pile,
        },
    }


def rules_to_json(config: RuleConfig, indent: int = 2) -> str:
    """Serialize RuleConfig to JSON string."""
    return json.dumps(rules_to_dict(config), indent=indent)


def _direction(value: Any, section: str) -> BuildDirection:
    try:
        return BuildDirection(str(value).lower())
    except ValueError:
        raise RuleConfigError([f"{section}.buildDirection must be ascending or descending, got {value!r}"])


def _color(suit: str, value: Any) -> Color:
    try:
        return Color(str(value).lower())
    except ValueError:
        raise RuleConfigError([f"suit {suit!r} has unknown color {value!r}"])


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise RuleConfigError([f"{key} must be a JSON object, got {type(value).__name__}"])
    return value


def _tableau_from_dict(data: Dict[str, Any], default: TableauRules) -> TableauRules:
    allow = data.get("allowOnEmpty", default.allow_on_empty)
    if isinstance(allow, str):
        allow = allow.lower()
    return TableauRules(
        allow_on_empty=allow,
        alternate_colors=bool(data.get("alternateColors", default.alternate_colors)),
        build_direction=_direction(data.get("buildDirection", default.build_direction.value), "tableau"),
    )


def _foundation_from_dict(data: Dict[str, Any], default: FoundationRules) -> FoundationRules:
    return FoundationRules(
        start=str(data.get("start", default.start)).lower(),
        match_suit=bool(data.get("matchSuit", default.match_suit)),
        build_direction=_direction(data.get("buildDirection", default.build_direction.value), "foundation"),
    )


def rules_from_dict(data: Dict[str, Any]) -> RuleConfig:
    """Create a validated RuleConfig from dict.

    Raises:
        RuleConfigError: If the data describes an unusable rule set
    """
    if not isinstance(data, dict):
        raise RuleConfigError([f"rules must be a JSON object, got {type(data).__name__}"])

    default = create_klondike_rules()
    for key in ("rankValues", "rankAliases", "suitColors"):
        _section(data, key)

    rank_values = data.get("rankValues", default.rank_values)
    rank_aliases = data.get("rankAliases", default.rank_aliases)
    suit_colors_raw = data.get("suitColors")
    if suit_colors_raw is None:
        suit_colors = dict(default.suit_colors)
    else:
        suit_colors = {str(suit).lower(): _color(suit, color) for suit, color in suit_colors_raw.items()}

    stock = _section(data, "stock")
    win = _section(data, "winCondition")

    config = RuleConfig(
        rank_values={str(k).lower(): v for k, v in rank_values.items()},
        rank_aliases={str(k).lower(): str(v).lower() for k, v in rank_aliases.items()},
        suit_colors=suit_colors,
        tableau=_tableau_from_dict(_section(data, "tableau"), default.tableau),
        foundation=_foundation_from_dict(_section(data, "foundation"), default.foundation),
        stock=StockRules(draw_count=stock.get("drawCount", default.stock.draw_count)),
        win_condition=WinCondition(
            foundation_piles=win.get("foundationPiles", default.win_condition.foundation_piles),
            cards_per_pile=win.get("cardsPerPile", default.win_condition.cards_per_pile),
        ),
        name=data.get("name", default.name),
    )
    return validate_rules(config)


def rules_from_json(json_str: str) -> RuleConfig:
    """Deserialize RuleConfig from JSON string."""
    return rules_from_dict(json.loads(json_str))


def load_rules(path: Union[str, Path]) -> RuleConfig:
    """Read and validate a rules file."""
    with open(path) as f:
        data = json.load(f)
    return rules_from_dict(data)
