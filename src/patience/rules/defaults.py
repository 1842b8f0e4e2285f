"""Ready-made rule sets."""

from patience.rules.schema import (
    RANK_TOKENS,
    BuildDirection,
    Color,
    FoundationRules,
    RuleConfig,
    StockRules,
    Suit,
    TableauRules,
    WinCondition,
)


def default_rank_values() -> dict[str, int]:
    """Ace low: ace=1 through king=13."""
    return {token: value for value, token in enumerate(RANK_TOKENS, start=1)}


def default_rank_aliases() -> dict[str, str]:
    """Short and numeric spellings accepted for the face ranks."""
    return {
        "a": "ace",
        "1": "ace",
        "j": "jack",
        "11": "jack",
        "q": "queen",
        "12": "queen",
        "k": "king",
        "13": "king",
    }


def default_suit_colors() -> dict[str, Color]:
    return {
        Suit.HEARTS.value: Color.RED,
        Suit.DIAMONDS.value: Color.RED,
        Suit.CLUBS.value: Color.BLACK,
        Suit.SPADES.value: Color.BLACK,
    }


def create_klondike_rules() -> RuleConfig:
    """Create the reference Klondike rule set.

    - Kings only on empty columns
    - Tableau builds down in alternating colors
    - Foundations build up by suit from the ace
    - Draw one card at a time
    """
    return RuleConfig(
        rank_values=default_rank_values(),
        rank_aliases=default_rank_aliases(),
        suit_colors=default_suit_colors(),
        tableau=TableauRules(
            allow_on_empty="king",
            alternate_colors=True,
            build_direction=BuildDirection.DESCENDING,
        ),
        foundation=FoundationRules(
            start="ace",
            match_suit=True,
            build_direction=BuildDirection.ASCENDING,
        ),
        stock=StockRules(draw_count=1),
        win_condition=WinCondition(foundation_piles=4, cards_per_pile=13),
        name="klondike",
    )


def create_draw_three_rules() -> RuleConfig:
    """Klondike dealing three cards per draw."""
    return create_klondike_rules().copy_with(
        stock=StockRules(draw_count=3),
        name="klondike-draw-three",
    )


def create_relaxed_rules() -> RuleConfig:
    """Klondike where any card may fill an empty column."""
    return create_klondike_rules().copy_with(
        tableau=TableauRules(allow_on_empty=True),
        name="klondike-relaxed",
    )


RULE_SETS = {
    "klondike": create_klondike_rules,
    "draw-three": create_draw_three_rules,
    "relaxed": create_relaxed_rules,
}
