"""Deck construction and the initial deal."""

from __future__ import annotations

import logging
import random
from typing import Optional

from patience.rules.schema import RANK_TOKENS, Suit
from patience.simulation.state import (
    FOUNDATION_PILES,
    TABLEAU_COLUMNS,
    Card,
    GameState,
)

logger = logging.getLogger(__name__)


def make_deck() -> tuple[Card, ...]:
    """Create the standard 52-card deck, ids 1..52, all face-down."""
    deck: list[Card] = []
    card_id = 1
    for suit in Suit:
        for rank in RANK_TOKENS:
            deck.append(Card(id=card_id, suit=suit.value, rank=rank, face_up=False))
            card_id += 1
    return tuple(deck)


def deal_game(rng: Optional[random.Random] = None, seed: Optional[int] = None) -> GameState:
    """Shuffle a fresh deck and lay out a new game.

    Column i receives i + 1 cards with only the last one face-up; the
    remaining 24 cards form the face-down stock.

    Args:
        rng: Random source to shuffle with (takes precedence over seed)
        seed: Seed for a reproducible deal when no rng is given

    Returns:
        Initial GameState
    """
    if rng is None:
        rng = random.Random(seed)

    deck = list(make_deck())
    rng.shuffle(deck)

    tableaus: list[tuple[Card, ...]] = []
    offset = 0
    for col in range(TABLEAU_COLUMNS):
        column = []
        for i in range(col + 1):
            column.append(deck[offset].flipped(i == col))
            offset += 1
        tableaus.append(tuple(column))

    stock = tuple(deck[offset:])
    logger.debug(f"Dealt {offset} cards to the tableau, {len(stock)} to the stock")

    return GameState(
        tableaus=tuple(tableaus),
        foundations=tuple(() for _ in range(FOUNDATION_PILES)),
        stock=stock,
        waste=(),
    )
