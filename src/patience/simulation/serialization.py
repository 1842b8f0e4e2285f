"""JSON serialization for GameState snapshots."""

import json
from typing import Any, Dict, List

from patience.simulation.state import Card, GameState


def _card_to_dict(card: Card) -> Dict[str, Any]:
    return {"id": card.id, "suit": card.suit, "rank": card.rank, "faceUp": card.face_up}


def _card_from_dict(data: Dict[str, Any]) -> Card:
    return Card(
        id=int(data["id"]),
        suit=data.get("suit"),
        rank=data.get("rank"),
        face_up=bool(data.get("faceUp", False)),
    )


def _pile_from_list(cards: List[Dict[str, Any]]) -> tuple[Card, ...]:
    return tuple(_card_from_dict(c) for c in cards)


def state_to_dict(state: GameState) -> Dict[str, Any]:
    """Convert GameState to JSON-serializable dict."""
    return {
        "tableaus": [[_card_to_dict(c) for c in col] for col in state.tableaus],
        "foundations": [[_card_to_dict(c) for c in pile] for pile in state.foundations],
        "stock": [_card_to_dict(c) for c in state.stock],
        "waste": [_card_to_dict(c) for c in state.waste],
    }


def state_to_json(state: GameState, indent: int = 2) -> str:
    """Serialize GameState to JSON string."""
    return json.dumps(state_to_dict(state), indent=indent)


def state_from_dict(data: Dict[str, Any]) -> GameState:
    """Create GameState from dict."""
    return GameState(
        tableaus=tuple(_pile_from_list(col) for col in data["tableaus"]),
        foundations=tuple(_pile_from_list(pile) for pile in data["foundations"]),
        stock=_pile_from_list(data.get("stock", [])),
        waste=_pile_from_list(data.get("waste", [])),
    )


def state_from_json(json_str: str) -> GameState:
    """Deserialize GameState from JSON string."""
    return state_from_dict(json.loads(json_str))
