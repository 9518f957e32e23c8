from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .cards import Card


class HandCategory(str, Enum):
    ROYAL_FLUSH = "Royal Flush"
    STRAIGHT_FLUSH = "Straight Flush"
    FOUR_OF_A_KIND = "Four of a Kind"
    FULL_HOUSE = "Full House"
    FLUSH = "Flush"
    STRAIGHT = "Straight"
    THREE_OF_A_KIND = "Three of a Kind"
    TWO_PAIR = "Two Pair"
    ONE_PAIR = "One Pair"
    HIGH_CARD = "High Card"


class RevealStage(str, Enum):
    PREFLOP = "PREFLOP"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"

    @property
    def visible_count(self) -> int:
        return _VISIBLE_COUNTS[self]

    @property
    def next(self) -> "RevealStage | None":
        order = list(RevealStage)
        idx = order.index(self)
        return order[idx + 1] if idx + 1 < len(order) else None


_VISIBLE_COUNTS = {
    RevealStage.PREFLOP: 0,
    RevealStage.FLOP: 3,
    RevealStage.TURN: 4,
    RevealStage.RIVER: 5,
}


@dataclass(frozen=True)
class Deal:
    hole: Tuple[Card, ...]
    community: Tuple[Card, ...]

    def __post_init__(self) -> None:
        # Accept lists from generators but store tuples.
        object.__setattr__(self, "hole", tuple(self.hole))
        object.__setattr__(self, "community", tuple(self.community))
        if len(self.hole) != 2:
            raise ValueError(f"Deal needs 2 hole cards, got {len(self.hole)}")
        if len(self.community) != 5:
            raise ValueError(f"Deal needs 5 community cards, got {len(self.community)}")
        labels = [card.label for card in self.cards]
        if len(set(labels)) != len(labels):
            raise ValueError(f"Duplicate card in deal: {labels}")

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self.hole + self.community

    def visible_community(self, stage: RevealStage) -> Tuple[Card, ...]:
        return self.community[: stage.visible_count]


@dataclass(frozen=True)
class EvaluatedHand:
    category: HandCategory
    strength: int
    cards: Tuple[Card, ...]

    @property
    def name(self) -> str:
        return self.category.value
