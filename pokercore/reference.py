"""Hand-ranking reference shown next to practice results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .cards import Card, parse_cards
from .models import HandCategory


@dataclass(frozen=True)
class HandReference:
    rank: int
    category: HandCategory
    desc: str
    example: Tuple[str, ...]
    tip: str

    @property
    def example_cards(self) -> List[Card]:
        return parse_cards(self.example)


HAND_RANKINGS: List[HandReference] = [
    HandReference(1, HandCategory.ROYAL_FLUSH, "A K Q J 10 same suit",
                  ("As", "Ks", "Qs", "Js", "Ts"), "The best possible hand. Extremely rare."),
    HandReference(2, HandCategory.STRAIGHT_FLUSH, "5 in a row, same suit",
                  ("9h", "8h", "7h", "6h", "5h"), "Five sequential cards of the same suit."),
    HandReference(3, HandCategory.FOUR_OF_A_KIND, "4 of the same card",
                  ("Ks", "Kh", "Kd", "Kc", "7s"), "Four cards of the same rank."),
    HandReference(4, HandCategory.FULL_HOUSE, "3 of a kind + a pair",
                  ("Qs", "Qh", "Qd", "9c", "9s"), "Three of a kind plus a pair."),
    HandReference(5, HandCategory.FLUSH, "5 cards same suit",
                  ("Ad", "Jd", "8d", "6d", "2d"), "Any five cards of the same suit."),
    HandReference(6, HandCategory.STRAIGHT, "5 in a row",
                  ("Ts", "9d", "8c", "7h", "6s"), "Ace can be high (AKQJ10) or low (A2345)."),
    HandReference(7, HandCategory.THREE_OF_A_KIND, "3 of the same card",
                  ("8s", "8h", "8d", "Kc", "4s"), "Three cards of the same rank."),
    HandReference(8, HandCategory.TWO_PAIR, "2 different pairs",
                  ("Js", "Jd", "5h", "5c", "As"), "Two different pairs of cards."),
    HandReference(9, HandCategory.ONE_PAIR, "2 of the same card",
                  ("Th", "Td", "As", "7c", "3d"), "Two cards of the same rank."),
    HandReference(10, HandCategory.HIGH_CARD, "Nothing. Highest card wins.",
                  ("As", "Qd", "9c", "6h", "2s"), "When no one has a pair or better."),
]

_BY_CATEGORY: Dict[HandCategory, HandReference] = {entry.category: entry for entry in HAND_RANKINGS}


def describe(category: HandCategory) -> HandReference:
    return _BY_CATEGORY[HandCategory(category)]
