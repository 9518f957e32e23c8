from __future__ import annotations

import random
from typing import List

from pokercore.cards import Card, all_cards, parse_cards
from pokercore.models import Deal

UNIVERSE = {card.label for card in all_cards()}


def cards(*labels: str) -> List[Card]:
    return parse_cards(labels)


def seeded_rngs(count: int = 200, start: int = 1_000) -> List[random.Random]:
    """A spread of seeded generators so scenario tests cover many draws."""
    return [random.Random(seed) for seed in range(start, start + count)]


def assert_valid_deal(deal: Deal) -> None:
    labels = [card.label for card in deal.cards]
    assert len(deal.hole) == 2
    assert len(deal.community) == 5
    assert len(set(labels)) == 7, f"duplicate card in {labels}"
    assert set(labels) <= UNIVERSE
