from __future__ import annotations

import itertools
from typing import Dict, List, Optional, Sequence, Tuple

from .cards import Card
from .models import EvaluatedHand, HandCategory

RANK_ORDER = "23456789TJQKA"
RANK_VALUE = {rank: idx for idx, rank in enumerate(RANK_ORDER, start=2)}

# Category bases sit above the largest strength any lower category can reach.
ROYAL_FLUSH_STRENGTH = 10_000_000
CATEGORY_BASE = {
    HandCategory.STRAIGHT_FLUSH: 9_000_000,
    HandCategory.FOUR_OF_A_KIND: 8_000_000,
    HandCategory.FULL_HOUSE: 7_000_000,
    HandCategory.FLUSH: 6_000_000,
    HandCategory.STRAIGHT: 5_000_000,
    HandCategory.THREE_OF_A_KIND: 4_000_000,
    HandCategory.TWO_PAIR: 3_000_000,
    HandCategory.ONE_PAIR: 2_000_000,
    HandCategory.HIGH_CARD: 1_000_000,
}


def evaluate(cards: Sequence[Card]) -> Optional[EvaluatedHand]:
    """Best hand for the visible cards, or None before five cards are out."""
    if len(cards) < 5:
        return None
    return evaluate_best(cards)


def evaluate_best(cards: Sequence[Card]) -> EvaluatedHand:
    """Return the strongest 5-card hand among ``cards``. Higher strength is better."""
    if len(cards) < 5:
        raise ValueError(f"Need at least 5 cards to evaluate, got {len(cards)}")
    best: Optional[EvaluatedHand] = None
    for combo in itertools.combinations(cards, 5):
        category, strength = score_five(combo)
        if best is None or strength > best.strength:
            best = EvaluatedHand(category=category, strength=strength, cards=tuple(combo))
    assert best is not None
    return best


def score_five(cards: Sequence[Card]) -> Tuple[HandCategory, int]:
    if len(cards) != 5:
        raise ValueError(f"score_five expects exactly 5 cards, got {len(cards)}")
    ranks = sorted((RANK_VALUE[card.rank] for card in cards), reverse=True)
    suits = [card.suit for card in cards]

    is_flush = len(set(suits)) == 1
    straight_high = _straight_high(ranks)

    counts: Dict[int, int] = {}
    for value in ranks:
        counts.setdefault(value, 0)
        counts[value] += 1

    # Ordering by (frequency, value) carries every multi-of-a-kind tie-break.
    by_freq = [value for value, _ in sorted(counts.items(), key=lambda x: (x[1], x[0]), reverse=True)]
    count_values = sorted(counts.values(), reverse=True)

    if is_flush and straight_high == 14:
        return HandCategory.ROYAL_FLUSH, ROYAL_FLUSH_STRENGTH
    if is_flush and straight_high:
        return HandCategory.STRAIGHT_FLUSH, CATEGORY_BASE[HandCategory.STRAIGHT_FLUSH] + straight_high
    if count_values[0] == 4:
        quad_rank, kicker = by_freq[0], by_freq[1]
        return HandCategory.FOUR_OF_A_KIND, CATEGORY_BASE[HandCategory.FOUR_OF_A_KIND] + quad_rank * 100 + kicker
    if count_values[0] == 3 and count_values[1] == 2:
        trips, pair = by_freq[0], by_freq[1]
        return HandCategory.FULL_HOUSE, CATEGORY_BASE[HandCategory.FULL_HOUSE] + trips * 100 + pair
    if is_flush:
        return HandCategory.FLUSH, CATEGORY_BASE[HandCategory.FLUSH] + _weighted(ranks)
    if straight_high:
        return HandCategory.STRAIGHT, CATEGORY_BASE[HandCategory.STRAIGHT] + straight_high
    if count_values[0] == 3:
        trips, kickers = by_freq[0], by_freq[1:]
        strength = trips * 10_000 + kickers[0] * 100 + kickers[1]
        return HandCategory.THREE_OF_A_KIND, CATEGORY_BASE[HandCategory.THREE_OF_A_KIND] + strength
    if count_values[0] == 2 and count_values[1] == 2:
        pair_high = max(by_freq[0], by_freq[1])
        pair_low = min(by_freq[0], by_freq[1])
        kicker = by_freq[2]
        strength = pair_high * 10_000 + pair_low * 100 + kicker
        return HandCategory.TWO_PAIR, CATEGORY_BASE[HandCategory.TWO_PAIR] + strength
    if count_values[0] == 2:
        pair_rank, kickers = by_freq[0], by_freq[1:]
        strength = pair_rank * 10_000 + kickers[0] * 100 + kickers[1] * 10 + kickers[2]
        return HandCategory.ONE_PAIR, CATEGORY_BASE[HandCategory.ONE_PAIR] + strength
    return HandCategory.HIGH_CARD, CATEGORY_BASE[HandCategory.HIGH_CARD] + _weighted(ranks)


def _weighted(ranks: List[int]) -> int:
    return ranks[0] * 10_000 + ranks[1] * 1_000 + ranks[2] * 100 + ranks[3] * 10 + ranks[4]


def _straight_high(ranks: List[int]) -> int:
    unique = sorted(set(ranks), reverse=True)
    if len(unique) < 5:
        return 0
    for idx in range(len(unique) - 4):
        if unique[idx] - unique[idx + 4] == 4:
            return unique[idx]
    if {14, 5, 4, 3, 2}.issubset(unique):  # wheel: ace plays low only here
        return 5
    return 0
