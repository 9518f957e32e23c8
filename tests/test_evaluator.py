import itertools

import pytest

from pokercore.cards import all_cards, build_deck
from pokercore.evaluator import CATEGORY_BASE, ROYAL_FLUSH_STRENGTH, evaluate, evaluate_best, score_five
from pokercore.models import HandCategory

from .helpers import cards


def test_evaluate_best_identifies_all_hand_categories():
    cases = [
        (HandCategory.ROYAL_FLUSH, ["As", "Ks", "Qs", "Js", "Ts"]),
        (HandCategory.STRAIGHT_FLUSH, ["9h", "8h", "7h", "6h", "5h"]),
        (HandCategory.FOUR_OF_A_KIND, ["Ks", "Kh", "Kd", "Kc", "7s"]),
        (HandCategory.FULL_HOUSE, ["Qs", "Qh", "Qd", "9c", "9s"]),
        (HandCategory.FLUSH, ["Ad", "Jd", "8d", "6d", "2d"]),
        (HandCategory.STRAIGHT, ["Ts", "9d", "8c", "7h", "6s"]),
        (HandCategory.THREE_OF_A_KIND, ["8s", "8h", "8d", "Kc", "4s"]),
        (HandCategory.TWO_PAIR, ["Js", "Jd", "5h", "5c", "As"]),
        (HandCategory.ONE_PAIR, ["Th", "Td", "As", "7c", "3d"]),
        (HandCategory.HIGH_CARD, ["As", "Qd", "9c", "6h", "2s"]),
    ]

    for expected, labels in cases:
        result = evaluate_best(cards(*labels))
        assert result.category == expected, f"labels={labels}"
        assert result.name == expected.value


def test_royal_flush_has_maximal_strength():
    result = evaluate_best(cards("As", "Ks", "Qs", "Js", "Ts"))
    assert result.name == "Royal Flush"
    assert result.strength == ROYAL_FLUSH_STRENGTH


def test_four_of_a_kind_beats_any_full_house():
    quads = evaluate_best(cards("Ks", "Kh", "Kd", "Kc", "7s"))
    full_house = evaluate_best(cards("Qs", "Qh", "Qd", "9c", "9s"))
    best_full_house = evaluate_best(cards("As", "Ah", "Ad", "Kc", "Ks"))
    worst_quads = evaluate_best(cards("2s", "2h", "2d", "2c", "3s"))
    assert quads.category == HandCategory.FOUR_OF_A_KIND
    assert quads.strength > full_house.strength
    assert worst_quads.strength > best_full_house.strength


def test_evaluate_best_handles_wheel_straight():
    result = evaluate_best(cards("As", "2h", "3d", "4c", "5s", "9h", "9d"))
    assert result.category == HandCategory.STRAIGHT
    assert result.strength == CATEGORY_BASE[HandCategory.STRAIGHT] + 5
    assert {card.label for card in result.cards} == {"As", "2h", "3d", "4c", "5s"}


def test_wheel_ranks_below_six_high_straight():
    wheel = evaluate_best(cards("As", "2h", "3d", "4c", "5s"))
    six_high = evaluate_best(cards("2h", "3d", "4c", "5s", "6h"))
    assert six_high.strength > wheel.strength


def test_ace_does_not_wrap_around():
    result = evaluate_best(cards("Qs", "Kh", "Ad", "2c", "3s"))
    assert result.category == HandCategory.HIGH_CARD


def test_one_pair_kicker_sensitivity():
    higher = evaluate_best(cards("Th", "Td", "As", "7c", "3d"))
    lower = evaluate_best(cards("Th", "Td", "As", "7c", "2d"))
    assert higher.category == lower.category == HandCategory.ONE_PAIR
    assert higher.strength > lower.strength


def test_evaluate_best_compares_kickers_for_equal_pairs():
    hand_a = cards("Ah", "Ad", "Kc", "Qs", "9h", "2d", "3c")
    hand_b = cards("Ah", "Ad", "Qc", "Js", "8h", "2d", "3c")
    assert evaluate_best(hand_a).strength > evaluate_best(hand_b).strength


def test_two_pair_orders_by_high_pair_then_low_pair_then_kicker():
    kings_up = evaluate_best(cards("Ks", "Kd", "2h", "2c", "3s"))
    queens_up = evaluate_best(cards("Qs", "Qd", "Jh", "Jc", "As"))
    kings_threes = evaluate_best(cards("Ks", "Kd", "3h", "3c", "2s"))
    kings_threes_ace = evaluate_best(cards("Ks", "Kd", "3h", "3c", "As"))
    assert kings_up.strength > queens_up.strength
    assert kings_threes.strength > kings_up.strength
    assert kings_threes_ace.strength > kings_threes.strength


def test_full_house_prefers_trips_rank():
    threes_full = evaluate_best(cards("3s", "3h", "3d", "Ac", "As"))
    twos_full = evaluate_best(cards("2s", "2h", "2d", "Kc", "Ks"))
    assert threes_full.strength > twos_full.strength


def test_best_five_picked_from_seven_cards():
    result = evaluate_best(cards("Ah", "Kh", "2c", "Qh", "Jh", "7d", "Th"))
    assert result.category == HandCategory.ROYAL_FLUSH
    assert {card.label for card in result.cards} == {"Ah", "Kh", "Qh", "Jh", "Th"}


def test_evaluate_best_is_deterministic():
    seven = cards("Js", "Jd", "5h", "5c", "As", "9d", "2c")
    first = evaluate_best(seven)
    for _ in range(5):
        assert evaluate_best(seven) == first


def test_evaluate_returns_none_below_five_cards():
    assert evaluate([]) is None
    assert evaluate(cards("As", "Ks")) is None
    assert evaluate(cards("As", "Ks", "Qs", "Js")) is None
    assert evaluate(cards("As", "Ks", "Qs", "Js", "Ts")) is not None


def test_evaluate_best_rejects_short_input():
    with pytest.raises(ValueError, match="at least 5"):
        evaluate_best(cards("As", "Ks"))


def test_category_ranges_never_overlap():
    # Every 5-card subset of a few suits keeps strength ordering aligned with category.
    lows = {}
    highs = {}
    subset = [card for card in all_cards() if card.suit in "shd" and card.rank in "AKQJT5432"]
    for combo in itertools.combinations(subset, 5):
        category, strength = score_five(combo)
        lows[category] = min(lows.get(category, strength), strength)
        highs[category] = max(highs.get(category, strength), strength)

    weakest_first = [category for category in reversed(list(HandCategory)) if category in lows]
    assert len(weakest_first) == 9  # no quads with three suits
    for lower, upper in zip(weakest_first, weakest_first[1:]):
        assert lows[upper] > highs[lower], (lower, upper)


def test_evaluate_supports_multiple_seven_card_hands():
    deck = build_deck(seed=777)
    for idx in range(0, 42, 7):
        result = evaluate_best(deck[idx : idx + 7])
        assert result.category in HandCategory
        assert len(result.cards) == 5
