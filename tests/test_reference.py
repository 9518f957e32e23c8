from pokercore.evaluator import evaluate_best
from pokercore.models import HandCategory
from pokercore.reference import HAND_RANKINGS, describe


def test_rankings_follow_category_order():
    assert [entry.category for entry in HAND_RANKINGS] == list(HandCategory)
    assert [entry.rank for entry in HAND_RANKINGS] == list(range(1, 11))


def test_every_example_evaluates_to_its_category():
    for entry in HAND_RANKINGS:
        assert evaluate_best(entry.example_cards).category == entry.category, entry.example


def test_examples_strength_decreases_down_the_table():
    strengths = [evaluate_best(entry.example_cards).strength for entry in HAND_RANKINGS]
    assert strengths == sorted(strengths, reverse=True)


def test_describe_accepts_category_names():
    assert describe(HandCategory.FULL_HOUSE).desc == "3 of a kind + a pair"
    assert describe("Straight").tip.startswith("Ace can be high")
