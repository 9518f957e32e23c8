"""Card primitives and hand evaluation shared by the practice engine."""

from .cards import (
    Card,
    RANKS,
    SUITS,
    all_cards,
    build_deck,
    deal,
    parse_cards,
    parse_label,
    random_card,
    sample_remaining,
)
from .evaluator import evaluate, evaluate_best, score_five
from .models import Deal, EvaluatedHand, HandCategory, RevealStage
from .reference import HAND_RANKINGS, describe

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "all_cards",
    "build_deck",
    "deal",
    "parse_cards",
    "parse_label",
    "random_card",
    "sample_remaining",
    "evaluate",
    "evaluate_best",
    "score_five",
    "Deal",
    "EvaluatedHand",
    "HandCategory",
    "RevealStage",
    "HAND_RANKINGS",
    "describe",
]
