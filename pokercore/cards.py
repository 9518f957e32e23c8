from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

RANKS = "AKQJT98765432"
SUITS = "shdc"
SUIT_SYMBOLS = {"s": "♠", "h": "♥", "d": "♦", "c": "♣"}

_SYMBOL_SUITS = {symbol: suit for suit, symbol in SUIT_SYMBOLS.items()}


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        """Identity key, unique per card (e.g. ``Th``)."""
        return f"{self.rank}{self.suit}"

    @property
    def display(self) -> str:
        rank = "10" if self.rank == "T" else self.rank
        return f"{rank}{SUIT_SYMBOLS[self.suit]}"

    def __str__(self) -> str:
        return self.display


def all_cards() -> List[Card]:
    return [Card(rank, suit) for suit in SUITS for rank in RANKS]


def build_deck(seed: Optional[int] = None) -> List[Card]:
    rng = random.Random(seed)
    deck = all_cards()
    rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise ValueError("Not enough cards left in deck")
    cards = deck[:count]
    del deck[:count]
    return cards


def _used_labels(used: Iterable[Card]) -> set[str]:
    return {card.label for card in used}


def random_card(
    used: Iterable[Card],
    rng: random.Random,
    ranks: Optional[Iterable[str]] = None,
    suits: Optional[Iterable[str]] = None,
) -> Card:
    """Pick one unused card uniformly, optionally restricted to some ranks/suits."""
    taken = _used_labels(used)
    rank_pool = set(ranks) if ranks is not None else set(RANKS)
    suit_pool = set(suits) if suits is not None else set(SUITS)
    candidates = [
        card
        for card in all_cards()
        if card.label not in taken and card.rank in rank_pool and card.suit in suit_pool
    ]
    if not candidates:
        raise ValueError("No card left matching constraints")
    return rng.choice(candidates)


def sample_remaining(used: Iterable[Card], count: int, rng: random.Random) -> List[Card]:
    """Shuffle the cards not in ``used`` and return the first ``count`` of them."""
    taken = _used_labels(used)
    available = [card for card in all_cards() if card.label not in taken]
    if len(available) < count:
        raise ValueError("Not enough cards remaining")
    rng.shuffle(available)
    return available[:count]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    """Parse ``Th``, ``10h`` or ``10♥`` style labels."""
    if len(label) not in (2, 3):
        raise ValueError(f"Invalid card label: {label}")
    rank, suit = label[:-1], label[-1]
    if rank == "10":
        rank = "T"
    if len(rank) != 1:
        raise ValueError(f"Invalid card label: {label}")
    suit = _SYMBOL_SUITS.get(suit, suit)
    return Card(rank, suit)


def parse_cards(labels: Iterable[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
