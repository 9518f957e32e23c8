from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from pokercore.cards import RANKS, SUITS, Card, build_deck, deal, random_card, sample_remaining
from pokercore.models import Deal

LOGGER = logging.getLogger("practice_scenarios")

# Chance that a draw scenario gets its completing card on the turn.
FLUSH_DRAW_HIT = 0.6
STRAIGHT_DRAW_HIT = 0.65

PREMIUM_RANKS = "AKQJ"
ROYAL_RANKS = "AKQJT"

Generator = Callable[[random.Random], Deal]


@dataclass(frozen=True)
class ScenarioType:
    name: str
    weight: int
    generator: Generator
    must_show: bool = False


# Drawing helpers ---------------------------------------------------------


def _take(
    used: List[Card],
    rng: random.Random,
    ranks: Optional[Iterable[str]] = None,
    suits: Optional[Iterable[str]] = None,
) -> Card:
    card = random_card(used, rng, ranks=ranks, suits=suits)
    used.append(card)
    return card


def _other_ranks(*excluded: str) -> List[str]:
    return [rank for rank in RANKS if rank not in excluded]


def _other_suits(*excluded: str) -> List[str]:
    return [suit for suit in SUITS if suit not in excluded]


def _rank_run(rng: random.Random, length: int, low: int = 1, high: int = 8) -> Tuple[int, str]:
    """Consecutive ranks starting at a random index of RANKS (high to low)."""
    while True:
        start = rng.randint(low, high)
        run = RANKS[start : start + length]
        if len(run) == length:
            return start, run
        LOGGER.debug("Rank run from index %d too short, redrawing", start)


def _finish(hole: List[Card], flop: List[Card], rng: random.Random, shuffle_flop: bool = True) -> Deal:
    if shuffle_flop:
        rng.shuffle(flop)
    rest = sample_remaining(hole + flop, 2, rng)
    return Deal(hole=hole, community=flop + rest)


# Flop builders shared by the catalog and the evolving hand -----------------


def _pair_flop(rng: random.Random) -> Tuple[List[Card], List[Card]]:
    used: List[Card] = []
    rank = rng.choice(RANKS)
    hole = [_take(used, rng, ranks=[rank]), _take(used, rng, ranks=_other_ranks(rank))]
    flop = [
        _take(used, rng, ranks=[rank]),
        _take(used, rng, ranks=_other_ranks(rank, hole[1].rank)),
        _take(used, rng, ranks=_other_ranks(rank, hole[1].rank)),
    ]
    return hole, flop


def _two_pair_flop(rng: random.Random) -> Tuple[List[Card], List[Card]]:
    used: List[Card] = []
    rank1, rank2 = rng.sample(RANKS, 2)
    hole = [_take(used, rng, ranks=[rank1]), _take(used, rng, ranks=[rank2])]
    flop = [
        _take(used, rng, ranks=[rank1]),
        _take(used, rng, ranks=[rank2]),
        _take(used, rng, ranks=_other_ranks(rank1, rank2)),
    ]
    return hole, flop


def _set_flop(rng: random.Random, ranks: str) -> Tuple[List[Card], List[Card]]:
    rank = rng.choice(ranks)
    suits = rng.sample(SUITS, 3)
    hole = [Card(rank, suits[0]), Card(rank, suits[1])]
    third = Card(rank, suits[2])
    used = hole + [third]
    flop = [
        third,
        _take(used, rng, ranks=_other_ranks(rank)),
        _take(used, rng, ranks=_other_ranks(rank)),
    ]
    return hole, flop


def _full_house_flop(rng: random.Random) -> Tuple[List[Card], List[Card]]:
    trip_rank, pair_rank = rng.sample(RANKS, 2)
    trip_suits = rng.sample(SUITS, 3)
    pair_suits = rng.sample(SUITS, 2)
    hole = [Card(trip_rank, trip_suits[0]), Card(trip_rank, trip_suits[1])]
    flop = [
        Card(trip_rank, trip_suits[2]),
        Card(pair_rank, pair_suits[0]),
        Card(pair_rank, pair_suits[1]),
    ]
    return hole, flop


def _quads_flop(rng: random.Random) -> Tuple[List[Card], List[Card]]:
    rank = rng.choice(RANKS)
    suits = rng.sample(SUITS, 4)
    hole = [Card(rank, suits[0]), Card(rank, suits[1])]
    board_quads = [Card(rank, suits[2]), Card(rank, suits[3])]
    kicker = random_card(hole + board_quads, rng, ranks=_other_ranks(rank))
    return hole, board_quads + [kicker]


def _suited_run(rng: random.Random, ranks: str) -> Deal:
    # Two of the run in the hole, the other three make the flop.
    suit = rng.choice(SUITS)
    hole_ranks = rng.sample(ranks, 2)
    hole = [Card(rank, suit) for rank in hole_ranks]
    flop = [Card(rank, suit) for rank in ranks if rank not in hole_ranks]
    return _finish(hole, flop, rng)


# Catalog generators -----------------------------------------------------


def generate_royal_flush(rng: random.Random) -> Deal:
    return _suited_run(rng, ROYAL_RANKS)


def generate_straight_flush(rng: random.Random) -> Deal:
    # Index 0 would be the royal flush, so runs top out at king high.
    _, run = _rank_run(rng, 5)
    return _suited_run(rng, run)


def generate_four_of_a_kind(rng: random.Random) -> Deal:
    return _finish(*_quads_flop(rng), rng)


def generate_full_house(rng: random.Random) -> Deal:
    return _finish(*_full_house_flop(rng), rng)


def generate_flush_draw(rng: random.Random) -> Deal:
    suit = rng.choice(SUITS)
    ranks = rng.sample(RANKS, 4)
    off_suits = _other_suits(suit)
    hole = [Card(ranks[0], suit), Card(ranks[1], suit)]
    flop = [Card(ranks[2], suit), Card(ranks[3], suit)]
    used = hole + flop
    flop.append(_take(used, rng, ranks=_other_ranks(*ranks), suits=off_suits))
    rng.shuffle(flop)

    if rng.random() < FLUSH_DRAW_HIT:
        turn = _take(used, rng, suits=[suit])
        river = _take(used, rng)
    else:
        turn = _take(used, rng, suits=off_suits)
        river = _take(used, rng, suits=off_suits)
    return Deal(hole=hole, community=flop + [turn, river])


def generate_straight_draw(rng: random.Random) -> Deal:
    start, run = _rank_run(rng, 4)
    low = run[::-1]
    used: List[Card] = []
    hole = [_take(used, rng, ranks=[low[0]]), _take(used, rng, ranks=[low[1]])]
    flop = [
        _take(used, rng, ranks=[low[2]]),
        _take(used, rng, ranks=[low[3]]),
        _take(used, rng, ranks=_other_ranks(*run)),
    ]
    rng.shuffle(flop)

    if rng.random() < STRAIGHT_DRAW_HIT:
        # Both ends exist for every start index the run can take.
        outs = [RANKS[start - 1], RANKS[start + len(run)]]
        turn = _take(used, rng, ranks=[rng.choice(outs)])
        river = _take(used, rng)
    else:
        turn, river = sample_remaining(used, 2, rng)
    return Deal(hole=hole, community=flop + [turn, river])


def generate_set_on_flop(rng: random.Random) -> Deal:
    return _finish(*_set_flop(rng, RANKS[1:]), rng)


def generate_two_pair(rng: random.Random) -> Deal:
    return _finish(*_two_pair_flop(rng), rng)


def generate_premium_pair(rng: random.Random) -> Deal:
    rank = rng.choice(PREMIUM_RANKS)
    suits = rng.sample(SUITS, 2)
    hole = [Card(rank, suits[0]), Card(rank, suits[1])]
    return Deal(hole=hole, community=sample_remaining(hole, 5, rng))


def generate_suited_connectors(rng: random.Random) -> Deal:
    suit = rng.choice(SUITS)
    start = rng.randint(2, 9)
    hole = [Card(RANKS[start], suit), Card(RANKS[start + 1], suit)]
    return Deal(hole=hole, community=sample_remaining(hole, 5, rng))


def generate_random(rng: random.Random) -> Deal:
    deck = build_deck(rng.getrandbits(32))
    hole = deal(deck, 2)
    return Deal(hole=hole, community=deal(deck, 5))


# Evolving hand ----------------------------------------------------------


def _evolving_pair(rng: random.Random) -> Deal:
    return _finish(*_pair_flop(rng), rng, shuffle_flop=False)


def _evolving_two_pair(rng: random.Random) -> Deal:
    return _finish(*_two_pair_flop(rng), rng, shuffle_flop=False)


def _evolving_trips(rng: random.Random) -> Deal:
    return _finish(*_set_flop(rng, RANKS), rng, shuffle_flop=False)


def _evolving_straight(rng: random.Random) -> Deal:
    _, run = _rank_run(rng, 5)
    low = run[::-1]
    used: List[Card] = []
    hole = [_take(used, rng, ranks=[low[0]]), _take(used, rng, ranks=[low[1]])]
    flop = [
        _take(used, rng, ranks=[low[2]]),
        _take(used, rng, ranks=[low[3]]),
        _take(used, rng, ranks=_other_ranks(*run)),
    ]
    turn = _take(used, rng, ranks=_other_ranks(*run))
    river = _take(used, rng, ranks=[low[4]])
    return Deal(hole=hole, community=flop + [turn, river])


def _evolving_flush(rng: random.Random) -> Deal:
    suit = rng.choice(SUITS)
    ranks = rng.sample(RANKS, 5)
    off_suits = _other_suits(suit)
    hole = [Card(ranks[0], suit), Card(ranks[1], suit)]
    flop = [Card(ranks[2], suit), Card(ranks[3], suit)]
    used = hole + flop
    flop.append(_take(used, rng, ranks=_other_ranks(*ranks), suits=off_suits))
    turn = _take(used, rng, ranks=_other_ranks(*ranks), suits=off_suits)
    river = Card(ranks[4], suit)
    return Deal(hole=hole, community=flop + [turn, river])


def _evolving_full_house(rng: random.Random) -> Deal:
    return _finish(*_full_house_flop(rng), rng, shuffle_flop=False)


def _evolving_quads(rng: random.Random) -> Deal:
    return _finish(*_quads_flop(rng), rng, shuffle_flop=False)


# Upper bound of each roll bucket out of 100, roughly how often a hand that
# sees the river ends up in that category.
EVOLVING_DISTRIBUTION: List[Tuple[int, str, Generator]] = [
    (40, "One Pair", _evolving_pair),
    (65, "Two Pair", _evolving_two_pair),
    (80, "Three of a Kind", _evolving_trips),
    (88, "Straight", _evolving_straight),
    (94, "Flush", _evolving_flush),
    (98, "Full House", _evolving_full_house),
    (100, "Four of a Kind", _evolving_quads),
]


def generate_evolving_hand(rng: random.Random) -> Deal:
    roll = rng.random() * 100
    for bound, target, builder in EVOLVING_DISTRIBUTION:
        if roll < bound:
            LOGGER.debug("Evolving hand roll %.2f -> %s", roll, target)
            return builder(rng)
    return EVOLVING_DISTRIBUTION[-1][2](rng)


SCENARIO_TYPES: List[ScenarioType] = [
    # Rare hands are never drawn by weight; the session forces them once.
    ScenarioType("Royal Flush", 0, generate_royal_flush, must_show=True),
    ScenarioType("Straight Flush", 0, generate_straight_flush, must_show=True),
    ScenarioType("Four of a Kind", 10, generate_four_of_a_kind),
    ScenarioType("Full House", 10, generate_full_house),
    ScenarioType("Flush", 10, generate_flush_draw),
    ScenarioType("Straight", 10, generate_straight_draw),
    ScenarioType("Three of a Kind", 10, generate_set_on_flop),
    ScenarioType("Two Pair", 10, generate_two_pair),
    ScenarioType("One Pair", 10, generate_premium_pair),
    ScenarioType("Evolving Hand", 25, generate_evolving_hand),
]

GENERATORS: Dict[str, Generator] = {scenario.name: scenario.generator for scenario in SCENARIO_TYPES}
GENERATORS["Suited Connectors"] = generate_suited_connectors
GENERATORS["Random"] = generate_random


def generate(name: str, rng: random.Random) -> Deal:
    try:
        generator = GENERATORS[name]
    except KeyError:
        raise KeyError(f"Unknown scenario: {name}") from None
    return generator(rng)
