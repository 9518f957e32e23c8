import argparse
import logging
from typing import Iterable, Optional

from pokercore.cards import Card
from pokercore.reference import describe

from .scenarios import GENERATORS, SCENARIO_TYPES
from .session import PracticeConfig, PracticeSession


def _fmt(cards: Iterable[Card]) -> str:
    return " ".join(card.display for card in cards) or "-"


def play_hand(session: PracticeSession, number: int, scenario: Optional[str] = None) -> None:
    session.new_deal(scenario)
    hand = session.hand
    assert hand is not None
    print(f"=== Hand {number} ({hand.scenario})")
    print(f"Your cards: {_fmt(hand.hole)}")
    while True:
        result = hand.current_hand()
        line = f"{hand.stage.value:<8} board: {_fmt(hand.visible_community())}"
        if result is not None and not hand.is_complete():
            line += f"  -> {result.name}"
        print(line)
        if hand.is_complete():
            break
        hand.reveal_next()

    assert result is not None
    info = describe(result.category)
    print(f"Final hand: {result.name}  [{_fmt(result.cards)}]")
    print(f"  {info.desc}. {info.tip}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Poker Basics practice deals")
    parser.add_argument("--hands", type=int, default=1, help="Number of practice hands to deal")
    parser.add_argument(
        "--scenario",
        choices=sorted(GENERATORS),
        default=None,
        help="Always deal this scenario instead of the weighted picker",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible deals")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--list", action="store_true", help="List the scenario catalog and exit")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    if args.list:
        for scenario in SCENARIO_TYPES:
            flag = " (must show)" if scenario.must_show else ""
            print(f"{scenario.name:<16} weight={scenario.weight}{flag}")
        return

    session = PracticeSession(PracticeConfig(seed=args.seed))
    for number in range(1, args.hands + 1):
        play_hand(session, number, args.scenario)


if __name__ == "__main__":
    main()
