from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from pokercore.cards import Card
from pokercore.evaluator import evaluate
from pokercore.models import Deal, EvaluatedHand, RevealStage

from .scenarios import GENERATORS, SCENARIO_TYPES, ScenarioType

LOGGER = logging.getLogger("practice_session")


@dataclass
class PracticeConfig:
    seed: Optional[int] = None
    # Hands on which an unseen must-show scenario is forced, plus every Nth hand.
    forced_hands: Tuple[int, ...] = (3, 6)
    force_interval: int = 8


@dataclass
class SelectionState:
    """Per-session bookkeeping for the scenario picker. Survives new hands."""

    hand_count: int = 0
    seen_must_show: Set[str] = field(default_factory=set)


def _is_force_checkpoint(hand_count: int, config: PracticeConfig) -> bool:
    return hand_count in config.forced_hands or hand_count % config.force_interval == 0


def pick_scenario(
    state: SelectionState,
    rng: random.Random,
    config: Optional[PracticeConfig] = None,
    catalog: Sequence[ScenarioType] = SCENARIO_TYPES,
) -> ScenarioType:
    config = config or PracticeConfig()
    state.hand_count += 1

    unseen = [s for s in catalog if s.must_show and s.name not in state.seen_must_show]
    if unseen and _is_force_checkpoint(state.hand_count, config):
        forced = rng.choice(unseen)
        state.seen_must_show.add(forced.name)
        LOGGER.info("Hand %d: forcing must-show scenario %s", state.hand_count, forced.name)
        return forced

    weights = [s.weight for s in catalog]
    if sum(weights) <= 0:
        raise ValueError("Scenario catalog has no positive weights")
    # Zero weights never win a draw in random.choices.
    picked = rng.choices(list(catalog), weights=weights, k=1)[0]
    if picked.must_show:
        state.seen_must_show.add(picked.name)
    LOGGER.debug("Hand %d: picked %s", state.hand_count, picked.name)
    return picked


@dataclass
class PracticeHand:
    deal: Deal
    scenario: str
    stage: RevealStage = RevealStage.PREFLOP

    @property
    def hole(self) -> Tuple[Card, ...]:
        return self.deal.hole

    def visible_community(self) -> Tuple[Card, ...]:
        return self.deal.visible_community(self.stage)

    def visible_cards(self) -> List[Card]:
        return list(self.deal.hole) + list(self.visible_community())

    def is_complete(self) -> bool:
        return self.stage is RevealStage.RIVER

    def reveal_next(self) -> RevealStage:
        next_stage = self.stage.next
        if next_stage is None:
            raise RuntimeError("All community cards are already revealed")
        self.stage = next_stage
        return self.stage

    def current_hand(self) -> Optional[EvaluatedHand]:
        # Re-evaluated from scratch on every call.
        return evaluate(self.visible_cards())


class PracticeSession:
    """One learner's run of practice hands. Owns the must-show bookkeeping."""

    def __init__(self, config: Optional[PracticeConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or PracticeConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.state = SelectionState()
        self.hand: Optional[PracticeHand] = None

    def new_deal(self, scenario: Optional[str] = None) -> Deal:
        """Start a new hand. ``scenario`` bypasses the picker and the hand counter."""
        if scenario is None:
            name = pick_scenario(self.state, self.rng, self.config).name
        elif scenario in GENERATORS:
            name = scenario
        else:
            raise KeyError(f"Unknown scenario: {scenario}")
        deal = GENERATORS[name](self.rng)
        self.hand = PracticeHand(deal=deal, scenario=name)
        LOGGER.debug("New %s deal: %s", name, [card.label for card in deal.cards])
        return deal

    def _require_hand(self) -> PracticeHand:
        if self.hand is None:
            raise RuntimeError("No hand in progress")
        return self.hand

    def reveal_next(self) -> RevealStage:
        return self._require_hand().reveal_next()

    def current_hand(self) -> Optional[EvaluatedHand]:
        return self._require_hand().current_hand()
