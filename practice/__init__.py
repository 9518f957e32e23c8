"""Practice deals: biased scenario generators and the session that picks them."""

from .scenarios import GENERATORS, SCENARIO_TYPES, ScenarioType, generate
from .session import PracticeConfig, PracticeHand, PracticeSession, SelectionState, pick_scenario

__all__ = [
    "GENERATORS",
    "SCENARIO_TYPES",
    "ScenarioType",
    "generate",
    "PracticeConfig",
    "PracticeHand",
    "PracticeSession",
    "SelectionState",
    "pick_scenario",
]
