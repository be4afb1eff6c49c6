"""Action selection: the action catalog and the rule-cascade decision engine."""

from affectsim.decision.actions import (
    ACTION_CATALOG,
    ACTION_ORDER,
    EMOTION_THRESHOLDS,
    NEGATIVE_OUTCOMES,
    Action,
    ActionFeedback,
)
from affectsim.decision.engine import (
    DecisionEngine,
    DecisionResult,
    DecisionStage,
)

__all__ = [
    "ACTION_CATALOG",
    "ACTION_ORDER",
    "EMOTION_THRESHOLDS",
    "NEGATIVE_OUTCOMES",
    "Action",
    "ActionFeedback",
    "DecisionEngine",
    "DecisionResult",
    "DecisionStage",
]
