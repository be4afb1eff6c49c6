"""Actions the agent can take and the feedback each one produces.

Every action has a fixed feedback profile: a list of narrative outcomes
(one is sampled per response) and an emotional impact applied after the
action is chosen.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from affectsim.affect.emotions import Emotion, EmotionDeltaMap, freeze_delta_map


class Action(str, Enum):
    """Behaviors available to the agent, in declaration (tie-break) order."""

    SEEK_COMFORT = "seekComfort"
    EXPLORE = "explore"
    REMAIN_PASSIVE = "remainPassive"
    INQUIRE = "inquire"
    EXPRESS_ANGER = "expressAnger"
    SEEK_INSIGHT = "seekInsight"


ACTION_ORDER: tuple[Action, ...] = tuple(Action)


@dataclass(frozen=True)
class ActionFeedback:
    """Consequences of taking an action.

    Attributes:
        likely_outcomes: Candidate outcome strings (non-empty)
        emotional_impact: Deltas applied to the state after the action
    """

    likely_outcomes: tuple[str, ...]
    emotional_impact: EmotionDeltaMap = field(default_factory=dict)

    def __post_init__(self):
        if not self.likely_outcomes:
            raise ValueError("ActionFeedback needs at least one outcome")
        object.__setattr__(self, "likely_outcomes", tuple(self.likely_outcomes))
        object.__setattr__(self, "emotional_impact", freeze_delta_map(self.emotional_impact))


ACTION_CATALOG: Mapping[Action, ActionFeedback] = MappingProxyType({
    Action.SEEK_COMFORT: ActionFeedback(
        likely_outcomes=("Reduced fear", "Temporary relief", "Feeling of security", "Restored trust"),
        emotional_impact={Emotion.FEAR: -0.4, Emotion.JOY: 0.2, Emotion.TRUST: 0.3},
    ),
    Action.EXPLORE: ActionFeedback(
        likely_outcomes=("New knowledge", "Excitement", "Potential danger", "Unforeseen consequences"),
        emotional_impact={Emotion.JOY: 0.5, Emotion.CURIOSITY: 0.6, Emotion.FEAR: 0.3},
    ),
    Action.REMAIN_PASSIVE: ActionFeedback(
        likely_outcomes=("No immediate change", "Missed opportunity", "Feeling of stagnation"),
        emotional_impact={Emotion.SADNESS: 0.2, Emotion.CURIOSITY: -0.2, Emotion.ANGER: 0.05},
    ),
    Action.INQUIRE: ActionFeedback(
        likely_outcomes=("Information gained", "Confusion", "Irritation in others", "Clarification"),
        emotional_impact={
            Emotion.CURIOSITY: 0.4,
            Emotion.JOY: 0.3,
            Emotion.ANGER: 0.15,
            Emotion.FEAR: 0.05,
            Emotion.TRUST: 0.25,
        },
    ),
    Action.EXPRESS_ANGER: ActionFeedback(
        likely_outcomes=("Release of tension", "Negative reaction", "Understanding from others"),
        emotional_impact={Emotion.ANGER: -0.3, Emotion.FEAR: 0.4, Emotion.SADNESS: 0.3, Emotion.JOY: 0.1},
    ),
    Action.SEEK_INSIGHT: ActionFeedback(
        likely_outcomes=("Deeper self-understanding", "Strategic clarity", "Renewed trust"),
        emotional_impact={
            Emotion.CURIOSITY: 0.25,
            Emotion.JOY: 0.2,
            Emotion.SADNESS: -0.25,
            Emotion.TRUST: 0.4,
        },
    ),
})

# Stage-1 thresholds: the dominant emotion must strictly exceed its value
EMOTION_THRESHOLDS: Mapping[Emotion, float] = MappingProxyType({
    Emotion.FEAR: 0.75,
    Emotion.CURIOSITY: 0.65,
    Emotion.JOY: 0.55,
    Emotion.TRUST: 0.50,
    Emotion.ANGER: 0.45,
    Emotion.SADNESS: 0.30,
})

# Action taken when a given emotion dominates above its threshold
DOMINANT_EMOTION_ACTIONS: Mapping[Emotion, Action] = MappingProxyType({
    Emotion.FEAR: Action.SEEK_COMFORT,
    Emotion.CURIOSITY: Action.EXPLORE,
    Emotion.JOY: Action.EXPLORE,
    Emotion.ANGER: Action.EXPRESS_ANGER,
    Emotion.SADNESS: Action.SEEK_INSIGHT,
    Emotion.TRUST: Action.INQUIRE,
})

# Outcomes counted as negative by the avoidance stage. Only "Negative
# reaction" actually occurs in the catalog above.
NEGATIVE_OUTCOMES = frozenset({"Danger", "Minor setback", "Negative reaction"})

UNPREDICTABLE_OUTCOME = "Unpredictable outcome"
