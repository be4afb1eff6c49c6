"""
Decision Engine: rule-cascade action selection.

The engine turns the current emotional state plus the experience history
into a single Action. Stages are tried in order and the first one that
produces an action wins:

    1. DOMINANT_EMOTION  - the strongest emotion exceeds its threshold
    2. AVOIDANCE         - recent negative outcomes steer away from an action
    3. EXPLORATION       - untried actions get a confidence-weighted chance
    4. LOW_EMOTION       - a flat state is shaken up by a random action
    5. TRUST_FALLBACK    - high trust leads to seeking insight

If none fires the agent remains passive.

Random draws are consumed strictly in stage order, so a seeded RandomSource
reproduces the same decisions for the same inputs.

Usage:
    engine = DecisionEngine(state, log, rng)
    result = engine.decide()
    print(f"{result.action.value} via {result.stage.value}: {result.rationale}")
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Mapping, Optional, Sequence

from affectsim.affect.emotional_state import EmotionalState
from affectsim.affect.emotions import Emotion
from affectsim.decision.actions import (
    ACTION_ORDER,
    DOMINANT_EMOTION_ACTIONS,
    EMOTION_THRESHOLDS,
    NEGATIVE_OUTCOMES,
    Action,
)
from affectsim.utils.random_source import RandomSource

if TYPE_CHECKING:
    from affectsim.memory.experience import Experience

logger = logging.getLogger(__name__)

# Number of most recent experiences inspected by the avoidance stage
RECENT_WINDOW = 5

# Low-emotion stage: every emotion below this counts as a flat state
LOW_EMOTION_THRESHOLD = 0.2
# Probability of acting (rather than staying passive) in a flat state
BOOST_PROBABILITY = 0.8

# Trust above this leads to seekInsight when nothing else fired
TRUST_FALLBACK_THRESHOLD = 0.6

DEFAULT_ACTION = Action.REMAIN_PASSIVE


class DecisionStage(str, Enum):
    """Cascade stage that produced a decision."""

    DOMINANT_EMOTION = "dominant_emotion"
    AVOIDANCE = "avoidance"
    EXPLORATION = "exploration"
    LOW_EMOTION = "low_emotion"
    TRUST_FALLBACK = "trust_fallback"
    DEFAULT = "default"


@dataclass
class DecisionResult:
    """
    Outcome of one pass through the cascade.

    Attributes:
        action: The selected action
        stage: Which stage selected it
        rationale: Human-readable explanation
    """

    action: Action
    stage: DecisionStage
    rationale: str

    def to_dict(self) -> dict:
        """Serialize for logging."""
        return {
            "action": self.action.value,
            "stage": self.stage.value,
            "rationale": self.rationale,
        }


class DecisionEngine:
    """
    Five-stage rule cascade over emotional state and history.

    The engine reads the state and the log but never mutates them; the only
    thing it advances is the random source.

    Attributes:
        thresholds: Per-emotion stage-1 thresholds
        recent_window: Experiences inspected by the avoidance stage
        low_emotion_threshold: Ceiling for the low-emotion stage
        boost_probability: Chance of a non-passive action in a flat state
        trust_fallback_threshold: Trust level that triggers stage 5
    """

    def __init__(
        self,
        state: EmotionalState,
        history: Sequence["Experience"],
        rng: RandomSource,
        thresholds: Mapping[Emotion, float] = EMOTION_THRESHOLDS,
        recent_window: int = RECENT_WINDOW,
        low_emotion_threshold: float = LOW_EMOTION_THRESHOLD,
        boost_probability: float = BOOST_PROBABILITY,
        trust_fallback_threshold: float = TRUST_FALLBACK_THRESHOLD,
    ):
        """
        Initialize the engine.

        Args:
            state: Emotional state to read
            history: Experience log to read (oldest first)
            rng: Random source shared with the owning agent
            thresholds: Stage-1 thresholds per emotion
            recent_window: Stage-2 look-back length
            low_emotion_threshold: Stage-4 ceiling
            boost_probability: Stage-4 probability of acting
            trust_fallback_threshold: Stage-5 trust level
        """
        self.state = state
        self.history = history
        self.rng = rng
        self.thresholds = thresholds
        self.recent_window = recent_window
        self.low_emotion_threshold = low_emotion_threshold
        self.boost_probability = boost_probability
        self.trust_fallback_threshold = trust_fallback_threshold

    def decide(self) -> DecisionResult:
        """Run the cascade and return the first decision produced."""
        stages = (
            self._from_dominant_emotion,
            self._from_negative_experiences,
            self._from_exploration,
            self._from_low_emotion,
            self._from_trust,
        )
        for stage in stages:
            result = stage()
            if result is not None:
                logger.debug(f"Decision: {result.action.value} via {result.stage.value} ({result.rationale})")
                return result

        result = DecisionResult(
            action=DEFAULT_ACTION,
            stage=DecisionStage.DEFAULT,
            rationale="no stage fired",
        )
        logger.debug(f"Decision: {result.action.value} via {result.stage.value}")
        return result

    def _from_dominant_emotion(self) -> Optional[DecisionResult]:
        """Stage 1: act on a dominant emotion above its threshold."""
        dominant = self.state.dominant()
        if dominant is None:
            return None

        emotion, value = dominant
        threshold = self.thresholds.get(emotion)
        if threshold is None or value <= threshold:
            return None

        return DecisionResult(
            action=DOMINANT_EMOTION_ACTIONS[emotion],
            stage=DecisionStage.DOMINANT_EMOTION,
            rationale=f"{emotion.value} at {value:.2f} exceeds {threshold:.2f}",
        )

    def _from_negative_experiences(self) -> Optional[DecisionResult]:
        """Stage 2: avoid the action most associated with recent bad outcomes."""
        recent = self.history[-self.recent_window:] if self.recent_window > 0 else ()
        avoidance = Counter(
            experience.action for experience in recent if experience.outcome in NEGATIVE_OUTCOMES
        )
        if not avoidance:
            return None

        # Highest count wins; ties go to the action declared first
        top = max(avoidance.values())
        to_avoid = next(action for action in ACTION_ORDER if avoidance.get(action) == top)

        candidates = [action for action in ACTION_ORDER if action != to_avoid]
        chosen = self.rng.choice(candidates)
        return DecisionResult(
            action=chosen,
            stage=DecisionStage.AVOIDANCE,
            rationale=f"avoiding {to_avoid.value} after {top} negative outcome(s)",
        )

    def _from_exploration(self) -> Optional[DecisionResult]:
        """Stage 3: give untried actions a chance that shrinks with uncertainty."""
        tried = {experience.action for experience in self.history}
        untried = [action for action in ACTION_ORDER if action not in tried]
        if not untried:
            return None

        confidence = 1.0 - len(untried) / (len(self.history) + 1)
        p_explore = len(untried) / len(ACTION_ORDER) * confidence
        draw = self.rng.next_float()
        if draw >= p_explore:
            return None

        chosen = self.rng.choice(untried)
        return DecisionResult(
            action=chosen,
            stage=DecisionStage.EXPLORATION,
            rationale=f"{len(untried)} untried action(s), p={p_explore:.2f}",
        )

    def _from_low_emotion(self) -> Optional[DecisionResult]:
        """Stage 4: break out of a flat emotional state."""
        if not self.state.all_below(self.low_emotion_threshold):
            return None

        if self.rng.next_float() < self.boost_probability:
            candidates = [action for action in ACTION_ORDER if action != Action.REMAIN_PASSIVE]
            return DecisionResult(
                action=self.rng.choice(candidates),
                stage=DecisionStage.LOW_EMOTION,
                rationale="all emotions low, boosting activity",
            )

        return DecisionResult(
            action=Action.REMAIN_PASSIVE,
            stage=DecisionStage.LOW_EMOTION,
            rationale="all emotions low, staying passive",
        )

    def _from_trust(self) -> Optional[DecisionResult]:
        """Stage 5: high trust leads to seeking insight."""
        trust = self.state.value(Emotion.TRUST)
        if trust > self.trust_fallback_threshold:
            return DecisionResult(
                action=Action.SEEK_INSIGHT,
                stage=DecisionStage.TRUST_FALLBACK,
                rationale=f"trust at {trust:.2f}",
            )
        return None
