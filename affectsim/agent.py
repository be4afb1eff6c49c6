"""
Agent: the stimulus -> emotion -> decision -> feedback pipeline.

One call to respond() runs a full interaction:

    1. Resolve the stimulus through the lexicon and apply its deltas
    2. Ask the decision engine for an action
    3. Sample an outcome from the action's feedback
    4. Apply the action's emotional impact
    5. Generate a reflection and record the experience

The agent exclusively owns its emotional state, experience log and random
source. It is meant to be driven by a single sequential caller.

Usage:
    agent = Agent(seed=42)
    response = agent.respond("A")
    print(response.reflection.message)
    print(agent.summary_report(limit=2))
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from affectsim.affect.emotional_state import EmotionalState
from affectsim.affect.emotions import Emotion
from affectsim.affect.lexicon import Lexicon
from affectsim.config import AgentConfig
from affectsim.decision.actions import (
    ACTION_CATALOG,
    EMOTION_THRESHOLDS,
    UNPREDICTABLE_OUTCOME,
    Action,
    ActionFeedback,
)
from affectsim.decision.engine import DecisionEngine, DecisionResult
from affectsim.memory.experience import Experience, ExperienceLog
from affectsim.reporting.summary import build_summary
from affectsim.reporting.visualization import render_html_report
from affectsim.utils.random_source import RandomSource

logger = logging.getLogger(__name__)

MISSING_FEEDBACK_REFLECTION = "Missing feedback triggered passive stance."


@dataclass(frozen=True)
class Reflection:
    """Sentence summarizing one interaction.

    Attributes:
        message: The reflection text
        emphasis_emotion: Dominant emotion it refers to, if any
    """

    message: str
    emphasis_emotion: Optional[Emotion] = None


@dataclass(frozen=True)
class Response:
    """Result of one respond() call."""

    action: Action
    outcome: str
    reflection: Reflection
    decision: Optional[DecisionResult] = None

    def __iter__(self):
        # Unpacks as (action, outcome, reflection)
        return iter((self.action, self.outcome, self.reflection))


class Agent:
    """
    Emotional agent with a bounded state and an append-only memory.

    Attributes:
        config: Construction parameters
        lexicon: Effective stimulus lexicon (defaults plus overlay)
        catalog: Feedback profile per action
        thresholds: Stage-1 decision thresholds per emotion
        rng: The agent's random source
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        lexicon: Optional[Mapping[str, Mapping]] = None,
        config: Optional[AgentConfig] = None,
        catalog: Mapping[Action, ActionFeedback] = ACTION_CATALOG,
    ):
        """
        Initialize the agent with a neutral state and empty memory.

        Args:
            seed: Random source seed (overrides config.seed when given)
            lexicon: Overlay for the default lexicon (overrides config.lexicon)
            config: Full configuration; defaults used when omitted
            catalog: Action feedback table
        """
        config = config or AgentConfig()
        if seed is not None:
            config = replace(config, seed=seed)
        if lexicon is not None:
            config = replace(config, lexicon=lexicon)
        self.config = config

        self.lexicon = Lexicon(config.lexicon)
        self.catalog = MappingProxyType(dict(catalog))
        self.thresholds = EMOTION_THRESHOLDS
        self.rng = RandomSource(config.seed)

        self._state = EmotionalState()
        self._log = ExperienceLog()
        self._engine = DecisionEngine(
            state=self._state,
            history=self._log,
            rng=self.rng,
            thresholds=self.thresholds,
            recent_window=config.recent_window,
            low_emotion_threshold=config.low_emotion_threshold,
            boost_probability=config.boost_probability,
            trust_fallback_threshold=config.trust_fallback_threshold,
        )
        logger.debug(f"Agent initialized with {self.rng!r}, {len(self.lexicon)} lexicon entries")

    @property
    def seed(self) -> int:
        """Seed actually in use (drawn from entropy when none was given)."""
        return self.rng.seed

    def respond(self, stimulus: str) -> Response:
        """Run one full interaction for a stimulus.

        Args:
            stimulus: Input string (a lexicon key or any text)

        Returns:
            Response with the chosen action, sampled outcome and reflection
        """
        changes = self.lexicon.resolve(stimulus)
        self._state.apply(changes)

        decision = self._engine.decide()
        action = decision.action

        feedback = self.catalog.get(action)
        if feedback is None:
            logger.error(f"No feedback defined for action {action.value}; falling back to passive stance")
            return Response(
                action=Action.REMAIN_PASSIVE,
                outcome=UNPREDICTABLE_OUTCOME,
                reflection=Reflection(message=MISSING_FEEDBACK_REFLECTION),
                decision=decision,
            )

        outcome = self.rng.choice(feedback.likely_outcomes)
        self._state.apply(feedback.emotional_impact)

        reflection = self._reflect(stimulus, action, outcome)
        self._log.record(
            input=stimulus,
            emotion_changes=changes,
            action=action,
            outcome=outcome,
            reflection=reflection.message,
        )

        logger.debug(f"Input: {stimulus}, Response: {action.value}, Outcome: {outcome}, Emotions: {self._state!r}")
        logger.debug(f"Reflection: {reflection.message}")
        return Response(action=action, outcome=outcome, reflection=reflection, decision=decision)

    def respond_all(self, stimuli: Iterable[str]) -> list[Response]:
        """Respond to each stimulus in order."""
        return [self.respond(stimulus) for stimulus in stimuli]

    def _reflect(self, stimulus: str, action: Action, outcome: str) -> Reflection:
        """Describe the interaction in terms of the (post-feedback) dominant emotion."""
        dominant = self._state.dominant()
        if dominant is None:
            return Reflection(
                message=(
                    f"Processing {stimulus} left my state balanced. "
                    f"Action {action.value} produced {outcome}."
                ),
            )
        emotion, value = dominant
        return Reflection(
            message=(
                f"After processing {stimulus}, I sense {emotion.value} at {value:.2f}. "
                f"The action {action.value} yielded {outcome}."
            ),
            emphasis_emotion=emotion,
        )

    def emotional_state(self) -> dict[Emotion, float]:
        """Snapshot of the current emotion intensities."""
        return self._state.as_dict()

    @property
    def state(self) -> EmotionalState:
        """The live emotional state (read it, do not mutate it)."""
        return self._state

    def experiences(self) -> tuple[Experience, ...]:
        """All recorded experiences, oldest first."""
        return tuple(self._log)

    @property
    def log(self) -> ExperienceLog:
        """The agent's experience log."""
        return self._log

    def summary_report(self, limit: Optional[int] = None) -> str:
        """Emotional-state headline plus up to `limit` recent experiences.

        Args:
            limit: Experiences to list (defaults to config.history_limit)
        """
        if limit is None:
            limit = self.config.history_limit
        return build_summary(self._state, self._log.recent(limit))

    def export_experiences(self, path: Union[str, Path]) -> Path:
        """Write the full log as pretty-printed, key-sorted JSON.

        Raises:
            OSError: If the file cannot be written
        """
        return self._log.export(path)

    def export_summary(self, path: Union[str, Path], limit: Optional[int] = None) -> Path:
        """Write the summary report (at least one experience listed) to a text file.

        Raises:
            OSError: If the file cannot be written
        """
        if limit is None:
            limit = self.config.history_limit
        path = Path(path)
        path.write_text(self.summary_report(limit=max(limit, 1)), encoding="utf-8")
        logger.info(f"Summary exported to {path}")
        return path

    def export_visualization(self, path: Union[str, Path]) -> Path:
        """Write the HTML experience report.

        Raises:
            OSError: If the file cannot be written
        """
        path = Path(path)
        path.write_text(render_html_report(self.experiences()), encoding="utf-8")
        logger.info(f"Visualization exported to {path}")
        return path
