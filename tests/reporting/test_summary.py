"""Tests for the plain-text summary report."""

from affectsim.affect.emotional_state import EmotionalState
from affectsim.affect.emotions import Emotion
from affectsim.decision.actions import Action
from affectsim.memory.experience import ExperienceLog
from affectsim.reporting.summary import (
    NO_EXPERIENCES_LINE,
    RECENT_HEADER,
    build_summary,
    format_emotion_headline,
)


class TestHeadline:
    """Tests for format_emotion_headline()."""

    def test_neutral_state_in_declaration_order(self):
        """Equal values keep declaration order."""
        assert format_emotion_headline(EmotionalState()) == (
            "Emotional state — Joy: 0.00, Curiosity: 0.00, Sadness: 0.00, "
            "Fear: 0.00, Anger: 0.00, Trust: 0.00"
        )

    def test_sorted_by_intensity(self):
        """Strongest emotion first, two decimals."""
        state = EmotionalState({Emotion.FEAR: 0.6, Emotion.TRUST: 0.25})
        headline = format_emotion_headline(state)
        assert headline.startswith("Emotional state — Fear: 0.60, Trust: 0.25, Joy: 0.00")


class TestBuildSummary:
    """Tests for build_summary()."""

    def test_empty_history(self):
        """No experiences produces the placeholder line."""
        report = build_summary(EmotionalState(), [])
        lines = report.splitlines()
        assert len(lines) == 2
        assert lines[1] == NO_EXPERIENCES_LINE
        assert RECENT_HEADER not in report

    def test_lists_given_experiences(self):
        """Each experience appears on its own line after the header."""
        log = ExperienceLog()
        log.record("A", {}, Action.EXPLORE, "Excitement", "")
        log.record("B", {}, Action.SEEK_COMFORT, "Relief", "")

        report = build_summary(EmotionalState(), log.recent(5))

        assert report.splitlines()[1:] == [
            RECENT_HEADER,
            "[#0] Input: A → Action: explore → Outcome: Excitement",
            "[#1] Input: B → Action: seekComfort → Outcome: Relief",
        ]
