"""Plain-text summary report of the agent's state and recent history."""

from typing import Sequence

from affectsim.affect.emotional_state import EmotionalState
from affectsim.memory.experience import Experience

NO_EXPERIENCES_LINE = "No experiences recorded yet."
RECENT_HEADER = "Recent experiences:"


def format_emotion_headline(state: EmotionalState) -> str:
    """`Emotional state — Joy: 0.60, ...`, highest intensity first."""
    parts = ", ".join(f"{emotion.label}: {value:.2f}" for emotion, value in state.ordered())
    return f"Emotional state — {parts}"


def build_summary(state: EmotionalState, recent: Sequence[Experience]) -> str:
    """Render the summary report.

    Args:
        state: Current emotional state (headline)
        recent: Experiences to list, oldest first

    Returns:
        Multi-line report; lists "No experiences recorded yet." when
        `recent` is empty
    """
    headline = format_emotion_headline(state)
    if not recent:
        return f"{headline}\n{NO_EXPERIENCES_LINE}"
    lines = "\n".join(experience.summary_line() for experience in recent)
    return f"{headline}\n{RECENT_HEADER}\n{lines}"
