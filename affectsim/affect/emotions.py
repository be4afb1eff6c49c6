"""Emotion dimensions and emotion delta maps.

The agent tracks six emotion dimensions, each an intensity in [0, 1]:

1. Joy
2. Curiosity
3. Sadness
4. Fear
5. Anger
6. Trust

Declaration order matters: wherever two emotions tie (dominant emotion,
report ordering) the one declared first wins.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import FiniteFloat, TypeAdapter


class Emotion(str, Enum):
    """The six emotion dimensions of the agent."""

    JOY = "joy"
    CURIOSITY = "curiosity"
    SADNESS = "sadness"
    FEAR = "fear"
    ANGER = "anger"
    TRUST = "trust"

    @property
    def label(self) -> str:
        """Capitalized name for reports (e.g. "Curiosity")."""
        return self.value.capitalize()


# Partial mapping of emotion -> signed delta. Emotions not present are untouched.
EmotionDeltaMap = Mapping[Emotion, float]

EMOTION_ORDER: tuple[Emotion, ...] = tuple(Emotion)

# Validates {"joy": 0.4, ...} style payloads from JSON; NaN and infinities are rejected
_DELTA_MAP_ADAPTER = TypeAdapter(dict[Emotion, FiniteFloat])


def freeze_delta_map(deltas: Mapping) -> EmotionDeltaMap:
    """Validate a delta map and return a read-only copy.

    Keys may be Emotion members or their string values; values must be
    finite numbers.

    Raises:
        pydantic.ValidationError: If a key is not an emotion or a value is
            not a finite number
    """
    validated = _DELTA_MAP_ADAPTER.validate_python(dict(deltas))
    return MappingProxyType(validated)


def delta_map_to_dict(deltas: EmotionDeltaMap) -> dict[str, float]:
    """Serialize a delta map with emotion names as keys."""
    return {emotion.value: float(delta) for emotion, delta in deltas.items()}


EMPTY_DELTA_MAP: EmotionDeltaMap = MappingProxyType({})
