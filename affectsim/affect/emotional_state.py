"""Bounded emotional state vector.

Stores one intensity per Emotion in a float64 numpy vector laid out in
Emotion declaration order. Every update is clipped back into [0, 1].
"""

from typing import Iterator, Mapping, Optional

import numpy as np

from affectsim.affect.emotions import EMOTION_ORDER, Emotion, EmotionDeltaMap

MIN_INTENSITY = 0.0
MAX_INTENSITY = 1.0

_INDEX = {emotion: i for i, emotion in enumerate(EMOTION_ORDER)}


class EmotionalState:
    """Current intensity of each emotion, clamped to [0, 1].

    Starts neutral (all zeros) unless initial values are given.
    """

    def __init__(self, initial: Optional[Mapping[Emotion, float]] = None):
        self._vector = np.zeros(len(EMOTION_ORDER), dtype=np.float64)
        if initial:
            for emotion, value in initial.items():
                self._vector[_INDEX[Emotion(emotion)]] = value
            np.clip(self._vector, MIN_INTENSITY, MAX_INTENSITY, out=self._vector)

    def apply(self, deltas: EmotionDeltaMap) -> None:
        """Add each delta to its emotion and clamp the result."""
        if not deltas:
            return
        for emotion, delta in deltas.items():
            i = _INDEX[emotion]
            self._vector[i] = np.clip(self._vector[i] + delta, MIN_INTENSITY, MAX_INTENSITY)

    def value(self, emotion: Emotion) -> float:
        """Current intensity of one emotion."""
        return float(self._vector[_INDEX[emotion]])

    def __getitem__(self, emotion: Emotion) -> float:
        return self.value(emotion)

    def __iter__(self) -> Iterator[Emotion]:
        return iter(EMOTION_ORDER)

    def __len__(self) -> int:
        return len(EMOTION_ORDER)

    def to_vector(self) -> np.ndarray:
        """Copy of the underlying vector in Emotion declaration order."""
        return self._vector.copy()

    def as_dict(self) -> dict[Emotion, float]:
        """Snapshot of the state keyed by emotion."""
        return {emotion: float(self._vector[i]) for i, emotion in enumerate(EMOTION_ORDER)}

    def dominant(self) -> Optional[tuple[Emotion, float]]:
        """Emotion with the highest intensity.

        Ties resolve to the emotion declared first (np.argmax returns the
        first maximal index). Returns None only for an empty vector.
        """
        if self._vector.size == 0:
            return None
        i = int(np.argmax(self._vector))
        return EMOTION_ORDER[i], float(self._vector[i])

    def ordered(self) -> list[tuple[Emotion, float]]:
        """All emotions, highest intensity first; ties keep declaration order."""
        # Stable sort on the negated values preserves declaration order for ties
        order = np.argsort(-self._vector, kind="stable")
        return [(EMOTION_ORDER[i], float(self._vector[i])) for i in order]

    def all_below(self, threshold: float) -> bool:
        """Whether every emotion is strictly below threshold."""
        return bool(np.all(self._vector < threshold))

    def __repr__(self) -> str:
        values = ", ".join(f"{e.value}={v:.2f}" for e, v in self.as_dict().items())
        return f"EmotionalState({values})"
