"""Emotion model: dimensions, bounded state, and the stimulus lexicon."""
from affectsim.affect.emotions import Emotion, EmotionDeltaMap, EMOTION_ORDER
from affectsim.affect.emotional_state import EmotionalState
from affectsim.affect.lexicon import (
    DEFAULT_LEXICON,
    Lexicon,
    LexiconLoadError,
    load_lexicon,
    save_lexicon,
)

__all__ = [
    "Emotion",
    "EmotionDeltaMap",
    "EMOTION_ORDER",
    "EmotionalState",
    "DEFAULT_LEXICON",
    "Lexicon",
    "LexiconLoadError",
    "load_lexicon",
    "save_lexicon",
]
