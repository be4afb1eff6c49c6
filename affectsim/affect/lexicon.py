"""
Stimulus lexicon: maps textual stimuli to emotion deltas.

The built-in table covers a handful of single-character stimuli. A caller
may overlay its own entries (for example loaded from a JSON file); an
overlaid key replaces the default entry wholesale, there is no
per-emotion merge.

Resolution order for a stimulus:
    1. Exact match on the trimmed string (multi-character keys allowed)
    2. Empty string -> no change
    3. First character, uppercased
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from pydantic import FiniteFloat, TypeAdapter, ValidationError

from affectsim.affect.emotions import (
    EMPTY_DELTA_MAP,
    Emotion,
    EmotionDeltaMap,
    delta_map_to_dict,
    freeze_delta_map,
)

logger = logging.getLogger(__name__)

DEFAULT_LEXICON: Mapping[str, Mapping[Emotion, float]] = MappingProxyType({
    "A": {Emotion.JOY: 0.4, Emotion.CURIOSITY: 0.3, Emotion.SADNESS: -0.1, Emotion.FEAR: -0.05},
    "B": {Emotion.FEAR: 0.6, Emotion.SADNESS: 0.5, Emotion.JOY: -0.2, Emotion.ANGER: 0.1},
    "C": {Emotion.TRUST: 0.5, Emotion.CURIOSITY: 0.2, Emotion.FEAR: -0.1},
    "?": {Emotion.CURIOSITY: 0.8, Emotion.JOY: 0.2, Emotion.ANGER: 0.05},
    "!": {Emotion.ANGER: 0.7, Emotion.FEAR: 0.5, Emotion.SADNESS: 0.2},
    "@": {Emotion.TRUST: 0.6, Emotion.JOY: 0.4},
    "#": {Emotion.ANGER: 0.4, Emotion.SADNESS: 0.3},
})

_LEXICON_FILE_ADAPTER = TypeAdapter(dict[str, dict[Emotion, FiniteFloat]])


class LexiconLoadError(Exception):
    """Raised when a lexicon file cannot be read or parsed."""


class Lexicon(Mapping[str, EmotionDeltaMap]):
    """Immutable stimulus -> delta map table.

    Attributes:
        overrides: Keys supplied by the caller (empty when only defaults)
    """

    def __init__(self, overlay: Optional[Mapping[str, Mapping]] = None):
        """
        Build the effective lexicon.

        Args:
            overlay: Extra or replacement entries. Each value is a mapping of
                Emotion (or emotion name) to delta.

        Raises:
            pydantic.ValidationError: If an overlay entry names an unknown
                emotion or a non-numeric delta
        """
        entries = {key: freeze_delta_map(deltas) for key, deltas in DEFAULT_LEXICON.items()}
        overlay = overlay or {}
        for key, deltas in overlay.items():
            entries[key] = freeze_delta_map(deltas)
        self._entries = MappingProxyType(entries)
        self.overrides = frozenset(overlay)

    def __getitem__(self, key: str) -> EmotionDeltaMap:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, stimulus: str) -> EmotionDeltaMap:
        """Map a stimulus to the emotion deltas it triggers.

        Args:
            stimulus: Raw input string

        Returns:
            Read-only delta map (empty when nothing matches)
        """
        trimmed = stimulus.strip()

        # Exact (possibly multi-character) keys take priority
        if trimmed in self._entries:
            return self._entries[trimmed]

        if not trimmed:
            return EMPTY_DELTA_MAP

        return self._entries.get(trimmed[0].upper(), EMPTY_DELTA_MAP)

    def to_dict(self) -> dict[str, dict[str, float]]:
        """Serialize with emotion names as keys."""
        return {key: delta_map_to_dict(deltas) for key, deltas in self._entries.items()}


def load_lexicon(path: Union[str, Path]) -> dict[str, dict[Emotion, float]]:
    """Read a lexicon overlay from a JSON file.

    The file holds an object of stimulus key -> {emotion name: delta}.

    Args:
        path: JSON file to read

    Returns:
        Validated overlay suitable for Lexicon(overlay=...)

    Raises:
        LexiconLoadError: If the file is missing, unreadable, not JSON, or
            does not match the expected shape
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
        overlay = _LEXICON_FILE_ADAPTER.validate_python(json.loads(raw))
    except OSError as e:
        raise LexiconLoadError(f"Cannot read lexicon {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise LexiconLoadError(f"Lexicon {path} is not valid JSON: {e}") from e
    except ValidationError as e:
        raise LexiconLoadError(f"Lexicon {path} has invalid entries: {e}") from e

    logger.info(f"Loaded emotion lexicon from {path} ({len(overlay)} entries)")
    return overlay


def save_lexicon(lexicon: Mapping[str, EmotionDeltaMap], path: Union[str, Path]) -> None:
    """Write a lexicon (or overlay) to a JSON file readable by load_lexicon."""
    data = {key: delta_map_to_dict(deltas) for key, deltas in lexicon.items()}
    Path(path).write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
