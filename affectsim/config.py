"""Configuration for the affect simulator agent."""
import re
from dataclasses import dataclass, field
from typing import Mapping, Optional

from affectsim.decision.engine import (
    BOOST_PROBABILITY,
    LOW_EMOTION_THRESHOLD,
    RECENT_WINDOW,
    TRUST_FALLBACK_THRESHOLD,
)

# Number of recent experiences shown by the summary report
DEFAULT_HISTORY_LIMIT = 5

UINT64_MAX = (1 << 64) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# Plain decimal digits only; no whitespace, underscores or exponents
_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
_SIGNED_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class AgentConfig:
    """Construction parameters for an Agent.

    Attributes:
        seed: Random source seed; None draws one from system entropy
        lexicon: Overlay entries merged onto the default lexicon
        history_limit: Experiences shown by summary reports
        recent_window: Experiences inspected by the avoidance stage
        low_emotion_threshold: Ceiling for the low-emotion stage
        boost_probability: Chance of acting in a flat emotional state
        trust_fallback_threshold: Trust level that triggers seekInsight
    """

    seed: Optional[int] = None
    lexicon: Mapping[str, Mapping] = field(default_factory=dict)
    history_limit: int = DEFAULT_HISTORY_LIMIT
    recent_window: int = RECENT_WINDOW
    low_emotion_threshold: float = LOW_EMOTION_THRESHOLD
    boost_probability: float = BOOST_PROBABILITY
    trust_fallback_threshold: float = TRUST_FALLBACK_THRESHOLD

    def __post_init__(self):
        if self.seed is not None and not 0 <= self.seed <= UINT64_MAX:
            raise ValueError(f"seed must be an unsigned 64-bit integer, got {self.seed}")
        if self.recent_window < 0:
            raise ValueError(f"recent_window must be >= 0, got {self.recent_window}")
        if not 0.0 <= self.boost_probability <= 1.0:
            raise ValueError(f"boost_probability must be in [0, 1], got {self.boost_probability}")



def parse_seed(raw: str) -> Optional[int]:
    """Parse a seed argument.

    Returns:
        The seed, or None when `raw` is not an unsigned 64-bit decimal integer
    """
    if not _UNSIGNED_PATTERN.fullmatch(raw):
        return None
    seed = int(raw)
    if seed > UINT64_MAX:
        return None
    return seed


def parse_history(raw: str) -> Optional[int]:
    """Parse a history limit argument.

    Returns:
        The limit, or None when `raw` is not a 64-bit decimal integer
    """
    if not _SIGNED_PATTERN.fullmatch(raw):
        return None
    limit = int(raw)
    if not INT64_MIN <= limit <= INT64_MAX:
        return None
    return limit
