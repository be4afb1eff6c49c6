"""Experience memory: immutable interaction records and the append-only log."""

from affectsim.memory.experience import (
    Experience,
    ExperienceLog,
    ExperienceLogError,
    load_experiences,
    parse_experiences,
)

__all__ = [
    "Experience",
    "ExperienceLog",
    "ExperienceLogError",
    "load_experiences",
    "parse_experiences",
]
