"""
Experience records and the append-only experience log.

Each call to Agent.respond() produces exactly one Experience. The log hands
out read-only views; records are frozen pydantic models and are never
altered or removed once appended.

Wire format (export/import):
    [
      {
        "action": "explore",
        "emotionChanges": {"joy": 0.4, ...},
        "input": "A",
        "outcome": "New knowledge",
        "reflection": "After processing A, ...",
        "timestamp": 0
      },
      ...
    ]
"""

import json
import logging
from pathlib import Path
from typing import Iterator, Mapping, Sequence, Union, overload

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FiniteFloat,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
)

from affectsim.affect.emotions import (
    Emotion,
    EmotionDeltaMap,
    delta_map_to_dict,
    freeze_delta_map,
)
from affectsim.decision.actions import Action

logger = logging.getLogger(__name__)


class ExperienceLogError(Exception):
    """Raised when an exported experience log cannot be read or parsed."""


class Experience(BaseModel):
    """One recorded interaction.

    Attributes:
        index: Position in the log, assigned at append time
        input: Stimulus exactly as received
        emotion_changes: Read-only deltas from the stimulus (not the action feedback)
        action: Action chosen by the decision engine
        outcome: Outcome sampled from the action's feedback
        reflection: Generated sentence summarizing the interaction
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    index: int = Field(alias="timestamp", ge=0)
    input: str
    emotion_changes: Mapping[Emotion, FiniteFloat] = Field(
        default_factory=dict, alias="emotionChanges", validate_default=True
    )
    action: Action
    outcome: str
    reflection: str

    @field_validator("emotion_changes")
    @classmethod
    def freeze_emotion_changes(cls, value: EmotionDeltaMap) -> EmotionDeltaMap:
        return freeze_delta_map(value)

    @field_serializer("emotion_changes")
    def serialize_emotion_changes(self, value: EmotionDeltaMap) -> dict[str, float]:
        return delta_map_to_dict(value)

    def to_dict(self) -> dict:
        """Serialize using the export field names."""
        return self.model_dump(mode="json", by_alias=True)

    def summary_line(self) -> str:
        """One-line form used by the summary report."""
        return (
            f"[#{self.index}] Input: {self.input} → Action: {self.action.value} "
            f"→ Outcome: {self.outcome}"
        )


_EXPERIENCE_LIST_ADAPTER = TypeAdapter(list[Experience])


class ExperienceLog(Sequence[Experience]):
    """Append-only, ordered sequence of experiences.

    Indices are assigned by the log itself, so they always run 0..N-1
    without gaps.
    """

    def __init__(self):
        self._entries: list[Experience] = []

    def record(
        self,
        input: str,
        emotion_changes: Mapping,
        action: Action,
        outcome: str,
        reflection: str,
    ) -> Experience:
        """Create the next experience and append it.

        Returns:
            The appended record
        """
        experience = Experience(
            index=len(self._entries),
            input=input,
            emotion_changes=dict(emotion_changes),
            action=action,
            outcome=outcome,
            reflection=reflection,
        )
        self._entries.append(experience)
        logger.debug(f"Recorded experience #{experience.index}: {action.value} -> {outcome}")
        return experience

    @overload
    def __getitem__(self, i: int) -> Experience: ...

    @overload
    def __getitem__(self, i: slice) -> tuple[Experience, ...]: ...

    def __getitem__(self, i):
        if isinstance(i, slice):
            return tuple(self._entries[i])
        return self._entries[i]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Experience]:
        return iter(tuple(self._entries))

    def recent(self, limit: int) -> tuple[Experience, ...]:
        """Up to `limit` most recent entries, oldest first."""
        if limit <= 0:
            return ()
        return tuple(self._entries[-limit:])

    def to_json(self) -> str:
        """Pretty-printed, key-sorted JSON array of all entries."""
        return json.dumps(
            [experience.to_dict() for experience in self._entries],
            indent=2,
            sort_keys=True,
            ensure_ascii=False,
        )

    def export(self, path: Union[str, Path]) -> Path:
        """Write the log as JSON.

        Raises:
            OSError: If the file cannot be written
        """
        path = Path(path)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.info(f"Exported {len(self._entries)} experiences to {path}")
        return path


def parse_experiences(payload: str) -> list[Experience]:
    """Parse an exported JSON log.

    Raises:
        ExperienceLogError: If the payload is not a valid log
    """
    try:
        return _EXPERIENCE_LIST_ADAPTER.validate_json(payload)
    except ValidationError as e:
        raise ExperienceLogError(f"Invalid experience log: {e}") from e


def load_experiences(path: Union[str, Path]) -> list[Experience]:
    """Read an exported log from disk.

    Raises:
        ExperienceLogError: If the file is unreadable or malformed
    """
    path = Path(path)
    try:
        payload = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ExperienceLogError(f"Cannot read experience log {path}: {e}") from e
    return parse_experiences(payload)
