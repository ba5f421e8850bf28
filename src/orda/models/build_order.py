"""Pydantic v2 models for build order payloads.

Wire keys are lowerCamelCase (``authorUid``, ``timeCreated``) or carry a
leading underscore (``_seconds``); each is mapped onto a snake_case field
through an alias. All models are strict: a JSON string is never coerced
into a number, and a type mismatch fails validation even on optional
fields. Unknown keys sent by the server are ignored.
"""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field

from orda.query import Civilization

_RECORD_CONFIG = ConfigDict(strict=True, frozen=True, populate_by_name=True)


class Timestamp(BaseModel):
    """Firestore-style timestamp: seconds since epoch plus nanoseconds (UTC)."""

    model_config = _RECORD_CONFIG

    seconds: int = Field(alias="_seconds")
    nanoseconds: int = Field(alias="_nanoseconds")

    def to_datetime(self) -> datetime:
        """Aware UTC datetime; nanoseconds are truncated to microseconds."""
        return datetime.fromtimestamp(self.seconds, tz=timezone.utc) + timedelta(
            microseconds=self.nanoseconds // 1000
        )


class DetailStep(BaseModel):
    """Finest-grained entry of a build order.

    Counts are kept as text: the source data uses ranges and symbols
    (``"6-8"``, ``"+2"``) as often as plain numbers.
    """

    model_config = _RECORD_CONFIG

    villagers: str | None = None
    builders: str | None = None
    food: str | None = None
    wood: str | None = None
    stone: str | None = None
    gold: str | None = None
    time: str | None = None  # in-game clock label, e.g. "2:30"
    description: str | None = None  # may embed markup and image references


class BuildOrderStep(BaseModel):
    """One phase of a build order."""

    model_config = _RECORD_CONFIG

    gameplan: str | None = None
    # 0 when the feature is unused, 1-4 for the in-game age; stored as a byte
    age: int | None = Field(default=None, ge=0, le=255)
    # "age" while in an age, "ageUp" while aging up; the vocabulary is open
    step_type: str | None = Field(default=None, alias="type")
    steps: list[DetailStep] | None = None


class BuildOrder(BaseModel):
    """A complete build order as returned by /builds and /favorites."""

    model_config = _RECORD_CONFIG

    id: str | None = None
    title: str | None = None
    description: str | None = None
    video: str | None = None  # YouTube URL
    author: str | None = None
    author_uid: str = Field(alias="authorUid")

    civ: str | None = None
    map: str | None = None
    season: str | None = None
    strategy: str | None = None

    comments: int | None = None
    likes: int | None = None
    upvotes: int | None = None
    views: int

    score: float
    score_all_time: float = Field(alias="scoreAllTime")

    sort_title: str = Field(alias="sortTitle")
    # None means the server did not say; not the same as False
    is_draft: bool | None = Field(default=None, alias="isDraft")

    time_created: Timestamp = Field(alias="timeCreated")
    time_updated: Timestamp = Field(alias="timeUpdated")

    steps: list[BuildOrderStep]

    @property
    def civilization(self) -> Civilization | None:
        """The ``civ`` code as a Civilization, or None if absent/unknown."""
        return Civilization.from_code(self.civ)
