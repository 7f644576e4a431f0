"""
Engagement models: raw inputs to the scorers.

EngagementEvent: one like, comment, or play on a recording.
ScorableEntity: a recording with its events inside the trailing window.
ScorableUser: a user with aggregated recent activity.

Built from store dicts via Model.model_validate(d) or ensure_entities() / ensure_users().
Timestamps without an offset are treated as UTC.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class EngagementKind(str, Enum):
    LIKE = "like"
    COMMENT = "comment"
    PLAY = "play"


class EngagementEvent(BaseModel):
    """
    A single engagement on a recording.

    completed: only meaningful for plays (listened to the end).
    """

    model_config = ConfigDict(frozen=True)

    kind: EngagementKind
    occurred_at: datetime
    completed: bool = False

    @field_validator("occurred_at")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class ScorableEntity(BaseModel):
    """
    A recording to be scored for trending.

    events must already be restricted to the trailing window by the caller.
    Extra fields (title, user, beat, ...) are kept for the response payload.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    created_at: datetime
    events: List[EngagementEvent] = Field(default_factory=list)

    @field_validator("created_at")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class ScorableUser(BaseModel):
    """
    A user to be scored for rising talent, with activity aggregated over the window.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    created_at: datetime
    recent_content_count: int = 0
    recent_follower_gains: List[datetime] = Field(default_factory=list)
    recent_likes_received: int = 0
    recent_comments_received: int = 0
    recent_plays_received: int = 0

    @field_validator("created_at")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    @field_validator("recent_follower_gains")
    @classmethod
    def _utc_list(cls, v: List[datetime]) -> List[datetime]:
        return [as_utc(ts) for ts in v]


def ensure_entities(
    items: List[Union[Dict[str, Any], "ScorableEntity"]],
) -> List["ScorableEntity"]:
    """Convert list of dicts or ScorableEntity to list of ScorableEntity models."""
    return [
        ScorableEntity.model_validate(e) if isinstance(e, dict) else e
        for e in items
    ]


def ensure_users(
    items: List[Union[Dict[str, Any], "ScorableUser"]],
) -> List["ScorableUser"]:
    """Convert list of dicts or ScorableUser to list of ScorableUser models."""
    return [
        ScorableUser.model_validate(u) if isinstance(u, dict) else u
        for u in items
    ]
