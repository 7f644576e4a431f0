"""
Engagement Store abstraction.

Supplies windowed engagement for the discovery endpoints: recordings with their
recent likes, comments, and plays, and users with aggregated recent activity.
Implementations: in-memory (tests), JSON file (local), Firestore (production).
Swap via DATA_SOURCE for local vs cloud.

Raw collections:
- recordings: {id, user_id, title, is_public, created_at, beat, likes: [{created_at}],
  comments: [{created_at}], plays: [{created_at, completed}], likes_count, comments_count, plays_count}
- users: {id, name, username, image, tier, bio, total_votes, is_active, created_at}
- follows: {follower_id, following_id, created_at}
"""

import json
import logging
from collections import defaultdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol, Union

from pydantic import TypeAdapter

from discovery.models import as_utc

logger = logging.getLogger(__name__)

_datetime_adapter = TypeAdapter(datetime)

# Recording fields that are replaced by "events" in trending payloads
_EVENT_FIELDS = ("likes", "comments", "plays")
_USER_CARD_FIELDS = ("id", "name", "username", "image")
_USER_PROFILE_FIELDS = ("name", "username", "image", "tier", "bio", "total_votes")


class EngagementStore(Protocol):
    """Protocol for windowed engagement reads. Implement for in-memory, JSON, or Firestore."""

    def get_trending_candidates(self, since: datetime) -> List[Dict]:
        """
        Public recordings created since `since` or with any like, comment, or play since then.

        Each dict: id, created_at, events (only those since `since`), plus display fields.
        """
        ...

    def get_rising_candidates(self, since: datetime) -> List[Dict]:
        """
        Active users with a recording created, a like or comment received, or a follower
        gained since `since`, with activity aggregated over that window.
        """
        ...


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """ISO string or datetime to an aware UTC datetime."""
    return as_utc(_datetime_adapter.validate_python(value))


def _recent(items: Optional[Iterable[Dict]], since: datetime) -> List[Dict]:
    return [i for i in (items or []) if parse_timestamp(i["created_at"]) >= since]


def _newest_first(payloads: List[Dict]) -> List[Dict]:
    """Deterministic candidate order: newest first, then by id."""
    payloads.sort(key=lambda p: p["id"])
    payloads.sort(key=lambda p: p["created_at"], reverse=True)
    return payloads


class InMemoryEngagementStore:
    """
    Engagement store over raw collections held in memory.
    Does the window filtering and aggregation the other stores rely on.
    """

    def __init__(
        self,
        recordings: Optional[List[Dict]] = None,
        users: Optional[List[Dict]] = None,
        follows: Optional[List[Dict]] = None,
    ):
        self._recordings: List[Dict] = list(recordings or [])
        self._users: List[Dict] = list(users or [])
        self._follows: List[Dict] = list(follows or [])
        self._user_by_id: Dict[str, Dict] = {u["id"]: u for u in self._users if u.get("id")}

    def _user_card(self, user_id: Optional[str]) -> Optional[Dict]:
        user = self._user_by_id.get(user_id or "")
        if user is None:
            return None
        return {k: user.get(k) for k in _USER_CARD_FIELDS}

    def get_trending_candidates(self, since: datetime) -> List[Dict]:
        out = []
        for rec in self._recordings:
            if not rec.get("is_public", True):
                continue
            likes = _recent(rec.get("likes"), since)
            comments = _recent(rec.get("comments"), since)
            plays = _recent(rec.get("plays"), since)
            created_at = parse_timestamp(rec["created_at"])
            if created_at < since and not (likes or comments or plays):
                continue
            events = (
                [{"kind": "like", "occurred_at": parse_timestamp(like["created_at"])} for like in likes]
                + [{"kind": "comment", "occurred_at": parse_timestamp(c["created_at"])} for c in comments]
                + [
                    {
                        "kind": "play",
                        "occurred_at": parse_timestamp(p["created_at"]),
                        "completed": bool(p.get("completed", False)),
                    }
                    for p in plays
                ]
            )
            payload = {k: v for k, v in rec.items() if k not in _EVENT_FIELDS}
            payload["created_at"] = created_at
            payload["events"] = events
            payload["user"] = self._user_card(rec.get("user_id")) or rec.get("user")
            out.append(payload)
        logger.debug("Trending candidates since %s: %d", since.isoformat(), len(out))
        return _newest_first(out)

    def get_rising_candidates(self, since: datetime) -> List[Dict]:
        recordings_by_user: Dict[str, List[Dict]] = defaultdict(list)
        for rec in self._recordings:
            recordings_by_user[rec.get("user_id") or ""].append(rec)

        followers: Dict[str, List[Dict]] = defaultdict(list)
        following_count: Dict[str, int] = defaultdict(int)
        for follow in self._follows:
            followers[follow["following_id"]].append(follow)
            following_count[follow["follower_id"]] += 1

        out = []
        for user in self._users:
            if not user.get("is_active", True):
                continue
            uid = user["id"]
            recordings = recordings_by_user.get(uid, [])
            recent_followers = _recent(followers.get(uid), since)
            qualifies = bool(recent_followers) or any(
                parse_timestamp(r["created_at"]) >= since
                or _recent(r.get("likes"), since)
                or _recent(r.get("comments"), since)
                for r in recordings
            )
            if not qualifies:
                continue
            public = [r for r in recordings if r.get("is_public", True)]
            recent_public = [r for r in public if parse_timestamp(r["created_at"]) >= since]
            payload = {k: user.get(k) for k in _USER_PROFILE_FIELDS}
            payload.update(
                id=uid,
                created_at=parse_timestamp(user["created_at"]),
                public_recordings=len(public),
                followers_count=len(followers.get(uid, [])),
                following_count=following_count.get(uid, 0),
                recent_content_count=len(recent_public),
                recent_follower_gains=[parse_timestamp(f["created_at"]) for f in recent_followers],
                recent_likes_received=sum(_lifetime_count(r, "likes") for r in recent_public),
                recent_comments_received=sum(_lifetime_count(r, "comments") for r in recent_public),
                recent_plays_received=sum(_lifetime_count(r, "plays") for r in recent_public),
            )
            out.append(payload)
        logger.debug("Rising candidates since %s: %d", since.isoformat(), len(out))
        return _newest_first(out)


def _lifetime_count(recording: Dict, kind: str) -> int:
    """Stored counter (e.g. likes_count), else the number of embedded items."""
    counter = recording.get(f"{kind}_count")
    if counter is not None:
        return int(counter)
    return len(recording.get(kind) or [])


class JsonEngagementStore(InMemoryEngagementStore):
    """
    Engagement store backed by a JSON file ({"recordings", "users", "follows"}).
    Used when DATA_SOURCE=json; path comes from DISCOVERY_JSON_PATH.
    """

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Discovery JSON not found: {self._path}")
        with open(self._path) as f:
            data: Dict[str, Any] = json.load(f)
        super().__init__(
            recordings=data.get("recordings", []),
            users=data.get("users", []),
            follows=data.get("follows", []),
        )
        logger.info(
            "Loaded %s: %d recordings, %d users, %d follows",
            self._path, len(self._recordings), len(self._users), len(self._follows),
        )
