"""Shared fixtures: a fixed clock, raw store data, and an API client over an in-memory store."""

from datetime import datetime, timedelta, timezone
from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from discovery import EngagementEvent, EngagementKind, RisingConfig, ScorableEntity, TrendingConfig
from discovery_server import AppState, InMemoryEngagementStore, ServerConfig, app, set_state

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def ago(**kwargs) -> datetime:
    """NOW minus a timedelta, e.g. ago(hours=3)."""
    return NOW - timedelta(**kwargs)


def iso(dt: datetime) -> str:
    return dt.isoformat().replace("+00:00", "Z")


def event(kind: str, when: datetime, completed: bool = False) -> EngagementEvent:
    return EngagementEvent(kind=EngagementKind(kind), occurred_at=when, completed=completed)


def entity(created_at: datetime, events: List[EngagementEvent], entity_id: str = "rec") -> ScorableEntity:
    return ScorableEntity(id=entity_id, created_at=created_at, events=events)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def raw_data() -> Dict[str, List[Dict]]:
    """
    Raw collections around NOW:
    - r_hot: new (2h), 2 likes + 1 comment + 2 plays in the last hour
    - r_steady: old, 1 like 3 days ago and 1 like 10 days ago (outside 7d)
    - r_new_quiet: created yesterday, no engagement
    - r_stale: old, last engagement 20 days ago
    - r_private: private, fresh likes
    """
    return {
        "users": [
            {"id": "u_new", "name": "New Voice", "username": "newvoice", "tier": "rookie",
             "is_active": True, "created_at": iso(ago(days=3))},
            {"id": "u_mid", "name": "Mid Career", "username": "midcareer", "tier": "pro",
             "bio": "bars", "total_votes": 12, "is_active": True, "created_at": iso(ago(days=45))},
            {"id": "u_vet", "name": "Veteran", "username": "vet",
             "is_active": True, "created_at": iso(ago(days=400))},
            {"id": "u_off", "name": "Deactivated", "username": "off",
             "is_active": False, "created_at": iso(ago(days=45))},
        ],
        "recordings": [
            {
                "id": "r_hot", "user_id": "u_mid", "title": "Hot Take", "is_public": True,
                "created_at": iso(ago(hours=2)),
                "beat": {"id": "b1", "title": "Beat One", "genre": "trap", "bpm": 140, "price": 0},
                "likes_count": 2, "comments_count": 1, "plays_count": 10,
                "likes": [{"created_at": iso(ago(minutes=30))}, {"created_at": iso(ago(minutes=10))}],
                "comments": [{"created_at": iso(ago(minutes=20))}],
                "plays": [
                    {"created_at": iso(ago(minutes=50)), "completed": True},
                    {"created_at": iso(ago(minutes=5)), "completed": False},
                ],
            },
            {
                "id": "r_steady", "user_id": "u_vet", "title": "Steady", "is_public": True,
                "created_at": iso(ago(days=60)),
                "likes": [{"created_at": iso(ago(days=3))}, {"created_at": iso(ago(days=10))}],
                "comments": [], "plays": [],
            },
            {
                "id": "r_new_quiet", "user_id": "u_new", "title": "First Take", "is_public": True,
                "created_at": iso(ago(days=1)),
                "likes": [], "comments": [], "plays": [],
            },
            {
                "id": "r_stale", "user_id": "u_vet", "title": "Stale", "is_public": True,
                "created_at": iso(ago(days=90)),
                "likes": [{"created_at": iso(ago(days=20))}], "comments": [], "plays": [],
            },
            {
                "id": "r_private", "user_id": "u_off", "title": "Private", "is_public": False,
                "created_at": iso(ago(days=2)),
                "likes": [{"created_at": iso(ago(hours=1))}], "comments": [], "plays": [],
            },
        ],
        "follows": [
            {"follower_id": "u_vet", "following_id": "u_mid", "created_at": iso(ago(days=2))},
            {"follower_id": "u_new", "following_id": "u_mid", "created_at": iso(ago(days=40))},
            {"follower_id": "u_mid", "following_id": "u_vet", "created_at": iso(ago(days=5))},
        ],
    }


@pytest.fixture
def store(raw_data) -> InMemoryEngagementStore:
    return InMemoryEngagementStore(**raw_data)


def make_state(engagement_store) -> AppState:
    return AppState(
        ServerConfig(data_source="memory"),
        engagement_store=engagement_store,
        trending_config=TrendingConfig(),
        rising_config=RisingConfig(),
        clock=lambda: NOW,
    )


@pytest.fixture
def client(store):
    set_state(make_state(store))
    with TestClient(app) as c:
        yield c
    set_state(None)
