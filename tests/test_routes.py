import logging
import math

import pytest
from fastapi.testclient import TestClient

from discovery_server import InMemoryEngagementStore, app, set_state

from .conftest import ago, iso, make_state


class TestTrendingEndpoint:
    def test_response_shape(self, client):
        data = client.get("/api/recordings/trending").json()
        assert data["algorithm"] == {
            "description": (
                "Trending Score = (Likes × 3 + Comments × 2 + Plays × 1) "
                "× Time Decay × Velocity Multiplier × Freshness Boost"
            ),
            "timeWindow": "7 days",
            "maxResults": 20,
        }
        assert [r["id"] for r in data["recordings"]] == ["r_hot", "r_steady"]

    def test_metrics_are_exposed(self, client):
        hot = client.get("/api/recordings/trending").json()["recordings"][0]
        assert hot["recentLikes"] == 2
        assert hot["recentComments"] == 1
        assert hot["recentPlays"] == 2
        assert hot["completedPlays"] == 1
        assert hot["completionRate"] == 50.0
        assert hot["engagementScore"] == 10
        assert hot["velocityMultiplier"] == 3.0
        assert hot["freshnessBoost"] == 1.5
        assert hot["timeDecay"] == pytest.approx(math.exp(-(5 / 60) / 48))
        assert hot["trendingScore"] == pytest.approx(10 * hot["timeDecay"] * 3 * 1.5)
        assert hot["badge"] == "hot"
        assert hot["user"]["username"] == "midcareer"
        assert hot["beat"] == {"id": "b1", "title": "Beat One", "genre": "trap", "bpm": 140}
        assert "events" not in hot

    def test_limit(self, client):
        data = client.get("/api/recordings/trending", params={"limit": 1}).json()
        assert [r["id"] for r in data["recordings"]] == ["r_hot"]

    def test_invalid_limit(self, client):
        assert client.get("/api/recordings/trending", params={"limit": 0}).status_code == 422


class TestRisingTalentEndpoint:
    def test_ranking(self, client):
        data = client.get("/api/users/rising-talent").json()
        assert data["algorithm"]["timeWindow"] == "30 days"
        assert data["algorithm"]["maxResults"] == 20
        assert [(u["id"], u["risingScore"]) for u in data["users"]] == [
            ("u_mid", 17),
            ("u_new", 3),
            ("u_vet", 3),
        ]

    def test_user_card(self, client):
        mid = client.get("/api/users/rising-talent").json()["users"][0]
        assert mid["recentActivity"] == {
            "recordings": 1,
            "followers": 1,
            "likes": 2,
            "comments": 1,
            "plays": 10,
        }
        assert mid["accountAgeInDays"] == 45
        assert mid["ageFactor"] == pytest.approx(1.375)
        assert mid["followersCount"] == 2
        assert mid["followingCount"] == 1
        assert mid["publicRecordings"] == 1
        assert mid["totalVotes"] == 12


class _BrokenStore:
    def get_trending_candidates(self, since):
        raise RuntimeError("database unavailable")

    def get_rising_candidates(self, since):
        raise RuntimeError("database unavailable")


def test_store_failure_returns_500():
    set_state(make_state(_BrokenStore()))
    try:
        with TestClient(app) as client:
            trending = client.get("/api/recordings/trending")
            rising = client.get("/api/users/rising-talent")
    finally:
        set_state(None)
    assert trending.status_code == 500
    assert trending.json() == {"detail": "Failed to fetch trending recordings"}
    assert rising.status_code == 500
    assert rising.json() == {"detail": "Failed to fetch rising talent"}


def test_malformed_card_returns_500_and_logs(caplog):
    store = InMemoryEngagementStore(
        recordings=[{
            "id": "r_bad", "user_id": "u_bad", "title": "Bad Beat", "is_public": True,
            "created_at": iso(ago(hours=2)), "beat": {"id": "b1", "bpm": 92.5},
            "likes": [{"created_at": iso(ago(hours=1))}], "comments": [], "plays": [],
        }],
        users=[{"id": "u_bad", "name": "Bad", "total_votes": "lots", "is_active": True,
                "created_at": iso(ago(days=45))}],
    )
    set_state(make_state(store))
    try:
        with TestClient(app) as client, caplog.at_level(logging.ERROR):
            trending = client.get("/api/recordings/trending")
            rising = client.get("/api/users/rising-talent")
    finally:
        set_state(None)
    assert trending.status_code == 500
    assert trending.json() == {"detail": "Failed to fetch trending recordings"}
    assert rising.status_code == 500
    assert rising.json() == {"detail": "Failed to fetch rising talent"}
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert "Error fetching trending recordings" in messages
    assert "Error fetching rising talent" in messages


def test_root_health_and_algorithm(client):
    assert client.get("/").json()["data_source"] == "memory"
    assert client.get("/api/health").json() == {"status": "healthy", "store": "InMemoryEngagementStore"}
    algo = client.get("/api/algorithm").json()
    assert algo["trending"]["config"]["decay_hours"] == 48.0
    assert algo["rising"]["config"]["window_days"] == 30
