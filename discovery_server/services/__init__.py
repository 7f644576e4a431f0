"""Backing logic: engagement stores."""

from .engagement_store import (
    EngagementStore,
    InMemoryEngagementStore,
    JsonEngagementStore,
    parse_timestamp,
)
from .firestore_engagement_store import FirestoreEngagementStore

__all__ = [
    "EngagementStore",
    "FirestoreEngagementStore",
    "InMemoryEngagementStore",
    "JsonEngagementStore",
    "parse_timestamp",
]
