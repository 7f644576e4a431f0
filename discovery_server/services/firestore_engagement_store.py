"""
Firestore engagement store.

Used when DATA_SOURCE=firebase. Layout:
- recordings/{id}: user_id, title, is_public, created_at, beat, likes_count, comments_count, plays_count
- recordings/{id}/likes|comments|plays/{id}: created_at (plays also: completed)
- users/{id}: name, username, image, tier, bio, total_votes, is_active, created_at
- follows/{id}: follower_id, following_id, created_at

Recent likes/comments/plays are read with collection-group range queries on
created_at; the window filtering and aggregation are shared with the in-memory store.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .engagement_store import InMemoryEngagementStore

logger = logging.getLogger(__name__)

EVENT_COLLECTIONS = ("likes", "comments", "plays")


class FirestoreEngagementStore:
    """Engagement store backed by the recordings, users, and follows collections."""

    def __init__(
        self,
        project_id: Optional[str] = None,
        credentials_path: Optional[Union[Path, str]] = None,
        *,
        recordings_collection: str = "recordings",
        users_collection: str = "users",
        follows_collection: str = "follows",
    ):
        try:
            import firebase_admin
            from firebase_admin import credentials, firestore
        except ImportError:
            raise ImportError(
                "firebase-admin is required for FirestoreEngagementStore. pip install firebase-admin"
            )
        if not firebase_admin._apps:
            if credentials_path:
                cred = credentials.Certificate(str(Path(credentials_path).resolve()))
                opts = {"projectId": project_id} if project_id else None
                firebase_admin.initialize_app(cred, opts)
            else:
                firebase_admin.initialize_app(options={"projectId": project_id} if project_id else None)
        self._db = firestore.client()
        self._project_id = project_id
        self._recordings_name = recordings_collection
        self._recordings_coll = self._db.collection(recordings_collection)
        self._users_coll = self._db.collection(users_collection)
        self._follows_coll = self._db.collection(follows_collection)

    @staticmethod
    def _doc_to_dict(doc: Any) -> Dict:
        d = doc.to_dict() or {}
        d["id"] = doc.id
        return d

    def _snapshot(self, since: datetime) -> InMemoryEngagementStore:
        """Read the collections once and attach events since `since` to their recordings."""
        recordings: Dict[str, Dict] = {}
        for doc in self._recordings_coll.stream():
            rec = self._doc_to_dict(doc)
            for kind in EVENT_COLLECTIONS:
                rec[kind] = []
            recordings[rec["id"]] = rec

        for kind in EVENT_COLLECTIONS:
            query = self._db.collection_group(kind).where("created_at", ">=", since)
            for doc in query.stream():
                parent = doc.reference.parent.parent
                # Only direct sub-collections of a recording; comment likes share the group name
                if parent is None or parent.parent.id != self._recordings_name:
                    continue
                rec = recordings.get(parent.id)
                if rec is None:
                    continue
                rec[kind].append(doc.to_dict() or {})

        users = [self._doc_to_dict(d) for d in self._users_coll.stream()]
        follows = [self._doc_to_dict(d) for d in self._follows_coll.stream()]
        logger.debug(
            "Firestore snapshot: %d recordings, %d users, %d follows",
            len(recordings), len(users), len(follows),
        )
        return InMemoryEngagementStore(list(recordings.values()), users, follows)

    def get_trending_candidates(self, since: datetime) -> List[Dict]:
        return self._snapshot(since).get_trending_candidates(since)

    def get_rising_candidates(self, since: datetime) -> List[Dict]:
        return self._snapshot(since).get_rising_candidates(since)
