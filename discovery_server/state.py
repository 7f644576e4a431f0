"""Application state: config, engagement store, and active algorithm configs."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from discovery import RisingConfig, TrendingConfig

from .config import ServerConfig, get_config
from .services import (
    EngagementStore,
    FirestoreEngagementStore,
    InMemoryEngagementStore,
    JsonEngagementStore,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        engagement_store: Optional[EngagementStore] = None,
        trending_config: Optional[TrendingConfig] = None,
        rising_config: Optional[RisingConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config
        self._clock = clock or _utc_now

        if trending_config is None or rising_config is None:
            loaded_trending, loaded_rising = config.load_algorithm_configs()
            trending_config = trending_config or loaded_trending
            rising_config = rising_config or loaded_rising
        self.trending_config: TrendingConfig = trending_config
        self.rising_config: RisingConfig = rising_config

        self.engagement_store: EngagementStore = (
            engagement_store if engagement_store is not None
            else self._create_engagement_store(config)
        )
        logger.info("Engagement store: %s", self.store_name)

    def _create_engagement_store(self, config: ServerConfig) -> EngagementStore:
        """Create engagement store (Firestore when creds set, JSON file, or empty in-memory)."""
        if config.data_source == "firebase":
            cred_path = Path(config.firebase_credentials_path) if config.firebase_credentials_path else None
            if cred_path is None or not cred_path.is_file():
                logger.warning(
                    "Firestore engagement store skipped: credentials path not found or not a file: %s",
                    cred_path,
                )
                return InMemoryEngagementStore()
            return FirestoreEngagementStore(
                project_id=config.firebase_project_id,
                credentials_path=cred_path,
            )
        if config.data_source == "json":
            return JsonEngagementStore(config.discovery_json_path)
        return InMemoryEngagementStore()

    def now(self) -> datetime:
        """Current time for one request; captured once and threaded through scoring."""
        return self._clock()

    @property
    def store_name(self) -> str:
        return type(self.engagement_store).__name__


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (None resets it so the next get_state() rebuilds)."""
    global _state
    _state = state
