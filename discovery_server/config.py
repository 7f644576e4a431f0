"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from discovery import RisingConfig, TrendingConfig

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent

root_env = BASE_DIR / ".env"
if root_env.exists():
    load_dotenv(root_env)

DATA_SOURCES = ("json", "firebase", "memory")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    # Data source: "json" | "firebase" | "memory"
    data_source: str = "json"
    # When data_source=json: recordings, users, and follows in one file
    discovery_json_path: Path = BASE_DIR / "data" / "discovery.json"
    # When data_source=firebase: path to service account JSON and optional project id
    firebase_credentials_path: Optional[Path] = None
    firebase_project_id: Optional[str] = None

    # Optional overrides for TrendingConfig / RisingConfig
    algorithm_config_path: Path = BASE_DIR / "algorithm_config.json"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        data_source = os.getenv("DATA_SOURCE", "").strip().lower() or "json"
        if data_source not in DATA_SOURCES:
            logger.warning("Unknown DATA_SOURCE=%r, using json", data_source)
            data_source = "json"

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (BASE_DIR / p).resolve()

        origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=origins or ["*"],
            data_source=data_source,
            discovery_json_path=_path_env("DISCOVERY_JSON_PATH", BASE_DIR / "data" / "discovery.json"),
            firebase_credentials_path=_path_env("FIREBASE_CREDENTIALS_PATH") or _path_env("GOOGLE_APPLICATION_CREDENTIALS"),
            firebase_project_id=os.getenv("FIREBASE_PROJECT_ID") or None,
            algorithm_config_path=_path_env("ALGORITHM_CONFIG_PATH", BASE_DIR / "algorithm_config.json"),
        )

    def validate(self) -> Tuple[bool, List[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.data_source == "json" and not self.discovery_json_path.exists():
            errors.append(f"Discovery JSON not found: {self.discovery_json_path}")

        if self.data_source == "firebase" and not self.firebase_credentials_path:
            errors.append("DATA_SOURCE=firebase requires FIREBASE_CREDENTIALS_PATH")

        return len(errors) == 0, errors

    def load_algorithm_configs(self) -> Tuple[TrendingConfig, RisingConfig]:
        """
        Trending and rising configs, merged with overrides from algorithm_config_path when present.

        The file may nest overrides under "trending" / "rising", or be flat; flat keys
        shared by both (window_days, max_results) apply to both.
        """
        path = self.algorithm_config_path
        if not path.exists():
            logger.warning("No algorithm config at %s, using defaults", path)
            return TrendingConfig(), RisingConfig()
        with open(path) as f:
            data = json.load(f)
        logger.info("Loaded algorithm config from %s", path)
        return (
            TrendingConfig.from_dict(data),
            RisingConfig.from_dict(data),
        )


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
