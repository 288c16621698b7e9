"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from recommender.models.config import DEFAULT_CONFIG, RecommendationConfig

logger = logging.getLogger(__name__)

# Single .env at the project root
_ROOT_ENV = Path(__file__).resolve().parent.parent / ".env"
if _ROOT_ENV.exists():
    load_dotenv(_ROOT_ENV)

DATA_SOURCES = ("memory", "json", "firebase")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Data source: "memory" | "json" | "firebase"
    data_source: str = "memory"
    # When data_source=json: places, reviews, and trust links files
    places_json_path: Optional[Path] = None
    reviews_json_path: Optional[Path] = None
    trust_links_json_path: Optional[Path] = None
    # When data_source=firebase: service account JSON and optional project id
    firebase_credentials_path: Optional[Path] = None
    firebase_project_id: Optional[str] = None

    # Optional JSON overriding RecommendationConfig defaults
    recommender_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent
        data_source = os.getenv("DATA_SOURCE", "").strip().lower() or "memory"
        if data_source not in DATA_SOURCES:
            logger.warning("[config] unknown DATA_SOURCE=%r, using memory", data_source)
            data_source = "memory"

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        data_dir = base_dir / "data"
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            data_source=data_source,
            places_json_path=_path_env("PLACES_JSON_PATH", data_dir / "places.json"),
            reviews_json_path=_path_env("REVIEWS_JSON_PATH", data_dir / "reviews.json"),
            trust_links_json_path=_path_env("TRUST_LINKS_JSON_PATH", data_dir / "trust_links.json"),
            firebase_credentials_path=_path_env("FIREBASE_CREDENTIALS_PATH") or _path_env("GOOGLE_APPLICATION_CREDENTIALS"),
            firebase_project_id=os.getenv("FIREBASE_PROJECT_ID") or None,
            recommender_config_path=_path_env("RECOMMENDER_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.data_source == "json":
            if not self.places_json_path or not self.places_json_path.exists():
                errors.append(f"Places JSON not found: {self.places_json_path}")
            if not self.reviews_json_path or not self.reviews_json_path.exists():
                errors.append(f"Reviews JSON not found: {self.reviews_json_path}")
            # Trust links file is created on first write

        if self.data_source == "firebase":
            if not self.firebase_credentials_path:
                errors.append("FIREBASE_CREDENTIALS_PATH is required when DATA_SOURCE=firebase")
            elif not self.firebase_credentials_path.is_file():
                errors.append(f"Firebase credentials file not found: {self.firebase_credentials_path}")

        if self.recommender_config_path and not self.recommender_config_path.exists():
            errors.append(f"Recommender config not found: {self.recommender_config_path}")

        return len(errors) == 0, errors

    def load_recommendation_config(self) -> RecommendationConfig:
        """RecommendationConfig from recommender_config_path, or defaults."""
        if not self.recommender_config_path:
            return DEFAULT_CONFIG
        with open(self.recommender_config_path) as f:
            return RecommendationConfig.from_dict(json.load(f))


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


def configure_logging(level_name: str) -> int:
    """
    Root logging at LOG_LEVEL. Called from create_app so both `uvicorn server.app:app`
    and `python -m server.server` get the [pipeline]/[ranking] logs.
    Returns the numeric level applied.
    """
    level = getattr(logging, (level_name or "INFO").upper(), None)
    if not isinstance(level, int):
        logger.warning("[config] unknown LOG_LEVEL=%r, using INFO", level_name)
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    # basicConfig is a no-op once handlers exist (e.g. under uvicorn); still apply the level
    logging.getLogger().setLevel(level)
    return level
