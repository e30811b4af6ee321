# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides typed config objects to all other modules.
#
# CLASSES:
# --------
# - StorageConfig (dataclass)
#     backend: str       (default "file")  → "file", "memory" or "mongo"
#     data_dir: str      (default "data/") → where file slots live
#     slot_key: str      (default "geoMetaCountries")
#
# - MongoConfig (dataclass)
#     host: str          (default "localhost")
#     port: int          (default 27017)
#     user: str | None   (default None)
#     password: str | None (default None)
#     database: str      (default "geometa")
#     collection: str    (default "slots")
#
# - RenderConfig (dataclass)
#     delay_seconds: float (default 0.5)
#
# - AppConfig (dataclass)
#     storage: StorageConfig
#     mongo: MongoConfig
#     render: RenderConfig
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same instance on repeated calls.
#
# USAGE:
# ------
#   from geometa.config import get_config
#   config = get_config()
#   print(config.storage.slot_key)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class StorageConfig:
    """Where the catalog snapshot is kept."""
    backend: str = "file"
    data_dir: str = "data/"
    slot_key: str = "geoMetaCountries"


@dataclass
class MongoConfig:
    """MongoDB slot storage configuration."""
    host: str = "localhost"
    port: int = 27017
    user: Optional[str] = None
    password: Optional[str] = None
    database: str = "geometa"
    collection: str = "slots"


@dataclass
class RenderConfig:
    """Deferred render settings for the presentation layer."""
    delay_seconds: float = 0.5


@dataclass
class AppConfig:
    """Main application configuration."""
    storage: StorageConfig = field(default_factory=StorageConfig)
    mongo: MongoConfig = field(default_factory=MongoConfig)
    render: RenderConfig = field(default_factory=RenderConfig)


_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    storage_config = StorageConfig(
        backend=os.getenv("GEOMETA_STORAGE", "file").strip().lower(),
        data_dir=os.getenv("GEOMETA_DATA_DIR", "data/"),
        slot_key=os.getenv("GEOMETA_SLOT_KEY", "geoMetaCountries")
    )

    mongo_config = MongoConfig(
        host=os.getenv("MONGO_HOST", "localhost"),
        port=int(os.getenv("MONGO_PORT", "27017")),
        user=os.getenv("MONGO_USER") or None,
        password=os.getenv("MONGO_PASSWORD") or None,
        database=os.getenv("MONGO_DATABASE", "geometa"),
        collection=os.getenv("MONGO_COLLECTION", "slots")
    )

    render_config = RenderConfig(
        delay_seconds=float(os.getenv("GEOMETA_RENDER_DELAY", "0.5"))
    )

    _config_instance = AppConfig(
        storage=storage_config,
        mongo=mongo_config,
        render=render_config
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None
