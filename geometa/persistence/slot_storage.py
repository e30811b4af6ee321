# ==============================================
# Slot Storage
# ==============================================
#
# PURPOSE:
#   A tiny key-value store of named string "slots". The catalog
#   keeps its whole snapshot in one slot, the way a browser app
#   keeps it in local storage.
#
# CLASSES:
# --------
# - SlotStorage            → interface: get_item / set_item / remove_item / has_item
# - MemorySlotStorage      → dict-backed, nothing survives the process
# - FileSlotStorage        → one "<key>.json" file per slot in a directory
# - MongoSlotStorage       → one document per slot in a MongoDB collection
#
# FUNCTION:
# ---------
# - open_storage(config: AppConfig) -> SlotStorage
#     Build the backend named by config.storage.backend.
#
# NOTES:
# ------
#   Writes are whole-value overwrites. FileSlotStorage writes to a
#   temporary file and renames it over the slot so a reader never
#   sees a half-written snapshot.
#
# ==============================================

import os
import tempfile
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import quote_plus

from pymongo import MongoClient as PyMongoClient
from pymongo.errors import ConnectionFailure, OperationFailure


class SlotStorage:
    """Named string slots."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def has_item(self, key: str) -> bool:
        return self.get_item(key) is not None

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class MemorySlotStorage(SlotStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._slots: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._slots.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._slots[key] = value

    def remove_item(self, key: str) -> None:
        self._slots.pop(key, None)


class FileSlotStorage(SlotStorage):
    """
    Keeps each slot as a file in a directory.

    Files created:
    - <storage_dir>/<key>.json
    """

    def __init__(self, storage_dir: str = "data/"):
        """
        Initialize the file storage.

        Args:
            storage_dir: Directory to store slot files
        """
        self.storage_dir = Path(storage_dir)

        # Create directory if it doesn't exist
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        return self.storage_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.storage_dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(value)
            os.replace(tmp_name, path)
        finally:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)

    def remove_item(self, key: str) -> None:
        path = self.path_for(key)
        if path.exists():
            path.unlink()
            print(f"🗑️  Deleted {path}")


class MongoSlotStorage(SlotStorage):
    """
    Keeps each slot as {"_id": key, "value": "..."} in one collection.

    Connects lazily on first use. Pass `client` to reuse an existing
    pymongo client (it is not closed by close()).
    """

    def __init__(self, host="localhost", port=27017, database="geometa",
                 collection="slots", user=None, password=None, client=None):
        # Store connection params. Don't connect yet.
        self.host = host
        self.port = port
        self.database = database
        self.collection_name = collection
        self.user = user
        self.password = password
        self.client = client
        self._owns_client = client is None

    def connect(self):
        if self.client is not None:
            return
        try:
            if self.user and self.password:
                user = quote_plus(str(self.user))
                password = quote_plus(str(self.password))
                uri = f"mongodb://{user}:{password}@{self.host}:{self.port}/{self.database}"
            else:
                uri = f"mongodb://{self.host}:{self.port}/{self.database}"
            self.client = PyMongoClient(uri)
            # Test connection
            self.client.admin.command('ping')
            print("✓ Connected to MongoDB successfully.")
        except ConnectionFailure as e:
            print(f"✗ Could not connect to MongoDB: {e}")
            self.client = None
            raise
        except OperationFailure as e:
            print(f"✗ Authentication failed: {e}")
            self.client = None
            raise

    def close(self):
        if self.client is not None and self._owns_client:
            self.client.close()
            print("Disconnected from MongoDB.")
            self.client = None

    def _collection(self):
        self.connect()
        return self.client[self.database][self.collection_name]

    def get_item(self, key: str) -> Optional[str]:
        doc = self._collection().find_one({"_id": key})
        if doc is None:
            return None
        return doc["value"]

    def set_item(self, key: str, value: str) -> None:
        self._collection().update_one(
            {"_id": key},
            {"$set": {"value": value}},
            upsert=True
        )

    def remove_item(self, key: str) -> None:
        result = self._collection().delete_one({"_id": key})
        if result.deleted_count:
            print(f"🗑️  Deleted slot '{key}' from '{self.collection_name}'")


def open_storage(config) -> SlotStorage:
    """
    Build the slot storage backend named in the configuration.

    Args:
        config: AppConfig

    Returns:
        A SlotStorage instance
    """
    backend = config.storage.backend
    if backend == "memory":
        return MemorySlotStorage()
    if backend == "file":
        return FileSlotStorage(config.storage.data_dir)
    if backend == "mongo":
        return MongoSlotStorage(
            host=config.mongo.host,
            port=config.mongo.port,
            database=config.mongo.database,
            collection=config.mongo.collection,
            user=config.mongo.user,
            password=config.mongo.password
        )
    raise ValueError(f"Unknown storage backend: {backend!r} (expected file, memory or mongo)")
