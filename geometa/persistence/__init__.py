# ==============================================
# PERSISTENCE
# ==============================================
#
# This package keeps the catalog across restarts.
#
# Modules:
# --------
# - slot_storage.py   → Named string slots (memory / file / MongoDB)
# - catalog_store.py  → Load/save the country snapshot, seed defaults
#
# ==============================================

from .slot_storage import (
    SlotStorage,
    MemorySlotStorage,
    FileSlotStorage,
    MongoSlotStorage,
    open_storage,
)
from .catalog_store import CatalogStore, DEFAULT_COUNTRIES, default_countries

__all__ = [
    "SlotStorage",
    "MemorySlotStorage",
    "FileSlotStorage",
    "MongoSlotStorage",
    "open_storage",
    "CatalogStore",
    "DEFAULT_COUNTRIES",
    "default_countries",
]
