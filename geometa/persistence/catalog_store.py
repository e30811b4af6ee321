import json
from typing import Any, Dict, List, Optional

from geometa.model.records import Country
from geometa.model.identifiers import SequentialIdGenerator
from geometa.persistence.slot_storage import SlotStorage


# ==============================================
# CatalogStore
# ==============================================
#
# PURPOSE:
#   Own the authoritative in-memory list of countries and be the
#   only code that talks to slot storage.
#
# WHAT IS PERSISTED:
#   The full country list as one JSON array in a single slot
#   (default key "geoMetaCountries"). There is no version field.
#   Every save() overwrites the whole snapshot.
#   Non-ASCII text is written as \uXXXX escapes, so any Python str
#   (lone surrogates from undecodable argv included) can be saved.
#
# FIRST RUN:
#   When the slot is empty, load() seeds DEFAULT_COUNTRIES (with
#   empty meta lists) and saves them immediately.
#
# ERRORS:
#   Snapshots are not validated. Bad JSON raises json.JSONDecodeError,
#   missing keys raise KeyError. Both propagate to the caller.
#
# ==============================================

DEFAULT_COUNTRIES: List[Dict[str, Any]] = [
    {"id": "bw", "name": "Botswana", "flag": "🇧🇼", "region": "Africa"},
    {"id": "eg", "name": "Egypt", "flag": "🇪🇬", "region": "Africa"},
    {"id": "in", "name": "India", "flag": "🇮🇳", "region": "Asia"},
    {"id": "us", "name": "United States", "flag": "🇺🇸", "region": "North America"},
    {"id": "br", "name": "Brazil", "flag": "🇧🇷", "region": "South America"},
]

DEFAULT_SLOT_KEY = "geoMetaCountries"


def default_countries() -> List[Country]:
    """Fresh copies of the seed countries, each with no metas."""
    return [Country(metas=[], **seed) for seed in DEFAULT_COUNTRIES]


class CatalogStore:
    """
    Holds the countries and persists them as a single snapshot.

    The store also owns the id generator so that ids are unique for
    everything it holds.
    """

    def __init__(self, storage: SlotStorage, slot_key: str = DEFAULT_SLOT_KEY):
        """
        Initialize the catalog store. Nothing is read until load().

        Args:
            storage: Slot storage backend
            slot_key: Name of the slot holding the snapshot
        """
        self.storage = storage
        self.slot_key = slot_key
        self.countries: List[Country] = []
        self.ids = SequentialIdGenerator()

    def load(self) -> List[Country]:
        """
        Load the snapshot, or seed the default countries on first run.

        Returns:
            The loaded country list (also kept on self.countries)
        """
        raw = self.storage.get_item(self.slot_key)
        if raw is None:
            print(f"No snapshot found in slot '{self.slot_key}', seeding defaults")
            self.countries = default_countries()
            self.save()
        else:
            self.countries = [Country.from_dict(data) for data in json.loads(raw)]
            print(f"Loaded {len(self.countries)} countries from slot '{self.slot_key}'")

        self.ids = SequentialIdGenerator()
        self.ids.observe(self._all_record_ids())
        return self.countries

    def save(self) -> None:
        """Serialize every country and overwrite the slot."""
        self.storage.set_item(self.slot_key, self.to_json())

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(
            [country.to_dict() for country in self.countries],
            indent=indent
        )

    def export_json(self) -> str:
        """Pretty-printed snapshot, as offered by the export action."""
        return self.to_json(indent=2)

    def find_country(self, country_id: str) -> Optional[Country]:
        for country in self.countries:
            if country.id == country_id:
                return country
        return None

    def exists(self) -> bool:
        """True if a snapshot from a previous run is present."""
        return self.storage.has_item(self.slot_key)

    def clear(self) -> None:
        """Delete the snapshot so the next load() seeds defaults again."""
        self.storage.remove_item(self.slot_key)
        self.countries = []
        self.ids = SequentialIdGenerator()
        print("Catalog snapshot cleared!")

    def _all_record_ids(self):
        for country in self.countries:
            for meta in country.metas:
                yield meta.id
                for sub in meta.sub_metas:
                    yield sub.id
