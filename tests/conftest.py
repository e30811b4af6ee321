# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests. Everything runs against
# in-memory or tmp_path storage; no MongoDB server is needed.
# ==============================================

import pytest

from geometa.normalization.form_fields import MetaForm
from geometa.persistence.slot_storage import MemorySlotStorage
from geometa.persistence.catalog_store import CatalogStore
from geometa.catalog.repository import MetaRepository
from geometa.catalog.countries import CountryDirectory
from geometa.presentation.controller import CatalogController


class FakeClock:
    """Manually advanced clock for deferred render tests."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def memory_storage():
    """Empty in-memory slot storage (first run)."""
    return MemorySlotStorage()


@pytest.fixture
def store(memory_storage):
    """A store seeded with the five default countries."""
    catalog = CatalogStore(memory_storage)
    catalog.load()
    return catalog


@pytest.fixture
def repo(store):
    return MetaRepository(store)


@pytest.fixture
def directory(store):
    return CountryDirectory(store)


@pytest.fixture
def sample_form():
    """Meta form as a user would submit it."""
    return MetaForm(
        title="Okavango Delta",
        type="nature",
        description="Inland delta in northern Botswana",
        images="a.png, b.png",
        tags="x, y",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(memory_storage, clock):
    ctrl = CatalogController(CatalogStore(memory_storage), delay_seconds=0.5, clock=clock)
    ctrl.start()
    return ctrl


def always(_question):
    return True


def never(_question):
    return False
