# ==============================================
# CATALOG
# ==============================================
#
# Operations over the countries held by a CatalogStore.
#
# Modules:
# --------
# - repository.py → Meta / sub-meta CRUD scoped to a country
# - countries.py  → Add / search countries, catalog totals
# - results.py    → MutationResult reported by every mutation
#
# ==============================================

from .results import MutationResult, MutationStatus
from .repository import MetaRepository, DELETE_PROMPT, flatten_sub_metas
from .countries import CountryDirectory, CatalogStats, count_images

__all__ = [
    "MutationResult",
    "MutationStatus",
    "MetaRepository",
    "DELETE_PROMPT",
    "flatten_sub_metas",
    "CountryDirectory",
    "CatalogStats",
    "count_images",
]
