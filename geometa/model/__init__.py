# ==============================================
# MODEL
# ==============================================
#
# Records the catalog is made of.
#
# Modules:
# --------
# - records.py     → Country, Meta, SubMeta, MetaType
# - identifiers.py → SequentialIdGenerator (store-scoped ids)
#
# ==============================================

from .records import Country, Meta, SubMeta, MetaType
from .identifiers import SequentialIdGenerator

__all__ = ["Country", "Meta", "SubMeta", "MetaType", "SequentialIdGenerator"]
