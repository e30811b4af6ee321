# ==============================================
# GeoMeta Catalog
# ==============================================
#
# Package Structure:
#
# geometa/
# ├── model/            # Country / Meta / SubMeta records
# ├── normalization/    # Clean raw form input into record fields
# ├── persistence/      # Key-value slots + the catalog store
# ├── catalog/          # Meta and country CRUD over the store
# ├── presentation/     # HTML fragments, deferred renders, controller
# ├── config.py         # Configuration management
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
