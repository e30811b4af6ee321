# ==============================================
# NORMALIZATION
# ==============================================
#
# Cleans raw form input before it reaches the catalog.
#
# Modules:
# --------
# - form_fields.py → split comma lists, slugs, flags, MetaForm
#
# ==============================================

from .form_fields import MetaForm, split_list, join_list, slugify, iso_to_flag

__all__ = ["MetaForm", "split_list", "join_list", "slugify", "iso_to_flag"]
