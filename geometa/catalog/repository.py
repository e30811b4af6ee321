# ==============================================
# MetaRepository
# ==============================================
#
# PURPOSE:
#   Create / read / update / delete metas (and their sub-metas)
#   inside one country of a CatalogStore.
#
# CLASS: MetaRepository
# ---------------------
#   Stateful: holds a reference to the CatalogStore.
#
#   Methods:
#   --------
#   - add_meta(country_id, fields) -> MutationResult
#       New Meta with a store-scoped id, appended, then save().
#
#   - update_meta(country_id, meta_id, fields) -> MutationResult
#       Overwrite fields in place, then save(). Unknown id → NOT_FOUND.
#
#   - delete_meta(country_id, meta_id, confirm) -> MutationResult
#       Ask confirm(prompt) first. Declined → CANCELLED.
#       Unknown id → NOT_FOUND. Otherwise filter it out, then save().
#
#   - add_sub_meta(country_id, meta_id, fields) -> MutationResult
#       Append a SubMeta to one meta, then save().
#
#   - get_meta(country_id, meta_id) -> Meta | None
#   - list_metas(country_id) -> list[Meta]
#   - list_sub_metas(country_id) -> list[SubMeta]
#       Sub-metas of every meta in order. Derived on every call.
#
#   `fields` is either a MetaForm (raw form strings) or a dict with
#   title / type / description / images / tags. String images/tags
#   are split on commas, trimmed and empty entries dropped.
#
# ==============================================

from typing import Any, Callable, Dict, List, Optional, Union

from geometa.model.records import Country, Meta, SubMeta
from geometa.normalization.form_fields import MetaForm, split_list
from geometa.persistence.catalog_store import CatalogStore
from geometa.catalog.results import MutationResult, MutationStatus

DELETE_PROMPT = "Are you sure you want to delete this meta?"

Fields = Union[MetaForm, Dict[str, Any]]
ConfirmFn = Callable[[str], bool]


def clean_fields(fields: Fields) -> Dict[str, Any]:
    """
    Bring form input to the shape stored on a Meta.

    Args:
        fields: MetaForm or a plain dict of form values

    Returns:
        Dict with title, type, description, images, tags
    """
    if isinstance(fields, MetaForm):
        return fields.to_fields()
    return {
        "title": fields["title"],
        "type": fields["type"],
        "description": fields.get("description", ""),
        "images": split_list(fields.get("images")),
        "tags": split_list(fields.get("tags")),
    }


class MetaRepository:
    def __init__(self, store: CatalogStore):
        self.store = store

    def add_meta(self, country_id: str, fields: Fields) -> MutationResult:
        country = self.store.find_country(country_id)
        if country is None:
            return MutationResult.not_found(f"Country '{country_id}' not found")

        meta = Meta(id=self.store.ids.next_id(), sub_metas=[], **clean_fields(fields))
        country.metas.append(meta)
        self.store.save()
        return MutationResult.ok(meta, "Meta saved successfully!")

    def update_meta(self, country_id: str, meta_id: str, fields: Fields) -> MutationResult:
        meta = self.get_meta(country_id, meta_id)
        if meta is None:
            return MutationResult.not_found(f"Meta '{meta_id}' not found in '{country_id}'")

        values = clean_fields(fields)
        meta.title = values["title"]
        meta.type = values["type"]
        meta.description = values["description"]
        meta.images = values["images"]
        meta.tags = values["tags"]
        self.store.save()
        return MutationResult.ok(meta, "Meta updated successfully!")

    def delete_meta(self, country_id: str, meta_id: str, confirm: ConfirmFn) -> MutationResult:
        """
        Remove a meta after the user confirms.

        Args:
            country_id: Owning country
            meta_id: Meta to remove
            confirm: Called with DELETE_PROMPT; must return True to proceed

        Returns:
            MutationResult (APPLIED, CANCELLED or NOT_FOUND)
        """
        if not confirm(DELETE_PROMPT):
            return MutationResult(MutationStatus.CANCELLED, None, "Delete cancelled")

        country = self.store.find_country(country_id)
        if country is None:
            return MutationResult.not_found(f"Country '{country_id}' not found")

        removed = country.find_meta(meta_id)
        if removed is None:
            return MutationResult.not_found(f"Meta '{meta_id}' not found in '{country_id}'")

        country.metas = [m for m in country.metas if m.id != meta_id]
        self.store.save()
        return MutationResult.ok(removed, "Meta deleted successfully!")

    def add_sub_meta(self, country_id: str, meta_id: str, fields: Fields) -> MutationResult:
        meta = self.get_meta(country_id, meta_id)
        if meta is None:
            return MutationResult.not_found(f"Meta '{meta_id}' not found in '{country_id}'")

        sub = SubMeta(id=self.store.ids.next_id(), **clean_fields(fields))
        meta.sub_metas.append(sub)
        self.store.save()
        return MutationResult.ok(sub, "Sub-meta saved successfully!")

    def get_meta(self, country_id: str, meta_id: str) -> Optional[Meta]:
        country = self.store.find_country(country_id)
        if country is None:
            return None
        return country.find_meta(meta_id)

    def list_metas(self, country_id: str) -> List[Meta]:
        country = self.store.find_country(country_id)
        return list(country.metas) if country else []

    def list_sub_metas(self, country_id: str) -> List[SubMeta]:
        country = self.store.find_country(country_id)
        if country is None:
            return []
        return flatten_sub_metas(country)


def flatten_sub_metas(country: Country) -> List[SubMeta]:
    return [sub for meta in country.metas for sub in meta.sub_metas]
