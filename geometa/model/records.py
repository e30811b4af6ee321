# ==============================================
# Records (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes for everything the catalog holds: countries,
#   their metas, and the sub-metas hanging off each meta.
#
# WHY THIS FILE EXISTS:
#   The store, the repository and the renderer all pass these
#   objects around. Keeping them in one place (with their own
#   to_dict / from_dict) means the JSON layout of the persisted
#   snapshot is defined exactly once.
#
# ENUMS:
# ------
# - MetaType(Enum): LANDMARK, CITY, CULTURE, NATURE, HISTORY, OTHER
#     Known values offered by the meta form. The record itself keeps
#     a plain string so unknown types from older snapshots load fine.
#
# CLASSES:
# --------
# - SubMeta (dataclass)
#     id, title, type, description, images, tags
#     Serialized with an always-empty "subMetas" list so that it has
#     the same shape as a Meta. Only one level of nesting exists.
#
# - Meta (dataclass)
#     Same fields as SubMeta plus sub_metas: list[SubMeta]
#
# - Country (dataclass)
#     id, name, flag, region, metas: list[Meta]
#
# JSON LAYOUT:
# ------------
#   [
#     {"id": "bw", "name": "Botswana", "flag": "🇧🇼", "region": "Africa",
#      "metas": [
#        {"id": "1", "title": "...", "type": "landmark", "description": "...",
#         "images": ["a.png"], "tags": ["x"], "subMetas": [...]}
#      ]}
#   ]
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class MetaType(Enum):
    """Meta types offered by the meta form."""
    LANDMARK = "landmark"
    CITY = "city"
    CULTURE = "culture"
    NATURE = "nature"
    HISTORY = "history"
    OTHER = "other"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


@dataclass
class SubMeta:
    """A meta-shaped record attached to a single Meta."""

    id: str
    title: str
    type: str
    description: str = ""
    images: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "description": self.description,
            "images": list(self.images),
            "tags": list(self.tags),
            "subMetas": [],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubMeta":
        # Sub-metas never nest further
        if data.get("subMetas"):
            raise ValueError(f"Sub-meta {data.get('id')!r} carries nested sub-metas")
        return cls(
            id=str(data["id"]),
            title=data["title"],
            type=data["type"],
            description=data.get("description", ""),
            images=list(data.get("images", [])),
            tags=list(data.get("tags", [])),
        )


@dataclass
class Meta:
    """
    A titled, typed record of descriptive information attached to a country.

    The id is unique within the owning country only.
    """

    id: str
    title: str
    type: str
    description: str = ""
    images: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    sub_metas: List[SubMeta] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the meta (and its sub-metas) for persistence.

        Returns:
            A JSON-serializable dictionary using the persisted key names
        """
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "description": self.description,
            "images": list(self.images),
            "tags": list(self.tags),
            "subMetas": [sub.to_dict() for sub in self.sub_metas],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Meta":
        """
        Reconstruct a Meta from a persisted snapshot.

        Args:
            data: Dictionary with saved meta information

        Returns:
            A Meta instance
        """
        return cls(
            id=str(data["id"]),
            title=data["title"],
            type=data["type"],
            description=data.get("description", ""),
            images=list(data.get("images", [])),
            tags=list(data.get("tags", [])),
            sub_metas=[SubMeta.from_dict(sub) for sub in data.get("subMetas", [])],
        )


@dataclass
class Country:
    """A country and its ordered list of metas."""

    id: str
    name: str
    flag: str
    region: str
    metas: List[Meta] = field(default_factory=list)

    def find_meta(self, meta_id: str) -> Optional[Meta]:
        """Linear scan for a meta by id. Returns None when absent."""
        for meta in self.metas:
            if meta.id == meta_id:
                return meta
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "flag": self.flag,
            "region": self.region,
            "metas": [meta.to_dict() for meta in self.metas],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Country":
        # Older snapshots also carry a country-level "subMetas" list; it was
        # never written to, so it is ignored here.
        return cls(
            id=data["id"],
            name=data["name"],
            flag=data.get("flag", ""),
            region=data.get("region", ""),
            metas=[Meta.from_dict(meta) for meta in data["metas"]],
        )
