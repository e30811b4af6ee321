# ==============================================
# Form Field Normalization
# ==============================================
#
# PURPOSE:
#   Turn raw form input (everything arrives as strings) into the
#   cleaned values the catalog records hold.
#
# WHY THIS FILE EXISTS:
#   The meta form collects images and tags as one comma-separated
#   string each. Both the "add" and the "edit" path must split them
#   the same way, so the rule lives here instead of in each caller.
#
# RULES:
# ------
#   1. "a.png, b.png"  → ["a.png", "b.png"]   (split on commas, trim)
#   2. "x,, ,y"        → ["x", "y"]           (empty entries dropped)
#   3. ["x ", None]    → ["x"]                (lists are cleaned too)
#   4. title / type / description are kept as given (presence only)
#
# ==============================================

import re
from dataclasses import dataclass
from typing import Any, Dict, List


def split_list(values: Any) -> List[str]:
    """
    Split a comma-separated string into trimmed, non-empty entries.

    Args:
        values: A comma-separated string, a list of values, or None

    Returns:
        List of cleaned strings in their original order
    """
    if values is None:
        return []
    if isinstance(values, str):
        return [v.strip() for v in values.split(",") if v.strip()]
    if isinstance(values, (list, tuple)):
        out: List[str] = []
        for v in values:
            if v is None:
                continue
            s = str(v).strip()
            if s:
                out.append(s)
        return out
    s = str(values).strip()
    return [s] if s else []


def join_list(values: List[str]) -> str:
    """Inverse of split_list for pre-filling an edit form."""
    return ", ".join(values)


def slugify(text: str) -> str:
    """Convert a country name into an id-friendly slug."""
    text = text.lower().strip()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[-\s]+', '-', text)
    return text.strip('-')


def iso_to_flag(iso_code: str) -> str:
    """Regional indicator emoji for a two-letter country code, '' otherwise."""
    if not iso_code or len(iso_code) != 2 or not iso_code.isalpha():
        return ""
    return "".join(chr(0x1F1E6 + ord(c) - ord("A")) for c in iso_code.upper())


@dataclass
class MetaForm:
    """
    Raw values submitted through the meta form.

    images and tags stay as the comma-separated strings the user typed;
    to_fields() produces the cleaned values.
    """
    title: str
    type: str
    description: str = ""
    images: str = ""
    tags: str = ""

    def to_fields(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "type": self.type,
            "description": self.description,
            "images": split_list(self.images),
            "tags": split_list(self.tags),
        }

    @classmethod
    def from_record(cls, record) -> "MetaForm":
        """Pre-fill a form from an existing Meta or SubMeta."""
        return cls(
            title=record.title,
            type=record.type,
            description=record.description,
            images=join_list(record.images),
            tags=join_list(record.tags),
        )
