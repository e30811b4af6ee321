# ==============================================
# CountryDirectory
# ==============================================
#
# PURPOSE:
#   Country-level operations: adding a country, searching the
#   list, and the totals shown in the stats bar.
#
#   Countries are never deleted; only their metas are.
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from geometa.model.records import Country
from geometa.normalization.form_fields import slugify, iso_to_flag
from geometa.persistence.catalog_store import CatalogStore
from geometa.catalog.results import MutationResult, MutationStatus


@dataclass
class CatalogStats:
    total_countries: int = 0
    total_metas: int = 0
    total_images: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_countries": self.total_countries,
            "total_metas": self.total_metas,
            "total_images": self.total_images,
        }


def count_images(country: Country) -> int:
    """Number of image URLs across a country's metas."""
    return sum(len(meta.images) for meta in country.metas)


class CountryDirectory:
    def __init__(self, store: CatalogStore):
        self.store = store

    def add_country(
        self,
        name: str,
        region: str,
        flag: Optional[str] = None,
        country_id: Optional[str] = None
    ) -> MutationResult:
        """
        Append a new country with no metas and save.

        Args:
            name: Display name (required)
            region: Region label
            flag: Flag emoji; derived from a two-letter id when omitted
            country_id: Stable id; defaults to a slug of the name

        Returns:
            MutationResult (APPLIED or DUPLICATE)

        Raises:
            ValueError: blank name, or no usable id (e.g. a name of only
                punctuation with no country_id)
        """
        name = name.strip()
        if not name:
            raise ValueError("Country name is required")

        new_id = (country_id or slugify(name)).strip().lower()
        if not new_id:
            raise ValueError(f"Cannot derive a country id from '{name}'; pass one explicitly")
        if self.store.find_country(new_id) is not None:
            return MutationResult(
                MutationStatus.DUPLICATE, None, f"Country '{new_id}' already exists"
            )

        country = Country(
            id=new_id,
            name=name,
            flag=flag if flag else iso_to_flag(new_id),
            region=region.strip(),
            metas=[],
        )
        self.store.countries.append(country)
        self.store.save()
        return MutationResult.ok(country, "Country added successfully!")

    def filter_countries(self, query: str) -> List[Country]:
        """Case-insensitive match on name, id or region. Blank query → all."""
        needle = (query or "").strip().lower()
        if not needle:
            return list(self.store.countries)
        return [
            c for c in self.store.countries
            if needle in c.name.lower() or needle in c.id.lower() or needle in c.region.lower()
        ]

    def stats(self) -> CatalogStats:
        countries = self.store.countries
        return CatalogStats(
            total_countries=len(countries),
            total_metas=sum(len(c.metas) for c in countries),
            total_images=sum(count_images(c) for c in countries),
        )
