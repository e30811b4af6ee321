# ==============================================
# Tests for CountryDirectory
# ==============================================

import pytest

from geometa.model.records import Meta
from geometa.catalog.countries import count_images
from geometa.catalog.results import MutationStatus


class TestAddCountry:
    def test_add_with_iso_id_derives_flag(self, store, directory):
        result = directory.add_country("Kenya", "Africa", country_id="KE")
        assert result.applied
        country = store.find_country("ke")
        assert country.flag == "🇰🇪"
        assert country.metas == []
        assert store.countries[-1] is country

    def test_id_defaults_to_slug(self, store, directory):
        directory.add_country("New Zealand", "Oceania", flag="🇳🇿")
        assert store.find_country("new-zealand").flag == "🇳🇿"

    def test_duplicate_id_rejected(self, store, directory):
        result = directory.add_country("Botswana Again", "Africa", country_id="bw")
        assert result.status is MutationStatus.DUPLICATE
        assert len(store.countries) == 5

    def test_blank_name_rejected(self, directory):
        with pytest.raises(ValueError):
            directory.add_country("   ", "Africa")

    def test_name_without_slug_characters_rejected(self, store, directory):
        with pytest.raises(ValueError):
            directory.add_country("!!!", "Nowhere")
        assert len(store.countries) == 5
        assert store.find_country("") is None

    def test_blank_explicit_id_rejected(self, store, directory):
        with pytest.raises(ValueError):
            directory.add_country("!!!", "Nowhere", country_id="   ")
        assert len(store.countries) == 5

    def test_explicit_id_rescues_punctuation_name(self, store, directory):
        assert directory.add_country("!!!", "Nowhere", country_id="zz").applied
        assert store.find_country("zz").name == "!!!"

    def test_added_country_is_persisted(self, store, directory):
        directory.add_country("Kenya", "Africa", country_id="ke")
        assert '"ke"' in store.storage.get_item(store.slot_key)


class TestFilterCountries:
    def test_blank_query_returns_all(self, directory):
        assert len(directory.filter_countries("")) == 5

    def test_matches_name_case_insensitive(self, directory):
        assert [c.id for c in directory.filter_countries("EGY")] == ["eg"]

    def test_matches_region(self, directory):
        assert [c.id for c in directory.filter_countries("africa")] == ["bw", "eg"]

    def test_no_match(self, directory):
        assert directory.filter_countries("atlantis") == []


class TestStats:
    def test_totals(self, store, directory):
        store.find_country("bw").metas.append(
            Meta(id="1", title="t", type="city", images=["a", "b"])
        )
        store.find_country("eg").metas.append(
            Meta(id="2", title="t", type="city", images=["c"])
        )
        stats = directory.stats()
        assert stats.to_dict() == {"total_countries": 5, "total_metas": 2, "total_images": 3}

    def test_count_images(self, store):
        assert count_images(store.find_country("in")) == 0
