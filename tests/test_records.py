# ==============================================
# Tests for Country / Meta / SubMeta records
# ==============================================

import pytest

from geometa.model.records import Country, Meta, SubMeta, MetaType
from geometa.model.identifiers import SequentialIdGenerator


@pytest.fixture
def country():
    return Country(
        id="eg", name="Egypt", flag="🇪🇬", region="Africa",
        metas=[
            Meta(id="1", title="Giza", type="landmark", description="Pyramids",
                 images=["giza.png"], tags=["ancient"],
                 sub_metas=[SubMeta(id="2", title="Khufu", type="landmark")]),
            Meta(id="3", title="Cairo", type="city"),
        ],
    )


class TestSerialization:
    def test_meta_uses_persisted_key_names(self, country):
        data = country.metas[0].to_dict()
        assert "subMetas" in data
        assert "sub_metas" not in data
        assert data["subMetas"][0]["title"] == "Khufu"

    def test_sub_meta_has_meta_shape(self):
        sub = SubMeta(id="9", title="t", type="city")
        meta = Meta(id="9", title="t", type="city")
        assert set(sub.to_dict()) == set(meta.to_dict())
        assert sub.to_dict()["subMetas"] == []

    def test_country_round_trip(self, country):
        assert Country.from_dict(country.to_dict()) == country

    def test_legacy_country_level_sub_metas_ignored(self):
        data = {"id": "bw", "name": "Botswana", "flag": "🇧🇼", "region": "Africa",
                "metas": [], "subMetas": []}
        assert Country.from_dict(data).metas == []

    def test_numeric_ids_load_as_strings(self):
        meta = Meta.from_dict({"id": 1700000000000, "title": "t", "type": "city"})
        assert meta.id == "1700000000000"

    def test_missing_required_key_raises(self):
        with pytest.raises(KeyError):
            Country.from_dict({"id": "bw", "name": "Botswana"})

    def test_nested_sub_meta_rejected(self):
        data = {"id": "1", "title": "t", "type": "city",
                "subMetas": [{"id": "2", "title": "s", "type": "city",
                              "subMetas": [{"id": "3", "title": "x", "type": "city"}]}]}
        with pytest.raises(ValueError):
            Meta.from_dict(data)


class TestCountry:
    def test_find_meta(self, country):
        assert country.find_meta("3").title == "Cairo"
        assert country.find_meta("missing") is None


class TestMetaType:
    def test_known_values(self):
        assert "landmark" in MetaType.values()
        assert "city" in MetaType.values()


class TestSequentialIdGenerator:
    def test_increasing_ids(self):
        ids = SequentialIdGenerator()
        assert [ids.next_id() for _ in range(3)] == ["1", "2", "3"]

    def test_observe_skips_past_existing(self):
        ids = SequentialIdGenerator()
        ids.observe(["5", "1700000000000", "landmark"])
        assert ids.next_id() == "1700000000001"

    def test_observe_never_moves_backwards(self):
        ids = SequentialIdGenerator(start=10)
        ids.observe(["3"])
        assert ids.peek == 10
