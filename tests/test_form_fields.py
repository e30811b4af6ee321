# ==============================================
# Tests for Form Field Normalization
# ==============================================

from geometa.model.records import Meta
from geometa.normalization.form_fields import (
    MetaForm, split_list, join_list, slugify, iso_to_flag
)


class TestSplitList:
    def test_comma_separated_string_is_trimmed(self):
        """'a.png, b.png' -> ['a.png', 'b.png']"""
        assert split_list("a.png, b.png") == ["a.png", "b.png"]

    def test_empty_entries_are_dropped(self):
        assert split_list("x,, ,y,") == ["x", "y"]

    def test_blank_and_none(self):
        assert split_list("") == []
        assert split_list("   ") == []
        assert split_list(None) == []

    def test_list_input_is_cleaned(self):
        assert split_list([" x ", None, "", "y"]) == ["x", "y"]

    def test_order_is_preserved(self):
        assert split_list("c, a, b") == ["c", "a", "b"]


class TestHelpers:
    def test_join_list(self):
        assert join_list(["a.png", "b.png"]) == "a.png, b.png"
        assert join_list([]) == ""

    def test_slugify(self):
        assert slugify("United States") == "united-states"
        assert slugify("  Côte d'Ivoire ") == "côte-divoire"

    def test_iso_to_flag(self):
        assert iso_to_flag("bw") == "🇧🇼"
        assert iso_to_flag("US") == "🇺🇸"

    def test_iso_to_flag_rejects_non_codes(self):
        assert iso_to_flag("kenya") == ""
        assert iso_to_flag("") == ""
        assert iso_to_flag("1a") == ""


class TestMetaForm:
    def test_to_fields_splits_images_and_tags(self, sample_form):
        fields = sample_form.to_fields()
        assert fields["images"] == ["a.png", "b.png"]
        assert fields["tags"] == ["x", "y"]
        assert fields["title"] == "Okavango Delta"
        assert fields["type"] == "nature"

    def test_from_record_prefills_comma_strings(self):
        meta = Meta(id="1", title="T", type="city", description="D",
                    images=["a.png", "b.png"], tags=["x"])
        form = MetaForm.from_record(meta)
        assert form.images == "a.png, b.png"
        assert form.tags == "x"
        assert form.to_fields()["images"] == meta.images
