# ==============================================
# Tests for HTML fragment rendering
# ==============================================

from geometa.model.records import Country, Meta, SubMeta
from geometa.catalog.countries import CatalogStats
from geometa.presentation import render


def _country(metas=None):
    return Country(id="bw", name="Botswana", flag="🇧🇼", region="Africa", metas=metas or [])


class TestCountryFragments:
    def test_tabs_mark_active_country(self):
        html = render.render_country_tabs(
            [_country(), Country(id="eg", name="Egypt", flag="🇪🇬", region="Africa")],
            active_id="eg"
        )
        assert '<div class="tab" data-country-id="bw">' in html
        assert '<div class="tab active" data-country-id="eg">' in html
        assert '<span class="country-count">(0)</span>' in html

    def test_country_info(self):
        country = _country([Meta(id="1", title="t", type="city", images=["a", "b"])])
        html = render.render_country_info(country)
        assert "<h2>Botswana</h2>" in html
        assert "<strong>Country Code:</strong> BW" in html
        assert "<strong>Total Metas:</strong> 1" in html
        assert "<strong>Total Images:</strong> 2" in html


class TestMetaFragments:
    def test_empty_state(self):
        html = render.render_metas(_country())
        assert "No metas added yet" in html
        assert "meta-grid" not in html

    def test_meta_card(self):
        meta = Meta(id="7", title="Okavango", type="nature", description="Delta",
                    images=["a.png"], tags=["wild", "water"])
        html = render.render_metas(_country([meta]))
        assert '<div class="meta-grid">' in html
        assert 'data-meta-id="7"' in html
        assert '<img src="a.png" alt="Meta image 1" loading="lazy">' in html
        assert '<span class="tag">wild</span><span class="tag">water</span>' in html
        assert "1 images" in html and "2 tags" in html
        assert 'data-action="delete"' in html and 'data-country-id="bw"' in html

    def test_no_image_strip_without_images(self):
        html = render.render_meta_card(Meta(id="1", title="t", type="city"), "bw")
        assert "meta-images" not in html

    def test_user_content_is_escaped(self):
        meta = Meta(id="1", title="<script>alert(1)</script>", type="city",
                    images=['x" onerror="boom'], tags=["<b>"])
        html = render.render_meta_card(meta, "bw")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert 'onerror="boom' not in html
        assert "&lt;b&gt;" in html


class TestSubMetaFragments:
    def test_empty_state(self):
        assert "No sub-metas yet" in render.render_sub_metas([])

    def test_cards_in_order(self):
        html = render.render_sub_metas([
            SubMeta(id="s1", title="First", type="city"),
            SubMeta(id="s2", title="Second", type="city"),
        ])
        assert html.index("First") < html.index("Second")
        assert html.startswith('<div class="sub-meta-grid">')


class TestMisc:
    def test_loading(self):
        assert "Loading..." in render.render_loading()

    def test_stats(self):
        html = render.render_stats(CatalogStats(5, 2, 3))
        assert '<span id="total-countries">5</span>' in html
        assert '<span id="total-images">3</span>' in html
