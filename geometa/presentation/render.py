"""
HTML fragments for the catalog page.

Each function returns a string that replaces the inner HTML of one
container (tabs, country info, metas, sub-metas, stats). All user
supplied text goes through html.escape.
"""

import html
from typing import Iterable, List, Optional

from geometa.model.records import Country, Meta, SubMeta
from geometa.catalog.countries import CatalogStats, count_images


def _e(value) -> str:
    return html.escape(str(value), quote=True)


def render_loading() -> str:
    return (
        '<div class="loading-spinner">'
        '<i class="fas fa-spinner fa-spin"></i>'
        '<p>Loading...</p>'
        '</div>'
    )


def render_empty_state(icon: str, heading: str, text: str) -> str:
    return (
        '<div class="empty-state">'
        f'<i class="fas {_e(icon)}"></i>'
        f'<h3>{_e(heading)}</h3>'
        f'<p>{_e(text)}</p>'
        '</div>'
    )


def render_country_tabs(countries: Iterable[Country], active_id: Optional[str] = None) -> str:
    tabs = []
    for country in countries:
        css = "tab active" if country.id == active_id else "tab"
        tabs.append(
            f'<div class="{css}" data-country-id="{_e(country.id)}">'
            '<i class="fas fa-flag"></i> '
            f'{_e(country.flag)} {_e(country.name)} '
            f'<span class="country-count">({len(country.metas)})</span>'
            '</div>'
        )
    return "".join(tabs)


def render_country_info(country: Country) -> str:
    return (
        '<div class="country-detail-card">'
        '<div class="country-header">'
        f'<h2>{_e(country.name)}</h2>'
        f'<div class="country-flag">{_e(country.flag)}</div>'
        '</div>'
        '<div class="country-info">'
        f'<p><strong>Region:</strong> {_e(country.region)}</p>'
        f'<p><strong>Country Code:</strong> {_e(country.id.upper())}</p>'
        f'<p><strong>Total Metas:</strong> {len(country.metas)}</p>'
        f'<p><strong>Total Images:</strong> {count_images(country)}</p>'
        '</div>'
        '</div>'
    )


def _render_images(images: List[str], label: str) -> str:
    if not images:
        return ""
    imgs = "".join(
        f'<img src="{_e(src)}" alt="{_e(label)} {idx + 1}" loading="lazy">'
        for idx, src in enumerate(images)
    )
    return f'<div class="meta-images">{imgs}</div>'


def _render_tags(tags: List[str]) -> str:
    spans = "".join(f'<span class="tag">{_e(tag)}</span>' for tag in tags)
    return f'<div class="meta-tags">{spans}</div>'


def render_meta_card(meta: Meta, country_id: str) -> str:
    """
    One meta as a card with its image strip, tags and edit/delete buttons.

    The buttons carry data attributes (not inline handlers) naming the
    meta and its country.
    """
    return (
        f'<div class="meta-card" data-meta-id="{_e(meta.id)}">'
        '<div class="meta-header">'
        f'<h3>{_e(meta.title)}</h3>'
        f'<span class="meta-type badge">{_e(meta.type)}</span>'
        '</div>'
        f'<p class="meta-description">{_e(meta.description)}</p>'
        '<div class="meta-stats">'
        f'<span><i class="fas fa-image"></i> {len(meta.images)} images</span>'
        f'<span><i class="fas fa-tags"></i> {len(meta.tags)} tags</span>'
        f'<span><i class="fas fa-layer-group"></i> {len(meta.sub_metas)} sub-metas</span>'
        '</div>'
        f'{_render_images(meta.images, "Meta image")}'
        f'{_render_tags(meta.tags)}'
        '<div class="meta-actions">'
        f'<button class="btn-sm-primary" data-action="edit" data-meta-id="{_e(meta.id)}" '
        f'data-country-id="{_e(country_id)}"><i class="fas fa-edit"></i> Edit</button>'
        f'<button class="btn-sm-secondary" data-action="delete" data-meta-id="{_e(meta.id)}" '
        f'data-country-id="{_e(country_id)}"><i class="fas fa-trash"></i> Delete</button>'
        '</div>'
        '</div>'
    )


def render_metas(country: Country) -> str:
    if not country.metas:
        return render_empty_state(
            "fa-map-pin",
            "No metas added yet",
            "Start by adding your first meta information!"
        )
    cards = "".join(render_meta_card(meta, country.id) for meta in country.metas)
    return f'<div class="meta-grid">{cards}</div>'


def render_sub_meta_card(sub: SubMeta) -> str:
    return (
        f'<div class="sub-meta-card" data-sub-meta-id="{_e(sub.id)}">'
        f'<h4>{_e(sub.title)}</h4>'
        f'<span class="meta-type badge">{_e(sub.type)}</span>'
        f'<p>{_e(sub.description)}</p>'
        f'{_render_images(sub.images, "Sub-meta image")}'
        f'{_render_tags(sub.tags)}'
        '</div>'
    )


def render_sub_metas(sub_metas: List[SubMeta]) -> str:
    if not sub_metas:
        return render_empty_state(
            "fa-layer-group",
            "No sub-metas yet",
            "Add sub-metas to your metas for more detailed information!"
        )
    cards = "".join(render_sub_meta_card(sub) for sub in sub_metas)
    return f'<div class="sub-meta-grid">{cards}</div>'


def render_stats(stats: CatalogStats) -> str:
    return (
        '<div class="stats">'
        f'<span id="total-countries">{stats.total_countries}</span>'
        f'<span id="total-metas">{stats.total_metas}</span>'
        f'<span id="total-images">{stats.total_images}</span>'
        '</div>'
    )
