# ==============================================
# CatalogController: Page Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties the store, the catalog operations and the renderer
#   together the way the catalog page uses them. Callers (the CLI,
#   a web handler, tests) only talk to this class.
#
#   ┌──────────────────────────────────────────────┐
#   │ user action (form submit / button click)     │
#   └──────────────┬───────────────────────────────┘
#                  ▼
#   MetaRepository / CountryDirectory  → mutate store, save()
#                  ▼
#   RenderQueue.schedule(...)          → deferred, token-checked
#                  ▼
#   output["metas"], output["tabs"], ...
#
# CONTAINERS:
# -----------
#   "tabs", "stats", "country-info", "metas", "sub-metas"
#
# EDIT SESSION:
# -------------
#   begin_edit() remembers which meta the open form belongs to.
#   submit_edit() updates that meta only. A plain submit_meta()
#   always adds a new one. The session is UI state and is never
#   persisted.
#
# ==============================================

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from geometa.model.records import Country, MetaType
from geometa.normalization.form_fields import MetaForm
from geometa.persistence.catalog_store import CatalogStore
from geometa.catalog.repository import MetaRepository, ConfirmFn
from geometa.catalog.countries import CountryDirectory
from geometa.catalog.results import MutationResult, MutationStatus
from geometa.presentation import render
from geometa.presentation.render_queue import RenderQueue

TABS = "tabs"
STATS = "stats"
COUNTRY_INFO = "country-info"
METAS = "metas"
SUB_METAS = "sub-metas"


@dataclass
class Notification:
    message: str
    level: str = "success"  # success | info | error


class CatalogController:
    """
    Page-level controller. Owns one CatalogStore; there is no module-level
    instance.
    """

    def __init__(
        self,
        store: CatalogStore,
        delay_seconds: float = 0.5,
        clock: Callable[[], float] = time.monotonic
    ):
        self.store = store
        self.metas = MetaRepository(store)
        self.countries = CountryDirectory(store)
        self.renders = RenderQueue(delay_seconds=delay_seconds, clock=clock)
        self.current_country: Optional[Country] = None
        self.notifications: List[Notification] = []
        self._editing: Optional[Tuple[str, str]] = None
        self._search = ""

    def start(self) -> None:
        """Load (or seed) the catalog and draw the tabs and stats."""
        self.store.load()
        self._refresh_tabs()

    # ---------- country selection ----------

    def select_country(self, country_id: str) -> bool:
        country = self.store.find_country(country_id)
        if country is None:
            self._notify(f"Country '{country_id}' not found", "error")
            return False

        self.current_country = country
        self._refresh_tabs()
        for target, fn in (
            (COUNTRY_INFO, lambda: render.render_country_info(country)),
            (METAS, lambda: render.render_metas(country)),
            (SUB_METAS, lambda: render.render_sub_metas(self.metas.list_sub_metas(country.id))),
        ):
            self.renders.show_now(target, render.render_loading())
            self.renders.schedule(target, fn)
        return True

    def search(self, query: str) -> List[Country]:
        self._search = query or ""
        matches = self.countries.filter_countries(self._search)
        self.renders.show_now(TABS, render.render_country_tabs(matches, self._active_id()))
        return matches

    def add_country(self, name: str, region: str, flag: Optional[str] = None,
                    country_id: Optional[str] = None) -> MutationResult:
        result = self.countries.add_country(name, region, flag=flag, country_id=country_id)
        if result.applied:
            self._notify(result.message, "success")
            self._refresh_tabs()
        else:
            self._notify(result.message, "error")
        return result

    # ---------- meta forms ----------

    def open_meta_form(self, country_id: str) -> Optional[MetaForm]:
        """Default values for a blank "Add Meta" form."""
        country = self.store.find_country(country_id)
        if country is None:
            return None
        self._editing = None
        return MetaForm(
            title="New Meta Information",
            type=MetaType.LANDMARK.value,
            description=f"Describe the meta information for {country.name}",
        )

    def open_sub_meta_form(self, country_id: str) -> Optional[MetaForm]:
        country = self.store.find_country(country_id)
        if country is None:
            return None
        self._editing = None
        return MetaForm(
            title="Sub-Meta: New Information",
            type=MetaType.LANDMARK.value,
            description=f"Add detailed sub-meta information for {country.name}",
        )

    def submit_meta(self, form: MetaForm) -> MutationResult:
        if self.current_country is None:
            result = MutationResult.not_found("No country selected")
        else:
            result = self.metas.add_meta(self.current_country.id, form)
        return self._after_mutation(result)

    def begin_edit(self, country_id: str, meta_id: str) -> Optional[MetaForm]:
        meta = self.metas.get_meta(country_id, meta_id)
        if meta is None:
            return None
        self._editing = (country_id, meta_id)
        return MetaForm.from_record(meta)

    @property
    def editing(self) -> Optional[Tuple[str, str]]:
        return self._editing

    def cancel_edit(self) -> None:
        self._editing = None

    def submit_edit(self, form: MetaForm) -> MutationResult:
        if self._editing is None:
            return self._after_mutation(MutationResult.not_found("No meta is being edited"))
        country_id, meta_id = self._editing
        self._editing = None
        return self._after_mutation(self.metas.update_meta(country_id, meta_id, form))

    def delete_meta(self, country_id: str, meta_id: str, confirm: ConfirmFn) -> MutationResult:
        result = self.metas.delete_meta(country_id, meta_id, confirm)
        if result.status is MutationStatus.CANCELLED:
            return result
        if result.applied:
            if self._editing == (country_id, meta_id):
                self._editing = None
            self._notify(result.message, "info")
            self._rerender_country(country_id)
            return result
        self._notify(result.message, "error")
        return result

    def submit_sub_meta(self, meta_id: str, form: MetaForm) -> MutationResult:
        if self.current_country is None:
            result = MutationResult.not_found("No country selected")
        else:
            result = self.metas.add_sub_meta(self.current_country.id, meta_id, form)
        return self._after_mutation(result)

    # ---------- export ----------

    def export_data(self, path: str) -> Path:
        """Write the pretty-printed snapshot to `path`."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.store.export_json(), encoding="utf-8")
        self._notify(f"Exported {len(self.store.countries)} countries to {target}", "success")
        return target

    # ---------- rendering ----------

    def tick(self, now: Optional[float] = None) -> List[str]:
        return self.renders.run_due(now)

    def flush_renders(self) -> List[str]:
        return self.renders.drain()

    @property
    def output(self):
        return self.renders.output

    def _active_id(self) -> Optional[str]:
        return self.current_country.id if self.current_country else None

    def _refresh_tabs(self) -> None:
        matches = self.countries.filter_countries(self._search)
        self.renders.show_now(TABS, render.render_country_tabs(matches, self._active_id()))
        self.renders.show_now(STATS, render.render_stats(self.countries.stats()))

    def _rerender_country(self, country_id: str) -> None:
        self._refresh_tabs()
        if self.current_country is None or self.current_country.id != country_id:
            return
        country = self.current_country
        self.renders.show_now(METAS, render.render_loading())
        self.renders.schedule(METAS, lambda: render.render_metas(country))
        self.renders.schedule(
            SUB_METAS, lambda: render.render_sub_metas(self.metas.list_sub_metas(country.id))
        )
        self.renders.schedule(COUNTRY_INFO, lambda: render.render_country_info(country))

    def _after_mutation(self, result: MutationResult) -> MutationResult:
        if result.applied:
            self._notify(result.message, "success")
            self._rerender_country(self.current_country.id if self.current_country else "")
        else:
            self._notify(result.message, "error")
        return result

    def _notify(self, message: str, level: str) -> None:
        self.notifications.append(Notification(message, level))
