# ==============================================
# PRESENTATION
# ==============================================
#
# Turns catalog state into page fragments and routes user
# actions to catalog operations.
#
# Modules:
# --------
# - render.py        → HTML fragments (tabs, cards, empty states, stats)
# - render_queue.py  → Deferred renders guarded by sequence tokens
# - controller.py    → CatalogController, the page-level entry point
#
# ==============================================

from . import render
from .render_queue import RenderQueue, PendingRender
from .controller import CatalogController, Notification

__all__ = ["render", "RenderQueue", "PendingRender", "CatalogController", "Notification"]
