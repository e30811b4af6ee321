# ==============================================
# RenderQueue
# ==============================================
#
# PURPOSE:
#   Deferred renders (the short "Loading..." pause before content
#   appears) for the containers of the catalog page.
#
# STALE RENDERS:
#   Every schedule() for a target issues a new sequence token.
#   When a deferred render comes due, it only runs if its token is
#   still the latest for that target. Switching country quickly
#   therefore drops the older country's pending renders.
#
# DRIVING IT:
#   Single threaded. The caller decides when time passes:
#     queue.run_due()          → run what is due now
#     queue.run_due(now=...)   → with an explicit clock value
#     queue.drain()            → run everything still current
#
# ==============================================

import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


@dataclass(order=True)
class PendingRender:
    due_at: float
    token: int
    target: str = field(compare=False)
    render: Callable[[], str] = field(compare=False)


class RenderQueue:
    def __init__(self, delay_seconds: float = 0.5, clock: Callable[[], float] = time.monotonic):
        self.delay_seconds = delay_seconds
        self._clock = clock
        self._sequence = 0
        self._latest: Dict[str, int] = {}
        self._pending: List[PendingRender] = []
        self.output: Dict[str, str] = {}
        self.discarded = 0

    def schedule(self, target: str, render: Callable[[], str], delay: Optional[float] = None) -> int:
        """
        Queue a render for `target` and return its sequence token.

        Any earlier render still pending for the same target becomes stale.
        """
        self._sequence += 1
        token = self._sequence
        self._latest[target] = token
        wait = self.delay_seconds if delay is None else delay
        self._pending.append(PendingRender(self._clock() + wait, token, target, render))
        return token

    def show_now(self, target: str, content: str) -> int:
        """Replace a container immediately, invalidating pending renders for it."""
        self._sequence += 1
        self._latest[target] = self._sequence
        self.output[target] = content
        return self._sequence

    def is_current(self, target: str, token: int) -> bool:
        return self._latest.get(target) == token

    def run_due(self, now: Optional[float] = None) -> List[str]:
        """
        Run every pending render whose time has come.

        Returns:
            Targets whose content was replaced, in the order they ran
        """
        now = self._clock() if now is None else now
        due = sorted(p for p in self._pending if p.due_at <= now)
        self._pending = [p for p in self._pending if p.due_at > now]

        updated = []
        for pending in due:
            if not self.is_current(pending.target, pending.token):
                self.discarded += 1
                continue
            self.output[pending.target] = pending.render()
            updated.append(pending.target)
        return updated

    def drain(self) -> List[str]:
        if not self._pending:
            return []
        latest_due = max(p.due_at for p in self._pending)
        return self.run_due(now=latest_due)

    @property
    def pending_count(self) -> int:
        return len(self._pending)
