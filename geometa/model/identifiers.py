# ==============================================
# SequentialIdGenerator
# ==============================================
#
# PURPOSE:
#   Hand out meta / sub-meta ids that are unique and increasing for
#   the lifetime of one catalog store.
#
# HOW:
#   A plain counter, seeded past the largest numeric id already in
#   the snapshot. Older snapshots used millisecond timestamps as ids,
#   so new ids keep increasing after a reload.
#
# ==============================================

from typing import Iterable


class SequentialIdGenerator:
    def __init__(self, start: int = 1):
        self._next = max(1, start)

    def next_id(self) -> str:
        value = self._next
        self._next += 1
        return str(value)

    def observe(self, existing_ids: Iterable[str]) -> None:
        """Move the counter past every numeric id in existing_ids."""
        for raw in existing_ids:
            if isinstance(raw, str) and raw.isdigit():
                self._next = max(self._next, int(raw) + 1)

    @property
    def peek(self) -> int:
        return self._next
