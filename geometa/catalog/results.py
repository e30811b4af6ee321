# ==============================================
# Mutation Results
# ==============================================
#
# PURPOSE:
#   Every catalog mutation reports what happened instead of
#   silently doing nothing when an id is unknown.
#
# ENUMS:
# ------
# - MutationStatus(Enum): APPLIED, NOT_FOUND, CANCELLED, DUPLICATE
#
# DATA CLASS: MutationResult
# --------------------------
#   - status: MutationStatus
#   - record: Country | Meta | SubMeta | None  → the affected record
#   - message: str                             → human-readable summary
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Any, Optional


class MutationStatus(Enum):
    APPLIED = "applied"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"
    DUPLICATE = "duplicate"


@dataclass
class MutationResult:
    status: MutationStatus
    record: Optional[Any] = None
    message: str = ""

    @property
    def applied(self) -> bool:
        return self.status is MutationStatus.APPLIED

    @classmethod
    def ok(cls, record, message: str = "") -> "MutationResult":
        return cls(MutationStatus.APPLIED, record, message)

    @classmethod
    def not_found(cls, message: str) -> "MutationResult":
        return cls(MutationStatus.NOT_FOUND, None, message)
