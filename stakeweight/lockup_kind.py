"""Kinds of lockup and their period lengths."""

from __future__ import annotations

import enum

SECS_PER_DAY = 86_400
SECS_PER_MONTH = 365 * SECS_PER_DAY // 12


class LockupKind(enum.IntEnum):
    """How deposited tokens are locked up."""

    NONE = 0
    DAILY = 1
    MONTHLY = 2
    CLIFF = 3
    CONSTANT = 4

    def period_secs(self) -> int:
        """Length of one lockup period in seconds (also the vesting period)."""
        return _PERIOD_SECS[self]

    def strictness(self) -> int:
        """Rank of strictness; lockups may not decrease in strictness."""
        return _STRICTNESS[self]

    def is_vesting(self) -> bool:
        """Whether tokens vest linearly over the periods."""
        return self in (LockupKind.DAILY, LockupKind.MONTHLY)


_PERIOD_SECS = {
    LockupKind.NONE: 0,
    LockupKind.DAILY: SECS_PER_DAY,
    LockupKind.MONTHLY: SECS_PER_MONTH,
    LockupKind.CLIFF: SECS_PER_DAY,
    LockupKind.CONSTANT: SECS_PER_DAY,
}

_STRICTNESS = {
    LockupKind.NONE: 0,
    LockupKind.DAILY: 1,
    LockupKind.MONTHLY: 2,
    LockupKind.CLIFF: 3,
    LockupKind.CONSTANT: 3,
}