"""Lockup schedules: when deposited tokens unlock and how they vest."""

from __future__ import annotations

from dataclasses import dataclass, field

from stakeweight.errors import ErrorCode, RegistryError
from stakeweight.lockup_kind import LockupKind

MAX_LOCKUP_PERIODS = 365 * 200
"""Maximum number of lockup periods; limits daily lockups to 200 years."""

MAX_LOCKUP_IN_FUTURE_SECS = 100 * 365 * 24 * 60 * 60
"""How far in the future a lockup may start."""


@dataclass
class Lockup:
    """A lockup interval of a given kind.

    If start_ts is in the future the funds are nevertheless locked up, and
    vote power computations always consider the full interval up to end_ts.
    """

    start_ts: int = 0
    end_ts: int = 0
    kind: LockupKind = LockupKind.NONE
    reserved: bytes = field(default=bytes(15), repr=False)

    @classmethod
    def new_from_periods(
        cls, kind: LockupKind, curr_ts: int, start_ts: int, periods: int
    ) -> Lockup:
        """Create a lockup of `periods` periods of `kind` starting at start_ts."""
        if start_ts >= curr_ts + MAX_LOCKUP_IN_FUTURE_SECS:
            raise RegistryError(ErrorCode.DEPOSIT_START_TOO_FAR_IN_FUTURE)
        if periods < 0 or periods > MAX_LOCKUP_PERIODS:
            raise RegistryError(ErrorCode.INVALID_LOCKUP_PERIOD)
        return cls(
            start_ts=start_ts,
            end_ts=start_ts + periods * kind.period_secs(),
            kind=kind,
        )

    def expired(self, curr_ts: int) -> bool:
        """True when the lockup is finished."""
        return self.seconds_left(curr_ts) == 0

    def seconds_left(self, curr_ts: int) -> int:
        """Seconds left in the lockup.

        May exceed end_ts - start_ts when curr_ts is before start_ts.
        Constant lockups never count down.
        """
        if self.kind == LockupKind.CONSTANT:
            curr_ts = self.start_ts
        if curr_ts >= self.end_ts:
            return 0
        return self.end_ts - curr_ts

    def periods_left(self, curr_ts: int) -> int:
        """Periods left; 0 once expired and periods_total() before start_ts."""
        period_secs = self.kind.period_secs()
        if period_secs == 0:
            return 0
        if curr_ts < self.start_ts:
            return self.periods_total()
        return -(-self.seconds_left(curr_ts) // period_secs)

    def period_current(self, curr_ts: int) -> int:
        """Current period; periods_total() once expired and 0 before start_ts."""
        return max(0, self.periods_total() - self.periods_left(curr_ts))

    def periods_total(self) -> int:
        """Total number of periods in the lockup."""
        period_secs = self.kind.period_secs()
        if period_secs == 0:
            return 0
        lockup_secs = self.seconds_left(self.start_ts)
        if lockup_secs % period_secs != 0:
            raise RegistryError(ErrorCode.INVALID_LOCKUP_PERIOD)
        return lockup_secs // period_secs

    def remove_past_periods(self, curr_ts: int) -> None:
        """Move start_ts forward past the periods that already lie in the past."""
        periods = self.period_current(curr_ts)
        self.start_ts += periods * self.kind.period_secs()
        if self.start_ts > self.end_ts:
            raise RegistryError(ErrorCode.INTERNAL_PROGRAM_ERROR)
        if self.period_current(curr_ts) != 0:
            raise RegistryError(ErrorCode.INTERNAL_PROGRAM_ERROR)