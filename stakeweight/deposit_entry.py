"""Bookkeeping for a single deposit and its voting power."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from stakeweight.errors import ErrorCode, RegistryError
from stakeweight.lockup import Lockup
from stakeweight.lockup_kind import LockupKind
from stakeweight.voting_mint_config import U64_MAX, VotingMintConfig


@dataclass
class DepositEntry:
    """A deposit for a given mint and lockup schedule.

    amount_deposited_native tracks the total added by the user, reduced by
    withdrawals. amount_initially_locked_native is the amount locked when the
    lockup began and is not adjusted for withdrawals; it determines how much
    vests each period.
    """

    lockup: Lockup = field(default_factory=Lockup)
    amount_deposited_native: int = 0
    amount_initially_locked_native: int = 0
    is_used: bool = False
    allow_clawback: bool = False
    voting_mint_config_idx: int = 0
    reserved: bytes = field(default=bytes(29), repr=False)

    def voting_power(self, voting_mint_config: VotingMintConfig, curr_ts: int) -> int:
        """Total voting power: baseline weight plus the lockup bonus.

        Each cliff-locked token weighs
        baseline + min(time_remaining / saturation, 1) * max_extra.
        Linear vesting lockups count as a sequence of cliffs.
        """
        baseline = voting_mint_config.baseline_vote_weight(self.amount_deposited_native)
        max_locked = voting_mint_config.max_extra_lockup_vote_weight(
            self.amount_initially_locked_native
        )
        locked = self.voting_power_locked(
            curr_ts, max_locked, voting_mint_config.lockup_saturation_secs
        )
        if locked > max_locked:
            raise RegistryError(ErrorCode.INTERNAL_ERROR_BAD_LOCKUP_VOTE_WEIGHT)
        total = baseline + locked
        if total > U64_MAX:
            raise RegistryError(ErrorCode.VOTER_WEIGHT_OVERFLOW)
        return total

    def voting_power_locked(
        self, curr_ts: int, max_locked_vote_weight: int, lockup_saturation_secs: int
    ) -> int:
        """Vote power contribution from locked funds only."""
        if self.lockup.expired(curr_ts) or max_locked_vote_weight == 0:
            return 0
        kind = self.lockup.kind
        if kind in (LockupKind.DAILY, LockupKind.MONTHLY):
            return self._voting_power_linear_vesting(
                curr_ts, max_locked_vote_weight, lockup_saturation_secs
            )
        if kind in (LockupKind.CLIFF, LockupKind.CONSTANT):
            return self._voting_power_cliff(
                curr_ts, max_locked_vote_weight, lockup_saturation_secs
            )
        return 0

    def voting_power_locked_guaranteed(
        self,
        curr_ts: int,
        at_ts: int,
        max_locked_vote_weight: int,
        lockup_saturation_secs: int,
    ) -> int:
        """Locked vote power at at_ts if the owner unlocks as fast as possible from curr_ts.

        Constant lockups are treated as if turned into cliff lockups at curr_ts.
        """
        altered = copy.deepcopy(self)
        if self.lockup.kind == LockupKind.CONSTANT:
            altered.lockup.kind = LockupKind.CLIFF
            altered.lockup.start_ts = curr_ts
            altered.lockup.end_ts = curr_ts + self.lockup.seconds_left(curr_ts)
        return altered.voting_power_locked(
            at_ts, max_locked_vote_weight, lockup_saturation_secs
        )

    def _voting_power_cliff(
        self, curr_ts: int, max_locked_vote_weight: int, lockup_saturation_secs: int
    ) -> int:
        remaining = min(self.lockup.seconds_left(curr_ts), lockup_saturation_secs)
        return max_locked_vote_weight * remaining // lockup_saturation_secs

    def _voting_power_linear_vesting(
        self, curr_ts: int, max_locked_vote_weight: int, lockup_saturation_secs: int
    ) -> int:
        periods_left = self.lockup.periods_left(curr_ts)
        periods_total = self.lockup.periods_total()
        period_secs = self.lockup.kind.period_secs()

        if periods_left == 0:
            return 0

        # The vesting schedule is a sequence of cliffs, one per remaining period.
        # Cliff p (1-based) has min(secs_to_closest_cliff + (p-1)*period_secs,
        # saturation) seconds left. The first q cliffs are below saturation, the
        # remaining r = periods_left - q are saturated, so the total is
        #   q * secs_to_closest_cliff + period_secs * q*(q-1)/2 + r * saturation
        # divided by periods_total * saturation.
        secs_to_closest_cliff = self.lockup.seconds_left(curr_ts) - period_secs * max(
            periods_left - 1, 0
        )
        if secs_to_closest_cliff < 0:
            raise RegistryError(ErrorCode.INTERNAL_PROGRAM_ERROR)

        if secs_to_closest_cliff >= lockup_saturation_secs:
            return max_locked_vote_weight

        denominator = periods_total * lockup_saturation_secs

        lockup_saturation_periods = (
            max(lockup_saturation_secs - secs_to_closest_cliff, 0) + period_secs
        ) // period_secs
        q = min(lockup_saturation_periods, periods_left)
        r = max(periods_left - q, 0)

        sum_full_periods = q * max(q - 1, 0) // 2

        lockup_secs = (
            q * secs_to_closest_cliff
            + sum_full_periods * period_secs
            + r * lockup_saturation_secs
        )
        return max_locked_vote_weight * lockup_secs // denominator

    def vested(self, curr_ts: int) -> int:
        """Unlocked amount of the initially locked tokens, in native units."""
        if self.lockup.expired(curr_ts):
            return self.amount_initially_locked_native
        kind = self.lockup.kind
        if kind == LockupKind.NONE:
            return self.amount_initially_locked_native
        if kind in (LockupKind.DAILY, LockupKind.MONTHLY):
            return self._vested_linearly(curr_ts)
        return 0

    def _vested_linearly(self, curr_ts: int) -> int:
        period_current = self.lockup.period_current(curr_ts)
        periods_total = self.lockup.periods_total()
        if period_current == 0:
            return 0
        if period_current >= periods_total:
            return self.amount_initially_locked_native
        return self.amount_initially_locked_native * period_current // periods_total

    def amount_locked(self, curr_ts: int) -> int:
        """Native tokens still locked."""
        locked = self.amount_initially_locked_native - self.vested(curr_ts)
        if locked < 0:
            raise RegistryError(ErrorCode.INTERNAL_PROGRAM_ERROR)
        return locked

    def amount_unlocked(self, curr_ts: int) -> int:
        """Native tokens unlocked given current vesting and previous withdrawals."""
        unlocked = self.amount_deposited_native - self.amount_locked(curr_ts)
        if unlocked < 0:
            raise RegistryError(ErrorCode.INTERNAL_PROGRAM_ERROR)
        return unlocked

    def resolve_vesting(self, curr_ts: int) -> None:
        """Drop vested amounts and past periods so that nothing has vested.

        Afterwards amount_initially_locked_native is exactly the locked amount.
        """
        vested_amount = self.vested(curr_ts)
        if vested_amount > self.amount_initially_locked_native:
            raise RegistryError(ErrorCode.INTERNAL_PROGRAM_ERROR)
        self.amount_initially_locked_native -= vested_amount
        self.lockup.remove_past_periods(curr_ts)
        if self.vested(curr_ts) != 0:
            raise RegistryError(ErrorCode.INTERNAL_PROGRAM_ERROR)