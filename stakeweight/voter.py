"""A voter's account: deposits and the vote weight they grant."""

from __future__ import annotations

from dataclasses import dataclass, field

from stakeweight.deposit_entry import DepositEntry
from stakeweight.errors import ErrorCode, RegistryError
from stakeweight.registrar import Registrar
from stakeweight.voting_mint_config import DEFAULT_PUBKEY, U64_MAX

MAX_DEPOSIT_ENTRIES = 32
"""Number of deposit slots a voter holds."""


def _default_deposits() -> list[DepositEntry]:
    return [DepositEntry() for _ in range(MAX_DEPOSIT_ENTRIES)]


def _checked_sum(values) -> int:
    total = 0
    for value in values:
        total += value
        if total > U64_MAX:
            raise RegistryError(ErrorCode.VOTER_WEIGHT_OVERFLOW)
    return total


@dataclass
class Voter:
    """User account for minting voting rights."""

    voter_authority: bytes = DEFAULT_PUBKEY
    registrar: bytes = DEFAULT_PUBKEY
    deposits: list[DepositEntry] = field(default_factory=_default_deposits)
    voter_bump: int = 0
    voter_weight_record_bump: int = 0

    def _used_deposits(self):
        return (d for d in self.deposits if d.is_used)

    def weight(self, registrar: Registrar, now: int) -> int:
        """The full vote weight available to the voter at the real time `now`."""
        curr_ts = registrar.clock_unix_timestamp(now)
        return _checked_sum(
            d.voting_power(registrar.voting_mints[d.voting_mint_config_idx], curr_ts)
            for d in self._used_deposits()
        )

    def weight_baseline(self, registrar: Registrar) -> int:
        """The vote weight available when ignoring any lockup effects."""
        return _checked_sum(
            registrar.voting_mints[d.voting_mint_config_idx].baseline_vote_weight(
                d.amount_deposited_native
            )
            for d in self._used_deposits()
        )

    def weight_locked_guaranteed(
        self, registrar: Registrar, curr_ts: int, at_ts: int
    ) -> int:
        """Extra lockup vote weight guaranteed at at_ts.

        Assumes the voter withdraws and unlocks as much as possible from curr_ts.
        """
        if at_ts < curr_ts:
            raise RegistryError(ErrorCode.INVALID_TIMESTAMP_ARGUMENTS)

        def amounts():
            for d in self._used_deposits():
                config = registrar.voting_mints[d.voting_mint_config_idx]
                max_locked = config.max_extra_lockup_vote_weight(
                    d.amount_initially_locked_native
                )
                yield d.voting_power_locked_guaranteed(
                    curr_ts, at_ts, max_locked, config.lockup_saturation_secs
                )

        return _checked_sum(amounts())

    def active_deposit(self, index: int) -> DepositEntry:
        """The used deposit entry at `index`, for reading or modification."""
        if index < 0 or index >= len(self.deposits):
            raise RegistryError(ErrorCode.OUT_OF_BOUNDS_DEPOSIT_ENTRY_INDEX)
        deposit = self.deposits[index]
        if not deposit.is_used:
            raise RegistryError(ErrorCode.UNUSED_DEPOSIT_ENTRY_INDEX)
        return deposit

    def seeds(self) -> tuple[bytes, bytes, bytes, bytes]:
        """Seeds from which the voter's address is derived."""
        return (
            self.registrar,
            b"voter",
            self.voter_authority,
            bytes([self.voter_bump]),
        )