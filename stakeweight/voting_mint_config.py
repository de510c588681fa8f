"""Configuration of a mint whose tokens grant voting rights."""

from __future__ import annotations

from dataclasses import dataclass, field

from stakeweight.errors import ErrorCode, RegistryError

SCALED_FACTOR_BASE = 1_000_000_000
U64_MAX = 2**64 - 1
DEFAULT_PUBKEY = bytes(32)


def _check_u64(value: int) -> int:
    if value < 0 or value > U64_MAX:
        raise RegistryError(ErrorCode.VOTER_WEIGHT_OVERFLOW)
    return value


@dataclass
class VotingMintConfig:
    """Exchange rate for an asset that can be used to mint voting rights.

    Factors are in 1/SCALED_FACTOR_BASE units.
    """

    mint: bytes = DEFAULT_PUBKEY
    grant_authority: bytes = DEFAULT_PUBKEY
    baseline_vote_weight_scaled_factor: int = 0
    max_extra_lockup_vote_weight_scaled_factor: int = 0
    lockup_saturation_secs: int = 0
    digit_shift: int = 0
    reserved: bytes = field(default=bytes(63), repr=False)

    def _digit_shift_native(self, amount_native: int) -> int:
        if self.digit_shift < 0:
            value = amount_native // 10 ** (-self.digit_shift)
        else:
            value = amount_native * 10**self.digit_shift
        return _check_u64(value)

    @staticmethod
    def _apply_factor(base: int, factor: int) -> int:
        return _check_u64(base * factor // SCALED_FACTOR_BASE)

    def baseline_vote_weight(self, amount_native: int) -> int:
        """Vote weight for a number of native tokens, locked or not."""
        return self._apply_factor(
            self._digit_shift_native(amount_native),
            self.baseline_vote_weight_scaled_factor,
        )

    def max_extra_lockup_vote_weight(self, amount_native: int) -> int:
        """Maximum extra vote weight a number of locked native tokens can have."""
        return self._apply_factor(
            self._digit_shift_native(amount_native),
            self.max_extra_lockup_vote_weight_scaled_factor,
        )

    def in_use(self) -> bool:
        """Whether this voting mint is configured."""
        return self.mint != DEFAULT_PUBKEY

    def grants_vote_weight(self) -> bool:
        """Whether tokens of this mint contribute to voting weight."""
        return (
            self.baseline_vote_weight_scaled_factor > 0
            or self.max_extra_lockup_vote_weight_scaled_factor > 0
        )