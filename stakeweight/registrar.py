"""The registrar: an instance of a voting rights distributor."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from stakeweight.errors import ErrorCode, RegistryError
from stakeweight.voting_mint_config import DEFAULT_PUBKEY, U64_MAX, VotingMintConfig

MAX_VOTING_MINTS = 4
"""Number of voting mint slots a registrar holds."""


def _default_voting_mints() -> list[VotingMintConfig]:
    return [VotingMintConfig() for _ in range(MAX_VOTING_MINTS)]


@dataclass
class Registrar:
    """Registry of voting mints for one governance realm.

    time_offset shifts the clock, which lets tests move forward in time.
    """

    governance_program_id: bytes = DEFAULT_PUBKEY
    realm: bytes = DEFAULT_PUBKEY
    realm_governing_token_mint: bytes = DEFAULT_PUBKEY
    realm_authority: bytes = DEFAULT_PUBKEY
    voting_mints: list[VotingMintConfig] = field(default_factory=_default_voting_mints)
    time_offset: int = 0
    bump: int = 0

    def clock_unix_timestamp(self, now: int) -> int:
        """The registrar's notion of the current time, given the real clock."""
        return now + self.time_offset

    def voting_mint_config_index(self, mint: bytes) -> int:
        """Index of the voting mint slot configured for `mint`."""
        for index, config in enumerate(self.voting_mints):
            if config.mint == mint:
                return index
        raise RegistryError(ErrorCode.VOTING_MINT_NOT_FOUND)

    def max_vote_weight(self, mint_supplies: Mapping[bytes, int]) -> int:
        """Largest vote weight possible given the supply of each configured mint.

        mint_supplies maps a mint's public key to its total supply; every mint
        in use must be present.
        """
        total = 0
        for config in self.voting_mints:
            if not config.in_use():
                continue
            try:
                supply = mint_supplies[config.mint]
            except KeyError:
                raise RegistryError(ErrorCode.VOTING_MINT_NOT_FOUND) from None
            for part in (
                config.baseline_vote_weight(supply),
                config.max_extra_lockup_vote_weight(supply),
            ):
                total += part
                if total > U64_MAX:
                    raise RegistryError(ErrorCode.VOTER_WEIGHT_OVERFLOW)
        return total

    def seeds(self) -> tuple[bytes, bytes, bytes, bytes]:
        """Seeds from which the registrar's address is derived."""
        return (
            self.realm,
            b"registrar",
            self.realm_governing_token_mint,
            bytes([self.bump]),
        )