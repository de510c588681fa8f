"""Lockup, vesting and vote-weight bookkeeping for stake-based governance."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "voting_mint_config",
    "lockup_kind",
    "lockup",
    "deposit_entry",
    "registrar",
    "voter",
]