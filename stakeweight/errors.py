"""Error codes and the exception raised by registry computations."""

from __future__ import annotations

import enum


class ErrorCode(enum.Enum):
    """Reasons a registry computation can fail."""

    VOTER_WEIGHT_OVERFLOW = enum.auto()
    VOTING_MINT_NOT_FOUND = enum.auto()
    INTERNAL_ERROR_BAD_LOCKUP_VOTE_WEIGHT = enum.auto()
    INTERNAL_PROGRAM_ERROR = enum.auto()
    INVALID_LOCKUP_PERIOD = enum.auto()
    DEPOSIT_START_TOO_FAR_IN_FUTURE = enum.auto()
    INVALID_TIMESTAMP_ARGUMENTS = enum.auto()
    OUT_OF_BOUNDS_DEPOSIT_ENTRY_INDEX = enum.auto()
    UNUSED_DEPOSIT_ENTRY_INDEX = enum.auto()
    INVALID_TOKEN_OWNER_RECORD = enum.auto()


class RegistryError(Exception):
    """Raised when a registry computation fails; carries an ErrorCode."""

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = code
        text = code.name if message is None else f"{code.name}: {message}"
        super().__init__(text)