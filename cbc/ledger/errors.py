from __future__ import annotations


class LedgerValidationError(ValueError):
    """User input rejected; nothing was changed."""


class PeriodValidationError(LedgerValidationError):
    pass


class PartnerValidationError(LedgerValidationError):
    pass


class StorageError(RuntimeError):
    """Persisted ledger data could not be read or written."""
