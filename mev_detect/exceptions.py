"""Custom exception hierarchy for mev-detect."""


class MevDetectError(Exception):
    """Base exception for all mev-detect errors."""


class TransactionParseError(MevDetectError):
    """Raised when a transaction document does not match the record schema."""


class ConfigurationError(MevDetectError):
    """Raised when configuration is invalid or missing."""


class SinkError(MevDetectError):
    """Raised when a sink operation fails."""
