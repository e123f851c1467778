"""
Error hierarchy for exee.

Every error raised by the package derives from ExeeError, so callers can catch
the whole family with a single handler.
"""

from typing import List, Optional, Sequence


class ExeeError(Exception):
    """Base class for all exee errors."""


class ConfigurationError(ExeeError):
    """Raised when a configuration value is missing or malformed."""


class ValidationError(ExeeError):
    """Raised when a model fails its required-field contract, or the
    transaction cannot be encoded for the wire.

    Always raised before any network activity takes place.
    """

    def __init__(
        self,
        message: str,
        missing_fields: Optional[Sequence[str]] = None,
        model_type: Optional[str] = None,
    ):
        super().__init__(message)
        self.missing_fields: List[str] = list(missing_fields or [])
        self.model_type = model_type


class TransportError(ExeeError):
    """Raised when the terminal connection cannot be opened, written or read."""


class TimeoutError(TransportError):
    """Raised when a push does not complete within its deadline."""
