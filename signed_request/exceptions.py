"""
Signed Request Exceptions
=========================
Exception classes for configuration and caller errors.

Authentication failures are not exceptions; see ValidationResult.
"""

from .models import ConfigErrorReason


class SignedRequestError(Exception):
    """Base exception for the signed_request package."""
    pass


class ConfigError(SignedRequestError, ValueError):
    """Raised when a signing context is misconfigured."""

    def __init__(self, reason: ConfigErrorReason, message: str):
        super().__init__(f"[{reason.value}] {message}")
        self.reason = reason
        self.message = message


class ReservedFieldError(SignedRequestError, ValueError):
    """Raised when caller parameters already use a reserved field name."""

    def __init__(self, field: str):
        super().__init__(f"Parameter name is reserved for signing: {field!r}")
        self.field = field
