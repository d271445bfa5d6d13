"""
Validation
==========
Check a signed message for presence of the reserved fields, freshness
and a matching signature.

Failures are returned as ValidationResult values, never raised. Only
EXPIRED and SIGNATURE_MISMATCH emit a warning event; neither carries
the secret or the received signature.
"""

import hmac
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import unquote

import structlog

from .canonical import to_bytes
from .context import SigningContext
from .models import (
    SignatureEncoding,
    ValidationResult,
    SIGNATURE_FIELD,
    TIMESTAMP_FIELD,
)
from .signature import compute_signature

logger = structlog.get_logger(__name__)


def _parse_timestamp(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, (str, bytes)):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _signatures_match(
    received: Any, expected: str, encoding: SignatureEncoding
) -> bool:
    if not isinstance(received, str):
        return False
    # Query and form decoders strip the percent-encoding before we see it
    if encoding is SignatureEncoding.BASE64_URLENCODED:
        received = unquote(received)
        expected = unquote(expected)
    return hmac.compare_digest(to_bytes(received), to_bytes(expected))


def validate(message: Mapping, ctx: SigningContext) -> ValidationResult:
    """
    Validate a signed parameter set.

    Args:
        message: Decoded parameters including timestamp and signature
        ctx: Signing context shared with the sender

    Returns:
        ValidationResult.VALID, or the reason the message was rejected
    """
    received = message.get(SIGNATURE_FIELD)
    raw_timestamp = message.get(TIMESTAMP_FIELD)
    if received is None or raw_timestamp is None:
        return ValidationResult.MISSING_FIELDS

    unsigned = {k: v for k, v in message.items() if k != SIGNATURE_FIELD}

    now = ctx.now()
    timestamp = _parse_timestamp(raw_timestamp)
    if timestamp is None or timestamp + ctx.ttl < now:
        logger.warning(
            "signed_request_expired",
            outcome=ValidationResult.EXPIRED.value,
            age_seconds=None if timestamp is None else now - timestamp,
            ttl=ctx.ttl,
        )
        return ValidationResult.EXPIRED

    expected = compute_signature(unsigned, ctx)
    if not _signatures_match(received, expected, ctx.encoding):
        logger.warning(
            "signed_request_signature_mismatch",
            outcome=ValidationResult.SIGNATURE_MISMATCH.value,
            algorithm=ctx.algorithm,
        )
        return ValidationResult.SIGNATURE_MISMATCH

    return ValidationResult.VALID


def is_valid(message: Mapping, ctx: SigningContext) -> bool:
    """Return True if the message validates under ctx."""
    return validate(message, ctx).is_valid
