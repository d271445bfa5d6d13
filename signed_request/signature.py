"""
Signature Functions
===================
HMAC signature computation and request signing.
"""

import base64
import hmac
from collections.abc import Mapping
from typing import Any, Dict
from urllib.parse import quote

from .canonical import canonicalize, flatten, lower, to_bytes
from .context import SigningContext
from .exceptions import ReservedFieldError
from .models import (
    SignatureEncoding,
    RESERVED_FIELDS,
    SIGNATURE_FIELD,
    TIMESTAMP_FIELD,
)


def encode_digest(digest: bytes, encoding: SignatureEncoding) -> str:
    """
    Encode a raw HMAC digest for transport.

    Args:
        digest: Raw digest bytes
        encoding: Target encoding

    Returns:
        Hex string, base64 string, or percent-encoded base64 string
    """
    encoding = SignatureEncoding(encoding)
    if encoding is SignatureEncoding.HEX:
        return digest.hex()
    encoded = base64.b64encode(digest).decode("ascii")
    if encoding is SignatureEncoding.BASE64_URLENCODED:
        return quote(encoded, safe="")
    return encoded


def compute_signature(params: Mapping, ctx: SigningContext) -> str:
    """
    Compute the encoded HMAC signature of a parameter set.

    A top-level signature field is never part of its own input.

    Args:
        params: Parameters including the timestamp
        ctx: Signing context

    Returns:
        Encoded signature per ctx.encoding
    """
    unsigned = {k: v for k, v in params.items() if k != SIGNATURE_FIELD}
    message = canonicalize(unsigned, ctx.canonical_form)
    digest = hmac.new(
        ctx.secret,
        to_bytes(message),
        ctx.algorithm,
    ).digest()
    return encode_digest(digest, ctx.encoding)


def sign(params: Mapping, ctx: SigningContext) -> Dict[str, Any]:
    """
    Sign a parameter set for authentication by the recipient.

    The caller's mapping is not modified. Existing timestamp or
    signature entries are overwritten.

    Args:
        params: Name/value pairs to sign, nested mappings allowed
        ctx: Signing context

    Returns:
        Copy of params with timestamp and signature added
    """
    signed = dict(params)
    signed.pop(SIGNATURE_FIELD, None)
    signed.pop(TIMESTAMP_FIELD, None)
    signed[TIMESTAMP_FIELD] = ctx.now()
    signed[SIGNATURE_FIELD] = compute_signature(signed, ctx)
    return signed


def reject_reserved_fields(params: Mapping) -> None:
    """
    Refuse parameters that would clash with the reserved fields.

    Matching is done on flattened, case-folded keys since that is what
    ends up in the signing string.

    Raises:
        ReservedFieldError: if timestamp or signature is already present
    """
    for key in lower(flatten(params)):
        if key in RESERVED_FIELDS:
            raise ReservedFieldError(key)
