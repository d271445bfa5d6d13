"""
Signed Request Models
=====================
Enums and constants shared by the signer and validator.
"""

from enum import Enum


# Reserved field names
TIMESTAMP_FIELD = "timestamp"
SIGNATURE_FIELD = "signature"
RESERVED_FIELDS = frozenset({TIMESTAMP_FIELD, SIGNATURE_FIELD})

# Defaults
DEFAULT_TTL_SECONDS = 3600  # 1 hour
DEFAULT_ALGORITHM = "sha256"


class ValidationResult(str, Enum):
    """Outcome of validating a signed message."""
    VALID = "valid"
    MISSING_FIELDS = "missing_fields"
    EXPIRED = "expired"
    SIGNATURE_MISMATCH = "signature_mismatch"

    @property
    def is_valid(self) -> bool:
        return self is ValidationResult.VALID


class SignatureEncoding(str, Enum):
    """How the raw HMAC digest is written into the message."""
    HEX = "hex"
    BASE64 = "base64"
    BASE64_URLENCODED = "base64_urlencoded"


class CanonicalForm(str, Enum):
    """
    How flattened entries are joined into the signing string.

    CONCATENATED is key + value with no separator. It is ambiguous
    ({"a": "bc"} and {"ab": "c"} give the same string) and is kept
    for compatibility with already-issued signatures.
    LENGTH_PREFIXED writes every key and value as <length>:<text>.
    """
    CONCATENATED = "concatenated"
    LENGTH_PREFIXED = "length_prefixed"


class ConfigErrorReason(str, Enum):
    """Reasons a signing context cannot be built."""
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    EMPTY_SECRET = "empty_secret"
    INVALID_TTL = "invalid_ttl"
    INVALID_ENCODING = "invalid_encoding"
    INVALID_CANONICAL_FORM = "invalid_canonical_form"
