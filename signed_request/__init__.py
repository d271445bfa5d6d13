"""
Signed Request
==============
Authenticate server-to-server requests with a pre-shared secret.

A sender signs a parameter set with an HMAC over a canonical form of
the parameters and a timestamp; the receiver recomputes it and rejects
forged or stale requests.
"""

__version__ = "1.0.0"

from .models import (
    ValidationResult,
    SignatureEncoding,
    CanonicalForm,
    ConfigErrorReason,
    TIMESTAMP_FIELD,
    SIGNATURE_FIELD,
    RESERVED_FIELDS,
    DEFAULT_TTL_SECONDS,
    DEFAULT_ALGORITHM,
)
from .exceptions import SignedRequestError, ConfigError, ReservedFieldError
from .canonical import canonicalize, flatten, lower, stringify, to_bytes
from .context import (
    SigningContext,
    new_context,
    is_supported_algorithm,
    SUPPORTED_ALGORITHMS,
)
from .signature import compute_signature, encode_digest, sign, reject_reserved_fields
from .validation import validate, is_valid
from .signer import RequestSigner
from .config import SignerSettings

__all__ = [
    # Models
    "ValidationResult",
    "SignatureEncoding",
    "CanonicalForm",
    "ConfigErrorReason",
    "TIMESTAMP_FIELD",
    "SIGNATURE_FIELD",
    "RESERVED_FIELDS",
    "DEFAULT_TTL_SECONDS",
    "DEFAULT_ALGORITHM",
    # Exceptions
    "SignedRequestError",
    "ConfigError",
    "ReservedFieldError",
    # Canonicalization
    "canonicalize",
    "flatten",
    "lower",
    "stringify",
    "to_bytes",
    # Context
    "SigningContext",
    "new_context",
    "is_supported_algorithm",
    "SUPPORTED_ALGORITHMS",
    # Signing
    "compute_signature",
    "encode_digest",
    "sign",
    "reject_reserved_fields",
    # Validation
    "validate",
    "is_valid",
    # Facade
    "RequestSigner",
    # Config
    "SignerSettings",
]
