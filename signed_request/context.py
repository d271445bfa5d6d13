"""
Signing Context
===============
Immutable configuration shared by the two parties of a trust relationship.
"""

import hashlib
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

import structlog

from .exceptions import ConfigError
from .models import (
    CanonicalForm,
    ConfigErrorReason,
    SignatureEncoding,
    DEFAULT_ALGORITHM,
    DEFAULT_TTL_SECONDS,
)

logger = structlog.get_logger(__name__)

# Fixed-length digests available on every platform; shake_* need an
# explicit output length and cannot back an HMAC.
SUPPORTED_ALGORITHMS = frozenset(
    name for name in hashlib.algorithms_guaranteed
    if not name.startswith("shake_")
)


def is_supported_algorithm(algorithm: str) -> bool:
    """Check an algorithm name against SUPPORTED_ALGORITHMS."""
    return isinstance(algorithm, str) and algorithm.lower() in SUPPORTED_ALGORITHMS


@dataclass(frozen=True)
class SigningContext:
    """
    Shared secret, hash algorithm and time-to-live for signing requests.

    Values are checked on construction, so a context that exists is
    always usable. The secret is excluded from repr.
    """
    secret: bytes = field(repr=False)
    ttl: int = DEFAULT_TTL_SECONDS
    algorithm: str = DEFAULT_ALGORITHM
    encoding: SignatureEncoding = SignatureEncoding.HEX
    canonical_form: CanonicalForm = CanonicalForm.CONCATENATED
    clock: Callable[[], float] = field(default=time.time, repr=False, compare=False)

    def __post_init__(self):
        secret = self.secret
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        if not isinstance(secret, (bytes, bytearray)) or not secret:
            raise ConfigError(
                ConfigErrorReason.EMPTY_SECRET,
                "Shared secret must be a non-empty string or bytes",
            )
        object.__setattr__(self, "secret", bytes(secret))

        if isinstance(self.ttl, bool) or not isinstance(self.ttl, int) or self.ttl <= 0:
            raise ConfigError(
                ConfigErrorReason.INVALID_TTL,
                f"TTL must be a positive integer number of seconds, got {self.ttl!r}",
            )

        if not is_supported_algorithm(self.algorithm):
            raise ConfigError(
                ConfigErrorReason.UNSUPPORTED_ALGORITHM,
                f"Invalid hash algorithm specified: {self.algorithm!r}",
            )
        object.__setattr__(self, "algorithm", self.algorithm.lower())

        try:
            object.__setattr__(self, "encoding", SignatureEncoding(self.encoding))
        except ValueError:
            raise ConfigError(
                ConfigErrorReason.INVALID_ENCODING,
                f"Unknown signature encoding: {self.encoding!r}",
            ) from None

        try:
            object.__setattr__(
                self, "canonical_form", CanonicalForm(self.canonical_form)
            )
        except ValueError:
            raise ConfigError(
                ConfigErrorReason.INVALID_CANONICAL_FORM,
                f"Unknown canonical form: {self.canonical_form!r}",
            ) from None

    def now(self) -> int:
        """Current time from the context clock, in whole seconds."""
        return int(self.clock())


def new_context(
    secret: Union[str, bytes],
    ttl: int = DEFAULT_TTL_SECONDS,
    algorithm: str = DEFAULT_ALGORITHM,
    *,
    encoding: Union[SignatureEncoding, str] = SignatureEncoding.HEX,
    canonical_form: Union[CanonicalForm, str] = CanonicalForm.CONCATENATED,
    clock: Optional[Callable[[], float]] = None,
) -> SigningContext:
    """
    Create a signing context.

    Args:
        secret: Shared secret (str is UTF-8 encoded)
        ttl: Seconds a signed message stays valid (default 3600)
        algorithm: hashlib algorithm name (default "sha256")
        encoding: Signature encoding (default hex)
        canonical_form: Signing string layout (default concatenated)
        clock: Callable returning epoch seconds (default time.time)

    Returns:
        Validated SigningContext

    Raises:
        ConfigError: on an empty secret, non-positive TTL, unknown
            algorithm, encoding or canonical form
    """
    ctx = SigningContext(
        secret=secret,
        ttl=ttl,
        algorithm=algorithm,
        encoding=encoding,
        canonical_form=canonical_form,
        clock=clock or time.time,
    )
    logger.debug(
        "signing_context_created",
        algorithm=ctx.algorithm,
        ttl=ctx.ttl,
        encoding=ctx.encoding.value,
        canonical_form=ctx.canonical_form.value,
    )
    return ctx
