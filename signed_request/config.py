"""
Signer Configuration
====================
Settings for a service process, read from environment variables.

The signing core never reads the environment itself; these settings
only feed new_context().
"""

import os
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from .context import SigningContext, new_context
from .exceptions import ConfigError
from .models import ConfigErrorReason, DEFAULT_ALGORITHM, DEFAULT_TTL_SECONDS
from .signer import RequestSigner


def _env(name: str, default: str) -> Callable[[], str]:
    return lambda: os.environ.get(name, default)


@dataclass
class SignerSettings:
    """Configuration for request signing."""
    secret: str = field(default_factory=_env("SIGNED_REQUEST_SECRET", ""), repr=False)
    ttl: Union[int, str] = field(
        default_factory=_env("SIGNED_REQUEST_TTL", str(DEFAULT_TTL_SECONDS))
    )
    algorithm: str = field(
        default_factory=_env("SIGNED_REQUEST_ALGORITHM", DEFAULT_ALGORITHM)
    )
    encoding: str = field(default_factory=_env("SIGNED_REQUEST_ENCODING", "hex"))
    canonical_form: str = field(
        default_factory=_env("SIGNED_REQUEST_CANONICAL_FORM", "concatenated")
    )

    def ttl_seconds(self) -> int:
        """TTL as an integer."""
        if isinstance(self.ttl, int) and not isinstance(self.ttl, bool):
            return self.ttl
        try:
            return int(str(self.ttl).strip())
        except ValueError:
            raise ConfigError(
                ConfigErrorReason.INVALID_TTL,
                f"TTL must be an integer number of seconds, got {self.ttl!r}",
            ) from None

    def to_context(self, clock: Optional[Callable[[], float]] = None) -> SigningContext:
        """
        Build a validated signing context.

        Raises:
            ConfigError: if any setting is invalid
        """
        return new_context(
            self.secret,
            self.ttl_seconds(),
            self.algorithm,
            encoding=self.encoding,
            canonical_form=self.canonical_form,
            clock=clock,
        )

    def build_signer(self, reject_reserved: bool = True) -> RequestSigner:
        """Build a RequestSigner from these settings."""
        return RequestSigner.from_context(self.to_context(), reject_reserved)
