"""
Request Signer
==============
General purpose request signer and validator object.

Lets two servers authenticate requests to each other through a shared
secret.

Usage:
    from signed_request import RequestSigner

    signer = RequestSigner("shared-secret", ttl=30)

    params = {"foo": "bar", "Fid": {"fig": "floo", "soo": "tid"}, "nid": "nad"}
    signed = signer.sign_request(params)

    # ...transport encodes, sends, the receiver decodes...

    result = signer.validate_request(decoded_params)
    if result is not ValidationResult.VALID:
        ...
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Union

from .context import SigningContext, new_context
from .models import (
    CanonicalForm,
    SignatureEncoding,
    ValidationResult,
    DEFAULT_ALGORITHM,
    DEFAULT_TTL_SECONDS,
)
from .signature import reject_reserved_fields, sign
from .validation import validate


class RequestSigner:
    """
    Signs and validates parameter sets with one signing context.

    By default, parameters that already contain a timestamp or signature
    are refused with ReservedFieldError instead of being overwritten.
    """

    def __init__(
        self,
        secret: Optional[Union[str, bytes]] = None,
        ttl: int = DEFAULT_TTL_SECONDS,
        algorithm: str = DEFAULT_ALGORITHM,
        *,
        encoding: Union[SignatureEncoding, str] = SignatureEncoding.HEX,
        canonical_form: Union[CanonicalForm, str] = CanonicalForm.CONCATENATED,
        clock: Optional[Callable[[], float]] = None,
        context: Optional[SigningContext] = None,
        reject_reserved: bool = True,
    ):
        if context is None:
            context = new_context(
                secret,
                ttl,
                algorithm,
                encoding=encoding,
                canonical_form=canonical_form,
                clock=clock,
            )
        self.context = context
        self.reject_reserved = reject_reserved

    @classmethod
    def from_context(
        cls, context: SigningContext, reject_reserved: bool = True
    ) -> "RequestSigner":
        """Wrap an existing signing context."""
        return cls(context=context, reject_reserved=reject_reserved)

    @property
    def algorithm(self) -> str:
        return self.context.algorithm

    @property
    def ttl(self) -> int:
        return self.context.ttl

    def sign_request(self, params: Mapping) -> Dict[str, Any]:
        """
        Sign a request to allow for authentication by the recipient.

        Args:
            params: Name/value pairs to sign

        Returns:
            Copy of params with timestamp and signature added

        Raises:
            ReservedFieldError: if reject_reserved is set and params
                already use a reserved name
        """
        if self.reject_reserved:
            reject_reserved_fields(params)
        return sign(params, self.context)

    def validate_request(self, params: Mapping) -> ValidationResult:
        """Validate decoded request parameters."""
        return validate(params, self.context)

    def is_valid(self, params: Mapping) -> bool:
        """True if params are authentic and received within the TTL."""
        return self.validate_request(params).is_valid

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(algorithm={self.algorithm!r}, "
            f"ttl={self.ttl!r})"
        )
