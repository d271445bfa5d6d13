"""
Canonicalization
================
Reduce a nested parameter mapping to one deterministic signing string.

The reduction is lossy on purpose: nesting is discarded, colliding keys
keep the last value visited and case is folded. It is only ever used to
compare two parameter sets, never to rebuild one.
"""

import string
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Tuple

from .models import CanonicalForm

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def stringify(value: Any) -> str:
    """
    Render a scalar the same way on both ends of a request.

    bool becomes "1"/"0" (what form and query encoders send), int is
    decimal, float uses repr and bytes are decoded as UTF-8. Undecodable
    bytes are kept as surrogates rather than raising.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", "surrogateescape")
    return str(value)


def to_bytes(text: str) -> bytes:
    """UTF-8 encode text, passing lone surrogates through instead of raising."""
    return text.encode("utf-8", "surrogatepass")


def _children(value: Any) -> Iterator[Tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return iter(value.items())
    # Lists behave like mappings keyed by position
    return iter(enumerate(value))


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def flatten(params: Mapping) -> Dict[str, str]:
    """
    Recursively flatten a mapping into one level of string pairs.

    Leaves are visited depth-first in iteration order; a key seen again
    overwrites the earlier value. None leaves are dropped.
    """
    flat: Dict[str, str] = {}
    for key, value in _children(params):
        if _is_container(value):
            flat.update(flatten(value))
        elif value is not None:
            flat[stringify(key)] = stringify(value)
    return flat


def lower(params: Mapping) -> Dict[str, str]:
    """Lower-case keys and values of a flat mapping (ASCII only)."""
    return {
        key.translate(_ASCII_LOWER): value.translate(_ASCII_LOWER)
        for key, value in params.items()
    }


def _length_prefixed(text: str) -> str:
    return f"{len(to_bytes(text))}:{text}"


def canonicalize(
    params: Mapping,
    form: CanonicalForm = CanonicalForm.CONCATENATED,
) -> str:
    """
    Build the signing string for a parameter set.

    Args:
        params: Parameters, nested mappings allowed
        form: How sorted entries are joined

    Returns:
        Deterministic string independent of key insertion order
    """
    form = CanonicalForm(form)
    entries = sorted(
        lower(flatten(params)).items(),
        key=lambda item: to_bytes(item[0]),
    )

    if form is CanonicalForm.LENGTH_PREFIXED:
        return "".join(
            _length_prefixed(key) + _length_prefixed(value)
            for key, value in entries
        )
    return "".join(key + value for key, value in entries)
