"""Normalisation of raw key input into secret-wrapped bytes.

Accepted shapes:

* ``bytes`` / ``bytearray`` / ``memoryview`` - used verbatim;
* ``str`` made of an even number of hex digits - hex-decoded;
* a pydantic secret wrapping one of the above - unwrapped once.
"""
from __future__ import annotations

from typing import Any, Union

import regex
from pydantic import SecretBytes, SecretStr

from .errors import InvalidKeyInput
from .secret import is_secret, unwrap, wrap

HEX_PATTERN = regex.compile(r"[a-f0-9]+", regex.IGNORECASE)

_UNSUPPORTED = "Key must be a hex string, a bytes value or a secret"

KeyInput = Union[bytes, bytearray, memoryview, str, SecretBytes, SecretStr]


def is_hex_string(value: str) -> bool:
    return len(value) % 2 == 0 and HEX_PATTERN.fullmatch(value) is not None


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        if not value:
            raise InvalidKeyInput("Key cannot be empty")
        if not is_hex_string(value):
            raise InvalidKeyInput("Invalid hex string")
        return bytes.fromhex(value)
    if value is None:
        raise InvalidKeyInput(f"{_UNSUPPORTED}, got None")
    raise InvalidKeyInput(f"{_UNSUPPORTED}, got {type(value).__name__}")


def normalize_key(value: KeyInput) -> SecretBytes:
    """Convert ``value`` into canonical key material.

    The result is always a new :class:`~pydantic.SecretBytes`, even when the
    input was already wrapped.
    """

    if is_secret(value):
        inner = unwrap(value)
        if is_secret(inner):
            raise InvalidKeyInput("Nested secrets are not supported")
        return wrap(_to_bytes(inner))
    return wrap(_to_bytes(value))


__all__ = ["HEX_PATTERN", "KeyInput", "is_hex_string", "normalize_key"]
