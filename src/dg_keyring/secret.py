"""Secret container helpers built on pydantic's secret types."""
from __future__ import annotations

from typing import Any

from pydantic import Secret, SecretBytes, SecretStr

_SECRET_TYPES = (Secret, SecretBytes, SecretStr)


def wrap(data: bytes) -> SecretBytes:
    """Wrap raw bytes so ``str()``/``repr()`` never show them."""
    return SecretBytes(bytes(data))


def is_secret(value: Any) -> bool:
    return isinstance(value, _SECRET_TYPES)


def unwrap(secret: Any) -> Any:
    if not is_secret(secret):
        raise TypeError(f"Expected a secret value, got {type(secret).__name__}")
    return secret.get_secret_value()


__all__ = ["wrap", "is_secret", "unwrap"]
