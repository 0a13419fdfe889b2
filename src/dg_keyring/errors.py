"""Exception hierarchy for the keyring."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from .range import SizeRange

_CODE_FORMAT = "E_DG_KEYRING_{}"
_ID_PREVIEW = 64


def _code(number: int) -> str:
    return _CODE_FORMAT.format(number)


class KeyRingError(Exception):
    """Base exception for keyring failures.

    Every subclass carries a stable ``code`` so callers can branch on the
    failure kind without parsing messages.
    """

    code: ClassVar[str] = "E_DG_KEYRING"


class NoSuchKey(KeyRingError, LookupError):
    """Raised when a key identifier cannot be resolved"""

    code = _code(1)

    def __init__(self, key_id: str) -> None:
        self.key_id = key_id
        super().__init__(f"No such key: {key_id}")


class KeyAlreadyExists(KeyRingError):
    """Raised when adding a key under an identifier that is already taken"""

    code = _code(2)

    def __init__(self, key_id: str) -> None:
        self.key_id = key_id
        super().__init__(f"Key already exists: {key_id}")


class NoAvailableKeysInKeyRing(KeyRingError):
    """Raised when no key is eligible for random pick"""

    code = _code(3)

    def __init__(self) -> None:
        super().__init__("No available keys in key ring")


class InvalidKeySize(KeyRingError, ValueError):
    """Raised when key material falls outside the configured size range"""

    code = _code(4)

    def __init__(self, key_size: "SizeRange", actual_size: int) -> None:
        self.key_size = key_size
        self.actual_size = actual_size
        super().__init__(f"Key size must be {key_size.describe()}, got {actual_size}")


class CustomValidationViolated(KeyRingError, ValueError):
    """Raised when the configured validation hook rejects an entry"""

    code = _code(5)

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Key custom validation violated: {reason}")


class InvalidKeyInput(KeyRingError, ValueError):
    """Raised when a value cannot be normalized into key material.

    The message describes the shape of the input only, never its content.
    """

    code = _code(6)

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"Invalid key: {description}")


class InvalidKeyIdentifier(KeyRingError, ValueError):
    """Raised when a key identifier violates the naming rules.

    Only string identifiers are echoed in the message, truncated. Any other
    value is reported by type name, since a swapped ``add_key`` call would
    otherwise print key material.
    """

    code = _code(7)

    def __init__(self, value: Any, rule: str, message: str) -> None:
        self.value = value
        self.rule = rule
        super().__init__(f"Invalid key ID {_describe_id(value)}: {message}")


def _describe_id(value: Any) -> str:
    if isinstance(value, str):
        if len(value) > _ID_PREVIEW:
            return repr(value[:_ID_PREVIEW]) + "..."
        return repr(value)
    return f"<{type(value).__name__}>"


__all__ = [
    "KeyRingError",
    "NoSuchKey",
    "KeyAlreadyExists",
    "NoAvailableKeysInKeyRing",
    "InvalidKeySize",
    "CustomValidationViolated",
    "InvalidKeyInput",
    "InvalidKeyIdentifier",
]
