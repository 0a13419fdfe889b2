"""Key identifier validation."""
from __future__ import annotations

from typing import Any

from .errors import InvalidKeyIdentifier
from .utils.validation import StringRules, StringRuleViolation, validate_string

MAX_KEY_ID_LENGTH = 255

KEY_ID_RULES = StringRules(
    strip=True,
    min_length=1,
    max_length=MAX_KEY_ID_LENGTH,
    pattern=r"^[a-zA-Z0-9_-]+$",
    messages=(
        ("type", "Key ID must be a string"),
        ("too_short", "Key ID cannot be empty"),
        ("too_long", f"Key ID is too long. Max length is {MAX_KEY_ID_LENGTH} characters"),
        ("pattern", "Key ID can contain only letters, numbers, underscores and dashes"),
    ),
)


def normalize_key_id(value: Any) -> str:
    """Return the trimmed identifier or raise :class:`InvalidKeyIdentifier`.

    Case is preserved: ``"Key1"`` and ``"key1"`` name different entries.
    """

    try:
        return validate_string(value, KEY_ID_RULES)
    except StringRuleViolation as exc:
        raise InvalidKeyIdentifier(value, exc.rule, exc.message) from None


__all__ = ["KEY_ID_RULES", "MAX_KEY_ID_LENGTH", "normalize_key_id"]
