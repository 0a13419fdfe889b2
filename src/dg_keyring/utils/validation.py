"""Validation helpers for identifier-like strings."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Any, Optional

from pydantic import StringConstraints, TypeAdapter, ValidationError

_RULE_BY_ERROR_TYPE = {
    "string_type": "type",
    "string_too_short": "too_short",
    "string_too_long": "too_long",
    "string_pattern_mismatch": "pattern",
}


@dataclass(frozen=True)
class StringRules:
    """Constraints applied by :func:`validate_string`.

    ``messages`` maps a rule name (``type``, ``too_short``, ``too_long``,
    ``pattern``) to the message reported when that rule is violated.
    """

    strip: bool = True
    min_length: int = 1
    max_length: Optional[int] = None
    pattern: Optional[str] = None
    messages: tuple[tuple[str, str], ...] = ()

    def message_for(self, rule: str, default: str) -> str:
        return dict(self.messages).get(rule, default)


class StringRuleViolation(ValueError):
    """Raised when a value does not satisfy :class:`StringRules`."""

    def __init__(self, value: Any, rule: str, message: str) -> None:
        self.value = value
        self.rule = rule
        self.message = message
        super().__init__(message)


@lru_cache(maxsize=None)
def _adapter(rules: StringRules) -> TypeAdapter[str]:
    constrained = Annotated[
        str,
        StringConstraints(
            strip_whitespace=rules.strip,
            min_length=rules.min_length,
            max_length=rules.max_length,
            pattern=rules.pattern,
        ),
    ]
    return TypeAdapter(constrained)


def validate_string(value: Any, rules: StringRules) -> str:
    """Validate ``value`` against ``rules`` and return the normalised string.

    Parameters
    ----------
    value:
        Candidate value. Anything other than ``str`` is rejected.
    rules:
        Trimming, length and pattern constraints.

    Returns
    -------
    str
        The value with surrounding whitespace removed when ``rules.strip``.

    Raises
    ------
    StringRuleViolation
        Carrying the name of the first violated rule.
    """

    try:
        return _adapter(rules).validate_python(value, strict=True)
    except ValidationError as exc:
        error = exc.errors(include_url=False)[0]
        rule = _RULE_BY_ERROR_TYPE.get(error["type"], error["type"])
        raise StringRuleViolation(value, rule, rules.message_for(rule, error["msg"])) from None


__all__ = ["StringRules", "StringRuleViolation", "validate_string"]
