"""Utility exports."""
from .validation import StringRules, StringRuleViolation, validate_string

__all__ = ["StringRules", "StringRuleViolation", "validate_string"]
