import pytest

from dg_keyring.errors import InvalidKeyIdentifier
from dg_keyring.key_id import MAX_KEY_ID_LENGTH, normalize_key_id
from dg_keyring.utils.validation import StringRules, StringRuleViolation, validate_string


@pytest.mark.parametrize("value", ["key1", "KEY_1", "signing-2025", "a", "_-_"])
def test_accepts_valid_identifiers(value: str) -> None:
    assert normalize_key_id(value) == value


def test_trims_surrounding_whitespace() -> None:
    assert normalize_key_id("  key1\t\n") == "key1"


def test_preserves_case() -> None:
    assert normalize_key_id("Key1") == "Key1"
    assert normalize_key_id("Key1") != normalize_key_id("key1")


def test_length_limit_applies_after_trimming() -> None:
    value = "a" * MAX_KEY_ID_LENGTH
    assert normalize_key_id(f"  {value}  ") == value


@pytest.mark.parametrize(
    ("value", "rule"),
    [
        ("", "too_short"),
        ("   ", "too_short"),
        ("a" * (MAX_KEY_ID_LENGTH + 1), "too_long"),
        ("key 1", "pattern"),
        ("key!", "pattern"),
        ("klucz.główny", "pattern"),
        (None, "type"),
        (123, "type"),
        (b"key1", "type"),
    ],
)
def test_rejects_invalid_identifiers(value: object, rule: str) -> None:
    with pytest.raises(InvalidKeyIdentifier) as exc_info:
        normalize_key_id(value)
    assert exc_info.value.rule == rule
    assert exc_info.value.value == value
    assert exc_info.value.code == "E_DG_KEYRING_7"


def test_rule_messages_are_reported() -> None:
    with pytest.raises(InvalidKeyIdentifier, match="Key ID cannot be empty"):
        normalize_key_id(" ")
    with pytest.raises(InvalidKeyIdentifier, match="only letters, numbers"):
        normalize_key_id("a/b")


def test_generic_string_rules() -> None:
    rules = StringRules(strip=False, min_length=2, max_length=4, pattern=r"^[a-z]+$")
    assert validate_string("abc", rules) == "abc"
    with pytest.raises(StringRuleViolation) as exc_info:
        validate_string(" ab", rules)
    assert exc_info.value.rule == "pattern"
    with pytest.raises(StringRuleViolation) as exc_info:
        validate_string("a", rules)
    assert exc_info.value.rule == "too_short"


def test_non_string_identifier_is_not_echoed() -> None:
    with pytest.raises(InvalidKeyIdentifier) as exc_info:
        normalize_key_id(b"\x01secret-bytes")
    assert exc_info.value.rule == "type"
    assert "<bytes>" in str(exc_info.value)
    assert "secret-bytes" not in str(exc_info.value)


def test_long_identifier_is_truncated_in_message() -> None:
    value = "k" * 300
    with pytest.raises(InvalidKeyIdentifier) as exc_info:
        normalize_key_id(value)
    assert exc_info.value.rule == "too_long"
    assert value not in str(exc_info.value)
    assert "k" * 64 + "'..." in str(exc_info.value)
