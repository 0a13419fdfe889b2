"""In-memory registry for validated cryptographic key material."""
from .config import KeyRingOptions
from .errors import (
    CustomValidationViolated,
    InvalidKeyIdentifier,
    InvalidKeyInput,
    InvalidKeySize,
    KeyAlreadyExists,
    KeyRingError,
    NoAvailableKeysInKeyRing,
    NoSuchKey,
)
from .key import normalize_key
from .key_id import normalize_key_id
from .keyring import KeyRing
from .models import KeyEntry, KeyEntryValidator
from .range import SizeRange
from .version import __version__

__all__ = [
    "KeyRing",
    "KeyRingOptions",
    "KeyEntry",
    "KeyEntryValidator",
    "SizeRange",
    "normalize_key",
    "normalize_key_id",
    "KeyRingError",
    "NoSuchKey",
    "KeyAlreadyExists",
    "NoAvailableKeysInKeyRing",
    "InvalidKeySize",
    "CustomValidationViolated",
    "InvalidKeyInput",
    "InvalidKeyIdentifier",
    "__version__",
]
