"""In-memory registry of validated key material."""
from __future__ import annotations

import random
import secrets
import threading
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from pydantic import SecretBytes

from .config import KeyRingOptions
from .errors import (
    CustomValidationViolated,
    InvalidKeyIdentifier,
    InvalidKeySize,
    KeyAlreadyExists,
    NoAvailableKeysInKeyRing,
    NoSuchKey,
)
from .key import KeyInput, normalize_key
from .key_id import normalize_key_id
from .logging import get_logger
from .models import KeyEntry, KeyEntryValidator
from .range import SizeRange

logger = get_logger(__name__)


class KeyRing:
    """Registry of keys indexed by identifier.

    Keys are normalised into :class:`~pydantic.SecretBytes` on the way in and
    checked against the ring's :class:`~dg_keyring.config.KeyRingOptions`.
    Every added key is eligible for :meth:`get_random_key` until
    :meth:`prevent_random_pick` is called for it, which keeps the key
    retrievable by id (e.g. to decrypt legacy data) while excluding it from
    new use.

    All public methods hold an instance lock, so a ring may be shared between
    threads.
    """

    def __init__(
        self,
        options: Optional[KeyRingOptions] = None,
        *,
        key_size: Union[SizeRange, Mapping[str, int], None] = None,
        validation: Optional[KeyEntryValidator] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if options is None:
            options = KeyRingOptions(key_size=key_size, validation=validation)
        elif key_size is not None or validation is not None:
            raise ValueError("Pass either options or key_size/validation, not both")
        self._options = options
        self._keys: Dict[str, SecretBytes] = {}
        # Insertion-ordered set of ids eligible for random pick.
        self._random_pick: Dict[str, None] = {}
        self._rng = rng or secrets.SystemRandom()
        self._lock = threading.RLock()

    @property
    def options(self) -> KeyRingOptions:
        return self._options

    # ----- Mutators -----
    def add_key(self, key_id: Any, key: KeyInput) -> "KeyRing":
        """Add ``key`` under ``key_id`` and make it eligible for random pick.

        Raises :class:`KeyAlreadyExists` rather than overwriting an existing
        entry; replacing a key takes an explicit :meth:`remove_key` first.
        """

        material = normalize_key(key)
        final_id = normalize_key_id(key_id)
        entry = self._validate_entry(KeyEntry(id=final_id, key=material))

        with self._lock:
            if entry.id in self._keys:
                raise KeyAlreadyExists(entry.id)
            self._keys[entry.id] = entry.key
            self._random_pick[entry.id] = None

        logger.debug("key_added", key_id=entry.id, size=entry.size)
        return self

    def remove_key(self, key_id: Any) -> "KeyRing":
        final_id = normalize_key_id(key_id)
        with self._lock:
            removed = self._keys.pop(final_id, None) is not None
            self._random_pick.pop(final_id, None)
        if removed:
            logger.debug("key_removed", key_id=final_id)
        return self

    def prevent_random_pick(self, key_id: Any) -> "KeyRing":
        """Exclude a key from :meth:`get_random_key` without removing it."""

        final_id = normalize_key_id(key_id)
        with self._lock:
            if final_id not in self._random_pick:
                raise NoSuchKey(final_id)
            del self._random_pick[final_id]
        logger.debug("random_pick_prevented", key_id=final_id)
        return self

    # ----- Lookups -----
    def get_key_by_id(self, key_id: Any) -> Optional[SecretBytes]:
        entry = self.get_key_entry_by_id(key_id)
        return entry.key if entry else None

    def get_key_entry_by_id(self, key_id: Any) -> Optional[KeyEntry]:
        final_id = normalize_key_id(key_id)
        with self._lock:
            key = self._keys.get(final_id)
        if key is None:
            return None
        return KeyEntry(id=final_id, key=key)

    def assert_key_by_id(self, key_id: Any) -> SecretBytes:
        return self.assert_entry_by_id(key_id).key

    def assert_entry_by_id(self, key_id: Any) -> KeyEntry:
        final_id = normalize_key_id(key_id)
        entry = self.get_key_entry_by_id(final_id)
        if entry is None:
            raise NoSuchKey(final_id)
        return entry

    def get_random_key(self) -> KeyEntry:
        """Return a uniformly random entry among those eligible for pick."""

        with self._lock:
            if not self._random_pick:
                raise NoAvailableKeysInKeyRing()
            key_id = self._rng.choice(list(self._random_pick))
            return KeyEntry(id=key_id, key=self._keys[key_id])

    # ----- Introspection -----
    def ids(self) -> List[str]:
        with self._lock:
            return list(self._keys)

    def eligible_ids(self) -> List[str]:
        with self._lock:
            return list(self._random_pick)

    def is_eligible(self, key_id: Any) -> bool:
        final_id = normalize_key_id(key_id)
        with self._lock:
            return final_id in self._random_pick

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)

    def __contains__(self, key_id: object) -> bool:
        try:
            final_id = normalize_key_id(key_id)
        except InvalidKeyIdentifier:
            return False
        with self._lock:
            return final_id in self._keys

    def __iter__(self) -> Iterator[KeyEntry]:
        with self._lock:
            snapshot = list(self._keys.items())
        return (KeyEntry(id=key_id, key=key) for key_id, key in snapshot)

    def __repr__(self) -> str:
        with self._lock:
            return f"KeyRing(keys={len(self._keys)}, eligible={len(self._random_pick)})"

    # ----- Policy -----
    def _validate_entry(self, entry: KeyEntry) -> KeyEntry:
        key_size = self._options.key_size
        if key_size is not None and not key_size.is_within(entry.size, inclusive=True):
            logger.warning(
                "key_rejected",
                key_id=entry.id,
                policy="key_size",
                expected=key_size.describe(),
                size=entry.size,
            )
            raise InvalidKeySize(key_size, entry.size)

        validation = self._options.validation
        if validation is not None:
            reason = validation(entry)
            if reason is not None:
                logger.warning("key_rejected", key_id=entry.id, policy="custom", reason=reason)
                raise CustomValidationViolated(reason)
        return entry


__all__ = ["KeyRing"]
