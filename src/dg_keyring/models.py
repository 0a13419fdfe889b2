"""Shared models for keyring entries."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from pydantic import SecretBytes


@dataclass(frozen=True, slots=True)
class KeyEntry:
    """An identifier paired with its key material."""

    id: str
    key: SecretBytes

    @property
    def size(self) -> int:
        return len(self.key.get_secret_value())


# Returns ``None`` to accept the entry or a rejection reason.
KeyEntryValidator = Callable[[KeyEntry], Optional[str]]

__all__ = ["KeyEntry", "KeyEntryValidator"]
