"""Keyring documents: declarative key lists loaded from YAML or JSON.

Example::

    key_size:
      start: 16
    keys:
      - id: signing-2024
        key: "b088e7ec4a6cc7b218851bd91c4b1033"
        random_pick: false
      - id: signing-2025
        key: "5f1c0e2d9a7b43c8a1e0f6d2b3c4a5e6"

Hex keys must be quoted, otherwise YAML may read them as numbers.
"""
from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from .keyring import KeyRing
from .models import KeyEntryValidator
from .range import SizeRange


class KeyDocumentEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    key: SecretStr = Field(description="Hex-encoded key material")
    random_pick: bool = True


class KeyringDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key_size: Optional[SizeRange] = None
    keys: List[KeyDocumentEntry] = Field(default_factory=list)


def keyring_from_document(
    data: Union[KeyringDocument, Mapping[str, Any]],
    *,
    default_key_size: Optional[SizeRange] = None,
    validation: Optional[KeyEntryValidator] = None,
    rng: Optional[random.Random] = None,
) -> KeyRing:
    """Build a ring by replaying the document through :meth:`KeyRing.add_key`.

    ``default_key_size`` applies when the document sets no ``key_size``.
    """

    document = data if isinstance(data, KeyringDocument) else KeyringDocument.model_validate(data)
    ring = KeyRing(
        key_size=document.key_size or default_key_size,
        validation=validation,
        rng=rng,
    )
    for item in document.keys:
        ring.add_key(item.id, item.key)
        if not item.random_pick:
            ring.prevent_random_pick(item.id)
    return ring


def document_from_path(path: Path) -> KeyringDocument:
    with path.open("r", encoding="utf-8") as handle:
        try:
            if path.suffix.lower() == ".json":
                raw = json.load(handle)
            else:
                raw = yaml.safe_load(handle)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ValueError(f"Malformed keyring document in {path}: {exc}") from exc
    try:
        return KeyringDocument.model_validate(raw or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid keyring document in {path}: {exc}") from exc


def keyring_from_path(
    path: Path,
    *,
    default_key_size: Optional[SizeRange] = None,
    validation: Optional[KeyEntryValidator] = None,
    rng: Optional[random.Random] = None,
) -> KeyRing:
    return keyring_from_document(
        document_from_path(path),
        default_key_size=default_key_size,
        validation=validation,
        rng=rng,
    )


__all__ = [
    "KeyDocumentEntry",
    "KeyringDocument",
    "document_from_path",
    "keyring_from_document",
    "keyring_from_path",
]
