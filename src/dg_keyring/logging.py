"""Structured logging for the keyring.

Library modules obtain loggers through :func:`get_logger`, which wraps a
stdlib logger under the ``dg_keyring`` namespace. That namespace carries a
``NullHandler``, so nothing is emitted until the host application configures
logging, either on its own or through :func:`configure_logging`.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any, MutableMapping

import structlog

from .secret import is_secret

_LOG_LEVEL_ENV = "DG_KEYRING_LOG_LEVEL"
_ROOT_LOGGER = "dg_keyring"
_MASK = "**********"

logging.getLogger(_ROOT_LOGGER).addHandler(logging.NullHandler())

EventDict = MutableMapping[str, Any]


def get_logger(name: str = _ROOT_LOGGER) -> Any:
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(level: str | None = None) -> None:
    """Emit JSON lines on stdout through the stdlib root logger.

    Records carry ``ts``, ``level``, ``msg`` and ``component``. Byte strings
    and pydantic secrets bound to an event are replaced by a mask before
    rendering, so key material passed by mistake never reaches the output.
    """

    level_name = (level or os.getenv(_LOG_LEVEL_ENV, "INFO")).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stdout)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            mask_key_material,
            _shape_record,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def mask_key_material(_logger: Any, _name: str, event_dict: EventDict) -> EventDict:
    for field, value in event_dict.items():
        if isinstance(value, (bytes, bytearray, memoryview)) or is_secret(value):
            event_dict[field] = _MASK
    return event_dict


def _shape_record(logger: Any, _name: str, event_dict: EventDict) -> EventDict:
    # "event" becomes "msg"; "component" defaults to the stdlib logger name.
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    event_dict.setdefault("component", getattr(logger, "name", None) or _ROOT_LOGGER)
    return event_dict


__all__ = ["configure_logging", "get_logger", "mask_key_material"]
