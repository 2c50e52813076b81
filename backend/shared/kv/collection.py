"""Lenient JSON list codec shared by the key-value repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

if TYPE_CHECKING:
    from shared.storage import KeyValueStorage

logger = structlog.get_logger()

T = TypeVar("T")


def load_collection(storage: KeyValueStorage, key: str, adapter: TypeAdapter[list[T]]) -> list[T]:
    """Load a JSON list stored under key.

    Absent, unreadable or malformed data yields an empty list. A warning is
    logged for the malformed cases so the operator knows the next save will
    overwrite whatever was there.
    """
    try:
        raw = storage.load(key)
    except (OSError, UnicodeDecodeError):  # fmt: skip
        logger.warning("failed to read collection, starting empty", key=key, exc_info=True)
        return []
    if not raw:
        return []
    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        logger.warning("malformed collection, starting empty", key=key, error_count=exc.error_count())
        return []


def save_collection(storage: KeyValueStorage, key: str, adapter: TypeAdapter[list[T]], items: list[T]) -> None:
    storage.save(key, adapter.dump_json(items, by_alias=True).decode("utf-8"))
