"""Key-value storage for scorekeeper collections.

Each key maps to one ``<key>.json`` file inside the data directory. Files
are written atomically with owner-only permissions (0o600) inside an
owner-only directory (0o700) as a filesystem hygiene measure.
"""

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger()

# Owner-only directory permissions for the data directory.
_DATA_DIR_MODE = 0o700

# Owner-only file permissions for stored collections.
_DATA_FILE_MODE = 0o600


class KeyValueStorage(Protocol):
    """Protocol for persisting string values under string keys."""

    def load(self, key: str) -> str | None: ...

    def save(self, key: str, content: str) -> None: ...


class LocalKeyValueStorage:
    """Stores each key as a UTF-8 JSON file on the local filesystem."""

    def __init__(self, data_dir: str | Path) -> None:
        self._data_dir = Path(data_dir).resolve()

    def _path_for(self, key: str) -> Path:
        target = (self._data_dir / f"{key}.json").resolve()
        if not key or not target.is_relative_to(self._data_dir):
            raise ValueError(f"Path traversal rejected: '{key}' resolves outside data directory")
        return target

    def load(self, key: str) -> str | None:
        """Return the stored content for key, or None when nothing was saved yet."""
        target = self._path_for(key)
        if not target.exists():
            return None
        return target.read_text(encoding="utf-8")

    def save(self, key: str, content: str) -> None:
        """Save content under key.

        Creates the directory lazily on first write with owner-only permissions
        (0o700). Writes atomically via temp-file-then-rename so readers never
        see a truncated file.
        """
        target = self._path_for(key)

        self._data_dir.mkdir(mode=_DATA_DIR_MODE, parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=str(self._data_dir), suffix=".tmp", prefix=f".{key}_")
        fd_owned = True
        try:
            with os.fdopen(fd, "wb") as f:
                fd_owned = False  # os.fdopen took ownership; it will close fd
                f.write(content.encode("utf-8"))
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, _DATA_FILE_MODE)  # noqa: PTH101
            Path(tmp_path).replace(target)
        except BaseException:
            if fd_owned:
                with contextlib.suppress(OSError):
                    os.close(fd)
            with contextlib.suppress(OSError):
                Path(tmp_path).unlink()
            raise
        logger.debug("saved collection", key=key, path=str(target))
