"""Durable client-side key/value storage.

All keys live in a single JSON file. Every write replaces the whole file
atomically, so readers see either the previous snapshot or the new one and
never a partial write. Concurrent writers from separate processes are not
coordinated: the last writer wins.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

CART_KEY = "cart"
TOKEN_KEY = "token"


class LocalStorage:
    """String key/value store persisted to a JSON file."""

    def __init__(self, storage_file: str | None = None) -> None:
        """Initialize storage.

        Args:
            storage_file: Path to the storage file (default: ~/.rural_connect_storage.json)
        """
        if storage_file is None:
            storage_file = str(Path.home() / ".rural_connect_storage.json")
        self.storage_file = storage_file

    def _read(self) -> dict[str, str]:
        """Read the whole store; a missing or unreadable file is an empty store."""
        if not os.path.exists(self.storage_file):
            return {}

        try:
            with open(self.storage_file) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read local storage {self.storage_file}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed local storage {self.storage_file}")
            return {}

        return {key: value for key, value in data.items() if isinstance(value, str)}

    def _write(self, data: dict[str, str]) -> None:
        """Atomically replace the store with ``data``."""
        directory = os.path.dirname(os.path.abspath(self.storage_file))
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".rural_connect_", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self.storage_file)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``.

        Raises:
            OSError: If the file could not be written
        """
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        """Remove every key."""
        self._write({})
        logger.info("Local storage cleared")
