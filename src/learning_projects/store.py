"""Key-value JSON store for small local state.

Each key maps to one JSON file under the base directory. Files are read
whole and rewritten whole, wrapped in a metadata envelope::

    {"meta": {"key": "favoriteRepos", "source": "...", "written_at": "..."},
     "data": <payload>}

Writes go to a temporary file in the same directory and are moved into
place with ``os.replace`` so a crash never leaves a half-written blob.
"""

from __future__ import annotations

import json
import os
import re
import tempfile
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


class KeyValueStore:
    """Manages read/write of JSON blobs keyed by name."""

    suffix = ".json"

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir

    def path_for(self, key: str) -> Path:
        """Absolute file path backing ``key``."""
        if not _KEY_PATTERN.match(key):
            msg = f"Invalid store key: {key!r}"
            raise ValueError(msg)
        full = self.base / f"{key}{self.suffix}"
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Key escapes store base directory: {key}"
            raise ValueError(msg) from None
        return full

    def read(self, key: str) -> Any | None:
        """Read the data payload stored under ``key``.

        Returns None if nothing is stored. Raises ``json.JSONDecodeError``
        if the file is not valid JSON.
        """
        envelope = self.read_raw(key)
        if envelope is None:
            return None
        if isinstance(envelope, dict) and "data" in envelope:
            return envelope["data"]
        return envelope

    def read_raw(self, key: str) -> Any | None:
        """Read the full envelope (meta + data)."""
        full = self.path_for(key)
        if not full.exists():
            return None
        with full.open(encoding="utf-8") as f:
            return json.load(f)

    def write(self, key: str, data: Any, source: str = "local", **params: Any) -> Path:
        """Write ``data`` under ``key``, replacing any previous blob.

        Args:
            key: Store key (letters, digits, ``_ . -``).
            data: JSON-serializable payload.
            source: Who wrote it (e.g. ``"favorites"``).
            **params: Extra metadata fields.

        Returns:
            Absolute path of the written file.
        """
        full = self.path_for(key)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "key": key,
            "source": source,
            "written_at": datetime.now(UTC).isoformat(),
        }
        if params:
            meta.update(params)

        # Serialize first so an encoding error leaves the old blob untouched.
        payload = json.dumps({"meta": meta, "data": data}, indent=2)

        fd, tmp_name = tempfile.mkstemp(prefix=f"{key}-", suffix=".tmp", dir=full.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, full)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return full

