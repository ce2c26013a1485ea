"""Per-run work store for intermediate pipeline data.

Intermediate results are written as JSON files organized by stage:
  - merged/: Rows from every input file, before filtering
  - observations/: Valid US observations

Every JSON file is wrapped in a metadata envelope recording where the data
came from and when it was written.

A run uses ``DataStore.temporary()``, which creates a fresh directory and
removes it when the ``with`` block exits, however it exits.
"""

from __future__ import annotations

import json
import tempfile
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


class DataStore:
    """Manages read/write of enveloped JSON files under one base directory."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir

    @classmethod
    @contextmanager
    def temporary(cls, prefix: str = "bird-rarities-") -> Iterator[DataStore]:
        """Yield a store over a new temporary directory, deleted on exit."""
        with tempfile.TemporaryDirectory(prefix=prefix) as tmp:
            yield cls(Path(tmp))

    def read(self, path: Path) -> Any:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(self, path: Path, data: Any, source: str, **params: Any) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``merged/merged.json``).
            data: Payload to store under the ``data`` key.
            source: Where the data came from (e.g. ``"input files"``).
            **params: Extra metadata fields (file lists, counts, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "written_at": datetime.now(UTC).isoformat(),
        }
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2)

        return full

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
