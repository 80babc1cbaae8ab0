"""
Key-value snapshot store for wealthcalc.

Purpose
-------
Persists FinancialSnapshot payloads under string keys, one JSON file per
key inside a root directory. The household snapshot lives under the key
"financeData".

Contract
--------
- load(key): the stored snapshot, or the zero-valued default when the key
  is absent. A read failure (unreadable file, malformed JSON, schema
  violation) is logged at ERROR and also yields the default. Missing
  metadata timestamps are backfilled with the current time.
- save(key, snapshot): stamps lastSaved / lastModified with the same
  timestamp, writes atomically (temp file + replace) and returns the
  stamped snapshot. Write failures raise StorageError.
- Keys are plain names: letters, digits, "_", "-" and "." only, not
  starting with ".".

Example
-------
>>> from pathlib import Path
>>> store = SnapshotStore(Path("~/.local/share/wealthcalc").expanduser())
>>> snapshot = store.load()                 # default snapshot on first run
>>> saved = store.save("financeData", snapshot)
>>> saved.metadata.last_saved == saved.metadata.last_modified
True
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import re
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from .constants import DEFAULT_SNAPSHOT_KEY
from .exceptions import StorageError, WealthCalcError
from .serialization import SCHEMA_VERSION, load_snapshot, snapshot_to_dict
from .snapshot import FinancialSnapshot, Metadata
from .utils import utc_timestamp

__all__ = ["SnapshotStore"]

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_\-][A-Za-z0-9_.\-]*$")
_SUFFIX = ".json"


class SnapshotStore:
    """
    Directory-backed key-value store of snapshots.

    Parameters
    ----------
    root : Path or str
        Directory holding one ``<key>.json`` file per key. Created on the
        first save.
    clock : callable, optional
        Returns the current datetime; used for metadata timestamps.
        Defaults to the UTC wall clock.
    """

    def __init__(
        self,
        root: Union[Path, str],
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.root = Path(root)
        self._clock = clock

    def __repr__(self) -> str:
        return f"SnapshotStore(root={str(self.root)!r})"

    def _now(self) -> str:
        return utc_timestamp(self._clock() if self._clock else None)

    def path_for(self, key: str) -> Path:
        """File path of *key*; raises StorageError for invalid keys."""
        if not isinstance(key, str) or not _KEY_PATTERN.match(key):
            raise StorageError(
                f"Invalid snapshot key {key!r}: use letters, digits, '_', '-' or '.'"
            )
        return self.root / f"{key}{_SUFFIX}"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def exists(self, key: str = DEFAULT_SNAPSHOT_KEY) -> bool:
        return self.path_for(key).is_file()

    def keys(self) -> List[str]:
        """Stored keys in sorted order."""
        if not self.root.is_dir():
            return []
        return sorted(
            p.name[: -len(_SUFFIX)]
            for p in self.root.iterdir()
            if p.is_file() and p.name.endswith(_SUFFIX) and _KEY_PATTERN.match(p.stem)
        )

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    def load(self, key: str = DEFAULT_SNAPSHOT_KEY) -> FinancialSnapshot:
        """
        Stored snapshot for *key*, or the default snapshot.

        Never raises for missing or corrupt data; see the module contract.
        """
        path = self.path_for(key)
        if not path.is_file():
            logger.debug("no snapshot stored under %r, using defaults", key)
            return FinancialSnapshot()

        try:
            snapshot = load_snapshot(path)
        except (OSError, WealthCalcError) as exc:
            logger.error("Error reading snapshot %r from %s: %s", key, path, exc)
            return FinancialSnapshot()

        return self._backfill_metadata(snapshot)

    def save(self, key: str, snapshot: FinancialSnapshot) -> FinancialSnapshot:
        """
        Persist *snapshot* under *key* and return the timestamped copy.

        Raises
        ------
        StorageError
            If the key is invalid or the file cannot be written.
        """
        path = self.path_for(key)
        now = self._now()
        stamped = dataclasses.replace(
            snapshot, metadata=Metadata(last_saved=now, last_modified=now)
        )
        data = {"schema_version": SCHEMA_VERSION, **snapshot_to_dict(stamped)}

        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.root, prefix=f".{key}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise StorageError(f"Could not write snapshot {key!r}: {exc}") from exc

        logger.debug("saved snapshot %r to %s", key, path)
        return stamped

    def delete(self, key: str) -> bool:
        """Remove *key*; returns False when nothing was stored."""
        path = self.path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(f"Could not delete snapshot {key!r}: {exc}") from exc
        logger.debug("deleted snapshot %r", key)
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _backfill_metadata(self, snapshot: FinancialSnapshot) -> FinancialSnapshot:
        meta = snapshot.metadata
        if meta.last_saved is not None and meta.last_modified is not None:
            return snapshot
        now = self._now()
        return dataclasses.replace(
            snapshot,
            metadata=Metadata(
                last_saved=meta.last_saved or now,
                last_modified=meta.last_modified or now,
            ),
        )
