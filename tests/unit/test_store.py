"""
Unit tests for store.py module.

Tests the key-value snapshot store: defaults for absent or unreadable keys,
metadata stamping and backfill, key validation and atomic writes.
"""

import json
import logging
from datetime import datetime, timezone

import pytest

from wealthcalc.exceptions import StorageError
from wealthcalc.serialization import save_snapshot
from wealthcalc.snapshot import FinancialSnapshot, Income, Metadata
from wealthcalc.store import SnapshotStore

STAMP = "2025-01-01T09:30:00.000Z"


@pytest.fixture
def store(tmp_path):
    """Store with a frozen clock."""
    return SnapshotStore(
        tmp_path / "store",
        clock=lambda: datetime(2025, 1, 1, 9, 30, tzinfo=timezone.utc),
    )


class TestLoad:
    """Test load() fallbacks."""

    def test_absent_key_returns_default(self, store):
        assert store.load() == FinancialSnapshot()

    def test_corrupt_file_returns_default_and_logs(self, store, caplog):
        store.root.mkdir(parents=True)
        store.path_for("financeData").write_text("{broken")

        with caplog.at_level(logging.ERROR, logger="wealthcalc.store"):
            snap = store.load()

        assert snap == FinancialSnapshot()
        assert "Error reading snapshot 'financeData'" in caplog.text

    def test_undecodable_file_returns_default(self, store, caplog):
        store.root.mkdir(parents=True)
        store.path_for("financeData").write_bytes(b'{"income": "\xff\xfe"}')

        with caplog.at_level(logging.ERROR, logger="wealthcalc.store"):
            assert store.load() == FinancialSnapshot()
        assert "Error reading snapshot 'financeData'" in caplog.text

    def test_invalid_payload_returns_default(self, store, caplog):
        store.root.mkdir(parents=True)
        store.path_for("financeData").write_text(json.dumps({"income": {"monthlyGross": -1}}))

        with caplog.at_level(logging.ERROR, logger="wealthcalc.store"):
            assert store.load() == FinancialSnapshot()
        assert caplog.records

    def test_backfills_missing_metadata(self, store, household_snapshot):
        save_snapshot(household_snapshot, store.path_for("financeData"))

        snap = store.load()

        assert snap.metadata == Metadata(last_saved=STAMP, last_modified=STAMP)
        assert snap.income == household_snapshot.income

    def test_keeps_existing_metadata(self, store):
        existing = FinancialSnapshot(metadata=Metadata("2024-05-01T00:00:00.000Z", "2024-05-02T00:00:00.000Z"))
        save_snapshot(existing, store.path_for("financeData"))

        assert store.load().metadata == existing.metadata


class TestSave:
    """Test save() stamping and persistence."""

    def test_stamps_timestamps(self, store):
        saved = store.save("financeData", FinancialSnapshot(income=Income(monthly_gross=4_000)))

        assert saved.metadata.last_saved == STAMP
        assert saved.metadata.last_modified == STAMP
        assert saved.income.monthly_gross == 4_000

    def test_save_then_load(self, store, household_snapshot):
        saved = store.save("financeData", household_snapshot)
        assert store.load("financeData") == saved

    def test_overwrite(self, store):
        store.save("financeData", FinancialSnapshot(income=Income(monthly_gross=1)))
        store.save("financeData", FinancialSnapshot(income=Income(monthly_gross=2)))

        assert store.load().income.monthly_gross == 2

    def test_no_temp_files_left(self, store):
        store.save("financeData", FinancialSnapshot())
        assert [p.name for p in store.root.iterdir()] == ["financeData.json"]

    def test_write_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        store = SnapshotStore(blocker)

        with pytest.raises(StorageError, match="Could not write"):
            store.save("financeData", FinancialSnapshot())

    def test_default_clock_format(self, tmp_path):
        saved = SnapshotStore(tmp_path).save("k", FinancialSnapshot())
        stamp = saved.metadata.last_saved

        assert stamp.endswith("Z")
        assert datetime.fromisoformat(stamp[:-1]).year >= 2025


class TestKeys:
    """Test key handling."""

    @pytest.mark.parametrize("key", ["", "../escape", "a/b", ".hidden", "with space"])
    def test_invalid_keys(self, store, key):
        with pytest.raises(StorageError, match="Invalid snapshot key"):
            store.path_for(key)

    def test_keys_exists_delete(self, store):
        assert store.keys() == []

        store.save("financeData", FinancialSnapshot())
        store.save("backup-2025.01", FinancialSnapshot())

        assert store.keys() == ["backup-2025.01", "financeData"]
        assert store.exists("financeData")
        assert store.delete("backup-2025.01") is True
        assert store.delete("backup-2025.01") is False
        assert store.keys() == ["financeData"]
        assert not store.exists("backup-2025.01")
