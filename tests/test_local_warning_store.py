"""Tests for LocalWarningStateStore functionality."""

import json
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from menet.domain.warnings import WarningState
from menet.errors import StoreError
from menet.validation.status import get_warning_status
from menet.warning_store.local import LocalWarningStateStore


def test_snooze_uses_default_duration(fixed_now: datetime) -> None:
    store = LocalWarningStateStore(snooze_hours=2)

    state = store.snooze("w-1", now=fixed_now)

    assert state.snoozed == {"w-1": (fixed_now + timedelta(hours=2)).isoformat()}
    assert get_warning_status("w-1", state, fixed_now) == "snoozed"
    assert get_warning_status("w-1", state, fixed_now + timedelta(hours=3)) == "active"


def test_snooze_with_explicit_hours(fixed_now: datetime) -> None:
    store = LocalWarningStateStore()

    state = store.snooze("w-1", hours=0.5, now=fixed_now)

    assert state.snoozed["w-1"] == "2024-06-01T12:30:00+00:00"


def test_updates_do_not_mutate_earlier_states() -> None:
    store = LocalWarningStateStore()
    before = store.get_state()

    after = store.dismiss("w-1")

    assert before == WarningState(), "Earlier snapshots are never changed"
    assert after.dismissed == {"w-1": True}


def test_dismiss_and_undismiss() -> None:
    store = LocalWarningStateStore()

    store.dismiss("w-1")
    store.dismiss("w-2")
    state = store.undismiss("w-1")

    assert state.dismissed == {"w-2": True}
    assert store.undismiss("w-unknown").dismissed == {"w-2": True}


def test_save_and_load(tmp_path: Path, fixed_now: datetime) -> None:
    filepath = tmp_path / "state.json"
    store = LocalWarningStateStore(filepath=filepath)
    store.snooze("w-1", now=fixed_now)
    store.dismiss("w-2")

    store.save()
    loaded = LocalWarningStateStore(filepath=filepath).get_state()

    assert loaded == store.get_state()
    assert set(json.loads(filepath.read_text())) == {"snoozed", "dismissed"}


def test_clear_and_save_without_path() -> None:
    store = LocalWarningStateStore()
    store.dismiss("w-1")

    store.clear()

    assert store.get_state() == WarningState()
    with pytest.raises(ValueError, match="No filepath provided"):
        store.save()


def test_corrupt_file_raises(tmp_path: Path) -> None:
    filepath = tmp_path / "state.json"
    filepath.write_text('{"dismissed": {"w-1": "maybe"}}')

    with pytest.raises(StoreError, match="Failed to load warning state"):
        LocalWarningStateStore(filepath=filepath)
