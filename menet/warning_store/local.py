import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from menet.domain.warnings import WarningState
from menet.errors import StoreError
from menet.warning_store.base import WarningStateStore

DEFAULT_SNOOZE_HOURS = 24.0


class LocalWarningStateStore(WarningStateStore):
    """Local warning state store that keeps snoozes and dismissals in a JSON file.

    Every update replaces the held WarningState with a new one, so states
    handed out earlier never change underneath their readers.
    """

    def __init__(
        self, filepath: str | Path | None = None, snooze_hours: float = DEFAULT_SNOOZE_HOURS
    ) -> None:
        """Initialize LocalWarningStateStore.

        Args:
            filepath: Path to state file. If provided and exists, will auto-load.
                     If not provided, keeps the state in memory only.
            snooze_hours: Default snooze duration

        Raises:
            StoreError: If the file exists but does not hold a valid warning state
        """
        self._filepath = str(filepath) if filepath else None
        self._snooze_hours = snooze_hours

        if self._filepath and Path(self._filepath).exists():
            try:
                with open(self._filepath, "r") as f:
                    self._state = WarningState.model_validate(json.load(f))
            except (json.JSONDecodeError, ValidationError) as err:
                raise StoreError(
                    f"Failed to load warning state from {self._filepath}: {err}"
                ) from err
        else:
            self._state = WarningState()

    def get_state(self) -> WarningState:
        return self._state

    def snooze(
        self, warning_id: str, hours: float | None = None, now: datetime | None = None
    ) -> WarningState:
        now = now or datetime.now(timezone.utc)
        until = now + timedelta(hours=self._snooze_hours if hours is None else hours)
        self._state = WarningState(
            snoozed={**self._state.snoozed, warning_id: until.isoformat()},
            dismissed=dict(self._state.dismissed),
        )
        logger.info(f"Snoozed warning {warning_id} until {until.isoformat()}")
        return self._state

    def dismiss(self, warning_id: str) -> WarningState:
        self._state = WarningState(
            snoozed=dict(self._state.snoozed),
            dismissed={**self._state.dismissed, warning_id: True},
        )
        logger.info(f"Dismissed warning {warning_id}")
        return self._state

    def undismiss(self, warning_id: str) -> WarningState:
        dismissed = {k: v for k, v in self._state.dismissed.items() if k != warning_id}
        self._state = WarningState(snoozed=dict(self._state.snoozed), dismissed=dismissed)
        logger.info(f"Undismissed warning {warning_id}")
        return self._state

    def clear(self) -> None:
        self._state = WarningState()

    def save(self, filepath: str | None = None) -> None:
        """Save the warning state to a JSON file.

        Args:
            filepath: Path to save to. If not provided, uses the filepath from initialization.
        """
        save_path = filepath or self._filepath
        if not save_path:
            raise ValueError(
                "No filepath provided and no default filepath set during initialization"
            )

        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        with open(save_path, "w") as f:
            json.dump(self._state.model_dump(by_alias=True), f)
