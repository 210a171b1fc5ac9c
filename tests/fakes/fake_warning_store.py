from datetime import datetime, timedelta, timezone

from menet.domain.warnings import WarningState
from menet.warning_store.base import WarningStateStore


class FakeWarningStateStore(WarningStateStore):
    """Fake warning state store that keeps the state in memory."""

    def __init__(self, state: WarningState | None = None) -> None:
        self._state = state or WarningState()

    def get_state(self) -> WarningState:
        return self._state

    def snooze(
        self, warning_id: str, hours: float | None = None, now: datetime | None = None
    ) -> WarningState:
        until = (now or datetime.now(timezone.utc)) + timedelta(hours=hours or 24)
        self._state = WarningState(
            snoozed={**self._state.snoozed, warning_id: until.isoformat()},
            dismissed=self._state.dismissed,
        )
        return self._state

    def dismiss(self, warning_id: str) -> WarningState:
        self._state = WarningState(
            snoozed=self._state.snoozed,
            dismissed={**self._state.dismissed, warning_id: True},
        )
        return self._state

    def undismiss(self, warning_id: str) -> WarningState:
        dismissed = {k: v for k, v in self._state.dismissed.items() if k != warning_id}
        self._state = WarningState(snoozed=self._state.snoozed, dismissed=dismissed)
        return self._state

    def clear(self) -> None:
        self._state = WarningState()

    def save(self, filepath: str | None = None) -> None:
        pass
