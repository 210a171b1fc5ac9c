from datetime import datetime
from typing import Protocol

from menet.domain.warnings import WarningState


class WarningStateStore(Protocol):
    """Protocol for warning snooze/dismiss state storage."""

    def get_state(self) -> WarningState:
        """Get the current warning state."""
        ...

    def snooze(
        self, warning_id: str, hours: float | None = None, now: datetime | None = None
    ) -> WarningState:
        """Snooze a warning for ``hours`` from ``now``."""
        ...

    def dismiss(self, warning_id: str) -> WarningState:
        """Dismiss a warning until it is undismissed."""
        ...

    def undismiss(self, warning_id: str) -> WarningState:
        """Clear the dismissed flag of a warning."""
        ...

    def clear(self) -> None:
        """Forget all snoozes and dismissals."""
        ...

    def save(self, filepath: str | None = None) -> None:
        """Save the warning state to disk."""
        ...
