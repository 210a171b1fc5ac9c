"""Warning identity, severity and snooze/dismiss status."""

from datetime import datetime, timezone

from loguru import logger

from menet.domain.warnings import (
    ValidationWarning,
    WarningSeverity,
    WarningState,
    WarningStatus,
    WarningType,
)

SEVERITIES: dict[WarningType, WarningSeverity] = {
    "orphan-value": "warning",
    "unexplained-behaviour": "info",
    "floating-outcome": "info",
    "outcome-level-conflict": "warning",
    "value-level-conflict": "error",
}

TYPE_LABELS: dict[WarningType, str] = {
    "orphan-value": "Orphan Value",
    "unexplained-behaviour": "Unexplained Behaviour",
    "floating-outcome": "Floating Outcome",
    "outcome-level-conflict": "Outcome Conflict",
    "value-level-conflict": "Value Conflict",
}


def generate_warning_id(warning_type: WarningType, node_id: str) -> str:
    """Stable warning ID, so repeated validation runs produce the same IDs."""
    return f"w-{warning_type}-{node_id}"


def get_severity(warning_type: WarningType) -> WarningSeverity:
    return SEVERITIES[warning_type]


def get_warning_type_label(warning_type: WarningType) -> str:
    return TYPE_LABELS[warning_type]


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO 8601 timestamp, treating naive values as UTC.

    Returns None for empty or unparseable values.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        logger.warning(f"Ignoring invalid snooze timestamp: {value}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def get_warning_status(
    warning_id: str, state: WarningState, now: datetime | None = None
) -> WarningStatus:
    """Status of a warning against the caller's warning state.

    Dismissal takes precedence over snooze. A snooze whose expiry is not in
    the future no longer hides the warning.
    """
    if state.dismissed.get(warning_id) is True:
        return "dismissed"

    snoozed_until = parse_timestamp(state.snoozed.get(warning_id, ""))
    if snoozed_until is not None and snoozed_until > (now or datetime.now(timezone.utc)):
        return "snoozed"

    return "active"


def is_warning_active(
    warning: ValidationWarning, state: WarningState, now: datetime | None = None
) -> bool:
    return get_warning_status(warning.id, state, now) == "active"
