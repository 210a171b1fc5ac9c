"""Validation warning domain models."""

from typing import Literal, get_args

from pydantic import ConfigDict, Field

from menet.domain.base import CamelModel

WarningType = Literal[
    "orphan-value",
    "unexplained-behaviour",
    "floating-outcome",
    "outcome-level-conflict",
    "value-level-conflict",
]
WarningSeverity = Literal["error", "warning", "info"]
WarningStatus = Literal["active", "snoozed", "dismissed"]

WARNING_TYPES: tuple[WarningType, ...] = get_args(WarningType)
WARNING_SEVERITIES: tuple[WarningSeverity, ...] = get_args(WarningSeverity)


class ValidationWarning(CamelModel):
    """A structural anomaly found in the network.

    Attributes:
        id: Stable identifier derived from ``type`` and ``node_id``
        type: Anomaly class
        node_id: The node the warning is attached to
        message: Human readable description
        severity: Fixed per warning type
        related_node_ids: Other nodes involved in the anomaly
        suggestion: What the user could do about it
    """

    model_config = ConfigDict(frozen=True)

    id: str
    type: WarningType
    node_id: str
    message: str
    severity: WarningSeverity
    related_node_ids: list[str] = []
    suggestion: str | None = None


class WarningState(CamelModel):
    """Snooze and dismiss flags, owned and persisted by the caller.

    Both maps are keyed by warning id. ``snoozed`` values are ISO 8601
    expiry timestamps.
    """

    model_config = ConfigDict(frozen=True)

    snoozed: dict[str, str] = {}
    dismissed: dict[str, bool] = {}


class WarningCounts(CamelModel):
    total: int = 0
    by_type: dict[WarningType, int] = {warning_type: 0 for warning_type in WARNING_TYPES}
    by_severity: dict[WarningSeverity, int] = {severity: 0 for severity in WARNING_SEVERITIES}
    active: int = 0
    snoozed: int = 0
    dismissed: int = 0


class ValidationResult(CamelModel):
    """All warnings for one network plus lookup indexes and counts.

    ``counts.active``/``snoozed``/``dismissed`` are a snapshot taken against
    the warning state passed to ``validate_network``.
    """

    warnings: list[ValidationWarning] = []
    by_type: dict[WarningType, list[ValidationWarning]] = {
        warning_type: [] for warning_type in WARNING_TYPES
    }
    by_node_id: dict[str, list[ValidationWarning]] = {}
    counts: WarningCounts = Field(default_factory=WarningCounts)


class OutcomeConflict(CamelModel):
    behaviour_id: str
    behaviour_label: str
    outcome_id: str
    outcome_label: str
    valence: Literal["negative"] = "negative"


class NodeRef(CamelModel):
    id: str
    label: str


class ValueConflict(CamelModel):
    behaviour_id: str
    behaviour_label: str
    positive_values: list[NodeRef]
    negative_values: list[NodeRef]


class ConflictDetails(CamelModel):
    """Outcome- and value-level conflicts for a single behaviour."""

    outcome_conflicts: list[OutcomeConflict] = []
    value_conflict: ValueConflict | None = None
