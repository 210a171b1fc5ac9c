"""Validation engine: run every detector and index the warnings."""

from datetime import datetime, timezone

from loguru import logger

from menet.domain.network import Network
from menet.domain.warnings import (
    WARNING_SEVERITIES,
    WARNING_TYPES,
    ConflictDetails,
    OutcomeConflict,
    ValidationResult,
    ValidationWarning,
    ValueConflict,
    WarningCounts,
    WarningState,
    WarningType,
)
from menet.validation.detectors import (
    compute_paths_to_values,
    detect_floating_outcomes,
    detect_orphan_values,
    detect_outcome_level_conflicts,
    detect_unexplained_behaviours,
    detect_value_level_conflicts,
    net_value_sets,
    value_refs,
)
from menet.validation.status import get_warning_status, is_warning_active


def validate_network(
    network: Network,
    warning_state: WarningState | None = None,
    now: datetime | None = None,
) -> ValidationResult:
    """Run all detectors and build the warning indexes and counts.

    Args:
        network: Network snapshot
        warning_state: Caller-owned snooze/dismiss state; empty if not given
        now: Point in time for snooze expiry, defaults to the current UTC time

    Returns:
        ValidationResult with warnings in detector order
    """
    state = warning_state or WarningState()
    now = now or datetime.now(timezone.utc)

    warnings = [
        *detect_orphan_values(network),
        *detect_unexplained_behaviours(network),
        *detect_floating_outcomes(network),
        *detect_outcome_level_conflicts(network),
        *detect_value_level_conflicts(network),
    ]

    by_type: dict[WarningType, list[ValidationWarning]] = {
        warning_type: [] for warning_type in WARNING_TYPES
    }
    by_node_id: dict[str, list[ValidationWarning]] = {}
    counts = WarningCounts(
        by_type={warning_type: 0 for warning_type in WARNING_TYPES},
        by_severity={severity: 0 for severity in WARNING_SEVERITIES},
    )

    for warning in warnings:
        by_type[warning.type].append(warning)
        by_node_id.setdefault(warning.node_id, []).append(warning)

        counts.total += 1
        counts.by_type[warning.type] += 1
        counts.by_severity[warning.severity] += 1

        status = get_warning_status(warning.id, state, now)
        if status == "dismissed":
            counts.dismissed += 1
        elif status == "snoozed":
            counts.snoozed += 1
        else:
            counts.active += 1

    logger.debug(f"Validation found {counts.total} warnings ({counts.active} active)")
    return ValidationResult(
        warnings=warnings, by_type=by_type, by_node_id=by_node_id, counts=counts
    )


def get_active_warnings(
    result: ValidationResult, state: WarningState, now: datetime | None = None
) -> list[ValidationWarning]:
    return [warning for warning in result.warnings if is_warning_active(warning, state, now)]


def get_warnings_for_node(result: ValidationResult, node_id: str) -> list[ValidationWarning]:
    return result.by_node_id.get(node_id, [])


def get_conflict_details(network: Network, behaviour_id: str) -> ConflictDetails:
    """Outcome-level and value-level conflicts for one behaviour.

    Returns empty details for an unknown behaviour.
    """
    behaviour = network.behaviours_by_id().get(behaviour_id)
    if behaviour is None:
        return ConflictDetails()

    outcomes = network.outcomes_by_id()
    outcome_conflicts = [
        OutcomeConflict(
            behaviour_id=behaviour_id,
            behaviour_label=behaviour.label,
            outcome_id=link.target_id,
            outcome_label=outcomes[link.target_id].label,
        )
        for link in network.behaviour_outcome_links()
        if link.source_id == behaviour_id
        and link.valence == "negative"
        and link.target_id in outcomes
    ]

    paths = [p for p in compute_paths_to_values(network) if p.behaviour_id == behaviour_id]
    values = network.values_by_id()
    positive_ids, negative_ids = net_value_sets(paths)
    positive_values = value_refs(positive_ids, values)
    negative_values = value_refs(negative_ids, values)

    value_conflict = None
    if positive_values and negative_values:
        value_conflict = ValueConflict(
            behaviour_id=behaviour_id,
            behaviour_label=behaviour.label,
            positive_values=positive_values,
            negative_values=negative_values,
        )

    return ConflictDetails(outcome_conflicts=outcome_conflicts, value_conflict=value_conflict)
