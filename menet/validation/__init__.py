"""Validation engine for structural issues in the network."""

from menet.validation.detectors import (
    compute_paths_to_values,
    detect_floating_outcomes,
    detect_orphan_values,
    detect_outcome_level_conflicts,
    detect_unexplained_behaviours,
    detect_value_level_conflicts,
)
from menet.validation.status import (
    generate_warning_id,
    get_severity,
    get_warning_status,
    get_warning_type_label,
    is_warning_active,
)
from menet.validation.validate import (
    get_active_warnings,
    get_conflict_details,
    get_warnings_for_node,
    validate_network,
)

__all__ = [
    "compute_paths_to_values",
    "detect_floating_outcomes",
    "detect_orphan_values",
    "detect_outcome_level_conflicts",
    "detect_unexplained_behaviours",
    "detect_value_level_conflicts",
    "generate_warning_id",
    "get_active_warnings",
    "get_conflict_details",
    "get_severity",
    "get_warning_status",
    "get_warning_type_label",
    "is_warning_active",
    "validate_network",
]
