"""Network analysis: numeric mappings, path computation and metrics."""

from menet.analysis.mappings import (
    MAPPINGS,
    cost_to_number,
    importance_to_number,
    neglect_to_number,
    reliability_to_number,
    strength_to_number,
    valence_to_multiplier,
)
from menet.analysis.metrics import (
    CONFLICT_THRESHOLD,
    FRAGILITY_THRESHOLD,
    INFINITE_FRAGILITY,
    TOP_LEVERAGE_COUNT,
    analyze_network,
    compute_all_behaviour_metrics,
    compute_all_value_metrics,
    compute_conflict_index,
    compute_coverage,
    compute_fragility_score,
    compute_leverage_score,
    get_conflict_behaviours,
    get_fragile_values,
    get_top_leverage_behaviours,
)
from menet.analysis.paths import (
    compute_all_paths,
    get_behaviours_supporting_value,
    get_outcomes_for_behaviour,
    get_values_reached_by_behaviour,
    group_paths_by_behaviour,
    group_paths_by_value,
)

__all__ = [
    "CONFLICT_THRESHOLD",
    "FRAGILITY_THRESHOLD",
    "INFINITE_FRAGILITY",
    "MAPPINGS",
    "TOP_LEVERAGE_COUNT",
    "analyze_network",
    "compute_all_behaviour_metrics",
    "compute_all_paths",
    "compute_all_value_metrics",
    "compute_conflict_index",
    "compute_coverage",
    "compute_fragility_score",
    "compute_leverage_score",
    "cost_to_number",
    "get_behaviours_supporting_value",
    "get_conflict_behaviours",
    "get_fragile_values",
    "get_outcomes_for_behaviour",
    "get_top_leverage_behaviours",
    "get_values_reached_by_behaviour",
    "group_paths_by_behaviour",
    "group_paths_by_value",
    "importance_to_number",
    "neglect_to_number",
    "reliability_to_number",
    "strength_to_number",
    "valence_to_multiplier",
]
