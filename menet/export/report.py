"""Summary report built from the analysis rankings."""

from datetime import datetime, timezone

from menet.analysis.metrics import analyze_network
from menet.analysis.schemas import (
    ConflictInsight,
    FragilityInsight,
    LeverageInsight,
    NetworkAnalysis,
)
from menet.domain.base import CamelModel
from menet.domain.network import NETWORK_VERSION, Network, NetworkStats


class LeverageEntry(CamelModel):
    label: str
    score: float
    supported_values: list[str]
    via_outcomes: list[str]


class OrphanEntry(CamelModel):
    label: str


class ConflictEntry(CamelModel):
    label: str
    conflict_index: float
    positive_values: list[str]
    negative_values: list[str]


class SummaryReportData(CamelModel):
    generated_at: str
    version: str
    stats: NetworkStats
    top_leverage_behaviours: list[LeverageEntry]
    orphan_values: list[OrphanEntry]
    conflict_behaviours: list[ConflictEntry]
    suggestions: list[str]


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count > 1 else ''}"


def _suggestions(
    network: Network,
    top_leverage: list[LeverageInsight],
    orphan_values: list[FragilityInsight],
    conflict_behaviours: list[ConflictInsight],
) -> list[str]:
    suggestions = []

    if orphan_values:
        suggestions.append(
            f"You have {_plural(len(orphan_values), 'orphan value')} with no supporting "
            "behaviours. Consider using Why Ladder to connect behaviours to these values."
        )

    if conflict_behaviours:
        suggestions.append(
            f"You have {_plural(len(conflict_behaviours), 'behaviour')} with conflicting "
            "effects. Review these trade-offs and consider if alternatives exist."
        )

    bo_links, ov_links = network.split_links()
    explained = {link.source_id for link in bo_links}
    unexplained = [b for b in network.behaviours if b.id not in explained]
    if unexplained:
        suggestions.append(
            f"You have {_plural(len(unexplained), 'behaviour')} without outcomes. "
            "Use Why Ladder to explore why you do these."
        )

    connected = {link.source_id for link in ov_links}
    floating = [o for o in network.outcomes if o.id not in connected]
    if floating:
        suggestions.append(
            f"You have {_plural(len(floating), 'outcome')} not connected to any value. "
            'Ask "Why does this matter?" to connect them.'
        )

    if top_leverage and top_leverage[0].metrics.leverage_score > 0:
        suggestions.append(
            f'Your highest-leverage behaviour is "{top_leverage[0].behaviour.label}". '
            "Consider prioritising this action."
        )

    if not suggestions:
        suggestions.append(
            "Your network looks complete! Continue refining link attributes for more "
            "accurate insights."
        )

    return suggestions


def generate_summary_report_data(
    network: Network,
    top_leverage: list[LeverageInsight],
    orphan_values: list[FragilityInsight],
    conflict_behaviours: list[ConflictInsight],
    now: datetime | None = None,
) -> SummaryReportData:
    """Build report data from the analysis ranking views.

    Args:
        network: The analysed network
        top_leverage: ``NetworkAnalysis.top_leverage``
        orphan_values: Orphan entries of ``NetworkAnalysis.fragile_values``
        conflict_behaviours: ``NetworkAnalysis.conflict_behaviours``
        now: Report timestamp, defaults to the current UTC time

    Returns:
        SummaryReportData with scores rounded to two decimals
    """
    return SummaryReportData(
        generated_at=(now or datetime.now(timezone.utc)).isoformat(),
        version=NETWORK_VERSION,
        stats=network.stats(),
        top_leverage_behaviours=[
            LeverageEntry(
                label=item.behaviour.label,
                score=round(item.metrics.leverage_score, 2),
                supported_values=[v.label for v in item.supported_values],
                via_outcomes=list(item.via_outcomes),
            )
            for item in top_leverage
        ],
        orphan_values=[OrphanEntry(label=item.value.label) for item in orphan_values],
        conflict_behaviours=[
            ConflictEntry(
                label=item.behaviour.label,
                conflict_index=round(item.metrics.conflict_index, 2),
                positive_values=[v.label for v in item.positive_values],
                negative_values=[v.label for v in item.negative_values],
            )
            for item in conflict_behaviours
        ],
        suggestions=_suggestions(network, top_leverage, orphan_values, conflict_behaviours),
    )


def build_summary_report(
    network: Network, analysis: NetworkAnalysis | None = None, now: datetime | None = None
) -> SummaryReportData:
    """Build the summary report, analysing the network unless an analysis is given."""
    if analysis is None:
        analysis = analyze_network(network)
    orphans = [item for item in analysis.fragile_values if item.is_orphan]
    return generate_summary_report_data(
        network, analysis.top_leverage, orphans, analysis.conflict_behaviours, now
    )


def format_summary_report_as_markdown(data: SummaryReportData) -> str:
    generated = datetime.fromisoformat(data.generated_at).strftime("%Y-%m-%d %H:%M:%S %Z")
    lines = [
        "# M-E Net Summary Report",
        "",
        f"> Generated: {generated.strip()}",
        f"> Version: {data.version}",
        "",
        "## Network Statistics",
        "",
        f"- **Behaviours:** {data.stats.behaviours}",
        f"- **Outcomes:** {data.stats.outcomes}",
        f"- **Values:** {data.stats.values}",
        f"- **Links:** {data.stats.links}",
        "",
        "## Top Leverage Behaviours",
        "",
    ]

    if not data.top_leverage_behaviours:
        lines += ["_No behaviours with positive leverage found._", ""]
    for item in data.top_leverage_behaviours:
        lines += [
            f"### {item.label}",
            "",
            f"- **Leverage Score:** {item.score}",
            f"- **Supports Values:** {', '.join(item.supported_values) or 'None'}",
            f"- **Via Outcomes:** {', '.join(item.via_outcomes) or 'None'}",
            "",
        ]

    lines += ["## Orphan Values", ""]
    if not data.orphan_values:
        lines.append("_All values are connected to behaviours. Great job!_")
    else:
        lines += ["These values have no supporting behaviours:", ""]
        lines += [f"- {item.label}" for item in data.orphan_values]
    lines.append("")

    lines += ["## Conflict Behaviours", ""]
    if not data.conflict_behaviours:
        lines += ["_No conflicting behaviours detected._", ""]
    for item in data.conflict_behaviours:
        lines += [
            f"### {item.label}",
            "",
            f"- **Conflict Index:** {item.conflict_index}",
            f"- **Helps:** {', '.join(item.positive_values)}",
            f"- **Hurts:** {', '.join(item.negative_values)}",
            "",
        ]

    lines += ["## Suggested Next Steps", ""]
    lines += [f"- {suggestion}" for suggestion in data.suggestions]
    lines += ["", "---", "_Generated by M-E Net_"]

    return "\n".join(lines)


def generate_report_filename(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"me-net-report-{now.strftime('%Y-%m-%d')}.md"
