"""CLI for analysing a network JSON file: summary report, validation warnings or raw metrics"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from menet.analysis.metrics import analyze_network
from menet.config import settings
from menet.domain.network import Network
from menet.errors import NetworkImportError, StoreError
from menet.example_network import create_example_network
from menet.export.network_json import parse_network_json
from menet.export.report import build_summary_report, format_summary_report_as_markdown
from menet.validation.status import get_warning_type_label
from menet.validation.validate import validate_network
from menet.warning_store.local import LocalWarningStateStore


def load_network(infile: str | None, example: bool) -> Network:
    if example:
        return create_example_network()
    if not infile:
        raise NetworkImportError("Either --infile or --example is required")
    return parse_network_json(Path(infile).read_text())


def report(network: Network) -> str:
    analysis = analyze_network(
        network,
        top_leverage_count=settings.top_leverage_count,
        fragility_threshold=settings.fragility_threshold,
        conflict_threshold=settings.conflict_threshold,
    )
    return format_summary_report_as_markdown(build_summary_report(network, analysis))


def validate(network: Network, warning_state_path: str | None) -> str:
    state = LocalWarningStateStore(filepath=warning_state_path).get_state()
    result = validate_network(network, state)
    lines = [
        f"{result.counts.total} warnings ({result.counts.active} active, "
        f"{result.counts.snoozed} snoozed, {result.counts.dismissed} dismissed)"
    ]
    for warning in result.warnings:
        lines.append(
            f"[{warning.severity}] {get_warning_type_label(warning.type)}: {warning.message}"
        )
    return "\n".join(lines)


def analyse(network: Network) -> str:
    analysis = analyze_network(
        network,
        top_leverage_count=settings.top_leverage_count,
        fragility_threshold=settings.fragility_threshold,
        conflict_threshold=settings.conflict_threshold,
    )
    return analysis.model_dump_json(by_alias=True, indent=2)


def main(command: str, infile: str | None, example: bool, warning_state: str | None) -> str:
    network = load_network(infile, example)
    logger.info(f"Analysing network with {network.node_count()} nodes")
    if command == "report":
        return report(network)
    if command == "validate":
        return validate(network, warning_state)
    return analyse(network)


if __name__ == "__main__":
    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

    parser = argparse.ArgumentParser()
    parser.add_argument("command", choices=["report", "validate", "analyse"])
    parser.add_argument("--infile", type=str, required=False, help="Network JSON file")
    parser.add_argument(
        "--example", action="store_true", help="Use the built-in example network"
    )
    parser.add_argument(
        "--warning-state",
        type=str,
        required=False,
        help="Warning state file with snoozes and dismissals",
        default=settings.warning_state_path,
    )

    args = parser.parse_args()

    try:
        output = main(
            command=args.command,
            infile=args.infile,
            example=args.example,
            warning_state=args.warning_state,
        )
    except (NetworkImportError, StoreError, OSError) as e:
        logger.error(str(e))
        sys.exit(1)
    print(output)
