"""Network JSON import/export and summary reports."""

from menet.export.network_json import (
    generate_export_filename,
    parse_network_json,
    serialize_network,
)
from menet.export.report import (
    SummaryReportData,
    build_summary_report,
    format_summary_report_as_markdown,
    generate_report_filename,
    generate_summary_report_data,
)

__all__ = [
    "SummaryReportData",
    "build_summary_report",
    "format_summary_report_as_markdown",
    "generate_export_filename",
    "generate_report_filename",
    "generate_summary_report_data",
    "parse_network_json",
    "serialize_network",
]
