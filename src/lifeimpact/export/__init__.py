"""Output formatters for impact reports."""

from lifeimpact.export.formatters import (
    ImpactReport,
    JSONFormatter,
    MarkdownFormatter,
    TableFormatter,
    format_report,
)

__all__ = ["ImpactReport", "TableFormatter", "JSONFormatter", "MarkdownFormatter", "format_report"]
