"""Report rendering and persistence."""

from .json_report import (
    analysis_from_dict,
    analysis_to_dict,
    build_json_report,
    summary_from_dict,
    summary_to_dict,
)
from .markdown import MarkdownReportRenderer, render_report, score_distribution
from .sink import ReportWriteError, save_json_report, save_report

__all__ = [
    "MarkdownReportRenderer",
    "ReportWriteError",
    "analysis_from_dict",
    "analysis_to_dict",
    "build_json_report",
    "render_report",
    "save_json_report",
    "save_report",
    "score_distribution",
    "summary_from_dict",
    "summary_to_dict",
]
