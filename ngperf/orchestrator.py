"""Pipeline orchestration for the component/project/report flows."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .analyzer import PerformanceAnalyzer
from .analyzers import discover_rules
from .config import NgPerfConfig, load_config
from .logging import get_logger
from .models import ComponentAnalysis, ProjectSummary
from .project_scanner import ComponentScanner
from .reports import build_json_report, render_report, save_json_report, save_report
from .summary import generate_project_summary

DEFAULT_MARKDOWN_OUTPUT = Path("performance-report.md")
DEFAULT_JSON_OUTPUT = Path("performance-report.json")


@dataclass
class ProjectResult:
    """Analyses of every successfully processed file plus their summary."""

    analyses: List[ComponentAnalysis]
    summary: ProjectSummary
    duration_ms: int = 0
    cancelled: bool = False


@dataclass
class ReportOutcome:
    """Result of a run that renders (and possibly writes) a report."""

    result: ProjectResult
    content: str
    path: Optional[Path]


class Orchestrator:
    """Coordinates discovery, analysis, aggregation and report output."""

    def __init__(
        self,
        analyzer: PerformanceAnalyzer | None = None,
        scanner: ComponentScanner | None = None,
    ) -> None:
        self._analyzer_override = analyzer
        self._scanner_override = scanner
        self.logger = get_logger("orchestrator")

    def analyze_component(self, path: str) -> ComponentAnalysis:
        """Analyze a single file; unreadable input is fatal here."""
        file_path = Path(path).expanduser().resolve()
        if not file_path.is_file():
            raise FileNotFoundError(f"Component file not found: {path}")
        config = load_config(file_path)
        self.logger.info("Analyzing component: %s", file_path)
        return self._analyzer_for(config).analyze_file(file_path)

    def analyze_project(self, path: str, *, cancel: threading.Event | None = None) -> ProjectResult:
        """Analyze every component under ``path``; per-file failures are logged and counted."""
        root = Path(path).expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Project path not found: {path}")
        config = load_config(root)
        analyzer = self._analyzer_for(config)
        files = self._scanner_for(config).scan(root)
        self.logger.info("Found %d component files to analyze...", len(files))

        started = time.perf_counter()
        analyses: List[ComponentAnalysis] = []
        success_count = 0
        error_count = 0
        cancelled = False
        for index, file_path in enumerate(files, start=1):
            if cancel is not None and cancel.is_set():
                self.logger.warning("Analysis cancelled after %d of %d files", index - 1, len(files))
                cancelled = True
                break
            self.logger.info("Analyzing %d/%d: %s", index, len(files), file_path)
            try:
                analysis = analyzer.analyze_file(file_path)
            except Exception as exc:
                error_count += 1
                self.logger.error("Error analyzing %s: %s", file_path, exc)
                self.logger.debug("Analysis failure details", exc_info=True)
                continue
            analyses.append(analysis)
            success_count += 1

        summary = generate_project_summary(analyses, success_count, error_count)
        duration_ms = int((time.perf_counter() - started) * 1000)
        self.logger.info(
            "Results: %d components, %d issues found in %dms",
            summary.total_components,
            summary.total_issues,
            duration_ms,
        )
        return ProjectResult(analyses=analyses, summary=summary, duration_ms=duration_ms, cancelled=cancelled)

    def run_project(
        self,
        path: str,
        *,
        output: str | None = None,
        report_format: str | None = None,
    ) -> ReportOutcome:
        """Analyze a project and render it; markdown is only written when an output is set."""
        config = load_config(Path(path).expanduser())
        fmt = (report_format or config.report.format or "markdown").lower()
        destination = Path(output) if output else config.report.output
        result = self.analyze_project(path)

        if fmt == "json":
            payload = build_json_report(result.analyses, result.summary)
            target = save_json_report(payload, destination or DEFAULT_JSON_OUTPUT)
            return ReportOutcome(result=result, content="", path=target)

        content = render_report(result.analyses, result.summary)
        target = save_report(content, destination) if destination is not None else None
        return ReportOutcome(result=result, content=content, path=target)

    def run_report(self, path: str, *, output: str | None = None) -> ReportOutcome:
        config = load_config(Path(path).expanduser())
        destination = Path(output) if output else (config.report.output or DEFAULT_MARKDOWN_OUTPUT)
        result = self.analyze_project(path)
        content = render_report(result.analyses, result.summary)
        target = save_report(content, destination)
        return ReportOutcome(result=result, content=content, path=target)

    def _analyzer_for(self, config: NgPerfConfig) -> PerformanceAnalyzer:
        if self._analyzer_override is not None:
            return self._analyzer_override
        return PerformanceAnalyzer(rules=discover_rules(config.rules.enabled), logger=get_logger("analyzer"))

    def _scanner_for(self, config: NgPerfConfig) -> ComponentScanner:
        if self._scanner_override is not None:
            return self._scanner_override
        return ComponentScanner(
            exclude_dirs=config.discovery.exclude_dirs,
            suffix=config.discovery.suffix,
        )


__all__ = [
    "DEFAULT_JSON_OUTPUT",
    "DEFAULT_MARKDOWN_OUTPUT",
    "Orchestrator",
    "ProjectResult",
    "ReportOutcome",
]
