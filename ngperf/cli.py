"""CLI entrypoints for ngperf commands."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from .config import REPORT_FORMATS, ConfigError
from .logging import configure_logging
from .models import ComponentAnalysis, ProjectSummary
from .orchestrator import Orchestrator
from .reports import build_json_report, render_report, save_json_report, save_report
from .reports.sink import ReportWriteError

_TOP_RECOMMENDATIONS = 3


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_output_options(parser: argparse.ArgumentParser, *, with_format: bool = True) -> None:
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file path.",
    )
    if with_format:
        parser.add_argument(
            "-f",
            "--format",
            choices=REPORT_FORMATS,
            default=None,
            help="Report format (default: markdown).",
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ngperf",
        description="Find performance anti-patterns in Angular components.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    project_parser = subparsers.add_parser(
        "project",
        help="Analyze every component in a project.",
    )
    _add_verbose_option(project_parser, suppress_default=True)
    _add_output_options(project_parser)
    project_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )

    component_parser = subparsers.add_parser(
        "component",
        help="Analyze a single component file.",
    )
    _add_verbose_option(component_parser, suppress_default=True)
    _add_output_options(component_parser)
    component_parser.add_argument("path", help="Path to a *.component.ts file.")

    report_parser = subparsers.add_parser(
        "report",
        help="Write a detailed Markdown report for a project.",
    )
    _add_verbose_option(report_parser, suppress_default=True)
    _add_output_options(report_parser, with_format=False)
    report_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing analyses.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    subparsers.add_parser("help", help="Show this help.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ngperf commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "help":
        parser.print_help()
        return

    configure_logging(verbose=bool(args.verbose))
    orchestrator = Orchestrator()
    started = time.perf_counter()

    try:
        if args.command == "project":
            _run_project(orchestrator, args)
        elif args.command == "component":
            _run_component(orchestrator, args)
        elif args.command == "report":
            _run_report(orchestrator, args)
        elif args.command == "serve":
            from .service import run_service

            run_service(host=args.host, port=args.port)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except (ConfigError, ReportWriteError, ValueError) as exc:
        parser.exit(1, f"ngperf {args.command} failed: {exc}\n")
    except Exception as exc:  # pragma: no cover - defensive guard
        parser.exit(1, f"ngperf {args.command} failed: {exc}\nRun with --verbose for more details.\n")

    duration_ms = int((time.perf_counter() - started) * 1000)
    print(f"\nCompleted in {duration_ms}ms")


def _run_project(orchestrator: Orchestrator, args: argparse.Namespace) -> None:
    outcome = orchestrator.run_project(args.path, output=args.output, report_format=args.format)
    if outcome.path is None:
        print(outcome.content)
    else:
        print(f"Report saved to: {_relativize(outcome.path)}")
    _print_summary(outcome.result.summary)


def _run_component(orchestrator: Orchestrator, args: argparse.Namespace) -> None:
    analysis = orchestrator.analyze_component(args.path)
    _print_component(analysis)
    if not args.output:
        return
    if args.format == "json":
        target = save_json_report(build_json_report([analysis]), args.output)
    else:
        target = save_report(render_report([analysis]), args.output)
    print(f"Report saved to: {_relativize(target)}")


def _run_report(orchestrator: Orchestrator, args: argparse.Namespace) -> None:
    outcome = orchestrator.run_report(args.path, output=args.output)
    if outcome.path is not None:
        print(f"Report saved to: {_relativize(outcome.path)}")
    _print_summary(outcome.result.summary)


def _print_component(analysis: ComponentAnalysis) -> None:
    print("Component Analysis Results:")
    print(f"   Name: {analysis.component_name or '(unnamed)'}")
    print(f"   Performance Score: {analysis.performance_score}/100")
    print(f"   Issues Found: {analysis.issue_count}")
    if analysis.recommendations:
        print("\nTop Recommendations:")
        for index, rec in enumerate(analysis.recommendations[:_TOP_RECOMMENDATIONS], start=1):
            print(f"   {index}. {rec.title} ({rec.priority} priority)")


def _print_summary(summary: ProjectSummary) -> None:
    print("\nAnalysis Summary:")
    print(f"   Components: {summary.total_components}")
    print(f"   Average Score: {summary.average_performance_score}/100")
    print(f"   Total Issues: {summary.total_issues}")
    if summary.analysis_errors:
        print(f"   Analysis Errors: {summary.analysis_errors}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
