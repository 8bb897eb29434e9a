"""
Command-line interface for xcresult-summary.

This module provides a subcommand-based CLI using Typer.
"""

import shutil
import sys
from pathlib import Path
from typing import Optional

import typer

from xcresult_summary.core.config import Config
from xcresult_summary.core.errors import XcresultSummaryError
from xcresult_summary.core.logging import setup_logger
from xcresult_summary.core.pipeline import SummaryPipeline, report_failure
from xcresult_summary.reporting.fetcher import (
    BUILD_RESULTS,
    SUMMARY,
    TEST_RESULTS,
    TESTS,
    CapturedOutputTool,
    XcresultFetcher,
)
from xcresult_summary.reporting.generator import (
    STRUCTURED_FORMATS,
    generate_markdown_summary,
    generate_structured_summary,
)

app = typer.Typer(
    name="xcresult_summary",
    help="Summarize Xcode build and test results (.xcresult) for CI",
    add_completion=False,
)


def get_config(verbosity: Optional[int] = None, **kwargs) -> Config:
    """Create and configure Config object."""
    init_kwargs = {}
    for key, value in kwargs.items():
        if key in Config.__dataclass_fields__ and value is not None:
            init_kwargs[key] = value
    if verbosity is not None:
        init_kwargs["verbosity"] = verbosity
    return Config(**init_kwargs)


@app.command()
def run(
    xcresult_path: Optional[Path] = typer.Option(
        None, "--xcresult-path", help="Path to the .xcresult bundle (default: INPUT_XCRESULT-PATH)"
    ),
    workspace: Optional[str] = typer.Option(
        None, help="Workspace root stripped from source paths (default: GITHUB_WORKSPACE)"
    ),
    output_file: Optional[Path] = typer.Option(None, help="Outputs file (default: GITHUB_OUTPUT)"),
    summary_file: Optional[Path] = typer.Option(None, help="Job summary file (default: GITHUB_STEP_SUMMARY)"),
    xcrun: Optional[str] = typer.Option(None, help="xcrun executable"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="TOML config file"),
    verbosity: Optional[int] = typer.Option(None, "--verbosity", "-v", help="Verbosity level (0-3)"),
):
    """Summarize an .xcresult bundle and publish outputs and the job summary."""
    try:
        config = get_config(
            verbosity=verbosity, xcresult_path=xcresult_path, workspace=workspace,
            output_file=output_file, summary_file=summary_file, xcrun=xcrun,
            config_file=config_file,
        )
    except (XcresultSummaryError, ValueError) as e:
        report_failure(e, output_file=output_file, summary_file=summary_file)
        sys.exit(1)

    setup_logger(verbosity=config.verbosity)
    success = SummaryPipeline(config).run()
    sys.exit(0 if success else 1)


@app.command()
def render(
    build: Path = typer.Option(..., "--build", help="Captured `build-results summary` JSON"),
    tests_summary: Optional[Path] = typer.Option(None, help="Captured `test-results summary` JSON"),
    tests: Optional[Path] = typer.Option(None, help="Captured `test-results tests` JSON"),
    workspace: Optional[str] = typer.Option(None, help="Workspace root stripped from source paths"),
    output_format: str = typer.Option("markdown", "--format", help="Output format: markdown, json or yaml"),
    verbosity: int = typer.Option(0, "--verbosity", "-v", help="Verbosity level (0-3)"),
):
    """Render a summary from previously captured xcresulttool JSON."""
    setup_logger(verbosity=verbosity)
    if output_format != "markdown" and output_format not in STRUCTURED_FORMATS:
        raise typer.BadParameter(f"unknown format: {output_format}", param_hint="--format")
    files = {(BUILD_RESULTS, SUMMARY): build}
    if tests_summary is not None:
        files[(TEST_RESULTS, SUMMARY)] = tests_summary
    if tests is not None:
        files[(TEST_RESULTS, TESTS)] = tests

    try:
        summary = XcresultFetcher(CapturedOutputTool(files)).fetch(build)
    except XcresultSummaryError as e:
        typer.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if output_format in STRUCTURED_FORMATS:
        typer.echo(generate_structured_summary(summary, output_format), nl=False)
    else:
        typer.echo(generate_markdown_summary(summary.build_result, summary.test_result, workspace), nl=False)


@app.command()
def doctor(
    xcrun: str = typer.Option("xcrun", help="xcrun executable"),
):
    """Run preflight checks (verify xcrun is available)."""
    typer.echo("Running preflight checks...")
    if shutil.which(xcrun):
        typer.echo(f"✓ {xcrun} found (xcresulttool driver)")
        typer.echo("\n✓ All preflight checks passed")
        sys.exit(0)
    typer.echo(f"✗ {xcrun} not found (xcresulttool driver)", err=True)
    typer.echo("\n✗ Some preflight checks failed", err=True)
    sys.exit(1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
