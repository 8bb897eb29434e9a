"""
Main pipeline orchestration for xcresult-summary.

Reads the bundle path, fetches and renders results, and publishes outputs and
the job summary. Any failure is reported once, as a failed run plus an error
report, and never escapes ``run()``.
"""

import os
import time
from pathlib import Path
from typing import Dict, Optional

from xcresult_summary.core.actions import ActionsHost, get_input
from xcresult_summary.core.config import Config
from xcresult_summary.core.errors import BundleNotFoundError
from xcresult_summary.core.logging import get_logger
from xcresult_summary.reporting.fetcher import XcresultFetcher, XcresultTool
from xcresult_summary.reporting.generator import (
    generate_error_summary,
    generate_markdown_summary,
)
from xcresult_summary.reporting.models import XcresultSummaryResult

XCRESULT_PATH_INPUT = "xcresult-path"


def summary_outputs(summary: XcresultSummaryResult) -> Dict[str, object]:
    """Outputs published for a run; test counts are 0 when no tests ran."""
    build_result, test_result = summary.build_result, summary.test_result
    return {
        "total-tests": test_result.total_test_count if test_result else 0,
        "passed-tests": test_result.passed_tests if test_result else 0,
        "failed-tests": test_result.failed_tests if test_result else 0,
        "build-status": build_result.status,
        "error-count": build_result.error_count,
        "warning-count": build_result.warning_count,
    }


class SummaryPipeline:
    """Pipeline that turns one .xcresult bundle into outputs and a job summary."""

    def __init__(self, config: Config, host: Optional[ActionsHost] = None, tool=None):
        """
        Initialize the pipeline.

        Args:
            config: Configuration object
            host: Output/summary sink (defaults to the files named in config)
            tool: xcresulttool wrapper (defaults to running ``xcrun``)
        """
        self.config = config
        self.host = host if host is not None else ActionsHost(config.output_file, config.summary_file)
        self.tool = tool if tool is not None else XcresultTool(config.xcrun, config.verbosity)
        self.logger = get_logger(__name__)

    def resolve_path(self) -> Path:
        if self.config.xcresult_path is not None:
            return Path(self.config.xcresult_path)
        return Path(get_input(XCRESULT_PATH_INPUT, required=True))

    def run(self) -> bool:
        """
        Run the pipeline.

        Returns:
            True if the summary was published, False if the run failed
        """
        start_time = time.time()
        try:
            path = self.resolve_path()
            if not path.exists():
                raise BundleNotFoundError(f"xcresult file not found at path: {path}")

            if self.config.verbosity >= 1:
                self.logger.info(f"Reading results from {path}")
            summary = XcresultFetcher(self.tool).fetch(path)
            markdown = generate_markdown_summary(
                summary.build_result, summary.test_result, self.config.workspace
            )

            for name, value in summary_outputs(summary).items():
                self.host.set_output(name, value)
            self.host.set_output("summary", markdown)
            self.host.write_summary(markdown)
        except Exception as e:
            message = str(e) or e.__class__.__name__
            self.logger.debug("Run failed", exc_info=self.config.verbosity >= 3)
            self.host.set_failed(message)
            self._publish_error(message)
            return False

        if self.config.verbosity >= 1:
            self.logger.info(f"Summary published in {time.time() - start_time:.1f} seconds")
        return True

    def _publish_error(self, message: str) -> None:
        try:
            self.host.write_summary(generate_error_summary(message))
        except OSError as e:
            self.logger.error(f"Could not write error summary: {e}")


def _host_from_env() -> ActionsHost:
    output_file = os.environ.get("GITHUB_OUTPUT")
    summary_file = os.environ.get("GITHUB_STEP_SUMMARY")
    return ActionsHost(
        Path(output_file) if output_file else None,
        Path(summary_file) if summary_file else None,
    )


def report_failure(
    error: Exception,
    output_file: Optional[Path] = None,
    summary_file: Optional[Path] = None,
) -> None:
    """Report a failure that happened before a Config could be built.

    Files not given explicitly are taken from the Actions environment.
    """
    message = str(error) or error.__class__.__name__
    host = _host_from_env()
    host.output_file = output_file or host.output_file
    host.summary_file = summary_file or host.summary_file
    host.set_failed(message)
    try:
        host.write_summary(generate_error_summary(message))
    except OSError as e:
        get_logger(__name__).error(f"Could not write error summary: {e}")


def run(config: Optional[Config] = None) -> bool:
    """Run the summary step with configuration from the environment."""
    try:
        config = config if config is not None else Config()
    except Exception as e:
        report_failure(e)
        return False
    return SummaryPipeline(config).run()
