"""
Retrieval of build and test results from an .xcresult bundle.

Results come from ``xcrun xcresulttool get <subject> <form> --path <bundle>``.
Test results are only requested when the build did not fail.
"""

import json
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional, Union

from xcresult_summary.core.errors import (
    ResultFormatError,
    ResultParseError,
    ToolInvocationError,
)
from xcresult_summary.core.logging import get_logger
from xcresult_summary.reporting.extractor import extract_test_failures
from xcresult_summary.reporting.models import (
    BuildResult,
    DetailedTestResult,
    TestResult,
    XcresultSummaryResult,
)
from xcresult_summary.reporting.validators import (
    validate_build_result,
    validate_detailed_test_result,
    validate_test_result,
)
from xcresult_summary.utils.command_runner import run_command

BUILD_RESULTS = "build-results"
TEST_RESULTS = "test-results"
SUMMARY = "summary"
TESTS = "tests"


class XcresultTool:
    """Thin wrapper around the ``xcresulttool get`` subcommands."""

    def __init__(self, xcrun: str = "xcrun", verbosity: int = 0):
        self.xcrun = xcrun
        self.verbosity = verbosity

    def command(self, subject: str, form: str, path: Union[str, Path]) -> list:
        return [self.xcrun, "xcresulttool", "get", subject, form, "--path", str(path)]

    def get(self, subject: str, form: str, path: Union[str, Path]) -> str:
        """Run one subcommand and return everything it wrote to stdout."""
        cmd = self.command(subject, form, path)
        try:
            result = run_command(cmd, check=True, verbosity=self.verbosity)
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip()
            message = f"Command failed with exit code {e.returncode}: {' '.join(cmd)}"
            raise ToolInvocationError(f"{message}: {detail}" if detail else message) from e
        except OSError as e:
            raise ToolInvocationError(str(e)) from e
        return result.stdout or ""


class CapturedOutputTool:
    """Serves previously captured xcresulttool JSON from files instead of a bundle."""

    def __init__(self, files: Dict[tuple, Path]):
        self.files = files

    def get(self, subject: str, form: str, path: Union[str, Path]) -> str:
        try:
            source = self.files[(subject, form)]
        except KeyError:
            raise ToolInvocationError(f"No captured output for {subject} {form}") from None
        try:
            return Path(source).read_text(encoding="utf-8")
        except OSError as e:
            raise ToolInvocationError(str(e)) from e


def _parse_json(text: str, kind: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        raise ResultParseError(f"Failed to parse {kind} result JSON: {e}") from e


class XcresultFetcher:
    """Fetch, parse and validate the results stored in a bundle."""

    def __init__(self, tool=None):
        self.tool = tool if tool is not None else XcresultTool()
        self.logger = get_logger(__name__)

    def fetch(self, path: Union[str, Path]) -> XcresultSummaryResult:
        build_data = _parse_json(self.tool.get(BUILD_RESULTS, SUMMARY, path), "build")
        validation = validate_build_result(build_data)
        if not validation:
            self.logger.debug(f"Build result rejected: {validation.reason}")
            raise ResultFormatError("Invalid build result format")
        build_result = BuildResult.from_dict(build_data)

        if build_result.failed:
            self.logger.info("Build failed; skipping test results")
            return XcresultSummaryResult(build_result=build_result, test_result=None)

        summary_output = self.tool.get(TEST_RESULTS, SUMMARY, path)
        tests_output = self.tool.get(TEST_RESULTS, TESTS, path)
        summary_data = _parse_json(summary_output, "test")
        details_data = _parse_json(tests_output, "test")

        for validation in (validate_test_result(summary_data), validate_detailed_test_result(details_data)):
            if not validation:
                self.logger.debug(f"Test result rejected: {validation.reason}")
                raise ResultFormatError("Invalid test result format")

        test_result = TestResult.from_dict(summary_data)
        if summary_data.get("testFailures") is not None:
            # The detailed tree carries locations the summary lacks
            details = DetailedTestResult.from_dict(details_data)
            test_result.test_failures = extract_test_failures(details)

        return XcresultSummaryResult(build_result=build_result, test_result=test_result)


def get_xcresult_summary(path: Union[str, Path], tool=None) -> XcresultSummaryResult:
    """Fetch the build result and, unless the build failed, the test result for a bundle."""
    return XcresultFetcher(tool).fetch(path)
