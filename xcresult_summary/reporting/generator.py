"""
Summary generation for build and test results.

Markdown is what the job summary shows; JSON and YAML dumps of the parsed
results are available for debugging captured output.
"""

import json
from typing import List, Optional

import yaml

from xcresult_summary.reporting.models import (
    BuildIssue,
    BuildResult,
    TestFailure,
    TestResult,
    XcresultSummaryResult,
)

STRUCTURED_FORMATS = ("json", "yaml")

FILE_SCHEME = "file://"


def _minutes(seconds: float) -> str:
    return f"{seconds / 60:.2f}"


def _line_breaks(text: str) -> str:
    return text.replace("\n", "<br>")


def strip_workspace(path: str, workspace: Optional[str] = None) -> str:
    """Make ``path`` relative to the workspace root (or drop its leading slash)."""
    prefix = f"{workspace.rstrip('/')}/" if workspace else "/"
    if path.startswith(prefix):
        return path[len(prefix):]
    return path


def failure_location(failure: TestFailure, workspace: Optional[str] = None) -> str:
    location = failure.location
    if location is None or location.is_empty:
        return "Unknown location"
    relative_path = strip_workspace(location.file_path or "", workspace)
    if location.line_number:
        return f"{relative_path}:{location.line_number}"
    return relative_path


def error_location(error: BuildIssue, workspace: Optional[str] = None) -> str:
    if not error.source_url:
        return "Unknown location"
    url = error.source_url.split("#")[0]
    if url.startswith(FILE_SCHEME):
        url = url[len(FILE_SCHEME):]
    return strip_workspace(url, workspace) or "Unknown file"


def _test_sections(test_result: TestResult, workspace: Optional[str]) -> List[str]:
    lines = [
        "## Test Statistics\n\n",
        "| ✅ Passed | ❌ Failed | ⏭️ Skipped | 🔄 Expected | 📊 Total |\n",
        "|-----------|-----------|------------|-------------|----------|\n",
        f"| {test_result.passed_tests} | {test_result.failed_tests} | {test_result.skipped_tests}"
        f" | {test_result.expected_failures} | {test_result.total_test_count} |\n\n",
        "## Test Results\n\n",
        f"**Duration**: {_minutes(test_result.duration)} minutes\n\n",
    ]

    if test_result.test_failures:
        lines.append("### ❌ Test Failures\n\n")
        lines.append("| Location | Details |\n")
        lines.append("|----------|----------|\n")
        for failure in test_result.test_failures:
            details = _line_breaks(failure.failure_text or "No failure details")
            lines.append(f"| `{failure_location(failure, workspace)}` | {details} |\n")
        lines.append("\n")

    if test_result.devices_and_configurations:
        lines.append("### 📱 Device Results\n\n")
        lines.append("| Device | Passed | Failed | Skipped | Configuration |\n")
        lines.append("|---------|---------|---------|----------|---------------|\n")
        for config in test_result.devices_and_configurations:
            if config.device is None:
                continue
            device_name = config.device.device_name or "Unknown Device"
            platform = config.device.platform or "Unknown Platform"
            plan = config.test_plan_configuration
            config_name = (plan.configuration_name if plan else None) or "Default Configuration"
            lines.append(
                f"| {device_name}<br>({platform}) | ✅ {config.passed_tests} | ❌ {config.failed_tests}"
                f" | ⏭️ {config.skipped_tests} | {config_name} |\n"
            )
        lines.append("\n")

    return lines


def _build_sections(build_result: BuildResult, workspace: Optional[str]) -> List[str]:
    status = "❌ Failed" if build_result.failed else "✅ Passed"
    lines = [
        "## Build Results\n\n",
        f"**Status**: {status}\n",
        f"**Duration**: {_minutes(build_result.duration)} minutes\n\n",
    ]

    destination = build_result.destination
    if destination is not None:
        lines.append("### Environment\n")
        lines.append(f"- 📱 Device: {destination.device_name or 'Unknown'}\n")
        lines.append(f"- 🖥️ Platform: {destination.platform or 'Unknown'}\n")
        lines.append(f"- 📦 OS Version: {destination.os_version or 'Unknown'}\n\n")

    if build_result.error_count > 0 and build_result.errors:
        lines.append("### ❌ Build Errors\n\n")
        lines.append("| Location | Error |\n")
        lines.append("|----------|-------|\n")
        for error in build_result.errors:
            message = _line_breaks(error.message or "Unknown error")
            lines.append(f"| 📍 `{error_location(error, workspace)}`| {message} |\n")
        lines.append("\n")

    if build_result.warning_count > 0:
        lines.append("### ⚠️ Warnings\n\n")
        lines.append(f"Total Warnings: {build_result.warning_count}\n\n")

    if build_result.analyzer_warning_count > 0:
        lines.append("### 🔍 Analyzer Warnings\n\n")
        lines.append(f"Total Analyzer Warnings: {build_result.analyzer_warning_count}\n\n")

    return lines


def generate_markdown_summary(
    build_result: BuildResult,
    test_result: Optional[TestResult],
    workspace: Optional[str] = None,
) -> str:
    """
    Render the job summary for one bundle.

    Test sections appear only when the build did not fail and a test result
    exists. Every other section is left out when it would be empty.

    Args:
        build_result: Parsed build summary
        test_result: Parsed test summary, or None when no tests ran
        workspace: Root stripped from absolute source paths

    Returns:
        Markdown text
    """
    lines: List[str] = []
    if not build_result.failed and test_result is not None:
        lines.extend(_test_sections(test_result, workspace))
    lines.extend(_build_sections(build_result, workspace))
    return "".join(lines)


def generate_error_summary(message: str) -> str:
    """Render the report published when a run fails."""
    return f"## Error\n\n❌ {message}\n"


def generate_structured_summary(summary: XcresultSummaryResult, fmt: str = "json") -> str:
    """Dump the parsed results as JSON or YAML, using the xcresulttool key names."""
    data = summary.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unknown format: {fmt}")
