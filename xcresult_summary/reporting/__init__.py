"""
Result reporting for xcresult-summary.

This module provides:
- Data structures for build results, test summaries and the detailed test tree
- Shape validation of xcresulttool JSON
- Failure extraction from the test tree
- Fetching results from a bundle
- Markdown summary generation
"""

from xcresult_summary.reporting.models import (
    BuildResult,
    TestResult,
    TestFailure,
    TestNode,
    DetailedTestResult,
    XcresultSummaryResult,
)
from xcresult_summary.reporting.extractor import extract_test_failures
from xcresult_summary.reporting.fetcher import XcresultFetcher, XcresultTool, get_xcresult_summary
from xcresult_summary.reporting.generator import (
    generate_markdown_summary,
    generate_error_summary,
    generate_structured_summary,
)

__all__ = [
    "BuildResult",
    "TestResult",
    "TestFailure",
    "TestNode",
    "DetailedTestResult",
    "XcresultSummaryResult",
    "extract_test_failures",
    "XcresultFetcher",
    "XcresultTool",
    "get_xcresult_summary",
    "generate_markdown_summary",
    "generate_error_summary",
    "generate_structured_summary",
]
