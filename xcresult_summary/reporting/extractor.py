"""
Failure extraction from the detailed test tree.
"""

import re
from typing import List, Sequence

from xcresult_summary.reporting.models import (
    DetailedTestResult,
    SourceCodeContext,
    SourceLocation,
    TestFailure,
    TestNode,
)

TEST_CASE_NODE = "Test Case"
FAILED_RESULT = "Failed"
UNKNOWN_FAILURE = "Unknown failure"

# "<path>.swift:<line>:" somewhere in the failure message
SOURCE_LOCATION_PATTERN = re.compile(r"([^:]+\.swift):(\d+):")


def parse_source_location(message: str) -> SourceLocation:
    """Recover a source location from a failure message; empty if none is found."""
    match = SOURCE_LOCATION_PATTERN.search(message)
    if match is None:
        return SourceLocation()
    return SourceLocation(file_path=match.group(1), line_number=int(match.group(2)))


def is_failed_test_case(node: TestNode) -> bool:
    return node.node_type == TEST_CASE_NODE and node.result == FAILED_RESULT


def _failure_from_node(node: TestNode) -> TestFailure:
    # The first child of a failed case carries the raw failure message
    message = node.children[0].name if node.children else ""
    return TestFailure(
        test_name=node.name,
        failure_text=message or UNKNOWN_FAILURE,
        source_code_context=SourceCodeContext(location=parse_source_location(message)),
    )


def _collect(nodes: Sequence[TestNode], failures: List[TestFailure]) -> None:
    for node in nodes:
        if is_failed_test_case(node):
            failures.append(_failure_from_node(node))
        if node.children:
            _collect(node.children, failures)


def extract_test_failures(details: DetailedTestResult) -> List[TestFailure]:
    """
    Walk the test tree depth-first and return one record per failed test case.

    Suites are never recorded themselves but are always descended into, so
    the result follows document order at any nesting depth.
    """
    failures: List[TestFailure] = []
    _collect(details.test_nodes, failures)
    return failures
