from xcresult_summary.reporting.extractor import extract_test_failures, parse_source_location
from xcresult_summary.reporting.models import DetailedTestResult, TestNode


def _case(name: str, result: str = "Failed", message: str = None, children=None) -> TestNode:
    kids = list(children or [])
    if message is not None:
        kids.insert(0, TestNode(name=message, node_type="Failure Message", result=result))
    return TestNode(name=name, node_type="Test Case", result=result, children=kids)


def _suite(name: str, *children: TestNode) -> TestNode:
    return TestNode(name=name, node_type="Test Suite", result="Failed", children=list(children))


def test_parse_source_location_with_path_and_line():
    location = parse_source_location("/src/App/FooTests.swift:17: XCTAssertTrue failed")
    assert location.file_path == "/src/App/FooTests.swift"
    assert location.line_number == 17


def test_parse_source_location_without_match_is_empty():
    location = parse_source_location("Crashed: EXC_BAD_ACCESS")
    assert location.is_empty


def test_extract_from_nested_tree(tree_data):
    failures = extract_test_failures(DetailedTestResult.from_dict(tree_data))

    assert len(failures) == 1
    failure = failures[0]
    assert failure.test_name == "testAdd()"
    assert failure.failure_text.startswith("CalculatorTests.swift:42: XCTAssertEqual failed")
    assert failure.location.file_path == "CalculatorTests.swift"
    assert failure.location.line_number == 42


def test_only_failed_test_cases_are_recorded_in_document_order():
    details = DetailedTestResult(test_nodes=[
        _suite(
            "SuiteA",
            _case("a1", message="A.swift:1: boom"),
            _case("a2", result="Passed"),
            _suite("Nested", _case("n1", message="N.swift:7: deep")),
        ),
        _case("top", message="no location here"),
        TestNode(name="Failure", node_type="Failure Message", result="Failed"),
    ])

    failures = extract_test_failures(details)

    assert [f.test_name for f in failures] == ["a1", "n1", "top"]


def test_failed_case_without_children_uses_unknown_failure():
    failures = extract_test_failures(DetailedTestResult(test_nodes=[_case("lonely")]))

    assert failures[0].failure_text == "Unknown failure"
    assert failures[0].location.is_empty


def test_failure_text_without_location_is_kept_whole():
    message = "Test crashed with signal kill.\nCheck the logs."
    failures = extract_test_failures(DetailedTestResult(test_nodes=[_case("t", message=message)]))

    assert failures[0].failure_text == message
    assert failures[0].location.file_path is None
    assert failures[0].location.line_number is None


def test_failed_case_nested_in_failed_case_is_recorded_independently():
    inner = _case("inner", message="Inner.swift:3: nope")
    outer = _case("outer", message="Outer.swift:9: nope", children=[inner])

    failures = extract_test_failures(DetailedTestResult(test_nodes=[outer]))

    assert [f.test_name for f in failures] == ["outer", "inner"]
    assert failures[1].location.line_number == 3


def test_empty_tree_has_no_failures():
    assert extract_test_failures(DetailedTestResult()) == []
