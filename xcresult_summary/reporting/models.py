"""
Data models for xcresulttool build and test results.

Field names follow Python conventions; ``from_dict`` reads the camelCase keys
xcresulttool emits and ``to_dict`` writes them back, omitting absent fields.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

BUILD_STATUS_FAILED = "failed"


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class Destination:
    """Device or platform a build targeted."""
    architecture: Optional[str] = None
    device_id: Optional[str] = None
    device_name: Optional[str] = None
    model_name: Optional[str] = None
    os_version: Optional[str] = None
    platform: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Destination":
        return cls(
            architecture=data.get("architecture"),
            device_id=data.get("deviceId"),
            device_name=data.get("deviceName"),
            model_name=data.get("modelName"),
            os_version=data.get("osVersion"),
            platform=data.get("platform"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "architecture": self.architecture,
            "deviceId": self.device_id,
            "deviceName": self.device_name,
            "modelName": self.model_name,
            "osVersion": self.os_version,
            "platform": self.platform,
        })


# Test devices share the destination shape
TestDevice = Destination


@dataclass
class BuildIssue:
    """A single build error reported by the compiler or linker."""
    message: Optional[str] = None
    source_url: Optional[str] = None
    issue_type: Optional[str] = None
    class_name: Optional[str] = None
    target_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuildIssue":
        return cls(
            message=data.get("message"),
            source_url=data.get("sourceURL"),
            issue_type=data.get("issueType"),
            class_name=data.get("className"),
            target_name=data.get("targetName"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "message": self.message,
            "sourceURL": self.source_url,
            "issueType": self.issue_type,
            "className": self.class_name,
            "targetName": self.target_name,
        })


@dataclass
class BuildResult:
    """Outcome of the build phase (``build-results summary``)."""
    status: str
    error_count: int
    warning_count: int
    analyzer_warning_count: int = 0
    start_time: float = 0.0
    end_time: float = 0.0
    destination: Optional[Destination] = None
    errors: List[BuildIssue] = field(default_factory=list)
    warnings: List[Any] = field(default_factory=list)
    analyzer_warnings: List[Any] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.status == BUILD_STATUS_FAILED

    @property
    def duration(self) -> float:
        """Build duration in seconds."""
        return self.end_time - self.start_time

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuildResult":
        destination = data.get("destination")
        return cls(
            status=data["status"],
            error_count=data["errorCount"],
            warning_count=data["warningCount"],
            analyzer_warning_count=data.get("analyzerWarningCount", 0),
            start_time=data.get("startTime", 0.0),
            end_time=data.get("endTime", 0.0),
            destination=Destination.from_dict(destination) if destination is not None else None,
            errors=[BuildIssue.from_dict(e) for e in data.get("errors") or []],
            warnings=list(data.get("warnings") or []),
            analyzer_warnings=list(data.get("analyzerWarnings") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "status": self.status,
            "errorCount": self.error_count,
            "warningCount": self.warning_count,
            "analyzerWarningCount": self.analyzer_warning_count,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "destination": self.destination.to_dict() if self.destination else None,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": self.warnings,
            "analyzerWarnings": self.analyzer_warnings,
        })


@dataclass
class SourceLocation:
    """File and line a failure points at."""
    file_path: Optional[str] = None
    line_number: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.file_path is None and self.line_number is None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SourceLocation":
        return cls(file_path=data.get("filePath"), line_number=data.get("lineNumber"))

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({"filePath": self.file_path, "lineNumber": self.line_number})


@dataclass
class SourceCodeContext:
    location: Optional[SourceLocation] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SourceCodeContext":
        location = data.get("location")
        return cls(location=SourceLocation.from_dict(location) if location is not None else None)

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({"location": self.location.to_dict() if self.location else None})


@dataclass
class TestFailure:
    """One failing test occurrence."""
    __test__ = False  # not a pytest test class

    test_name: Optional[str] = None
    target_name: Optional[str] = None
    test_identifier: Optional[Any] = None
    failure_text: Optional[str] = None
    source_code_context: Optional[SourceCodeContext] = None

    @property
    def location(self) -> Optional[SourceLocation]:
        if self.source_code_context is None:
            return None
        return self.source_code_context.location

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TestFailure":
        context = data.get("sourceCodeContext")
        return cls(
            test_name=data.get("testName"),
            target_name=data.get("targetName"),
            test_identifier=data.get("testIdentifier"),
            failure_text=data.get("failureText"),
            source_code_context=SourceCodeContext.from_dict(context) if context is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "testName": self.test_name,
            "targetName": self.target_name,
            "testIdentifier": self.test_identifier,
            "failureText": self.failure_text,
            "sourceCodeContext": self.source_code_context.to_dict() if self.source_code_context else None,
        })


@dataclass
class TestPlanConfiguration:
    __test__ = False

    configuration_id: Optional[str] = None
    configuration_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TestPlanConfiguration":
        return cls(
            configuration_id=data.get("configurationId"),
            configuration_name=data.get("configurationName"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "configurationId": self.configuration_id,
            "configurationName": self.configuration_name,
        })


@dataclass
class DeviceConfigurationResult:
    """Per-device, per-configuration test counts."""
    device: Optional[TestDevice] = None
    test_plan_configuration: Optional[TestPlanConfiguration] = None
    passed_tests: int = 0
    failed_tests: int = 0
    skipped_tests: int = 0
    expected_failures: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeviceConfigurationResult":
        device = data.get("device")
        configuration = data.get("testPlanConfiguration")
        return cls(
            device=TestDevice.from_dict(device) if device is not None else None,
            test_plan_configuration=(
                TestPlanConfiguration.from_dict(configuration) if configuration is not None else None
            ),
            passed_tests=data.get("passedTests", 0),
            failed_tests=data.get("failedTests", 0),
            skipped_tests=data.get("skippedTests", 0),
            expected_failures=data.get("expectedFailures", 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "device": self.device.to_dict() if self.device else None,
            "testPlanConfiguration": (
                self.test_plan_configuration.to_dict() if self.test_plan_configuration else None
            ),
            "passedTests": self.passed_tests,
            "failedTests": self.failed_tests,
            "skippedTests": self.skipped_tests,
            "expectedFailures": self.expected_failures,
        })


@dataclass
class TestResult:
    """Aggregate outcome of the test phase (``test-results summary``)."""
    __test__ = False

    result: str
    total_test_count: int
    failed_tests: int
    passed_tests: int = 0
    skipped_tests: int = 0
    expected_failures: int = 0
    start_time: float = 0.0
    finish_time: float = 0.0
    environment_description: str = ""
    title: str = ""
    devices_and_configurations: List[DeviceConfigurationResult] = field(default_factory=list)
    # None when xcresulttool did not report the key at all
    test_failures: Optional[List[TestFailure]] = None

    @property
    def duration(self) -> float:
        """Test run duration in seconds."""
        return self.finish_time - self.start_time

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TestResult":
        failures = data.get("testFailures")
        return cls(
            result=data["result"],
            total_test_count=data["totalTestCount"],
            failed_tests=data["failedTests"],
            passed_tests=data.get("passedTests", 0),
            skipped_tests=data.get("skippedTests", 0),
            expected_failures=data.get("expectedFailures", 0),
            start_time=data.get("startTime", 0.0),
            finish_time=data.get("finishTime", 0.0),
            environment_description=data.get("environmentDescription", ""),
            title=data.get("title", ""),
            devices_and_configurations=[
                DeviceConfigurationResult.from_dict(d)
                for d in data.get("devicesAndConfigurations") or []
            ],
            test_failures=[TestFailure.from_dict(f) for f in failures] if failures is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "result": self.result,
            "totalTestCount": self.total_test_count,
            "failedTests": self.failed_tests,
            "passedTests": self.passed_tests,
            "skippedTests": self.skipped_tests,
            "expectedFailures": self.expected_failures,
            "startTime": self.start_time,
            "finishTime": self.finish_time,
            "environmentDescription": self.environment_description,
            "title": self.title,
            "devicesAndConfigurations": [d.to_dict() for d in self.devices_and_configurations],
            "testFailures": (
                [f.to_dict() for f in self.test_failures] if self.test_failures is not None else None
            ),
        })


@dataclass
class TestNode:
    """Node of the detailed test tree (plan, bundle, suite, case, failure message...)."""
    __test__ = False

    name: str
    node_type: str
    result: str
    node_identifier: Optional[str] = None
    duration: Optional[str] = None
    children: List["TestNode"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TestNode":
        return cls(
            name=data.get("name", ""),
            node_type=data.get("nodeType", ""),
            result=data.get("result", ""),
            node_identifier=data.get("nodeIdentifier"),
            duration=data.get("duration"),
            children=[cls.from_dict(c) for c in data.get("children") or []],
        )


@dataclass
class DetailedTestResult:
    """Hierarchical test results (``test-results tests``)."""
    test_nodes: List[TestNode] = field(default_factory=list)
    devices: List[TestDevice] = field(default_factory=list)
    test_plan_configurations: List[TestPlanConfiguration] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DetailedTestResult":
        return cls(
            test_nodes=[TestNode.from_dict(n) for n in data.get("testNodes") or []],
            devices=[TestDevice.from_dict(d) for d in data.get("devices") or []],
            test_plan_configurations=[
                TestPlanConfiguration.from_dict(c) for c in data.get("testPlanConfigurations") or []
            ],
        )


@dataclass
class XcresultSummaryResult:
    """Build result plus the test result, which is None when the build failed."""
    build_result: BuildResult
    test_result: Optional[TestResult] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "buildResult": self.build_result.to_dict(),
            "testResult": self.test_result.to_dict() if self.test_result else None,
        }
