import json
from typing import Dict, List, Tuple

import pytest


class FakeTool:
    """Stands in for xcresulttool; returns canned stdout per (subject, form)."""

    def __init__(self, outputs: Dict[Tuple[str, str], object]):
        self.outputs = outputs
        self.calls: List[Tuple[str, str, str]] = []

    def get(self, subject, form, path):
        self.calls.append((subject, form, str(path)))
        output = self.outputs[(subject, form)]
        if isinstance(output, Exception):
            raise output
        return output if isinstance(output, str) else json.dumps(output)


@pytest.fixture
def succeeded_build() -> dict:
    return {
        "analyzerWarningCount": 0,
        "analyzerWarnings": [],
        "destination": {
            "architecture": "arm64",
            "deviceId": "123",
            "deviceName": "iPhone 16 Pro",
            "modelName": "iPhone 16 Pro",
            "osVersion": "18.0",
            "platform": "iOS Simulator",
        },
        "endTime": 1729870806.836,
        "errorCount": 0,
        "errors": [],
        "startTime": 1729870805.508,
        "status": "succeeded",
        "warningCount": 0,
        "warnings": [],
    }


@pytest.fixture
def failed_build() -> dict:
    return {
        "analyzerWarningCount": 0,
        "analyzerWarnings": [],
        "endTime": 180,
        "errorCount": 1,
        "errors": [
            {
                "className": "CompileError",
                "issueType": "Swift Compiler Error",
                "message": 'Cannot find type "Missing" in scope',
                "sourceURL": "file:///path/to/error.swift#EndingLineNumber=9&StartingLineNumber=9",
                "targetName": "App",
            }
        ],
        "startTime": 0,
        "status": "failed",
        "warningCount": 0,
        "warnings": [],
    }


@pytest.fixture
def summary_data() -> dict:
    return {
        "devicesAndConfigurations": [
            {
                "device": {
                    "architecture": "arm64",
                    "deviceId": "123",
                    "deviceName": "iPhone 16 Pro",
                    "modelName": "iPhone 16 Pro",
                    "osVersion": "18.0",
                    "platform": "iOS Simulator",
                },
                "expectedFailures": 0,
                "failedTests": 1,
                "passedTests": 2,
                "skippedTests": 0,
                "testPlanConfiguration": {"configurationId": "1", "configurationName": "Default"},
            }
        ],
        "environmentDescription": "App · Built with macOS 15",
        "expectedFailures": 0,
        "failedTests": 1,
        "finishTime": 1729873371.36,
        "passedTests": 2,
        "result": "Failed",
        "skippedTests": 0,
        "startTime": 1729873161.166,
        "testFailures": [
            {"failureText": "placeholder", "targetName": "AppTests", "testIdentifier": 1, "testName": "testAdd()"}
        ],
        "title": "Test - App",
        "totalTestCount": 3,
    }


@pytest.fixture
def tree_data() -> dict:
    return {
        "devices": [],
        "testPlanConfigurations": [{"configurationId": "1", "configurationName": "Default"}],
        "testNodes": [
            {
                "name": "App",
                "nodeType": "Test Plan",
                "result": "Failed",
                "children": [
                    {
                        "name": "AppTests",
                        "nodeType": "Unit test bundle",
                        "result": "Failed",
                        "children": [
                            {
                                "name": "CalculatorTests",
                                "nodeType": "Test Suite",
                                "result": "Failed",
                                "children": [
                                    {"name": "testSubtract()", "nodeType": "Test Case", "result": "Passed"},
                                    {
                                        "name": "testAdd()",
                                        "nodeType": "Test Case",
                                        "result": "Failed",
                                        "nodeIdentifier": "CalculatorTests/testAdd()",
                                        "children": [
                                            {
                                                "name": 'CalculatorTests.swift:42: XCTAssertEqual failed: ("2") is not equal to ("3")',
                                                "nodeType": "Failure Message",
                                                "result": "Failed",
                                            }
                                        ],
                                    },
                                ],
                            }
                        ],
                    }
                ],
            }
        ],
    }


@pytest.fixture
def fake_tool():
    return FakeTool
