"""Shared fixtures: a raw suite result in the runner's JSON shape."""

import pytest

from specreport.schema import SuiteResult


def _text(t):
    return {"fragmentType": "Text", "text": t}


def _param(kind, value="", name="", table=None):
    p = {"parameterType": kind, "value": value, "name": name}
    if table is not None:
        p["table"] = table
    return {"fragmentType": "Parameter", "parameter": p}


def _step(fragments, failed=False, skipped=False, exec_ms=1000, **extra):
    res = {
        "executionResult": {
            "failed": failed,
            "executionTime": str(exec_ms),
            "errorMessage": extra.get("error", ""),
            "stackTrace": extra.get("stack", ""),
        },
        "skipped": skipped,
        "skippedReason": extra.get("skip_reason", ""),
    }
    if extra.get("screenshot"):
        res["executionResult"]["screenShot"] = extra["screenshot"]
    return {"itemType": "Step", "step": {"fragments": fragments, "stepExecutionResult": res}}


WORD_TABLE = {
    "headers": {"cells": ["Word", "Count"]},
    "rows": [{"cells": ["Gauge", "3"]}, {"cells": ["Mingle", "2"]}],
}


def raw_suite() -> dict:
    """A two-spec suite: one passing spec with a table, one failing spec."""
    passing_spec = {
        "protoSpec": {
            "specHeading": "Passing Spec",
            "fileName": "/tmp/specs/passing.spec",
            "tags": ["smoke"],
            "items": [
                {"itemType": "Comment", "comment": {"text": "Before the table"}},
                {"itemType": "Table", "table": WORD_TABLE},
                {"itemType": "Comment", "comment": {"text": "After the table"}},
                {
                    "itemType": "Scenario",
                    "scenario": {
                        "scenarioHeading": "Say hello",
                        "executionTime": "2000",
                        "tags": ["greeting"],
                        "contexts": [_step([_text("Open the app")])],
                        "scenarioItems": [
                            _step([_text("Say "), _param("Static", "hi"),
                                   _text(" to "), _param("Dynamic", "gauge")]),
                            {"itemType": "Comment", "comment": {"text": "a scenario comment"}},
                            {
                                "itemType": "Concept",
                                "concept": {
                                    "conceptStep": {"fragments": [_text("Log in as admin")]},
                                    "conceptExecutionResult": {
                                        "executionResult": {"failed": False, "executionTime": "3000"},
                                    },
                                    "steps": [
                                        _step([_text("Enter user")]),
                                        _step([_text("Enter password")]),
                                    ],
                                },
                            },
                        ],
                        "tearDownSteps": [_step([_text("Close the app")])],
                    },
                },
            ],
        },
        "executionTime": "64000",
    }
    failing_spec = {
        "protoSpec": {
            "specHeading": "Failing Spec: checkout/payment",
            "fileName": "/tmp/specs/failing.spec",
            "items": [
                {
                    "itemType": "Scenario",
                    "scenario": {
                        "scenarioHeading": "Pay by card",
                        "failed": True,
                        "executionTime": "30000",
                        "scenarioItems": [
                            _step([_text("Pay "), _param("Table", table=WORD_TABLE)],
                                  failed=True, error="card declined",
                                  stack="at pay()", screenshot="iVBORw0"),
                            _step([_text("Print receipt")], skipped=True,
                                  skip_reason="previous step failed"),
                        ],
                        "preHookFailure": {
                            "errorMessage": "db down",
                            "stackTrace": "at connect()",
                        },
                    },
                },
            ],
        },
        "failed": True,
        "executionTime": "30000",
    }
    return {
        "projectName": "projname",
        "environment": "default",
        "tags": "foo",
        "successRate": 50,
        "executionTime": "113000",
        "timestamp": "Jun 3, 2016 at 12:29pm",
        "specsFailedCount": 1,
        "specsSkippedCount": 0,
        "specResults": [passing_spec, failing_spec],
    }


@pytest.fixture
def suite_dict() -> dict:
    return raw_suite()


@pytest.fixture
def suite_result() -> SuiteResult:
    return SuiteResult.model_validate(raw_suite())
