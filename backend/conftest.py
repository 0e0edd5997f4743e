"""
Shared fixtures for the diagram service tests.

Records are built from the same camelCase payloads the core service sends,
so parsing is exercised by every test that uses them.
"""

import pytest

from diagram_service.catalog.base import RecordSource
from diagram_service.ir.records import SystemRecord


def make_flow(counterpart, role="CONSUMER", pattern="REST_API", frequency="Daily", middleware=None):
    return {
        "counterpartSystemCode": counterpart,
        "counterpartSystemRole": role,
        "integrationMethod": pattern,
        "frequency": frequency,
        "middleware": middleware,
    }


def make_record(code, flows=None, name=None, review_code=None):
    return SystemRecord.model_validate(
        {
            "systemCode": code,
            "solutionOverview": {
                "solutionDetails": {
                    "solutionName": name or f"{code} Solution",
                    "solutionReviewCode": review_code or f"SR-{code}",
                },
                "reviewStatus": "APPROVED",
                "businessUnit": "Payments",
            },
            "integrationFlows": flows,
        }
    )


class StaticRecordSource(RecordSource):
    """Record source backed by an in-memory list; counts fetches."""

    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error
        self.calls = 0

    def fetch_all_system_records(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def flow():
    return make_flow


@pytest.fixture
def record():
    return make_record


@pytest.fixture
def static_source():
    return StaticRecordSource
