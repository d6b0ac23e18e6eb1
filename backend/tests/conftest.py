import asyncio
from datetime import datetime, timezone

import pytest

from azmon.config import Settings
from azmon.models.service import ServiceType
from azmon.schemas.datasource import DataSourceInfo
from azmon.schemas.query import Query, QueryBatch, QueryResult, TimeRange


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def ds_info() -> DataSourceInfo:
    return DataSourceInfo(
        name="Azure Monitor",
        json_data={
            "cloudName": "azuremonitor",
            "subscriptionId": "sub-1",
            "logAnalyticsDefaultWorkspace": "ws-default",
            "appInsightsAppId": "app-1",
        },
        secure_json_data={
            "accessToken": "mgmt-token",
            "logAnalyticsAccessToken": "la-token",
            "appInsightsApiKey": "ai-key",
        },
    )


@pytest.fixture
def time_range() -> TimeRange:
    return TimeRange(
        from_=datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc),
        to=datetime(2024, 1, 1, 6, 0, tzinfo=timezone.utc),
    )


def make_query(ref_id: str, query_type: str, **model) -> Query:
    return Query.from_model({"refId": ref_id, "queryType": query_type, **model})


def make_batch(time_range: TimeRange, *queries: Query) -> QueryBatch:
    return QueryBatch(queries=list(queries), time_range=time_range)


class FakeExecutor:
    """Executor double returning a canned result set, or failing."""

    def __init__(self, results=None, error=None, delay: float = 0.0):
        self._results = results or {}
        self._error = error
        self._delay = delay
        self.calls: list[list[Query]] = []
        self.cancelled = False

    async def execute_time_series_query(self, queries, time_range):
        self.calls.append(list(queries))
        try:
            if self._delay:
                await asyncio.sleep(self._delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self._error is not None:
            raise self._error
        return dict(self._results)


def result(ref_id: str, value) -> QueryResult:
    return QueryResult(ref_id=ref_id, payload={"value": value})


def fake_executors(**overrides) -> dict[ServiceType, FakeExecutor]:
    executors = {service_type: FakeExecutor() for service_type in ServiceType}
    for name, executor in overrides.items():
        executors[ServiceType[name.upper()]] = executor
    return executors
