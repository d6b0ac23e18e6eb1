from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from azmon.config import Settings
from azmon.schemas.query import Query, QueryRequest, TimeRange


def test_timespan_is_rendered_in_utc():
    tz = timezone(timedelta(hours=2))
    time_range = TimeRange(
        from_=datetime(2024, 1, 1, 2, 0, tzinfo=tz),
        to=datetime(2024, 1, 1, 8, 30, tzinfo=tz),
    )

    assert time_range.timespan == "2024-01-01T00:00:00Z/2024-01-01T06:30:00Z"


def test_naive_times_are_treated_as_utc():
    time_range = TimeRange(from_=datetime(2024, 1, 1), to=datetime(2024, 1, 2))

    assert time_range.timespan == "2024-01-01T00:00:00Z/2024-01-02T00:00:00Z"


def test_query_from_model_keeps_whole_document():
    raw = {"refId": "A", "queryType": "Azure Monitor", "subscription": "s", "azureMonitor": {"x": 1}}

    query = Query.from_model(raw)

    assert query.ref_id == "A"
    assert query.query_type == "Azure Monitor"
    assert query.model == raw


def test_query_from_model_defaults_missing_type_to_empty():
    assert Query.from_model({"refId": "A"}).query_type == ""


def test_request_to_batch_preserves_order_and_range():
    request = QueryRequest.model_validate({
        "from": "2024-01-01T00:00:00Z",
        "to": "2024-01-01T06:00:00Z",
        "queries": [
            {"refId": "B", "queryType": "Insights Analytics"},
            {"refId": "A", "queryType": "Azure Monitor"},
        ],
    })

    batch = request.to_batch()

    assert [q.ref_id for q in batch.queries] == ["B", "A"]
    assert batch.time_range.timespan == "2024-01-01T00:00:00Z/2024-01-01T06:00:00Z"


def test_settings_build_datasource_info():
    settings = Settings(
        _env_file=None,
        azure_cloud="govazuremonitor",
        azure_subscription_id="sub-9",
        app_insights_api_key="key",
    )

    ds_info = settings.datasource_info()

    assert ds_info.get("cloudName") == "govazuremonitor"
    assert ds_info.get("subscriptionId") == "sub-9"
    assert ds_info.secret("appInsightsApiKey") == "key"
    assert ds_info.secret("accessToken") == ""


def test_request_rejects_query_without_ref_id():
    with pytest.raises(ValidationError, match="refId"):
        QueryRequest.model_validate({
            "from": "2024-01-01T00:00:00Z",
            "to": "2024-01-01T06:00:00Z",
            "queries": [{"refId": "A", "queryType": "Azure Monitor"}, {"queryType": "Azure Monitor"}],
        })
