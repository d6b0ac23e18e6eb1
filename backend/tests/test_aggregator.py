import logging

import pytest

from azmon.errors import DuplicateRefIdError
from azmon.models.service import ServiceType
from azmon.services.aggregator import merge

from conftest import result


def test_merge_unions_result_sets():
    a, b, c = result("A", 1), result("B", 2), result("C", 3)

    response = merge([
        (ServiceType.AZURE_MONITOR, {"A": a}),
        (ServiceType.APPLICATION_INSIGHTS, {"B": b}),
        (ServiceType.AZURE_LOG_ANALYTICS, {}),
        (ServiceType.INSIGHTS_ANALYTICS, {"C": c}),
    ])

    assert response.results == {"A": a, "B": b, "C": c}


def test_merge_later_result_set_wins_on_collision(caplog):
    first, second = result("A", "monitor"), result("A", "analytics")

    with caplog.at_level(logging.WARNING, logger="azmon.services.aggregator"):
        response = merge([
            (ServiceType.AZURE_MONITOR, {"A": first}),
            (ServiceType.AZURE_LOG_ANALYTICS, {"A": second}),
        ])

    assert response.results["A"] is second
    assert "overwrites" in caplog.text


def test_merge_collision_order_is_reproducible():
    inputs = [
        (ServiceType.AZURE_MONITOR, {"A": result("A", 1), "B": result("B", 1)}),
        (ServiceType.APPLICATION_INSIGHTS, {"A": result("A", 2)}),
        (ServiceType.INSIGHTS_ANALYTICS, {"B": result("B", 4)}),
    ]

    outcomes = [merge(inputs).results for _ in range(5)]

    assert all(outcome == outcomes[0] for outcome in outcomes)
    assert outcomes[0]["A"].payload == {"value": 2}
    assert outcomes[0]["B"].payload == {"value": 4}


def test_merge_strict_mode_rejects_collision():
    with pytest.raises(DuplicateRefIdError) as exc_info:
        merge(
            [
                (ServiceType.AZURE_MONITOR, {"A": result("A", 1)}),
                (ServiceType.APPLICATION_INSIGHTS, {"A": result("A", 2)}),
            ],
            strict=True,
        )

    assert exc_info.value.ref_id == "A"
    assert "Azure Monitor" in str(exc_info.value)
