"""
Tests for structured log formatting.
"""

import json
import logging

from campaign_manager.shared.correlation import _correlation_id_var
from campaign_manager.shared.logging import StructuredFormatter


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("campaign_manager.test", logging.INFO, "", 0, message, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_extra_fields_are_emitted() -> None:
    output = json.loads(
        StructuredFormatter().format(_record("Donation recorded", campaign_id="c1", amount=5))
    )

    assert output["message"] == "Donation recorded"
    assert output["level"] == "INFO"
    assert output["logger"] == "campaign_manager.test"
    assert output["campaign_id"] == "c1"
    assert output["amount"] == 5


def test_colliding_extra_field_is_prefixed() -> None:
    output = json.loads(StructuredFormatter().format(_record("hello", level="custom")))

    assert output["level"] == "INFO"
    assert output["extra_level"] == "custom"


def test_correlation_id_included() -> None:
    token = _correlation_id_var.set("corr-1")
    try:
        output = json.loads(StructuredFormatter().format(_record("hello")))
    finally:
        _correlation_id_var.reset(token)

    assert output["correlation_id"] == "corr-1"


def test_extra_data_is_an_ordinary_field() -> None:
    output = json.loads(
        StructuredFormatter().format(_record("hello", extra_data={"campaign_id": "c1"}))
    )

    assert output["extra_data"] == {"campaign_id": "c1"}
    assert "campaign_id" not in output
