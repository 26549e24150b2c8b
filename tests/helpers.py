"""Builders for configs, records and events used across the tests."""

from typing import Any

from sms_alarm.models import AlertEvent, MessageRecord
from sms_alarm.validation import AdapterConfig, build_config


def make_config(**overrides: Any) -> AdapterConfig:
    """Build a validated config from raw-style overrides."""
    raw: dict[str, Any] = {
        "auth_token": "token-xyz",
        "recipients": "4191234567",
        "fields": "<source>,<message>",
        "include_field_names": True,
        "include_result_description": False,
        "max_length": 0,
    }
    raw.update(overrides)
    return build_config(raw)


def make_record(**overrides: Any) -> MessageRecord:
    data: dict[str, Any] = {
        "id": "msg-1",
        "message": "disk full on node3",
        "source": "app1",
        "timestamp": "2015-02-19T10:00:00.000Z",
        "fields": {"facility": "kernel", "level": 3},
    }
    data.update(overrides)
    return MessageRecord(**data)


def make_event(*records: MessageRecord, **overrides: Any) -> AlertEvent:
    data: dict[str, Any] = {
        "stream_title": "production",
        "result_description": "CPU high",
        "matching_messages": records or (make_record(),),
    }
    data.update(overrides)
    return AlertEvent(**data)
