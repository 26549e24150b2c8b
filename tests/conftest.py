"""Shared fixtures for the alarm callback tests."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from sms_alarm.gateway.base import MessageResult, SMSGateway
from sms_alarm.models import CheckResult, Stream

from tests.helpers import make_record


@pytest.fixture()
def raw_config() -> dict[str, Any]:
    return {
        "auth_token": "token-xyz",
        "recipients": "4191234567, 4191234568",
        "include_result_description": True,
        "fields": "<timestamp>, <stream>, <source>, <message>",
        "include_field_names": True,
        "max_length": 0,
        "max_credits": 0,
        "max_parts": 0,
        "static_text": "",
    }


@pytest.fixture()
def mock_gateway() -> MagicMock:
    """Gateway with a positive balance, full coverage and accepted sends."""
    gateway = MagicMock(spec=SMSGateway)
    gateway.get_balance.return_value = 42.5
    gateway.get_coverage.return_value = True
    gateway.send_message.side_effect = lambda recipients, text, max_credits, max_parts: [
        MessageResult(recipient=r, accepted=True, message_id=f"id-{r}") for r in recipients
    ]
    return gateway


@pytest.fixture()
def gateway_factory(mock_gateway: MagicMock) -> MagicMock:
    """Factory handing out ``mock_gateway`` for any auth token."""
    return MagicMock(return_value=mock_gateway)


@pytest.fixture()
def stream() -> Stream:
    return Stream(id="stream-1", title="production")


@pytest.fixture()
def check_result() -> CheckResult:
    return CheckResult(
        result_description="CPU high",
        matching_messages=[make_record()],
    )
