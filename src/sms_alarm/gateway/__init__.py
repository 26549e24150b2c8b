"""SMS gateway implementations behind a common interface."""

from collections.abc import Callable

from sms_alarm.config import GatewaySettings
from sms_alarm.gateway.base import MessageResult, SMSGateway
from sms_alarm.gateway.clickatell import ClickatellGateway
from sms_alarm.gateway.console import ConsoleGateway

GatewayFactory = Callable[[str], SMSGateway]


def clickatell_factory(settings: GatewaySettings | None = None) -> GatewayFactory:
    """Return a factory building a Clickatell gateway for an auth token."""
    settings = settings or GatewaySettings()

    def _build(auth_token: str) -> SMSGateway:
        return ClickatellGateway(auth_token, settings=settings)

    return _build


__all__ = [
    "ClickatellGateway",
    "ConsoleGateway",
    "GatewayFactory",
    "MessageResult",
    "SMSGateway",
    "clickatell_factory",
]
