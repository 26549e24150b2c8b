"""Console SMS gateway (dev stub)."""

import logging
from collections.abc import Sequence

from sms_alarm.gateway.base import MessageResult, SMSGateway

logger = logging.getLogger(__name__)


class ConsoleGateway(SMSGateway):
    """Stub gateway that logs instead of sending.

    Every recipient is routable and accepted, and the balance is always zero.
    """

    def __init__(self, auth_token: str = "") -> None:
        self._auth_token = auth_token
        self.sent: list[tuple[tuple[str, ...], str]] = []

    def send_message(
        self,
        recipients: Sequence[str],
        text: str,
        max_credits: int = 0,
        max_parts: int = 0,
    ) -> list[MessageResult]:
        self.sent.append((tuple(recipients), text))
        logger.info(
            "SMS sent (stub)",
            extra={
                "recipients": list(recipients),
                "text": text,
                "max_credits": max_credits,
                "max_parts": max_parts,
            },
        )
        return [
            MessageResult(recipient=r, accepted=True, message_id=f"console-{len(self.sent)}")
            for r in recipients
        ]

    def get_balance(self) -> float:
        return 0.0

    def get_coverage(self, recipient: str) -> bool:
        return True
