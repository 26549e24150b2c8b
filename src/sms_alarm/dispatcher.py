"""Dispatch of composed messages through an SMS gateway."""

import logging
import time
from collections.abc import Callable

from sms_alarm.config import AlarmSettings
from sms_alarm.errors import TransportError
from sms_alarm.gateway.base import MessageResult, SMSGateway
from sms_alarm.validation import AdapterConfig

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Sends one composed message to all configured recipients.

    By default a send is attempted exactly once. With ``send_attempts`` > 1
    a TransportError is retried after the backoff from
    ``retry_backoff_seconds``; AuthError is never retried.
    """

    def __init__(
        self,
        gateway: SMSGateway,
        settings: AlarmSettings | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        settings = settings or AlarmSettings()
        self._gateway = gateway
        self._attempts = max(1, settings.send_attempts)
        self._backoff = settings.retry_backoff_seconds or [0]
        self._sleep = sleep

    @property
    def gateway(self) -> SMSGateway:
        return self._gateway

    def dispatch(self, config: AdapterConfig, text: str) -> list[MessageResult]:
        """Send *text* to ``config.recipients`` within the credit/part limits."""
        log_ctx = {"recipients": len(config.recipients), "length": len(text)}

        attempt = 1
        while True:
            try:
                results = self._gateway.send_message(
                    config.recipients,
                    text,
                    config.max_credits,
                    config.max_parts,
                )
                break
            except TransportError:
                if attempt >= self._attempts:
                    raise
                backoff = _get_backoff(attempt, self._backoff)
                logger.warning(
                    "Send failed, scheduling retry",
                    extra={**log_ctx, "attempt": attempt, "backoff_seconds": backoff},
                    exc_info=True,
                )
                self._sleep(backoff)
                attempt += 1

        for result in results:
            if not result.accepted:
                logger.error(
                    "Gateway rejected message",
                    extra={**log_ctx, "recipient": result.recipient, "reason": result.error},
                )
        logger.info(
            "Message dispatched",
            extra={
                **log_ctx,
                "attempt": attempt,
                "accepted": sum(r.accepted for r in results),
            },
        )
        return results


def _get_backoff(attempt: int, schedule: list[int]) -> int:
    """Return backoff seconds for the given attempt number (1-based).

    Falls back to the last value in *schedule* when attempt exceeds the
    length of the list.
    """
    idx = min(attempt - 1, len(schedule) - 1)
    return schedule[idx]
