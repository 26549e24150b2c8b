"""Alarm callback: the surface the monitoring host talks to."""

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

from sms_alarm.composer import compose_message
from sms_alarm.config import AlarmSettings
from sms_alarm.dispatcher import NotificationDispatcher
from sms_alarm.enums import AdapterState
from sms_alarm.errors import ConfigError, EventPreconditionError, GatewayError
from sms_alarm.gateway import GatewayFactory, clickatell_factory
from sms_alarm.gateway.base import MessageResult
from sms_alarm.metadata import PLUGIN_METADATA
from sms_alarm.models import AlertEvent, CheckResult, Stream
from sms_alarm.schema import ConfigurationRequest, requested_configuration
from sms_alarm.validation import AdapterConfig, validate_config

logger = logging.getLogger(__name__)

_MASK = "********"


class SMSAlarmCallback:
    """Sends an SMS summary of every triggered alert to a list of recipients.

    ``initialize`` must succeed before ``call`` does anything; until then, or
    after a failed initialization, alerts are ignored.
    """

    def __init__(
        self,
        gateway_factory: GatewayFactory | None = None,
        settings: AlarmSettings | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._gateway_factory = gateway_factory or clickatell_factory()
        self._settings = settings or AlarmSettings()
        self._sleep = sleep
        self._state = AdapterState.UNINITIALIZED
        self._raw: dict[str, Any] = {}
        self._config: AdapterConfig | None = None
        self._dispatcher: NotificationDispatcher | None = None

    @property
    def name(self) -> str:
        return PLUGIN_METADATA.name

    @property
    def state(self) -> AdapterState:
        return self._state

    @property
    def config(self) -> AdapterConfig | None:
        return self._config

    def get_requested_configuration(self) -> ConfigurationRequest:
        return requested_configuration()

    def initialize(self, raw: Mapping[str, Any]) -> None:
        """Validate *raw* configuration and activate the callback.

        Raises ConfigError when the configuration is invalid or the gateway
        cannot be verified; the callback then stays inactive.
        """
        self._release()
        self._raw = dict(raw)
        try:
            config, gateway = validate_config(self._raw, self._gateway_factory)
        except ConfigError as exc:
            self._state = AdapterState.FAILED
            logger.error("Initializing alarm callback failed", extra={"key": exc.key})
            raise

        self._config = config
        self._dispatcher = NotificationDispatcher(gateway, self._settings, sleep=self._sleep)
        self._state = AdapterState.ACTIVE
        logger.info(
            "Alarm callback initialized",
            extra={"callback": self.name, "recipients": len(config.recipients)},
        )

    def call(self, stream: Stream, result: CheckResult) -> list[MessageResult] | None:
        """Compose and send the message for one triggered alert.

        Failures are logged and never raised to the host; the return value is
        None whenever nothing was sent.
        """
        config, dispatcher = self._config, self._dispatcher
        if self._state is not AdapterState.ACTIVE or config is None or dispatcher is None:
            logger.debug("Alarm callback inactive, ignoring alert", extra={"state": self._state})
            return None

        log_ctx = {"stream_id": stream.id, "stream": stream.title}
        try:
            event = AlertEvent.from_check(stream, result)
            text = compose_message(config, event)
            return dispatcher.dispatch(config, text)
        except EventPreconditionError:
            logger.exception("Alert event rejected", extra=log_ctx)
        except GatewayError:
            logger.exception("Sending short message failed", extra=log_ctx)
        except Exception:
            logger.exception("Unexpected error while handling alert", extra=log_ctx)
        return None

    def get_attributes(self) -> dict[str, str]:
        secret_keys = requested_configuration().secret_keys()
        return {
            key: f"{key}-{_MASK if key in secret_keys else value}"
            for key, value in self._raw.items()
        }

    def check_configuration(self) -> None:
        logger.info("check_configuration", extra={"state": self._state})

    def close(self) -> None:
        """Deactivate the callback and release the gateway."""
        self._release()
        self._state = AdapterState.UNINITIALIZED

    def _release(self) -> None:
        if self._dispatcher is not None:
            self._dispatcher.gateway.close()
        self._dispatcher = None
        self._config = None
