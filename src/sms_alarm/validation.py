"""Configuration validation for the alarm callback.

Raw configuration comes from the host as a flat mapping of the keys declared
in ``sms_alarm.schema``. ``build_config`` checks it locally and produces an
immutable AdapterConfig; ``verify_gateway`` then checks the auth token and
every recipient against the SMS gateway.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, model_validator

from sms_alarm.enums import ConfigKey
from sms_alarm.errors import (
    ConfigError,
    GatewayError,
    InvalidMaxCredits,
    InvalidMaxLength,
    InvalidMaxParts,
    MissingAuthToken,
    NoRecipients,
    RemoteVerificationFailed,
)
from sms_alarm.fields import DEFAULT_FIELD_SPECIFIERS, FieldSpecifier
from sms_alarm.gateway import GatewayFactory
from sms_alarm.gateway.base import SMSGateway

logger = logging.getLogger(__name__)

_TEXT_KEYS = frozenset(
    {ConfigKey.AUTH_TOKEN, ConfigKey.RECIPIENTS, ConfigKey.FIELDS, ConfigKey.STATIC_TEXT}
)


class RawAlarmConfig(BaseModel):
    """Host configuration with types coerced but not yet validated."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    auth_token: str = ""
    recipients: str = ""
    include_result_description: bool = True
    fields: str = ""
    include_field_names: bool = True
    max_length: int = 0
    max_credits: int = 0
    max_parts: int = 0
    static_text: str = ""

    @model_validator(mode="before")
    @classmethod
    def _drop_unset_values(cls, data: Any) -> Any:
        # None means "not configured"; so does "" for numeric and boolean keys.
        if not isinstance(data, Mapping):
            return data
        return {
            key: value
            for key, value in data.items()
            if value is not None and (key in _TEXT_KEYS or value != "")
        }


class AdapterConfig(BaseModel):
    """Validated, immutable adapter configuration."""

    model_config = ConfigDict(frozen=True)

    auth_token: SecretStr
    recipients: tuple[str, ...] = Field(min_length=1)
    field_specifiers: tuple[FieldSpecifier, ...] = Field(
        default=DEFAULT_FIELD_SPECIFIERS, min_length=1
    )
    include_field_names: bool = True
    include_result_description: bool = True
    static_text: str = ""
    max_length: int = Field(default=0, ge=0)
    max_credits: int = Field(default=0, ge=0)
    max_parts: int = Field(default=0, ge=0)


def split_list(raw: str) -> list[str]:
    """Split a comma separated setting, trimming whitespace around entries."""
    return [item.strip() for item in raw.split(",") if item.strip()]


def build_config(raw: Mapping[str, Any]) -> AdapterConfig:
    """Validate raw host configuration without touching the network.

    Raises a ConfigError subclass naming the first offending key.
    """
    try:
        parsed = RawAlarmConfig.model_validate(dict(raw))
    except ValidationError as exc:
        error = exc.errors(include_url=False)[0]
        key = str(error["loc"][0]) if error["loc"] else "configuration"
        raise ConfigError(key, f"Invalid value: {error['msg']}.") from exc

    if not parsed.auth_token.strip():
        raise MissingAuthToken()

    recipients = split_list(parsed.recipients)
    if not recipients:
        raise NoRecipients()

    field_names = split_list(parsed.fields)
    if field_names:
        specifiers = tuple(FieldSpecifier.parse(name) for name in field_names)
    else:
        logger.warning(
            "No fields were specified, using default fields",
            extra={"fields": [spec.name for spec in DEFAULT_FIELD_SPECIFIERS]},
        )
        specifiers = DEFAULT_FIELD_SPECIFIERS

    if parsed.max_length < 0:
        raise InvalidMaxLength(parsed.max_length)
    if parsed.max_credits < 0:
        raise InvalidMaxCredits(parsed.max_credits)
    if parsed.max_parts < 0:
        raise InvalidMaxParts(parsed.max_parts)

    return AdapterConfig(
        auth_token=SecretStr(parsed.auth_token.strip()),
        recipients=tuple(recipients),
        field_specifiers=specifiers,
        include_field_names=parsed.include_field_names,
        include_result_description=parsed.include_result_description,
        static_text=parsed.static_text,
        max_length=parsed.max_length,
        max_credits=parsed.max_credits,
        max_parts=parsed.max_parts,
    )


def verify_gateway(config: AdapterConfig, gateway: SMSGateway) -> None:
    """Check the account balance and the coverage of every recipient.

    A recipient outside coverage is logged, not rejected. Any gateway error
    is raised as RemoteVerificationFailed.
    """
    logger.debug("Connecting to SMS gateway")
    try:
        balance = gateway.get_balance()
        logger.info("Current gateway balance", extra={"balance": balance})

        for recipient in config.recipients:
            if not gateway.get_coverage(recipient):
                logger.error(
                    "Recipient is outside coverage, no message will be sent to it",
                    extra={"recipient": recipient},
                )
    except GatewayError as exc:
        logger.error("Connecting to SMS gateway failed", exc_info=True)
        raise RemoteVerificationFailed(str(exc)) from exc

    logger.info("Connecting to SMS gateway succeeded")


def validate_config(
    raw: Mapping[str, Any],
    gateway_factory: GatewayFactory,
) -> tuple[AdapterConfig, SMSGateway]:
    """Build an AdapterConfig from *raw* and verify it against the gateway.

    The gateway is built from the validated auth token and returned with the
    config; it is closed again when verification fails. Any error while
    building or verifying the gateway is raised as RemoteVerificationFailed.
    """
    logger.debug("Verifying configuration")
    config = build_config(raw)
    logger.info(
        "Verifying configuration succeeded",
        extra={
            "recipients": len(config.recipients),
            "fields": [spec.name for spec in config.field_specifiers],
        },
    )

    try:
        gateway = gateway_factory(config.auth_token.get_secret_value())
    except Exception as exc:
        logger.error("Building SMS gateway failed", exc_info=True)
        raise RemoteVerificationFailed(f"cannot build gateway: {exc}") from exc

    try:
        verify_gateway(config, gateway)
    except ConfigError:
        gateway.close()
        raise
    except Exception as exc:
        gateway.close()
        logger.error("Connecting to SMS gateway failed", exc_info=True)
        raise RemoteVerificationFailed(str(exc)) from exc
    return config, gateway
