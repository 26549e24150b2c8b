"""Configuration fields the alarm callback requests from its host."""

from dataclasses import asdict, dataclass, field
from typing import Any

from sms_alarm.enums import ConfigKey


@dataclass(frozen=True, slots=True)
class ConfigurationField:
    key: str
    field_type: str
    title: str
    default: Any
    description: str
    optional: bool = True
    is_secret: bool = False


@dataclass
class ConfigurationRequest:
    fields: dict[str, ConfigurationField] = field(default_factory=dict)

    def add_field(self, config_field: ConfigurationField) -> None:
        self.fields[config_field.key] = config_field

    def secret_keys(self) -> set[str]:
        return {key for key, f in self.fields.items() if f.is_secret}

    def as_dict(self) -> dict[str, dict[str, Any]]:
        return {key: asdict(f) for key, f in self.fields.items()}


def text_field(
    key: str,
    title: str,
    description: str,
    *,
    optional: bool = True,
    is_secret: bool = False,
) -> ConfigurationField:
    return ConfigurationField(key, "text", title, "", description, optional, is_secret)


def boolean_field(key: str, title: str, default: bool, description: str) -> ConfigurationField:
    return ConfigurationField(key, "boolean", title, default, description)


def number_field(key: str, title: str, default: int, description: str) -> ConfigurationField:
    return ConfigurationField(key, "number", title, default, description)


def requested_configuration() -> ConfigurationRequest:
    request = ConfigurationRequest()

    request.add_field(text_field(
        ConfigKey.AUTH_TOKEN, "Clickatell AuthToken",
        "Authentication token for the Clickatell REST API",
        optional=False, is_secret=True,
    ))
    request.add_field(text_field(
        ConfigKey.RECIPIENTS, "Recipients of short message",
        "Comma separated list of numbers in international format, eg 27999112345. "
        "No '00', ' ', '+' or '-', just numbers",
        optional=False,
    ))
    request.add_field(boolean_field(
        ConfigKey.INCLUDE_RESULT_DESCRIPTION, "Include result description in short message", True,
        "Set to true to include the result description in the short message, "
        "or set to false to omit it.",
    ))
    request.add_field(text_field(
        ConfigKey.FIELDS, "Fields to send in short message",
        "Comma separated list of fields to send as message text, eg <message>, <id>, "
        "<timestamp>, <source>, <stream> or user defined fields. "
        "Built-in fields have to be surrounded by '<>'",
    ))
    request.add_field(boolean_field(
        ConfigKey.INCLUDE_FIELD_NAMES, "Include field names in short message", True,
        "Set to true to include field names in the short message, "
        "or set to false to only send field contents.",
    ))
    request.add_field(number_field(
        ConfigKey.MAX_LENGTH, "MaxLength", 0,
        "Maximum length of short message, 0 for no limit",
    ))
    request.add_field(number_field(
        ConfigKey.MAX_CREDITS, "MaxCredits", 0,
        "Maximum credits to spend on a short message",
    ))
    request.add_field(number_field(
        ConfigKey.MAX_PARTS, "MaxParts", 0,
        "Maximum number of parts a short message can consist of",
    ))
    request.add_field(text_field(
        ConfigKey.STATIC_TEXT, "Static text that prepends the short message",
        "You can optionally define a phrase that will be sent with every short message.",
    ))

    return request
