from enum import StrEnum


class FieldKind(StrEnum):
    ID = "<id>"
    MESSAGE = "<message>"
    SOURCE = "<source>"
    TIMESTAMP = "<timestamp>"
    STREAM = "<stream>"
    CUSTOM = "custom"


BUILTIN_FIELD_TAGS: set[str] = {
    kind.value for kind in FieldKind if kind is not FieldKind.CUSTOM
}


class AdapterState(StrEnum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    FAILED = "failed"


class ConfigKey(StrEnum):
    AUTH_TOKEN = "auth_token"
    RECIPIENTS = "recipients"
    INCLUDE_RESULT_DESCRIPTION = "include_result_description"
    FIELDS = "fields"
    INCLUDE_FIELD_NAMES = "include_field_names"
    MAX_LENGTH = "max_length"
    MAX_CREDITS = "max_credits"
    MAX_PARTS = "max_parts"
    STATIC_TEXT = "static_text"
