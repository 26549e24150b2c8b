"""Field specifiers and the per-field renderer."""

import logging
from dataclasses import dataclass
from typing import Self

from sms_alarm.enums import BUILTIN_FIELD_TAGS, FieldKind
from sms_alarm.models import MessageRecord

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";"

_LABELS: dict[FieldKind, str] = {
    FieldKind.ID: "id",
    FieldKind.MESSAGE: "message",
    FieldKind.SOURCE: "source",
    FieldKind.TIMESTAMP: "timestamp",
    FieldKind.STREAM: "stream",
}


@dataclass(frozen=True)
class FieldSpecifier:
    """A built-in tag such as ``<message>`` or a custom field name."""

    kind: FieldKind
    name: str

    @classmethod
    def parse(cls, raw: str) -> Self:
        if raw in BUILTIN_FIELD_TAGS:
            return cls(kind=FieldKind(raw), name=raw)
        return cls(kind=FieldKind.CUSTOM, name=raw)

    @property
    def label(self) -> str:
        if self.kind is FieldKind.CUSTOM:
            return self.name
        return _LABELS[self.kind]


DEFAULT_FIELD_SPECIFIERS: tuple[FieldSpecifier, ...] = tuple(
    FieldSpecifier.parse(tag)
    for tag in ("<timestamp>", "<stream>", "<source>", "<message>")
)


def render_field(
    spec: FieldSpecifier,
    record: MessageRecord,
    stream_title: str,
    include_field_names: bool,
) -> str | None:
    """Render one field as ``label: value;`` or ``value;``.

    Returns None when a custom field does not exist on the record.
    """
    match spec.kind:
        case FieldKind.ID:
            value = record.id
        case FieldKind.MESSAGE:
            value = record.message
        case FieldKind.SOURCE:
            value = record.source
        case FieldKind.TIMESTAMP:
            value = str(record.timestamp)
        case FieldKind.STREAM:
            value = stream_title
        case _:
            if spec.name not in record.fields:
                logger.warning(
                    "Field name does not exist, skipping",
                    extra={"field": spec.name, "message_id": record.id},
                )
                return None
            value = str(record.fields[spec.name])

    if include_field_names:
        return f"{spec.label}: {value}{FIELD_SEPARATOR}"
    return f"{value}{FIELD_SEPARATOR}"
