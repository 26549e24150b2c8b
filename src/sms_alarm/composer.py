"""Message composition: one alert event to one length-bounded SMS text."""

import logging

from sms_alarm.errors import MissingStreamTitle
from sms_alarm.fields import render_field
from sms_alarm.models import AlertEvent
from sms_alarm.validation import AdapterConfig

logger = logging.getLogger(__name__)


def compose_message(config: AdapterConfig, event: AlertEvent) -> str:
    """Render *event* into the text that is sent to every recipient.

    The static text and the result description come first, then one
    fragment per configured field of the first matching message, in the
    configured order. With a positive ``max_length`` no further fields are
    rendered once the text is too long, and the result is cut to exactly
    ``max_length`` characters.
    """
    if not event.stream_title:
        raise MissingStreamTitle()

    max_length = config.max_length
    parts: list[str] = []
    length = 0

    def append(text: str) -> None:
        nonlocal length
        parts.append(text)
        length += len(text)

    if config.static_text:
        append(f"{config.static_text} ")
    if config.include_result_description:
        append(f"{event.result_description} ")

    if event.matching_messages:
        record = event.matching_messages[0]
        for spec in config.field_specifiers:
            fragment = render_field(
                spec, record, event.stream_title, config.include_field_names
            )
            if fragment is None:
                continue
            append(fragment)
            if 0 < max_length < length:
                break

    text = "".join(parts)
    if 0 < max_length < len(text):
        logger.warning(
            "Generated message exceeds configured maximum, truncating",
            extra={"length": len(text), "max_length": max_length},
        )
        text = text[:max_length]

    logger.debug("Composed message", extra={"text": text})
    return text
