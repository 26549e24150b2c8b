from datetime import datetime, timezone
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class MessageRecord(BaseModel):
    """One log message that matched the alert condition."""

    model_config = ConfigDict(frozen=True)

    id: str
    message: str = ""
    source: str = ""
    timestamp: datetime | str = ""
    fields: dict[str, Any] = Field(default_factory=dict)


class Stream(BaseModel):
    id: str = ""
    title: str = ""


class CheckResult(BaseModel):
    """Outcome of an alert condition check, as delivered by the host."""

    result_description: str = ""
    matching_messages: list[MessageRecord] = Field(default_factory=list)
    triggered_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class AlertEvent(BaseModel):
    """Everything the composer needs to know about one triggered alert."""

    model_config = ConfigDict(frozen=True)

    stream_title: str = ""
    result_description: str = ""
    matching_messages: tuple[MessageRecord, ...] = ()

    @classmethod
    def from_check(cls, stream: Stream, result: CheckResult) -> Self:
        return cls(
            stream_title=stream.title,
            result_description=result.result_description,
            matching_messages=tuple(result.matching_messages),
        )
