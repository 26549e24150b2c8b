"""Tests for message composition."""

import logging

import pytest

from sms_alarm.composer import compose_message
from sms_alarm.errors import MissingStreamTitle

from tests.helpers import make_config, make_event, make_record


class TestComposeFields:
    def test_fields_in_configured_order(self) -> None:
        config = make_config(fields="<message>, <source>, <id>")
        text = compose_message(config, make_event())

        assert text == "message: disk full on node3;source: app1;id: msg-1;"

    def test_default_fields(self) -> None:
        config = make_config(fields="")
        text = compose_message(config, make_event())

        assert text == (
            "timestamp: 2015-02-19T10:00:00.000Z;"
            "stream: production;"
            "source: app1;"
            "message: disk full on node3;"
        )

    def test_missing_custom_field_is_skipped(self) -> None:
        config = make_config(fields="<message>, missing_field, <source>")
        text = compose_message(config, make_event())

        assert text == "message: disk full on node3;source: app1;"
        assert "missing_field" not in text

    def test_custom_fields_are_rendered(self) -> None:
        config = make_config(fields="facility, level")
        text = compose_message(config, make_event())

        assert text == "facility: kernel;level: 3;"

    def test_without_field_names_no_labels_emitted(self) -> None:
        config = make_config(
            fields="<id>, <source>, <stream>, facility", include_field_names=False
        )
        text = compose_message(config, make_event())

        assert text == "msg-1;app1;production;kernel;"
        assert ": " not in text

    def test_only_first_matching_message_used(self) -> None:
        first = make_record(source="first")
        second = make_record(source="second")
        config = make_config(fields="<source>")

        text = compose_message(config, make_event(first, second))

        assert text == "source: first;"


class TestComposePrefix:
    def test_static_text_and_description_come_first(self) -> None:
        config = make_config(static_text="ALERT:", include_result_description=True)
        text = compose_message(config, make_event(result_description="CPU high"))

        assert text.startswith("ALERT: CPU high ")
        assert text == "ALERT: CPU high source: app1;message: disk full on node3;"

    def test_empty_description_still_emits_space(self) -> None:
        config = make_config(include_result_description=True, fields="<source>")
        text = compose_message(config, make_event(result_description=""))

        assert text == " source: app1;"

    def test_description_omitted_when_disabled(self) -> None:
        config = make_config(include_result_description=False, fields="<source>")
        text = compose_message(config, make_event(result_description="CPU high"))

        assert text == "source: app1;"

    def test_no_matching_messages_yields_prefix_only(self) -> None:
        config = make_config(static_text="ALERT:", include_result_description=True)
        event = make_event(matching_messages=(), result_description="CPU high")

        assert compose_message(config, event) == "ALERT: CPU high "

    def test_no_matching_messages_and_no_prefix_is_empty(self) -> None:
        config = make_config()
        event = make_event(matching_messages=())

        assert compose_message(config, event) == ""


class TestComposeLength:
    def test_truncates_to_exact_length_mid_field(self) -> None:
        config = make_config(max_length=20, fields="<source>, <message>")
        text = compose_message(config, make_event())

        assert text == "source: app1;message"
        assert len(text) == 20

    def test_truncation_counts_description_space(self) -> None:
        config = make_config(
            max_length=20,
            fields="<source>, <message>",
            include_result_description=True,
        )
        text = compose_message(config, make_event(result_description=""))

        assert text == " source: app1;messag"

    def test_zero_max_length_never_truncates(self) -> None:
        long_message = "x" * 5000
        config = make_config(max_length=0, fields="<message>")
        text = compose_message(config, make_event(make_record(message=long_message)))

        assert text == f"message: {long_message};"

    @pytest.mark.parametrize("max_length", [1, 5, 13, 14, 40, 41, 42, 500])
    def test_never_exceeds_max_length(self, max_length: int) -> None:
        config = make_config(
            max_length=max_length,
            static_text="ALERT:",
            include_result_description=True,
            fields="<timestamp>, <stream>, <source>, <message>, facility",
        )
        text = compose_message(config, make_event())

        assert len(text) <= max_length

    def test_text_at_exact_limit_is_kept(self) -> None:
        config = make_config(max_length=13, fields="<source>")
        assert compose_message(config, make_event()) == "source: app1;"

    def test_prefix_longer_than_limit_is_cut(self) -> None:
        config = make_config(max_length=4, static_text="ALERT:")
        event = make_event(matching_messages=())

        assert compose_message(config, event) == "ALER"

    def test_stops_rendering_once_limit_exceeded(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        config = make_config(max_length=5, fields="<source>, missing_field")

        with caplog.at_level(logging.WARNING):
            text = compose_message(config, make_event())

        assert text == "sourc"
        # The missing field is never looked at once the limit is exceeded.
        assert not any(getattr(r, "field", None) == "missing_field" for r in caplog.records)

    def test_truncation_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        config = make_config(max_length=20, fields="<source>, <message>")

        with caplog.at_level(logging.WARNING, logger="sms_alarm.composer"):
            compose_message(config, make_event())

        records = [r for r in caplog.records if r.name == "sms_alarm.composer"]
        assert len(records) == 1
        assert records[0].max_length == 20
        assert records[0].length == 41

    def test_no_truncation_log_when_within_limit(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        config = make_config(max_length=100, fields="<source>")

        with caplog.at_level(logging.WARNING, logger="sms_alarm.composer"):
            compose_message(config, make_event())

        assert not [r for r in caplog.records if r.name == "sms_alarm.composer"]


class TestComposePreconditions:
    def test_missing_stream_title_raises(self) -> None:
        config = make_config()

        with pytest.raises(MissingStreamTitle):
            compose_message(config, make_event(stream_title=""))

    def test_missing_stream_title_checked_before_anything_else(self) -> None:
        config = make_config(static_text="ALERT:")
        event = make_event(matching_messages=(), stream_title="")

        with pytest.raises(MissingStreamTitle, match="stream_title"):
            compose_message(config, event)
