"""Dev entry point: python -m sms_alarm.

Composes the short message for a sample alert and prints it. With --send
the message is also dispatched, through Clickatell or the console stub.

Usage:
    python -m sms_alarm --config config.json --alert alert.json [--send]
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from sms_alarm.callback import SMSAlarmCallback
from sms_alarm.composer import compose_message
from sms_alarm.config import AlarmSettings
from sms_alarm.errors import AlarmCallbackError
from sms_alarm.gateway import ConsoleGateway, GatewayFactory, clickatell_factory
from sms_alarm.log import setup_logging
from sms_alarm.models import AlertEvent, CheckResult, Stream
from sms_alarm.validation import build_config


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = AlarmSettings()
    setup_logging(settings.log_level)

    raw_config = _load_json(args.config)
    raw_alert = _load_json(args.alert)
    stream = Stream.model_validate(raw_alert.get("stream", {}))
    result = CheckResult.model_validate(raw_alert.get("result", {}))

    try:
        config = build_config(raw_config)
        text = compose_message(config, AlertEvent.from_check(stream, result))
    except AlarmCallbackError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(text)
    print(f"({len(text)} characters)", file=sys.stderr)
    if not args.send:
        return 0

    factory: GatewayFactory = (
        clickatell_factory() if args.gateway == "clickatell" else ConsoleGateway
    )
    callback = SMSAlarmCallback(gateway_factory=factory, settings=settings)
    try:
        callback.initialize(raw_config)
    except AlarmCallbackError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        results = callback.call(stream, result)
    finally:
        callback.close()

    if results is None:
        return 1
    for item in results:
        status = "accepted" if item.accepted else f"rejected ({item.error})"
        print(f"  {item.recipient:20s} -> {status}", file=sys.stderr)
    return 0 if all(item.accepted for item in results) else 1


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sms_alarm",
        description="Compose (and optionally send) the SMS for a sample alert.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="JSON file with the alarm callback configuration.",
    )
    parser.add_argument(
        "--alert",
        type=Path,
        required=True,
        help="JSON file with 'stream' and 'result' objects.",
    )
    parser.add_argument(
        "--send",
        action="store_true",
        help="Dispatch the message after printing it.",
    )
    parser.add_argument(
        "--gateway",
        choices=("console", "clickatell"),
        default="console",
        help="Gateway used with --send (default: console).",
    )
    return parser.parse_args(argv)


def _load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as file_handle:
        data = json.load(file_handle)
    if not isinstance(data, dict):
        raise SystemExit(f"{path}: expected a JSON object")
    return data


if __name__ == "__main__":
    sys.exit(main())
