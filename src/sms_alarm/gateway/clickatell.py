"""Clickatell REST gateway.

Thin httpx client for the three calls the alarm callback needs: account
balance, per-number coverage and message send. Every request carries the
timeout from GatewaySettings; an expired timeout is a TransportError.
"""

import logging
from collections.abc import Sequence
from types import TracebackType
from typing import Any, Self
from urllib.parse import quote

import httpx

from sms_alarm.config import GatewaySettings
from sms_alarm.errors import AuthError, TransportError
from sms_alarm.gateway.base import MessageResult, SMSGateway

logger = logging.getLogger(__name__)

_AUTH_STATUSES = frozenset({401, 403})


class ClickatellGateway(SMSGateway):
    def __init__(
        self,
        auth_token: str,
        settings: GatewaySettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = settings or GatewaySettings()
        self._client = httpx.Client(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            headers={
                "Authorization": f"Bearer {auth_token}",
                "X-Version": settings.api_version,
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    def send_message(
        self,
        recipients: Sequence[str],
        text: str,
        max_credits: int = 0,
        max_parts: int = 0,
    ) -> list[MessageResult]:
        payload: dict[str, Any] = {"to": list(recipients), "text": text}
        if max_credits > 0:
            payload["maxCredits"] = max_credits
        if max_parts > 0:
            payload["maxMessageParts"] = max_parts

        body = self._request("POST", "/message", json=payload)
        try:
            entries = body["data"]["message"]
        except (KeyError, TypeError) as exc:
            raise TransportError("Unexpected Clickatell message response") from exc

        results = [_to_result(entry) for entry in entries]
        logger.debug(
            "Clickatell message response",
            extra={"accepted": sum(r.accepted for r in results), "total": len(results)},
        )
        return results

    def get_balance(self) -> float:
        body = self._request("GET", "/account/balance")
        try:
            return float(body["data"]["balance"])
        except (KeyError, TypeError, ValueError) as exc:
            raise TransportError("Unexpected Clickatell balance response") from exc

    def get_coverage(self, recipient: str) -> bool:
        body = self._request("GET", f"/coverage/{quote(recipient, safe='')}")
        try:
            return bool(body["data"]["routable"])
        except (KeyError, TypeError) as exc:
            raise TransportError("Unexpected Clickatell coverage response") from exc

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Clickatell {method} {path} timed out") from exc
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise TransportError(f"Clickatell {method} {path} failed: {exc}") from exc

        if response.status_code in _AUTH_STATUSES:
            raise AuthError(
                f"Clickatell rejected the auth token HTTP {response.status_code}: "
                f"{_error_detail(response)}"
            )
        if response.is_error:
            raise TransportError(
                f"Clickatell {method} {path} failed HTTP {response.status_code}: "
                f"{_error_detail(response)}"
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError(f"Clickatell {method} {path} returned invalid JSON") from exc
        if not isinstance(body, dict):
            raise TransportError(f"Clickatell {method} {path} returned a non-object body")
        return body


def _to_result(entry: dict[str, Any]) -> MessageResult:
    error = entry.get("error")
    if isinstance(error, dict):
        error = error.get("description") or str(error)
    return MessageResult(
        recipient=str(entry.get("to", "")),
        accepted=bool(entry.get("accepted", False)),
        message_id=entry.get("apiMessageId"),
        error=error,
    )


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
        return str(body["error"]["description"])
    except (ValueError, KeyError, TypeError):
        return response.text[:300]
