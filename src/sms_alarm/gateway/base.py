"""Abstract SMS gateway interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MessageResult:
    """Outcome of a send for one recipient."""

    recipient: str
    accepted: bool
    message_id: str | None = None
    error: str | None = None


class SMSGateway(ABC):
    """Operations the alarm callback needs from an SMS gateway.

    The auth token is bound when the gateway is constructed. All calls block
    and none of them retries.
    """

    @abstractmethod
    def send_message(
        self,
        recipients: Sequence[str],
        text: str,
        max_credits: int = 0,
        max_parts: int = 0,
    ) -> list[MessageResult]:
        """Send *text* to every recipient.

        A limit of 0 leaves the gateway default in place. Raises
        TransportError on network failure and AuthError when the token is
        rejected.
        """

    @abstractmethod
    def get_balance(self) -> float:
        """Return the account balance in credits."""

    @abstractmethod
    def get_coverage(self, recipient: str) -> bool:
        """Return whether messages to *recipient* can be routed."""

    def close(self) -> None:
        """Release any underlying resources."""
