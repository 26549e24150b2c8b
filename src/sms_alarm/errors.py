"""Exception hierarchy for the alarm callback.

Configuration errors are raised while the adapter initializes and keep it
inactive. Event precondition and gateway errors belong to a single alert
and never change the adapter state.
"""


class AlarmCallbackError(Exception):
    """Base class for every error raised by this package."""


# -- configuration ---------------------------------------------------------


class ConfigError(AlarmCallbackError):
    """Raw configuration could not be turned into an AdapterConfig."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        self.message = message
        super().__init__(f"{key}: Parameter validation FAILED. {message}")


class MissingAuthToken(ConfigError):
    def __init__(self) -> None:
        super().__init__("auth_token", "Value cannot be null or empty.")


class NoRecipients(ConfigError):
    def __init__(self) -> None:
        super().__init__("recipients", "You have to specify at least one recipient.")


class InvalidLimit(ConfigError):
    """A numeric limit was negative."""

    def __init__(self, key: str, value: int) -> None:
        self.value = value
        super().__init__(
            key, f"Field must be equal or greater than zero, got {value}."
        )


class InvalidMaxLength(InvalidLimit):
    def __init__(self, value: int) -> None:
        super().__init__("max_length", value)


class InvalidMaxCredits(InvalidLimit):
    def __init__(self, value: int) -> None:
        super().__init__("max_credits", value)


class InvalidMaxParts(InvalidLimit):
    def __init__(self, value: int) -> None:
        super().__init__("max_parts", value)


class RemoteVerificationFailed(ConfigError):
    """Balance or coverage check against the gateway failed."""

    def __init__(self, reason: str) -> None:
        super().__init__("auth_token", f"Gateway verification failed: {reason}")


# -- per event -------------------------------------------------------------


class EventPreconditionError(AlarmCallbackError):
    """An alert event cannot be turned into a message."""


class MissingStreamTitle(EventPreconditionError):
    def __init__(self) -> None:
        super().__init__(
            "stream_title: Parameter validation FAILED. Value cannot be null or empty."
        )


# -- gateway ---------------------------------------------------------------


class GatewayError(AlarmCallbackError):
    """Raised by SMS gateway implementations."""


class TransportError(GatewayError):
    """Network failure, timeout or unexpected gateway response."""


class AuthError(GatewayError):
    """The gateway rejected the auth token."""
