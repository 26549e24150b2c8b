from pydantic_settings import BaseSettings, SettingsConfigDict


class AlarmSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SMS_ALARM_")

    log_level: str = "INFO"
    send_attempts: int = 1
    retry_backoff_seconds: list[int] = [5, 30]


class GatewaySettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CLICKATELL_")

    base_url: str = "https://api.clickatell.com/rest"
    api_version: str = "1"
    timeout_seconds: float = 10.0
