"""Plugin metadata shown by the host in its list of installed plugins."""

from dataclasses import dataclass

from sms_alarm import __version__


@dataclass(frozen=True, slots=True)
class PluginMetadata:
    unique_id: str
    name: str
    author: str
    url: str
    version: str
    description: str
    required_version: str


PLUGIN_METADATA = PluginMetadata(
    unique_id="sms_alarm.SMSAlarmCallback",
    name="SMS AlarmCallback (Clickatell)",
    author="sms-alarm maintainers",
    url="https://www.clickatell.com",
    version=__version__,
    description="Sends short messages (SMS) via Clickatell when an alert condition triggers",
    required_version="1.0.0",
)
