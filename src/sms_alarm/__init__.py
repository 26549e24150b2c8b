"""SMS alarm callback: compose alert summaries and send them via Clickatell."""

__version__ = "1.0.0"
