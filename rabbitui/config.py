"""Application-wide settings."""

from dataclasses import dataclass


@dataclass
class AppConfig:
    """Runtime settings for the application.

    ``update_rate`` is the pause between data refreshes, in milliseconds.
    """

    update_rate: int = 2_000