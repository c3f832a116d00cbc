"""
config.py
=========
Environment based settings for csscraft.
"""

import os
from dataclasses import dataclass

import logfire
from dotenv import load_dotenv

LOG_LEVELS = {'ALL', 'NOTSET', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


@dataclass
class Settings:
    """Runtime settings.

    Attributes:
        log_level: Level for the local log file, or None to skip file logging
        logfire_token: Logfire write token, or None to keep telemetry local
    """

    log_level: str | None = None
    logfire_token: str | None = None

    def __post_init__(self) -> None:
        """Validate settings after initialization.

        Raises:
            ValueError: If the log level is not a known logging level.
        """
        if self.log_level is not None and self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f'Unknown log level: {self.log_level}')

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> 'Settings':
        """Read settings from CSSCRAFT_LOG_LEVEL and LOGFIRE_TOKEN.

        Args:
            load_env_file: Load a .env file into the environment first

        Returns:
            Settings built from the environment.
        """
        if load_env_file:
            load_dotenv()

        return cls(
            log_level=os.getenv('CSSCRAFT_LOG_LEVEL') or None,
            logfire_token=os.getenv('LOGFIRE_TOKEN') or None,
        )


def configure_logfire(settings: Settings) -> bool:
    """Configure logfire, sending data only when a token is set.

    Returns:
        True if spans and logs will be sent to Logfire.
    """
    logfire.configure(
        token=settings.logfire_token,
        send_to_logfire='if-token-present',
        console=False,
        service_name='csscraft',
    )
    return settings.logfire_token is not None
