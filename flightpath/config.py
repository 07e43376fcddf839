"""Application-wide configuration and settings.

Uses ``pydantic-settings`` so values can be overridden via environment
variables prefixed with ``FLIGHTPATH_``.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global settings for the Flightpath service.

    Attributes:
        app_name: Display name of the application.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Render log lines as JSON instead of console output.
        host: Interface the HTTP server binds to.
        port: TCP port the HTTP server listens on.
        reload: Restart the server when source files change (development).
    """

    app_name: str = "Flightpath"
    log_level: str = "INFO"
    log_json: bool = False

    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    model_config = {"env_prefix": "FLIGHTPATH_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
