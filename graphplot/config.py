"""Centralized configuration for the graphplot service.

Environment variables
---------------------
GRAPHPLOT_LOG_LEVEL: Logging verbosity (default: INFO)
  Values: DEBUG, INFO, WARNING, ERROR, CRITICAL
GRAPHPLOT_MAX_POINTS: Upper bound on samples per expression (default: 10000)
  Protects the sampler from ranges such as xMin=-1e9, xMax=1e9, step=0.001.
GRAPHPLOT_THEME: Default colour palette for chart datasets (default: neon)
GRAPHPLOT_CACHE_SIZE: Entries kept by the chart pipeline memo (default: 128)
GRAPHPLOT_WEB_HOST: Web server bind address (default: 0.0.0.0)
GRAPHPLOT_WEB_PORT: Web server port (default: 8020)
"""

import logging
import os

from graphplot.exceptions import ConfigurationError

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_POINTS = 10000
DEFAULT_THEME = "neon"
DEFAULT_CACHE_SIZE = 128
DEFAULT_WEB_HOST = "0.0.0.0"
DEFAULT_WEB_PORT = 8020

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _read_positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(
            code="INVALID_CONFIG",
            message=f"{name} must be an integer, got '{raw}'",
            details={"variable": name, "value": raw},
        )
    if value <= 0:
        raise ConfigurationError(
            code="INVALID_CONFIG",
            message=f"{name} must be positive, got {value}",
            details={"variable": name, "value": raw},
        )
    return value


class Config:
    """Environment-backed settings. Values are read on every call."""

    @classmethod
    def get_log_level_name(cls) -> str:
        return os.environ.get("GRAPHPLOT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

    @classmethod
    def get_log_level(cls) -> int:
        name = cls.get_log_level_name()
        if name not in _LOG_LEVELS:
            raise ConfigurationError(
                code="INVALID_CONFIG",
                message=f"Unknown log level '{name}'",
                details={"variable": "GRAPHPLOT_LOG_LEVEL", "allowed": list(_LOG_LEVELS)},
            )
        return _LOG_LEVELS[name]

    @classmethod
    def get_max_points(cls) -> int:
        return _read_positive_int("GRAPHPLOT_MAX_POINTS", DEFAULT_MAX_POINTS)

    @classmethod
    def get_cache_size(cls) -> int:
        return _read_positive_int("GRAPHPLOT_CACHE_SIZE", DEFAULT_CACHE_SIZE)

    @classmethod
    def get_theme(cls) -> str:
        return os.environ.get("GRAPHPLOT_THEME", DEFAULT_THEME).strip().lower() or DEFAULT_THEME

    @classmethod
    def get_web_host(cls) -> str:
        return os.environ.get("GRAPHPLOT_WEB_HOST", DEFAULT_WEB_HOST)

    @classmethod
    def get_web_port(cls) -> int:
        return _read_positive_int("GRAPHPLOT_WEB_PORT", DEFAULT_WEB_PORT)


def get_config_summary() -> dict:
    """Get a summary of current configuration from environment."""
    return {
        "log_level": Config.get_log_level_name(),
        "max_points": Config.get_max_points(),
        "theme": Config.get_theme(),
        "cache_size": Config.get_cache_size(),
        "web_host": Config.get_web_host(),
        "web_port": Config.get_web_port(),
    }
