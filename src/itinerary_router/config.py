"""
Configuration module for the Itinerary service.

This module handles loading environment variables and provides
centralized configuration for the HTTP server.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_WORKERS = 4
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """
    Server configuration.

    Attributes:
        host: Interface to bind.
        port: TCP port to listen on (1-65535).
        workers: Number of uvicorn worker processes.
        log_level: Root logging level name (e.g. 'INFO').
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    workers: int = DEFAULT_WORKERS
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"invalid port value: {raw}") from None
    if not 0 < port < 65536:
        raise ValueError(f"invalid port value: {raw}")
    return port


def _parse_workers(raw: str) -> int:
    try:
        workers = int(raw)
    except ValueError:
        raise ValueError(f"invalid workers value: {raw}") from None
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    return workers


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"invalid log level: {raw}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Values from a .env file are loaded first and never override
    variables already set in the process environment.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ValueError: If PORT, WORKERS or LOG_LEVEL is invalid.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        host=environ.get("HOST", DEFAULT_HOST),
        port=_parse_port(environ.get("PORT", str(DEFAULT_PORT))),
        workers=_parse_workers(environ.get("WORKERS", str(DEFAULT_WORKERS))),
        log_level=_parse_log_level(environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
