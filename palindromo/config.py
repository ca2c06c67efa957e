"""Runtime configuration, read from the process environment.

Only the port is required by the service contract; host, log file and log
level are overridable for deployment and tests.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .rules import DEFAULT_HOST, DEFAULT_PORT, LOG_FILENAME

# relative to the working directory the service is started from
DEFAULT_LOG_PATH = Path(LOG_FILENAME)


def log_path_from_env(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    return Path(env.get("CONSULTAS_FILE") or DEFAULT_LOG_PATH).resolve()


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_path: Path = DEFAULT_LOG_PATH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Unset or empty variables fall back to defaults. A non-numeric
        ``PORT`` raises ``ValueError``.
        """
        env = os.environ if environ is None else environ
        port = env.get("PORT") or DEFAULT_PORT
        return cls(
            port=int(port),
            host=env.get("HOST") or DEFAULT_HOST,
            log_path=log_path_from_env(env),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
