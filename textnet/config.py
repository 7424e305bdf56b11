"""
Runtime settings, read from the environment.

A `.env` file in the working directory is loaded first (python-dotenv), so
settings can live there instead of being exported by hand.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

_TRUE = {"1", "true", "yes", "on"}


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUE


@dataclass(frozen=True)
class Settings:
    verbose: bool = False
    log_level: str = "WARNING"
    host: str = "127.0.0.1"
    port: int = 3001

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            verbose=_flag(env.get("TEXTNET_VERBOSE")),
            log_level=env.get("TEXTNET_LOG_LEVEL", cls.log_level).upper(),
            host=env.get("TEXTNET_HOST", cls.host),
            port=int(env.get("TEXTNET_PORT", cls.port)),
        )


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    load_dotenv(dotenv_path)
    return Settings.from_env()
