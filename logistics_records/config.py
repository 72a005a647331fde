"""Runtime configuration loaded from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(slots=True)
class Settings:
    """Settings shared by the console and HTTP front-ends."""

    log_level: str = "WARNING"
    seed_demo_data: bool = False
    app_title: str = "Logistics Records"

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        if dotenv:
            # .env is looked up from the directory the command runs in
            load_dotenv(find_dotenv(usecwd=True))
        return cls(
            log_level=os.getenv("LOGISTICS_LOG_LEVEL", "WARNING").upper(),
            seed_demo_data=_as_bool(os.getenv("LOGISTICS_SEED_DEMO"), False),
            app_title=os.getenv("LOGISTICS_APP_TITLE", "Logistics Records"),
        )


__all__ = ["Settings"]
