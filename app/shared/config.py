from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    postgres_dsn: str
    standard_profile_name: str
    log_level: str
    cost_recompute_batch_limit: int


def get_settings() -> Settings:
    return Settings(
        postgres_dsn=_env("POSTGRES_DSN", ""),
        standard_profile_name=_env("PRICING_STANDARD_PROFILE_NAME", "Standard"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        cost_recompute_batch_limit=int(_env("COST_RECOMPUTE_BATCH_LIMIT", "0")),
    )
