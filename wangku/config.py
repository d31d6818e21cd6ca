"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from wangku.core.rates import DEFAULT_RATES_PATH

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    rates_path: Path = DEFAULT_RATES_PATH
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    log_level: str = "INFO"
    port: int = 5000


def _cors_origins(raw: Optional[str]) -> Tuple[str, ...]:
    origins = tuple(origin.strip() for origin in (raw or "").split(",") if origin.strip())
    return origins or DEFAULT_CORS_ORIGINS


def load_settings() -> Settings:
    rates_path = (os.getenv("WANGKU_RATES_PATH") or "").strip()
    port = (os.getenv("WANGKU_PORT") or "").strip()
    return Settings(
        rates_path=Path(rates_path) if rates_path else DEFAULT_RATES_PATH,
        cors_origins=_cors_origins(os.getenv("WANGKU_CORS_ORIGINS")),
        log_level=(os.getenv("WANGKU_LOG_LEVEL") or "INFO").strip().upper(),
        port=int(port) if port.isdigit() else 5000,
    )
