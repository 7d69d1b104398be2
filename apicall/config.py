from __future__ import annotations

import os

from pydantic import BaseModel, Field


def env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    try:
        return int(v.strip())
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    try:
        return float(v.strip())
    except ValueError:
        return default


def env_str(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


class Settings(BaseModel):
    # Feeds
    diesel_url: str = Field(
        default_factory=lambda: env_str("APICALL_DIESEL_URL", "https://opgaver.mercantec.tech/Opgaver/Diesel")
    )
    gas_url: str = Field(
        default_factory=lambda: env_str("APICALL_GAS_URL", "https://opgaver.mercantec.tech/Opgaver/Miles95")
    )
    trivia_url: str = Field(default_factory=lambda: env_str("APICALL_TRIVIA_URL", "https://opentdb.com/api.php"))

    # HTTP
    timeout_seconds: float = Field(default_factory=lambda: env_float("APICALL_TIMEOUT", 20.0))
    user_agent: str = Field(default_factory=lambda: env_str("APICALL_USER_AGENT", "apicall/1.0"))

    # Trivia
    trivia_amount: int = Field(default_factory=lambda: env_int("APICALL_TRIVIA_AMOUNT", 10))

    # Debug
    log_level: str = Field(default_factory=lambda: env_str("LOG_LEVEL", "INFO"))


def load_settings() -> Settings:
    return Settings()
