import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_BASE_URL = "http://localhost:8000/api"
DEFAULT_API_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    api_timeout: float
    api_token: Optional[str]
    log_level: str


def _read_timeout(raw: Optional[str]) -> float:
    if raw is None or raw.strip() == "":
        return DEFAULT_API_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"API_TIMEOUT inválido: {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"API_TIMEOUT deve ser positivo: {raw!r}")
    return timeout


def get_settings() -> Settings:
    """Lê a configuração das variáveis de ambiente (mesmo esquema do DATABASE_URL)."""
    base_url = os.environ.get("API_BASE_URL") or DEFAULT_API_BASE_URL
    token = os.environ.get("API_TOKEN") or None
    return Settings(
        api_base_url=base_url.rstrip("/"),
        api_timeout=_read_timeout(os.environ.get("API_TIMEOUT")),
        api_token=token,
        log_level=(os.environ.get("LOG_LEVEL") or "INFO").upper(),
    )
