"""
Environment-backed settings.

Every setting is read lazily through a small function so tests can patch
`os.environ` without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_SEAART_BASE_URL = "https://www.seaart.ai"
DEFAULT_IPFS_STORAGE_URL = "https://api.nft.storage"
DEFAULT_IPFS_GATEWAY_URL = "https://ipfs.io/ipfs/"


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def db_pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 1)


def db_pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", 10), db_pool_min_size())


def db_command_timeout_s() -> float:
    return _env_float("DB_COMMAND_TIMEOUT_S", 30.0)


def seaart_base_url() -> str:
    return _env_str("SEAART_BASE_URL", DEFAULT_SEAART_BASE_URL)


def seaart_timeout_s() -> float:
    return _env_float("SEAART_TIMEOUT_S", 30.0)


def ipfs_storage_url() -> str:
    return _env_str("IPFS_STORAGE_URL", DEFAULT_IPFS_STORAGE_URL)


def ipfs_storage_token() -> str:
    # IPFS_STORAGE is the older name of the same token.
    return _env_str("IPFS_STORAGE_TOKEN") or _env_str("IPFS_STORAGE")


def ipfs_gateway_url() -> str:
    return _env_str("IPFS_GATEWAY_URL", DEFAULT_IPFS_GATEWAY_URL)


def ipfs_timeout_s() -> float:
    return _env_float("IPFS_TIMEOUT_S", 60.0)


def cors_allowed_origins() -> list[str]:
    raw = _env_str("CORS_ALLOWED_ORIGINS")
    if not raw:
        return ["http://localhost:5173", "http://127.0.0.1:5173"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()
