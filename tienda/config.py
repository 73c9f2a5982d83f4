"""Application settings loaded from the environment (and an optional .env file)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]

CART_BACKENDS = ("auto", "redis", "file", "memory")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


@dataclass(frozen=True)
class Settings:
    shop_name: str
    whatsapp_number: str
    currency_prefix: str
    thousands_separator: str
    cart_storage_key: str
    cart_backend: str
    cart_data_dir: Path
    catalog_path: Path | None
    redis_url: str
    redis_token: str
    log_level: str = "INFO"
    environment: str = "development"

    @property
    def has_redis(self) -> bool:
        return bool(self.redis_url and self.redis_token)

    @property
    def resolved_cart_backend(self) -> str:
        """Backend actually used; "auto" picks Redis when credentials exist."""
        if self.cart_backend != "auto":
            return self.cart_backend
        return "redis" if self.has_redis else "file"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def load_settings() -> Settings:
    load_dotenv(dotenv_path=ROOT_DIR / ".env")

    backend = (_get_env("CART_BACKEND", default="auto") or "auto").lower()
    if backend not in CART_BACKENDS:
        raise RuntimeError(
            f"CART_BACKEND must be one of {', '.join(CART_BACKENDS)}, got {backend!r}"
        )

    catalog_path = _get_env("CATALOG_PATH")

    return Settings(
        shop_name=_get_env("SHOP_NAME", default="Tienda Navideña") or "Tienda Navideña",
        whatsapp_number=_get_env("WHATSAPP_NUMBER", default="573237918080") or "",
        currency_prefix=_get_env("CURRENCY_PREFIX", default="$") or "$",
        thousands_separator=_get_env("THOUSANDS_SEPARATOR", default=".") or ".",
        cart_storage_key=_get_env("CART_STORAGE_KEY", default="tienda_cart") or "tienda_cart",
        cart_backend=backend,
        cart_data_dir=Path(
            _get_env("CART_DATA_DIR", default=str(Path.home() / ".tienda")) or ""
        ).expanduser(),
        catalog_path=Path(catalog_path).expanduser() if catalog_path else None,
        redis_url=_get_env("UPSTASH_REDIS_REST_URL", default="") or "",
        redis_token=_get_env("UPSTASH_REDIS_REST_TOKEN", default="") or "",
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
        environment=(_get_env("TIENDA_ENV", default="development") or "development").lower(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get Settings singleton (cached until get_settings.cache_clear())."""
    return load_settings()
