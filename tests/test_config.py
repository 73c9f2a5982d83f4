"""Tests for settings loading"""
from pathlib import Path

import pytest

from tienda.config import load_settings

ENV_KEYS = (
    "SHOP_NAME", "WHATSAPP_NUMBER", "CURRENCY_PREFIX", "THOUSANDS_SEPARATOR",
    "CART_STORAGE_KEY", "CART_BACKEND", "CART_DATA_DIR", "CATALOG_PATH",
    "UPSTASH_REDIS_REST_URL", "UPSTASH_REDIS_REST_TOKEN", "LOG_LEVEL", "TIENDA_ENV",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = load_settings()

    assert settings.shop_name == "Tienda Navideña"
    assert settings.whatsapp_number == "573237918080"
    assert settings.currency_prefix == "$"
    assert settings.thousands_separator == "."
    assert settings.cart_storage_key == "tienda_cart"
    assert settings.cart_backend == "auto"
    assert settings.resolved_cart_backend == "file"
    assert settings.catalog_path is None
    assert settings.log_level == "INFO"
    assert not settings.is_production


def test_overrides(clean_env, tmp_path):
    clean_env.setenv("SHOP_NAME", "Mi Tienda")
    clean_env.setenv("CART_BACKEND", "REDIS")
    clean_env.setenv("CART_DATA_DIR", str(tmp_path))
    clean_env.setenv("CATALOG_PATH", str(tmp_path / "catalog.json"))

    settings = load_settings()

    assert settings.shop_name == "Mi Tienda"
    assert settings.cart_backend == "redis"
    assert settings.cart_data_dir == tmp_path
    assert settings.catalog_path == Path(tmp_path / "catalog.json")


def test_blank_values_fall_back_to_defaults(clean_env):
    clean_env.setenv("CURRENCY_PREFIX", "   ")
    assert load_settings().currency_prefix == "$"


def test_auto_backend_prefers_redis_with_credentials(clean_env):
    clean_env.setenv("UPSTASH_REDIS_REST_URL", "https://example.upstash.io")
    clean_env.setenv("UPSTASH_REDIS_REST_TOKEN", "token")
    assert load_settings().resolved_cart_backend == "redis"


def test_unknown_backend_rejected(clean_env):
    clean_env.setenv("CART_BACKEND", "sqlite")
    with pytest.raises(RuntimeError):
        load_settings()


def test_log_settings(clean_env):
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("TIENDA_ENV", "Production")

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.is_production
