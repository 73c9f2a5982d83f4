"""Pytest configuration and fixtures"""
import os
from pathlib import Path

import pytest

# Set test environment variables before tienda.config is imported
os.environ.setdefault("CART_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from tienda.cart import CartEngine, MemoryCartStorage
from tienda.catalog import Catalog, Product
from tienda.config import Settings


@pytest.fixture
def sample_products():
    """Small catalog: two products from the storefront plus a cheap one"""
    return [
        Product(id=1, name="Caja de galletas navideñas", price=12000,
                description="Galletas artesanales con decoraciones festivas"),
        Product(id=3, name="Tarjeta personalizada", price=6000,
                description="Tarjeta hecha a mano con mensaje"),
        Product(id=8, name="Muñeco de nieve decorativo", price=30000,
                description="Figura de mesa con detalles brillantes"),
    ]


@pytest.fixture
def catalog(sample_products):
    return Catalog(sample_products)


@pytest.fixture
def storage():
    return MemoryCartStorage()


@pytest.fixture
def engine(catalog, storage):
    return CartEngine(catalog=catalog, storage=storage, storage_key="tienda_cart")


@pytest.fixture
def settings(tmp_path: Path):
    return Settings(
        shop_name="Tienda Navideña",
        whatsapp_number="573237918080",
        currency_prefix="$",
        thousands_separator=".",
        cart_storage_key="tienda_cart",
        cart_backend="memory",
        cart_data_dir=tmp_path,
        catalog_path=None,
        redis_url="",
        redis_token="",
    )


@pytest.fixture
def client(engine, settings):
    """Test client wired to the fixture engine"""
    from fastapi.testclient import TestClient
    from tienda.app import app
    from tienda.cart import get_cart_engine
    from tienda.config import get_settings

    app.dependency_overrides[get_cart_engine] = lambda: engine
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
