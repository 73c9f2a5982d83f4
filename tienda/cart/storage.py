"""
Key-value storage backends for the persisted cart slot.

Every backend stores plain strings under a named key and raises
CartStorageError when the medium fails.
"""
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from tienda.db import get_redis, RedisKeys
from tienda.errors import CartStorageError, ERROR_STORAGE_UNAVAILABLE
from tienda.logging import get_logger

logger = get_logger(__name__)


class CartStorage(Protocol):
    def read(self, key: str) -> Optional[str]: ...

    def write(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryCartStorage:
    """Process-local storage; survives nothing but the current process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileCartStorage:
    """One UTF-8 file per key inside a data directory."""

    _SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{self._SAFE_KEY.sub('_', key)}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise CartStorageError(f"{ERROR_STORAGE_UNAVAILABLE}: {e}") from e

    def write(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            # Atomic swap through a sibling temp file
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".cart-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise CartStorageError(f"{ERROR_STORAGE_UNAVAILABLE}: {e}") from e

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            raise CartStorageError(f"{ERROR_STORAGE_UNAVAILABLE}: {e}") from e


class RedisCartStorage:
    """
    Upstash Redis storage.

    Keys carry no TTL: a cart only disappears when the user clears it or the
    slot is deleted externally.
    """

    def __init__(self, redis=None):
        self._redis = redis  # Lazy initialization

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            try:
                self._redis = get_redis()
            except ValueError as e:
                raise CartStorageError(f"Redis not available: {e}") from e
        return self._redis

    def read(self, key: str) -> Optional[str]:
        try:
            return self.redis.get(RedisKeys.cart_key(key))
        except CartStorageError:
            raise
        except Exception as e:
            raise CartStorageError(f"{ERROR_STORAGE_UNAVAILABLE}: {e}") from e

    def write(self, key: str, value: str) -> None:
        try:
            self.redis.set(RedisKeys.cart_key(key), value)
        except CartStorageError:
            raise
        except Exception as e:
            raise CartStorageError(f"{ERROR_STORAGE_UNAVAILABLE}: {e}") from e

    def delete(self, key: str) -> None:
        try:
            self.redis.delete(RedisKeys.cart_key(key))
        except CartStorageError:
            raise
        except Exception as e:
            raise CartStorageError(f"{ERROR_STORAGE_UNAVAILABLE}: {e}") from e


def create_cart_storage(settings=None) -> CartStorage:
    """Build the backend selected by CART_BACKEND."""
    if settings is None:
        from tienda.config import get_settings
        settings = get_settings()

    backend = settings.resolved_cart_backend
    logger.info(f"Using {backend} cart storage")
    if backend == "redis":
        return RedisCartStorage()
    if backend == "memory":
        return MemoryCartStorage()
    return FileCartStorage(settings.cart_data_dir)
