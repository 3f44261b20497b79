from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from ..common.datetime_utils import ensure_utc
from ..core.constants import DEFAULT_MONGO_DATABASE, DEFAULT_MONGO_TIMEOUT_MS
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass
class MongoConfig:
    uri: str
    database: str = DEFAULT_MONGO_DATABASE
    timeout_ms: int = DEFAULT_MONGO_TIMEOUT_MS


class MongoConnection:
    """Owns the MongoClient for one application instance.

    Note: MongoClient pools connections internally, so one instance is shared
    by every repository built by the container.
    """

    def __init__(self, config: MongoConfig, *, client: Optional[MongoClient] = None):
        self._config = config
        self._client = client

    def connect(self) -> "MongoConnection":
        """Open the client and ping the server; startup aborts if it is unreachable."""
        if self._client is None:
            self._client = MongoClient(
                self._config.uri,
                serverSelectionTimeoutMS=int(self._config.timeout_ms),
                tz_aware=True,
            )
        try:
            self._client.admin.command("ping")
        except PyMongoError as exc:
            raise StorageError(f"Cannot reach MongoDB: {exc}") from exc
        logger.info("Connected to MongoDB database %r", self._config.database)
        return self

    def collection(self, name: str):
        if self._client is None:
            raise StorageError("MongoDB connection is not open")
        return self._client[self._config.database][name]


@contextmanager
def mongo_errors(action: str) -> Iterator[None]:
    """Translate driver failures into StorageError so callers see one error type."""
    try:
        yield
    except PyMongoError as exc:
        logger.error("MongoDB failure while trying to %s: %s", action, exc)
        raise StorageError(f"Failed to {action}") from exc


def bson_datetime(value: datetime) -> datetime:
    """UTC ``value`` cut to the millisecond precision BSON dates store."""
    value = ensure_utc(value)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)
