"""Lazily initialized database handle shared by every request.

Django keeps one connection object per thread and opens it on first use.
``DatabaseConnection`` sits in front of that: the first ``acquire()`` checks
that ``DATABASE_URL`` is configured and that the database answers, and every
concurrent caller waits for that single setup instead of starting its own.
A failed setup is not remembered, so the next call tries again.
"""

import logging
import threading

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections
from django.db.backends.base.base import BaseDatabaseWrapper

from events.domain.errors import ConnectionUnavailableError

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """Single-flight guard around the first database connection."""

    def __init__(self, alias: str = DEFAULT_DB_ALIAS) -> None:
        self._alias = alias
        self._lock = threading.Lock()
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    def acquire(self) -> BaseDatabaseWrapper:
        """Return the calling thread's connection, setting it up if needed.

        Raises:
            ConnectionUnavailableError: If ``DATABASE_URL`` is not set or the
                database cannot be reached.
        """
        if not self._ready:
            with self._lock:
                if not self._ready:
                    self._connect()
                    self._ready = True
        return connections[self._alias]

    def _connect(self) -> None:
        if not getattr(settings, "DATABASE_URL", ""):
            logger.error("DATABASE_URL is not set; refusing database access")
            raise ConnectionUnavailableError("DATABASE_URL is not set")

        connection = connections[self._alias]
        try:
            connection.ensure_connection()
        except (DatabaseError, ImproperlyConfigured) as exc:
            logger.error("Could not connect to database %r: %s", self._alias, exc)
            raise ConnectionUnavailableError(str(exc)) from exc
        logger.info("Connected to %s database %r", connection.vendor, self._alias)
