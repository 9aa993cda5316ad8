"""
Immutable, name-indexed status catalogs.

Each catalog is a read-only snapshot of one status table taken when the
catalogs are loaded. ``status_catalogs`` is a lazy singleton: nothing touches
the database until the first lookup, and saving or deleting a status row marks
the snapshot stale (see ``statuses.signals``) so the next lookup reloads it.
"""
import logging
import threading
from types import MappingProxyType
from typing import Optional

from core_backend.exceptions import StatusNotFoundError

logger = logging.getLogger(__name__)


class StatusCatalog:
    """A frozen name -> status row mapping for one domain."""

    def __init__(self, domain: str, entries):
        self.domain = domain
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_model(cls, domain: str, model) -> "StatusCatalog":
        return cls(domain, ((row.name, row) for row in model.objects.all()))

    @property
    def entries(self):
        return self._entries

    def names(self):
        return frozenset(self._entries)

    def get(self, name: Optional[str]):
        if name is None:
            return None
        return self._entries.get(name.strip())

    def lookup(self, name: Optional[str]):
        """Return the row for ``name`` or raise StatusNotFoundError. Never substitutes a default."""
        entry = self.get(name)
        if entry is None:
            raise StatusNotFoundError(catalog=self.domain, name=name)
        return entry

    def __contains__(self, name):
        return isinstance(name, str) and name.strip() in self._entries

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f"<StatusCatalog {self.domain}: {sorted(self._entries)}>"


class StatusCatalogs:
    """
    Lazy singleton holding the order, table and reservation catalogs.

    Loading is deferred to the first access so management commands such as
    ``migrate`` can run before the status tables exist.
    """

    _instance: Optional["StatusCatalogs"] = None

    def __new__(cls) -> "StatusCatalogs":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._lock = threading.Lock()
            instance._catalogs = None
            cls._instance = instance
        return cls._instance

    def _load(self):
        from .models import OrderStatus, ReservationStatus, TableStatus

        catalogs = {
            "orders": StatusCatalog.from_model("order", OrderStatus),
            "tables": StatusCatalog.from_model("table", TableStatus),
            "reservations": StatusCatalog.from_model("reservation", ReservationStatus),
        }
        logger.debug(
            "Status catalogs loaded: %s",
            ", ".join(f"{key}={len(catalog)}" for key, catalog in catalogs.items()),
        )
        return catalogs

    def _get(self, key: str) -> StatusCatalog:
        catalogs = self._catalogs
        if catalogs is None:
            with self._lock:
                if self._catalogs is None:
                    self._catalogs = self._load()
                catalogs = self._catalogs
        return catalogs[key]

    @property
    def orders(self) -> StatusCatalog:
        return self._get("orders")

    @property
    def tables(self) -> StatusCatalog:
        return self._get("tables")

    @property
    def reservations(self) -> StatusCatalog:
        return self._get("reservations")

    @property
    def is_loaded(self) -> bool:
        return self._catalogs is not None

    def invalidate(self) -> None:
        """Drop the current snapshot; the next lookup reloads from the database."""
        self._catalogs = None

    def reload(self) -> None:
        catalogs = self._load()
        with self._lock:
            self._catalogs = catalogs


status_catalogs = StatusCatalogs()
