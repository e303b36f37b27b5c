"""
In‑memory entity store.

``DataStore`` owns one ordered list of entities per collection.  It is
the only holder of the stored objects: every read hands out deep
copies, and in‑place changes go through ``mutate`` so that validation
(e.g. the trust score range) always runs against the stored record.

All operations take a single store‑wide re‑entrant lock, which makes
each of them atomic with respect to the others when the ASGI server
runs sync dependencies or services from a thread pool.

Lifecycle: ``DataStore()`` → ``ensure_seeded()`` → serve requests →
``reset()`` (tests only).
"""

import copy
import logging
import threading
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from fastapi import Request

from ..schemas.entity import Entity
from .errors import DuplicateIdError

logger = logging.getLogger(__name__)

DEVICES = "devices"
SESSIONS = "sessions"
SECURITY_EVENTS = "security_events"
AUDIT_LOGS = "audit_logs"
WALLET_LEDGER = "wallet_ledger"
USERS = "users"
PROVIDERS = "providers"
ORDERS = "orders"
TICKETS = "tickets"
PAYMENTS = "payments"
FEATURE_FLAGS = "feature_flags"

COLLECTIONS = (
    USERS,
    PROVIDERS,
    ORDERS,
    TICKETS,
    PAYMENTS,
    WALLET_LEDGER,
    AUDIT_LOGS,
    SECURITY_EVENTS,
    SESSIONS,
    DEVICES,
    FEATURE_FLAGS,
)

SeedFactory = Callable[[], Mapping[str, Iterable[Entity]]]


class DataStore:
    """Named, insertion‑ordered collections of entities."""

    def __init__(
        self,
        seed: Optional[SeedFactory] = None,
        collections: Sequence[str] = COLLECTIONS,
    ) -> None:
        if seed is None:
            from .seed import build_seed_data

            seed = build_seed_data
        self._seed = seed
        self._lock = threading.RLock()
        self._collections: Dict[str, List[Entity]] = {name: [] for name in collections}

    def _collection(self, name: str) -> List[Entity]:
        try:
            return self._collections[name]
        except KeyError:
            raise KeyError(f"Unknown collection: {name}") from None

    @staticmethod
    def _index_of(items: List[Entity], entity_id: str) -> int:
        for index, entity in enumerate(items):
            if entity.id == entity_id:
                return index
        return -1

    @property
    def collection_names(self) -> List[str]:
        return list(self._collections)

    def is_empty(self) -> bool:
        with self._lock:
            return not any(self._collections.values())

    def ensure_seeded(self) -> bool:
        """Populate every collection from the seed factory if the store is empty.

        Returns ``True`` when seeding happened and ``False`` when the
        store already held data.  Seeding is all or nothing: if the
        factory or an insert fails, the store is emptied again and the
        error propagates, since the process cannot serve requests
        without its baseline data.
        """
        with self._lock:
            if not self.is_empty():
                return False
            try:
                for name, entities in self._seed().items():
                    for entity in entities:
                        self.append(name, entity)
            except Exception:
                logger.exception("Seeding the data store failed")
                self.reset()
                raise
            logger.info(
                "Seeded data store: %s",
                ", ".join(f"{name}={len(items)}" for name, items in self._collections.items()),
            )
            return True

    def reset(self) -> None:
        """Drop every entity.  Used by tests to restart the lifecycle."""
        with self._lock:
            for items in self._collections.values():
                items.clear()

    def count(self, name: str) -> int:
        with self._lock:
            return len(self._collection(name))

    def all(self, name: str) -> List[Entity]:
        """Return a snapshot of a collection in insertion order."""
        with self._lock:
            return copy.deepcopy(self._collection(name))

    def find_by_id(self, name: str, entity_id: str) -> Optional[Entity]:
        with self._lock:
            items = self._collection(name)
            index = self._index_of(items, entity_id)
            if index < 0:
                return None
            return items[index].model_copy(deep=True)

    def append(self, name: str, entity: Entity) -> Entity:
        """Insert ``entity`` at the end of a collection.

        Raises ``DuplicateIdError`` if the id is already taken.  The
        store keeps its own copy; the returned value is another copy.
        """
        with self._lock:
            items = self._collection(name)
            if self._index_of(items, entity.id) >= 0:
                raise DuplicateIdError(f"Duplicate id {entity.id!r} in {name}")
            stored = entity.model_copy(deep=True)
            items.append(stored)
            return stored.model_copy(deep=True)

    def remove_by_id(self, name: str, entity_id: str) -> bool:
        with self._lock:
            items = self._collection(name)
            index = self._index_of(items, entity_id)
            if index < 0:
                return False
            del items[index]
            return True

    def mutate(
        self,
        name: str,
        entity_id: str,
        mutator: Callable[[Entity], None],
    ) -> Optional[Entity]:
        """Apply ``mutator`` to a stored entity and return the updated copy.

        The mutator works on a working copy which replaces the stored
        record only if it completes, so a failing mutator (including a
        validation error on assignment) leaves the entity unchanged.
        Returns ``None`` if no entity has the given id.
        """
        with self._lock:
            items = self._collection(name)
            index = self._index_of(items, entity_id)
            if index < 0:
                return None
            working = items[index].model_copy(deep=True)
            mutator(working)
            items[index] = working
            return working.model_copy(deep=True)


def get_store(request: Request) -> DataStore:
    """FastAPI dependency returning the application's seeded store."""
    store: DataStore = request.app.state.store
    store.ensure_seeded()
    return store
