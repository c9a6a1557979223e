"""The catalog as one explicit object: a store plus the lock that orders access to it."""

import threading

from cookbook.config import settings
from cookbook.schemas.entry import Ingredient, Recipe
from cookbook.schemas.summary import Summary
from cookbook.services.registrar import register_entry
from cookbook.services.summary import summarize_recipe
from cookbook.storage.catalog import CatalogStore


class CookbookService:
    """
    Serializes registrations against each other and against summaries, so a
    summary sees the catalog either entirely before or entirely after any entry.
    """

    def __init__(self, store: CatalogStore, detect_cycles: bool | None = None):
        self.store = store
        self.detect_cycles = settings.detect_cycles if detect_cycles is None else detect_cycles
        self._lock = threading.RLock()

    def register(self, entry: Ingredient | Recipe) -> None:
        with self._lock:
            register_entry(entry, self.store)

    def summarize(self, name: str) -> Summary:
        with self._lock:
            return summarize_recipe(name, self.store, detect_cycles=self.detect_cycles)

    def entry_count(self) -> int:
        with self._lock:
            return len(self.store)
