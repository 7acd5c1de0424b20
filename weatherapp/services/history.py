from __future__ import annotations

import logging
from typing import List, Optional

from ..entities import City
from ..storage import HistoryStore


class HistoryService:
    """Search-history operations exposed to the web layer."""

    def __init__(self, store: HistoryStore, *, logger: Optional[logging.Logger] = None) -> None:
        self.store = store
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def list_cities(self) -> List[City]:
        return self.store.list()

    def add_city(self, name: str) -> City:
        city = self.store.append(name)
        self._log.info("Added %s to search history with id %s", city.name, city.id)
        return city

    def remove_city(self, city_id: str) -> None:
        self.store.remove(city_id)
        self._log.info("Removed id %s from search history", city_id)


__all__ = ["HistoryService"]
