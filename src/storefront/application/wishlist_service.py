"""Application service: the shopper's wishlist.

The list is tiny, so it is written straight to the key-value store on
every toggle rather than going through the debounced document save.
"""

from __future__ import annotations

import json
import logging

from storefront.domain.exceptions import StorageError
from storefront.domain.model.wishlist import Wishlist
from storefront.domain.repository.key_value_store import WISHLIST_KEY, KeyValueStore

logger = logging.getLogger(__name__)


class WishlistService:

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self._wishlist = self._load()

    @property
    def wishlist(self) -> Wishlist:
        return self._wishlist

    def ids(self) -> list[int]:
        return self._wishlist.ids()

    @property
    def count(self) -> int:
        return len(self._wishlist)

    def contains(self, product_id: int) -> bool:
        return product_id in self._wishlist

    def toggle(self, product_id: int) -> bool:
        """Flip membership of *product_id*; return True if it is now saved."""
        self._wishlist = self._wishlist.toggle(product_id)
        self._persist()
        return product_id in self._wishlist

    def _load(self) -> Wishlist:
        try:
            raw = self._store.get(WISHLIST_KEY)
        except StorageError as exc:
            logger.error("Error loading wishlist: %s", exc)
            return Wishlist()
        if raw is None:
            return Wishlist()
        try:
            ids = json.loads(raw)
            return Wishlist.of([int(i) for i in ids])
        except (json.JSONDecodeError, TypeError, ValueError) as exc:
            logger.error("Error loading wishlist: %s", exc)
            return Wishlist()

    def _persist(self) -> None:
        try:
            self._store.set(WISHLIST_KEY, json.dumps(self._wishlist.ids()))
        except StorageError as exc:
            logger.error("Error saving wishlist: %s", exc)
