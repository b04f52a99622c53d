"""Tests for the wishlist and cookie-consent services."""

import json

from storefront.application.consent_service import ConsentService
from storefront.application.wishlist_service import WishlistService
from storefront.domain.exceptions import StorageUnavailableError
from storefront.domain.repository.key_value_store import COOKIE_CONSENT_KEY, WISHLIST_KEY
from tests.fakes import FakeKeyValueStore


class BrokenStore(FakeKeyValueStore):

    def get(self, key):
        raise StorageUnavailableError("store offline")

    def set(self, key, value):
        raise StorageUnavailableError("store offline")


class TestWishlistService:

    def test_starts_empty(self):
        assert WishlistService(FakeKeyValueStore()).ids() == []

    def test_loads_saved_ids(self):
        store = FakeKeyValueStore({WISHLIST_KEY: "[4, 1]"})
        service = WishlistService(store)
        assert service.ids() == [1, 4]
        assert service.contains(4)
        assert service.count == 2

    def test_toggle_persists_immediately(self):
        store = FakeKeyValueStore()
        service = WishlistService(store)
        assert service.toggle(7) is True
        assert json.loads(store.entries[WISHLIST_KEY]) == [7]
        assert service.toggle(7) is False
        assert json.loads(store.entries[WISHLIST_KEY]) == []
        assert store.writes == 2

    def test_survives_restart(self):
        store = FakeKeyValueStore()
        WishlistService(store).toggle(3)
        assert WishlistService(store).ids() == [3]

    def test_corrupt_value_reads_as_empty(self):
        store = FakeKeyValueStore({WISHLIST_KEY: "not json"})
        assert WishlistService(store).ids() == []

    def test_storage_failure_keeps_in_memory_state(self):
        service = WishlistService(BrokenStore())
        assert service.toggle(2) is True
        assert service.ids() == [2]


class TestConsentService:

    def test_unanswered_is_none(self):
        assert ConsentService(FakeKeyValueStore()).status() is None

    def test_accept_and_decline(self):
        store = FakeKeyValueStore()
        consent = ConsentService(store)
        consent.accept()
        assert store.entries[COOKIE_CONSENT_KEY] == "true"
        assert consent.status() is True
        consent.decline()
        assert consent.status() is False

    def test_unknown_value_is_unanswered(self):
        store = FakeKeyValueStore({COOKIE_CONSENT_KEY: "maybe"})
        assert ConsentService(store).status() is None
