"""Integration tests for the catalog editing use cases.

The store is never started, so edits change memory only and no save
timer is armed.
"""

import pytest

from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.manage_blog import DeleteBlogPostHandler, SaveBlogPostHandler
from storefront.application.notification_channel import NotificationChannel
from storefront.application.record_product_view import RecordProductViewHandler
from storefront.application.save_product import SaveProductHandler
from storefront.application.site_store import SiteStore
from storefront.application.toggle_featured import ToggleFeaturedHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.identity import millisecond_ids
from storefront.domain.model.notification import NotificationKind
from storefront.domain.model.site_data import BlogPost
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence import document_codec
from tests.fakes import (
    FakeClock,
    FakeKeyValueStore,
    FakeSiteDataRepository,
    make_product,
    make_site,
)


def _setup(site=None) -> tuple[SiteStore, NotificationChannel]:
    site = site or make_site(
        [
            make_product(id=1, name="Healthy Flax Seeds", tags=["omega-3"]),
            make_product(id=2, name="Healthy Chia Seeds", tags=["omega-3"], views=5),
            make_product(id=3, name="Curry Powder", category="Spices"),
        ],
        featured=[1],
    )
    notifications = NotificationChannel()
    store = SiteStore(
        durable=FakeSiteDataRepository(),
        legacy=FakeKeyValueStore(),
        notifications=notifications,
        legacy_decoder=document_codec.loads,
        default_factory=lambda: site,
    )
    return store, notifications


class TestSaveProduct:

    def test_create_assigns_id_and_notifies(self):
        store, notifications = _setup()
        handler = SaveProductHandler(store, notifications, millisecond_ids(FakeClock()))
        saved = handler.handle(make_product(id=0, name="Pumpkin Seeds"))
        assert saved.id == 1_700_000_000_000
        assert store.get().products[-1] == saved
        assert notifications.current.message == "Product created successfully"

    def test_update_notifies(self):
        store, notifications = _setup()
        handler = SaveProductHandler(store, notifications, millisecond_ids())
        handler.handle(make_product(id=2, name="Chia", price="9.00"))
        assert store.get().find_product(2).price == Money.of("9.00")
        assert notifications.current.message == "Product updated successfully"

    def test_invalid_product_reports_error_and_keeps_document(self):
        store, notifications = _setup()
        before = store.get()
        handler = SaveProductHandler(store, notifications, millisecond_ids())
        with pytest.raises(ValidationError):
            handler.handle(make_product(id=0, name="  "))
        assert store.get() is before
        assert notifications.current.kind is NotificationKind.ERROR
        assert notifications.current.message == "Product name is required."


class TestDeleteAndFeature:

    def test_delete_removes_and_unfeatures(self):
        store, notifications = _setup()
        DeleteProductHandler(store, notifications).handle(1)
        assert store.get().find_product(1) is None
        assert store.get().featured_product_ids == []
        assert notifications.current.message == "Product deleted successfully"

    def test_delete_unknown_raises(self):
        store, notifications = _setup()
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(store, notifications).handle(99)

    def test_toggle_featured_reports_new_state(self):
        store, _ = _setup()
        handler = ToggleFeaturedHandler(store)
        assert handler.handle(2) is True
        assert store.get().featured_product_ids == [1, 2]
        assert handler.handle(1) is False

    def test_toggle_unknown_raises(self):
        store, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            ToggleFeaturedHandler(store).handle(42)


class TestRecordView:

    def test_each_navigation_counts_once(self):
        store, _ = _setup()
        handler = RecordProductViewHandler(store)
        assert handler.handle(2) == 6
        assert handler.handle(2) == 7
        assert store.get().find_product(1).views == 0

    def test_unknown_raises(self):
        store, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            RecordProductViewHandler(store).handle(404)


class TestListProducts:

    def test_rows_mark_featured_and_from_price(self):
        site = make_site(
            [make_product(id=1, price="2.00", options=[("a", "2.00"), ("b", "4.00")]),
             make_product(id=2)],
            featured=[2],
        )
        store, _ = _setup(site)
        rows = ListProductsHandler(store).handle()
        assert [(r.id, r.price, r.from_price, r.featured) for r in rows] == [
            (1, "$2.00", True, False),
            (2, "$8.49", False, True),
        ]

    def test_related_prefers_same_category(self):
        store, _ = _setup()
        related = ListProductsHandler(store).related(1, limit=2)
        assert [r.id for r in related] == [2, 3]

    def test_related_unknown_raises(self):
        store, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            ListProductsHandler(store).related(99)


class TestBlogPosts:

    def test_create_update_delete(self):
        store, notifications = _setup()
        save = SaveBlogPostHandler(store, notifications, millisecond_ids())
        post = save.handle(BlogPost(id=0, title="Why seeds?"))
        assert notifications.current.message == "Post created successfully"
        save.handle(BlogPost(id=post.id, title="Why seeds matter"))
        assert notifications.current.message == "Post updated successfully"
        assert store.get().blog_posts[0].title == "Why seeds matter"
        DeleteBlogPostHandler(store, notifications).handle(post.id)
        assert store.get().blog_posts == []
        assert notifications.current.message == "Post deleted successfully"

    def test_blank_title_reported(self):
        store, notifications = _setup()
        with pytest.raises(ValidationError):
            SaveBlogPostHandler(store, notifications, millisecond_ids()).handle(
                BlogPost(id=0, title="")
            )
        assert notifications.current.kind is NotificationKind.ERROR
