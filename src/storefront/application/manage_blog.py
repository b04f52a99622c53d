"""Application services: Save and Delete Blog Post use cases."""

from __future__ import annotations

from storefront.application.notification_channel import NotificationChannel
from storefront.application.site_store import SiteStore
from storefront.domain.exceptions import DomainException
from storefront.domain.model.identity import MonotonicIdGenerator
from storefront.domain.model.site_data import BlogPost, SiteData
from storefront.domain.service import catalog_service


class SaveBlogPostHandler:

    def __init__(
        self,
        store: SiteStore,
        notifications: NotificationChannel,
        ids: MonotonicIdGenerator,
    ) -> None:
        self._store = store
        self._notifications = notifications
        self._ids = ids

    def handle(self, post: BlogPost) -> BlogPost:
        saved: list[BlogPost] = []

        def apply(site_data: SiteData) -> SiteData:
            updated, post_saved = catalog_service.upsert_blog_post(site_data, post, self._ids)
            saved.append(post_saved)
            return updated

        try:
            self._store.set(apply)
        except DomainException as exc:
            self._notifications.error(str(exc))
            raise

        if post.id == catalog_service.NEW_RECORD_ID:
            self._notifications.show("Post created successfully")
        else:
            self._notifications.show("Post updated successfully")
        return saved[0]


class DeleteBlogPostHandler:

    def __init__(self, store: SiteStore, notifications: NotificationChannel) -> None:
        self._store = store
        self._notifications = notifications

    def handle(self, post_id: int) -> None:
        self._store.set(lambda site: catalog_service.delete_blog_post(site, post_id))
        self._notifications.show("Post deleted successfully")
