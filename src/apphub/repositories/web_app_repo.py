"""WebApp repository."""

import logging

from apphub.models.enums import EntityKind
from apphub.models.web_app import WebApp
from apphub.repositories.base import BaseRepository
from apphub.services.search import filter_apps

logger = logging.getLogger(__name__)


class WebAppRepository(BaseRepository[WebApp]):
    kind = EntityKind.WEB_APP

    def list_active(self) -> list[WebApp]:
        return filter_apps(self.list_all())

    def search(
        self,
        query: str | None = None,
        category: str | None = None,
        subcategory: str | None = None,
    ) -> list[WebApp]:
        return filter_apps(self.list_all(), query, category, subcategory)

    def reorder(self, reordered_ids: list[int]) -> int:
        """Set each listed app's ``sort_order`` to its position in the list.

        IDs with no matching app are ignored and unlisted apps keep their
        current ``sort_order``. The whole batch is persisted once.

        Returns:
            Number of apps updated.
        """
        updated = 0
        with self.store.batch():
            for position, app_id in enumerate(reordered_ids):
                if self.store.update(self.kind, app_id, {"sort_order": position}) is not None:
                    updated += 1
        if updated < len(reordered_ids):
            logger.info("Reorder ignored %d unknown app ids", len(reordered_ids) - updated)
        return updated
