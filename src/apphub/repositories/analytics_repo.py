"""Analytics event repository (append-only)."""

from apphub.errors.exceptions import AppHubError
from apphub.models.analytics import AnalyticsEvent, AnalyticsSummary
from apphub.models.enums import EntityKind
from apphub.repositories.base import BaseRepository
from apphub.services.analytics import summarize


class AnalyticsRepository(BaseRepository[AnalyticsEvent]):
    kind = EntityKind.ANALYTICS_EVENT

    def update(self, record_id, partial):
        raise AppHubError("Analytics events are append-only", status_code=405)

    def delete(self, record_id):
        raise AppHubError("Analytics events are append-only", status_code=405)

    def summary(self) -> AnalyticsSummary:
        return summarize(self.list_all())
