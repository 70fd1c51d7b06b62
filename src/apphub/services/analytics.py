"""Aggregation over the analytics event log."""

from collections import Counter
from collections.abc import Sequence

from apphub.models.analytics import AnalyticsEvent, AnalyticsSummary, AppViewCount, CategoryViewCount

MOST_VIEWED_LIMIT = 10
RECENT_LIMIT = 20


def summarize(
    events: Sequence[AnalyticsEvent],
    most_viewed_limit: int = MOST_VIEWED_LIMIT,
    recent_limit: int = RECENT_LIMIT,
) -> AnalyticsSummary:
    """Count and group events into the dashboard summary.

    Apps are grouped by ``(app_id, app_name, app_category)`` as recorded at
    view time, so renamed or deleted apps keep their history under the
    name they had.
    """
    by_app: Counter[tuple[int | None, str, str]] = Counter(
        (event.app_id, event.app_name, event.app_category) for event in events
    )
    by_category: Counter[str] = Counter(event.app_category for event in events)

    most_viewed = [
        AppViewCount(app_id=app_id, app_name=name, app_category=category, view_count=count)
        for (app_id, name, category), count in by_app.most_common(most_viewed_limit)
    ]
    views_by_category = [
        CategoryViewCount(category=category, view_count=count)
        for category, count in by_category.most_common()
    ]
    recent = sorted(events, key=lambda event: (event.created_at, event.id), reverse=True)

    return AnalyticsSummary(
        total_views=len(events),
        most_viewed_apps=most_viewed,
        views_by_category=views_by_category,
        recent_views=recent[:recent_limit],
    )
