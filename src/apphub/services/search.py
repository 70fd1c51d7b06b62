"""Server-side app filtering.

This is a plain substring/exact-match filter. It does no ranking and no
keyword expansion; results keep the order they were given in.
"""

from collections.abc import Iterable

from apphub.models.web_app import WebApp


def filter_apps(
    apps: Iterable[WebApp],
    query: str | None = None,
    category: str | None = None,
    subcategory: str | None = None,
) -> list[WebApp]:
    """Return the active apps matching every non-empty criterion.

    Args:
        apps: Candidate apps in store order.
        query: Case-insensitive substring of ``name`` or ``description``.
            ``short_description`` is not searched.
        category: Exact, case-sensitive category name.
        subcategory: Exact, case-sensitive subcategory name.
    """
    needle = query.lower() if query else None
    matches = []
    for app in apps:
        if not app.is_active:
            continue
        if needle and not (
            needle in app.name.lower()
            or needle in (app.description or "").lower()
        ):
            continue
        if category and app.category != category:
            continue
        if subcategory and app.subcategory != subcategory:
            continue
        matches.append(app)
    return matches
