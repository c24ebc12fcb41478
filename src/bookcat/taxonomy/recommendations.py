"""Category suggestions driven by the static recommendation graph."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bookcat.taxonomy.categories import POPULAR_CATEGORIES, Category, parse_category
from bookcat.taxonomy.thesaurus import Thesaurus

logger = logging.getLogger(__name__)

MAX_RECOMMENDATION_LIMIT = 8
DEFAULT_RECOMMENDATION_LIMIT = MAX_RECOMMENDATION_LIMIT


def popular_categories() -> list[Category]:
    return list(POPULAR_CATEGORIES)


def _as_category(value: Category | str) -> Category | None:
    if isinstance(value, Category):
        return value
    category = parse_category(str(value))
    if category is None:
        logger.debug("Ignoring unknown category %r in recommendation request", value)
    return category


def recommendations_for(
    selected: Iterable[Category | str],
    thesaurus: Thesaurus,
    *,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> list[Category]:
    """Union of related categories for *selected*, first-seen order.

    At most *limit* entries are returned, and never more than
    ``MAX_RECOMMENDATION_LIMIT`` whatever *limit* says.
    """

    if limit < 1:
        raise ValueError("limit must be >= 1")

    suggested: dict[Category, None] = {}
    for value in selected:
        category = _as_category(value)
        if category is None:
            continue
        for related in thesaurus.related_categories(category):
            suggested.setdefault(related, None)
    return list(suggested)[: min(limit, MAX_RECOMMENDATION_LIMIT)]
