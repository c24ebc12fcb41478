"""Turn a category score distribution into a bounded confidence value."""

from __future__ import annotations

from collections.abc import Mapping

from bookcat.taxonomy.categories import DEFAULT_CATEGORY, Category

MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 0.98
SCORE_SCALE = 200.0
BASE_CEILING = 0.8
NEAR_TIE_RATIO = 0.6


def rank_categories(scores: Mapping[Category, float]) -> list[tuple[Category, float]]:
    """Order categories by score, highest first; ties keep enum order."""

    order = {category: index for index, category in enumerate(Category)}
    return sorted(scores.items(), key=lambda item: (-item[1], order[item[0]]))


def calibrate(scores: Mapping[Category, float]) -> tuple[Category, float]:
    """Return the winning category and its confidence in [0.1, 0.98].

    An empty or all-zero board falls back to the default category with the
    minimum confidence.
    """

    ranked = rank_categories(scores)
    if not ranked or ranked[0][1] <= 0:
        return DEFAULT_CATEGORY, MIN_CONFIDENCE

    top_category, top = ranked[0]
    second = ranked[1][1] if len(ranked) > 1 else 0
    margin = top - second

    confidence = min(top / SCORE_SCALE, BASE_CEILING)

    # Clear winners earn more, close races lose some.
    if margin > 40:
        confidence = min(0.98, confidence + 0.25)
    elif margin > 20:
        confidence = min(0.95, confidence + 0.15)
    elif margin < 10:
        confidence = max(MIN_CONFIDENCE, confidence - 0.2)

    if top > 120:
        confidence = min(0.98, confidence + 0.15)
    elif top > 80:
        confidence = min(0.95, confidence + 0.1)
    elif top > 50:
        confidence = min(0.9, confidence + 0.05)

    if second > top * NEAR_TIE_RATIO:
        confidence = max(MIN_CONFIDENCE, confidence - 0.15)

    return top_category, min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, confidence))
