"""Weighted keyword scoring with cross-category corrections."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from bookcat.taxonomy.categories import Category
from bookcat.taxonomy.matching import count_whole_word
from bookcat.taxonomy.thesaurus import KeywordSet, Thesaurus
from bookcat.taxonomy.vocabulary import (
    BUSINESS_FLAG_VOCABULARY,
    GUIDE_STYLE_VOCABULARY,
    PSYCHOLOGY_FLAG_VOCABULARY,
    TECH_FLAG_VOCABULARY,
)

ScoreBoard = dict[Category, int]


@dataclass(frozen=True, slots=True)
class KeywordWeights:
    primary: int
    secondary: int
    negative: int


TITLE_WEIGHTS = KeywordWeights(primary=15, secondary=8, negative=10)
DOCUMENT_WEIGHTS = KeywordWeights(primary=8, secondary=3, negative=4)

TITLE_NAME_BONUS = 50
DESCRIPTION_NAME_BONUS = 25
NAME_WORD_BONUS = 5
NAME_WORD_MIN_LENGTH = 5
STRONG_INDICATOR_BONUS = 30


def _keyword_total(text: str, keywords: KeywordSet, weights: KeywordWeights) -> int:
    total = 0
    for phrase in keywords.primary:
        total += count_whole_word(text, phrase) * weights.primary
    for phrase in keywords.secondary:
        total += count_whole_word(text, phrase) * weights.secondary
    for phrase in keywords.negative:
        total -= count_whole_word(text, phrase) * weights.negative
    return total


def keyword_scores(title: str, description: str, thesaurus: Thesaurus) -> ScoreBoard:
    """Score every category from title and description alone, before corrections."""

    title_lower = (title or "").lower()
    description_lower = (description or "").lower()
    text = f"{title_lower} {description_lower}"

    scores: ScoreBoard = {}
    for category in Category:
        name = category.value.lower()
        score = _keyword_total(text, thesaurus.keyword_set(category), TITLE_WEIGHTS)

        if name in title_lower:
            score += TITLE_NAME_BONUS
        if name in description_lower:
            score += DESCRIPTION_NAME_BONUS

        for word in name.split(" "):
            if len(word) >= NAME_WORD_MIN_LENGTH and word in text:
                score += NAME_WORD_BONUS

        if any(indicator in title_lower for indicator in thesaurus.strong_indicators_for(category)):
            score += STRONG_INDICATOR_BONUS

        scores[category] = max(0, score)
    return scores


@dataclass(frozen=True, slots=True)
class ScoreShift:
    category: Category
    delta: int
    requires: re.Pattern[str] | None = None


@dataclass(frozen=True, slots=True)
class CrossCategoryAdjustment:
    """A whole-text correction for known lexical overlap between categories."""

    name: str
    trigger: re.Pattern[str]
    shifts: tuple[ScoreShift, ...]


# Applied in order after the keyword pass; the business rule reads the
# technology flag, so reordering changes outcomes.
CROSS_CATEGORY_ADJUSTMENTS: tuple[CrossCategoryAdjustment, ...] = (
    CrossCategoryAdjustment(
        name="technology",
        trigger=TECH_FLAG_VOCABULARY,
        shifts=(
            ScoreShift(Category.TECHNOLOGY, 60),
            ScoreShift(Category.TRAVEL, -80),
        ),
    ),
    CrossCategoryAdjustment(
        name="business",
        trigger=BUSINESS_FLAG_VOCABULARY,
        shifts=(
            ScoreShift(Category.BUSINESS, 60),
            ScoreShift(Category.TECHNOLOGY, -20, requires=TECH_FLAG_VOCABULARY),
        ),
    ),
    CrossCategoryAdjustment(
        name="psychology",
        trigger=PSYCHOLOGY_FLAG_VOCABULARY,
        shifts=(
            ScoreShift(Category.PSYCHOLOGY, 55),
            ScoreShift(Category.SELF_HELP, 25, requires=GUIDE_STYLE_VOCABULARY),
            ScoreShift(Category.TRAVEL, -70),
        ),
    ),
)


def apply_adjustments(
    scores: Mapping[Category, int],
    text: str,
    adjustments: tuple[CrossCategoryAdjustment, ...] = CROSS_CATEGORY_ADJUSTMENTS,
) -> ScoreBoard:
    """Return a new board with every triggered adjustment applied, floored at 0."""

    adjusted: ScoreBoard = {category: scores.get(category, 0) for category in Category}
    for adjustment in adjustments:
        if not adjustment.trigger.search(text):
            continue
        for shift in adjustment.shifts:
            if shift.requires is not None and not shift.requires.search(text):
                continue
            adjusted[shift.category] = max(0, adjusted[shift.category] + shift.delta)
    return adjusted


def score_categories(title: str, description: str, thesaurus: Thesaurus) -> ScoreBoard:
    """Full title/description score: keyword pass followed by adjustments."""

    text = f"{title or ''} {description or ''}".lower()
    return apply_adjustments(keyword_scores(title, description, thesaurus), text)


def document_scores(document_text: str, thesaurus: Thesaurus) -> ScoreBoard:
    """Keyword-only scores for extracted document text."""

    text = (document_text or "").lower()
    return {
        category: max(0, _keyword_total(text, thesaurus.keyword_set(category), DOCUMENT_WEIGHTS))
        for category in Category
    }


def reinforce(scores: Mapping[Category, int], extra: Mapping[Category, int], *, weight: int) -> ScoreBoard:
    """Add *extra* scores, scaled by *weight*, to a board."""

    return {
        category: scores.get(category, 0) + extra.get(category, 0) * weight
        for category in Category
    }
