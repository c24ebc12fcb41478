"""High-priority override rules that short-circuit weighted scoring."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from bookcat.taxonomy.categories import Category
from bookcat.taxonomy.vocabulary import (
    MIND_SCIENCE_VOCABULARY,
    MINDSET_VOCABULARY,
    SQL_VOCABULARY,
    STRONG_BUSINESS_VOCABULARY,
    STRONG_TECH_VOCABULARY,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OverrideRule:
    """A trigger that settles the category before any scoring happens."""

    name: str
    trigger: re.Pattern[str]
    category: Category
    confidence: float
    score: int
    requires: re.Pattern[str] | None = None
    blocked_by: re.Pattern[str] | None = None

    def matches(self, text: str) -> bool:
        if not self.trigger.search(text):
            return False
        if self.requires is not None and not self.requires.search(text):
            return False
        if self.blocked_by is not None and self.blocked_by.search(text):
            return False
        return True


@dataclass(frozen=True, slots=True)
class OverrideMatch:
    rule: OverrideRule

    @property
    def category(self) -> Category:
        return self.rule.category

    @property
    def confidence(self) -> float:
        return self.rule.confidence

    @property
    def scores(self) -> dict[Category, int]:
        return {self.rule.category: self.rule.score}


# Priority order matters: the first matching rule wins.
OVERRIDE_RULES: tuple[OverrideRule, ...] = (
    OverrideRule(
        name="database",
        trigger=SQL_VOCABULARY,
        category=Category.TECHNOLOGY,
        confidence=0.9,
        score=180,
    ),
    OverrideRule(
        name="wealth",
        trigger=STRONG_BUSINESS_VOCABULARY,
        category=Category.BUSINESS,
        confidence=0.9,
        score=170,
        blocked_by=STRONG_TECH_VOCABULARY,
    ),
    OverrideRule(
        name="mind-science",
        trigger=MINDSET_VOCABULARY,
        category=Category.PSYCHOLOGY,
        confidence=0.88,
        score=165,
        requires=MIND_SCIENCE_VOCABULARY,
        blocked_by=STRONG_TECH_VOCABULARY,
    ),
    OverrideRule(
        name="mindset",
        trigger=MINDSET_VOCABULARY,
        category=Category.SELF_HELP,
        confidence=0.88,
        score=165,
        blocked_by=STRONG_TECH_VOCABULARY,
    ),
)


def try_override(
    text: str,
    rules: tuple[OverrideRule, ...] = OVERRIDE_RULES,
) -> OverrideMatch | None:
    """Return the first override whose trigger fires on *text*, if any."""

    if not text:
        return None
    for rule in rules:
        if rule.matches(text):
            logger.debug("Override rule %r matched -> %s", rule.name, rule.category)
            return OverrideMatch(rule=rule)
    return None
