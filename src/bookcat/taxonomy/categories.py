"""Closed category enumeration and classification method labels."""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Every label the classifier may emit, in tie-break order."""

    FICTION = "Fiction"
    NON_FICTION = "Non-Fiction"
    MYSTERY = "Mystery"
    ROMANCE = "Romance"
    SCIENCE_FICTION = "Science Fiction"
    FANTASY = "Fantasy"
    THRILLER = "Thriller"
    BIOGRAPHY = "Biography"
    HISTORY = "History"
    SELF_HELP = "Self-Help"
    BUSINESS = "Business"
    TECHNOLOGY = "Technology"
    HEALTH = "Health"
    PSYCHOLOGY = "Psychology"
    PHILOSOPHY = "Philosophy"
    RELIGION = "Religion"
    ART = "Art"
    MUSIC = "Music"
    TRAVEL = "Travel"
    COOKING = "Cooking"
    SPORTS = "Sports"
    EDUCATION = "Education"
    SCIENCE = "Science"
    MATHEMATICS = "Mathematics"
    POETRY = "Poetry"
    DRAMA = "Drama"
    COMEDY = "Comedy"
    HORROR = "Horror"
    ADVENTURE = "Adventure"
    CHILDREN = "Children"
    YOUNG_ADULT = "Young Adult"

    def __str__(self) -> str:
        return self.value


class AnalysisMethod(str, Enum):
    """How a classification result was produced."""

    TITLE_DESCRIPTION = "title_description"
    PDF_ANALYSIS = "pdf_analysis"
    KEYWORD_OVERRIDE = "keyword_override"
    ADVANCED_PATTERN = "advanced_pattern"
    MANUAL = "manual"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


DEFAULT_CATEGORY = Category.FICTION

# Curated subset shown on onboarding screens.
POPULAR_CATEGORIES: tuple[Category, ...] = (
    Category.FICTION,
    Category.MYSTERY,
    Category.ROMANCE,
    Category.SCIENCE_FICTION,
    Category.FANTASY,
    Category.THRILLER,
    Category.BIOGRAPHY,
    Category.HISTORY,
    Category.SELF_HELP,
    Category.BUSINESS,
    Category.TECHNOLOGY,
    Category.HEALTH,
    Category.PSYCHOLOGY,
    Category.PHILOSOPHY,
    Category.RELIGION,
)


def parse_category(name: str) -> Category | None:
    """Return the category whose label equals *name* (case-insensitive)."""
    cleaned = name.strip().casefold()
    for category in Category:
        if category.value.casefold() == cleaned:
            return category
    return None
