"""Phrase cascade used when weighted scoring is not confident enough.

Rules run in a fixed order and the first hit wins.  Several triggers overlap
(``strategy`` is both Business and Philosophy vocabulary, ``journey`` both
Travel and Adventure), so the order below is part of the behaviour: moving a
rule changes results for ambiguous titles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bookcat.taxonomy.categories import Category
from bookcat.taxonomy.matching import (
    TextPredicate,
    both,
    either,
    excluding,
    mentions,
    mentions_all,
)
from bookcat.taxonomy.thesaurus import Thesaurus

logger = logging.getLogger(__name__)

BASE_PATTERN_CONFIDENCE = 0.7
PATTERN_STEP = 0.1
PATTERN_CEILING = 0.95
TITLE_NAME_BOOST = 0.15
MAX_PATTERN_CONFIDENCE = 0.98


@dataclass(frozen=True, slots=True)
class FallbackRule:
    name: str
    category: Category
    matches: TextPredicate


FALLBACK_RULES: tuple[FallbackRule, ...] = (
    FallbackRule(
        "database-interview",
        Category.TECHNOLOGY,
        both(mentions("sql", "database"), mentions("question", "interview")),
    ),
    FallbackRule(
        "psychology",
        Category.PSYCHOLOGY,
        mentions(
            "laws of human nature",
            "human nature",
            "psychological",
            "behavioral analysis",
            "social psychology",
            "cognitive psychology",
            "mental health",
            "psychological principles",
        ),
    ),
    FallbackRule(
        "self-help",
        Category.SELF_HELP,
        either(
            excluding(mentions("how to"), "programming", "javascript"),
            mentions("guide to"),
            excluding(mentions("complete guide"), "javascript", "programming"),
            mentions(
                "step by step",
                "tips for",
                "secrets of",
                "mastering",
                "unlock",
                "transform",
                "personal development",
                "self-improvement",
                "happiness",
                "mindfulness",
                "meditation",
                "principles of",
                "power of",
            ),
            both(mentions("art of"), mentions("happiness", "living")),
        ),
    ),
    FallbackRule(
        "cooking",
        Category.COOKING,
        mentions("cookbook", "recipes", "cuisine", "cooking", "chef", "kitchen", "food", "meal", "dining"),
    ),
    FallbackRule(
        "education",
        Category.EDUCATION,
        mentions(
            "textbook", "course", "curriculum", "learning", "study",
            "academic", "education", "school", "university",
        ),
    ),
    FallbackRule(
        "technology",
        Category.TECHNOLOGY,
        either(
            mentions(
                "manual", "handbook", "reference", "programming", "coding", "software",
                "computer", "digital", "tech", "javascript", "python", "java",
            ),
            both(mentions("complete guide"), mentions("javascript", "python", "programming")),
            mentions("web development", "algorithm"),
        ),
    ),
    FallbackRule(
        "biography",
        Category.BIOGRAPHY,
        mentions(
            "diary", "journal", "memoir", "life of", "story of",
            "autobiography", "biography", "personal", "life story",
        ),
    ),
    FallbackRule(
        "travel",
        Category.TRAVEL,
        mentions("atlas", "map", "geography", "travel", "journey", "destination", "trip", "vacation", "explore"),
    ),
    FallbackRule(
        "business",
        Category.BUSINESS,
        either(
            mentions("business", "entrepreneur", "startup"),
            excluding(mentions("management"), "ancient"),
            excluding(mentions("strategy"), "ancient", "war"),
            mentions(
                "leadership", "finance", "marketing", "corporate", "lean", "company",
                "profit", "revenue", "investment", "lean startup", "methodology",
                "validated learning", "rapid experimentation", "product development",
            ),
        ),
    ),
    FallbackRule(
        "health",
        Category.HEALTH,
        mentions("health", "fitness", "wellness", "medical", "medicine", "healing", "diet", "nutrition", "exercise"),
    ),
    FallbackRule(
        "science",
        Category.SCIENCE,
        mentions(
            "science", "scientific", "research", "experiment", "theory",
            "discovery", "laboratory", "analysis", "hypothesis",
        ),
    ),
    FallbackRule(
        "philosophy",
        Category.PHILOSOPHY,
        either(
            mentions(
                "philosophy", "philosophical", "wisdom", "ethics", "morality",
                "existence", "meaning", "truth", "reality", "art of war",
            ),
            mentions_all("art of", "war"),
            mentions_all("strategy", "ancient"),
        ),
    ),
    FallbackRule(
        "history",
        Category.HISTORY,
        either(
            mentions("history", "historical", "past"),
            excluding(mentions("ancient"), "art of war"),
            mentions("medieval", "century"),
            excluding(mentions("war"), "art of war"),
            mentions("battle", "empire"),
        ),
    ),
    FallbackRule(
        "religion",
        Category.RELIGION,
        mentions("religion", "spiritual", "faith", "god", "bible", "prayer", "worship", "divine", "sacred"),
    ),
    FallbackRule(
        "art",
        Category.ART,
        mentions("art", "painting", "drawing", "sculpture", "design", "creative", "aesthetic", "visual", "artist"),
    ),
    FallbackRule(
        "music",
        Category.MUSIC,
        mentions("music", "musical", "song", "instrument", "concert", "melody", "rhythm", "composer", "piano"),
    ),
    FallbackRule(
        "sports",
        Category.SPORTS,
        mentions(
            "sports", "athletic", "fitness", "game", "competition",
            "team", "player", "championship", "tournament",
        ),
    ),
    FallbackRule(
        "poetry",
        Category.POETRY,
        mentions("poetry", "poem", "verse", "rhyme", "lyrical", "poetic", "stanza", "metaphor", "imagery"),
    ),
    FallbackRule(
        "drama",
        Category.DRAMA,
        mentions("drama", "theatrical", "play", "performance", "stage", "acting", "theater", "actor", "actress"),
    ),
    FallbackRule(
        "comedy",
        Category.COMEDY,
        mentions("comedy", "humor", "funny", "joke", "laugh", "amusing", "hilarious", "comic", "satire"),
    ),
    FallbackRule(
        "horror",
        Category.HORROR,
        mentions("horror", "scary", "frightening", "terrifying", "ghost", "monster", "nightmare", "haunted", "fear"),
    ),
    FallbackRule(
        "adventure",
        Category.ADVENTURE,
        mentions(
            "adventure", "exploration", "journey", "quest", "expedition",
            "discovery", "explorer", "treasure", "wilderness",
        ),
    ),
    FallbackRule(
        "children",
        Category.CHILDREN,
        mentions("children", "kids", "child", "young", "juvenile", "picture book", "toddler", "family", "bedtime"),
    ),
    FallbackRule(
        "young-adult",
        Category.YOUNG_ADULT,
        mentions(
            "young adult", "teen", "adolescent", "youth", "coming of age",
            "teenager", "high school", "college", "identity",
        ),
    ),
)


def match_fallback(
    title: str,
    description: str,
    rules: tuple[FallbackRule, ...] = FALLBACK_RULES,
) -> Category | None:
    """Return the category of the first rule matching the text, or ``None``."""

    text = f"{title or ''} {description or ''}".lower()
    for rule in rules:
        if rule.matches(text):
            logger.debug("Fallback rule %r matched -> %s", rule.name, rule.category)
            return rule.category
    return None


def pattern_confidence(title: str, description: str, category: Category, thesaurus: Thesaurus) -> float:
    """Confidence for a fallback hit, in [0.7, 0.98]."""

    title_lower = (title or "").lower()
    text = f"{title_lower} {(description or '').lower()}"
    confidence = BASE_PATTERN_CONFIDENCE

    hits = sum(1 for phrase in thesaurus.high_confidence_patterns_for(category) if phrase in text)
    if hits:
        confidence = min(PATTERN_CEILING, BASE_PATTERN_CONFIDENCE + hits * PATTERN_STEP)

    if category.value.lower() in title_lower:
        confidence = min(MAX_PATTERN_CONFIDENCE, confidence + TITLE_NAME_BOOST)

    return min(MAX_PATTERN_CONFIDENCE, max(BASE_PATTERN_CONFIDENCE, confidence))
