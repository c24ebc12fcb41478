"""Rule-plus-weighted-scoring book category classifier.

Pipeline for one book:

1. Override rules on ``title + description``; a hit returns immediately.
2. Weighted keyword scoring with cross-category adjustments.
3. Optional reinforcement from extracted document text.
4. Confidence calibration over the full score board.
5. Phrase-cascade fallback when confidence stays below the threshold.

Classification never raises: unexpected failures are logged and turned into a
low-confidence ``error`` result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

from bookcat.taxonomy.categories import DEFAULT_CATEGORY, AnalysisMethod, Category
from bookcat.taxonomy.confidence import MIN_CONFIDENCE, calibrate
from bookcat.taxonomy.config import ClassifierSettings
from bookcat.taxonomy.overrides import try_override
from bookcat.taxonomy.patterns import match_fallback, pattern_confidence
from bookcat.taxonomy.recommendations import popular_categories, recommendations_for
from bookcat.taxonomy.scoring import document_scores, reinforce, score_categories
from bookcat.taxonomy.thesaurus import TaxonomyError, Thesaurus, load_thesaurus

logger = logging.getLogger(__name__)

@dataclass(frozen=True, slots=True)
class ClassificationResult:
    category: Category
    confidence: float
    all_scores: Mapping[Category, int] = field(default_factory=dict)
    analysis_method: AnalysisMethod = AnalysisMethod.TITLE_DESCRIPTION

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("confidence must be between 0.0 and 1.0")
        if not isinstance(self.all_scores, MappingProxyType):
            object.__setattr__(self, "all_scores", MappingProxyType(dict(self.all_scores)))

    def to_dict(self) -> dict[str, object]:
        return {
            "category": self.category.value,
            "confidence": self.confidence,
            "all_scores": {category.value: score for category, score in self.all_scores.items()},
            "analysis_method": self.analysis_method.value,
        }


def degraded_result() -> ClassificationResult:
    return ClassificationResult(
        category=DEFAULT_CATEGORY,
        confidence=MIN_CONFIDENCE,
        analysis_method=AnalysisMethod.ERROR,
    )


def manual_classification(category: Category) -> ClassificationResult:
    """Result recorded when a user picks the category by hand."""

    return ClassificationResult(
        category=category,
        confidence=1.0,
        analysis_method=AnalysisMethod.MANUAL,
    )


class CategoryClassifier:
    """Classify books against a validated thesaurus.

    Construction loads the thesaurus, so taxonomy errors surface here rather
    than inside :meth:`detect`.
    """

    def __init__(
        self,
        thesaurus: Thesaurus | None = None,
        *,
        settings: ClassifierSettings | None = None,
    ) -> None:
        self._thesaurus = thesaurus if thesaurus is not None else load_thesaurus()
        self._settings = settings if settings is not None else ClassifierSettings()

    @property
    def thesaurus(self) -> Thesaurus:
        return self._thesaurus

    @property
    def settings(self) -> ClassifierSettings:
        return self._settings

    def detect(
        self,
        title: str | None,
        description: str | None = "",
        document_text: str | None = None,
    ) -> ClassificationResult:
        """Classify one book; never raises."""

        try:
            return self._detect(title or "", description or "", document_text)
        except Exception:
            logger.exception("Category detection failed for title %r", title)
            return degraded_result()

    def _detect(self, title: str, description: str, document_text: str | None) -> ClassificationResult:
        text = f"{title} {description}".lower()

        override = try_override(text)
        if override is not None:
            return ClassificationResult(
                category=override.category,
                confidence=override.confidence,
                all_scores=override.scores,
                analysis_method=AnalysisMethod.KEYWORD_OVERRIDE,
            )

        scores = score_categories(title, description, self._thesaurus)

        document = (document_text or "").strip()
        if document:
            scores = reinforce(
                scores,
                document_scores(document, self._thesaurus),
                weight=self._settings.document_weight,
            )

        category, confidence = calibrate(scores)

        if confidence < self._settings.fallback_threshold:
            fallback = match_fallback(title, description)
            if fallback is not None:
                return ClassificationResult(
                    category=fallback,
                    confidence=pattern_confidence(title, description, fallback, self._thesaurus),
                    all_scores=scores,
                    analysis_method=AnalysisMethod.ADVANCED_PATTERN,
                )

        method = AnalysisMethod.PDF_ANALYSIS if document else AnalysisMethod.TITLE_DESCRIPTION
        return ClassificationResult(
            category=category,
            confidence=confidence,
            all_scores=scores,
            analysis_method=method,
        )

    def popular_categories(self) -> list[Category]:
        return popular_categories()

    def recommendations_for(self, selected: Iterable[Category | str]) -> list[Category]:
        return recommendations_for(
            selected,
            self._thesaurus,
            limit=self._settings.recommendation_limit,
        )


@lru_cache(maxsize=1)
def default_classifier() -> CategoryClassifier:
    return CategoryClassifier()


def detect_category(
    title: str | None,
    description: str | None = "",
    document_text: str | None = None,
) -> ClassificationResult:
    try:
        classifier = default_classifier()
    except TaxonomyError:
        logger.exception("Cannot load thesaurus, returning degraded result for title %r", title)
        return degraded_result()
    return classifier.detect(title, description, document_text)


def get_popular_categories() -> list[Category]:
    return default_classifier().popular_categories()


def get_category_recommendations(selected: Iterable[Category | str]) -> list[Category]:
    return default_classifier().recommendations_for(selected)
