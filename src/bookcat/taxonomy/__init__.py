"""Book category classification engine."""

from .categories import POPULAR_CATEGORIES, AnalysisMethod, Category
from .classifier import (
    CategoryClassifier,
    ClassificationResult,
    detect_category,
    get_category_recommendations,
    get_popular_categories,
    manual_classification,
)
from .config import ClassifierSettings
from .thesaurus import TaxonomyError, Thesaurus, load_thesaurus

__all__ = [
    "AnalysisMethod",
    "Category",
    "CategoryClassifier",
    "ClassificationResult",
    "ClassifierSettings",
    "POPULAR_CATEGORIES",
    "TaxonomyError",
    "Thesaurus",
    "detect_category",
    "get_category_recommendations",
    "get_popular_categories",
    "load_thesaurus",
    "manual_classification",
]
