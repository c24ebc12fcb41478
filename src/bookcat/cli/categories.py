"""CLI for onboarding category lists and category recommendations."""

from __future__ import annotations

import argparse
import json
import logging

from dotenv import load_dotenv

load_dotenv()

from bookcat.taxonomy.classifier import CategoryClassifier
from bookcat.taxonomy.config import ClassifierSettings
from bookcat.taxonomy.thesaurus import TaxonomyError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List popular categories or recommend related ones")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--popular", action="store_true", help="Print the curated onboarding categories")
    group.add_argument(
        "--selected",
        nargs="+",
        metavar="CATEGORY",
        help="Categories the reader already picked",
    )
    args = parser.parse_args(argv)

    try:
        settings = ClassifierSettings.from_env()
    except ValueError as error:
        logging.basicConfig(format=LOG_FORMAT, level=logging.INFO)
        logger.error("Configuration error: %s", error)
        return 1

    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level_value)

    try:
        classifier = CategoryClassifier(settings=settings)
    except TaxonomyError as error:
        logger.error("Invalid thesaurus: %s", error)
        return 1

    if args.popular:
        payload: dict[str, object] = {
            "categories": [category.value for category in classifier.popular_categories()],
        }
    else:
        payload = {
            "selected": list(args.selected),
            "recommendations": [
                category.value for category in classifier.recommendations_for(args.selected)
            ],
        }

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
