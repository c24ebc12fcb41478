"""CLI for classifying a single book from its title, description and PDF."""

from __future__ import annotations

import argparse
import json
import logging

from dotenv import load_dotenv

load_dotenv()

from bookcat.ingestion.metadata import extract_book_metadata
from bookcat.ingestion.pdf_text import PdfExtractionError, extract_pdf_text
from bookcat.taxonomy.classifier import CategoryClassifier
from bookcat.taxonomy.config import ClassifierSettings
from bookcat.taxonomy.thesaurus import TaxonomyError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Detect the category of a book")
    parser.add_argument("--title", help="Book title (taken from the PDF when omitted)")
    parser.add_argument("--description", default="", help="Free-text book description")
    parser.add_argument("--pdf", help="Optional PDF whose leading pages reinforce the classification")
    parser.add_argument(
        "--max-pages",
        type=int,
        default=None,
        help="Maximum PDF pages to read (default: BOOKCAT_PDF_MAX_PAGES or 5)",
    )
    args = parser.parse_args(argv)

    if not args.title and not args.pdf:
        parser.error("either --title or --pdf is required")

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

    title = args.title or ""
    document_text: str | None = None
    metadata_payload: dict[str, object] | None = None

    if args.pdf:
        max_pages = args.max_pages if args.max_pages is not None else settings.pdf_max_pages
        try:
            pdf = extract_pdf_text(args.pdf, max_pages=max(1, max_pages))
        except PdfExtractionError as error:
            logger.warning("PDF analysis failed, using title/description only: %s", error)
        else:
            document_text = pdf.text
            metadata = extract_book_metadata(pdf)
            metadata_payload = {
                "title": metadata.title,
                "author": metadata.author,
                "summary": metadata.summary,
                "pages": metadata.pages,
            }
            if not title:
                title = metadata.title

    result = classifier.detect(title, args.description, document_text)

    payload = result.to_dict()
    payload["title"] = title
    payload["suggested_categories"] = [
        category.value for category in classifier.recommendations_for([result.category])
    ]
    if metadata_payload is not None:
        payload["metadata"] = metadata_payload

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
