# -*- coding: utf-8 -*-
"""
Process a saved guideline page from the command line.

Usage:
    python -m hig_content page.html --title Buttons --platform iOS --category selection-and-input
    python -m hig_content page.html --format json --output buttons.json
    cat page.html | python -m hig_content - --title Buttons --fail-on-fallback
"""
import argparse
import sys
from pathlib import Path

from .logging_config import setup_logging
from .models import Category, Platform, Section
from .processor import content_processor


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hig_content",
        description="Clean a scraped guideline page and score its quality.",
    )
    parser.add_argument("html_file", help="HTML file to process, or - for stdin")
    parser.add_argument("--id", dest="section_id", help="Section id (default: file name)")
    parser.add_argument("--title", help="Section title (default: derived from file name)")
    parser.add_argument("--url", default="", help="Source URL of the page")
    parser.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        default=Platform.UNIVERSAL.value,
    )
    parser.add_argument(
        "--category",
        choices=[c.value for c in Category],
        default=Category.FOUNDATIONS.value,
    )
    parser.add_argument(
        "--format",
        choices=["markdown", "json"],
        default="markdown",
        help="markdown: front matter + body; json: the full processed document",
    )
    parser.add_argument("--output", type=Path, help="Write to this file instead of stdout")
    parser.add_argument(
        "--fail-on-fallback",
        action="store_true",
        help="Exit with status 1 when the page is fallback content",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override LOG_LEVEL",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for `python -m hig_content`."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Logs go to stderr, stdout carries the document
    setup_logging(level=args.log_level, stream=sys.stderr)

    if args.html_file == "-":
        html = sys.stdin.read()
        stem = "stdin"
    else:
        path = Path(args.html_file)
        try:
            html = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            parser.error(f"cannot read {path}: {e}")
        stem = path.stem

    section = Section(
        id=args.section_id or stem,
        title=args.title or stem.replace("-", " ").replace("_", " ").title(),
        url=args.url,
        platform=Platform(args.platform),
        category=Category(args.category),
    )

    document = content_processor.process(html, section)

    if args.format == "json":
        output = document.model_dump_json(indent=2)
    else:
        output = document.document

    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
    else:
        sys.stdout.write(output + "\n")

    if args.fail_on_fallback and document.quality.is_fallback_content:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
