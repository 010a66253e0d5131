# -*- coding: utf-8 -*-
"""
Content processing pipeline for scraped guideline pages.

Stages, each a pure function of its input:
1. HTML Sanitizer - Remove scripts, styles and page chrome
2. Markdown Converter - Rule-based HTML to Markdown
3. Markdown Normalizer - Multi-pass cleanup of the converted text
4. Keyword / Related-Section extraction - From the cleaned text
5. Quality Assessment - Scores plus fallback (broken scrape) detection
6. Front Matter - Metadata header for the persisted document

The processor keeps no per-document state, so one instance can serve any
number of documents, including from several threads.
"""
import logging
from datetime import datetime

from .config import Settings, settings
from .converter import MarkdownConverter
from .extraction import KeywordExtractor, RelatedSectionExtractor
from .front_matter import FrontMatterGenerator
from .logging_config import section_context
from .models import ProcessedDocument, RawDocument, Section
from .normalizer import MarkdownNormalizer
from .quality import QualityAssessor
from .sanitizer import HtmlSanitizer

logger = logging.getLogger(__name__)


class ContentProcessor:
    """Turns one (html, section) pair into a ProcessedDocument."""

    def __init__(self, config: Settings | None = None):
        self.config = config or settings
        self.sanitizer = HtmlSanitizer()
        self.converter = MarkdownConverter()
        self.normalizer = MarkdownNormalizer(self.config)
        self.keyword_extractor = KeywordExtractor(self.config)
        self.related_extractor = RelatedSectionExtractor(self.config)
        self.quality_assessor = QualityAssessor(self.config)
        self.front_matter = FrontMatterGenerator()

    def process(
            self,
            html: str,
            section: Section,
            generated_at: datetime | None = None,
    ) -> ProcessedDocument:
        """
        Process raw page HTML.

        Args:
            html: Raw HTML as fetched
            section: Metadata of the page
            generated_at: Timestamp written to the front matter (defaults to now)

        Returns:
            ProcessedDocument. Unusable input yields a fallback-flagged
            document rather than an exception.
        """
        with section_context(section.id):
            sanitized_html = self.sanitizer.sanitize(html)
            raw_markdown = self.converter.convert(sanitized_html)
            cleaned_markdown = self.normalizer.normalize(raw_markdown)

            keywords = self.keyword_extractor.extract(cleaned_markdown, section)
            related_sections = self.related_extractor.extract(cleaned_markdown)
            quality = self.quality_assessor.assess(cleaned_markdown, raw_markdown)

            front_matter = self.front_matter.generate(section, quality, keywords, generated_at)

            if quality.is_fallback_content:
                logger.warning(
                    f"Fallback content detected for {section.url or section.id}",
                    extra={"raw_length": len(raw_markdown)},
                )
            else:
                logger.info(
                    f"Processed {section.id}: score {quality.score:.2f}, "
                    f"{quality.length} chars, {len(keywords)} keywords"
                )

            return ProcessedDocument(
                cleaned_markdown=cleaned_markdown,
                front_matter=front_matter,
                quality=quality,
                keywords=keywords,
                related_sections=related_sections,
            )

    def process_document(
            self,
            document: RawDocument,
            generated_at: datetime | None = None,
    ) -> ProcessedDocument:
        """Process a RawDocument."""
        return self.process(document.html, document.section, generated_at)


# Global processor instance
content_processor = ContentProcessor()
