# -*- coding: utf-8 -*-
"""
Per-document keyword and related-section extraction.
"""
import logging
import re

from .config import Settings, settings
from .models import Section
from .vocabulary import DESIGN_TERMS

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\b[a-z]{3,}\b")
_SEE_ALSO_RE = re.compile(r"see also[:\s]+(.*?)(?:\n|$)", re.IGNORECASE)
_BRACKET_TITLE_RE = re.compile(r"\[([^\]]+)\]")


class KeywordExtractor:
    """Builds the keyword list of a section from its metadata and content."""

    def __init__(self, config: Settings | None = None):
        self.config = config or settings
        self._vocabulary = frozenset(DESIGN_TERMS)

    def extract(self, content: str, section: Section) -> tuple[str, ...]:
        """
        Return keywords in insertion order, without duplicates.

        Seeded with the section title, platform and category, followed by every
        design-vocabulary word found in the content.
        """
        # dict keeps insertion order and drops duplicates
        keywords: dict[str, None] = dict.fromkeys(
            [
                section.title.casefold(),
                section.platform.value.casefold(),
                section.category.value.casefold(),
            ]
        )

        for word in _TOKEN_RE.findall(content.casefold()):
            if word in self._vocabulary:
                keywords.setdefault(word)

        return tuple(keywords)[: self.config.MAX_KEYWORDS]


class RelatedSectionExtractor:
    """Finds the titles cross-referenced by a "See also" line."""

    def __init__(self, config: Settings | None = None):
        self.config = config or settings

    def extract(self, content: str) -> tuple[str, ...]:
        match = _SEE_ALSO_RE.search(content)
        if not match:
            return ()

        titles = dict.fromkeys(title.strip() for title in _BRACKET_TITLE_RE.findall(match.group(1)))
        titles.pop("", None)
        related = tuple(titles)[: self.config.MAX_RELATED_SECTIONS]
        logger.debug(f"Found {len(related)} related sections")
        return related
