# -*- coding: utf-8 -*-
"""
HTML sanitizer run before Markdown conversion.

Drops page chrome (scripts, styles, navigation, header and footer), strips
navigation-flavoured class attributes and collapses whitespace. All removal
happens on the parsed tree so nested or unbalanced markup cannot cause a
removal to span the wrong region.
"""
import logging
import re

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString

logger = logging.getLogger(__name__)

# Tags removed together with their content
REMOVED_TAGS = ["script", "style", "nav", "footer", "header"]

# Class tokens that mark navigation chrome
NOISE_CLASS_PATTERN = re.compile(r"navigation|breadcrumb", re.IGNORECASE)

# Text inside these keeps its whitespace
PREFORMATTED_TAGS = {"pre", "textarea"}

_WHITESPACE_RE = re.compile(r"\s+")


class HtmlSanitizer:
    """Removes non-content elements from raw page HTML."""

    def sanitize(self, html: str) -> str:
        """
        Return sanitized HTML.

        Never raises: if the markup cannot be processed the input is returned
        unchanged.
        """
        if not html or not html.strip():
            return ""

        try:
            soup = BeautifulSoup(html, "lxml")

            for tag in soup.find_all(REMOVED_TAGS):
                tag.decompose()

            for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
                comment.extract()

            for element in soup.find_all(class_=True):
                classes = element.get("class") or []
                class_str = " ".join(classes) if isinstance(classes, list) else str(classes)
                if NOISE_CLASS_PATTERN.search(class_str):
                    del element["class"]

            self._collapse_whitespace(soup)

            logger.debug(f"HTML sanitized: {len(html)} -> {len(str(soup))} chars")
            return str(soup)

        except Exception as e:
            logger.warning(f"HTML sanitizing failed: {e}")
            return html

    @staticmethod
    def _collapse_whitespace(soup: BeautifulSoup) -> None:
        """Collapse whitespace runs in text nodes outside preformatted blocks."""
        # Collect first, replacing while iterating would skip nodes
        strings = [
            s
            for s in soup.find_all(string=True)
            if type(s) is NavigableString
            and not any(parent.name in PREFORMATTED_TAGS for parent in s.parents)
        ]
        for string in strings:
            collapsed = _WHITESPACE_RE.sub(" ", str(string))
            if collapsed != string:
                string.replace_with(collapsed)
