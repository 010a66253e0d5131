# -*- coding: utf-8 -*-
"""
Markdown normalization passes.

Runs a fixed sequence of cleanup passes over converted Markdown:
1. JavaScript banner - Drop "this page requires JavaScript" placeholders
2. Skip navigation - Drop "Skip Navigation" tokens
3. SPA metadata - Drop platform-considerations stubs, page markers, platform lists
4. Repeated titles - Keep the first occurrence of each heading
5. Whitespace - Collapse blank lines and horizontal whitespace
6. Heading spacing - Blank line before and after every heading
7. Malformed links - [text]() becomes text
8. Empty headings - Drop headings with no text
9. List markers - * and + bullets become -
10. Word concatenation - Split words glued together by the conversion
11. Trailing metadata - Drop resources/change log/videos tails
12. Trim

Each pass assumes the previous ones have run. Fenced code blocks are left
alone by the passes that reshape text. Running the normalizer on its own
output changes nothing.
"""
import logging
import re
from typing import Callable

from .config import Settings, settings
from .vocabulary import CONCATENATION_TERMS, PROTECTED_TERMS

logger = logging.getLogger(__name__)


def _phrase(text: str) -> str:
    """Pattern matching the words of text, tolerating missing or extra whitespace."""
    return r"\s*".join(re.escape(word) for word in text.split())


# Optional heading marker in front of a removed phrase
_HEADING_PREFIX = r"(?:#{1,6}[ \t]*)?"

JS_BANNER_RE = re.compile(
    r"^.*?"
    + _phrase("this page requires javascript")
    + r".*?"
    + _phrase("refresh the page to view its content")
    + r"\.?\s*",
    re.IGNORECASE | re.DOTALL,
)
JS_WARNING_RES = (
    re.compile(_HEADING_PREFIX + _phrase("this page requires javascript") + r"\.?[ \t]*", re.IGNORECASE),
    re.compile(_phrase("please turn on javascript") + r"[^\n]*?content\.[ \t]*", re.IGNORECASE),
)

SKIP_NAVIGATION_RE = re.compile(_phrase("skip navigation") + r"[ \t]*", re.IGNORECASE)

SPA_METADATA_RES = (
    re.compile(
        _phrase("platform considerations") + r"\s*" + _phrase("no additional considerations for") + r"[^\n]*",
        re.IGNORECASE,
    ),
    # The page name may be glued to the marker or pushed to the next line
    re.compile(_phrase("current page is") + r"\s*\w+[ \t]*", re.IGNORECASE),
    re.compile(_HEADING_PREFIX + _phrase("supported platforms") + r".*\Z", re.IGNORECASE | re.DOTALL),
)

TRAILING_SECTION_RES = (
    re.compile(
        _HEADING_PREFIX + r"resources?[\s#]*related.*?" + _phrase("change log") + r".*\Z",
        re.IGNORECASE | re.DOTALL,
    ),
    re.compile(
        _HEADING_PREFIX + _phrase("change log") + r"[\s#|:-]*date[\s#|:-]*changes.*\Z",
        re.IGNORECASE | re.DOTALL,
    ),
    re.compile(
        _HEADING_PREFIX + r"videos[\s#]*" + _phrase("discoverable design") + r".*\Z",
        re.IGNORECASE | re.DOTALL,
    ),
    re.compile(_HEADING_PREFIX + _phrase("supported platforms") + r".*\Z", re.IGNORECASE | re.DOTALL),
)

HEADING_LINE_RE = re.compile(r"^#{1,6}[ \t]+(\S.*?)[ \t]*$")
EMPTY_HEADING_RE = re.compile(r"^#{1,6}[ \t]*$")

TRAILING_WS_RE = re.compile(r"[ \t]+$", re.MULTILINE)
# Leading indentation is kept for nested lists
HORIZONTAL_WS_RE = re.compile(r"(?<=\S)[ \t]+")
EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")

EMPTY_IMAGE_RE = re.compile(r"!\[[^\]\n]*\]\(\s*\)")
EMPTY_TARGET_LINK_RE = re.compile(r"\[([^\]\n]*)\]\(\s*\)")

BULLET_RE = re.compile(r"^([ \t]*)[*+][ \t]+", re.MULTILINE)

# Inline code, link targets and bare URLs are never split
INLINE_PROTECTED_RE = re.compile(r"(`[^`\n]+`|\]\([^)\n]*\)|https?://[^\s)\]]+)")
WORD_RE = re.compile(r"[A-Za-z]+")
# Longest first so iPadOS wins over iPad
PROTECTED_TERM_RE = re.compile(
    "(" + "|".join(re.escape(term) for term in sorted(PROTECTED_TERMS, key=len, reverse=True)) + ")"
)
CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
SENTENCE_BOUNDARY_RE = re.compile(r"([a-z])([.!?])([A-Z])")
DIGIT_LETTER_RE = re.compile(r"([0-9])([A-Za-z])")
LETTER_DIGIT_RE = re.compile(r"([A-Za-z])([0-9])")

FENCE_MARKER = "```"


def _split_fenced(text: str) -> list[tuple[bool, str]]:
    """
    Split text into (is_fenced, chunk) runs of whole lines.

    Joining the chunks with newlines gives back the original text.
    """
    blocks: list[tuple[bool, str]] = []
    current: list[str] = []
    in_fence = False

    for line in text.split("\n"):
        is_marker = line.lstrip().startswith(FENCE_MARKER)
        if is_marker and not in_fence:
            if current:
                blocks.append((False, "\n".join(current)))
            current = [line]
            in_fence = True
        elif is_marker and in_fence:
            current.append(line)
            blocks.append((True, "\n".join(current)))
            current = []
            in_fence = False
        else:
            current.append(line)

    if current:
        blocks.append((in_fence, "\n".join(current)))
    return blocks


def _map_prose(text: str, func: Callable[[str], str]) -> str:
    """Apply func to everything outside fenced code blocks."""
    return "\n".join(chunk if fenced else func(chunk) for fenced, chunk in _split_fenced(text))


def _prose_lines(text: str) -> list[tuple[bool, str]]:
    """Lines of text tagged with whether they sit outside fenced code."""
    tagged = []
    for fenced, chunk in _split_fenced(text):
        tagged.extend((not fenced, line) for line in chunk.split("\n"))
    return tagged


def _tidy_whitespace(text: str) -> str:
    text = TRAILING_WS_RE.sub("", text)
    text = HORIZONTAL_WS_RE.sub(" ", text)
    return EXCESS_NEWLINES_RE.sub("\n\n", text)


class MarkdownNormalizer:
    """Multi-pass cleanup of converted Markdown."""

    def __init__(self, config: Settings | None = None):
        self.config = config or settings
        self._concatenation_patterns = self._compile_concatenation_patterns(
            self.config.CONCATENATION_MIN_AFFIX
        )
        self._passes: tuple[tuple[str, Callable[[str], str]], ...] = (
            ("javascript_banner", self._step_javascript_banner),
            ("skip_navigation", self._step_skip_navigation),
            ("spa_metadata", self._step_spa_metadata),
            ("repeated_titles", self._step_repeated_titles),
            ("whitespace", self._step_whitespace),
            ("heading_spacing", self._step_heading_spacing),
            ("malformed_links", self._step_malformed_links),
            ("empty_headings", self._step_empty_headings),
            ("list_markers", self._step_list_markers),
            ("word_concatenation", self._step_word_concatenation),
            ("trailing_metadata", self._step_trailing_metadata),
            ("trim", self._step_trim),
        )

    def normalize(self, markdown: str) -> str:
        """Run every pass in order and return the cleaned Markdown."""
        content = markdown or ""
        for name, step in self._passes:
            before = len(content)
            content = step(content)
            if len(content) != before:
                logger.debug(f"Normalizer pass {name}: {before} -> {len(content)} chars")
        return content

    @staticmethod
    def _compile_concatenation_patterns(min_affix: int) -> list[tuple[str, re.Pattern, re.Pattern]]:
        patterns = []
        for term in CONCATENATION_TERMS:
            joined = re.escape(term.replace(" ", ""))
            prefix = re.compile(rf"(?<![A-Za-z])([a-z]{{{min_affix},}}){joined}")
            suffix = re.compile(rf"{joined}([A-Z][a-z]{{{max(min_affix - 1, 0)},}})")
            patterns.append((term, prefix, suffix))
        return patterns

    # ----------------------------------------------------------------------
    # Passes
    # ----------------------------------------------------------------------

    def _step_javascript_banner(self, content: str) -> str:
        content = JS_BANNER_RE.sub("", content, count=1)
        for pattern in JS_WARNING_RES:
            content = pattern.sub("", content)
        return content

    def _step_skip_navigation(self, content: str) -> str:
        return SKIP_NAVIGATION_RE.sub("", content)

    def _step_spa_metadata(self, content: str) -> str:
        for pattern in SPA_METADATA_RES:
            content = pattern.sub("", content)
        return content

    def _step_repeated_titles(self, content: str) -> str:
        """
        Drop repeated headings.

        The first heading with a given title is kept. Later ones are kept only
        when the whole line is longer than DUPLICATE_HEADING_MAX_LENGTH, which
        is how the richer, structured copy of a title usually looks.
        """
        max_length = self.config.DUPLICATE_HEADING_MAX_LENGTH
        seen: set[str] = set()
        result_lines = []

        for is_prose, line in _prose_lines(content):
            match = HEADING_LINE_RE.match(line) if is_prose else None
            if match:
                # Whitespace-insensitive so later word splitting cannot create new duplicates
                key = re.sub(r"\s+", "", match.group(1).casefold())
                if key in seen and len(line) <= max_length:
                    continue
                seen.add(key)
            result_lines.append(line)

        return "\n".join(result_lines)

    def _step_whitespace(self, content: str) -> str:
        return _map_prose(content, _tidy_whitespace)

    def _step_heading_spacing(self, content: str) -> str:
        tagged = _prose_lines(content)
        result_lines: list[str] = []

        for index, (is_prose, line) in enumerate(tagged):
            is_heading = is_prose and HEADING_LINE_RE.match(line) is not None
            if is_heading and result_lines and result_lines[-1].strip():
                result_lines.append("")
            result_lines.append(line)
            if is_heading and index + 1 < len(tagged) and tagged[index + 1][1].strip():
                result_lines.append("")

        return "\n".join(result_lines)

    def _step_malformed_links(self, content: str) -> str:
        def repair(chunk: str) -> str:
            chunk = EMPTY_IMAGE_RE.sub("", chunk)
            return EMPTY_TARGET_LINK_RE.sub(lambda m: m.group(1).strip(), chunk)

        return _map_prose(content, repair)

    def _step_empty_headings(self, content: str) -> str:
        return "\n".join(
            line for is_prose, line in _prose_lines(content)
            if not (is_prose and EMPTY_HEADING_RE.match(line))
        )

    def _step_list_markers(self, content: str) -> str:
        return _map_prose(content, lambda chunk: BULLET_RE.sub(r"\1- ", chunk))

    def _step_word_concatenation(self, content: str) -> str:
        return _map_prose(content, self._repair_words)

    def _step_trailing_metadata(self, content: str) -> str:
        for pattern in TRAILING_SECTION_RES:
            content = pattern.sub("", content)
        return content

    def _step_trim(self, content: str) -> str:
        # Earlier removals can leave gaps behind
        return _map_prose(content, _tidy_whitespace).strip()

    # ----------------------------------------------------------------------
    # Word concatenation
    # ----------------------------------------------------------------------

    def _repair_words(self, chunk: str) -> str:
        parts = INLINE_PROTECTED_RE.split(chunk)
        # Odd indices are the protected spans captured by the split
        return "".join(
            part if index % 2 else self._repair_text(part)
            for index, part in enumerate(parts)
        )

    def _repair_text(self, text: str) -> str:
        # Each split can expose another glued term, so repeat until stable.
        # Splits only insert spaces, which bounds the loop.
        while True:
            repaired = self._split_once(text)
            if repaired == text:
                return text
            text = repaired

    def _split_once(self, text: str) -> str:
        for term, prefix, suffix in self._concatenation_patterns:
            text = prefix.sub(rf"\1 {term}", text)
            text = suffix.sub(rf"{term} \1", text)

        text = WORD_RE.sub(self._split_camel_case, text)
        text = SENTENCE_BOUNDARY_RE.sub(r"\1\2 \3", text)
        text = DIGIT_LETTER_RE.sub(r"\1 \2", text)
        return LETTER_DIGIT_RE.sub(r"\1 \2", text)

    @staticmethod
    def _split_camel_case(match: re.Match) -> str:
        # Protected names inside the word are kept whole, including their edges
        pieces = PROTECTED_TERM_RE.split(match.group(0))
        return "".join(
            piece if index % 2 else CAMEL_BOUNDARY_RE.sub(r"\1 \2", piece)
            for index, piece in enumerate(pieces)
        )
