# -*- coding: utf-8 -*-
"""
HTML to Markdown conversion driven by an ordered rule table.

The document is parsed once and walked depth-first. Children are converted
first, then the first rule whose filter matches the element turns the
converted content into Markdown. Elements no rule claims pass their content
through unchanged.
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

logger = logging.getLogger(__name__)

# Whitespace-only text between these children carries no meaning
STRUCTURAL_TAGS = {
    "[document]",
    "html",
    "head",
    "body",
    "ul",
    "ol",
    "table",
    "thead",
    "tbody",
    "tfoot",
    "tr",
}

BLOCK_CONTAINER_TAGS = ("div", "section", "article", "aside", "main")
CONTENT_CLASS_MARKERS = ("content", "section", "main")
NOISE_CLASS_MARKERS = ("navigation", "breadcrumb")

# Elements whose Markdown ends the current line
LINE_BREAKING_TAGS = {
    "br", "p", "div", "section", "article", "aside", "main", "nav", "header", "footer",
    "h1", "h2", "h3", "h4", "h5", "h6", "ul", "ol", "li", "pre", "blockquote", "hr", "table",
}
INLINE_TAGS = {"a", "abbr", "b", "em", "i", "label", "mark", "s", "small", "span", "strong", "sub", "sup", "u"}

_HORIZONTAL_WS_RE = re.compile(r"[ \t]+")
_INDENT_RE = re.compile(r"\n[ \t]+")
_TRAILING_WS_RE = re.compile(r"[ \t]+\n")
_BLANK_LINES_RE = re.compile(r"\n\s*\n")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")
# Text that would read as a heading, bullet or numbered item at the start of a line
_LINE_MARKER_RE = re.compile(r"^([ \t]*)(#{1,6}|[*+-]|\d+\.)(?=[ \t])")


@dataclass(frozen=True)
class Rule:
    """Element filter plus the replacement producing its Markdown."""

    name: str
    filter: tuple[str, ...] | Callable[[Tag], bool]
    replacement: Callable[["MarkdownConverter", Tag, str], str]

    def matches(self, node: Tag) -> bool:
        if callable(self.filter):
            return self.filter(node)
        return node.name in self.filter


def _class_string(node: Tag) -> str:
    classes = node.get("class") or []
    if isinstance(classes, str):
        return classes.lower()
    return " ".join(classes).lower()


def _has_noise_class(node: Tag) -> bool:
    class_str = _class_string(node)
    return any(marker in class_str for marker in NOISE_CLASS_MARKERS)


def _escape_marker(match: re.Match) -> str:
    indent, marker = match.groups()
    if marker[-1] == ".":
        return f"{indent}{marker[:-1]}\\."
    return f"{indent}\\{marker}"


def _starts_line(node) -> bool:
    """True when node is the first thing on its Markdown line."""
    while node.previous_sibling is None:
        parent = node.parent
        if parent is None or parent.name not in INLINE_TAGS:
            return True
        node = parent
    previous = node.previous_sibling
    return isinstance(previous, Tag) and previous.name in LINE_BREAKING_TAGS


def _wrap_inline(content: str, marker: str) -> str:
    """Wrap content in marker keeping flanking whitespace outside it."""
    stripped = content.strip()
    if not stripped:
        return content if content.isspace() else ""
    leading = " " if content[0].isspace() else ""
    trailing = " " if content[-1].isspace() else ""
    return f"{leading}{marker}{stripped}{marker}{trailing}"


# --------------------------------------------------------------------------
# Replacements
# --------------------------------------------------------------------------


def _drop(_converter, _node, _content) -> str:
    return ""


def _chrome_gap(_converter, _node, _content) -> str:
    # Keep a gap so text on either side does not run together
    return "\n\n"


def _line_gap(_converter, _node, _content) -> str:
    return "\n"


def _block_container(_converter, node: Tag, content: str) -> str:
    trimmed = content.strip()
    if not trimmed:
        return ""
    class_str = _class_string(node)
    if any(marker in class_str for marker in CONTENT_CLASS_MARKERS):
        return f"\n\n{trimmed}\n\n"
    return f"\n{trimmed}\n"


def _inline_code(_converter, _node, content: str) -> str:
    if not content.strip():
        return ""
    return f"`{content}`"


def _heading(_converter, node: Tag, content: str) -> str:
    level = int(node.name[1])
    text = re.sub(r"\s+", " ", content).strip()
    if not text:
        return ""
    return f"\n\n{'#' * level} {text}\n\n"


def _fenced_code(_converter, node: Tag, _content) -> str:
    code = node.get_text().strip("\n")
    if not code.strip():
        return ""
    language = ""
    code_tag = node.find("code")
    classes = (code_tag.get("class") or []) if code_tag is not None else []
    for class_name in classes:
        if class_name.startswith(("language-", "lang-")):
            language = class_name.split("-", 1)[1]
            break
    return f"\n\n```{language}\n{code}\n```\n\n"


def _paragraph(_converter, _node, content: str) -> str:
    trimmed = content.strip()
    if not trimmed:
        return ""
    return f"\n\n{trimmed}\n\n"


def _horizontal_rule(_converter, _node, _content) -> str:
    return "\n\n---\n\n"


def _list(_converter, _node, content: str) -> str:
    trimmed = content.strip("\n")
    if not trimmed.strip():
        return ""
    return f"\n\n{trimmed}\n\n"


def _list_item(_converter, node: Tag, content: str) -> str:
    body = _BLANK_LINES_RE.sub("\n", content.strip())
    if not body:
        return ""
    body = body.replace("\n", "\n  ")
    parent = node.parent
    if parent is not None and parent.name == "ol":
        try:
            start = int(parent.get("start", 1))
        except (TypeError, ValueError):
            start = 1
        # Counted by position, identical items compare equal
        index = len(node.find_previous_siblings("li"))
        prefix = f"{start + index}. "
    else:
        prefix = "- "
    return f"{prefix}{body}\n"


def _blockquote(_converter, _node, content: str) -> str:
    trimmed = content.strip()
    if not trimmed:
        return ""
    quoted = "\n".join(f"> {line}" if line else ">" for line in trimmed.split("\n"))
    return f"\n\n{quoted}\n\n"


def _link(_converter, node: Tag, content: str) -> str:
    text = content.strip()
    if not text:
        return ""
    href = node.get("href")
    if href is None or href.strip().lower().startswith("javascript:"):
        return text
    return f"[{text}]({href.strip()})"


def _strong(_converter, _node, content: str) -> str:
    return _wrap_inline(content, "**")


def _emphasis(_converter, _node, content: str) -> str:
    return _wrap_inline(content, "*")


def _table_cell(_converter, _node, content: str) -> str:
    text = re.sub(r"\s+", " ", content).strip().replace("|", "\\|")
    return f" {text} |"


def _table_row(_converter, _node, content: str) -> str:
    if not content.strip():
        return ""
    return f"|{content}\n"


def _table(_converter, node: Tag, content: str) -> str:
    rows = [row for row in content.split("\n") if row.strip()]
    if not rows:
        return ""
    first_row = node.find("tr")
    if first_row is not None:
        cells = len(first_row.find_all(["th", "td"], recursive=False))
        if cells:
            rows.insert(1, "|" + " --- |" * cells)
    return "\n\n" + "\n".join(rows) + "\n\n"


# Order matters: the first matching rule wins
DEFAULT_RULES: tuple[Rule, ...] = (
    Rule("remove_metadata", ("head", "title", "meta", "link"), _drop),
    Rule("remove_images", ("img", "picture"), _drop),
    Rule("remove_navigation", ("nav", "footer", "header"), _chrome_gap),
    Rule("remove_by_class", _has_noise_class, _line_gap),
    Rule("block_element_spacing", BLOCK_CONTAINER_TAGS, _block_container),
    Rule(
        "preserve_code",
        lambda node: node.name == "code" and (node.parent is None or node.parent.name != "pre"),
        _inline_code,
    ),
    Rule("header_spacing", ("h1", "h2", "h3", "h4", "h5", "h6"), _heading),
    Rule("fenced_code_block", ("pre",), _fenced_code),
    Rule("paragraph", ("p",), _paragraph),
    Rule("line_break", ("br",), _line_gap),
    Rule("horizontal_rule", ("hr",), _horizontal_rule),
    Rule("list", ("ul", "ol"), _list),
    Rule("list_item", ("li",), _list_item),
    Rule("blockquote", ("blockquote",), _blockquote),
    Rule("link", ("a",), _link),
    Rule("strong", ("strong", "b"), _strong),
    Rule("emphasis", ("em", "i"), _emphasis),
    Rule("table_cell", ("th", "td"), _table_cell),
    Rule("table_row", ("tr",), _table_row),
    Rule("table", ("table",), _table),
)


class MarkdownConverter:
    """Single-pass HTML to Markdown converter."""

    def __init__(self, rules: tuple[Rule, ...] | None = None):
        self.rules = rules if rules is not None else DEFAULT_RULES

    def convert(self, html: str) -> str:
        """
        Convert HTML to raw Markdown.

        Never raises: if the tree walk fails the plain text of the document
        is returned instead.
        """
        if not html or not html.strip():
            return ""

        soup = None
        try:
            soup = BeautifulSoup(html, "lxml")
            markdown = self._convert_node(soup)
        except Exception as e:
            logger.warning(f"Markdown conversion failed, using plain text: {e}")
            markdown = soup.get_text("\n") if soup is not None else ""

        markdown = _EXCESS_NEWLINES_RE.sub("\n\n", markdown).strip()
        logger.debug(f"Converted {len(html)} chars of HTML to {len(markdown)} chars of Markdown")
        return markdown

    def convert_children(self, node: Tag) -> str:
        return "".join(self._convert_node(child) for child in node.children)

    def _convert_node(self, node) -> str:
        if isinstance(node, PreformattedString):
            # Comments, doctypes, CDATA
            return ""
        if isinstance(node, NavigableString):
            return self._convert_text(node)
        if not isinstance(node, Tag):
            return ""

        content = self.convert_children(node)
        for rule in self.rules:
            if rule.matches(node):
                return rule.replacement(self, node, content)
        return content

    @staticmethod
    def _convert_text(node: NavigableString) -> str:
        text = str(node)
        if text.isspace() and node.parent is not None and node.parent.name in STRUCTURAL_TAGS:
            return ""
        text = _HORIZONTAL_WS_RE.sub(" ", text)
        text = _INDENT_RE.sub("\n", text)
        text = _TRAILING_WS_RE.sub("\n", text)
        if node.find_parent("code") is not None:
            return text

        starts_line = _starts_line(node)
        return "\n".join(
            _LINE_MARKER_RE.sub(_escape_marker, line) if index or starts_line else line
            for index, line in enumerate(text.split("\n"))
        )
