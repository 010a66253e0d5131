# -*- coding: utf-8 -*-
"""
Quality assessment of cleaned guideline content.

Best-effort classifier built from hand-tuned phrase lists and thresholds. It
scores structure, design vocabulary and guideline phrasing, and flags
fallback content: scrape artifacts such as a JavaScript-required placeholder
that must not be served as guidance.
"""
import logging
import re

from .config import Settings, settings
from .models import QualityMetrics
from .vocabulary import (
    DESIGN_TERMS,
    FALLBACK_INDICATORS,
    GUIDELINE_PHRASES,
    SPA_INDICATORS,
    SUBSTANTIAL_CONTENT_PHRASES,
)

logger = logging.getLogger(__name__)

# Fixed scores, part of the output contract
FALLBACK_SCORE = 0.1
SPA_ARTIFACT_SCORE = 0.3
CONFIDENCE_MARGIN = 0.1

HEADING_RE = re.compile(r"^#+", re.MULTILINE)
IMAGE_RE = re.compile(r"!\[.*?\]")
CODE_FENCE = "```"


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _contains_any(text: str, phrases: tuple[str, ...]) -> bool:
    return any(phrase in text for phrase in phrases)


class QualityAssessor:
    """Computes QualityMetrics for cleaned Markdown."""

    def __init__(self, config: Settings | None = None):
        self.config = config or settings

    def assess(self, content: str, original: str | None = None) -> QualityMetrics:
        """
        Score cleaned content.

        Args:
            content: Cleaned Markdown
            original: Markdown before normalization, only used to make
                fallback detection robust to phrases the normalizer removed

        Returns:
            QualityMetrics with score and confidence clamped to [0, 1]
        """
        config = self.config
        content_lower = content.lower()

        length = len(content)
        heading_count = len(HEADING_RE.findall(content))
        code_examples_count = content.count(CODE_FENCE) // 2
        image_references_count = len(IMAGE_RE.findall(content))

        structure_score = _clamp(heading_count * 0.1 + code_examples_count * 0.2)

        terms_found = sum(1 for term in DESIGN_TERMS if term in content_lower)
        apple_terms_score = _clamp(terms_found / config.TERMS_SCORE_DIVISOR)

        is_fallback = self.detect_fallback(content, original)
        has_spa_issues = _contains_any(content_lower, SPA_INDICATORS)

        if is_fallback:
            score = FALLBACK_SCORE
            confidence = FALLBACK_SCORE
        else:
            if has_spa_issues and length <= config.SPA_SUBSTANTIAL_LENGTH:
                score = SPA_ARTIFACT_SCORE
            else:
                length_score = min(1.0, length / config.LENGTH_SCORE_TARGET)
                guideline_score = (
                    config.GUIDELINE_SCORE if _contains_any(content_lower, GUIDELINE_PHRASES) else 0.0
                )
                structure_bonus = (
                    config.STRUCTURE_BONUS
                    if heading_count >= config.STRUCTURE_BONUS_MIN_HEADINGS
                    else 0.0
                )
                score = (
                    length_score * config.LENGTH_WEIGHT
                    + structure_score * config.STRUCTURE_WEIGHT
                    + apple_terms_score * config.TERMS_WEIGHT
                    + guideline_score * config.GUIDELINE_WEIGHT
                    + structure_bonus * config.STRUCTURE_BONUS_WEIGHT
                )
            score = _clamp(score)
            confidence = _clamp(score + CONFIDENCE_MARGIN)

        logger.debug(
            "Quality assessed",
            extra={
                "score": round(score, 3),
                "length": length,
                "heading_count": heading_count,
                "is_fallback": is_fallback,
            },
        )

        return QualityMetrics(
            score=score,
            length=length,
            structure_score=structure_score,
            apple_terms_score=apple_terms_score,
            code_examples_count=code_examples_count,
            image_references_count=image_references_count,
            heading_count=heading_count,
            is_fallback_content=is_fallback,
            extraction_method=config.EXTRACTION_METHOD,
            confidence=confidence,
        )

    def has_substantial_content(self, content: str) -> bool:
        """Long content with guideline phrasing is real guidance."""
        return len(content) > self.config.SUBSTANTIAL_CONTENT_LENGTH and _contains_any(
            content.lower(), SUBSTANTIAL_CONTENT_PHRASES
        )

    def detect_fallback(self, content: str, original: str | None = None) -> bool:
        """Return True when content is a scrape artifact rather than guidance."""
        if self.has_substantial_content(content):
            return False

        content_lower = content.lower()
        original_lower = original.lower() if original is not None else content_lower
        texts = (content_lower, original_lower)

        # Nothing left to serve
        if not content.strip():
            return True

        if any(_contains_any(text, FALLBACK_INDICATORS) for text in texts):
            return True

        mentions_javascript = any("javascript" in text for text in texts)
        asks_for_javascript = any("required" in text or "turn on" in text for text in texts)
        if mentions_javascript and asks_for_javascript:
            return True

        is_too_short = len(content) < self.config.SHORT_CONTENT_LENGTH
        return is_too_short and any(_contains_any(text, SPA_INDICATORS) for text in texts)
