# -*- coding: utf-8 -*-
"""
Front matter header for processed documents.
"""
from datetime import datetime, timezone

from .jinja_env import render_template
from .models import QualityMetrics, Section

FRONT_MATTER_TEMPLATE = "front_matter.j2"


def _single_line(value: str) -> str:
    return " ".join(value.split())


def _iso_timestamp(moment: datetime) -> str:
    """UTC timestamp with millisecond precision and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class FrontMatterGenerator:
    """Serializes section metadata and quality results as a front matter block."""

    def __init__(self, template_name: str = FRONT_MATTER_TEMPLATE):
        self.template_name = template_name

    def generate(
            self,
            section: Section,
            quality: QualityMetrics,
            keywords: tuple[str, ...] | list[str],
            generated_at: datetime | None = None,
    ) -> str:
        """
        Render the front matter.

        Fields come out one `key: value` per line in a fixed order, between
        `---` delimiter lines, followed by a blank line.
        """
        header = render_template(
            self.template_name,
            title=_single_line(section.title),
            platform=section.platform.value,
            category=section.category.value,
            url=_single_line(section.url),
            quality_score=round(quality.score, 2),
            content_length=quality.length,
            last_updated=_iso_timestamp(generated_at or datetime.now(timezone.utc)),
            keywords=list(keywords),
            has_code_examples=quality.code_examples_count > 0,
            has_images=quality.image_references_count > 0,
            is_fallback=quality.is_fallback_content,
        )
        return header + "\n\n"
