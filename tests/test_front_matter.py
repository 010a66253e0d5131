# -*- coding: utf-8 -*-
"""
Tests for front matter generation.
"""
import json
from datetime import datetime, timedelta, timezone

import pytest

from hig_content.front_matter import FrontMatterGenerator, _iso_timestamp
from hig_content.jinja_env import build_environment
from hig_content.models import QualityMetrics, Section

FIELD_ORDER = [
    "title",
    "platform",
    "category",
    "url",
    "quality_score",
    "content_length",
    "last_updated",
    "keywords",
    "has_code_examples",
    "has_images",
    "is_fallback",
]


def _quality(**overrides) -> QualityMetrics:
    values = {
        "score": 0.71234,
        "length": 1234,
        "structure_score": 0.5,
        "apple_terms_score": 0.3,
        "code_examples_count": 1,
        "image_references_count": 0,
        "heading_count": 3,
        "is_fallback_content": False,
        "extraction_method": "dom-rules-enhanced",
        "confidence": 0.81234,
    }
    values.update(overrides)
    return QualityMetrics(**values)


def _fields(front_matter: str) -> dict[str, str]:
    lines = front_matter.strip().split("\n")
    return dict(line.split(": ", 1) for line in lines[1:-1])


@pytest.fixture
def generator():
    return FrontMatterGenerator()


class TestFrontMatterGenerator:
    """Tests for FrontMatterGenerator."""

    def test_delimiters(self, generator, section, generated_at):
        """Should wrap fields in --- lines and end with a blank line."""
        front_matter = generator.generate(section, _quality(), ("buttons",), generated_at)

        assert front_matter.startswith("---\n")
        assert front_matter.endswith("\n---\n\n")

    def test_field_order(self, generator, section, generated_at):
        """Should emit fields in a fixed order."""
        front_matter = generator.generate(section, _quality(), ("buttons",), generated_at)

        assert list(_fields(front_matter)) == FIELD_ORDER

    def test_field_values(self, generator, section, generated_at):
        """Should serialize metadata and quality results."""
        front_matter = generator.generate(
            section, _quality(), ("buttons", "ios", "selection-and-input"), generated_at
        )

        fields = _fields(front_matter)

        assert fields["title"] == "Buttons"
        assert fields["platform"] == "iOS"
        assert fields["category"] == "selection-and-input"
        assert fields["url"] == section.url
        assert fields["quality_score"] == "0.71"
        assert fields["content_length"] == "1234"
        assert fields["last_updated"] == "2024-01-15T12:00:00.000Z"
        assert json.loads(fields["keywords"]) == ["buttons", "ios", "selection-and-input"]
        assert fields["has_code_examples"] == "true"
        assert fields["has_images"] == "false"
        assert fields["is_fallback"] == "false"

    def test_fallback_flags(self, generator, section, generated_at):
        """Should report fallback content and images."""
        quality = _quality(
            score=0.1, confidence=0.1, is_fallback_content=True,
            code_examples_count=0, image_references_count=2,
        )

        fields = _fields(generator.generate(section, quality, (), generated_at))

        assert fields["quality_score"] == "0.1"
        assert fields["keywords"] == "[]"
        assert fields["has_code_examples"] == "false"
        assert fields["has_images"] == "true"
        assert fields["is_fallback"] == "true"

    def test_multiline_title_stays_on_one_line(self, generator, generated_at):
        """Should keep every field on a single line."""
        section = Section(id="odd", title="Buttons\nand   menus", url="https://example.com/a\nb")

        fields = _fields(generator.generate(section, _quality(), (), generated_at))

        assert fields["title"] == "Buttons and menus"
        assert fields["url"] == "https://example.com/a b"

    def test_template_syntax_in_values_is_literal(self, generator, generated_at):
        """Should not evaluate template syntax found in scraped values."""
        section = Section(id="odd", title="{{ 7 * 7 }} buttons")

        fields = _fields(generator.generate(section, _quality(), ("{% raw %}",), generated_at))

        assert fields["title"] == "{{ 7 * 7 }} buttons"
        assert json.loads(fields["keywords"]) == ["{% raw %}"]

    def test_defaults_to_now(self, generator, section):
        """Should stamp the current time when no timestamp is given."""
        before = datetime.now(timezone.utc).replace(microsecond=0)

        fields = _fields(generator.generate(section, _quality(), ()))

        stamped = datetime.fromisoformat(fields["last_updated"].replace("Z", "+00:00"))
        assert before <= stamped <= datetime.now(timezone.utc)


class TestIsoTimestamp:
    """Tests for timestamp formatting."""

    def test_milliseconds_and_z_suffix(self):
        """Should format UTC times with milliseconds and Z."""
        moment = datetime(2024, 3, 1, 8, 5, 9, 123456, tzinfo=timezone.utc)

        assert _iso_timestamp(moment) == "2024-03-01T08:05:09.123Z"

    def test_converts_to_utc(self):
        """Should convert aware timestamps to UTC."""
        moment = datetime(2024, 3, 1, 10, 0, tzinfo=timezone(timedelta(hours=2)))

        assert _iso_timestamp(moment) == "2024-03-01T08:00:00.000Z"

    def test_naive_is_utc(self):
        """Should treat naive timestamps as UTC."""
        assert _iso_timestamp(datetime(2024, 3, 1)) == "2024-03-01T00:00:00.000Z"


class TestBuildEnvironment:
    """Tests for the template environment."""

    def test_custom_directory_and_cleanup(self, tmp_path):
        """Should load from the given directory, apply the json filter and drop blank-line runs."""
        (tmp_path / "page.j2").write_text("---\n\n\n\nflag: {{ flag | json }}\n\n", encoding="utf-8")

        rendered = build_environment(tmp_path).get_template("page.j2").render(flag=True)

        assert rendered == "---\n\nflag: true"
