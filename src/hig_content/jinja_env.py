# -*- coding: utf-8 -*-
"""
Jinja2 setup for the front matter templates.
"""
import json
import re
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template

from .config import settings

_BLANK_RUN_RE = re.compile(r"\n{3,}")


class FrontMatterTemplate(Template):
    """Renders without blank-line runs or surrounding whitespace."""

    def render(self, *args, **kwargs) -> str:
        return _BLANK_RUN_RE.sub("\n\n", super().render(*args, **kwargs)).strip()


def _json_literal(value) -> str:
    # Keywords render as a JSON array, booleans as true/false
    return json.dumps(value, ensure_ascii=False)


def build_environment(template_dir: Path | str | None = None) -> Environment:
    """Environment over template_dir, or the packaged templates when omitted."""
    env = Environment(
        loader=FileSystemLoader(str(template_dir or settings.TEMPLATES_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )
    env.filters["json"] = _json_literal
    env.template_class = FrontMatterTemplate
    return env


@lru_cache(maxsize=None)
def _packaged_environment() -> Environment:
    return build_environment()


def render_template(template_name: str, **context) -> str:
    """
    Render a packaged template.

    Context values are inserted as data: "{{ value }}" inside a scraped title
    comes out literally.
    """
    return _packaged_environment().get_template(template_name).render(**context)
