# -*- coding: utf-8 -*-
"""
Guideline content processor - turns scraped HTML pages into clean Markdown
with a quality signal.
"""
__version__ = "1.0.0"

from .models import (  # noqa: E402
    Category,
    Platform,
    ProcessedDocument,
    QualityMetrics,
    RawDocument,
    Section,
)
from .processor import ContentProcessor, content_processor  # noqa: E402

__all__ = [
    "Category",
    "ContentProcessor",
    "Platform",
    "ProcessedDocument",
    "QualityMetrics",
    "RawDocument",
    "Section",
    "content_processor",
    "__version__",
]
