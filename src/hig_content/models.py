# -*- coding: utf-8 -*-
"""
Pydantic data models for pipeline input and output.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Platform(str, Enum):
    """Platform a guideline section applies to."""

    IOS = "iOS"
    MACOS = "macOS"
    WATCHOS = "watchOS"
    TVOS = "tvOS"
    VISIONOS = "visionOS"
    UNIVERSAL = "universal"


class Category(str, Enum):
    """Topic category of a guideline section."""

    FOUNDATIONS = "foundations"
    LAYOUT = "layout"
    NAVIGATION = "navigation"
    PRESENTATION = "presentation"
    SELECTION_AND_INPUT = "selection-and-input"
    STATUS = "status"
    SYSTEM_CAPABILITIES = "system-capabilities"
    VISUAL_DESIGN = "visual-design"
    ICONS_AND_SYMBOLS = "icons-and-symbols"
    COLOR_AND_MATERIALS = "color-and-materials"
    TYPOGRAPHY = "typography"
    MOTION = "motion"
    TECHNOLOGIES = "technologies"


class Section(BaseModel):
    """Metadata of one scraped guideline page."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable section identifier")
    title: str = Field(..., description="Section title as shown on the page")
    url: str = Field(default="", description="Source URL of the page")
    platform: Platform = Platform.UNIVERSAL
    category: Category = Category.FOUNDATIONS


class RawDocument(BaseModel):
    """Raw page markup paired with its section metadata."""

    model_config = ConfigDict(frozen=True)

    html: str = ""
    section: Section


class QualityMetrics(BaseModel):
    """Reliability signal computed for cleaned content."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0.0, le=1.0)
    length: int = Field(..., ge=0)
    structure_score: float = Field(..., ge=0.0, le=1.0)
    apple_terms_score: float = Field(..., ge=0.0, le=1.0)
    code_examples_count: int = Field(default=0, ge=0)
    image_references_count: int = Field(default=0, ge=0)
    heading_count: int = Field(default=0, ge=0)
    is_fallback_content: bool = False
    extraction_method: str
    confidence: float = Field(..., ge=0.0, le=1.0)


class ProcessedDocument(BaseModel):
    """Result of the content pipeline for one page."""

    model_config = ConfigDict(frozen=True)

    cleaned_markdown: str
    front_matter: str
    quality: QualityMetrics
    keywords: tuple[str, ...] = ()
    related_sections: tuple[str, ...] = ()

    @field_validator("keywords", "related_sections")
    @classmethod
    def _no_duplicates(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError("entries must be unique")
        return value

    @property
    def document(self) -> str:
        """Front matter followed by the cleaned body, as persisted downstream."""
        return self.front_matter + self.cleaned_markdown
