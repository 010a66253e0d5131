# -*- coding: utf-8 -*-
"""
Content processor configuration using Pydantic BaseSettings.
"""
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration loaded from environment variables.

    The heuristic thresholds below were tuned by hand against scraped guideline
    pages. They live here so they can be retuned without touching the passes
    that use them.
    """

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"

    # Tag written to QualityMetrics.extraction_method
    EXTRACTION_METHOD: str = "dom-rules-enhanced"

    # ==========================================================================
    # Markdown Normalizer
    # ==========================================================================

    # Repeated headings longer than this (whole line) are kept
    DUPLICATE_HEADING_MAX_LENGTH: int = 20

    # Minimum length of the word glued to a known term before it is split off
    CONCATENATION_MIN_AFFIX: int = 3

    # ==========================================================================
    # Extraction
    # ==========================================================================
    MAX_KEYWORDS: int = 20
    MAX_RELATED_SECTIONS: int = 5

    # ==========================================================================
    # Quality Assessor
    # ==========================================================================

    # Length (chars) that earns a full length score
    LENGTH_SCORE_TARGET: int = 800

    # Content longer than this with guideline phrases is never fallback
    SUBSTANTIAL_CONTENT_LENGTH: int = 500

    # SPA artifacts only cap the score at or below this length
    SPA_SUBSTANTIAL_LENGTH: int = 400

    # SPA artifacts in content shorter than this mark it as fallback
    SHORT_CONTENT_LENGTH: int = 200

    # Number of design terms that earns a full terms score
    TERMS_SCORE_DIVISOR: int = 10

    GUIDELINE_SCORE: float = 0.4
    STRUCTURE_BONUS: float = 0.2
    STRUCTURE_BONUS_MIN_HEADINGS: int = 2

    # Weights of the overall score (sum to 1.0)
    LENGTH_WEIGHT: float = 0.2
    STRUCTURE_WEIGHT: float = 0.15
    TERMS_WEIGHT: float = 0.15
    GUIDELINE_WEIGHT: float = 0.35
    STRUCTURE_BONUS_WEIGHT: float = 0.15

    # ==========================================================================
    # Paths (computed, not from env vars)
    # ==========================================================================
    BASE_DIR: Path = Path(__file__).resolve().parent
    TEMPLATES_DIR: Path = BASE_DIR / "templates"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Global configuration instance
settings = Settings()
