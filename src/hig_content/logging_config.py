# -*- coding: utf-8 -*-
"""
Structured JSON logging configuration.
"""
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, TextIO

from pythonjsonlogger.json import JsonFormatter as jsonlogger

from .config import settings

# Id of the section being processed (accessible from every stage)
section_id_ctx: ContextVar[str | None] = ContextVar("section_id", default=None)


def get_section_id() -> str | None:
    """Get the current section id from context."""
    return section_id_ctx.get()


@contextmanager
def section_context(section_id: str) -> Iterator[None]:
    """Tag every log record emitted inside the block with section_id."""
    token = section_id_ctx.set(section_id)
    try:
        yield
    finally:
        section_id_ctx.reset(token)


class SectionIDFilter(logging.Filter):
    """Add section_id to log records."""

    def filter(self, record):
        record.section_id = get_section_id() or "-"
        return True


class CustomJsonFormatter(jsonlogger):
    """Custom JSON formatter with standard fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["section_id"] = getattr(record, "section_id", "-")


def setup_logging(level: str | None = None, stream: TextIO | None = None) -> logging.Logger:
    """
    Configure root logging.

    Args:
        level: Log level name. Defaults to settings.LOG_LEVEL.
        stream: Output stream. Defaults to stdout.

    Returns:
        The configured root logger.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level or settings.LOG_LEVEL))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    if settings.LOG_FORMAT == "json":
        formatter = CustomJsonFormatter(
            fmt="%(levelname)s %(name)s %(section_id)s %(message)s",
            rename_fields={"levelname": "level"},
            timestamp="@timestamp",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(section_id)s] %(message)s"
        )
    handler.setFormatter(formatter)
    handler.addFilter(SectionIDFilter())
    root_logger.addHandler(handler)

    # Reduce noise from external libraries
    logging.getLogger("bs4").setLevel(logging.WARNING)

    return root_logger
