"""Central logging configuration for promptline.

Applies a root stderr handler so module loggers are visible without
interleaving with prompts written to stdout. Avoids duplicate handlers when
called more than once.
"""
from __future__ import annotations
import logging
from logging.config import dictConfig
from typing import Optional

from promptline.config import load_config


def _dict_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stderr",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "promptline": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Configure application-wide logging once.

    If the root logger already has handlers, return to prevent duplicate
    output. The level defaults to the configured `logging.level`.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    dictConfig(_dict_config(level or load_config().log.level))


__all__ = ["configure_logging"]
