"""Error taxonomy for the prompting engine.

Single source of truth for error codes and their category. Fatal errors end
the current ask call and propagate to the caller; recoverable errors are
reported to the user and the question is asked again.
"""

from __future__ import annotations

from typing import Dict


FATAL = "fatal"
RECOVERABLE = "recoverable"

ERROR_CODE_MAP: Dict[str, Dict[str, str]] = {
    "destination_unsupported": {"code": "CFG_DESTINATION_UNSUPPORTED", "category": FATAL},
    "destination_sequence": {"code": "CFG_DESTINATION_SEQUENCE", "category": FATAL},
    "prompt_empty": {"code": "CFG_PROMPT_EMPTY", "category": FATAL},
    "type_tag_unknown": {"code": "CFG_TYPE_TAG_UNKNOWN", "category": FATAL},
    "list_items_invalid": {"code": "CFG_LIST_ITEMS_INVALID", "category": FATAL},
    "list_option_invalid": {"code": "CFG_LIST_OPTION_INVALID", "category": FATAL},
    "list_mode_unknown": {"code": "CFG_LIST_MODE_UNKNOWN", "category": FATAL},
    "config_invalid": {"code": "CFG_SETTINGS_INVALID", "category": FATAL},
    "stream_read": {"code": "IO_STREAM_READ_FAILED", "category": FATAL},
    "stream_write": {"code": "IO_STREAM_WRITE_FAILED", "category": FATAL},
    "coercion": {"code": "ANS_COERCION_FAILED", "category": RECOVERABLE},
    "constraint": {"code": "ANS_CONSTRAINT_REJECTED", "category": RECOVERABLE},
    "narrow": {"code": "ANS_NARROW_FAILED", "category": RECOVERABLE},
}


class PromptError(ValueError):
    """Base class for every error raised by the prompting engine."""

    reason = "unidentified"

    def __init__(self, message: str, *, reason: str | None = None) -> None:
        super().__init__(message)
        if reason is not None:
            self.reason = reason

    @property
    def code(self) -> str:
        return ERROR_CODE_MAP.get(self.reason, {}).get("code", "RUN_UNIDENTIFIED_ERROR")

    @property
    def recoverable(self) -> bool:
        return ERROR_CODE_MAP.get(self.reason, {}).get("category") == RECOVERABLE


class FatalPromptError(PromptError):
    pass


class RecoverablePromptError(PromptError):
    pass


class ConfigurationError(FatalPromptError):
    reason = "destination_unsupported"


class StreamError(FatalPromptError):
    reason = "stream_read"


class CoercionError(RecoverablePromptError):
    reason = "coercion"


class ConstraintError(RecoverablePromptError):
    reason = "constraint"


class NarrowError(RecoverablePromptError):
    reason = "narrow"


__all__ = [
    "FATAL",
    "RECOVERABLE",
    "ERROR_CODE_MAP",
    "PromptError",
    "FatalPromptError",
    "RecoverablePromptError",
    "ConfigurationError",
    "StreamError",
    "CoercionError",
    "ConstraintError",
    "NarrowError",
]
