"""Interactive command-line prompting toolkit.

Asks questions on a terminal, coerces and validates the answers against a
declared type and constraint set, retries on invalid input, and lays out
lists of items for display. Prompting logic lives in `promptline/logic/`
and plain data types in `promptline/models/`.
"""

from __future__ import annotations

from promptline.errors import (
    CoercionError,
    ConfigurationError,
    ConstraintError,
    FatalPromptError,
    NarrowError,
    PromptError,
    RecoverablePromptError,
    StreamError,
)
from promptline.logic.constraints import ConstraintSet, Membership, Predicate, Range
from promptline.logic.engine import ask, confirm
from promptline.logic.list_formatter import format_list, list_items
from promptline.logic.question import Question
from promptline.logic.text_io import say, say_trimmed
from promptline.models.destination import Destination
from promptline.models.list_mode import ListMode
from promptline.models.type_tag import DestinationKind, TypeTag

__all__ = [
    "ask",
    "confirm",
    "format_list",
    "list_items",
    "say",
    "say_trimmed",
    "Question",
    "Destination",
    "DestinationKind",
    "TypeTag",
    "ListMode",
    "ConstraintSet",
    "Membership",
    "Range",
    "Predicate",
    "PromptError",
    "FatalPromptError",
    "RecoverablePromptError",
    "ConfigurationError",
    "StreamError",
    "CoercionError",
    "ConstraintError",
    "NarrowError",
]
