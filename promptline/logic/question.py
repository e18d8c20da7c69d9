"""Question state and the parse/validate/assign lifecycle.

A Question is created fresh for every ask call with the TypeTag of the
caller's destination. The caller's configure callback may then set the
default, first answer, constraints, response overrides and failure hook;
after that the answer engine only drives the lifecycle methods below.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional

from promptline.errors import CoercionError, ConfigurationError, ConstraintError, NarrowError, PromptError, RecoverablePromptError
from promptline.logic.coercion import coerce, narrow
from promptline.logic.constraints import ConstraintSet, Membership, Predicate, Range
from promptline.logic.text_io import trailing_whitespace
from promptline.models.coerced_value import CoercedValue
from promptline.models.destination import Destination
from promptline.models.responses import ASK_ON_ERROR, INVALID_TYPE, NOT_VALID
from promptline.models.type_tag import TypeTag


logger = logging.getLogger(__name__)

FailureHook = Callable[[PromptError], None]


class Question:
    def __init__(self, type_tag: str, prompt: str) -> None:
        if type_tag not in TypeTag.ALL:
            raise ConfigurationError(f"unknown answer type {type_tag!r}", reason="type_tag_unknown")
        if not prompt:
            raise ConfigurationError("a question needs non-empty prompt text", reason="prompt_empty")
        self._type_tag = type_tag
        self.prompt = prompt
        self.default: Optional[str] = None
        self.first_answer: Optional[str] = None
        self.constraints = ConstraintSet()
        self.responses: Dict[str, str] = {}
        self.on_failure: Optional[FailureHook] = None
        self.trim = True
        self._value: Optional[CoercedValue] = None

    @property
    def type_tag(self) -> str:
        return self._type_tag

    @property
    def value(self) -> Optional[CoercedValue]:
        return self._value

    # Configuration helpers

    def restrict_to(self, tokens: Iterable[str]) -> "Question":
        """Replace the constraints with a membership check on `tokens`."""
        self.constraints = ConstraintSet.of(Membership(tokens))
        return self

    def within(self, minimum: Optional[float] = None, maximum: Optional[float] = None) -> "Question":
        self.constraints.add(Range(minimum, maximum))
        return self

    def satisfies(self, predicate, description: str = "an acceptable answer") -> "Question":
        self.constraints.add(Predicate(predicate, description))
        return self

    # Lifecycle

    def try_first_answer(self) -> Optional[CoercedValue]:
        """Resolve the question from its first answer, if one is usable.

        A first answer that fails coercion or validation is dropped silently
        so the caller falls back to an interactive prompt.
        """
        if self.first_answer is None:
            return None
        try:
            return self.parse(self.first_answer)
        except RecoverablePromptError as exc:
            logger.debug("first_answer_ignored token=%r reason=%s", self.first_answer, exc.code)
            return None

    def default_string(self, trailing: str = "") -> str:
        if self.default is None:
            return ""
        return f"|{self.default}|{trailing}"

    def compose_prompt(self, prompt: str) -> str:
        return prompt + self.default_string(trailing_whitespace(prompt))

    def parse(self, raw: str) -> CoercedValue:
        """Coerce and validate one response.

        Empty input is replaced by the default token when one is set.
        Raises CoercionError or ConstraintError.
        """
        self._value = None
        token = raw.strip() if self.trim else raw
        if token == "" and self.default is not None:
            token = self.default
        value = coerce(token, self._type_tag)
        if not self.constraints.validate(token, value):
            raise ConstraintError(f"{token!r} is not {self.constraints.describe()}")
        self._value = value
        return value

    def set_dest(self, destination: Destination) -> None:
        """Narrow the last parsed value into `destination`."""
        if self._value is None:
            raise NarrowError("no answer has been parsed")
        destination.value = narrow(self._value, destination.kind)

    def retry_prompt(self, current: str) -> str:
        return self.responses.get(ASK_ON_ERROR) or current

    def error_message(self, error: PromptError) -> str:
        if isinstance(error, ConstraintError):
            return self.responses.get(NOT_VALID) or str(error)
        if isinstance(error, CoercionError):
            return self.responses.get(INVALID_TYPE) or str(error)
        return str(error)


__all__ = ["Question", "FailureHook"]
