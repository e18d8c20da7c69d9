"""Declarative answer constraints.

A ConstraintSet is an ordered collection of constraints that must all accept
an answer. An empty set accepts everything. Membership is checked against the
raw token so that several spellings ("y", "yes") can be allowed without a
dedicated boolean type; range and predicate checks see the coerced value.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional

from promptline.models.coerced_value import CoercedValue


class Constraint:
    """Base constraint; subclasses implement `accepts` and `describe`."""

    def accepts(self, token: str, value: CoercedValue) -> bool:  # pragma: no cover - interface
        raise NotImplementedError

    def describe(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError


class Membership(Constraint):
    def __init__(self, allowed: Iterable[str]) -> None:
        # Keep declaration order for messages
        self.allowed: List[str] = []
        for token in allowed:
            if token not in self.allowed:
                self.allowed.append(str(token))

    def accepts(self, token: str, value: CoercedValue) -> bool:
        return token in self.allowed

    def describe(self) -> str:
        return "one of " + ", ".join(self.allowed)


class Range(Constraint):
    def __init__(self, minimum: Optional[float] = None, maximum: Optional[float] = None) -> None:
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError("range minimum must not exceed maximum")
        self.minimum = minimum
        self.maximum = maximum

    def accepts(self, token: str, value: CoercedValue) -> bool:
        if not value.is_numeric():
            return False
        if self.minimum is not None and value.value < self.minimum:
            return False
        if self.maximum is not None and value.value > self.maximum:
            return False
        return True

    def describe(self) -> str:
        if self.minimum is not None and self.maximum is not None:
            return f"between {self.minimum} and {self.maximum}"
        if self.minimum is not None:
            return f"at least {self.minimum}"
        if self.maximum is not None:
            return f"at most {self.maximum}"
        return "any number"


class Predicate(Constraint):
    def __init__(self, func: Callable[[str, CoercedValue], Any], description: str = "an acceptable answer") -> None:
        self.func = func
        self.description = description

    def accepts(self, token: str, value: CoercedValue) -> bool:
        return bool(self.func(token, value))

    def describe(self) -> str:
        return self.description


class ConstraintSet:
    def __init__(self, constraints: Iterable[Constraint] = ()) -> None:
        self._constraints: List[Constraint] = list(constraints)

    @classmethod
    def of(cls, *constraints: Constraint) -> "ConstraintSet":
        return cls(constraints)

    def add(self, constraint: Constraint) -> "ConstraintSet":
        self._constraints.append(constraint)
        return self

    def is_empty(self) -> bool:
        return not self._constraints

    def validate(self, token: str, value: CoercedValue) -> bool:
        """Return True when every constraint accepts the answer."""
        return all(c.accepts(token, value) for c in self._constraints)

    def describe(self) -> str:
        return " and ".join(c.describe() for c in self._constraints)

    def __iter__(self):
        return iter(self._constraints)

    def __len__(self) -> int:
        return len(self._constraints)


__all__ = [
    "Constraint",
    "Membership",
    "Range",
    "Predicate",
    "ConstraintSet",
]
