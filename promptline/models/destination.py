"""Statically typed write target for answers.

A Destination declares its scalar kind up front; the answer engine derives
the question's TypeTag from that kind and writes the narrowed answer into
`value`. Callers own the instance and read `value` after a successful ask.
"""

from __future__ import annotations

from typing import Any

from promptline.errors import ConfigurationError
from promptline.models.type_tag import KIND_BITS, KIND_TAGS


class Destination:
    def __init__(self, kind: str, value: Any = None) -> None:
        if kind not in KIND_TAGS:
            raise ConfigurationError(
                f"unusable destination kind {kind!r}; expected one of {sorted(KIND_TAGS)}",
                reason="destination_unsupported",
            )
        self._kind = kind
        self.value = value

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def type_tag(self) -> str:
        return KIND_TAGS[self._kind]

    @property
    def bits(self) -> int | None:
        return KIND_BITS.get(self._kind)

    def __repr__(self) -> str:
        return f"Destination(kind={self._kind!r}, value={self.value!r})"


__all__ = ["Destination"]
