"""Pydantic model for a coerced answer value.

A CoercedValue carries the wide representation of an answer together with
the TypeTag it was coerced under. Validation enforces that the Python type of
`value` agrees with the tag and that integers fit the 64-bit wide range.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr, model_validator

from promptline.models.type_tag import INT64_MAX, INT64_MIN, UINT64_MAX, TypeTag


class CoercedValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: str
    value: Union[StrictInt, StrictFloat, StrictStr]

    @model_validator(mode="after")
    def value_must_match_tag(self) -> "CoercedValue":
        tag, value = self.tag, self.value
        if tag not in TypeTag.ALL:
            raise ValueError(f"tag must be one of {sorted(TypeTag.ALL)}")
        if tag == TypeTag.UINT:
            if not isinstance(value, int) or not 0 <= value <= UINT64_MAX:
                raise ValueError("uint value must be an integer in [0, 2**64)")
        elif tag == TypeTag.INT:
            if not isinstance(value, int) or not INT64_MIN <= value <= INT64_MAX:
                raise ValueError("int value must be an integer in [-2**63, 2**63)")
        elif tag == TypeTag.FLOAT:
            if not isinstance(value, float):
                raise ValueError("float value must be a float")
        elif not isinstance(value, str):
            raise ValueError("text value must be a string")
        return self

    def is_numeric(self) -> bool:
        return self.tag != TypeTag.TEXT


__all__ = ["CoercedValue"]
