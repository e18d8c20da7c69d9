"""ListMode enumeration for list layouts."""

from __future__ import annotations


class ListMode:
    COLUMNS_ACROSS = "columns_across"
    COLUMNS_DOWN = "columns_down"
    INLINE = "inline"
    ROWS = "rows"

    ALL = frozenset({COLUMNS_ACROSS, COLUMNS_DOWN, INLINE, ROWS})


__all__ = ["ListMode"]
