"""List layout for display.

`format_list` is pure and returns the lines to print; `list_items` writes
them through the text writer. Layouts:
- ROWS: one item per line
- COLUMNS_ACROSS / COLUMNS_DOWN: fixed-width columns filled row-major or
  column-major, falling back to rows when only one column fits the wrap
- INLINE: a comma-separated phrase, e.g. "red, green, or blue"
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from promptline.config import load_checked_config
from promptline.errors import ConfigurationError
from promptline.logic.text_io import TextWriter, default_writer, say_trimmed
from promptline.models.list_mode import ListMode


def _as_text(item: Any) -> str:
    if isinstance(item, str):
        return item
    # Only objects that define their own string form qualify
    if type(item).__str__ is not object.__str__:
        return str(item)
    raise ConfigurationError(
        f"list items must be strings or define __str__, got {type(item).__name__}",
        reason="list_items_invalid",
    )


def _texts(items: Sequence[Any]) -> List[str]:
    if isinstance(items, (str, bytes)) or not isinstance(items, (list, tuple)):
        raise ConfigurationError("list given a non-sequence value", reason="list_items_invalid")
    return [_as_text(item) for item in items]


def _columns(strs: List[str], mode: str, option: Any) -> List[str]:
    if option is None:
        wrap = load_checked_config().layout.wrap_width
    elif isinstance(option, int) and not isinstance(option, bool):
        wrap = option
    else:
        raise ConfigurationError("list option of unacceptable type", reason="list_option_invalid")

    n = len(strs)
    width = max((len(s) for s in strs), default=0)
    ncols = (wrap + 1) // (width + 1)
    if ncols <= 1:
        return [s.rstrip() for s in strs]

    nrows = (n + ncols - 1) // ncols
    padded = [s.ljust(width) for s in strs]
    lines: List[str] = []
    if mode == ListMode.COLUMNS_ACROSS:
        for i in range(0, n, ncols):
            lines.append(" ".join(padded[i:i + ncols]).rstrip())
    else:
        for i in range(nrows):
            row = []
            for j in range(ncols):
                index = j * nrows + i
                if index >= n:
                    break
                row.append(padded[index])
            lines.append(" ".join(row).rstrip())
    return lines


def _inline(strs: List[str], option: Any) -> List[str]:
    n = len(strs)
    if n == 0:
        return []
    if n == 1:
        return [strs[0].rstrip()]

    if option is None:
        join = load_checked_config().layout.inline_join
    elif isinstance(option, str):
        join = option
    else:
        raise ConfigurationError("list option of unacceptable type", reason="list_option_invalid")

    if n == 2:
        return [f"{strs[0]} {join} {strs[1]}".rstrip()]
    strs = list(strs)
    strs[-1] = f"{join} {strs[-1]}"
    return [", ".join(strs).rstrip()]


def format_list(items: Sequence[Any], mode: str, option: Any = None) -> List[str]:
    """Return the display lines for `items` laid out in `mode`.

    Raises ConfigurationError for non-sequence items, items without a string
    form, an unknown mode or an option whose type does not suit the mode.
    """
    strs = _texts(items)
    if mode in (ListMode.COLUMNS_ACROSS, ListMode.COLUMNS_DOWN):
        return _columns(strs, mode, option)
    if mode == ListMode.INLINE:
        return _inline(strs, option)
    if mode == ListMode.ROWS:
        return [s.rstrip() for s in strs]
    raise ConfigurationError(f"unknown list mode {mode!r}", reason="list_mode_unknown")


def list_items(
    items: Sequence[Any],
    mode: str,
    option: Any = None,
    *,
    writer: Optional[TextWriter] = None,
) -> None:
    """Write `items` laid out in `mode`, one trimmed line at a time."""
    lines = format_list(items, mode, option)
    out = writer if writer is not None else default_writer()
    for line in lines:
        say_trimmed(out, line)


__all__ = ["format_list", "list_items"]
