"""Console entry point demonstrating the prompting toolkit.

Asks for a name and an age, confirms, then lists a few sample items in the
requested layout. `--first-answer` pre-supplies the name so scripted runs can
skip that prompt.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from promptline.errors import PromptError
from promptline.logging_setup import configure_logging
from promptline.logic.engine import ask, confirm
from promptline.logic.list_formatter import list_items
from promptline.logic.question import Question
from promptline.models.destination import Destination
from promptline.models.list_mode import ListMode
from promptline.models.responses import ASK_ON_ERROR
from promptline.models.type_tag import DestinationKind

logger = logging.getLogger(__name__)

SAMPLE_ITEMS = ["red", "green", "blue", "cyan", "magenta", "yellow", "black", "white"]

_MODES = {
    "rows": ListMode.ROWS,
    "across": ListMode.COLUMNS_ACROSS,
    "down": ListMode.COLUMNS_DOWN,
    "inline": ListMode.INLINE,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="promptline-demo", description="Interactive prompting demo")
    parser.add_argument("--first-answer", default=None, help="pre-supplied answer for the name question")
    parser.add_argument("--layout", choices=sorted(_MODES), default="across", help="list layout")
    parser.add_argument("--wrap", type=int, default=None, help="wrap width for column layouts")
    parser.add_argument("--log-level", default=None, help="override the configured log level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level.upper() if args.log_level else None)

    name = Destination(DestinationKind.STR)
    age = Destination(DestinationKind.UINT8)

    def _name(q: Question) -> None:
        q.default = "anonymous"
        q.first_answer = args.first_answer

    def _age(q: Question) -> None:
        q.within(0, 150)
        q.responses[ASK_ON_ERROR] = "Age in years? "

    try:
        ask(name, "What is your name? ", _name)
        ask(age, "How old are you? ", _age)
    except PromptError as exc:
        logger.error("demo_aborted code=%s error=%s", exc.code, exc)
        return 1

    if not confirm(f"Show colours for {name.value} ({age.value})? ", True):
        return 0

    mode = _MODES[args.layout]
    option = args.wrap if mode in (ListMode.COLUMNS_ACROSS, ListMode.COLUMNS_DOWN) else None
    try:
        list_items(SAMPLE_ITEMS, mode, option)
    except PromptError as exc:
        logger.error("demo_aborted code=%s error=%s", exc.code, exc)
        return 1
    return 0


__all__ = ["main"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
