"""Answer engine: the ask loop and the confirm helper.

`ask` builds a Question for the caller's Destination, lets the caller
configure it, then either resolves it from a pre-supplied first answer or
prompts until a response parses, validates and fits the destination.

Fatal errors (bad configuration, broken input or output streams) end the
call: the question's failure hook is notified and the error is raised.
Recoverable errors (coercion, constraint, narrowing) are printed and the
question is asked again, using the ask-on-error prompt when configured.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from promptline.config import load_checked_config
from promptline.errors import ConfigurationError, FatalPromptError, NarrowError, PromptError, RecoverablePromptError
from promptline.logic.question import Question
from promptline.logic.text_io import (
    LineReader,
    TextWriter,
    default_reader,
    default_writer,
    read_full_line,
    say,
)
from promptline.models.destination import Destination
from promptline.models.type_tag import DestinationKind


logger = logging.getLogger(__name__)

Configure = Callable[[Question], None]

CONFIRM_TOKENS = ("yes", "y", "no", "n")


def _check_destination(destination: object) -> Destination:
    if isinstance(destination, Destination):
        return destination
    if isinstance(destination, (list, tuple, bytearray)):
        raise ConfigurationError(
            "ask(...) can not currently assign to sequences",
            reason="destination_sequence",
        )
    raise ConfigurationError(
        f"ask(...) requires a Destination, not {type(destination).__name__}",
        reason="destination_unsupported",
    )


def _notify(question: Optional[Question], error: PromptError) -> None:
    if question is not None and question.on_failure is not None:
        question.on_failure(error)


def ask(
    destination: Destination,
    prompt: str,
    configure: Optional[Configure] = None,
    *,
    reader: Optional[LineReader] = None,
    writer: Optional[TextWriter] = None,
) -> None:
    """Prompt for an answer and store it in `destination.value`.

    Raises ConfigurationError or StreamError on fatal failures, and
    NarrowError when a valid first answer does not fit the destination.
    """
    question: Optional[Question] = None
    try:
        dest = _check_destination(destination)
        question = Question(dest.type_tag, prompt)
        if configure is not None:
            configure(question)
        if not question.prompt:
            raise ConfigurationError("ask(...) prompt must not be empty", reason="prompt_empty")
        logger.debug("ask_start kind=%s tag=%s prompt=%r", dest.kind, question.type_tag, question.prompt)

        if question.try_first_answer() is not None:
            question.set_dest(dest)
            logger.info("ask_first_answer kind=%s value=%r", dest.kind, dest.value)
            return

        _prompt_until_answered(
            question,
            dest,
            load_checked_config().prompt.error_prefix,
            reader if reader is not None else default_reader(),
            writer if writer is not None else default_writer(),
        )
    except (FatalPromptError, NarrowError) as exc:
        logger.warning("ask_fatal code=%s error=%s", exc.code, exc)
        _notify(question, exc)
        raise


def _prompt_until_answered(
    question: Question,
    dest: Destination,
    error_prefix: str,
    reader: LineReader,
    writer: TextWriter,
) -> None:
    prompt = question.prompt
    attempt = 0
    while True:
        attempt += 1
        say(writer, question.compose_prompt(prompt))
        line = read_full_line(reader)
        try:
            question.parse(line)
            question.set_dest(dest)
        except RecoverablePromptError as exc:
            logger.info("ask_retry attempt=%d code=%s", attempt, exc.code)
            say(writer, f"{error_prefix}{question.error_message(exc)}\n")
            _notify(question, exc)
            prompt = question.retry_prompt(prompt)
            continue
        logger.debug("ask_resolved attempt=%d kind=%s", attempt, dest.kind)
        return


def confirm(
    question: str,
    default_yes: bool,
    configure: Optional[Configure] = None,
    *,
    reader: Optional[LineReader] = None,
    writer: Optional[TextWriter] = None,
) -> bool:
    """Ask a yes/no question; True iff the accepted answer starts with 'y'.

    The caller's `configure` runs after the yes/no defaults are applied, so
    it may replace them. Any fatal failure yields False; use an on_failure
    hook inside `configure` to observe it.
    """
    answer = Destination(DestinationKind.STR)

    def _configure(q: Question) -> None:
        q.default = "yes" if default_yes else "no"
        q.restrict_to(CONFIRM_TOKENS)
        if configure is not None:
            configure(q)

    try:
        ask(answer, question, _configure, reader=reader, writer=writer)
    except PromptError as exc:
        logger.info("confirm_failed code=%s", exc.code)
        return False
    return bool(answer.value) and answer.value[0] == "y"


__all__ = ["ask", "confirm", "Configure", "CONFIRM_TOKENS"]
