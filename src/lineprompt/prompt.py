"""Prompt session: asks questions on a text stream pair and resolves answers."""

import logging
import re
import sys
from dataclasses import dataclass, field
from typing import NamedTuple, TextIO

from lineprompt.errors import (
    EmptyChoiceListError,
    EmptyInputError,
    InvalidSelectionError,
    PromptIOError,
)
from lineprompt.formatting import render_choices, render_prompt
from lineprompt.options import DEFAULT_POLICY, FormattingPolicy
from lineprompt.validator import check

logger = logging.getLogger(__name__)

AFFIRMATIVE_ANSWERS = ("y", "yes")
POSITION_PATTERN = re.compile(r"[+-]?[0-9]+")


class Selection(NamedTuple):
    text: str
    index: int


@dataclass
class Prompt:
    """A prompting session bound to one input stream and one output stream.

    The session keeps no answer history. It is not safe to share between
    concurrent callers; give each caller its own stream pair.
    """

    reader: TextIO = field(default_factory=lambda: sys.stdin)
    writer: TextIO = field(default_factory=lambda: sys.stdout)
    policy: FormattingPolicy | None = None

    def ask(self, text, opts=None):
        """Ask a free-text question and return the trimmed answer.

        Empty input resolves to opts.default when one is set; the validator
        is not applied to the default.

        Raises:
            EmptyInputError: empty input and no default.
            ValidationFailedError: the validator rejected the input.
            PromptIOError: the streams failed or input ended.
        """
        default = opts.default if opts is not None else ""
        force = opts is not None and opts.append_question_mark
        self._write(render_prompt(text, self.policy, default, force))

        answer = self._read_line()
        if not answer:
            if not default:
                raise EmptyInputError()
            logger.debug("Empty answer to %r, using default %r", text, default)
            return default

        check(opts.validator if opts is not None else None, answer)
        return answer

    def confirm(self, text, opts=None):
        """Ask a yes/no question.

        Only "y" and "yes" are affirmative; any other answer is False.
        Empty input is replaced by opts.default before validation and matching.
        """
        default = opts.default if opts is not None else ""
        force = opts is not None and opts.append_question_mark
        self._write(render_prompt(text, self.policy, default, force))

        answer = self._read_line()
        if not answer:
            if not default:
                raise EmptyInputError("no value provided")
            answer = default

        check(opts.validator if opts is not None else None, answer)
        confirmed = answer in AFFIRMATIVE_ANSWERS
        logger.debug("Confirm %r resolved %r to %s", text, answer, confirmed)
        return confirmed

    def select(self, text, choices, opts=None):
        """List numbered choices, ask for one, and return it with its 0-based index.

        Choices are numbered from 1 on screen. Empty input picks
        opts.default, a 1-based position, when it is not 0. The validator,
        if any, sees the entered (or default) position as text.

        Raises:
            EmptyChoiceListError: choices is empty; nothing is written or read.
            EmptyInputError: empty input and no default.
            InvalidSelectionError: input is not a number between 1 and len(choices).
        """
        if not choices:
            raise EmptyChoiceListError()

        default = opts.default if opts is not None else 0
        force = opts is not None and opts.append_question_mark
        self._write(render_choices(choices))
        self._write(render_prompt(text, self.policy, str(default) if default else "", force))

        answer = self._read_line()
        if not answer:
            if not default:
                raise EmptyInputError()
            answer = str(default)

        check(opts.validator if opts is not None else None, answer)
        position = _parse_position(answer, len(choices))
        index = position - 1
        logger.debug("Select %r resolved %r to index %d", text, answer, index)
        return Selection(choices[index], index)

    def _write(self, text):
        try:
            self.writer.write(text)
            self.writer.flush()
        except (OSError, ValueError) as exc:
            raise PromptIOError(f"writing prompt failed: {exc}") from exc
        logger.debug("Wrote prompt %r", text)

    def _read_line(self):
        try:
            line = self.reader.readline()
        except (OSError, ValueError) as exc:
            raise PromptIOError(f"reading answer failed: {exc}") from exc
        if not line.endswith("\n"):
            raise PromptIOError("input ended before a complete line was read")
        return line.strip()


def _parse_position(answer, choice_count):
    if not POSITION_PATTERN.fullmatch(answer):
        raise InvalidSelectionError(answer, f"{answer!r} is not a number")
    position = int(answer)
    if not 1 <= position <= choice_count:
        raise InvalidSelectionError(
            answer, f"{position} is not a valid choice, enter a number between 1 and {choice_count}"
        )
    return position


def new_prompt():
    """Create a session on stdin/stdout with every decoration turned on."""
    return Prompt(policy=DEFAULT_POLICY)


def new_prompt_with_options(policy):
    """Create a session on stdin/stdout with the given formatting policy."""
    return Prompt(policy=policy)

