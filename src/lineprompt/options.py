"""Formatting policy shared by a session, and per-call prompt options."""

from dataclasses import dataclass

from lineprompt.validator import Validator


@dataclass(frozen=True)
class FormattingPolicy:
    """Decoration applied to every prompt of a session."""

    append_question_mark: bool = False
    append_space: bool = False
    show_default_in_prompt: bool = False


DEFAULT_POLICY = FormattingPolicy(
    append_question_mark=True,
    append_space=True,
    show_default_in_prompt=True,
)


@dataclass
class InputOptions:
    """Options for a single ask or confirm call.

    An empty default means there is no default. append_question_mark can
    only add the question mark: False here does not remove one the session
    policy asks for.
    """

    default: str = ""
    validator: Validator | None = None
    append_question_mark: bool = False


@dataclass
class SelectOptions:
    """Options for a single select call.

    default is the 1-based position of the default choice; 0 means none.
    append_question_mark behaves as in InputOptions.
    """

    default: int = 0
    validator: Validator | None = None
    append_question_mark: bool = False
