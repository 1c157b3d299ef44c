"""Validator contract for prompt answers."""

from typing import Callable

from lineprompt.errors import ValidationFailedError

# Returns None to accept the value, or the reason it was rejected.
Validator = Callable[[str], str | None]


def check(validator, value):
    """Run validator against value, if there is one.

    Raises ValidationFailedError carrying the validator's reason on rejection.
    """
    if validator is None:
        return
    reason = validator(value)
    if reason:
        raise ValidationFailedError(reason)
