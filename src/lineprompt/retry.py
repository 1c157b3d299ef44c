"""Re-prompt loop for callers that want to ask until they get an answer."""

import sys

from lineprompt.errors import RECOVERABLE_ERRORS


def until_answered(ask_fn, *, output=None, max_attempts=None):
    """Call ask_fn until it returns without a recoverable prompt error.

    Args:
        ask_fn: Zero-argument callable performing one prompt, e.g.
            ``lambda: p.select("Pick one", options)``.
        output: Stream the error message of each failed attempt is printed to
            (defaults to stderr).
        max_attempts: Give up after this many failed attempts and re-raise
            the last error. None keeps asking.

    Returns:
        Whatever ask_fn returned.

    Raises:
        PromptIOError and any other non-recoverable error immediately.
    """
    if output is None:
        output = sys.stderr

    attempts = 0
    while True:
        try:
            return ask_fn()
        except RECOVERABLE_ERRORS as exc:
            attempts += 1
            if max_attempts is not None and attempts >= max_attempts:
                raise
            print(f"{exc} - please try again.", file=output)
