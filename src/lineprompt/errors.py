"""Errors raised while resolving a prompt answer."""


class PromptError(Exception):
    """Base class for all prompt failures."""


class EmptyInputError(PromptError):
    def __init__(self, message="no input provided"):
        super().__init__(message)


class ValidationFailedError(PromptError):
    """The answer was rejected by the caller's validator."""

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason


class InvalidSelectionError(PromptError):
    """Selection input was not a number, or not a listed position."""

    def __init__(self, value, message):
        super().__init__(message)
        self.value = value


class EmptyChoiceListError(PromptError, ValueError):
    def __init__(self):
        super().__init__("list of choices must not be empty")


class PromptIOError(PromptError):
    """Reading from or writing to the terminal streams failed."""


RECOVERABLE_ERRORS = (EmptyInputError, ValidationFailedError, InvalidSelectionError)
