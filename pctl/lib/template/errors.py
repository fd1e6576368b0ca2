"""
Errors raised while tokenizing or rendering a format string.

Every message starts with FORMAT_ERROR so that callers can print it as-is.
"""

from typing import Final

FORMAT_ERROR: Final[str] = "[format error] "
FORMAT_MAXLENGTH: Final[int] = 1028


class ParseError(ValueError):
    """Base class for all format string errors."""

    def __init__(self, message: str) -> None:
        self.message: str = FORMAT_ERROR + message
        super().__init__(self.message)


class MalformedSyntaxError(ParseError):
    """Unbalanced delimiters, stray tokens, empty names or trailing junk.

    Attributes:
        position: Character offset at which scanning failed, or None when
            the error is only detectable at end of input
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        self.position: int | None = position
        super().__init__(message)


class UnknownFunctionError(ParseError):
    """A call to a helper that is not in the registry."""

    def __init__(self, function: str) -> None:
        self.function: str = function
        super().__init__(f"unknown template function: {function}")


class InputTooLongError(ParseError):
    """The format string exceeds FORMAT_MAXLENGTH characters."""

    def __init__(self, length: int) -> None:
        self.length: int = length
        super().__init__(
            f"the maximum format string length is {FORMAT_MAXLENGTH}"
        )
