"""
Template package for pctl format strings.

Expands strings such as ``"{{ artist }} - {{ title }}"`` or
``"{{ duration(mpris:length) }}"`` against a key/value context.

Pipeline:
    format string -> tokenize() -> tokens -> render(context) -> text

Example:
    text = expand("{{ uc(artist) }}", {"artist": "pink floyd"})
"""

from pctl.lib.log import LOG
from pctl.models.dataModel import Context, ParseResult
from .errors import (
    FORMAT_ERROR,
    FORMAT_MAXLENGTH,
    InputTooLongError,
    MalformedSyntaxError,
    ParseError,
    UnknownFunctionError,
)
from .evaluator import render
from .helpers import HELPERS, value_format
from .tokenizer import tokenize


def expand(format: str, context: Context) -> str:
    """Tokenize and render a format string.

    Raises:
        ParseError: If the format string is malformed, too long, or calls
            an unknown helper
    """
    return render(tokenize(format), context)


def format_expand(format: str, context: Context) -> ParseResult:
    """Expand a format string, reporting failure in the result.

    Args:
        format: Raw format string
        context: Values available to the template

    Returns:
        ParseResult with the rendered text, or the error message on failure
    """
    try:
        return ParseResult(text=expand(format, context), error=None, success=True)
    except ParseError as e:
        LOG(f"Format expansion failed: {e.message}")
        return ParseResult(text="", error=e.message, success=False)


__all__ = [
    "FORMAT_ERROR",
    "FORMAT_MAXLENGTH",
    "HELPERS",
    "InputTooLongError",
    "MalformedSyntaxError",
    "ParseError",
    "UnknownFunctionError",
    "expand",
    "format_expand",
    "render",
    "tokenize",
    "value_format",
]
