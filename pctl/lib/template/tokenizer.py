"""
Format string tokenizer.

Converts a raw format string into an immutable sequence of tokens:

- LiteralToken: text outside any ``{{ }}`` pair
- VariableToken: ``{{ name }}``
- CallToken: ``{{ function(name) }}``

The scan is a single left-to-right pass over the input driven by an
explicit state machine. There is no backtracking, so each input has
exactly one tokenization or exactly one error.

States:
    PASSTHROUGH: default; characters are buffered as literal text
    INSIDE: after ``{{``; buffering a variable or function name
    PARAMS_OPEN: after ``name(``; buffering the single argument name
    PARAMS_CLOSED: after ``)``; only whitespace is allowed before ``}}``

Example:
    >>> tokenize("{{ artist }} - {{ uc(title) }}")
    (VariableToken(name='artist'), LiteralToken(text=' - '),
     CallToken(function='uc', argument=VariableToken(name='title')))
"""

from enum import Enum, auto
from typing import Final
from pctl.lib.template.errors import (
    FORMAT_MAXLENGTH,
    InputTooLongError,
    MalformedSyntaxError,
)
from pctl.models.dataModel import CallToken, LiteralToken, Token, VariableToken

OPENER: Final[str] = "{{"
CLOSER: Final[str] = "}}"
PARAMS_OPENER: Final[str] = "("
PARAMS_CLOSER: Final[str] = ")"


class ScanState(Enum):
    """Tokenizer states."""

    PASSTHROUGH = auto()
    INSIDE = auto()
    PARAMS_OPEN = auto()
    PARAMS_CLOSED = auto()


def _junk_find(buffer: list[str]) -> int | None:
    """Index of the first non-whitespace character in buffer, if any."""
    for index, char in enumerate(buffer):
        if not char.isspace():
            return index
    return None


def tokenize(format: str) -> tuple[Token, ...]:
    """Split a format string into tokens.

    Args:
        format: Raw format string, at most FORMAT_MAXLENGTH characters

    Returns:
        Tuple of LiteralToken, VariableToken and CallToken in input order

    Raises:
        InputTooLongError: If the format string is too long
        MalformedSyntaxError: On unbalanced delimiters, stray parens,
            empty names, or input between ``)`` and ``}}``
    """
    length: int = len(format)
    if length > FORMAT_MAXLENGTH:
        raise InputTooLongError(length)

    tokens: list[Token] = []
    buffer: list[str] = []
    function: str = ""
    state: ScanState = ScanState.PASSTHROUGH

    i: int = 0
    while i < length:
        char: str = format[i]
        # slicing never reads past the end, so a trailing lone brace is text
        pair: str = format[i : i + 2]

        if pair == OPENER:
            if state is not ScanState.PASSTHROUGH:
                raise MalformedSyntaxError(
                    f'unexpected token: "{OPENER}" (position {i})', i
                )
            if buffer:
                tokens.append(LiteralToken(text="".join(buffer)))
            buffer.clear()
            state = ScanState.INSIDE
            i += 2
            continue

        if pair == CLOSER and state is not ScanState.PASSTHROUGH:
            if state is ScanState.PARAMS_OPEN:
                raise MalformedSyntaxError(
                    f'unexpected token: "{CLOSER}" (expected closing parens: '
                    f'"{PARAMS_CLOSER}" at position {i})',
                    i,
                )
            if state is ScanState.INSIDE:
                name: str = "".join(buffer).strip()
                if not name:
                    raise MalformedSyntaxError(
                        f"got empty template expression at position {i}", i
                    )
                tokens.append(VariableToken(name=name))
            else:
                junk: int | None = _junk_find(buffer)
                if junk is not None:
                    position: int = i - len(buffer) + junk
                    raise MalformedSyntaxError(
                        f"got unexpected input after closing parens at position {position}",
                        position,
                    )
            buffer.clear()
            state = ScanState.PASSTHROUGH
            i += 2
            continue

        if char == PARAMS_OPENER and state is not ScanState.PASSTHROUGH:
            if state is not ScanState.INSIDE:
                raise MalformedSyntaxError(
                    f'unexpected token: "{PARAMS_OPENER}" at position {i}', i
                )
            function = "".join(buffer).strip()
            if not function:
                raise MalformedSyntaxError(
                    f"expected a function name to call at position {i}", i
                )
            buffer.clear()
            state = ScanState.PARAMS_OPEN
        elif char == PARAMS_CLOSER and state is not ScanState.PASSTHROUGH:
            if state is not ScanState.PARAMS_OPEN:
                raise MalformedSyntaxError(
                    f'unexpected token: "{PARAMS_CLOSER}" at position {i}', i
                )
            argument: str = "".join(buffer).strip()
            if not argument:
                raise MalformedSyntaxError(
                    f"expected a function parameter at position {i}", i
                )
            tokens.append(
                CallToken(function=function, argument=VariableToken(name=argument))
            )
            buffer.clear()
            state = ScanState.PARAMS_CLOSED
        else:
            buffer.append(char)
        i += 1

    if state in (ScanState.INSIDE, ScanState.PARAMS_CLOSED):
        raise MalformedSyntaxError(
            f'unmatched opener "{OPENER}" (expected a matching "{CLOSER}" at the end)',
            length,
        )
    if state is ScanState.PARAMS_OPEN:
        raise MalformedSyntaxError(
            f'unmatched opener "{PARAMS_OPENER}" (expected a matching "{PARAMS_CLOSER}")',
            length,
        )

    if buffer:
        tokens.append(LiteralToken(text="".join(buffer)))

    return tuple(tokens)
