"""
Format string evaluator.

Walks a token sequence against a context and produces the rendered text.
Missing context keys and helpers that decline their input render as
nothing; only a call to an unknown helper is an error.
"""

from collections.abc import Sequence
from pctl.lib.template.errors import UnknownFunctionError
from pctl.lib.template.helpers import HELPERS, Helper, value_format
from pctl.models.dataModel import (
    CallToken,
    Context,
    LiteralToken,
    Token,
    VariableToken,
)


def render(tokens: Sequence[Token], context: Context) -> str:
    """Render tokens against a context.

    Args:
        tokens: Output of tokenize()
        context: Mapping from name to value; read, never modified

    Returns:
        The rendered text

    Raises:
        UnknownFunctionError: On the first call to a helper that does not
            exist, whether or not its argument is in the context
    """
    output: list[str] = []

    for token in tokens:
        if isinstance(token, LiteralToken):
            output.append(token.text)
        elif isinstance(token, VariableToken):
            if token.name in context:
                output.append(value_format(context[token.name]))
        elif isinstance(token, CallToken):
            helper: Helper | None = HELPERS.get(token.function)
            if helper is None:
                raise UnknownFunctionError(token.function)
            if token.argument.name not in context:
                continue
            result: str | None = helper(context[token.argument.name])
            if result is not None:
                output.append(result)

    return "".join(output)
