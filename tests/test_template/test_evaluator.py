"""Tests for rendering tokens against a context."""

import pytest
from pctl.lib.template import (
    UnknownFunctionError,
    expand,
    format_expand,
    render,
    tokenize,
)
from pctl.models.dataModel import CallToken, LiteralToken, VariableToken


@pytest.mark.parametrize(
    "text", ["plain text", "", "artist }}", "a (b) c", "lone {", "}"]
)
def test_literal_text_renders_unchanged(text):
    assert expand(text, {"artist": "A", "a": 1}) == text


def test_variables():
    context = {"artist": "A", "title": "T"}
    assert expand("{{ artist }} - {{ title }}", context) == "A - T"


def test_missing_variable_renders_nothing():
    assert expand("{{ artist }} - {{ title }}", {"title": "T"}) == " - T"


def test_string_list_is_joined():
    context = {"xesam:artist": ["Simon", "Garfunkel"]}
    assert expand("{{ xesam:artist }}", context) == "Simon, Garfunkel"


@pytest.mark.parametrize(
    "value, expected",
    [(42, "42"), (0.5, "0.5"), (1.0, "1.0"), ("Playing", "Playing")],
)
def test_scalar_values(value, expected):
    assert expand("{{ v }}", {"v": value}) == expected


@pytest.mark.parametrize(
    "length, expected",
    [(125000000, "2:05"), (3725000000, "1:02:05"), (0, "0:00"), (59999999, "0:59")],
)
def test_duration(length, expected):
    assert expand("{{ duration(length) }}", {"length": length}) == expected


@pytest.mark.parametrize("length", ["125000000", 125000000.0, ["1"]])
def test_duration_of_non_integer_renders_nothing(length):
    assert expand("[{{ duration(length) }}]", {"length": length}) == "[]"


def test_uppercase_helper():
    assert expand("{{ uc(artist) }}", {"artist": "pink floyd"}) == "PINK FLOYD"


def test_lowercase_helper_handles_unicode():
    assert expand("{{ lc(artist) }}", {"artist": "DIE ÄRZTE"}) == "die ärzte"


def test_helper_formats_lists_before_casing():
    assert expand("{{ uc(artist) }}", {"artist": ["a", "b"]}) == "A, B"


def test_helper_with_missing_argument_renders_nothing():
    assert expand("<{{ uc(artist) }}>", {}) == "<>"


@pytest.mark.parametrize("context", [{}, {"x": "present"}])
def test_unknown_function(context):
    with pytest.raises(UnknownFunctionError) as error:
        expand("{{ foo(x) }}", context)
    assert error.value.function == "foo"
    assert error.value.message == "[format error] unknown template function: foo"


def test_unknown_function_discards_partial_output():
    tokens = (
        LiteralToken(text="before "),
        VariableToken(name="a"),
        CallToken(function="nope", argument=VariableToken(name="a")),
    )
    with pytest.raises(UnknownFunctionError):
        render(tokens, {"a": "x"})


def test_render_is_repeatable():
    tokens = tokenize("{{ artist }} ({{ duration(length) }})")
    context = {"artist": "A", "length": 61000000}
    first = render(tokens, context)
    assert first == render(tokens, context) == "A (1:01)"
    assert context == {"artist": "A", "length": 61000000}


def test_format_expand_success():
    result = format_expand("{{ status }}", {"status": "Paused"})
    assert result.success
    assert result.text == "Paused"
    assert result.error is None


@pytest.mark.parametrize("text", ["{{ status", "{{ bad(status) }}", "x" * 2000])
def test_format_expand_failure(text):
    result = format_expand(text, {"status": "Paused"})
    assert not result.success
    assert result.text == ""
    assert result.error.startswith("[format error] ")
