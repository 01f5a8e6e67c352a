from exprc.diagnostics import ExprSyntaxError, error_at, render

import pytest


def test_render_points_caret_at_column():
    err = ExprSyntaxError(2, "invalid token", "1+@")
    assert render(err) == "1+@\n  ^ invalid token"


def test_render_at_column_zero():
    assert render(ExprSyntaxError(0, "a number expected", "")) == "\n^ a number expected"


def test_is_a_builtin_syntax_error():
    with pytest.raises(SyntaxError) as exc:
        error_at("(1", 2, "')' expected")
    assert exc.value.offset == 3
    assert exc.value.text == "(1"
    assert str(exc.value) == "')' expected (column 2)"
