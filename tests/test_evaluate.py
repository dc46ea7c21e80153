"""Tests for numeric evaluation."""

import math

import pytest

from muxt_math.interpreter import evaluate
from muxt_math.nodes import Binary, Equation, Number, Operator, Variable
from muxt_math.parser import parse_text
from muxt_math.types import EvalError, NotAnExpression, UnboundVariable


class TestArithmetic:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3 + 5 * 4", 23),
            ("3 ^ 2 + 5 * (4 + 5) * 3", 144),
            ("3 + 5 * (4 + 2) * 3", 93),
            ("8 - 3 - 2", 3),
            ("2 ^ 3 ^ 2", 64),
            ("7 / 2", 3.5),
            ("()", 0),
        ],
    )
    def test_values(self, text, expected):
        assert parse_text(text).evaluate() == pytest.approx(expected)

    def test_division_by_zero_is_infinite(self):
        assert evaluate(parse_text("1 / 0").root) == math.inf
        assert evaluate(parse_text("(0 - 1) / 0").root) == -math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(parse_text("0 / 0").evaluate())

    def test_zero_to_negative_power(self):
        assert parse_text("0 ^ (0 - 1)").evaluate() == math.inf

    def test_negative_base_fractional_exponent(self):
        assert math.isnan(parse_text("(0 - 8) ^ (1 / 3)").evaluate())

    def test_overflow(self):
        assert parse_text("10 ^ 400").evaluate() == math.inf


class TestEvaluateErrors:
    def test_unbound_variable(self):
        with pytest.raises(UnboundVariable) as exc_info:
            parse_text("x + 1").evaluate()
        assert exc_info.value.name == "x"
        assert exc_info.value.code == "UNBOUND_VARIABLE"

    def test_equation_is_not_an_expression(self):
        with pytest.raises(NotAnExpression):
            parse_text("1 = 1").evaluate()

    def test_errors_share_base(self):
        with pytest.raises(EvalError):
            evaluate(Variable("q"))


class TestTrace:
    def test_trace_receives_each_operation(self):
        calls = []
        tree = Binary(Number(2), Operator.MULTIPLY, Binary(Number(1), Operator.ADD, Number(3)))
        result = evaluate(tree, trace=lambda *args: calls.append(args))
        assert result == 8
        assert calls == [
            (1.0, Operator.ADD, 3.0, 4.0),
            (2.0, Operator.MULTIPLY, 4.0, 8.0),
        ]

    def test_evaluation_prints_nothing(self, capsys):
        parse_text("1 + 2 * 3").evaluate()
        assert capsys.readouterr().out == ""

    def test_operations_are_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="muxt_math.interpreter"):
            evaluate(Binary(Number(1), Operator.ADD, Number(2)))
        assert "1.0 + 2.0 = 3.0" in caplog.text

    def test_equation_root(self):
        with pytest.raises(NotAnExpression):
            evaluate(Equation(Number(1), Number(1)))
