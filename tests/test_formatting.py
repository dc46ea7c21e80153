"""Tests for number and tree formatting."""

import pytest

from muxt_math import config
from muxt_math.formatting import format_node, format_number
from muxt_math.nodes import Binary, Equation, Number, Operator, Variable
from muxt_math.parser import parse_text


class TestFormatNumber:
    def test_precision(self):
        assert format_number(3.14159265) == "3.14159"
        assert format_number(2 / 3, precision=3) == "0.667"
        assert format_number(0.0) == "0"

    def test_config_precision(self, monkeypatch):
        monkeypatch.setattr(config, "OUTPUT_PRECISION", 2)
        assert format_number(3.14159) == "3.1"

    def test_non_numeric_passthrough(self):
        assert format_number("abc") == "abc"


class TestFormatNode:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3+5*4", "3 + 5 * 4"),
            ("(3+5)*4", "(3 + 5) * 4"),
            ("8-(3-2)", "8 - (3 - 2)"),
            ("8-3-2", "8 - 3 - 2"),
            ("2^(3^2)", "2 ^ (3 ^ 2)"),
            ("2*x^2", "2 * x ^ 2"),
            ("3*x=y/3", "3 * x = y / 3"),
        ],
    )
    def test_minimal_parentheses(self, text, expected):
        assert format_node(parse_text(text).root) == expected

    @pytest.mark.parametrize("text", ["1-(2-(3-x))", "((a+b)*c)^d/e", "a-b+c*(d-e)=f"])
    def test_reparse_gives_same_tree(self, text):
        root = parse_text(text).root
        assert parse_text(format_node(root)).root == root

    def test_numbers(self):
        assert format_node(Number(2.0)) == "2"
        assert format_node(Number(2.5)) == "2.5"

    def test_negative_operand(self):
        tree = Binary(Variable("x"), Operator.ADD, Number(-3))
        assert str(tree) == "x + (-3)"

    def test_str_of_equation(self):
        assert str(Equation(Variable("x"), Number(2))) == "x = 2"

    def test_repr(self):
        tree = Binary(Number(2), Operator.MULTIPLY, Variable("x"))
        assert repr(tree) == "Binary(Number(2.0), MULTIPLY, Variable('x'))"
