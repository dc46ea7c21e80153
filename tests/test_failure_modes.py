"""Tests for failure modes and invalid input handling."""

import pytest

from muxt_math import config
from muxt_math.api import evaluate, solve_equation, validate_expression
from muxt_math.parser import parse_text
from muxt_math.types import InputTooLong, NestingTooDeep, ParseError


class TestInputValidationFailures:
    """Test input validation failure modes."""

    def test_empty_input(self):
        with pytest.raises(ParseError):
            parse_text("")

    def test_whitespace_only(self):
        with pytest.raises(ParseError):
            parse_text("   ")

    def test_too_long_input(self):
        with pytest.raises(InputTooLong):
            parse_text("x" * (config.MAX_INPUT_LENGTH + 1))

    def test_limit_read_at_call_time(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_INPUT_LENGTH", 3)
        with pytest.raises(InputTooLong):
            parse_text("1+2+3")

    def test_deep_nesting_fails_cleanly(self):
        text = "(" * 2000 + "1" + ")" * 2000
        with pytest.raises(NestingTooDeep):
            parse_text(text)

    def test_long_chain_fails_cleanly(self):
        with pytest.raises(NestingTooDeep):
            parse_text("+".join(["x"] * 4000))


class TestApiNeverRaises:
    @pytest.mark.parametrize("text", ["", "(((", ")))", "x++y", "*/x", "x ^", "= 1", "1 = "])
    def test_malformed_evaluate(self, text):
        result = evaluate(text)
        assert result.ok is False
        assert result.error

    @pytest.mark.parametrize("text", ["x", "x ^ 2 = 4", "a = b = c", "x @ 2 = 1"])
    def test_malformed_solve(self, text):
        result = solve_equation(text)
        assert result.ok is False
        assert result.error_code

    def test_validate(self):
        assert validate_expression("2 + 2") == (True, None)
        ok, message = validate_expression("2 +")
        assert ok is False
        assert message == "Unexpected end of input"


class TestNonFiniteResults:
    def test_division_by_zero_is_not_an_error(self):
        result = evaluate("1 / 0")
        assert result.ok is True
        assert result.result == "inf"

    def test_nan_result(self):
        result = evaluate("0 / 0")
        assert result.ok is True
        assert result.result == "nan"


class TestOversizedLiterals:
    def test_evaluate_beyond_float_range(self):
        result = evaluate("1" * 400)
        assert result.ok is True
        assert result.result == "inf"

    def test_evaluate_beyond_int_digit_limit(self):
        result = evaluate("1" * 5000)
        assert result.ok is True
        assert result.value == float("inf")

    def test_validate_huge_literal(self):
        assert validate_expression("1" * 400) == (True, None)

    def test_solve_with_huge_literal(self):
        result = solve_equation("2 * x = " + "7" * 400)
        assert result.ok is True
        assert result.variable == "x"

    def test_cli_with_huge_literal(self, capsys):
        from muxt_math.cli import main_entry

        assert main_entry(["-e", "2 * " + "7" * 400]) == 0
        assert capsys.readouterr().out.strip() == "inf"

    def test_number_node_from_huge_int(self):
        from muxt_math.nodes import Number

        assert Number(10**400).value == float("inf")
        assert Number(-(10**400)).value == float("-inf")
