"""Error hierarchy and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class MathError(Exception):
    """Base class for every error raised by the formula pipeline."""

    default_code = "MATH_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


# Tokenizer errors


class LexError(MathError):
    """Raised when the input text cannot be split into tokens."""

    default_code = "LEX_ERROR"


class UnexpectedSymbol(LexError):
    default_code = "UNEXPECTED_SYMBOL"

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Unexpected symbol {symbol!r} at position {position}")


class InputTooLong(LexError):
    default_code = "TOO_LONG"

    def __init__(self, length: int, limit: int):
        self.length = length
        super().__init__(f"Input too long ({length} > {limit} characters)")


# Parser errors


class ParseError(MathError):
    """Raised when a token sequence does not form a valid formula."""

    default_code = "PARSE_ERROR"


class MismatchedParens(ParseError):
    default_code = "MISMATCHED_PARENS"

    def __init__(self, position: int | None = None):
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Mismatched parentheses{where}")


class UnexpectedEnd(ParseError):
    default_code = "UNEXPECTED_END"

    def __init__(self):
        super().__init__("Unexpected end of input")


class ExpectedNumberOrVariable(ParseError):
    default_code = "EXPECTED_NUMBER_OR_VARIABLE"

    def __init__(self, found: str, position: int):
        self.found = found
        self.position = position
        super().__init__(
            f"Expected a number or variable at position {position}, found {found!r}"
        )


class UnexpectedToken(ParseError):
    default_code = "UNEXPECTED_TOKEN"

    def __init__(self, found: str, position: int):
        self.found = found
        self.position = position
        super().__init__(f"Unexpected token {found!r} at position {position}")


class InvalidEquation(ParseError):
    default_code = "INVALID_EQUATION"

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            f"Invalid equation format: '=' at position {position} "
            "must appear once, outside parentheses"
        )


class NestingTooDeep(ParseError):
    default_code = "TOO_DEEP"

    def __init__(self, limit: int):
        super().__init__(f"Expression nested too deeply (>{limit} levels)")


# Evaluation errors


class EvalError(MathError):
    """Raised when a tree cannot be reduced to a single number."""

    default_code = "EVAL_ERROR"


class UnboundVariable(EvalError):
    default_code = "UNBOUND_VARIABLE"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable {name!r} has no value")


class NotAnExpression(EvalError):
    default_code = "NOT_AN_EXPRESSION"

    def __init__(self):
        super().__init__("An equation cannot be evaluated to a number")


# Solver errors


class SolveError(MathError):
    """Raised when an equation cannot be rearranged for a variable."""

    default_code = "SOLVER_ERROR"


class NotAnEquation(SolveError):
    default_code = "NOT_AN_EQUATION"

    def __init__(self):
        super().__init__("Only equations can be solved")


class OnlyVariablesCanBeRearranged(SolveError):
    default_code = "CANNOT_REARRANGE"

    def __init__(self, message: str = "Only a variable one level deep can be rearranged"):
        super().__init__(message)


class NotInvertible(SolveError):
    default_code = "NOT_INVERTIBLE"

    def __init__(self, operator: Any):
        self.operator = operator
        super().__init__(f"Operator {operator} has no inverse")


class VariableNotFound(SolveError):
    default_code = "VARIABLE_NOT_FOUND"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable {name!r} does not occur in the equation")


class InvalidVariable(SolveError):
    default_code = "INVALID_VARIABLE"

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"{name!r} is not a single-letter variable")


@dataclass
class EvalResult:
    """Result of tokenizing, evaluating or simplifying an expression."""

    ok: bool
    result: str | None = None
    value: float | None = None
    variables: list[str] | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.value is not None:
            result_dict["value"] = self.value
        if self.variables is not None:
            result_dict["variables"] = self.variables
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}", f"result={self.result!r}"]
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        if self.variables is not None:
            parts.append(f"variables={self.variables!r}")
        return f"EvalResult({', '.join(parts)})"


@dataclass
class SolveResult:
    """Result of solving an equation for one variable."""

    ok: bool
    variable: str | None = None
    result: str | None = None  # "x = 2"
    rhs: str | None = None
    approx: str | None = None  # set when the right-hand side is a plain number
    verified: bool | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.variable is not None:
            result_dict["variable"] = self.variable
        if self.result is not None:
            result_dict["result"] = self.result
        if self.rhs is not None:
            result_dict["rhs"] = self.rhs
        if self.approx is not None:
            result_dict["approx"] = self.approx
        if self.verified is not None:
            result_dict["verified"] = self.verified
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"SolveResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}", f"result={self.result!r}"]
        if self.approx is not None:
            parts.append(f"approx={self.approx!r}")
        if self.verified is not None:
            parts.append(f"verified={self.verified!r}")
        return f"SolveResult({', '.join(parts)})"
