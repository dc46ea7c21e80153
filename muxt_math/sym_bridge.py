"""Conversion of expression trees to SymPy, used to cross-check results.

The rewrite engine never depends on SymPy; this module lets callers confirm
that a simplified tree or a solved equation agrees with SymPy's algebra.
"""

from __future__ import annotations

import math

import sympy as sp

from . import config
from .logging_config import get_logger
from .nodes import Equation, Node, Number, Operator, Variable

logger = get_logger("sym_bridge")


def _to_sympy_number(value: float) -> sp.Expr:
    if math.isnan(value):
        return sp.nan
    if math.isinf(value):
        return sp.oo if value > 0 else -sp.oo
    if value.is_integer():
        return sp.Integer(int(value))
    return sp.Float(value)


def to_sympy(node: Node):
    """Convert a tree into the equivalent SymPy expression (``sp.Eq`` for equations)."""
    if isinstance(node, Number):
        return _to_sympy_number(node.value)
    if isinstance(node, Variable):
        return sp.Symbol(node.name)
    if isinstance(node, Equation):
        return sp.Eq(to_sympy(node.left), to_sympy(node.right), evaluate=False)

    left = to_sympy(node.left)
    right = to_sympy(node.right)
    if node.operator is Operator.ADD:
        return left + right
    if node.operator is Operator.SUBTRACT:
        return left - right
    if node.operator is Operator.MULTIPLY:
        return left * right
    if node.operator is Operator.DIVIDE:
        return left / right
    return left**right


# Positive sample points keep fractional powers on the real branch
SAMPLE_VALUES = (1.5, 2.75, 4.125)


def _close(left, right) -> bool:
    try:
        left_value = complex(left)
        right_value = complex(right)
    except TypeError:
        return False
    scale = max(1.0, abs(left_value), abs(right_value))
    return abs(left_value - right_value) <= config.VERIFY_TOLERANCE * scale


def _agree(left, right) -> bool:
    """Compare two SymPy expressions exactly, then numerically at sample points.

    Constants folded to floats never cancel symbolically against the exact
    rationals of an unfolded tree, so a non-zero symbolic residual is
    re-checked by substituting sample values for every free symbol.
    """
    residual = sp.simplify(left - right)
    if residual == 0:
        return True

    symbols = sorted(left.free_symbols | right.free_symbols, key=lambda symbol: symbol.name)
    checked = 0
    for offset in range(len(SAMPLE_VALUES)):
        values = {
            symbol: SAMPLE_VALUES[(offset + i) % len(SAMPLE_VALUES)]
            for i, symbol in enumerate(symbols)
        }
        left_value = left.subs(values).evalf()
        right_value = right.subs(values).evalf()
        if not (left_value.is_finite and right_value.is_finite):
            continue
        if not _close(left_value, right_value):
            return False
        checked += 1
        if not symbols:
            break
    return checked > 0


def is_equivalent(first: Node, second: Node) -> bool:
    """Return True if two expression trees are equal as functions of their variables."""
    return _agree(to_sympy(first), to_sympy(second))


def verify_solution(equation: Equation, variable: str, solution: Node) -> bool:
    """Check that substituting ``solution`` for ``variable`` satisfies ``equation``.

    Args:
        equation: The original, unsolved equation
        variable: Name of the solved variable
        solution: Right-hand side produced by the solver

    Returns:
        True if both sides agree after substitution
    """
    symbol = sp.Symbol(variable)
    value = to_sympy(solution)
    left = to_sympy(equation.left).subs(symbol, value)
    right = to_sympy(equation.right).subs(symbol, value)
    verified = _agree(left, right)
    logger.debug("Substituted %s = %s: verified=%s", variable, solution, verified)
    return verified
