"""Result formatting for numbers and expression trees."""

from __future__ import annotations

import math
from typing import Any

from . import config
from .nodes import Binary, Equation, Node, Number, Variable


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: config.OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        return fmt.format(float(val))
    except (ValueError, TypeError, OverflowError):
        return str(val)


def _format_value(value: float) -> str:
    # Integral values print exactly, without a trailing ".0"
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return format_number(value)


def _format_operand(node: Node, parent: Binary, is_right: bool) -> str:
    text = format_node(node)
    if isinstance(node, Binary):
        precedence = node.operator.precedence
        parent_precedence = parent.operator.precedence
        # Every level is left-associative, so an equal-precedence right
        # operand needs parentheses to keep its grouping.
        if precedence < parent_precedence or (is_right and precedence == parent_precedence):
            return f"({text})"
    elif isinstance(node, Number) and (node.value < 0 or text.startswith("-")):
        return f"({text})"
    return text


def format_node(node: Node) -> str:
    """Render a tree as infix text with as few parentheses as possible."""
    if isinstance(node, Number):
        return _format_value(node.value)
    if isinstance(node, Variable):
        return node.name
    if isinstance(node, Equation):
        return f"{format_node(node.left)} = {format_node(node.right)}"
    left = _format_operand(node.left, node, is_right=False)
    right = _format_operand(node.right, node, is_right=True)
    return f"{left} {node.operator} {right}"
