"""Tree rewriting: numeric evaluation, simplification and solving for a variable.

All functions take and return immutable nodes from ``nodes.py``; none of them
print. Evaluation reports each operation to an optional ``trace`` callback
and to the ``muxt_math.interpreter`` logger at DEBUG level.
"""

from __future__ import annotations

from typing import Callable, Optional

from .logging_config import get_logger
from .nodes import Binary, Equation, Node, Number, Operator, Variable
from .types import (
    InvalidVariable,
    NotAnEquation,
    NotAnExpression,
    NotInvertible,
    OnlyVariablesCanBeRearranged,
    UnboundVariable,
    VariableNotFound,
)

logger = get_logger("interpreter")

Trace = Callable[[float, Operator, float, float], None]


def evaluate(node: Node, trace: Optional[Trace] = None) -> float:
    """Reduce a variable-free tree to a number.

    Division by zero and other exceptional operations produce inf/nan rather
    than raising.

    Args:
        node: Tree to evaluate
        trace: Optional callback receiving ``(left, operator, right, result)``
            after every binary operation

    Raises:
        UnboundVariable: if the tree still contains a variable
        NotAnExpression: if the tree is an equation
    """
    if isinstance(node, Number):
        return node.value
    if isinstance(node, Variable):
        raise UnboundVariable(node.name)
    if isinstance(node, Equation):
        raise NotAnExpression()

    left = evaluate(node.left, trace)
    right = evaluate(node.right, trace)
    result = node.operator.apply(left, right)
    logger.debug("%s %s %s = %s", left, node.operator, right, result)
    if trace is not None:
        trace(left, node.operator, right, result)
    return result


def _is_number(node: Node, value: float) -> bool:
    return isinstance(node, Number) and node.value == value


def _rewrite(left: Node, operator: Operator, right: Node) -> Node:
    """Rewrite one binary node whose children are already simplified."""
    if isinstance(left, Number) and isinstance(right, Number):
        return Number(operator.apply(left.value, right.value))

    if operator in (Operator.ADD, Operator.SUBTRACT):
        if _is_number(right, 0):
            return left
        # 0 - x reads as x as well
        if _is_number(left, 0):
            return right
    elif operator is Operator.MULTIPLY:
        if _is_number(right, 1):
            return left
        if _is_number(left, 1):
            return right
        if _is_number(left, 0) or _is_number(right, 0):
            return Number(0)

    if (
        operator is Operator.ADD
        and isinstance(left, Variable)
        and left == right
    ):
        return Binary(Number(2), Operator.MULTIPLY, left)

    return Binary(left, operator, right)


def simplify(node: Node) -> Node:
    """Return an equivalent, smaller tree.

    Children are simplified before their parent. At each binary node the
    first matching rule wins: constant folding, then the additive and
    multiplicative identities, then ``v + v -> 2 * v``. Simplifying a
    simplified tree returns an equal tree.
    """
    if isinstance(node, Binary):
        return _rewrite(simplify(node.left), node.operator, simplify(node.right))
    if isinstance(node, Equation):
        return Equation(simplify(node.left), simplify(node.right))
    return node


def contains_variable(node: Node, name: str) -> bool:
    if isinstance(node, Variable):
        return node.name == name
    if isinstance(node, (Binary, Equation)):
        return contains_variable(node.left, name) or contains_variable(node.right, name)
    return False


def _isolate(side: Binary, rhs: Node, target: Variable) -> Node:
    """Undo the outermost operation of ``side`` so that ``target`` stands alone."""
    operator = side.operator
    inverse = operator.inverse

    if side.right == target and not contains_variable(side.left, target.name):
        if inverse is None:
            raise NotInvertible(operator)
        if operator.commutative:
            return Binary(rhs, inverse, side.left)
        # c - x = r  ->  x = c - r,  c / x = r  ->  x = c / r
        return Binary(side.left, operator, rhs)

    if side.left == target and not contains_variable(side.right, target.name):
        if inverse is None:
            raise NotInvertible(operator)
        return Binary(rhs, inverse, side.right)

    raise OnlyVariablesCanBeRearranged(
        f"Cannot isolate {target.name!r} in {side}: it must be a direct operand"
    )


def solve_for(node: Node, variable: str) -> Equation:
    """Rearrange an equation into ``variable = expression``.

    Both sides are simplified first and swapped when the variable only
    occurs on the right. One level of inversion is performed: the variable
    has to be a direct operand of the outermost operation on its side.

    Raises:
        NotAnEquation: if ``node`` is not an ``Equation``
        InvalidVariable: if ``variable`` is not a single letter
        VariableNotFound: if neither side mentions the variable
        OnlyVariablesCanBeRearranged: if the variable sits on both sides or
            deeper than one level
        NotInvertible: if isolating the variable would have to undo ``^``
    """
    if not isinstance(node, Equation):
        raise NotAnEquation()
    if not isinstance(variable, str) or len(variable) != 1 or not variable.isalpha():
        raise InvalidVariable(variable)

    left, right = simplify(node.left), simplify(node.right)
    in_left = contains_variable(left, variable)
    in_right = contains_variable(right, variable)
    if not in_left and not in_right:
        raise VariableNotFound(variable)
    if in_left and in_right:
        raise OnlyVariablesCanBeRearranged(
            f"Variable {variable!r} occurs on both sides of the equation"
        )
    if in_right:
        left, right = right, left

    target = Variable(variable)
    if left == target:
        result = Equation(target, right)
    elif isinstance(left, Binary):
        result = Equation(target, simplify(_isolate(left, right, target)))
    else:
        raise OnlyVariablesCanBeRearranged()

    logger.debug("Solved for %s: %r", variable, result)
    return result
