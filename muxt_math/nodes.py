"""Expression tree types.

A tree is built from four node kinds: ``Number`` and ``Variable`` leaves,
``Binary`` operations and a root-only ``Equation``. Nodes are immutable and
compare structurally, so rewrites always build new nodes. ``AST`` wraps the
root together with what the parser learned about it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        odd = exponent.is_integer() and exponent % 2 == 1
        return -math.inf if base < 0 and odd else math.inf
    except ValueError:
        # zero to a negative power, or a negative base with a fractional exponent
        if base == 0:
            odd = exponent.is_integer() and exponent % 2 == 1
            return math.copysign(math.inf, base) if odd else math.inf
        return math.nan


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"

    def __str__(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @property
    def inverse(self) -> Optional["Operator"]:
        """Operator that undoes this one, or None for POWER."""
        return _INVERSES.get(self)

    @property
    def commutative(self) -> bool:
        return self in (Operator.ADD, Operator.MULTIPLY)

    def apply(self, left: float, right: float) -> float:
        """Apply the operator with IEEE 754 results instead of Python exceptions."""
        return _APPLY[self](float(left), float(right))


_PRECEDENCE = {
    Operator.ADD: 1,
    Operator.SUBTRACT: 1,
    Operator.MULTIPLY: 2,
    Operator.DIVIDE: 2,
    Operator.POWER: 3,
}

_INVERSES = {
    Operator.ADD: Operator.SUBTRACT,
    Operator.SUBTRACT: Operator.ADD,
    Operator.MULTIPLY: Operator.DIVIDE,
    Operator.DIVIDE: Operator.MULTIPLY,
}

_APPLY: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: lambda left, right: left + right,
    Operator.SUBTRACT: lambda left, right: left - right,
    Operator.MULTIPLY: lambda left, right: left * right,
    Operator.DIVIDE: _divide,
    Operator.POWER: _power,
}


class _Printable:
    def __str__(self) -> str:
        from .formatting import format_node

        return format_node(self)


@dataclass(frozen=True, repr=False)
class Number(_Printable):
    value: float

    def __post_init__(self):
        try:
            value = float(self.value)
        except OverflowError:
            # integers beyond the float range
            value = math.inf if self.value > 0 else -math.inf
        object.__setattr__(self, "value", value)

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


@dataclass(frozen=True, repr=False)
class Variable(_Printable):
    name: str

    def __repr__(self) -> str:
        return f"Variable({self.name!r})"


@dataclass(frozen=True, repr=False)
class Binary(_Printable):
    left: "Node"
    operator: Operator
    right: "Node"

    def __repr__(self) -> str:
        return f"Binary({self.left!r}, {self.operator.name}, {self.right!r})"


@dataclass(frozen=True, repr=False)
class Equation(_Printable):
    """``left == right``. Only ever the root of a tree."""

    left: "Node"
    right: "Node"

    def __repr__(self) -> str:
        return f"Equation({self.left!r}, {self.right!r})"


Node = Union[Number, Variable, Binary, Equation]


@dataclass
class AST:
    """A parsed formula.

    Attributes:
        root: top node; replaced in place by ``simplify`` and ``solve_for``
        variables: distinct variable names seen while parsing, sorted
        is_equation: True when the formula contained a top-level ``=``
    """

    root: Node
    variables: list[str] = field(default_factory=list)
    is_equation: bool = False

    @property
    def variable_count(self) -> int:
        return len(self.variables)

    def evaluate(self, trace=None) -> float:
        from .interpreter import evaluate

        return evaluate(self.root, trace=trace)

    def simplify(self) -> Node:
        from .interpreter import simplify

        self.root = simplify(self.root)
        return self.root

    def solve_for(self, variable: str) -> Node:
        from .interpreter import solve_for

        self.root = solve_for(self.root, variable)
        self.is_equation = True
        return self.root

    def __str__(self) -> str:
        return str(self.root)


def tree_depth(node: Node) -> int:
    """Number of levels in the tree, computed without recursion."""
    depth = 0
    stack = [(node, 1)]
    while stack:
        current, level = stack.pop()
        depth = max(depth, level)
        if isinstance(current, (Binary, Equation)):
            stack.append((current.left, level + 1))
            stack.append((current.right, level + 1))
    return depth
