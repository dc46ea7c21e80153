"""Public API for muxt-math - returns structured objects without side effects."""

from __future__ import annotations

from .formatting import format_node, format_number
from .lexer import format_tokens, tokenize
from .logging_config import get_logger
from .nodes import Equation, Number
from .parser import parse_text
from .sym_bridge import verify_solution
from .types import EvalResult, MathError, SolveResult

logger = get_logger("api")


def tokenize_expression(expression: str) -> EvalResult:
    """Split an expression into tokens.

    Example:
        >>> from muxt_math.api import tokenize_expression
        >>> tokenize_expression("x + 32").result
        'Var(x) + 32'
    """
    try:
        tokens = tokenize(expression)
    except MathError as e:
        return EvalResult(ok=False, error=str(e), error_code=e.code)
    return EvalResult(ok=True, result=format_tokens(tokens))


def evaluate(expression: str) -> EvalResult:
    """Evaluate a variable-free expression.

    Args:
        expression: Expression string (e.g., "3 + 5 * 4")

    Returns:
        EvalResult with the formatted result and the raw float value

    Example:
        >>> from muxt_math.api import evaluate
        >>> evaluate("3 + 5 * 4").result
        '23'
    """
    try:
        ast = parse_text(expression)
        value = ast.evaluate()
    except MathError as e:
        logger.info("Evaluation of %r failed: %s", expression, e)
        return EvalResult(ok=False, error=str(e), error_code=e.code)
    return EvalResult(ok=True, result=format_number(value), value=value, variables=[])


def simplify_expression(expression: str) -> EvalResult:
    """Simplify an expression or equation.

    Example:
        >>> from muxt_math.api import simplify_expression
        >>> simplify_expression("x + x").result
        '2 * x'
    """
    try:
        ast = parse_text(expression)
        node = ast.simplify()
    except MathError as e:
        return EvalResult(ok=False, error=str(e), error_code=e.code)

    value = node.value if isinstance(node, Number) else None
    return EvalResult(
        ok=True, result=format_node(node), value=value, variables=ast.variables
    )


def solve_equation(equation: str, variable: str = "x", verify: bool = True) -> SolveResult:
    """Solve an equation for one variable.

    Args:
        equation: Equation string (e.g., "3 * x = 6")
        variable: Single-letter variable to isolate
        verify: Substitute the answer back with SymPy and report the outcome

    Returns:
        SolveResult with ``variable = expression``

    Example:
        >>> from muxt_math.api import solve_equation
        >>> solve_equation("3 * x = 6").result
        'x = 2'
    """
    try:
        ast = parse_text(equation)
        original = ast.root
        solved = ast.solve_for(variable)
    except MathError as e:
        logger.info("Solving %r for %r failed: %s", equation, variable, e)
        return SolveResult(ok=False, variable=variable, error=str(e), error_code=e.code)

    verified = None
    if verify and isinstance(original, Equation):
        verified = verify_solution(original, variable, solved.right)

    approx = format_number(solved.right.value) if isinstance(solved.right, Number) else None
    return SolveResult(
        ok=True,
        variable=variable,
        result=format_node(solved),
        rhs=format_node(solved.right),
        approx=approx,
        verified=verified,
    )


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Validate an expression without evaluating it.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from muxt_math.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("2 +")
        (False, 'Unexpected end of input')
    """
    try:
        parse_text(expression)
    except MathError as e:
        return False, str(e)
    return True, None
