"""muxt-math: tokenizer, parser and tree rewriting for single-variable formulas."""

__all__ = [
    "config",
    "lexer",
    "nodes",
    "parser",
    "interpreter",
    "formatting",
    "sym_bridge",
    "types",
    "api",
    "logging_config",
    "cli",
]

# Public API exports

__api_exports__ = [
    "tokenize_expression",
    "evaluate",
    "simplify_expression",
    "solve_equation",
    "validate_expression",
]
