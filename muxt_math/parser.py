"""Recursive-descent parser producing an expression tree.

Grammar, lowest binding first::

    assignment := term ('=' term)?
    term       := factor (('+'|'-') factor)*
    factor     := exponent (('*'|'/') exponent)*
    exponent   := primary ('^' primary)*
    primary    := NUMBER | VARIABLE | '(' term ')'

Every level is left-associative, ``^`` included. A parenthesised group is
cut out of the token list and parsed by its own ``Parser``.
"""

from __future__ import annotations

from typing import Iterable

from . import config
from .lexer import Token, TokenKind, tokenize
from .logging_config import get_logger
from .nodes import AST, Binary, Equation, Node, Number, Operator, Variable, tree_depth
from .types import (
    ExpectedNumberOrVariable,
    InvalidEquation,
    MismatchedParens,
    NestingTooDeep,
    UnexpectedEnd,
    UnexpectedToken,
)

logger = get_logger("parser")

TOKEN_OPERATORS = {
    TokenKind.PLUS: Operator.ADD,
    TokenKind.MINUS: Operator.SUBTRACT,
    TokenKind.STAR: Operator.MULTIPLY,
    TokenKind.SLASH: Operator.DIVIDE,
    TokenKind.CARET: Operator.POWER,
}


class Parser:
    def __init__(self, tokens: Iterable[Token], depth: int = 0):
        self.tokens = list(tokens)
        self.index = 0
        self.depth = depth
        self.variables: set[str] = set()

    @property
    def current(self) -> Token | None:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def parse(self) -> AST:
        """Parse the whole token list as an expression or a single equation."""
        if not self.tokens:
            raise UnexpectedEnd()

        left = self.parse_term()
        is_equation = False
        if self.current is not None and self.current.kind is TokenKind.EQUALS:
            self.advance()
            root: Node = Equation(left, self.parse_term())
            is_equation = True
        else:
            root = left
        self.expect_end()

        if tree_depth(root) > config.MAX_EXPRESSION_DEPTH:
            raise NestingTooDeep(config.MAX_EXPRESSION_DEPTH)

        logger.debug("Parsed %d tokens into %r", len(self.tokens), root)
        return AST(root, sorted(self.variables), is_equation)

    def expect_end(self) -> None:
        token = self.current
        if token is None:
            return
        if token.kind is TokenKind.RPAREN:
            raise MismatchedParens(token.position)
        if token.kind is TokenKind.EQUALS:
            raise InvalidEquation(token.position)
        raise UnexpectedToken(str(token), token.position)

    def _binary_level(self, operand, kinds) -> Node:
        node = operand()
        while self.current is not None and self.current.kind in kinds:
            operator = TOKEN_OPERATORS[self.advance().kind]
            node = Binary(node, operator, operand())
        return node

    def parse_term(self) -> Node:
        return self._binary_level(self.parse_factor, (TokenKind.PLUS, TokenKind.MINUS))

    def parse_factor(self) -> Node:
        return self._binary_level(self.parse_exponent, (TokenKind.STAR, TokenKind.SLASH))

    def parse_exponent(self) -> Node:
        return self._binary_level(self.parse_primary, (TokenKind.CARET,))

    def parse_primary(self) -> Node:
        token = self.current
        if token is None:
            raise UnexpectedEnd()
        if token.kind is TokenKind.NUMBER:
            self.advance()
            return Number(token.value)
        if token.kind is TokenKind.VARIABLE:
            self.advance()
            self.variables.add(token.value)
            return Variable(token.value)
        if token.kind is TokenKind.LPAREN:
            return self.parse_group()
        if token.kind is TokenKind.RPAREN:
            raise MismatchedParens(token.position)
        if token.kind is TokenKind.EQUALS and self.depth > 0:
            raise InvalidEquation(token.position)
        raise ExpectedNumberOrVariable(str(token), token.position)

    def parse_group(self) -> Node:
        """Parse ``( term )`` by handing the inner tokens to a fresh parser."""
        opening = self.advance()
        start = self.index
        level = 1
        while self.index < len(self.tokens):
            kind = self.tokens[self.index].kind
            if kind is TokenKind.LPAREN:
                level += 1
            elif kind is TokenKind.RPAREN:
                level -= 1
                if level == 0:
                    break
            self.index += 1
        if level != 0:
            raise MismatchedParens(opening.position)

        inner = self.tokens[start:self.index]
        self.index += 1  # closing paren

        # "()" reads as zero
        if not inner:
            return Number(0)
        if self.depth + 1 > config.MAX_NESTING_DEPTH:
            raise NestingTooDeep(config.MAX_NESTING_DEPTH)

        sub_parser = Parser(inner, self.depth + 1)
        node = sub_parser.parse_term()
        sub_parser.expect_end()
        self.variables |= sub_parser.variables
        return node


def parse(tokens: Iterable[Token]) -> AST:
    """Build an ``AST`` from a token sequence."""
    return Parser(tokens).parse()


def parse_text(text: str) -> AST:
    """Tokenize and parse formula text in one step."""
    return parse(tokenize(text))
