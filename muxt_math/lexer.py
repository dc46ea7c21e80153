"""Tokenizer: turns formula text into positioned lexical tokens."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from . import config
from .types import InputTooLong, UnexpectedSymbol


class TokenKind(Enum):
    NUMBER = "number"
    VARIABLE = "variable"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    CARET = "^"
    EQUALS = "="
    LPAREN = "("
    RPAREN = ")"


SYMBOL_KINDS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "=": TokenKind.EQUALS,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    position: int
    value: float | str | None = None

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            if math.isfinite(self.value) and abs(self.value) < 1e15:
                return str(int(self.value))
            return f"{self.value:g}"
        if self.kind is TokenKind.VARIABLE:
            return f"Var({self.value})"
        return self.kind.value


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, in source order.

    Digits accumulate into a single number token positioned at its first
    digit; a literal beyond the float range reads as ``inf``. Every
    alphabetic character is its own variable token and whitespace is dropped.

    Raises:
        InputTooLong: if the text exceeds ``config.MAX_INPUT_LENGTH``
        UnexpectedSymbol: on any character outside the formula alphabet
    """
    if len(text) > config.MAX_INPUT_LENGTH:
        raise InputTooLong(len(text), config.MAX_INPUT_LENGTH)

    tokens: list[Token] = []
    digits = ""
    start = 0

    for i, char in enumerate(text):
        if char.isascii() and char.isdigit():
            if not digits:
                start = i
            digits += char
            continue

        if digits:
            tokens.append(Token(TokenKind.NUMBER, start, float(digits)))
            digits = ""

        if char.isspace():
            continue
        if char.isalpha():
            tokens.append(Token(TokenKind.VARIABLE, i, char))
        elif char in SYMBOL_KINDS:
            tokens.append(Token(SYMBOL_KINDS[char], i))
        else:
            raise UnexpectedSymbol(char, i)

    # Input ending in digits
    if digits:
        tokens.append(Token(TokenKind.NUMBER, start, float(digits)))

    return tokens


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render a token sequence as space separated symbols, e.g. ``Var(x) + 32``."""
    return " ".join(str(token) for token in tokens)
