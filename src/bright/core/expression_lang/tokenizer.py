"""
Tokenizer for bright brightness expressions.

Converts an expression string into a flat sequence of typed tokens.
There is no recovery: the first character that isn't part of the
language aborts tokenization.
"""

from __future__ import annotations

import string
from enum import StrEnum, auto

from bright.core.errors import BrightError

U16_MAX = 0xFFFF


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()

    # Modifiers
    PERCENT = auto()
    PLUS = auto()
    MINUS = auto()

    # Values
    NUMBER = auto()
    IDENT = auto()

    @property
    def display_name(self) -> str:
        """Name used in diagnostics, e.g. "`(`" or "number"."""
        return _DISPLAY_NAMES[self]

    @property
    def category(self) -> TokenCategory:
        return _CATEGORIES[self]


class TokenCategory(StrEnum):
    """Coarse token groups used for "expected ..." hints."""

    # Numbers and identifiers, which mean something on their own
    STANDALONE = "Standalone"
    # Tokens modifying a standalone token, e.g. `%`
    SUPPORTIVE = "Supportive"
    # Tokens with a purely grammatical role
    GRAMMAR = "Grammar"


_DISPLAY_NAMES: dict[TokenKind, str] = {
    TokenKind.LPAREN: "`(`",
    TokenKind.RPAREN: "`)`",
    TokenKind.COMMA: "`,`",
    TokenKind.PERCENT: "`%`",
    TokenKind.PLUS: "`+`",
    TokenKind.MINUS: "`-`",
    TokenKind.NUMBER: "number",
    TokenKind.IDENT: "identifier",
}

_CATEGORIES: dict[TokenKind, TokenCategory] = {
    TokenKind.NUMBER: TokenCategory.STANDALONE,
    TokenKind.IDENT: TokenCategory.STANDALONE,
    TokenKind.PERCENT: TokenCategory.SUPPORTIVE,
    TokenKind.PLUS: TokenCategory.SUPPORTIVE,
    TokenKind.MINUS: TokenCategory.SUPPORTIVE,
    TokenKind.COMMA: TokenCategory.GRAMMAR,
    TokenKind.LPAREN: TokenCategory.GRAMMAR,
    TokenKind.RPAREN: TokenCategory.GRAMMAR,
}

_SINGLE_CHARS: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "%": TokenKind.PERCENT,
    ",": TokenKind.COMMA,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
}

_DIGITS = frozenset(string.digits)
_IDENT_CHARS = frozenset(string.ascii_letters + "_")


class Token:
    """A single token from the expression tokenizer.

    ``value`` is the number for NUMBER tokens, the name for IDENT tokens
    and None for everything else.
    """

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: int | str | None, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    @property
    def category(self) -> TokenCategory:
        return self.kind.category

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.display_name.strip("`")
        return str(self.value)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


class ExpressionError(BrightError):
    """Any error turning source text into an expression tree."""


class ExpressionTokenError(ExpressionError):
    """Error during expression tokenization."""

    def __init__(self, message: str, pos: int) -> None:
        super().__init__(message)
        self.pos = pos


class UnsupportedCharError(ExpressionTokenError):
    """A character that isn't part of the language."""

    def __init__(self, char: str, index: int) -> None:
        super().__init__(f"`{char}` at {index} isn't supported", index)
        self.char = char
        self.index = index


class NumberOverflowError(ExpressionTokenError):
    """A number literal that doesn't fit into 16 bits."""

    def __init__(self, index: int) -> None:
        super().__init__(f"number at {index} is bigger than {U16_MAX}", index)
        self.index = index


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Digits and identifier characters accumulate into the previous token
    of the same kind unless whitespace separated them. An empty string
    yields an empty list.
    """
    tokens: list[Token] = []
    new_token_starts = True

    for i, c in enumerate(source):
        last = tokens[-1] if tokens and not new_token_starts else None

        if c in _SINGLE_CHARS:
            tokens.append(Token(_SINGLE_CHARS[c], None, i))
        elif c in _DIGITS:
            if last is not None and isinstance(last.value, int):
                number = last.value * 10 + int(c)
                if number > U16_MAX:
                    raise NumberOverflowError(last.pos)
                last.value = number
            else:
                tokens.append(Token(TokenKind.NUMBER, int(c), i))
        elif c in _IDENT_CHARS:
            if last is not None and isinstance(last.value, str):
                last.value = f"{last.value}{c}"
            else:
                tokens.append(Token(TokenKind.IDENT, c, i))
        elif not c.isspace():
            raise UnsupportedCharError(c, i)

        new_token_starts = c.isspace()

    return tokens
