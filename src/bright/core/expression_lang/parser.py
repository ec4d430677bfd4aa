"""
Recursive descent parser for bright brightness expressions.

Grammar:
    expr      → literal | call
    literal   → NUMBER "%"? ("+" | "-")?
    call      → IDENT ( "(" (expr ("," expr)*)? ")" )?

A literal never consumes more than its own tokens; anything after it is
left to the caller. Function arguments are split on top-level commas
first and every argument is then parsed on its own.
"""

from __future__ import annotations

import logging

from bright.core.expression_lang.tokenizer import (
    ExpressionError,
    Token,
    TokenCategory,
    TokenKind,
    tokenize,
)
from bright.core.ir.expressions import ChangeDirection, Expr, FuncCall, Literal

logger = logging.getLogger(__name__)


class ExpressionParseError(ExpressionError):
    """Error during expression parsing."""


class NoTokensError(ExpressionParseError):
    """An expression (or a function argument) without any tokens."""

    def __init__(self) -> None:
        super().__init__("no tokens given")


class IllegalTokenError(ExpressionParseError):
    """A token that can't appear where it was found.

    Attributes:
        expected: ``(category, kind)`` hint, ``kind`` may be None when only
            the category is known. None if nothing specific was expected.
        encountered: The offending token.
        reason: Optional human readable explanation.
    """

    def __init__(
        self,
        encountered: Token,
        expected: tuple[TokenCategory, TokenKind | None] | None = None,
        reason: str | None = None,
    ) -> None:
        self.encountered = encountered
        self.expected = expected
        self.reason = reason
        super().__init__(self._format())

    def _format(self) -> str:
        if self.expected is None:
            expected = "Nothing"
        else:
            category, kind = self.expected
            expected = kind.display_name if kind is not None else category.value
        prefix = f"{self.reason}\n" if self.reason else ""
        return f"{prefix}expected {expected} but encountered {self.encountered.kind.display_name}"


class UnclosedDelimiterError(ExpressionParseError):
    """A function call without its closing parenthesis."""

    def __init__(self) -> None:
        super().__init__("Unclosed delimiter")


class _Parser:
    """Single-lookahead parser over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token | None:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def match(self, *kinds: TokenKind) -> Token | None:
        tok = self.peek()
        if tok is not None and tok.kind in kinds:
            return self.advance()
        return None

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        tok = self.advance()
        if tok is None:
            raise NoTokensError()

        if tok.kind == TokenKind.NUMBER:
            return self.parse_literal(tok)
        if tok.kind == TokenKind.IDENT:
            return self.parse_call(tok)

        raise IllegalTokenError(
            tok,
            expected=(TokenCategory.STANDALONE, None),
            reason="Expressions start with a number or a function name",
        )

    def parse_literal(self, number: Token) -> Literal:
        """NUMBER '%'? ('+' | '-')?"""
        percent = self.match(TokenKind.PERCENT) is not None

        direction = ChangeDirection.ABS
        sign = self.match(TokenKind.PLUS, TokenKind.MINUS)
        if sign is not None:
            direction = ChangeDirection.INC if sign.kind == TokenKind.PLUS else ChangeDirection.DEC

        return Literal(value=number.value, percent=percent, direction=direction)

    def parse_call(self, name: Token) -> FuncCall:
        """IDENT ('(' args ')')?"""
        nxt = self.peek()
        if nxt is None:
            # A bare identifier is a call without arguments
            return FuncCall(name=name.value)
        if nxt.kind != TokenKind.LPAREN:
            raise IllegalTokenError(
                nxt,
                expected=(TokenKind.LPAREN.category, TokenKind.LPAREN),
                reason="Functions must be called",
            )
        self.advance()

        args: list[Expr] = []
        arg_tokens: list[Token] = []
        depth = 1

        while True:
            tok = self.advance()
            if tok is None:
                raise UnclosedDelimiterError()

            if tok.kind == TokenKind.LPAREN:
                depth += 1
            elif tok.kind == TokenKind.RPAREN:
                depth -= 1
                if depth == 0:
                    break

            if tok.kind == TokenKind.COMMA and depth == 1:
                args.append(_Parser(arg_tokens).parse_expr())
                arg_tokens = []
            else:
                arg_tokens.append(tok)

        # "f()" has no arguments, but "f(1,)" has an empty last one
        if args or arg_tokens:
            args.append(_Parser(arg_tokens).parse_expr())

        return FuncCall(name=name.value, args=args)


def parse_tokens(tokens: list[Token]) -> Expr:
    """Parse an already tokenized expression.

    Tokens following a complete expression are ignored.

    Raises:
        ExpressionParseError: If the tokens don't form an expression.
    """
    return _Parser(tokens).parse_expr()


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "clamp(20, 200+, 90%)")

    Returns:
        Parsed expression AST.

    Raises:
        ExpressionTokenError: If tokenization fails.
        ExpressionParseError: If the expression is invalid.
    """
    expr = parse_tokens(tokenize(source))
    logger.debug("Parsed %r as %s", source, expr)
    return expr
