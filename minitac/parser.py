# This file translates a list of mini tokens into a mini AST.

from __future__ import annotations

from minitac import mini
from minitac.lexer import Token, TokenKind
from minitac.errors import (
    ParseExpectedAssignOp,
    ParseExpectedIdentifier,
    ParseExpectedOperand,
    ParseUnexpectedEndOfInput,
)


# The grammar of mini:
#   assignment := IDENTIFIER "=" expression [";"]
#   expression := primary ( OPERATOR primary )*
#      primary := LITERAL | IDENTIFIER
#
# Operators have no precedence: every operator folds to the left, so
#   y = x + 2 * 5;
# parses as
#   (Assignment target "y" expression (BinaryOp operator "*"
#       left (BinaryOp operator "+" left (Identifier "x") right (Literal "2"))
#       right (Literal "5")))


class Parser:
    "A recursive-descent parser over one token list."

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def _peek(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self) -> Token | None:
        token = self._peek()
        if token is not None:
            self.pos += 1
        return token

    def remaining(self) -> list[Token]:
        "Return the tokens which have not been consumed."
        return self.tokens[self.pos:]

    def parse_assignment(self) -> mini.Assignment:
        "assignment := IDENTIFIER '=' expression [';']"
        token = self._next()
        if token is None or token.kind != TokenKind.IDENTIFIER:
            raise ParseExpectedIdentifier("Expected identifier at beginning of assignment", token)
        target = token.lexeme

        token = self._next()
        if token is None or token.kind != TokenKind.OPERATOR or token.lexeme != "=":
            raise ParseExpectedAssignOp("Expected '=' after identifier in assignment", token)

        expr = self.parse_expression()

        token = self._peek()
        if token is not None and token.kind == TokenKind.SYMBOL and token.lexeme == ";":
            self._next()

        return mini.Assignment(target, expr)

    def parse_expression(self) -> mini.Expression:
        "expression := primary ( OPERATOR primary )*"
        left = self.parse_primary()
        while self._peek() is not None and self._peek().kind == TokenKind.OPERATOR:
            op = self._next().lexeme
            right = self.parse_primary()
            left = mini.BinaryOp(op, left, right)
        return left

    def parse_primary(self) -> mini.Expression:
        "primary := LITERAL | IDENTIFIER"
        token = self._next()
        match token:
            case None:
                raise ParseUnexpectedEndOfInput("Expected literal or identifier")
            case Token(kind=TokenKind.LITERAL):
                return mini.Literal(token.lexeme)
            case Token(kind=TokenKind.IDENTIFIER):
                return mini.Identifier(token.lexeme)
            case _:
                raise ParseExpectedOperand(f"Expected literal or identifier, got {token}", token)


def parse_assignment(tokens: list[Token]) -> mini.Assignment:
    "Parse one assignment from a token list."
    return Parser(tokens).parse_assignment()
