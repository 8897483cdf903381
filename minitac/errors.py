# This file defines the errors raised by the lexer and parser,
# and the diagnostics collector used for non-fatal problems.

from __future__ import annotations
from dataclasses import dataclass, field


# The error hierarchy:
#             CompileError > LexError | ParseError
#                 LexError > LexIllegalCharacter | LexUnterminatedLiteral
#               ParseError > ParseExpectedIdentifier | ParseExpectedAssignOp
#                          | ParseExpectedOperand | ParseUnexpectedEndOfInput


def format_position(line: int | None, column: int | None) -> str:
    "Format a source position, where None means end of input."
    if line is None:
        return "at end of input"
    return f"at line {line}, column {column}"


class CompileError(Exception):
    """Base class for every error the front end raises on bad input.
    line and column are None when the error is at end of input.
    """

    def __init__(self, msg: str, line: int | None = None, column: int | None = None):
        self.msg = msg
        self.line = line
        self.column = column
        super().__init__(f"{msg} {format_position(line, column)}")


class LexError(CompileError): pass
class LexIllegalCharacter(LexError): pass
class LexUnterminatedLiteral(LexError): pass


class ParseError(CompileError):
    "A parse error, carrying the offending token (None at end of input)."

    def __init__(self, msg: str, token=None):
        self.token = token
        if token is None:
            super().__init__(msg)
        else:
            super().__init__(msg, token.line, token.column)


class ParseExpectedIdentifier(ParseError): pass
class ParseExpectedAssignOp(ParseError): pass
class ParseExpectedOperand(ParseError): pass
class ParseUnexpectedEndOfInput(ParseError): pass


@dataclass(frozen=True)
class Diagnostic:
    "A non-fatal problem found in the source."
    severity: str
    message: str
    line: int
    column: int

    def __str__(self):
        return f"{self.message} {format_position(self.line, self.column)}"


@dataclass
class Diagnostics:
    "Collects diagnostics in the order they were reported."
    items: list[Diagnostic] = field(default_factory=list)

    def warning(self, message: str, line: int, column: int):
        self.items.append(Diagnostic("warning", message, line, column))

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
