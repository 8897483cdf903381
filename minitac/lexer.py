# This file translates mini source text into a flat list of tokens.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from minitac.errors import Diagnostics, LexIllegalCharacter, LexUnterminatedLiteral


# The lexical grammar of mini:
#      keyword = "if" | "else" | "while" | "for" | "return"
#   identifier = (letter | "_") (letter | digit | "_")*
#      literal = digit+
#   string_lit = '"' (any char except '"')* '"'
#     char_lit = "'" any char "'"
#     operator = "==" | "!=" | "<=" | ">=" | "&&" | "||"
#              | "+" | "-" | "*" | "/" | "=" | "<" | ">"
#       symbol = "(" | ")" | "{" | "}" | ";" | ","
# Whitespace separates tokens and is otherwise ignored.
# Two-character operators win over one-character operators (maximal munch).


class TokenKind(Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    LITERAL = "LITERAL"
    OPERATOR = "OPERATOR"
    SYMBOL = "SYMBOL"
    STRING_LIT = "STRING_LIT"
    CHAR_LIT = "CHAR_LIT"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    line: int
    column: int

    def __str__(self):
        return f'[{self.kind.value}: "{self.lexeme}" at {self.line}:{self.column}]'


KEYWORDS = frozenset(["if", "else", "while", "for", "return"])
OPERATORS_2 = frozenset(["==", "!=", "<=", ">=", "&&", "||"])
OPERATORS_1 = frozenset(["+", "-", "*", "/", "=", "<", ">"])
SYMBOLS = frozenset(["(", ")", "{", "}", ";", ","])


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ident_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def _is_ident_char(ch: str) -> bool:
    return _is_ident_start(ch) or _is_digit(ch)


class Lexer:
    """Splits source text into tokens.

    Characters which start no token are dropped and reported to the
    diagnostics collector, or raise LexIllegalCharacter in strict mode.
    """

    def __init__(self, source: str, diagnostics: Diagnostics | None = None, strict: bool = False):
        self.source = source
        self.diagnostics = diagnostics
        self.strict = strict
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def _peek(self, offset: int = 0) -> str | None:
        i = self.pos + offset
        return self.source[i] if i < len(self.source) else None

    def _advance(self) -> str:
        "Consume one character, keeping line and column current."
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _emit(self, kind: TokenKind, lexeme: str, line: int, column: int):
        self.tokens.append(Token(kind, lexeme, line, column))

    def tokenize(self) -> list[Token]:
        "Tokenize the whole source, returning the token list."
        while self._peek() is not None:
            ch = self._peek()
            if ch.isspace():
                self._advance()
            elif _is_ident_start(ch):
                self._lex_word()
            elif _is_digit(ch):
                self._lex_number()
            elif ch == '"':
                self._lex_string()
            elif ch == "'":
                self._lex_char()
            elif ch in OPERATORS_1 or ch + (self._peek(1) or "") in OPERATORS_2:
                self._lex_operator()
            elif ch in SYMBOLS:
                self._emit(TokenKind.SYMBOL, ch, self.line, self.column)
                self._advance()
            else:
                self._illegal(ch)
        return self.tokens

    def _lex_word(self):
        (line, column) = (self.line, self.column)
        start = self.pos
        while self._peek() is not None and _is_ident_char(self._peek()):
            self._advance()
        word = self.source[start:self.pos]
        kind = TokenKind.KEYWORD if word in KEYWORDS else TokenKind.IDENTIFIER
        self._emit(kind, word, line, column)

    def _lex_number(self):
        (line, column) = (self.line, self.column)
        start = self.pos
        while self._peek() is not None and _is_digit(self._peek()):
            self._advance()
        self._emit(TokenKind.LITERAL, self.source[start:self.pos], line, column)

    def _lex_string(self):
        (line, column) = (self.line, self.column)
        self._advance()  # opening quote
        start = self.pos
        while self._peek() != '"':
            if self._peek() is None:
                raise LexUnterminatedLiteral("Unterminated string literal", line, column)
            self._advance()
        value = self.source[start:self.pos]
        self._advance()  # closing quote
        self._emit(TokenKind.STRING_LIT, value, line, column)

    def _lex_char(self):
        (line, column) = (self.line, self.column)
        self._advance()  # opening quote
        if self._peek() is None:
            raise LexUnterminatedLiteral("Unterminated char literal", line, column)
        value = self._advance()
        if self._peek() != "'":
            raise LexUnterminatedLiteral("Unterminated char literal", line, column)
        self._advance()  # closing quote
        self._emit(TokenKind.CHAR_LIT, value, line, column)

    def _lex_operator(self):
        (line, column) = (self.line, self.column)
        two = self._peek() + (self._peek(1) or "")
        if two in OPERATORS_2:
            self._advance()
            self._advance()
            self._emit(TokenKind.OPERATOR, two, line, column)
        else:
            self._emit(TokenKind.OPERATOR, self._advance(), line, column)

    def _illegal(self, ch: str):
        msg = f"Unrecognized character {ch!r}"
        if self.strict:
            raise LexIllegalCharacter(msg, self.line, self.column)
        if self.diagnostics is not None:
            self.diagnostics.warning(msg, self.line, self.column)
        self._advance()


def tokenize(source: str, diagnostics: Diagnostics | None = None, strict: bool = False) -> list[Token]:
    "Tokenize mini source text."
    return Lexer(source, diagnostics, strict).tokenize()
