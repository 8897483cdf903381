# This file defines the mini AST produced by the parser.

from __future__ import annotations
from dataclasses import dataclass


# The ASDL for mini:
#      program = Assignment(identifier target, expr expression)
#         expr = Literal(string value)
#              | Identifier(identifier name)
#              | BinaryOp(string operator, expr left, expr right)

# In class form:
#      Mini_AST > Assignment | Expression
#    Assignment : Assignment(target: str, expression: Expression)
#    Expression > Literal | Identifier | BinaryOp
#       Literal : Literal(value: str)
#    Identifier : Identifier(name: str)
#      BinaryOp : BinaryOp(operator: str, left: Expression, right: Expression)

# Nodes are frozen: the parser builds each one from finished children
# and nothing changes them afterwards.


class Mini_AST: pass


class Expression(Mini_AST): pass


@dataclass(frozen=True)
class Literal(Expression):
    value: str


@dataclass(frozen=True)
class Identifier(Expression):
    name: str


@dataclass(frozen=True)
class BinaryOp(Expression):
    operator: str
    left: Expression
    right: Expression


@dataclass(frozen=True)
class Assignment(Mini_AST):
    target: str
    expression: Expression

