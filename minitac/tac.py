# This file defines the three-address code (TAC) AST produced from the mini AST.

from __future__ import annotations
from dataclasses import dataclass


# The ASDL for TAC:
#       program = Program(instruction* instructions)
#   instruction = Copy(val src, val dst)
#               | Binary(binop, val left, val right, val dst)
#           val = Constant(string) | Var(identifier)

# In class form:
#         TAC_AST > Program | Instruction | Operand
#         Program : Program(instructions: list[Instruction])
#     Instruction > Copy | Binary
#            Copy : Copy(src: Operand, dst: Var)
#          Binary : Binary(op: str, left: Operand, right: Operand, dst: Var)
#         Operand > Constant | Var
#        Constant : Constant(value: str)
#             Var : Var(name: str)

# Each instruction renders as one line of text:
#   Copy      ->  dst = src
#   Binary    ->  dst = left op right


class TAC_AST: pass


class Operand(TAC_AST):
    def text(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Constant(Operand):
    value: str

    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Var(Operand):
    name: str

    def text(self) -> str:
        return self.name


class Instruction(TAC_AST):
    def text(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Copy(Instruction):
    src: Operand
    dst: Var

    def text(self) -> str:
        return f"{self.dst.text()} = {self.src.text()}"


@dataclass(frozen=True)
class Binary(Instruction):
    op: str
    left: Operand
    right: Operand
    dst: Var

    def text(self) -> str:
        return f"{self.dst.text()} = {self.left.text()} {self.op} {self.right.text()}"


@dataclass
class Program(TAC_AST):
    instructions: list[Instruction]

    def lines(self) -> list[str]:
        return [instr.text() for instr in self.instructions]

    def text(self) -> str:
        "Render the program, one instruction per line."
        return "".join(line + "\n" for line in self.lines())
