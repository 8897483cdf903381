# This file translates a mini AST into a TAC AST.

from __future__ import annotations
from dataclasses import dataclass, field

# So for this mini source:
#
#   y = x * 2 + 5;
#
# we will emit these instructions:
#
#   t0 = x * 2
#   t1 = t0 + 5
#   y = t1
#
# Overall, we will perform this AST transform:
#
# Mini_AST:                  | TAC_AST:
# ---------                  | --------
# (Assignment                | (Program
#   target "y"               |   instructions (list
#   expression (BinaryOp     |     (Binary
#     operator "+"           |       op "*"
#     left (BinaryOp         |       left (Var name "x")
#       operator "*"         |       right (Constant value "2")
#       left (Identifier     |       dst (Var name "t0")
#         name "x"           |     )
#       )                    |     (Binary
#       right (Literal       |       op "+"
#         value "2"          |       left (Var name "t0")
#       )                    |       right (Constant value "5")
#     )                      |       dst (Var name "t1")
#     right (Literal         |     )
#       value "5"            |     (Copy
#     )                      |       src (Var name "t1")
#   )                        |       dst (Var name "y")
# )                          |     )
#                            |   )
#                            | )
#
# The walk is post-order: the left operand is fully translated (including
# any instructions it emits) before the right operand, and both before the
# instruction which combines them. So every operand is defined before use.
# An Assignment of N BinaryOps always emits N+1 instructions.


from minitac import mini
from minitac import tac


@dataclass
class State:
    "The temporary counter and instruction buffer of one generator."
    next_tmp: int = 0
    instructions: list[tac.Instruction] = field(default_factory=list)


def _next_tmp(state: State) -> tac.Var:
    "Claim the next tmp number and return a tmp Var."
    varname = f"t{state.next_tmp}"
    state.next_tmp += 1
    return tac.Var(varname)


class Generator:
    """Generates TAC from mini ASTs.

    Temporaries are numbered from t0 and never reused. Generating a second
    AST with the same generator continues the numbering and appends to the
    same instruction list; use a fresh Generator for an independent pass.
    """

    def __init__(self, state: State | None = None):
        self.state = state if state is not None else State()

    @property
    def instructions(self) -> list[tac.Instruction]:
        return self.state.instructions

    def generate(self, node: mini.Mini_AST) -> str:
        "Translate a node, returning the name of the operand holding its value."
        return _translate(node, self.state).text()

    def program(self) -> tac.Program:
        return tac.Program(list(self.state.instructions))

    def lines(self) -> list[str]:
        return self.program().lines()


def mini_to_tac(mini_ast: mini.Assignment) -> tac.Program:
    "Translate from a mini AST to a TAC AST, using a fresh generator."
    gen = Generator()
    gen.generate(mini_ast)
    return gen.program()


def _translate(node: mini.Mini_AST, state: State) -> tac.Operand:
    match node:
        case mini.Assignment():
            return _translate_Assignment(node, state)
        case mini.Expression():
            return _translate_Expression(node, state)
        case _:
            raise Exception("Unreachable")


def _translate_Assignment(node: mini.Assignment, state: State) -> tac.Var:
    assert isinstance(node, mini.Assignment)
    val = _translate_Expression(node.expression, state)
    dst = tac.Var(node.target)
    state.instructions.append(tac.Copy(src = val, dst = dst))
    return dst


def _translate_Expression(node: mini.Expression, state: State) -> tac.Operand:
    """Translate an expression, returning the operand which holds its value.
    The walk uses an explicit stack, since the parser builds operator chains
    of any length and each operator adds one level to the tree.
    """
    # (node, children_done) pairs still to visit, and the operands produced so far.
    todo = [(node, False)]
    vals = []
    while len(todo) > 0:
        (node, children_done) = todo.pop()
        match node:
            case mini.Literal(value):
                vals.append(tac.Constant(value))
            case mini.Identifier(name):
                vals.append(tac.Var(name))
            case mini.BinaryOp(op, left, right) if not children_done:
                # popped in reverse: left, then right, then this node.
                todo += [(node, True), (right, False), (left, False)]
            case mini.BinaryOp(op):
                right_val = vals.pop()
                left_val = vals.pop()
                dst = _next_tmp(state)
                state.instructions.append(tac.Binary(
                    op = op,
                    left = left_val,
                    right = right_val,
                    dst = dst,
                ))
                vals.append(dst)
            case _:
                raise Exception("Unreachable")
    return vals.pop()
