"""Abstract syntax tree nodes for a small Ada-like language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ArithOp(Enum):
    """Binary arithmetic operators, valued by their printed symbol."""

    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDES = "/"
    MODULE = "mod"


class RelationalOp(Enum):
    """Relational operators comparing two arithmetic expressions."""

    EQUALS = "="
    NOT_EQUAL = "/="
    GREATER = ">"
    GREATER_OR_EQUAL = ">="
    LESS = "<"
    LESS_OR_EQUAL = "<="


class LogicOp(Enum):
    """Binary logical operators."""

    AND = "and"
    OR = "or"
    XOR = "xor"


@dataclass(frozen=True)
class IntegerLiteral:
    """An integer constant."""

    value: int


@dataclass(frozen=True)
class FloatLiteral:
    """A floating point constant."""

    value: float


@dataclass(frozen=True)
class Variable:
    """A reference to a named variable."""

    name: str


@dataclass(frozen=True)
class Operation:
    """A binary arithmetic operation."""

    op: ArithOp
    left: "Expr"
    right: "Expr"


Expr = Union[IntegerLiteral, FloatLiteral, Variable, Operation]


@dataclass(frozen=True)
class BoolLiteral:
    """A boolean constant stored as 0 (false) or 1 (true)."""

    value: int


@dataclass(frozen=True)
class Comparison:
    """A relational comparison between two arithmetic expressions."""

    op: RelationalOp
    left: Expr
    right: Expr


@dataclass(frozen=True)
class LogicBinary:
    """A binary logical operation over two boolean expressions."""

    op: LogicOp
    left: "BoolExpr"
    right: "BoolExpr"


@dataclass(frozen=True)
class LogicNot:
    """Logical negation of a boolean expression."""

    expr: "BoolExpr"


BoolExpr = Union[BoolLiteral, Comparison, LogicBinary, LogicNot]


@dataclass(frozen=True)
class Assignment:
    """Assignment of an arithmetic expression to a variable."""

    name: str
    expr: Expr


@dataclass(frozen=True)
class BoolAssignment:
    """Assignment of a boolean expression to a variable."""

    name: str
    expr: BoolExpr


@dataclass(frozen=True)
class IfThenElse:
    """Conditional command with both branches."""

    condition: BoolExpr
    then_cmd: "Command"
    else_cmd: "Command"


@dataclass(frozen=True)
class WhileLoop:
    """Loop running its body while the condition holds."""

    condition: BoolExpr
    body: "Command"


@dataclass(frozen=True)
class Sequence:
    """Two commands executed one after the other."""

    first: "Command"
    second: "Command"


@dataclass(frozen=True)
class PutLine:
    """Output command; the value is an expression, a boolean expression or an identifier."""

    value: Union[Expr, BoolExpr, str]


@dataclass(frozen=True)
class GetLine:
    """Input command reading into a named variable."""

    name: str


Command = Union[
    Assignment, BoolAssignment, IfThenElse, WhileLoop, Sequence, PutLine, GetLine
]


@dataclass(frozen=True)
class Program:
    """A named procedure with an optional body."""

    name: str
    body: Optional[Command] = None


def sequence_of(*args: Command) -> Command:
    """Chain commands into right-nested sequences; a single command is returned as is."""
    if not args:
        raise ValueError("sequence_of() needs at least one command")
    *head, result = args
    for cmd in reversed(head):
        result = Sequence(cmd, result)
    return result