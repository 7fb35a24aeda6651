"""Indented textual rendering of syntax trees."""

from __future__ import annotations

from .nodes import (
    ArithOp,
    Assignment,
    BoolAssignment,
    BoolLiteral,
    Comparison,
    FloatLiteral,
    GetLine,
    IfThenElse,
    IntegerLiteral,
    LogicBinary,
    LogicNot,
    LogicOp,
    Operation,
    Program,
    PutLine,
    RelationalOp,
    Sequence,
    Variable,
    WhileLoop,
)

_INDENT = "   "
_EXPR_TYPES = (IntegerLiteral, FloatLiteral, Variable, Operation)
_BOOL_TYPES = (BoolLiteral, Comparison, LogicBinary, LogicNot)


class TreeFormatError(ValueError):
    """Raised when a tree cannot be rendered."""


def _pad(depth: int) -> str:
    return _INDENT * depth


def format_expr(expr, depth=0) -> str:
    """Render an arithmetic expression at the given indentation depth."""
    if expr is None:
        raise TreeFormatError("Null expression!!")
    pad = _pad(depth)
    match expr:
        case IntegerLiteral(value=value):
            return f"{pad}INT: {int(value)}"
        case FloatLiteral(value=value):
            return f"{pad}FLOAT: {float(value):f}"
        case Variable(name=name):
            return f"{pad}VAR: {name}"
        case Operation(op=op, left=left, right=right):
            if not isinstance(op, ArithOp):
                raise TreeFormatError("Unknown operator!")
            return (
                f"{pad}OP: {op.value}\n"
                f"{format_expr(left, depth + 1)}\n"
                f"{format_expr(right, depth + 1)}"
            )
    raise TreeFormatError(f"Unknown expression: {expr!r}")


def format_bool_expr(expr, depth=0) -> str:
    """Render a boolean expression at the given indentation depth."""
    if expr is None:
        raise TreeFormatError("Null boolean expression!!")
    pad = _pad(depth)
    match expr:
        case BoolLiteral(value=value):
            return f"{pad}BOOL_INT: {int(value)}"
        case Comparison(op=op, left=left, right=right):
            if not isinstance(op, RelationalOp):
                raise TreeFormatError("Unknown relational operator!")
            return (
                f"{pad}RELOP: {op.value}\n"
                f"{format_expr(left, depth + 1)}\n"
                f"{format_expr(right, depth + 1)}"
            )
        case LogicBinary(op=op, left=left, right=right):
            if not isinstance(op, LogicOp):
                raise TreeFormatError("Unknown logical binary operator!")
            return (
                f"{pad}LOGIC_BIN: {op.value}\n"
                f"{format_bool_expr(left, depth + 1)}\n"
                f"{format_bool_expr(right, depth + 1)}"
            )
        case LogicNot(expr=inner):
            return f"{pad}LOGIC_UN: not\n{format_bool_expr(inner, depth + 1)}"
    raise TreeFormatError(f"Unknown boolean expression: {expr!r}")


def _format_put_value(value, depth: int) -> str:
    if isinstance(value, str):
        return f"{_pad(depth)}ID: {value}"
    if isinstance(value, _BOOL_TYPES):
        return format_bool_expr(value, depth)
    if isinstance(value, _EXPR_TYPES):
        return format_expr(value, depth)
    raise TreeFormatError(f"Unknown output value: {value!r}")


def format_cmd(cmd, depth=0) -> str:
    """Render a command at the given indentation depth."""
    if cmd is None:
        raise TreeFormatError("Null command!!")
    pad = _pad(depth)
    match cmd:
        case Assignment(name=name, expr=expr):
            return f"{pad}ASSIGNMENT: {name}\n{format_expr(expr, depth + 1)}"
        case BoolAssignment(name=name, expr=expr):
            return f"{pad}BOOL_ASSIGNMENT: {name}\n{format_bool_expr(expr, depth + 1)}"
        case IfThenElse(condition=condition, then_cmd=then_cmd, else_cmd=else_cmd):
            return (
                f"{pad}IF\n"
                f"{format_bool_expr(condition, depth + 1)}\n"
                f"{pad}THEN\n"
                f"{format_cmd(then_cmd, depth + 1)}\n"
                f"{pad}ELSE\n"
                f"{format_cmd(else_cmd, depth + 1)}"
            )
        case WhileLoop(condition=condition, body=body):
            return (
                f"{pad}WHILE\n"
                f"{format_bool_expr(condition, depth + 1)}\n"
                f"{pad}DO\n"
                f"{format_cmd(body, depth + 1)}"
            )
        case Sequence(first=first, second=second):
            return (
                f"{pad}SEQUENCE\n"
                f"{format_cmd(first, depth + 1)}\n"
                f"{format_cmd(second, depth + 1)}"
            )
        case PutLine(value=value):
            return f"{pad}PUT_LINE\n{_format_put_value(value, depth + 1)}"
        case GetLine(name=name):
            return f"{pad}GET_LINE\n{_pad(depth + 1)}ID: {name}"
    raise TreeFormatError("Unknown command!")


def format_program(program: Program) -> str:
    """Render a whole procedure, its body indented one level."""
    if program is None:
        raise TreeFormatError("Null program!!")
    parts = [f"PROCEDURE: {program.name}\n", "BEGIN\n"]
    if program.body is not None:
        parts.append(format_cmd(program.body, 1))
    parts.append(f"\nEND {program.name}\n")
    return "".join(parts)