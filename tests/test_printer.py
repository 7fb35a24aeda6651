import pytest

from adatree.nodes import (
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
from adatree.printer import (
    TreeFormatError,
    format_bool_expr,
    format_cmd,
    format_expr,
    format_program,
)

PAD = "   "


def test_integer_literal():
    assert format_expr(IntegerLiteral(42), 0) == "INT: 42"


def test_float_uses_six_decimals():
    assert format_expr(FloatLiteral(1.5), 0) == "FLOAT: 1.500000"


def test_operation_layout():
    expr = Operation(ArithOp.PLUS, IntegerLiteral(1), Variable("x"))
    assert format_expr(expr, 0) == "OP: +\n   INT: 1\n   VAR: x"


def test_depth_prefixes_indentation():
    expr = Operation(ArithOp.TIMES, Variable("a"), IntegerLiteral(2))
    flat = format_expr(expr, 0)
    deep = format_expr(expr, 2)
    assert deep.splitlines() == [PAD * 2 + line for line in flat.splitlines()]


@pytest.mark.parametrize("op", list(ArithOp))
def test_every_arith_operator_symbol(op):
    out = format_expr(Operation(op, IntegerLiteral(1), IntegerLiteral(2)), 0)
    assert out.splitlines()[0] == "OP: " + op.value


def test_unknown_operator_raises():
    with pytest.raises(TreeFormatError):
        format_expr(Operation("^", IntegerLiteral(1), IntegerLiteral(2)), 0)


def test_null_expression_raises():
    with pytest.raises(TreeFormatError):
        format_expr(None, 0)


@pytest.mark.parametrize("op", list(RelationalOp))
def test_comparison_children(op):
    left, right = Variable("a"), IntegerLiteral(7)
    out = format_bool_expr(Comparison(op, left, right), 1)
    assert out == "\n".join(
        [PAD + "RELOP: " + op.value, format_expr(left, 2), format_expr(right, 2)]
    )


@pytest.mark.parametrize("op", list(LogicOp))
def test_logic_binary_children(op):
    left, right = BoolLiteral(1), BoolLiteral(0)
    out = format_bool_expr(LogicBinary(op, left, right), 0)
    assert out == "\n".join(
        ["LOGIC_BIN: " + op.value, format_bool_expr(left, 1), format_bool_expr(right, 1)]
    )


def test_logic_not():
    inner = BoolLiteral(1)
    out = format_bool_expr(LogicNot(inner), 0)
    assert out == "LOGIC_UN: not\n" + format_bool_expr(inner, 1)


def test_bool_literal_prints_integer_for_python_bool():
    assert format_bool_expr(BoolLiteral(True), 0) == format_bool_expr(BoolLiteral(1), 0)


def test_unknown_relational_operator_raises():
    with pytest.raises(TreeFormatError):
        format_bool_expr(Comparison("==", IntegerLiteral(1), IntegerLiteral(1)), 0)


def test_null_bool_expression_raises():
    with pytest.raises(TreeFormatError):
        format_bool_expr(None, 0)


def test_assignment_embeds_expression():
    expr = Operation(ArithOp.MINUS, Variable("x"), IntegerLiteral(1))
    out = format_cmd(Assignment("x", expr), 1)
    assert out == PAD + "ASSIGNMENT: x\n" + format_expr(expr, 2)


def test_bool_assignment_embeds_expression():
    expr = LogicNot(BoolLiteral(0))
    out = format_cmd(BoolAssignment("flag", expr), 0)
    assert out == "BOOL_ASSIGNMENT: flag\n" + format_bool_expr(expr, 1)


def test_if_then_else_layout():
    cond = Comparison(RelationalOp.LESS, Variable("i"), IntegerLiteral(3))
    then_cmd, else_cmd = GetLine("i"), PutLine("i")
    out = format_cmd(IfThenElse(cond, then_cmd, else_cmd), 1)
    assert out == "\n".join(
        [
            PAD + "IF",
            format_bool_expr(cond, 2),
            PAD + "THEN",
            format_cmd(then_cmd, 2),
            PAD + "ELSE",
            format_cmd(else_cmd, 2),
        ]
    )


def test_while_layout():
    cond = BoolLiteral(1)
    body = GetLine("n")
    out = format_cmd(WhileLoop(cond, body), 0)
    assert out == "\n".join(
        ["WHILE", format_bool_expr(cond, 1), "DO", format_cmd(body, 1)]
    )


def test_sequence_layout():
    first, second = GetLine("a"), GetLine("b")
    out = format_cmd(Sequence(first, second), 0)
    assert out == "\n".join(["SEQUENCE", format_cmd(first, 1), format_cmd(second, 1)])


def test_put_line_identifier_and_get_line_match():
    put = format_cmd(PutLine("total"), 0).splitlines()
    get = format_cmd(GetLine("total"), 0).splitlines()
    assert put[1] == get[1] == PAD + "ID: total"


def test_put_line_dispatches_on_value_kind():
    expr = IntegerLiteral(5)
    cond = BoolLiteral(0)
    assert format_cmd(PutLine(expr), 0).split("\n", 1)[1] == format_expr(expr, 1)
    assert format_cmd(PutLine(cond), 0).split("\n", 1)[1] == format_bool_expr(cond, 1)


def test_null_command_raises():
    with pytest.raises(TreeFormatError):
        format_cmd(None, 0)


def test_missing_branch_raises():
    with pytest.raises(TreeFormatError):
        format_cmd(IfThenElse(BoolLiteral(1), GetLine("x"), None), 0)


def test_program_wraps_body():
    body = Assignment("x", IntegerLiteral(1))
    out = format_program(Program("main", body))
    assert out == "PROCEDURE: main\nBEGIN\n" + format_cmd(body, 1) + "\nEND main\n"