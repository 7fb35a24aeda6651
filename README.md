# adatree

`adatree` models the syntax tree of a small Ada-like language and renders it as
an indented, human-readable listing. The tree covers:

- arithmetic expressions: integer and float literals, variables, and the
  operators `+`, `-`, `*`, `/` and `mod` (`ArithOp`)
- boolean expressions: literals (`0` or `1`), the comparisons `=`, `/=`, `>`,
  `>=`, `<` and `<=` (`RelationalOp`), the binary logic operators `and`, `or`
  and `xor` (`LogicOp`), and `not`
- commands: assignment, boolean assignment, `if … then … else`, `while … do`,
  sequences, `Put_Line` and `Get_Line`
- a procedure (`Program`) with a name and an optional command body

## Installation

```
pip install .
```

## Building a tree

Every node is an immutable dataclass from `adatree.nodes`:

| Kind               | Classes                                                                                   |
|--------------------|-------------------------------------------------------------------------------------------|
| arithmetic         | `IntegerLiteral`, `FloatLiteral`, `Variable`, `Operation`                                 |
| boolean            | `BoolLiteral`, `Comparison`, `LogicBinary`, `LogicNot`                                    |
| commands           | `Assignment`, `BoolAssignment`, `IfThenElse`, `WhileLoop`, `Sequence`, `PutLine`, `GetLine` |
| procedure          | `Program`                                                                                 |

`PutLine` takes an arithmetic expression, a boolean expression, or a plain
string naming an identifier.

```python
from adatree.nodes import (
    ArithOp, RelationalOp, IntegerLiteral, Variable, Operation,
    Comparison, Assignment, WhileLoop, PutLine, Program, sequence_of,
)

body = sequence_of(
    Assignment("x", IntegerLiteral(0)),
    WhileLoop(
        Comparison(RelationalOp.LESS, Variable("x"), IntegerLiteral(10)),
        Assignment("x", Operation(ArithOp.PLUS, Variable("x"), IntegerLiteral(1))),
    ),
    PutLine(Variable("x")),
)
program = Program("Count", body)
```

`sequence_of` joins commands into `Sequence` nodes nested to the right, so the
first command is always the first branch. Given a single command it returns
that command unchanged; given none it raises `ValueError`.

## Printing a tree

`adatree.printer` turns nodes into text:

```python
from adatree.printer import format_program

print(format_program(program), end="")
```

prints:

```
PROCEDURE: Count
BEGIN
   SEQUENCE
      ASSIGNMENT: x
         INT: 0
      SEQUENCE
         WHILE
            RELOP: <
               VAR: x
               INT: 10
         DO
            ASSIGNMENT: x
               OP: +
                  VAR: x
                  INT: 1
         PUT_LINE
            VAR: x
END Count
```

Every nesting level is indented by three spaces, and float literals are shown
with six decimal places (`FLOAT: 2.500000`). `format_expr`,
`format_bool_expr` and `format_cmd` take a node and a starting depth (default
`0`) and return the text without a trailing newline, so any part of a tree can
be rendered by itself. `format_program` returns the whole listing, ending in a
newline.

A missing node (`None`), an object that is not a node of the expected kind, or
an operator that is not a member of the matching enum raises
`TreeFormatError`, a subclass of `ValueError`.

## What it does not do

`adatree` builds and prints trees only. It has no parser for program text, no
command-line tool, and it does not evaluate expressions or run programs: trees
are constructed in Python and rendered as text.

## Running the tests

```
pip install .[test]
pytest
```