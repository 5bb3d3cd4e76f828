# minilang

Building blocks for the front end of a compiler for a small imperative
language. A program has a name, a list of functions and a main body.
The language has integer variables, `if`/`while` statements, function
calls, and input and output statements.

The package has three modules:

- `minilang.nodes`: the abstract syntax tree. Every node can render itself
  as an indented tree with `lines`, `format` and `print`.
- `minilang.symbols`: `SymbolKind`, `SymbolInfo`, a per-scope
  `SymbolTable`, and a `SymbolTableManager` that keeps a stack of scopes.
- `minilang.semantic`: `SemanticAnalyzer`, which walks a `Program` and
  returns a list of `Diagnostic` objects, one for each problem it finds.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building and printing a tree

```python
from minilang.nodes import (
    Program, StmtList, DeclareStmt, OutputStmt, IdentExpr, NumberExpr, BinaryExpr,
)

program = Program(
    IdentExpr("demo"),
    [],
    StmtList([
        DeclareStmt(IdentExpr("x"), NumberExpr(1)),
        OutputStmt([BinaryExpr("+", IdentExpr("x"), NumberExpr(2))]),
    ]),
)
program.print()
```

This prints:

```
Program(demo)
  StmtList
    Declare
      Ident(x)
      Number(1)
    Output
      Binary(+)
        Ident(x)
        Number(2)
```

`format(indent)` returns the same text as a string, with each line ending
in a newline. `lines(indent)` yields the lines one at a time, without
newlines. `print(indent, file)` writes the text to `file`, or to standard
output if no file is given. Children that are `None`, such as a missing
`else` body, are left out of the dump.

Three constructors convert one node into another:

- `InputStmt.from_args(InputArgList(...))`
- `OutputStmt.from_args(ArgList(...))`
- `FuncCallExpr.from_stmt(FuncCallStmt(...))`

## Scoped symbols

```python
from minilang.symbols import SymbolKind, SymbolInfo, SymbolTableManager

manager = SymbolTableManager()
with manager.scope():
    manager.declare("x", SymbolInfo(SymbolKind.INT, "x"))
    with manager.scope():
        manager.lookup("x")          # found in the enclosing scope
        manager.lookup_inplace("x")  # None: only the innermost scope is searched
```

If you declare a name a second time in the same scope, `declare` returns
`False` and keeps the first entry. `enter_scope` and `exit_scope` open and
close scopes without a `with` block. Calling `exit_scope` when no scope is
open does nothing. `depth` gives the number of open scopes.

If no scope is open, `declare` and `lookup_inplace` raise `RuntimeError`.
`lookup` returns `None` in that case.

A `SymbolTable` supports `in` and `len()`.

## Semantic checks

```python
from minilang.nodes import AssignStmt, DeclareStmt, FuncCallStmt, IdentExpr, NumberExpr, Program, StmtList
from minilang.semantic import SemanticAnalyzer

program = Program(
    IdentExpr("demo"),
    [],
    StmtList([
        DeclareStmt(IdentExpr("x")),
        DeclareStmt(IdentExpr("x")),
        AssignStmt(IdentExpr("y"), NumberExpr(3)),
        FuncCallStmt(IdentExpr("f")),
    ]),
)
for diagnostic in SemanticAnalyzer().analyze(program):
    print(diagnostic)
```

This prints:

```
x is already declared in this scope
y is not declared
function f is not defined
```

Each `Diagnostic` has a `problem` field and a `name` field. `problem` is a
member of the `Problem` enum: `REDEFINED`, `UNDECLARED`,
`UNDEFINED_FUNCTION` or `NOT_IN_SCOPE`.

The analyzer works in this order:

1. It declares the program name and every function name in the outermost
   scope.
2. It checks each function body in a scope of its own, with the function's
   parameters declared in that scope.
3. It checks the statements of the main body.

Assignments, input statements and calls look a name up through all
enclosing scopes.

An identifier used inside an expression must be declared in the current
scope itself. So a function body that uses a variable of the main body is
reported as `NOT_IN_SCOPE`.

Each call to `analyze` starts with fresh scopes and returns a new list.

## What the package does not do

- It does not read program text. There is no lexer or parser, so you must
  build trees in Python from the node classes.
- It does not generate code and does not run programs.
- It has no command-line tool.