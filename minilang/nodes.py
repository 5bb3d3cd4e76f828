"""Syntax tree of the language and its indented text dump."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO


class ASTNode:
    """Base of all tree nodes."""

    def _label(self) -> str:
        raise NotImplementedError

    def _children(self) -> Iterable[ASTNode | None]:
        return ()

    def lines(self, indent: int = 0) -> Iterator[str]:
        """Yield the dump of this subtree, one line per node."""
        yield " " * indent + self._label()
        for child in self._children():
            if child is not None:
                yield from child.lines(indent + 2)

    def format(self, indent: int = 0) -> str:
        """Return the dump as text, each line ending in a newline."""
        return "".join(line + "\n" for line in self.lines(indent))

    def print(self, indent: int = 0, file: TextIO | None = None) -> None:
        """Write the dump to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.format(indent))


class Stmt(ASTNode):
    """Base of statements."""


class Expr(ASTNode):
    """Base of value expressions."""


@dataclass
class IdentExpr(Expr):
    ident: str

    def _label(self) -> str:
        return f"Ident({self.ident})"

    def __str__(self) -> str:
        return self.ident


@dataclass
class NumberExpr(Expr):
    value: int

    def _label(self) -> str:
        return f"Number({self.value})"


@dataclass
class UnaryExpr(Expr):
    op: str
    rhs: Expr

    def _label(self) -> str:
        return f"Unary({self.op})"

    def _children(self) -> Iterable[ASTNode | None]:
        return (self.rhs,)


@dataclass
class BinaryExpr(Expr):
    op: str
    lhs: Expr
    rhs: Expr

    def _label(self) -> str:
        return f"Binary({self.op})"

    def _children(self) -> Iterable[ASTNode | None]:
        return (self.lhs, self.rhs)


@dataclass
class BoolExpr(ASTNode):
    symbol: str
    lhs: Expr
    rhs: Expr

    def _label(self) -> str:
        return f"Bool({self.symbol})"

    def _children(self) -> Iterable[ASTNode | None]:
        return (self.lhs, self.rhs)


@dataclass
class ArgList(ASTNode):
    args: list[Expr] = field(default_factory=list)

    def _label(self) -> str:
        return "ArgList"

    def _children(self) -> Iterable[ASTNode | None]:
        return self.args


@dataclass
class ParamList(ASTNode):
    params: list[IdentExpr] = field(default_factory=list)

    def _label(self) -> str:
        return "ParamList"

    def _children(self) -> Iterable[ASTNode | None]:
        return self.params


@dataclass
class InputArgList(ASTNode):
    """Arguments of an input statement: plain identifiers only."""

    idents: list[IdentExpr] = field(default_factory=list)

    def _label(self) -> str:
        return "Input Args"

    def _children(self) -> Iterable[ASTNode | None]:
        return self.idents


@dataclass
class StmtList(ASTNode):
    stmts: list[Stmt] = field(default_factory=list)

    def _label(self) -> str:
        return "StmtList"

    def _children(self) -> Iterable[ASTNode | None]:
        return self.stmts


@dataclass
class DeclareStmt(Stmt):
    name: IdentExpr
    expr: Expr | None = None

    def _label(self) -> str:
        return "Declare"

    def _children(self) -> Iterable[ASTNode | None]:
        return (self.name, self.expr)


@dataclass
class AssignStmt(Stmt):
    name: IdentExpr
    expr: Expr

    def _label(self) -> str:
        return "Assign"

    def _children(self) -> Iterable[ASTNode | None]:
        return (self.name, self.expr)


@dataclass
class IfStmt(Stmt):
    condition: BoolExpr
    if_body: StmtList
    else_body: StmtList | None = None

    def _label(self) -> str:
        return "if"

    def _children(self) -> Iterable[ASTNode | None]:
        return (self.condition, self.if_body, self.else_body)


@dataclass
class WhileStmt(Stmt):
    condition: BoolExpr
    loop_body: StmtList

    def _label(self) -> str:
        return "while"

    def _children(self) -> Iterable[ASTNode | None]:
        return (self.condition, self.loop_body)


@dataclass
class FuncCallStmt(Stmt):
    name: IdentExpr
    args: ArgList | None = None

    def _label(self) -> str:
        return "Call"

    def _children(self) -> Iterable[ASTNode | None]:
        return (self.name, self.args)


@dataclass
class InputStmt(Stmt):
    idents: list[IdentExpr] = field(default_factory=list)

    @classmethod
    def from_args(cls, args: InputArgList) -> InputStmt:
        """Build from an input argument list."""
        return cls(list(args.idents))

    def _label(self) -> str:
        return "Input"

    def _children(self) -> Iterable[ASTNode | None]:
        return self.idents


@dataclass
class OutputStmt(Stmt):
    idents: list[Expr] = field(default_factory=list)

    @classmethod
    def from_args(cls, args: ArgList) -> OutputStmt:
        """Build from an argument list."""
        return cls(list(args.args))

    def _label(self) -> str:
        return "Output"

    def _children(self) -> Iterable[ASTNode | None]:
        return self.idents


@dataclass
class FuncCallExpr(Expr):
    name: IdentExpr
    args: ArgList | None = None

    @classmethod
    def from_stmt(cls, stmt: FuncCallStmt) -> FuncCallExpr:
        """Turn a call statement into a call expression."""
        return cls(stmt.name, stmt.args)

    def _label(self) -> str:
        return "Call"

    def _children(self) -> Iterable[ASTNode | None]:
        return (self.name, self.args)


@dataclass
class Func(ASTNode):
    name: IdentExpr
    params: ParamList | None
    stmts: StmtList
    return_value: Expr

    def _label(self) -> str:
        return "Func"

    def _children(self) -> Iterable[ASTNode | None]:
        return (self.name, self.params, self.stmts, self.return_value)


@dataclass
class Program(ASTNode):
    name: IdentExpr
    functions: list[Func]
    main_body: StmtList

    def _label(self) -> str:
        return f"Program({self.name})"

    def _children(self) -> Iterable[ASTNode | None]:
        return (*self.functions, self.main_body)