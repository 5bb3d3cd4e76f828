"""Semantic checks over a parsed program: declarations, scopes and calls."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from minilang.nodes import (
    AssignStmt,
    BinaryExpr,
    DeclareStmt,
    Expr,
    Func,
    FuncCallExpr,
    FuncCallStmt,
    IdentExpr,
    IfStmt,
    InputStmt,
    OutputStmt,
    Program,
    Stmt,
    UnaryExpr,
    WhileStmt,
)
from minilang.symbols import SymbolInfo, SymbolKind, SymbolTableManager


class Problem(enum.Enum):
    """The kinds of mistake the analyzer reports."""

    REDEFINED = "{name} is already declared in this scope"
    UNDECLARED = "{name} is not declared"
    UNDEFINED_FUNCTION = "function {name} is not defined"
    NOT_IN_SCOPE = "{name} does not exist in the current scope"


@dataclass(frozen=True)
class Diagnostic:
    """One reported problem and the name it concerns."""

    problem: Problem
    name: str

    def __str__(self) -> str:
        return self.problem.value.format(name=self.name)


class SemanticAnalyzer:
    """Walks a program and collects every semantic problem found in it."""

    def __init__(self) -> None:
        self._symbols = SymbolTableManager()
        self._diagnostics: list[Diagnostic] = []

    def analyze(self, program: Program) -> list[Diagnostic]:
        """Check ``program`` and return the problems found, in order."""
        self._symbols = SymbolTableManager()
        self._diagnostics = []
        with self._symbols.scope():
            self._analyze_program(program)
        return list(self._diagnostics)

    def _report(self, problem: Problem, name: str) -> None:
        self._diagnostics.append(Diagnostic(problem, name))

    def _analyze_program(self, program: Program) -> None:
        prog_name = program.name.ident
        self._symbols.declare(prog_name, SymbolInfo(SymbolKind.PROGRAM, prog_name))
        # All functions are declared first so that bodies may call any of them.
        for func in program.functions:
            name = func.name.ident
            self._symbols.declare(name, SymbolInfo(SymbolKind.FUNCTION, name))
        for func in program.functions:
            self._analyze_func(func)
        for stmt in program.main_body.stmts:
            self._analyze_stmt(stmt)

    def _analyze_func(self, func: Func) -> None:
        with self._symbols.scope():
            if func.params is not None:
                for param in func.params.params:
                    self._symbols.declare(
                        param.ident, SymbolInfo(SymbolKind.INT, param.ident)
                    )
            for stmt in func.stmts.stmts:
                self._analyze_stmt(stmt)
            self._analyze_expr(func.return_value)

    def _analyze_stmt(self, stmt: Stmt) -> None:
        match stmt:
            case DeclareStmt(name=name, expr=expr):
                if self._symbols.lookup_inplace(name.ident) is not None:
                    self._report(Problem.REDEFINED, name.ident)
                else:
                    self._symbols.declare(
                        name.ident, SymbolInfo(SymbolKind.INT, name.ident)
                    )
                if expr is not None:
                    self._analyze_expr(expr)
            case AssignStmt(name=name, expr=expr):
                if self._symbols.lookup(name.ident) is None:
                    self._report(Problem.UNDECLARED, name.ident)
                self._analyze_expr(expr)
            case IfStmt(condition=cond, if_body=if_body, else_body=else_body):
                self._analyze_expr(cond.lhs)
                self._analyze_expr(cond.rhs)
                for inner in if_body.stmts:
                    self._analyze_stmt(inner)
                if else_body is not None:
                    for inner in else_body.stmts:
                        self._analyze_stmt(inner)
            case WhileStmt(condition=cond, loop_body=body):
                self._analyze_expr(cond.lhs)
                self._analyze_expr(cond.rhs)
                for inner in body.stmts:
                    self._analyze_stmt(inner)
            case FuncCallStmt(name=name, args=args):
                self._analyze_call(name, args)
            case InputStmt(idents=idents):
                for ident in idents:
                    if self._symbols.lookup(ident.ident) is None:
                        self._report(Problem.UNDECLARED, ident.ident)
            case OutputStmt(idents=exprs):
                for expr in exprs:
                    self._analyze_expr(expr)

    def _analyze_call(self, name: IdentExpr, args) -> None:
        if self._symbols.lookup(name.ident) is None:
            self._report(Problem.UNDEFINED_FUNCTION, name.ident)
        if args is not None:
            for arg in args.args:
                self._analyze_expr(arg)

    def _analyze_expr(self, expr: Expr) -> None:
        match expr:
            case IdentExpr(ident=ident):
                if self._symbols.lookup_inplace(ident) is None:
                    self._report(Problem.NOT_IN_SCOPE, ident)
            case BinaryExpr(lhs=lhs, rhs=rhs):
                self._analyze_expr(lhs)
                self._analyze_expr(rhs)
            case UnaryExpr(rhs=rhs):
                self._analyze_expr(rhs)
            case FuncCallExpr(name=name, args=args):
                self._analyze_call(name, args)