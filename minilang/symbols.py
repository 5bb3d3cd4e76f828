"""Scoped symbol tables used by semantic analysis."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any


class SymbolKind(enum.Enum):
    """What a name in the symbol table refers to."""

    INT = enum.auto()
    ARRAY = enum.auto()
    FUNCTION = enum.auto()
    PROGRAM = enum.auto()


@dataclass
class SymbolInfo:
    """Everything recorded about one declared name."""

    kind: SymbolKind
    name: str
    dimensions: list[int] = field(default_factory=list)
    param_types: list[SymbolKind] = field(default_factory=list)
    value: Any = None


class SymbolTable:
    """The symbols declared in a single scope."""

    def __init__(self) -> None:
        self._table: dict[str, SymbolInfo] = {}

    def declare(self, name: str, info: SymbolInfo) -> bool:
        """Add ``name``; return False and keep the old entry if it exists."""
        if name in self._table:
            return False
        self._table[name] = info
        return True

    def lookup(self, name: str) -> SymbolInfo | None:
        """Return the entry for ``name`` or None."""
        return self._table.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)


class SymbolTableManager:
    """A stack of scopes, innermost last."""

    def __init__(self) -> None:
        self._scopes: list[SymbolTable] = []

    @property
    def depth(self) -> int:
        """Number of open scopes."""
        return len(self._scopes)

    def enter_scope(self) -> None:
        """Open a new innermost scope."""
        self._scopes.append(SymbolTable())

    def exit_scope(self) -> None:
        """Close the innermost scope; does nothing if none is open."""
        if self._scopes:
            self._scopes.pop()

    @contextmanager
    def scope(self) -> Iterator[SymbolTable]:
        """Open a scope for the duration of a ``with`` block."""
        self.enter_scope()
        try:
            yield self._scopes[-1]
        finally:
            self.exit_scope()

    def _current(self) -> SymbolTable:
        if not self._scopes:
            raise RuntimeError("no scope is open")
        return self._scopes[-1]

    def declare(self, name: str, info: SymbolInfo) -> bool:
        """Declare ``name`` in the innermost scope."""
        return self._current().declare(name, info)

    def lookup(self, name: str) -> SymbolInfo | None:
        """Find ``name`` in the innermost scope that has it."""
        for table in reversed(self._scopes):
            info = table.lookup(name)
            if info is not None:
                return info
        return None

    def lookup_inplace(self, name: str) -> SymbolInfo | None:
        """Find ``name`` in the innermost scope only."""
        return self._current().lookup(name)