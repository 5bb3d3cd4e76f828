import pytest

from minilang.symbols import SymbolInfo, SymbolKind, SymbolTable, SymbolTableManager


def test_table_declare_and_lookup():
    table = SymbolTable()
    info = SymbolInfo(SymbolKind.INT, "x")
    assert table.declare("x", info) is True
    assert table.lookup("x") is info
    assert table.lookup("y") is None


def test_table_duplicate_keeps_first():
    table = SymbolTable()
    first = SymbolInfo(SymbolKind.INT, "x")
    second = SymbolInfo(SymbolKind.FUNCTION, "x")
    assert table.declare("x", first)
    assert table.declare("x", second) is False
    assert table.lookup("x") is first
    assert len(table) == 1


def test_symbol_info_defaults_are_independent():
    a = SymbolInfo(SymbolKind.ARRAY, "a")
    b = SymbolInfo(SymbolKind.ARRAY, "b")
    a.dimensions.append(4)
    assert b.dimensions == []
    assert a.param_types == []
    assert a.value is None


def test_manager_lookup_walks_outward():
    manager = SymbolTableManager()
    manager.enter_scope()
    outer = SymbolInfo(SymbolKind.PROGRAM, "prog")
    manager.declare("prog", outer)
    manager.enter_scope()
    assert manager.lookup("prog") is outer
    assert manager.lookup_inplace("prog") is None


def test_manager_shadowing():
    manager = SymbolTableManager()
    manager.enter_scope()
    outer = SymbolInfo(SymbolKind.INT, "v")
    manager.declare("v", outer)
    manager.enter_scope()
    inner = SymbolInfo(SymbolKind.INT, "v")
    assert manager.declare("v", inner) is True
    assert manager.lookup("v") is inner
    manager.exit_scope()
    assert manager.lookup("v") is outer


def test_manager_duplicate_in_same_scope():
    manager = SymbolTableManager()
    manager.enter_scope()
    assert manager.declare("a", SymbolInfo(SymbolKind.INT, "a"))
    assert manager.declare("a", SymbolInfo(SymbolKind.INT, "a")) is False


def test_exit_scope_on_empty_is_harmless():
    manager = SymbolTableManager()
    manager.exit_scope()
    assert manager.depth == 0
    assert manager.lookup("x") is None


def test_scope_context_manager():
    manager = SymbolTableManager()
    with manager.scope() as table:
        manager.declare("x", SymbolInfo(SymbolKind.INT, "x"))
        assert "x" in table
        assert manager.depth == 1
    assert manager.depth == 0
    assert manager.lookup("x") is None


def test_scope_closed_after_exception():
    manager = SymbolTableManager()
    with pytest.raises(ValueError):
        with manager.scope():
            raise ValueError("boom")
    assert manager.depth == 0


def test_declare_without_scope_raises():
    manager = SymbolTableManager()
    with pytest.raises(RuntimeError):
        manager.declare("x", SymbolInfo(SymbolKind.INT, "x"))
    with pytest.raises(RuntimeError):
        manager.lookup_inplace("x")