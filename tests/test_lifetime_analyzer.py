import pytest

from blaze.lifetime_analyzer import LifetimeAnalyzer
from blaze.symbol_table import SemanticError
from blaze.syntax import (
    ExprStmt,
    Function,
    Ident,
    IntLit,
    LetStmt,
    PrimitiveType,
    Program,
    WhileStmt,
)


def _analyzed(*body):
    analyzer = LifetimeAnalyzer()
    analyzer.analyze(Program((Function("main", (), None, tuple(body)),)))
    return analyzer


def _two_bindings():
    return _analyzed(
        LetStmt("a", False, PrimitiveType.I32, IntLit(1)),
        LetStmt("b", True, None, IntLit(2)),
    )


def test_each_binding_spans_its_statement():
    analyzer = _two_bindings()
    a = analyzer.get_lifetime("a")
    b = analyzer.get_lifetime("b")
    assert (a.scope.start, a.scope.end) == (0, 1)
    assert (b.scope.start, b.scope.end) == (1, 2)
    assert a.name == "a" and b.name == "b"
    assert a.id != b.id
    assert a.outlives == set() and b.scope.variables == set()


def test_positions_count_non_binding_statements():
    analyzer = _analyzed(ExprStmt(Ident("x")), LetStmt("c", False, None, IntLit(0)))
    assert analyzer.get_lifetime("c").scope.start == 1


def test_unknown_variable_has_no_lifetime():
    assert _two_bindings().get_lifetime("zzz") is None


def test_bindings_inside_loops_get_no_lifetime():
    analyzer = _analyzed(WhileStmt(IntLit(1), (LetStmt("inner", False, None, IntLit(0)),)))
    assert analyzer.get_lifetime("inner") is None


def test_rebinding_refers_to_latest_lifetime():
    analyzer = _analyzed(
        LetStmt("x", False, None, IntLit(1)),
        LetStmt("x", False, None, IntLit(2)),
    )
    assert analyzer.get_lifetime("x").scope.start == 1


def test_valid_outlives_relation_passes():
    analyzer = _two_bindings()
    a = analyzer.get_lifetime("a")
    b = analyzer.get_lifetime("b")
    analyzer.add_outlives_relation(b.id, a.id)
    assert analyzer.get_lifetime("b").outlives == {a.id}
    assert analyzer.check_lifetime_validity() is None


def test_outlives_ending_before_start_is_rejected():
    analyzer = _two_bindings()
    a = analyzer.get_lifetime("a")
    b = analyzer.get_lifetime("b")
    analyzer.add_outlives_relation(a.id, b.id)
    with pytest.raises(SemanticError, match="Lifetime 'a' outlives 'b' but ends before it starts"):
        analyzer.check_lifetime_validity()


def test_relation_from_unknown_lifetime_is_ignored():
    analyzer = _two_bindings()
    a = analyzer.get_lifetime("a")
    analyzer.add_outlives_relation(999, a.id)
    assert all(
        not analyzer.get_lifetime(name).outlives for name in ("a", "b")
    )


def test_relation_to_unknown_lifetime_is_not_checked():
    analyzer = _two_bindings()
    a = analyzer.get_lifetime("a")
    analyzer.add_outlives_relation(a.id, 999)
    assert analyzer.check_lifetime_validity() is None
    assert 999 in analyzer.get_lifetime("a").outlives