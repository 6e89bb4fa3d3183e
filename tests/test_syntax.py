import dataclasses

import pytest

from blaze.syntax import (
    Binary,
    BinaryOp,
    Call,
    CustomType,
    ExprStmt,
    Function,
    Ident,
    IfStmt,
    IntLit,
    Param,
    PrimitiveType,
    Program,
    Struct,
    Field,
    Unary,
    UnaryOp,
    WhileStmt,
)


def test_structural_equality():
    a = Binary(BinaryOp.ADD, IntLit(1), Ident("x"))
    b = Binary(BinaryOp.ADD, IntLit(1), Ident("x"))
    assert a == b
    assert a != Binary(BinaryOp.SUB, IntLit(1), Ident("x"))


def test_nodes_are_immutable():
    node = IntLit(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(node, "value", 4)
    assert node == IntLit(3)
    assert dataclasses.replace(node, value=4) == IntLit(4)


def test_nodes_are_hashable():
    expr = Unary(UnaryOp.NEG, Call(Ident("f"), [IntLit(1)]))
    cache = {expr: "seen"}
    assert cache[Unary(UnaryOp.NEG, Call(Ident("f"), (IntLit(1),)))] == "seen"


def test_sequences_are_stored_as_tuples():
    call = Call(Ident("f"), [IntLit(1), IntLit(2)])
    assert call.args == (IntLit(1), IntLit(2))
    loop = WhileStmt(Ident("c"), [ExprStmt(Ident("x"))])
    assert loop.body == (ExprStmt(Ident("x")),)
    branch = IfStmt(Ident("c"), [], None)
    assert branch.then_body == ()
    assert branch.else_body is None


def test_program_items_compare_in_order():
    f = Function("main", [Param("a", PrimitiveType.I32)], None, [])
    s = Struct("Point", [Field("x", CustomType("Coord"))])
    assert Program([f, s]) == Program((f, s))
    assert Program([f, s]) != Program([s, f])


def test_operator_lookup_by_symbol():
    assert BinaryOp("+") is BinaryOp.ADD
    assert UnaryOp("!") is UnaryOp.NOT
    assert str(CustomType("Point")) == "Point"