"""Syntax tree of a parsed program."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


def _freeze(instance: object, *names: str) -> None:
    for name in names:
        value = getattr(instance, name)
        if value is not None and not isinstance(value, tuple):
            object.__setattr__(instance, name, tuple(value))


class PrimitiveType(Enum):
    """A built-in type."""

    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"
    BOOL = "bool"
    CHAR = "char"
    STRING = "String"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomType:
    """A type named by the program, such as a struct."""

    name: str

    def __str__(self) -> str:
        return self.name


Type = Union[PrimitiveType, CustomType]


class BinaryOp(Enum):
    """Operators taking two operands."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    AND = "&&"
    OR = "||"


class UnaryOp(Enum):
    """Operators taking one operand."""

    NEG = "-"
    NOT = "!"


@dataclass(frozen=True)
class IntLit:
    value: int


@dataclass(frozen=True)
class FloatLit:
    value: float


@dataclass(frozen=True)
class StringLit:
    value: str


@dataclass(frozen=True)
class CharLit:
    value: str


@dataclass(frozen=True)
class BoolLit:
    value: bool


@dataclass(frozen=True)
class Ident:
    name: str


@dataclass(frozen=True)
class Binary:
    op: BinaryOp
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Unary:
    op: UnaryOp
    expr: "Expression"


@dataclass(frozen=True)
class Call:
    func: "Expression"
    args: Tuple["Expression", ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "args")


Expression = Union[IntLit, FloatLit, StringLit, CharLit, BoolLit, Ident, Binary, Unary, Call]


@dataclass(frozen=True)
class LetStmt:
    name: str
    mutable: bool
    ty: Optional[Type]
    value: Expression


@dataclass(frozen=True)
class ReturnStmt:
    value: Optional[Expression] = None


@dataclass(frozen=True)
class ExprStmt:
    expr: Expression


@dataclass(frozen=True)
class WhileStmt:
    condition: Expression
    body: Tuple["Statement", ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "body")


@dataclass(frozen=True)
class IfStmt:
    condition: Expression
    then_body: Tuple["Statement", ...] = ()
    else_body: Optional[Tuple["Statement", ...]] = None

    def __post_init__(self) -> None:
        _freeze(self, "then_body", "else_body")


Statement = Union[LetStmt, ReturnStmt, ExprStmt, WhileStmt, IfStmt]


@dataclass(frozen=True)
class Param:
    name: str
    ty: Type


@dataclass(frozen=True)
class Field:
    name: str
    ty: Type


@dataclass(frozen=True)
class Function:
    name: str
    params: Tuple[Param, ...] = ()
    return_type: Optional[Type] = None
    body: Tuple[Statement, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "params", "body")


@dataclass(frozen=True)
class Struct:
    name: str
    fields: Tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "fields")


Item = Union[Function, Struct]


@dataclass(frozen=True)
class Program:
    """A whole program: its functions and structs in source order."""

    items: Tuple[Item, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "items")