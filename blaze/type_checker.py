"""Type checking of expressions and statements by unification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from blaze.symbol_table import SemanticError, SymbolTable
from blaze.syntax import (
    Binary,
    BinaryOp,
    BoolLit,
    Call,
    CharLit,
    CustomType,
    Expression,
    ExprStmt,
    FloatLit,
    Function,
    Ident,
    IfStmt,
    IntLit,
    LetStmt,
    PrimitiveType,
    Program,
    ReturnStmt,
    Statement,
    StringLit,
    Unary,
    UnaryOp,
    WhileStmt,
)


@dataclass(frozen=True)
class FunctionType:
    """The type of a callable: its parameter types and its return type."""

    params: Tuple["CheckedType", ...]
    return_type: "CheckedType"

    def __post_init__(self) -> None:
        if not isinstance(self.params, tuple):
            object.__setattr__(self, "params", tuple(self.params))

    def __str__(self) -> str:
        params = ", ".join(str(param) for param in self.params)
        return f"fn({params}) -> {self.return_type}"


CheckedType = Union[PrimitiveType, CustomType, FunctionType]

_ARITHMETIC = {BinaryOp.ADD, BinaryOp.SUB, BinaryOp.MUL, BinaryOp.DIV, BinaryOp.MOD}
_COMPARISON = {BinaryOp.EQ, BinaryOp.NE, BinaryOp.LT, BinaryOp.LE, BinaryOp.GT, BinaryOp.GE}
_LOGICAL = {BinaryOp.AND, BinaryOp.OR}

_LITERAL_TYPES = {
    IntLit: PrimitiveType.I32,
    FloatLit: PrimitiveType.F64,
    StringLit: PrimitiveType.STRING,
    CharLit: PrimitiveType.CHAR,
    BoolLit: PrimitiveType.BOOL,
}


class TypeCheckError(SemanticError):
    """A type error; ``kind`` names which check failed."""

    def __init__(
        self,
        kind: str,
        message: str,
        *,
        expected: Optional[str] = None,
        found: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.expected = expected
        self.found = found
        self.name = name
        super().__init__(message)


def _mismatch(expected: CheckedType, found: CheckedType) -> TypeCheckError:
    return TypeCheckError(
        "mismatch",
        f"Type mismatch: expected {expected}, found {found}",
        expected=str(expected),
        found=str(found),
    )


@dataclass(frozen=True)
class TypeVar:
    """A type variable, identified by its name."""

    id: int
    name: str


@dataclass(frozen=True)
class Substitution:
    """A binding of a type variable to a type, recorded by unification."""

    var: TypeVar
    ty: CheckedType


class TypeChecker:
    """Infers expression types and unifies them against what context demands.

    Named types act as type variables: unifying one with another type records
    a substitution instead of failing.
    """

    def __init__(self) -> None:
        self._next_type_var = 0
        self._substitutions: list[Substitution] = []
        self._type_cache: dict[Expression, CheckedType] = {}

    @property
    def substitutions(self) -> tuple[Substitution, ...]:
        """Substitutions recorded so far, in the order they were made."""
        return tuple(self._substitutions)

    def check(self, program: Program, symbol_table: SymbolTable) -> None:
        """Check every function body of the program."""
        for item in program.items:
            if isinstance(item, Function):
                for stmt in item.body:
                    self._check_statement(stmt, symbol_table)

    def _check_statements(self, body: tuple[Statement, ...], symbol_table: SymbolTable) -> None:
        for stmt in body:
            self._check_statement(stmt, symbol_table)

    def _check_statement(self, stmt: Statement, symbol_table: SymbolTable) -> None:
        if isinstance(stmt, LetStmt):
            value_type = self.check_expression(stmt.value, symbol_table)
            if stmt.ty is not None:
                self.unify(stmt.ty, value_type)
        elif isinstance(stmt, ExprStmt):
            self.check_expression(stmt.expr, symbol_table)
        elif isinstance(stmt, ReturnStmt):
            if stmt.value is not None:
                self.check_expression(stmt.value, symbol_table)
        elif isinstance(stmt, WhileStmt):
            self._check_condition(stmt.condition, symbol_table)
            self._check_statements(stmt.body, symbol_table)
        elif isinstance(stmt, IfStmt):
            self._check_condition(stmt.condition, symbol_table)
            self._check_statements(stmt.then_body, symbol_table)
            if stmt.else_body is not None:
                self._check_statements(stmt.else_body, symbol_table)

    def _check_condition(self, condition: Expression, symbol_table: SymbolTable) -> None:
        self.unify(PrimitiveType.BOOL, self.check_expression(condition, symbol_table))

    def check_expression(self, expr: Expression, symbol_table: SymbolTable) -> CheckedType:
        """Return the type of ``expr``; results are cached per expression."""
        cached = self._type_cache.get(expr)
        if cached is not None:
            return cached
        expr_type = self._infer(expr, symbol_table)
        self._type_cache[expr] = expr_type
        return expr_type

    def _infer(self, expr: Expression, symbol_table: SymbolTable) -> CheckedType:
        literal_type = _LITERAL_TYPES.get(type(expr))
        if literal_type is not None:
            return literal_type
        if isinstance(expr, Ident):
            symbol = symbol_table.lookup_variable(expr.name)
            if symbol is None:
                raise TypeCheckError(
                    "undefined_variable", f"Undefined variable: {expr.name}", name=expr.name
                )
            return symbol.ty
        if isinstance(expr, Binary):
            left = self.check_expression(expr.left, symbol_table)
            right = self.check_expression(expr.right, symbol_table)
            return self._check_binary(left, expr.op, right)
        if isinstance(expr, Unary):
            operand = self.check_expression(expr.expr, symbol_table)
            return self._check_unary(expr.op, operand)
        if isinstance(expr, Call):
            callee = self.check_expression(expr.func, symbol_table)
            arg_types = [self.check_expression(arg, symbol_table) for arg in expr.args]
            if not isinstance(callee, FunctionType):
                raise TypeCheckError("not_callable", f"Type {callee} is not callable")
            if len(callee.params) != len(arg_types):
                raise TypeCheckError(
                    "arg_count_mismatch",
                    f"Expected {len(callee.params)} arguments, found {len(arg_types)}",
                )
            for param_type, arg_type in zip(callee.params, arg_types):
                self.unify(param_type, arg_type)
            return callee.return_type
        raise TypeError(f"not an expression: {expr!r}")

    def _check_binary(self, left: CheckedType, op: BinaryOp, right: CheckedType) -> CheckedType:
        if op in _ARITHMETIC:
            self.unify(left, right)
            return left
        if op in _COMPARISON:
            self.unify(left, right)
            return PrimitiveType.BOOL
        if op in _LOGICAL:
            self.unify(left, PrimitiveType.BOOL)
            self.unify(right, PrimitiveType.BOOL)
            return PrimitiveType.BOOL
        raise TypeError(f"unknown binary operator: {op!r}")

    def _check_unary(self, op: UnaryOp, operand: CheckedType) -> CheckedType:
        if op is UnaryOp.NOT:
            self.unify(operand, PrimitiveType.BOOL)
            return PrimitiveType.BOOL
        return operand

    def unify(self, t1: CheckedType, t2: CheckedType) -> None:
        """Make two types agree, recording substitutions for type variables."""
        worklist = [(t1, t2)]
        while worklist:
            first, second = worklist.pop()
            if first == second:
                continue
            if isinstance(first, CustomType):
                var, other = first, second
            elif isinstance(second, CustomType):
                var, other = second, first
            else:
                var = None
            if var is not None:
                type_var = TypeVar(0, var.name)
                if self._occurs(other, type_var):
                    raise TypeCheckError(
                        "infinite_type", f"Type variable {var.name} occurs in {other}"
                    )
                self._substitutions.append(Substitution(type_var, other))
                continue
            if isinstance(first, FunctionType) and isinstance(second, FunctionType):
                if len(first.params) != len(second.params):
                    raise _mismatch(first, second)
                worklist.extend(zip(first.params, second.params))
                worklist.append((first.return_type, second.return_type))
                continue
            raise _mismatch(first, second)

    def _occurs(self, ty: CheckedType, var: TypeVar) -> bool:
        if isinstance(ty, CustomType):
            return ty.name == var.name
        if isinstance(ty, FunctionType):
            return any(self._occurs(param, var) for param in ty.params) or self._occurs(
                ty.return_type, var
            )
        return False

    def fresh_type_var(self) -> CustomType:
        """Return a new type variable named T0, T1, ..."""
        name = f"T{self._next_type_var}"
        self._next_type_var += 1
        return CustomType(name)