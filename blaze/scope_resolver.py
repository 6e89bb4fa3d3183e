"""Checking that every identifier a program uses has been declared."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from blaze.symbol_table import SemanticError
from blaze.syntax import (
    Binary,
    Call,
    CustomType,
    Expression,
    ExprStmt,
    Function,
    Ident,
    LetStmt,
    Program,
    Statement,
    Struct,
    Type,
    Unary,
)


@dataclass(frozen=True)
class ResolvedSymbol:
    """A declared name together with the depth of the scope declaring it."""

    name: str
    ty: Type
    mutable: bool
    scope_depth: int
    is_imported: bool


class ScopeResolver:
    """Walks a program with a stack of scopes and rejects undeclared names."""

    def __init__(self) -> None:
        self._scopes: list[dict[str, ResolvedSymbol]] = [{}]
        self._imports: dict[str, str] = {}

    @property
    def depth(self) -> int:
        """Depth of the innermost open scope; the global scope is 0."""
        return len(self._scopes) - 1

    def resolve(self, program: Program) -> None:
        """Resolve every item of the program in order."""
        for item in program.items:
            if isinstance(item, Function):
                self._resolve_function(item)
            elif isinstance(item, Struct):
                self._add_symbol(item.name, CustomType(item.name), False, False)

    def _resolve_function(self, func: Function) -> None:
        self._enter_scope()
        for param in func.params:
            self._add_symbol(param.name, param.ty, False, False)
        for stmt in func.body:
            self._resolve_statement(stmt)
        self._exit_scope()

    def _resolve_statement(self, stmt: Statement) -> None:
        if isinstance(stmt, LetStmt):
            if stmt.ty is not None:
                self._add_symbol(stmt.name, stmt.ty, stmt.mutable, False)
        elif isinstance(stmt, ExprStmt):
            self._resolve_expression(stmt.expr)

    def _resolve_expression(self, expr: Expression) -> None:
        if isinstance(expr, Ident):
            if self.lookup_symbol(expr.name) is None:
                raise SemanticError(f"Undefined symbol: {expr.name}")
        elif isinstance(expr, Call):
            self._resolve_expression(expr.func)
            for arg in expr.args:
                self._resolve_expression(arg)
        elif isinstance(expr, Binary):
            self._resolve_expression(expr.left)
            self._resolve_expression(expr.right)
        elif isinstance(expr, Unary):
            self._resolve_expression(expr.expr)

    def add_import(self, path: Iterable[str]) -> None:
        """Record an import of ``path``, known by its last component."""
        components = list(path)
        if not components:
            raise SemanticError("Empty use path")
        self._imports[components[-1]] = "::".join(components)

    def _enter_scope(self) -> None:
        self._scopes.append({})

    def _exit_scope(self) -> None:
        if len(self._scopes) > 1:
            self._scopes.pop()

    def _add_symbol(self, name: str, ty: Type, mutable: bool, is_imported: bool) -> None:
        scope = self._scopes[-1]
        if name in scope:
            raise SemanticError(f"Symbol '{name}' already defined in this scope")
        scope[name] = ResolvedSymbol(name, ty, mutable, self.depth, is_imported)

    def lookup_symbol(self, name: str) -> ResolvedSymbol | None:
        """Find ``name`` in the innermost scope that declares it."""
        for scope in reversed(self._scopes):
            if name in scope:
                return scope[name]
        return None

    def is_imported(self, name: str) -> bool:
        """Return True when ``name`` was brought in by an import."""
        return name in self._imports

    def get_import_path(self, name: str) -> str | None:
        """Return the full path an imported name refers to."""
        return self._imports.get(name)