"""Nested scopes of declared names and their types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from blaze.syntax import CustomType, Function, LetStmt, Program, Statement, Struct, Type


class SemanticError(Exception):
    """An error found while analysing a parsed program."""


@dataclass
class Symbol:
    """A declared name with its type and the scope it was declared in."""

    name: str
    ty: Type
    mutable: bool
    scope_level: int


@dataclass
class Scope:
    """A set of symbols and the index of the scope that encloses it."""

    level: int
    symbols: dict[str, Symbol] = field(default_factory=dict)
    parent: Optional[int] = None


class SymbolTable:
    """Scopes created while walking a program, starting with one global scope."""

    def __init__(self) -> None:
        self._scopes: list[Scope] = [Scope(level=0)]
        self._current = 0

    @property
    def current_scope(self) -> int:
        """Index of the scope new symbols are added to."""
        return self._current

    @property
    def scopes(self) -> tuple[Scope, ...]:
        """Every scope created so far, in creation order."""
        return tuple(self._scopes)

    def analyze(self, program: Program) -> None:
        """Declare the program's structs, parameters and typed bindings."""
        for item in program.items:
            if isinstance(item, Function):
                self._analyze_function(item)
            elif isinstance(item, Struct):
                self.add_symbol(item.name, CustomType(item.name), False)

    def _analyze_function(self, func: Function) -> None:
        self.enter_scope()
        for param in func.params:
            self.add_symbol(param.name, param.ty, False)
        for stmt in func.body:
            self._analyze_statement(stmt)
        self.exit_scope()

    def _analyze_statement(self, stmt: Statement) -> None:
        if isinstance(stmt, LetStmt) and stmt.ty is not None:
            self.add_symbol(stmt.name, stmt.ty, stmt.mutable)

    def enter_scope(self) -> None:
        """Open a new scope nested in the current one."""
        self._scopes.append(Scope(level=len(self._scopes), parent=self._current))
        self._current = len(self._scopes) - 1

    def exit_scope(self) -> None:
        """Return to the enclosing scope; the global scope is never left."""
        parent = self._scopes[self._current].parent
        if parent is not None:
            self._current = parent

    def add_symbol(self, name: str, ty: Type, mutable: bool) -> None:
        """Declare ``name`` in the current scope."""
        scope = self._scopes[self._current]
        if name in scope.symbols:
            raise SemanticError(f"Symbol '{name}' already defined in this scope")
        scope.symbols[name] = Symbol(name, ty, mutable, self._current)

    def lookup_variable(self, name: str) -> Symbol | None:
        """Find ``name`` in the current scope or the scopes enclosing it."""
        index: Optional[int] = self._current
        while index is not None:
            scope = self._scopes[index]
            if name in scope.symbols:
                return scope.symbols[name]
            index = scope.parent
        return None

    def lookup_function(self, name: str) -> Symbol | None:
        """Find ``name`` in any scope, searching in creation order."""
        for scope in self._scopes:
            if name in scope.symbols:
                return scope.symbols[name]
        return None