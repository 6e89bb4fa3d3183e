"""Lifetimes of local bindings and the outlives relations between them."""

from __future__ import annotations

from dataclasses import dataclass, field

from blaze.symbol_table import SemanticError
from blaze.syntax import Function, LetStmt, Program


@dataclass
class LifetimeScope:
    """A range of statement positions and the variables declared in it."""

    start: int
    end: int
    variables: set[str] = field(default_factory=set)


@dataclass
class Lifetime:
    """A named lifetime, where it lives, and the lifetimes it must outlive."""

    id: int
    name: str
    scope: LifetimeScope
    outlives: set[int] = field(default_factory=set)


class LifetimeAnalyzer:
    """Gives each binding in a function body a lifetime spanning its statement."""

    def __init__(self) -> None:
        self._lifetimes: dict[int, Lifetime] = {}
        self._variable_lifetimes: dict[str, int] = {}
        self._next_id = 0

    def analyze(self, program: Program) -> None:
        """Create lifetimes for the bindings of every function."""
        for item in program.items:
            if isinstance(item, Function):
                self._analyze_function(item)

    def _analyze_function(self, func: Function) -> None:
        for position, stmt in enumerate(func.body):
            if isinstance(stmt, LetStmt):
                lifetime = self._create_lifetime(stmt.name, position)
                self._variable_lifetimes[stmt.name] = lifetime.id

    def _create_lifetime(self, name: str, start: int) -> Lifetime:
        lifetime = Lifetime(self._next_id, name, LifetimeScope(start, start + 1))
        self._next_id += 1
        self._lifetimes[lifetime.id] = lifetime
        return lifetime

    def get_lifetime(self, variable: str) -> Lifetime | None:
        """Return the lifetime of the most recent binding of ``variable``."""
        lifetime_id = self._variable_lifetimes.get(variable)
        return None if lifetime_id is None else self._lifetimes.get(lifetime_id)

    def add_outlives_relation(self, longer: int, shorter: int) -> None:
        """Require lifetime ``longer`` to outlive ``shorter``; unknown ids are ignored."""
        lifetime = self._lifetimes.get(longer)
        if lifetime is not None:
            lifetime.outlives.add(shorter)

    def check_lifetime_validity(self) -> None:
        """Raise SemanticError when a lifetime ends before one it must outlive starts."""
        for lifetime in self._lifetimes.values():
            for other_id in lifetime.outlives:
                other = self._lifetimes.get(other_id)
                if other is not None and lifetime.scope.end <= other.scope.start:
                    raise SemanticError(
                        f"Lifetime '{lifetime.name}' outlives '{other.name}' "
                        "but ends before it starts"
                    )