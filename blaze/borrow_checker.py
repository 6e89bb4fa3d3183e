"""Control-flow graphs of function bodies and a dataflow analysis of live loans."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations
from typing import Iterable, Optional

from blaze.symbol_table import SemanticError, SymbolTable
from blaze.syntax import (
    ExprStmt,
    Function,
    IfStmt,
    LetStmt,
    Program,
    Statement,
    WhileStmt,
)


class BorrowError(SemanticError):
    """Two loans that may not be live at the same time are."""

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Conflicting borrows: {first} and {second}")


class ControlFlowEdge(Enum):
    """Why control may pass from one block to another."""

    TRUE = "true"
    FALSE = "false"
    UNCONDITIONAL = "unconditional"
    LOOP = "loop"


@dataclass
class BasicBlock:
    """A run of statements with the results of the analysis attached."""

    id: int
    statements: list[Statement] = field(default_factory=list)
    predecessors: list[int] = field(default_factory=list)
    successors: list[int] = field(default_factory=list)
    gen: set[int] = field(default_factory=set)
    kill: set[int] = field(default_factory=set)
    loans: set[int] = field(default_factory=set)
    dominator: Optional[int] = None


class BorrowChecker:
    """Builds a control-flow graph of every function and checks its loans.

    Each call to :meth:`check` starts from an empty graph.
    """

    def __init__(self) -> None:
        self._blocks: list[BasicBlock] = []
        self._edges: list[tuple[int, int, ControlFlowEdge]] = []
        self._next_loan_id = 0

    def check(self, program: Program, symbol_table: Optional[SymbolTable] = None) -> None:
        """Analyse the program; raise BorrowError on conflicting loans."""
        self._blocks = []
        self._edges = []
        self._next_loan_id = 0
        for item in program.items:
            if isinstance(item, Function):
                self._build_function_cfg(item)
        self._compute_dominators()
        self._compute_gen_kill_sets()
        self._dataflow_analysis()
        self._check_conflicts()

    def blocks(self) -> tuple[BasicBlock, ...]:
        """The blocks of the last graph built, indexed by their ids."""
        return tuple(self._blocks)

    def edges(self) -> tuple[tuple[int, int, ControlFlowEdge], ...]:
        """The edges of the last graph built as (source, target, kind)."""
        return tuple(self._edges)

    # Graph construction

    def _add_block(self, statements: Iterable[Statement]) -> int:
        block = BasicBlock(len(self._blocks), list(statements))
        self._blocks.append(block)
        return block.id

    def _add_edge(self, source: int, target: int, kind: ControlFlowEdge) -> None:
        self._edges.append((source, target, kind))
        self._blocks[source].successors.append(target)
        self._blocks[target].predecessors.append(source)

    def _add_body(self, statements: Iterable[Statement]) -> Optional[int]:
        statements = list(statements)
        return self._add_block(statements) if statements else None

    def _build_function_cfg(self, func: Function) -> None:
        pending: list[Statement] = []
        for stmt in func.body:
            if not isinstance(stmt, (WhileStmt, IfStmt)):
                pending.append(stmt)
                continue
            if pending:
                self._add_block(pending)
                pending = []
            condition = self._add_block([ExprStmt(stmt.condition)])
            if isinstance(stmt, WhileStmt):
                body = self._add_body(stmt.body)
                exit_block = self._add_block([])
                if body is not None:
                    self._add_edge(condition, body, ControlFlowEdge.TRUE)
                self._add_edge(condition, exit_block, ControlFlowEdge.FALSE)
                if body is not None:
                    self._add_edge(body, condition, ControlFlowEdge.LOOP)
            else:
                then_block = self._add_body(stmt.then_body)
                else_block = (
                    self._add_body(stmt.else_body) if stmt.else_body is not None else None
                )
                exit_block = self._add_block([])
                if then_block is not None:
                    self._add_edge(condition, then_block, ControlFlowEdge.TRUE)
                if else_block is not None:
                    self._add_edge(condition, else_block, ControlFlowEdge.FALSE)
                else:
                    self._add_edge(condition, exit_block, ControlFlowEdge.FALSE)
        if pending:
            self._add_block(pending)

    # Analysis

    def _compute_dominators(self) -> None:
        if not self._blocks:
            return
        root = self._blocks[0].id
        reachable = {root}
        stack = [root]
        while stack:
            for succ in self._blocks[stack.pop()].successors:
                if succ not in reachable:
                    reachable.add(succ)
                    stack.append(succ)

        dominators: dict[int, set[int]] = {
            node: ({root} if node == root else set(reachable)) for node in reachable
        }
        changed = True
        while changed:
            changed = False
            for node in sorted(reachable - {root}):
                preds = [p for p in self._blocks[node].predecessors if p in reachable]
                common = set.intersection(*(dominators[p] for p in preds)) if preds else set()
                updated = common | {node}
                if updated != dominators[node]:
                    dominators[node] = updated
                    changed = True

        for node in reachable - {root}:
            strict = dominators[node] - {node}
            self._blocks[node].dominator = max(strict, key=lambda d: len(dominators[d]))

    def _compute_gen_kill_sets(self) -> None:
        # Expressions of this language take no references, so no statement
        # generates a loan; a mutable binding kills a fresh loan id.
        for block in self._blocks:
            for stmt in block.statements:
                if isinstance(stmt, LetStmt) and stmt.mutable:
                    block.kill.add(self._next_loan_id)
                    self._next_loan_id += 1

    def _dataflow_analysis(self) -> None:
        state: dict[int, set[int]] = {}
        worklist = deque(block.id for block in self._blocks)
        while worklist:
            node = worklist.popleft()
            block = self._blocks[node]
            in_set: set[int] = set()
            for pred in block.predecessors:
                in_set |= state.get(pred, set())
            out_set = (in_set - block.kill) | block.gen
            if state.get(node) != out_set:
                state[node] = out_set
                worklist.extend(block.successors)
        for node, loans in state.items():
            self._blocks[node].loans = set(loans)

    def _check_conflicts(self) -> None:
        for block in self._blocks:
            for first, second in combinations(sorted(block.loans), 2):
                if first != second:
                    raise BorrowError(f"loan_{first}", f"loan_{second}")