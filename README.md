# blaze

A parser and semantic passes for Blaze, a small statically typed language,
together with the runtime library that compiled programs use.

## What it contains

### Parsing

`blaze.parser` turns a sequence of `Token`s into a `Program`. The `Program`
is built from the frozen node classes in `blaze.syntax`.

- A `Token` holds a `TokenType`, an optional `value` and a `line` and
  `column`. The `value` is used by identifiers and literals.
- If the sequence does not end with an `EOF` token, the parser adds one.
- A `Program` holds `Function` and `Struct` items.
- The statements are `LetStmt`, `ReturnStmt`, `ExprStmt`, `WhileStmt` and
  `IfStmt`.
- Expression precedence, from loosest to tightest: `||`, `&&`, equality,
  comparison, `+ -`, `* / %`, unary `- !`, calls.
- Syntax errors raise `ParseError`, a subclass of `CompileError`. It carries
  `message`, `line` and `column`.

### Semantic passes

These work on a `Program`. Every error they raise is a subclass of
`blaze.symbol_table.SemanticError`.

- **`blaze.symbol_table.SymbolTable`** builds nested scopes. It declares
  struct names, function parameters and `let` bindings that carry a type.
  Redefining a name in the same scope raises `SemanticError`. It offers
  `lookup_variable` and `lookup_function`.
- **`blaze.scope_resolver.ScopeResolver`** walks the program with a stack of
  scopes. It raises `SemanticError` for an identifier that is used in an
  expression statement but was never declared.
  - `add_import(path)` records an imported path.
  - `is_imported` and `get_import_path` query the recorded imports.
- **`blaze.lifetime_analyzer.LifetimeAnalyzer`** gives each `let` binding a
  lifetime that spans its statement.
  - `add_outlives_relation(longer, shorter)` records that one lifetime must
    outlive another.
  - `check_lifetime_validity()` raises `SemanticError` when one of these
    relations is broken.
- **`blaze.type_checker.TypeChecker`** infers the types of expressions and
  unifies types.
  - Named types act as type variables. Unifying one records a
    `Substitution`.
  - Failures raise `TypeCheckError`. Its `kind` is one of `"mismatch"`,
    `"undefined_variable"`, `"not_callable"`, `"arg_count_mismatch"` or
    `"infinite_type"`.
- **`blaze.borrow_checker.BorrowChecker`** builds a control-flow graph of each
  function body. It computes dominators and runs a loan dataflow analysis over
  the graph, and raises `BorrowError` when two loans are live in the same
  block.
  - `blocks()` returns the graph's `BasicBlock`s.
  - `edges()` returns the edges as `(source, target, ControlFlowEdge)`
    tuples.

### Runtime support

- `blaze.span.Span` is a half-open range of offsets into source text.
- `blaze.source_map.SourceMap` maps offsets to 1-based line and column pairs,
  and returns the text of a line.
- `blaze.panic` raises `BlazePanic` through four helpers:
  - `blaze_panic`
  - `panic_bounds_check`
  - `panic_divide_by_zero`
  - `panic_overflow`
- `blaze.mathops` gives IEEE-style results where Python's `math` would raise.
  For example, `sqrt(-1.0)` is NaN and `ln(0.0)` is `-inf`. It also has
  `round_half_away` and the constants `PI`, `E` and `TAU`.
- `blaze.ordering` provides `Ordering` and `compare(a, b)`.

### Collections

- `blaze.vector.BlazeVec` is a growable sequence.
  - Its capacity starts at one and doubles when the vector is full.
  - `binary_search` returns a `SearchResult(found, index)`.
- `blaze.hashmap.BlazeHashMap` is a separately chained hash map.
  - It starts with 16 buckets and doubles the bucket count at a load factor
    of 0.75.
  - Keys are hashed with `default_hash`, which computes
    `state = state * 31 + byte` in 64-bit arithmetic.
  - Keys may be integers, strings, bytes, or objects with an `as_bytes()`
    method.
- `blaze.hashset.BlazeHashSet` is a set built on `BlazeHashMap`.
- `blaze.linked_list.LinkedList` is a singly linked list with push and pop at
  the front.
- `blaze.blaze_string.BlazeString` is a UTF-8 string kept as bytes, so its
  length is counted in bytes.

## Installing

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from blaze.parser import Token, TokenType, parse

tokens = [
    Token(TokenType.FN, None, 1, 1),
    Token(TokenType.IDENT, "main", 1, 4),
    Token(TokenType.LEFT_PAREN, None, 1, 8),
    Token(TokenType.RIGHT_PAREN, None, 1, 9),
    Token(TokenType.LEFT_BRACE, None, 1, 11),
    Token(TokenType.RIGHT_BRACE, None, 1, 12),
]
program = parse(tokens)
print(program.items[0].name)  # main
```

## What it does not do

- There is no lexer. Callers build the `Token` list themselves.
- There is no code generation and no way to run a program.
- There is no command-line tool.
- The semantic passes are separate objects. Nothing chains them into a single
  compile step.