"""Recursive-descent parser turning tokens into a syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Mapping

from blaze.syntax import (
    Binary,
    BinaryOp,
    BoolLit,
    Call,
    CharLit,
    CustomType,
    Expression,
    ExprStmt,
    Field,
    FloatLit,
    Function,
    Ident,
    IfStmt,
    IntLit,
    Item,
    LetStmt,
    Param,
    PrimitiveType,
    Program,
    ReturnStmt,
    Statement,
    StringLit,
    Struct,
    Type,
    Unary,
    UnaryOp,
    WhileStmt,
)


class CompileError(Exception):
    """Base class of errors reported while compiling."""


class ParseError(CompileError):
    """A syntax error at a source position."""

    def __init__(self, message: str, line: int, column: int) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{message} at {line}:{column}")


class TokenType(Enum):
    """Kinds of tokens the parser understands."""

    FN = "Fn"
    STRUCT = "Struct"
    LET = "Let"
    MUT = "Mut"
    RETURN = "Return"
    WHILE = "While"
    IF = "If"
    ELSE = "Else"
    TRUE = "True"
    FALSE = "False"
    I32 = "I32"
    I64 = "I64"
    F32 = "F32"
    F64 = "F64"
    BOOL = "Bool"
    CHAR = "Char"
    STRING = "String"
    IDENT = "Ident"
    INT_LIT = "IntLit"
    FLOAT_LIT = "FloatLit"
    STRING_LIT = "StringLit"
    CHAR_LIT = "CharLit"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    LEFT_BRACE = "LeftBrace"
    RIGHT_BRACE = "RightBrace"
    COLON = "Colon"
    COMMA = "Comma"
    SEMICOLON = "Semicolon"
    ARROW = "Arrow"
    EQUAL = "Equal"
    EQUAL_EQUAL = "EqualEqual"
    BANG_EQUAL = "BangEqual"
    LESS = "Less"
    LESS_EQUAL = "LessEqual"
    GREATER = "Greater"
    GREATER_EQUAL = "GreaterEqual"
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"
    PERCENT = "Percent"
    BANG = "Bang"
    AND = "And"
    OR = "Or"
    EOF = "Eof"


@dataclass(frozen=True)
class Token:
    """A token with its payload (for literals and identifiers) and position."""

    token_type: TokenType
    value: Any = None
    line: int = 1
    column: int = 1


_TYPE_TOKENS: Mapping[TokenType, PrimitiveType] = {
    TokenType.I32: PrimitiveType.I32,
    TokenType.I64: PrimitiveType.I64,
    TokenType.F32: PrimitiveType.F32,
    TokenType.F64: PrimitiveType.F64,
    TokenType.BOOL: PrimitiveType.BOOL,
    TokenType.CHAR: PrimitiveType.CHAR,
    TokenType.STRING: PrimitiveType.STRING,
}

_LITERALS: Mapping[TokenType, Callable[[Any], Expression]] = {
    TokenType.INT_LIT: IntLit,
    TokenType.FLOAT_LIT: FloatLit,
    TokenType.STRING_LIT: StringLit,
    TokenType.CHAR_LIT: CharLit,
    TokenType.IDENT: Ident,
}

_EQUALITY = {TokenType.EQUAL_EQUAL: BinaryOp.EQ, TokenType.BANG_EQUAL: BinaryOp.NE}
_COMPARISON = {
    TokenType.LESS: BinaryOp.LT,
    TokenType.LESS_EQUAL: BinaryOp.LE,
    TokenType.GREATER: BinaryOp.GT,
    TokenType.GREATER_EQUAL: BinaryOp.GE,
}
_TERM = {TokenType.PLUS: BinaryOp.ADD, TokenType.MINUS: BinaryOp.SUB}
_FACTOR = {
    TokenType.STAR: BinaryOp.MUL,
    TokenType.SLASH: BinaryOp.DIV,
    TokenType.PERCENT: BinaryOp.MOD,
}
_UNARY = {TokenType.MINUS: UnaryOp.NEG, TokenType.BANG: UnaryOp.NOT}


class Parser:
    """Parses a token sequence terminated by an EOF token.

    An EOF token is appended when the sequence does not end with one.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].token_type is not TokenType.EOF:
            last = self._tokens[-1] if self._tokens else Token(TokenType.EOF)
            self._tokens.append(Token(TokenType.EOF, None, last.line, last.column))
        self._current = 0

    def parse(self) -> Program:
        """Parse every remaining item into a program."""
        items: list[Item] = []
        while not self._is_at_end():
            items.append(self._parse_item())
        return Program(tuple(items))

    # Items

    def _parse_item(self) -> Item:
        kind = self._peek().token_type
        if kind is TokenType.FN:
            return self._parse_function()
        if kind is TokenType.STRUCT:
            return self._parse_struct()
        raise self._error("Expected function or struct")

    def _parse_function(self) -> Function:
        self._consume(TokenType.FN)
        name = self._consume_ident()
        self._consume(TokenType.LEFT_PAREN)
        params: list[Param] = []
        if not self._check(TokenType.RIGHT_PAREN):
            while True:
                param_name = self._consume_ident()
                self._consume(TokenType.COLON)
                params.append(Param(param_name, self._parse_type()))
                if not self._match(TokenType.COMMA):
                    break
        self._consume(TokenType.RIGHT_PAREN)
        return_type = self._parse_type() if self._match(TokenType.ARROW) else None
        body = self._parse_block()
        return Function(name, tuple(params), return_type, body)

    def _parse_struct(self) -> Struct:
        self._consume(TokenType.STRUCT)
        name = self._consume_ident()
        self._consume(TokenType.LEFT_BRACE)
        fields: list[Field] = []
        while not self._check(TokenType.RIGHT_BRACE) and not self._is_at_end():
            field_name = self._consume_ident()
            self._consume(TokenType.COLON)
            fields.append(Field(field_name, self._parse_type()))
            self._match(TokenType.COMMA)
        self._consume(TokenType.RIGHT_BRACE)
        return Struct(name, tuple(fields))

    # Statements

    def _parse_block(self) -> tuple[Statement, ...]:
        self._consume(TokenType.LEFT_BRACE)
        statements: list[Statement] = []
        while not self._check(TokenType.RIGHT_BRACE) and not self._is_at_end():
            statements.append(self._parse_statement())
        self._consume(TokenType.RIGHT_BRACE)
        return tuple(statements)

    def _parse_statement(self) -> Statement:
        kind = self._peek().token_type
        if kind is TokenType.LET:
            return self._parse_let()
        if kind is TokenType.RETURN:
            return self._parse_return()
        if kind is TokenType.WHILE:
            self._consume(TokenType.WHILE)
            condition = self._parse_expression()
            return WhileStmt(condition, self._parse_block())
        if kind is TokenType.IF:
            return self._parse_if()
        expr = self._parse_expression()
        self._match(TokenType.SEMICOLON)
        return ExprStmt(expr)

    def _parse_let(self) -> LetStmt:
        self._consume(TokenType.LET)
        mutable = self._match(TokenType.MUT)
        name = self._consume_ident()
        ty = self._parse_type() if self._match(TokenType.COLON) else None
        self._consume(TokenType.EQUAL)
        value = self._parse_expression()
        self._match(TokenType.SEMICOLON)
        return LetStmt(name, mutable, ty, value)

    def _parse_return(self) -> ReturnStmt:
        self._consume(TokenType.RETURN)
        value = None if self._check(TokenType.SEMICOLON) else self._parse_expression()
        self._match(TokenType.SEMICOLON)
        return ReturnStmt(value)

    def _parse_if(self) -> IfStmt:
        self._consume(TokenType.IF)
        condition = self._parse_expression()
        then_body = self._parse_block()
        else_body = self._parse_block() if self._match(TokenType.ELSE) else None
        return IfStmt(condition, then_body, else_body)

    # Expressions

    def _parse_expression(self) -> Expression:
        return self._parse_or()

    def _parse_binary(
        self, operators: Mapping[TokenType, BinaryOp], operand: Callable[[], Expression]
    ) -> Expression:
        left = operand()
        while (kind := self._match_any(operators)) is not None:
            left = Binary(operators[kind], left, operand())
        return left

    def _parse_or(self) -> Expression:
        return self._parse_binary({TokenType.OR: BinaryOp.OR}, self._parse_and)

    def _parse_and(self) -> Expression:
        return self._parse_binary({TokenType.AND: BinaryOp.AND}, self._parse_equality)

    def _parse_equality(self) -> Expression:
        return self._parse_binary(_EQUALITY, self._parse_comparison)

    def _parse_comparison(self) -> Expression:
        return self._parse_binary(_COMPARISON, self._parse_term)

    def _parse_term(self) -> Expression:
        return self._parse_binary(_TERM, self._parse_factor)

    def _parse_factor(self) -> Expression:
        return self._parse_binary(_FACTOR, self._parse_unary)

    def _parse_unary(self) -> Expression:
        kind = self._match_any(_UNARY)
        if kind is not None:
            return Unary(_UNARY[kind], self._parse_unary())
        return self._parse_call()

    def _parse_call(self) -> Expression:
        expr = self._parse_primary()
        while self._match(TokenType.LEFT_PAREN):
            args: list[Expression] = []
            if not self._check(TokenType.RIGHT_PAREN):
                while True:
                    args.append(self._parse_expression())
                    if not self._match(TokenType.COMMA):
                        break
            self._consume(TokenType.RIGHT_PAREN)
            expr = Call(expr, tuple(args))
        return expr

    def _parse_primary(self) -> Expression:
        token = self._advance()
        kind = token.token_type
        if kind in _LITERALS:
            return _LITERALS[kind](token.value)
        if kind is TokenType.TRUE:
            return BoolLit(True)
        if kind is TokenType.FALSE:
            return BoolLit(False)
        if kind is TokenType.LEFT_PAREN:
            expr = self._parse_expression()
            self._consume(TokenType.RIGHT_PAREN)
            return expr
        raise self._error("Expected expression")

    def _parse_type(self) -> Type:
        token = self._advance()
        if token.token_type in _TYPE_TOKENS:
            return _TYPE_TOKENS[token.token_type]
        if token.token_type is TokenType.IDENT:
            return CustomType(token.value)
        raise self._error("Expected type")

    # Token handling

    def _consume(self, token_type: TokenType) -> None:
        if not self._check(token_type):
            raise self._error(f"Expected {token_type.value}")
        self._advance()

    def _consume_ident(self) -> str:
        token = self._advance()
        if token.token_type is not TokenType.IDENT:
            raise self._error("Expected identifier")
        return token.value

    def _match(self, token_type: TokenType) -> bool:
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _match_any(self, types: Iterable[TokenType]) -> TokenType | None:
        for token_type in types:
            if self._check(token_type):
                return self._advance().token_type
        return None

    def _check(self, token_type: TokenType) -> bool:
        return not self._is_at_end() and self._peek().token_type is token_type

    def _advance(self) -> Token:
        if not self._is_at_end():
            self._current += 1
        return self._tokens[max(self._current - 1, 0)]

    def _peek(self) -> Token:
        return self._tokens[self._current]

    def _is_at_end(self) -> bool:
        return self._peek().token_type is TokenType.EOF

    def _error(self, message: str) -> ParseError:
        token = self._peek()
        return ParseError(message, token.line, token.column)


def parse(tokens: Iterable[Token]) -> Program:
    """Parse a token sequence into a program."""
    return Parser(tokens).parse()