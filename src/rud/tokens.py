"""Token kinds, payload enums, spans and the Token data structure."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rud.ast import RudType


class TokenKind(Enum):
    INDENT = auto()  # four spaces
    RESERVED = auto()  # pub, fn
    PUNCT = auto()  # ( ) = ...
    IDENTIFIER = auto()  # names, including type names
    STRING_LIT = auto()  # "..." without the quotes
    STD_FN = auto()  # puts
    LINE_TERM = auto()  # \n


class Reserved(Enum):
    PUB = "pub"
    FN = "fn"


class Punct(Enum):
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    COLON = ":"
    COMMA = ","
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    GT = ">"
    LT = "<"
    GTEQ = ">="
    LTEQ = "<="


class StdFn(Enum):
    PUTS = "puts"


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


def position_at(source: str, offset: int) -> Position:
    """Convert a character offset into a line/column Position."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1, offset)


@dataclass(frozen=True, slots=True)
class Span:
    """Inclusive character-offset range ``start..=end``."""

    start: int
    end: int

    @property
    def width(self) -> int:
        return self.end - self.start + 1


class TokenKindError(TypeError):
    """Raised when a payload accessor is called on a token of the wrong kind."""


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: kind, kind-specific payload and source span."""

    kind: TokenKind
    value: Reserved | Punct | StdFn | str | None
    span: Span

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def indent(cls, span: Span) -> Token:
        return cls(TokenKind.INDENT, None, span)

    @classmethod
    def reserved(cls, word: Reserved, span: Span) -> Token:
        return cls(TokenKind.RESERVED, word, span)

    @classmethod
    def punct(cls, symbol: Punct, span: Span) -> Token:
        return cls(TokenKind.PUNCT, symbol, span)

    @classmethod
    def identifier(cls, name: str, span: Span) -> Token:
        return cls(TokenKind.IDENTIFIER, name, span)

    @classmethod
    def string_lit(cls, text: str, span: Span) -> Token:
        return cls(TokenKind.STRING_LIT, text, span)

    @classmethod
    def std_fn(cls, name: StdFn, span: Span) -> Token:
        return cls(TokenKind.STD_FN, name, span)

    @classmethod
    def line_term(cls, span: Span) -> Token:
        return cls(TokenKind.LINE_TERM, None, span)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_indent(self) -> bool:
        return self.kind == TokenKind.INDENT

    def is_public(self) -> bool:
        return self.kind == TokenKind.RESERVED and self.value == Reserved.PUB

    def is_fn(self) -> bool:
        return self.kind == TokenKind.RESERVED and self.value == Reserved.FN

    def is_punct(self, symbol: Punct) -> bool:
        return self.kind == TokenKind.PUNCT and self.value == symbol

    def is_left_paren(self) -> bool:
        return self.is_punct(Punct.LEFT_PAREN)

    def is_right_paren(self) -> bool:
        return self.is_punct(Punct.RIGHT_PAREN)

    def is_comma(self) -> bool:
        return self.is_punct(Punct.COMMA)

    def is_colon(self) -> bool:
        return self.is_punct(Punct.COLON)

    def is_assign(self) -> bool:
        return self.is_punct(Punct.ASSIGN)

    def is_identifier(self) -> bool:
        return self.kind == TokenKind.IDENTIFIER

    def is_string_lit(self) -> bool:
        return self.kind == TokenKind.STRING_LIT

    def is_std_fn(self) -> bool:
        return self.kind == TokenKind.STD_FN

    def is_line_term(self) -> bool:
        return self.kind == TokenKind.LINE_TERM

    # ------------------------------------------------------------------
    # Payload accessors
    # ------------------------------------------------------------------

    def identifier_name(self) -> str:
        if self.kind != TokenKind.IDENTIFIER:
            raise TokenKindError(f"expected identifier token, got {self.kind.name}")
        assert isinstance(self.value, str)
        return self.value

    def identifier_type(self) -> RudType:
        """Resolve an identifier token's text as a type name."""
        from rud.builtins import resolve_type

        if self.kind != TokenKind.IDENTIFIER:
            raise TokenKindError(f"expected type identifier token, got {self.kind.name}")
        assert isinstance(self.value, str)
        return resolve_type(self.value)

    def string_value(self) -> str:
        if self.kind != TokenKind.STRING_LIT:
            raise TokenKindError(f"expected string literal token, got {self.kind.name}")
        assert isinstance(self.value, str)
        return self.value

    def std_fn_name(self) -> StdFn:
        if self.kind != TokenKind.STD_FN:
            raise TokenKindError(f"expected standard function token, got {self.kind.name}")
        assert isinstance(self.value, StdFn)
        return self.value

    def describe(self) -> str:
        """Short human-readable form used in error messages."""
        if self.kind == TokenKind.INDENT:
            return "indent"
        if self.kind == TokenKind.LINE_TERM:
            return "line break"
        if self.kind == TokenKind.STRING_LIT:
            return f'string "{self.value}"'
        if isinstance(self.value, Enum):
            return f"'{self.value.value}'"
        return f"'{self.value}'"
