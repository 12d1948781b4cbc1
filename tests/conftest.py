"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from rud.lexer import tokenize
from rud.parser import parse
from rud.tokens import Punct, Reserved, Span, StdFn, Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns top-level nodes."""

    def _parse(source: str, filename: str = "test.rud"):
        return parse(source, filename)

    return _parse


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token payloads match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


# ---------------------------------------------------------------------------
# Hand-built token runs (spans are irrelevant to the parser)
# ---------------------------------------------------------------------------

DUMMY = Span(0, 0)


def std_fn_call_tokens(text: str = "Hello, Rud!") -> list[Token]:
    return [
        Token.std_fn(StdFn.PUTS, DUMMY),
        Token.punct(Punct.LEFT_PAREN, DUMMY),
        Token.string_lit(text, DUMMY),
        Token.punct(Punct.RIGHT_PAREN, DUMMY),
    ]


def user_defined_fn_tokens(name: str = "main") -> list[Token]:
    return [
        Token.reserved(Reserved.FN, DUMMY),
        Token.identifier(name, DUMMY),
        Token.punct(Punct.LEFT_PAREN, DUMMY),
        Token.punct(Punct.RIGHT_PAREN, DUMMY),
        Token.punct(Punct.ASSIGN, DUMMY),
        Token.line_term(DUMMY),
        Token.indent(DUMMY),
        *std_fn_call_tokens(),
    ]
