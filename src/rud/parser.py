"""Rud parser — converts a token stream into AST nodes.

The grammar is two fixed shapes, read left to right without backtracking:

    call     := STD_FN "(" STRING_LIT ")"
    function := ["pub"] "fn" IDENT "(" {IDENT IDENT [","]} ")" [":" IDENT] "="
                [LINE_TERM INDENT] [call [LINE_TERM]]
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rud.ast import Node, Param, RudType, StdFnCall, UserDefinedFn
from rud.errors import ParseError
from rud.lexer import tokenize
from rud.tokens import Span, Token

logger = logging.getLogger(__name__)


class Parser:
    """Shape recognizer over one pre-segmented token run."""

    def __init__(self, tokens: list[Token], source: str = "", filename: str = "input.rud") -> None:
        self._tokens = tokens
        self._source = source
        self._filename = filename
        self._pos = 0

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _peek(self) -> Token | None:
        if self._at_end():
            return None
        return self._tokens[self._pos]

    def _at(self, predicate: Callable[[Token], bool]) -> bool:
        tok = self._peek()
        return tok is not None and predicate(tok)

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def _expect(self, predicate: Callable[[Token], bool], message: str) -> Token:
        tok = self._peek()
        if tok is None:
            raise self._error(f"{message}, found end of input")
        if not predicate(tok):
            raise self._error(f"{message}, found {tok.describe()}", tok.span)
        return self._advance()

    def _prev_end(self) -> int:
        """End offset of the previously consumed token."""
        if self._pos > 0:
            return self._tokens[self._pos - 1].span.end
        return 0

    def _error(self, message: str, span: Span | None = None) -> ParseError:
        if span is None:
            # Ran off the end: point just past the last token
            end = self._tokens[-1].span.end + 1 if self._tokens else 0
            span = Span(end, end)
        return ParseError(message, span, self._source)

    # ------------------------------------------------------------------
    # Standard function call
    # ------------------------------------------------------------------

    def parse_std_fn_call(self) -> StdFnCall:
        name_tok = self._expect(Token.is_std_fn, "expected standard function name")
        self._expect(Token.is_left_paren, "expected '(' after standard function name")
        arg_tok = self._expect(Token.is_string_lit, "expected string literal argument")
        self._expect(Token.is_right_paren, "expected ')' after argument")

        tok = self._peek()
        if tok is not None:
            raise self._error("unexpected token after standard function call", tok.span)

        return StdFnCall(
            name_tok.std_fn_name(),
            arg_tok.string_value(),
            Span(name_tok.span.start, self._prev_end()),
        )

    # ------------------------------------------------------------------
    # Function definition
    # ------------------------------------------------------------------

    def parse_user_defined_fn(self) -> UserDefinedFn:
        start = self._tokens[0].span.start if self._tokens else 0

        is_public = self._at(Token.is_public)
        if is_public:
            self._advance()
        self._expect(Token.is_fn, "expected 'fn'")
        name = self._expect(Token.is_identifier, "expected function name after 'fn'").identifier_name()
        self._expect(Token.is_left_paren, "expected '(' after function name")
        params = self._parse_params()

        return_type = RudType.NONE
        if self._at(Token.is_colon):
            self._advance()
            return_type = self._expect(Token.is_identifier, "expected return type after ':'").identifier_type()

        self._expect(Token.is_assign, "expected '=' before function body")

        # Multi-line form: the body sits on the next line, one indent deep
        if self._at(Token.is_line_term):
            self._advance()
            self._expect(Token.is_indent, "expected indent after line break in function body")

        body = self._parse_body()
        end = self._prev_end()

        while self._at(Token.is_line_term) or self._at(Token.is_indent):
            self._advance()
        tok = self._peek()
        if tok is not None:
            raise self._error("unexpected token after function body", tok.span)

        return UserDefinedFn(is_public, name, params, return_type, body, Span(start, end))

    def _parse_params(self) -> tuple[Param, ...]:
        params: list[Param] = []
        while not self._at_end() and not self._at(Token.is_right_paren):
            name = self._expect(Token.is_identifier, "expected parameter name or ')'").identifier_name()
            rud_type = self._expect(
                Token.is_identifier, f"expected type for parameter '{name}'"
            ).identifier_type()
            if self._at(Token.is_comma):
                self._advance()
            params.append(Param(name, rud_type))
        self._expect(Token.is_right_paren, "expected ')' to close parameter list")
        return tuple(params)

    def _parse_body(self) -> tuple[Node, ...]:
        if not self._at(Token.is_std_fn):
            return ()

        call_tokens = [self._advance()]
        while not self._at_end() and not self._at(Token.is_right_paren):
            call_tokens.append(self._advance())
        call_tokens.append(self._expect(Token.is_right_paren, "expected ')' to close call"))

        if self._at(Token.is_line_term):
            self._advance()

        call = Parser(call_tokens, self._source, self._filename).parse_std_fn_call()
        return (call,)


# ---------------------------------------------------------------------------
# Logical lines
# ---------------------------------------------------------------------------


def split(tokens: list[Token]) -> list[list[Token]]:
    """Partition a token stream into logical lines.

    A new line starts at the first token after a line break that is neither
    an indent nor another line break, so indented continuation lines and blank
    lines stay with the line above.
    """
    groups: list[list[Token]] = []
    current: list[Token] = []
    last_was_line_term = False
    for tok in tokens:
        if last_was_line_term and not tok.is_indent() and not tok.is_line_term():
            groups.append(current)
            current = []
        last_was_line_term = tok.is_line_term()
        current.append(tok)
    if current:
        groups.append(current)
    return groups


def _is_blank(tok: Token) -> bool:
    return tok.is_line_term() or tok.is_indent()


def to_standard_function_call(tokens: list[Token], source: str = "") -> StdFnCall:
    """Parse exactly ``STD_FN ( STRING_LIT )`` into a StdFnCall."""
    return Parser(tokens, source).parse_std_fn_call()


def to_user_defined_function(tokens: list[Token], source: str = "") -> UserDefinedFn:
    """Parse one function definition token run into a UserDefinedFn."""
    return Parser(tokens, source).parse_user_defined_fn()


def parse(source: str, filename: str = "input.rud") -> tuple[Node, ...]:
    """Convenience function: tokenize, split and parse source into top-level nodes."""
    tokens = tokenize(source, filename)
    groups = split(tokens)
    logger.debug("%s: %d logical lines", filename, len(groups))

    nodes: list[Node] = []
    for group in groups:
        if all(_is_blank(t) for t in group):
            continue
        if group[0].is_std_fn():
            while _is_blank(group[-1]):
                group = group[:-1]
            node: Node = Parser(group, source, filename).parse_std_fn_call()
        else:
            node = Parser(group, source, filename).parse_user_defined_fn()
        logger.debug("%s: parsed %s", filename, type(node).__name__)
        nodes.append(node)
    return tuple(nodes)
