"""Test standard function call parsing."""

import pytest

from rud.ast import StdFnCall
from rud.errors import ErrorKind, ParseError
from rud.parser import to_standard_function_call
from rud.render import render_node
from rud.tokens import Punct, Span, StdFn, Token

from .conftest import DUMMY, std_fn_call_tokens


class TestStdFnCall:
    def test_hand_built_tokens(self):
        node = to_standard_function_call(std_fn_call_tokens())
        assert node == StdFnCall(StdFn.PUTS, "Hello, Rud!", Span(0, 0))

    def test_renders_println(self):
        node = to_standard_function_call(std_fn_call_tokens("x"))
        assert render_node(node) == 'println!("x");'

    def test_span_covers_call(self, lex):
        node = to_standard_function_call(lex('puts("hi")'))
        assert node.span == Span(0, 9)

    def test_from_source(self, parse_source):
        (node,) = parse_source('puts("hi")')
        assert isinstance(node, StdFnCall)
        assert node.arg == "hi"

    def test_top_level_trailing_blank_lines(self, parse_source):
        (node,) = parse_source('puts("hi")\n\n    \n')
        assert node.arg == "hi"


class TestStdFnCallShape:
    def test_too_many_tokens(self):
        tokens = std_fn_call_tokens() + [Token.punct(Punct.RIGHT_PAREN, DUMMY)]
        with pytest.raises(ParseError, match="unexpected token after standard function call"):
            to_standard_function_call(tokens)

    def test_too_few_tokens(self):
        with pytest.raises(ParseError, match="found end of input"):
            to_standard_function_call(std_fn_call_tokens()[:3])

    def test_missing_left_paren(self):
        tokens = std_fn_call_tokens()
        del tokens[1]
        with pytest.raises(ParseError, match="expected '\\('"):
            to_standard_function_call(tokens)

    def test_identifier_argument(self):
        tokens = std_fn_call_tokens()
        tokens[2] = Token.identifier("x", DUMMY)
        with pytest.raises(ParseError, match="expected string literal"):
            to_standard_function_call(tokens)

    def test_not_a_std_fn(self):
        tokens = std_fn_call_tokens()
        tokens[0] = Token.identifier("print", DUMMY)
        with pytest.raises(ParseError) as exc_info:
            to_standard_function_call(tokens)
        assert exc_info.value.kind == ErrorKind.SHAPE_MISMATCH

    def test_empty(self):
        with pytest.raises(ParseError):
            to_standard_function_call([])
