"""Tests for the --debug token and AST dump."""

from __future__ import annotations

import io

from rud.debug import dump_ast, dump_tokens
from rud.lexer import tokenize
from rud.parser import parse


class TestDumpTokens:
    def test_one_line_per_token(self):
        out = io.StringIO()
        tokens = tokenize('puts("x")\n')
        dump_tokens(tokens, file=out)
        lines = out.getvalue().splitlines()
        assert len(lines) == len(tokens)
        assert "STD_FN 'puts'" in lines[0]
        assert 'STRING_LIT string "x"' in lines[2]
        assert lines[-1].endswith("LINE_TERM")


class TestDumpAst:
    def test_function_tree(self):
        out = io.StringIO()
        dump_ast(parse('pub fn f(n usize) =\n    puts("hi")\n'), file=out)
        assert out.getvalue() == (
            "Program\n"
            "  UserDefinedFn pub f -> none\n"
            "    Param n: usize\n"
            "    StdFnCall puts('hi')\n"
        )

    def test_empty_program(self):
        out = io.StringIO()
        dump_ast((), file=out)
        assert out.getvalue() == "Program\n"
