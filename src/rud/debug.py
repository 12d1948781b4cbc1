"""--debug token and AST dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from rud.ast import Node, StdFnCall, UserDefinedFn
from rud.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token: span, kind and payload."""
    for tok in tokens:
        span = f"{tok.span.start:>4}..{tok.span.end:<4}"
        if tok.value is None:
            file.write(f"{span} {tok.kind.name}\n")
        else:
            file.write(f"{span} {tok.kind.name} {tok.describe()}\n")


def dump_ast(nodes: tuple[Node, ...] | list[Node], *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable AST tree to *file*."""
    file.write("Program\n")
    for node in nodes:
        _dump_node(node, 1, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_node(node: Node, depth: int, f: TextIO) -> None:
    if isinstance(node, StdFnCall):
        f.write(f"{_indent(depth)}StdFnCall {node.kind.value}({node.arg!r})\n")
    elif isinstance(node, UserDefinedFn):
        _dump_fn(node, depth, f)


def _dump_fn(node: UserDefinedFn, depth: int, f: TextIO) -> None:
    vis = "pub " if node.is_public else ""
    f.write(f"{_indent(depth)}UserDefinedFn {vis}{node.name} -> {node.return_type.value}\n")
    for param in node.params:
        f.write(f"{_indent(depth + 1)}Param {param.name}: {param.type.value}\n")
    for child in node.body:
        _dump_node(child, depth + 1, f)
