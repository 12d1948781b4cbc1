"""Rud to Rust source translator."""

from __future__ import annotations

__version__ = "0.1.0"


def compile(source: str, filename: str = "input.rud") -> str:
    """Tokenize, parse, and render Rud source to Rust."""
    from rud.parser import parse
    from rud.render import render

    nodes = parse(source, filename)
    return render(nodes)
