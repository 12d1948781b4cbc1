"""Rust renderer — converts parsed Rud nodes to Rust source text."""

from __future__ import annotations

from rud.ast import Node, Param, RudType, StdFnCall, UserDefinedFn
from rud.builtins import STD_FUNCTIONS_BY_KIND

INDENT = "    "


def render(nodes: tuple[Node, ...] | list[Node]) -> str:
    """Render top-level nodes, separated by a blank line."""
    return "\n\n".join(render_node(node) for node in nodes)


def render_node(node: Node) -> str:
    match node:
        case StdFnCall():
            return _render_std_fn_call(node)
        case UserDefinedFn():
            return _render_user_defined_fn(node)
    raise TypeError(f"cannot render {type(node).__name__}")


# ---------------------------------------------------------------------------
# Per-node rendering
# ---------------------------------------------------------------------------


def _render_std_fn_call(node: StdFnCall) -> str:
    # The argument is embedded verbatim; quotes and braces are not escaped.
    template = STD_FUNCTIONS_BY_KIND[node.kind].template
    return template.replace("{arg}", node.arg)


def _render_user_defined_fn(node: UserDefinedFn) -> str:
    parts: list[str] = []
    if node.is_public:
        parts.append("pub ")
    parts.append(f"fn {node.name}(")
    parts.append(_render_params(node.params))
    parts.append(") ")
    parts.append(_render_return_type(node.return_type))
    parts.append("{\n")
    for child in node.body:
        parts.append(f"{INDENT}{render_node(child)}\n")
    parts.append("}")
    return "".join(parts)


def _render_params(params: tuple[Param, ...]) -> str:
    # Parameters are parsed but not yet emitted.
    return ""


def _render_return_type(return_type: RudType) -> str:
    # Return types are parsed but not yet emitted.
    return ""
