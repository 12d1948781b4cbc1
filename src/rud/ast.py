"""AST node types for parsed Rud programs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rud.tokens import Span, StdFn


class RudType(Enum):
    USIZE = "usize"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class Param:
    """Function parameter: name and declared type."""

    name: str
    type: RudType


@dataclass(frozen=True, slots=True)
class StdFnCall:
    """Call to a standard function with a single string-literal argument."""

    kind: StdFn
    arg: str
    span: Span


@dataclass(frozen=True, slots=True)
class UserDefinedFn:
    """A function definition with a body of at most one statement."""

    is_public: bool
    name: str
    params: tuple[Param, ...]
    return_type: RudType
    body: tuple[Node, ...]
    span: Span


Node = StdFnCall | UserDefinedFn
