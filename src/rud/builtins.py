"""Word registry: reserved words, standard functions, and type names."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rud.ast import RudType
from rud.tokens import Reserved, StdFn

logger = logging.getLogger(__name__)

RESERVED_WORDS: dict[str, Reserved] = {r.value: r for r in Reserved}


@dataclass(frozen=True, slots=True)
class StdFnDef:
    """Definition of a standard function: its kind and output template."""

    kind: StdFn
    template: str


def _make_std_functions() -> dict[str, StdFnDef]:
    defs: dict[str, StdFnDef] = {}

    def d(kind: StdFn, template: str) -> None:
        defs[kind.value] = StdFnDef(kind, template)

    # Console
    d(StdFn.PUTS, 'println!("{arg}");')

    return defs


STD_FUNCTIONS: dict[str, StdFnDef] = _make_std_functions()
STD_FUNCTIONS_BY_KIND: dict[StdFn, StdFnDef] = {d.kind: d for d in STD_FUNCTIONS.values()}

TYPE_NAMES: dict[str, RudType] = {
    "usize": RudType.USIZE,
}


def is_reserved_word(word: str) -> bool:
    return word in RESERVED_WORDS


def is_std_fn_name(word: str) -> bool:
    return word in STD_FUNCTIONS


def resolve_type(name: str) -> RudType:
    """Map a type spelling to a RudType; unknown spellings resolve to NONE."""
    rud_type = TYPE_NAMES.get(name)
    if rud_type is None:
        logger.warning("unknown type name %r, treating as none", name)
        return RudType.NONE
    return rud_type
