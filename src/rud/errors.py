"""Error types with formatted source context."""

from __future__ import annotations

from enum import Enum, auto

from rud.tokens import Span, position_at


class ErrorKind(Enum):
    SCAN_FAILURE = auto()  # character matches no lexical rule
    UNTERMINATED_LITERAL = auto()  # string literal without closing quote
    SHAPE_MISMATCH = auto()  # token run does not match the expected shape


class RudError(Exception):
    """Base for all translation failures. Translation is all-or-nothing."""

    def __init__(self, kind: ErrorKind, message: str, span: Span, source: str = "") -> None:
        self.kind = kind
        self.message = message
        self.span = span
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.rud") -> str:
        if not self.source:
            return f"error: {self.message}\n  --> {filename}: offset {self.span.start}"

        start = position_at(self.source, self.span.start)
        end = position_at(self.source, self.span.end)
        lines = self.source.splitlines(keepends=True)
        line_idx = start.line - 1
        col = start.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n")
        else:
            source_line = ""

        # Underline the full span when on one line, otherwise to end of line
        if end.line == start.line:
            underline_len = max(1, min(self.span.width, len(source_line) - col + 1))
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(start.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{start.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class LexError(RudError):
    """Raised on the first lexing error: unscannable character or unterminated string."""


class ParseError(RudError):
    """Raised on the first token run that does not match the expected shape."""

    def __init__(self, message: str, span: Span, source: str = "") -> None:
        super().__init__(ErrorKind.SHAPE_MISMATCH, message, span, source)
