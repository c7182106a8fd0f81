"""Render a ConfigModel back to git configuration text.

Records that still carry their original text and were not modified are
written out unchanged. Records created or changed in memory are rendered in
canonical form: a ``[section "subsection"]`` header and entries written
as ``key = value`` behind a single tab. A value is quoted only when it
starts or ends with whitespace or contains ``#``, ``;``, a backslash or a
double quote.
"""

from __future__ import annotations

import logging

from gitconf.config.model import ConfigEntry, ConfigModel, Section
from gitconf.constants import (
    NEWLINE_LF,
    QUOTE_TRIGGER_CHARS,
    UTF8_BOM,
    VALUE_ENCODINGS,
    WHITESPACE_CHARS,
)

logger = logging.getLogger(__name__)


def format_value(value: str) -> str:
    """Encode a value for the right-hand side of ``key = value``.

    Args:
        value: Decoded value

    Returns:
        Escaped value, double-quoted when needed

    Example:
        >>> format_value("a # b")
        '"a # b"'

    """
    encoded = "".join(VALUE_ENCODINGS.get(char, char) for char in value)
    needs_quotes = bool(value) and (
        value[0] in WHITESPACE_CHARS
        or value[-1] in WHITESPACE_CHARS
        or any(char in value for char in QUOTE_TRIGGER_CHARS)
    )
    return f'"{encoded}"' if needs_quotes else encoded


def format_header(section: Section) -> str:
    """Render a section header line without its terminator."""
    if section.subsection is None:
        return f"[{section.name}]"
    escaped = section.subsection.replace("\\", "\\\\").replace('"', '\\"')
    return f'[{section.name} "{escaped}"]'


def format_entry(entry: ConfigEntry) -> str:
    """Render an entry line without its terminator.

    Indentation, key spelling and trailing comment of a parsed entry are
    kept; only the value part is rewritten.
    """
    if entry.value is None:
        return f"{entry.indent}{entry.key}{entry.comment}"
    return (
        f"{entry.indent}{entry.key} = {format_value(entry.value)}"
        f"{entry.comment}"
    )


class _TextBuffer:
    """Collects output and tracks whether the last line was terminated."""

    def __init__(self, newline: str) -> None:
        self.parts: list[str] = []
        self.newline = newline
        self._line_open = False

    def raw(self, text: str) -> None:
        if not text:
            return
        self.parts.append(text)
        self._line_open = not text.endswith(NEWLINE_LF) and text != UTF8_BOM

    def raw_lines(self, lines: list[str]) -> None:
        for text in lines:
            self.raw(text)

    def line(self, text: str, newline: str) -> None:
        if self._line_open:
            # The original file ended without a newline
            self.parts.append(self.newline)
        self.parts.append(text + newline)
        self._line_open = not newline

    def getvalue(self) -> str:
        return "".join(self.parts)


def serialize(model: ConfigModel) -> str:
    """Render ``model`` as configuration text.

    For a model that has not been edited the result equals the parsed text.

    Args:
        model: Model to render

    Returns:
        Configuration text

    """
    buffer = _TextBuffer(model.newline)
    buffer.raw_lines(model.preamble)

    rendered = 0
    for section in model.sections:
        buffer.raw_lines(section.leading)
        header_intact = section.header_intact()
        if header_intact:
            buffer.raw(section.raw)
        else:
            buffer.line(format_header(section), section.newline)
            rendered += 1

        for entry in section.entries:
            if entry is section.inline and header_intact:
                continue
            buffer.raw_lines(entry.leading)
            if entry.raw is not None and not entry.dirty:
                buffer.raw(entry.raw)
            else:
                buffer.line(format_entry(entry), entry.newline)
                rendered += 1

        buffer.raw_lines(section.trailing)

    logger.debug("Serialized model, %d line(s) rendered canonically", rendered)
    return buffer.getvalue()
