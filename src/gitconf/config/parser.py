"""Parser for git configuration text.

Turns the text of a git config file into a ConfigModel. Every physical line
ends up attached to exactly one record (preamble, section header, entry or
a section's trailing block) together with its original text, which is what
lets the serializer reproduce untouched parts of the file byte for byte.

Grammar handled:
- ``[section]``, ``[section "subsection"]`` and legacy ``[section.sub]``
- ``key = value``, ``key=value`` and bare ``key`` lines
- an entry on the header line, ``[core] bare = true``
- ``#`` and ``;`` comments, on their own line or after a value
- double-quoted value parts with ``\\"``, ``\\\\``, ``\\n``, ``\\t``, ``\\b``
- line continuation with a trailing backslash
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from gitconf.config.model import ConfigEntry, ConfigModel, Section
from gitconf.constants import (
    COMMENT_CHARS,
    DEFAULT_INDENT,
    NEWLINE_CRLF,
    NEWLINE_LF,
    UTF8_BOM,
    VALUE_ESCAPES,
    WHITESPACE_CHARS,
)
from gitconf.exceptions import ParseError

logger = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9-]*")
SECTION_NAME_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-."
)


@dataclass(frozen=True, slots=True)
class _Line:
    """One physical line split from its terminator."""

    number: int
    content: str
    newline: str

    @property
    def raw(self) -> str:
        return self.content + self.newline


def _split_lines(text: str) -> list[_Line]:
    """Split text on LF only, keeping CRLF terminators intact.

    str.splitlines() is not used because it also breaks on characters such
    as form feed that git treats as ordinary value content.
    """
    lines: list[_Line] = []
    pieces = text.split(NEWLINE_LF)
    for number, piece in enumerate(pieces, start=1):
        is_last = number == len(pieces)
        if is_last:
            if piece:
                lines.append(_Line(number, piece, ""))
            break
        if piece.endswith("\r"):
            lines.append(_Line(number, piece[:-1], NEWLINE_CRLF))
        else:
            lines.append(_Line(number, piece, NEWLINE_LF))
    return lines


def _is_blank_or_comment(content: str) -> bool:
    stripped = content.strip(" \t")
    return not stripped or stripped[0] in COMMENT_CHARS


class GitConfigParser:
    """Single-use parser turning config text into a ConfigModel."""

    def __init__(self, text: str) -> None:
        """Initialize parser state for ``text``.

        Args:
            text: Full configuration text

        """
        self._lines = _split_lines(text)
        self._model = ConfigModel()
        self._current: Section | None = None
        self._pending: list[str] = []

    def parse(self) -> ConfigModel:
        """Parse the text.

        Returns:
            The populated model

        Raises:
            ParseError: On the first malformed line

        """
        lines = self._lines
        if lines and lines[0].newline == NEWLINE_CRLF:
            self._model.newline = NEWLINE_CRLF

        index = 0
        while index < len(lines):
            line = lines[index]
            content = line.content
            if index == 0 and content.startswith(UTF8_BOM):
                self._pending.append(UTF8_BOM)
                content = content[len(UTF8_BOM) :]
                line = _Line(line.number, content, line.newline)

            if _is_blank_or_comment(content):
                self._pending.append(line.raw)
            elif content.lstrip(" \t").startswith("["):
                index = self._parse_header(index, line)
            else:
                index = self._parse_entry(index, line)
            index += 1

        if self._current is not None:
            self._current.trailing.extend(self._pending)
        else:
            self._model.preamble.extend(self._pending)
        self._pending = []

        logger.debug(
            "Parsed %d line(s) into %d section(s)",
            len(lines),
            len(self._model.sections),
        )
        return self._model

    # ------------------------------------------------------------------
    # Section headers
    # ------------------------------------------------------------------

    def _parse_header(self, index: int, line: _Line) -> int:
        """Parse the header at ``index`` and any entry sharing its line.

        Returns:
            Index of the header's last physical line

        """
        name, subsection, entry_column = self._read_header(line)
        section = Section(
            name=name,
            subsection=subsection,
            raw=line.raw,
            newline=line.newline,
        )
        if self._current is None:
            self._model.preamble.extend(self._pending)
        else:
            section.leading = self._pending
        self._pending = []
        self._model.sections.append(section)
        self._current = section

        if entry_column is None:
            return index
        # "[core] bare = true": the line stays the header's raw text
        end = self._parse_entry(index, line, entry_column)
        section.inline = section.entries[-1]
        section.raw = "".join(
            self._lines[i].raw for i in range(index, end + 1)
        )
        return end

    def _read_header(self, line: _Line) -> tuple[str, str | None, int | None]:
        """Return (name, subsection, column of a same-line entry or None)."""
        content = line.content
        pos = content.index("[") + 1
        start = pos
        while pos < len(content) and content[pos] in SECTION_NAME_CHARS:
            pos += 1
        name = content[start:pos]

        if pos >= len(content):
            raise ParseError(line.number, "missing ']' in section header")

        subsection: str | None = None
        if content[pos] in WHITESPACE_CHARS:
            while pos < len(content) and content[pos] in WHITESPACE_CHARS:
                pos += 1
            if pos >= len(content) or content[pos] != '"':
                raise ParseError(
                    line.number, "subsection name must be double-quoted"
                )
            subsection, pos = self._read_subsection(line, pos + 1)
            if pos >= len(content) or content[pos] != "]":
                raise ParseError(line.number, "missing ']' in section header")
        elif content[pos] != "]":
            raise ParseError(
                line.number,
                f"invalid character '{content[pos]}' in section name",
            )

        if not name:
            raise ParseError(line.number, "empty section name")

        if subsection is None and "." in name:
            # Legacy [section.subsection] syntax; git folds the subsection
            name, _, legacy = name.partition(".")
            subsection = legacy.lower()
            if not name or not legacy:
                raise ParseError(line.number, "invalid section name")
        elif "." in name:
            raise ParseError(line.number, f"invalid section name '{name}'")

        pos += 1
        while pos < len(content) and content[pos] in WHITESPACE_CHARS:
            pos += 1
        if pos >= len(content) or content[pos] in COMMENT_CHARS:
            return name, subsection, None
        return name, subsection, pos

    @staticmethod
    def _read_subsection(line: _Line, pos: int) -> tuple[str, int]:
        """Read a quoted subsection starting after its opening quote.

        Returns:
            Tuple of (subsection, index just past the closing quote)

        """
        content = line.content
        chars: list[str] = []
        while pos < len(content):
            char = content[pos]
            if char == '"':
                return "".join(chars), pos + 1
            if char == "\\":
                pos += 1
                if pos >= len(content):
                    break
                # Backslashes before other characters are dropped, as git does
                char = content[pos]
            chars.append(char)
            pos += 1
        raise ParseError(line.number, "unterminated subsection name")

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def _parse_entry(
        self, index: int, line: _Line, column: int | None = None
    ) -> int:
        """Parse the entry starting at ``index``.

        Args:
            index: Index of the entry's first physical line
            line: That line
            column: Start of an entry that follows a header on the same
                line; None for an entry on its own line

        Returns:
            Index of the entry's last physical line

        """
        if self._current is None:
            raise ParseError(line.number, "key outside of any section")

        content = line.content
        if column is None:
            indent_end = len(content) - len(content.lstrip(" \t"))
            indent = content[:indent_end]
        else:
            indent_end, indent = column, DEFAULT_INDENT

        match = KEY_PATTERN.match(content, indent_end)
        if match is None:
            raise ParseError(line.number, "invalid key name")
        key = match.group(0)

        pos = match.end()
        while pos < len(content) and content[pos] in WHITESPACE_CHARS:
            pos += 1

        value: str | None
        end = index
        if pos >= len(content):
            value, comment = None, ""
        elif content[pos] in COMMENT_CHARS:
            value, comment = None, content[match.end() :]
        elif content[pos] == "=":
            value, comment, end = self._parse_value(index, pos + 1)
        else:
            raise ParseError(
                line.number,
                f"invalid key '{content[indent_end:].rstrip()}': "
                "expected '=' or end of line after key name",
            )

        raw = (
            "".join(self._lines[i].raw for i in range(index, end + 1))
            if column is None
            else None
        )
        entry = ConfigEntry(
            key=key,
            value=value,
            raw=raw,
            indent=indent,
            comment=comment,
            newline=self._lines[end].newline,
            leading=self._pending,
        )
        self._pending = []
        self._current.entries.append(entry)
        return end

    def _parse_value(self, index: int, column: int) -> tuple[str, str, int]:
        """Decode a value that starts at ``column`` of line ``index``.

        Whitespace outside quotes is kept only between other characters,
        quotes are removed, escapes decoded, and a trailing backslash
        joins the next line.

        Returns:
            Tuple of (value, trailing comment, index of last line used)

        """
        value: list[str] = []
        pending: list[str] = []
        in_quotes = False
        comment = ""

        while True:
            line = self._lines[index]
            content = line.content
            pos = column
            ws_start: int | None = None
            continued = False

            while pos < len(content):
                char = content[pos]
                if not in_quotes and char in WHITESPACE_CHARS:
                    if ws_start is None:
                        ws_start = pos
                    if value:
                        pending.append(char)
                    pos += 1
                    continue
                if not in_quotes and char in COMMENT_CHARS:
                    comment = content[pos if ws_start is None else ws_start :]
                    break

                ws_start = None
                value.extend(pending)
                pending.clear()

                if char == "\\":
                    if pos + 1 == len(content):
                        continued = True
                        break
                    escaped = content[pos + 1]
                    decoded = VALUE_ESCAPES.get(escaped)
                    if decoded is None:
                        raise ParseError(
                            line.number,
                            f"invalid escape sequence '\\{escaped}'",
                        )
                    value.append(decoded)
                    pos += 2
                    continue
                if char == '"':
                    in_quotes = not in_quotes
                else:
                    value.append(char)
                pos += 1

            if continued:
                if index + 1 == len(self._lines):
                    raise ParseError(
                        line.number, "line continuation at end of file"
                    )
                index += 1
                column = 0
                continue
            if in_quotes:
                raise ParseError(line.number, "unterminated quoted value")
            return "".join(value), comment, index


def parse(text: str) -> ConfigModel:
    """Parse git configuration text into a ConfigModel.

    Args:
        text: Configuration text

    Returns:
        The parsed model

    Raises:
        ParseError: If the text is malformed; no model is returned

    """
    return GitConfigParser(text).parse()
