"""In-memory model of a git configuration file.

The model is an ordered list of sections, each holding an ordered list of
entries. Both lists allow duplicates: a header may be repeated further down
the file and a key may be repeated inside a section to form a multi-valued
key. Lookups scan in file order; reads merge every section with the same
(name, subsection), writes target the last one.

Every parsed section and entry keeps the text it was read from. Only records
touched by a write are rendered again, so comments and spacing elsewhere in
the file survive an edit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gitconf.config.operations import DELETE, Append, Delete, Operation, Set
from gitconf.config.path import (
    ConfigPath,
    normalize_name,
    normalize_subsection,
    resolve,
    resolve_section,
)
from gitconf.constants import BARE_VALUE, DEFAULT_INDENT, NEWLINE_LF

logger = logging.getLogger(__name__)


@dataclass
class ConfigEntry:
    """One key/value occurrence inside a section.

    Attributes:
        key: Key name as written in the file
        value: Decoded value, or None for a bare key such as ``bare``
        raw: Original text of the entry (all physical lines, terminators
            included), or None for entries created in memory
        indent: Whitespace before the key
        comment: Trailing comment including the whitespace before it
        newline: Terminator of the entry's last line ("" at end of file)
        leading: Blank and comment lines directly above the entry
        dirty: True once the entry has been created or changed in memory

    """

    key: str
    value: str | None
    raw: str | None = None
    indent: str = DEFAULT_INDENT
    comment: str = ""
    newline: str = NEWLINE_LF
    leading: list[str] = field(default_factory=list)
    dirty: bool = False

    @property
    def effective_value(self) -> str:
        """Value as returned to callers; bare keys read as true."""
        return BARE_VALUE if self.value is None else self.value

    def matches(self, key: str) -> bool:
        """Check whether this entry holds ``key`` (case-insensitive)."""
        return normalize_name(self.key) == normalize_name(key)

    def update(self, value: str) -> None:
        """Replace the value, marking the entry for re-rendering."""
        self.value = value
        self.dirty = True


@dataclass
class Section:
    """A ``[name]`` or ``[name "subsection"]`` block.

    Attributes:
        name: Section name as written (compared case-insensitively)
        subsection: Subsection name, compared exactly, or None
        entries: Entries in file order
        raw: Original header line, or None for sections created in memory
        newline: Terminator of the header line
        leading: Blank and comment lines directly above the header
        trailing: Lines after the last entry that belong to no later record
        inline: Entry written on the header line itself, as in
            ``[core] bare = true``; ``raw`` then holds that whole line

    """

    name: str
    subsection: str | None = None
    entries: list[ConfigEntry] = field(default_factory=list)
    raw: str | None = None
    newline: str = NEWLINE_LF
    leading: list[str] = field(default_factory=list)
    trailing: list[str] = field(default_factory=list)
    inline: ConfigEntry | None = None

    def header_intact(self) -> bool:
        """Check whether the original header text can be written as is."""
        if self.raw is None:
            return False
        if self.inline is None:
            return True
        return not self.inline.dirty and any(
            entry is self.inline for entry in self.entries
        )

    def matches(self, section: str, subsection: str | None) -> bool:
        """Check whether this block belongs to (section, subsection)."""
        return normalize_name(self.name) == normalize_name(
            section
        ) and normalize_subsection(self.subsection) == normalize_subsection(
            subsection
        )

    def find(self, key: str) -> list[ConfigEntry]:
        """Return this section's entries for ``key`` in file order."""
        return [entry for entry in self.entries if entry.matches(key)]


@dataclass
class ConfigModel:
    """Ordered collection of sections plus text outside any section.

    Attributes:
        sections: Sections in file order, duplicates allowed
        preamble: Lines before the first section header
        newline: Line terminator used for new lines

    """

    sections: list[Section] = field(default_factory=list)
    preamble: list[str] = field(default_factory=list)
    newline: str = NEWLINE_LF

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, path: str | ConfigPath) -> str | None:
        """Return the last value of ``path``, or None when it is not set.

        Args:
            path: Dotted path or resolved ConfigPath

        Returns:
            The value of the last matching entry across all repeated
            headers; "true" for a bare key; None if nothing matches

        Raises:
            InvalidPathError: If the path is malformed

        """
        matches = self._matching_entries(resolve(path))
        if not matches:
            return None
        return matches[-1][1].effective_value

    def get_all(self, path: str | ConfigPath) -> list[str]:
        """Return every value of ``path`` in file order.

        Args:
            path: Dotted path or resolved ConfigPath

        Returns:
            Values of all matching entries; empty list if none match

        Raises:
            InvalidPathError: If the path is malformed

        """
        return [
            entry.effective_value
            for _, entry in self._matching_entries(resolve(path))
        ]

    def items(self) -> list[tuple[str, str]]:
        """Enumerate all entries in file order, like ``git config --list``.

        Returns:
            List of (dotted path, value) pairs with section and key names
            lowercased and subsections verbatim

        """
        result: list[tuple[str, str]] = []
        for section in self.sections:
            prefix = normalize_name(section.name)
            if section.subsection is not None:
                prefix = f"{prefix}.{section.subsection}"
            result.extend(
                (
                    f"{prefix}.{normalize_name(entry.key)}",
                    entry.effective_value,
                )
                for entry in section.entries
            )
        return result

    def get_subsections(self, section: str) -> list[str]:
        """Return the distinct subsections of ``section``.

        Args:
            section: Section name (case-insensitive)

        Returns:
            Subsection names in order of first appearance

        """
        name = normalize_name(section)
        found: list[str] = []
        for block in self.sections:
            if (
                normalize_name(block.name) == name
                and block.subsection is not None
                and block.subsection not in found
            ):
                found.append(block.subsection)
        return found

    def has_section(self, section: str, subsection: str | None = None) -> bool:
        """Check whether a header for (section, subsection) exists."""
        name, sub = resolve_section(section, subsection)
        return bool(self._matching_sections(name, sub))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set(self, path: str | ConfigPath, value: str | Delete) -> None:
        """Set ``path`` to ``value``, or delete it when given DELETE.

        An existing entry is overwritten in place (the last one when the
        key has several values). Otherwise a new entry is appended to the
        last matching section, which is created at the end of the file
        when absent. Deleting removes the last matching entry and leaves
        its section in place, even when it becomes empty.

        Args:
            path: Dotted path or resolved ConfigPath
            value: New value, or the DELETE sentinel

        Raises:
            InvalidPathError: If the path is malformed (model untouched)

        """
        operation: Operation = (
            DELETE if isinstance(value, Delete) else Set(value)
        )
        self.apply(path, operation)

    def append(self, path: str | ConfigPath, value: str) -> None:
        """Add a new entry for ``path`` after all existing ones.

        Args:
            path: Dotted path or resolved ConfigPath
            value: Value to add

        Raises:
            InvalidPathError: If the path is malformed (model untouched)

        """
        self.apply(path, Append(value))

    def unset(self, path: str | ConfigPath) -> bool:
        """Remove the last entry for ``path``.

        Returns:
            True if an entry was removed

        """
        return self.apply(path, DELETE)

    def unset_all(self, path: str | ConfigPath) -> int:
        """Remove every entry for ``path``.

        Returns:
            Number of entries removed

        """
        resolved = resolve(path)
        removed = 0
        while self._delete_last(resolved):
            removed += 1
        logger.debug("Removed %d entries for %s", removed, resolved)
        return removed

    def apply(self, path: str | ConfigPath, operation: Operation) -> bool:
        """Execute a tagged write operation.

        The path is resolved and the operation validated before anything
        is modified, so a failing call leaves the model as it was.

        Args:
            path: Dotted path or resolved ConfigPath
            operation: Set, Append or Delete

        Returns:
            True if the model changed (always True for Set and Append)

        Raises:
            InvalidPathError: If the path is malformed
            TypeError: If the operation or its value has the wrong type

        """
        resolved = resolve(path)

        if isinstance(operation, Delete):
            removed = self._delete_last(resolved)
            logger.debug("Delete %s: %s", resolved, removed)
            return removed

        if not isinstance(operation, (Set, Append)):
            msg = f"Unsupported operation: {operation!r}"
            raise TypeError(msg)
        if not isinstance(operation.value, str):
            msg = (
                "Config values must be str, got "
                f"{type(operation.value).__name__}"
            )
            raise TypeError(msg)

        if isinstance(operation, Set):
            matches = self._matching_entries(resolved)
            if matches:
                matches[-1][1].update(operation.value)
                logger.debug("Updated %s in place", resolved)
                return True

        section = self._target_section(resolved)
        section.entries.append(
            ConfigEntry(
                key=resolved.key_name or resolved.key,
                value=operation.value,
                newline=self.newline,
                dirty=True,
            )
        )
        logger.debug("Added entry for %s", resolved)
        return True

    def remove_section(
        self, section: str, subsection: str | None = None
    ) -> int:
        """Remove every block for (section, subsection) with its entries.

        Comment lines above a removed header are kept by handing them to
        the next record in the file.

        Args:
            section: Section name (case-insensitive)
            subsection: Subsection name (exact), or None

        Returns:
            Number of section headers removed

        Raises:
            InvalidPathError: If the section name is invalid

        """
        name, sub = resolve_section(section, subsection)
        removed = 0
        index = 0
        while index < len(self.sections):
            block = self.sections[index]
            if not block.matches(name, sub):
                index += 1
                continue
            del self.sections[index]
            removed += 1
            if block.leading:
                self._reattach(index, block.leading)
        logger.debug("Removed %d section(s) %s %s", removed, name, sub)
        return removed

    # ------------------------------------------------------------------
    # Lookup helpers
    # ------------------------------------------------------------------

    def _matching_sections(
        self, section: str, subsection: str | None
    ) -> list[Section]:
        return [
            block
            for block in self.sections
            if block.matches(section, subsection)
        ]

    def _matching_entries(
        self, path: ConfigPath
    ) -> list[tuple[Section, ConfigEntry]]:
        return [
            (block, entry)
            for block in self._matching_sections(path.section, path.subsection)
            for entry in block.find(path.key)
        ]

    def _target_section(self, path: ConfigPath) -> Section:
        """Return the last block for the path's section, creating one."""
        existing = self._matching_sections(path.section, path.subsection)
        if existing:
            return existing[-1]
        section = Section(
            name=path.section_name or path.section,
            subsection=path.subsection,
            newline=self.newline,
        )
        self.sections.append(section)
        logger.debug("Created section for %s", path)
        return section

    def _delete_last(self, path: ConfigPath) -> bool:
        matches = self._matching_entries(path)
        if not matches:
            return False
        block, entry = matches[-1]
        position = next(
            i
            for i, candidate in enumerate(block.entries)
            if candidate is entry
        )
        del block.entries[position]
        # Comments above the removed line stay where they were
        if entry.leading:
            if position < len(block.entries):
                block.entries[position].leading[:0] = entry.leading
            else:
                block.trailing[:0] = entry.leading
        return True

    def _reattach(self, index: int, lines: list[str]) -> None:
        """Give orphaned lines to the record now sitting at ``index``."""
        if index < len(self.sections):
            self.sections[index].leading[:0] = lines
        elif self.sections:
            self.sections[-1].trailing.extend(lines)
        else:
            self.preamble.extend(lines)
