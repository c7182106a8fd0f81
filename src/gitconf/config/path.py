"""Dotted key path resolution.

A dotted path such as ``remote.origin.url`` addresses one key of a git
configuration file. Resolution splits it into section, optional subsection
and key, folding case the way git does: section and key names are
case-insensitive, subsection names are compared exactly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from gitconf.exceptions import InvalidPathError

# A key starts with a letter, then letters, digits or dashes
KEY_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")

# Section names given through a dotted path cannot contain a dot
PATH_SECTION_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")


def normalize_name(name: str) -> str:
    """Fold a section or key name for lookups."""
    return name.lower()


def normalize_subsection(subsection: str | None) -> str | None:
    """Return the lookup form of a subsection, which is the name itself."""
    return subsection


@dataclass(frozen=True, slots=True)
class ConfigPath:
    """Resolved address of a configuration key.

    Attributes:
        section: Section name, lowercased
        subsection: Subsection name exactly as given, or None
        key: Key name, lowercased
        section_name: Section name as typed, used for new headers
        key_name: Key name as typed, used for new entries

    """

    section: str
    subsection: str | None
    key: str
    section_name: str | None = field(default=None, compare=False, repr=False)
    key_name: str | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        """Render the path in the dotted form used by ``git config -l``."""
        if self.subsection is None:
            return f"{self.section}.{self.key}"
        return f"{self.section}.{self.subsection}.{self.key}"


def resolve(path: str | ConfigPath) -> ConfigPath:
    """Resolve a dotted path into a ConfigPath.

    The first segment is the section and the last one is the key. With three
    or more segments, everything in between is joined back with dots and used
    verbatim as the subsection.

    Args:
        path: Dotted path (e.g. "user.name", "remote.origin.url") or an
            already resolved ConfigPath, which is returned unchanged

    Returns:
        The resolved path

    Raises:
        InvalidPathError: If the path has fewer than two segments, an empty
            segment, or names that could not be written back to a file

    Example:
        >>> resolve("Remote.Origin.URL")
        ConfigPath(section='remote', subsection='Origin', key='url')

    """
    if isinstance(path, ConfigPath):
        return path

    segments = path.split(".")
    if len(segments) < 2:  # noqa: PLR2004
        msg = "key does not contain a section"
        raise InvalidPathError(path, msg)
    if any(segment == "" for segment in segments):
        msg = "key contains an empty segment"
        raise InvalidPathError(path, msg)

    section, key = segments[0], segments[-1]
    middle = segments[1:-1]
    subsection = ".".join(middle) if middle else None

    if not PATH_SECTION_PATTERN.match(section):
        msg = f"invalid section name '{section}'"
        raise InvalidPathError(path, msg)
    if not KEY_NAME_PATTERN.match(key):
        msg = f"invalid key name '{key}'"
        raise InvalidPathError(path, msg)
    if subsection is not None and ("\n" in subsection or "\r" in subsection):
        msg = "subsection must not contain a newline"
        raise InvalidPathError(path, msg)

    return ConfigPath(
        section=normalize_name(section),
        subsection=normalize_subsection(subsection),
        key=normalize_name(key),
        section_name=section,
        key_name=key,
    )


def resolve_section(
    section: str, subsection: str | None = None
) -> tuple[str, str | None]:
    """Validate and normalize a section/subsection pair.

    Used by section-level operations that take no key.

    Args:
        section: Section name
        subsection: Optional subsection name

    Returns:
        Tuple of (normalized section, normalized subsection)

    Raises:
        InvalidPathError: If the section name is empty or invalid

    """
    label = section if subsection is None else f"{section}.{subsection}"
    if not section or not PATH_SECTION_PATTERN.match(section):
        msg = f"invalid section name '{section}'"
        raise InvalidPathError(label, msg)
    if subsection is not None and ("\n" in subsection or "\r" in subsection):
        msg = "subsection must not contain a newline"
        raise InvalidPathError(label, msg)
    return normalize_name(section), normalize_subsection(subsection)
