"""Tagged write operations accepted by ConfigModel.apply().

Writing is expressed as an explicit operation instead of overloading a
nullable value: ``Set("x")`` stores a value (the empty string included),
``Append("x")`` adds another value to a multi-valued key and ``DELETE``
removes the last value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Set:
    """Store ``value``, replacing the last existing value of the key."""

    value: str


@dataclass(frozen=True, slots=True)
class Append:
    """Add ``value`` as a new entry after any existing ones."""

    value: str


@dataclass(frozen=True, slots=True)
class Delete:
    """Remove the last value of the key."""

    def __repr__(self) -> str:
        """Return the sentinel's public name."""
        return "DELETE"


# Delete sentinel accepted by ConfigModel.set()
DELETE: Final[Delete] = Delete()

Operation = Set | Append | Delete
