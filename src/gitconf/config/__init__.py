"""Git configuration engine.

This package provides:
- ConfigPath/resolve: dotted key path resolution (from path.py)
- parse/GitConfigParser: text to model (from parser.py)
- ConfigModel, Section, ConfigEntry: in-memory model (from model.py)
- Set, Append, Delete, DELETE: tagged write operations (from operations.py)
- serialize: model to text (from serializer.py)
- GitConfigManager: load/save through caller-supplied I/O (from manager.py)
- Paths: config file locations for the CLI (from paths.py)
"""

from gitconf.config.manager import GitConfigManager
from gitconf.config.model import ConfigEntry, ConfigModel, Section
from gitconf.config.operations import DELETE, Append, Delete, Operation, Set
from gitconf.config.parser import GitConfigParser, parse
from gitconf.config.path import (
    ConfigPath,
    normalize_name,
    normalize_subsection,
    resolve,
)
from gitconf.config.paths import Paths
from gitconf.config.serializer import format_value, serialize

__all__ = [
    "DELETE",
    "Append",
    "ConfigEntry",
    "ConfigModel",
    "ConfigPath",
    "Delete",
    "GitConfigManager",
    "GitConfigParser",
    "Operation",
    "Paths",
    "Section",
    "Set",
    "format_value",
    "normalize_name",
    "normalize_subsection",
    "parse",
    "resolve",
    "serialize",
]
