"""Command handlers for the gitconf CLI."""

from .base import BaseCommandHandler
from .get import GetHandler
from .list import ListHandler
from .section import RemoveSectionHandler, SubsectionsHandler
from .set import SetHandler, UnsetHandler

__all__ = [
    "BaseCommandHandler",
    "GetHandler",
    "ListHandler",
    "RemoveSectionHandler",
    "SetHandler",
    "SubsectionsHandler",
    "UnsetHandler",
]
