"""
Static game data for the Bingo codec.

Provides the enumeration tables used to validate and index goal parameters,
and the display lookups used to describe and paint goals.
"""

from .service import GameDataService
from .tables import EnumerationTables, LIST_ALIASES, list_names_match
from .loaders import GameTablesLoader, TablesLoadError

__all__ = [
    "GameDataService",
    "EnumerationTables",
    "LIST_ALIASES",
    "list_names_match",
    "GameTablesLoader",
    "TablesLoadError",
]
