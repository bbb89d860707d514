"""
Base interface for tabular data sources.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

# Logical table names, in load order
TABLE_NAMES = ("consonants", "vowels", "medials", "conversations", "special_cases")

TableRow = Dict[str, str]


class TableSource(ABC):
    """
    Abstract source of the five data tables.

    A table is a list of rows, each a dict keyed by the header cell of its
    column. Implementations raise DataLoadingError (or FileNotFoundError
    for a missing table) when a table cannot be read.
    """

    @abstractmethod
    def read_table(self, name: str) -> List[TableRow]:
        """
        Read one table.

        Args:
            name: one of TABLE_NAMES

        Returns:
            List of rows in source order
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable location of the source, for log messages."""
        pass
