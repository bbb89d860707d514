"""
CSV files as a table source.
"""

import csv
import logging
from pathlib import Path
from typing import List, Optional

from ..config import Config
from ..errors import DataLoadingError
from .base import TableRow, TableSource


class CsvTableSource(TableSource):
    """Reads each table from a CSV file in a data directory."""

    def __init__(self, data_dir: Optional[str] = None):
        """
        Initialize the source.

        Args:
            data_dir: Directory holding the CSV files. If None, defaults to
                     Config.DATA_DIR.
        """
        self.logger = logging.getLogger(__name__)
        self.data_dir = Path(data_dir or Config.DATA_DIR)

    def path_for(self, name: str) -> Path:
        try:
            return self.data_dir / Config.CSV_FILES[name]
        except KeyError:
            raise ValueError(f"Unknown table: {name}")

    def read_table(self, name: str) -> List[TableRow]:
        path = self.path_for(name)
        if not path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")

        try:
            with open(path, 'r', encoding=Config.CSV_ENCODING, newline='') as f:
                reader = csv.DictReader(f)
                rows = [
                    row for row in reader
                    if any((value or '').strip() for value in row.values() if isinstance(value, str))
                ]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise DataLoadingError(f"Could not read {path}: {e}") from e

        self.logger.debug(f"Read {len(rows)} rows from {path.name}")
        return rows

    def describe(self) -> str:
        return str(self.data_dir)
