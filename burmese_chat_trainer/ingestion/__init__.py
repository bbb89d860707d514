"""
Ingestion module: reading the data tables from CSV files or Google Sheets.
"""

from burmese_chat_trainer.ingestion.base import TABLE_NAMES, TableSource
from burmese_chat_trainer.ingestion.tables import TrainerTables, normalize_row
from burmese_chat_trainer.ingestion.csv_source import CsvTableSource
from burmese_chat_trainer.ingestion.google_sheets_source import (
    GoogleSheetsTableSource,
    extract_spreadsheet_id
)

__all__ = [
    'TABLE_NAMES',
    'TableSource',
    'TrainerTables',
    'normalize_row',
    'CsvTableSource',
    'GoogleSheetsTableSource',
    'extract_spreadsheet_id'
]
