"""
Google Sheets as a table source.

All five tables live as worksheets of one spreadsheet; the first row of
each worksheet is its header.
"""

import logging
import re
from typing import List, Optional

import httplib2
from google.auth.exceptions import TransportError
from googleapiclient.errors import HttpError

from ..config import Config
from ..errors import SheetsAccessError
from .base import TableRow, TableSource
from .google_auth import GoogleSheetsAuthenticator


def extract_spreadsheet_id(sheets_url: str) -> str:
    """
    Extract spreadsheet ID from Google Sheets URL.

    Args:
        sheets_url: Google Sheets URL

    Returns:
        Spreadsheet ID string

    Raises:
        ValueError: If URL format is invalid
    """
    patterns = [
        r'/spreadsheets/d/([a-zA-Z0-9-_]+)',  # Standard format
        r'id=([a-zA-Z0-9-_]+)',               # Alternative format
    ]

    for pattern in patterns:
        match = re.search(pattern, sheets_url or '')
        if match:
            return match.group(1)

    raise ValueError(f"Invalid Google Sheets URL format: {sheets_url}")


class GoogleSheetsTableSource(TableSource):
    """Reads each table from a worksheet of one spreadsheet."""

    def __init__(self, sheets_url: str, authenticator: Optional[GoogleSheetsAuthenticator] = None):
        """
        Initialize the source.

        Args:
            sheets_url: URL of the spreadsheet
            authenticator: Optional pre-configured authenticator

        Raises:
            ValueError: If the URL does not contain a spreadsheet id
        """
        self.logger = logging.getLogger(__name__)
        self.sheets_url = sheets_url
        self.spreadsheet_id = extract_spreadsheet_id(sheets_url)
        self.authenticator = authenticator or GoogleSheetsAuthenticator()
        self._service = None

    def _get_service(self):
        """Get authenticated Google Sheets service."""
        if not self._service:
            if not self.authenticator.authenticate():
                raise SheetsAccessError("Failed to authenticate with Google Sheets API")

            self._service = self.authenticator.get_sheets_service()
        return self._service

    def get_sheet_values(self, sheet_name: str) -> List[List[str]]:
        """
        Get all cell values of a worksheet.

        Args:
            sheet_name: Name of the worksheet

        Returns:
            2D list of cell values as strings, rows padded to equal length
        """
        service = self._get_service()
        try:
            result = service.spreadsheets().values().get(
                spreadsheetId=self.spreadsheet_id,
                range=f"'{sheet_name}'",
                valueRenderOption='FORMATTED_VALUE'
            ).execute()
        except HttpError as e:
            if e.resp.status == 403:
                raise SheetsAccessError(
                    "Access denied. Please ensure the spreadsheet is shared with your Google account."
                ) from e
            elif e.resp.status in (400, 404):
                # an unknown worksheet name comes back as 400
                raise FileNotFoundError(f"Worksheet not found: {sheet_name}") from e
            else:
                raise SheetsAccessError(f"Failed to retrieve sheet data: {e}") from e
        except (httplib2.HttpLib2Error, TransportError) as e:
            raise SheetsAccessError(f"Could not reach Google Sheets: {e}") from e

        values = result.get('values', [])
        if not values:
            return []

        max_cols = max(len(row) for row in values)
        return [
            [str(cell) if cell is not None else '' for cell in row + [''] * (max_cols - len(row))]
            for row in values
        ]

    def read_table(self, name: str) -> List[TableRow]:
        try:
            sheet_name = Config.SHEET_NAMES[name]
        except KeyError:
            raise ValueError(f"Unknown table: {name}")

        values = self.get_sheet_values(sheet_name)
        if not values:
            return []

        header, body = values[0], values[1:]
        rows = [
            dict(zip(header, row)) for row in body
            if any(cell.strip() for cell in row)
        ]

        self.logger.debug(f"Read {len(rows)} rows from worksheet {sheet_name}")
        return rows

    def describe(self) -> str:
        return f"spreadsheet {self.spreadsheet_id}"
