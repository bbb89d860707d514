"""
Tests for the Google Sheets table source and authenticator (API mocked).
"""

from unittest.mock import MagicMock, Mock, patch

import httplib2
import pytest
from google.auth.exceptions import TransportError
from googleapiclient.errors import HttpError

from burmese_chat_trainer.app import TrainerApp
from burmese_chat_trainer.errors import SheetsAccessError
from burmese_chat_trainer.ingestion.google_auth import GoogleSheetsAuthenticator
from burmese_chat_trainer.ingestion.google_sheets_source import (
    GoogleSheetsTableSource,
    extract_spreadsheet_id
)


SHEET_URL = "https://docs.google.com/spreadsheets/d/abc123_XYZ-9/edit#gid=0"


def http_error(status):
    resp = Mock()
    resp.status = status
    resp.reason = "error"
    return HttpError(resp, b"{}")


def make_source(values=None, error=None):
    """Source whose Sheets service returns the given values or raises."""
    authenticator = Mock(spec=GoogleSheetsAuthenticator)
    authenticator.authenticate.return_value = True
    service = MagicMock()
    request = service.spreadsheets.return_value.values.return_value.get.return_value
    if error is not None:
        request.execute.side_effect = error
    else:
        request.execute.return_value = {"values": values or []}
    authenticator.get_sheets_service.return_value = service
    return GoogleSheetsTableSource(SHEET_URL, authenticator), service


class TestExtractSpreadsheetId:
    """Test spreadsheet id extraction."""

    def test_standard_url(self):
        """Test the /spreadsheets/d/<id> form."""
        assert extract_spreadsheet_id(SHEET_URL) == "abc123_XYZ-9"

    def test_id_parameter(self):
        """Test the ?id=<id> form."""
        assert extract_spreadsheet_id("https://drive.google.com/open?id=xyz789") == "xyz789"

    def test_invalid_url(self):
        """Test a URL without an id is rejected."""
        with pytest.raises(ValueError):
            extract_spreadsheet_id("https://example.com/sheet")


class TestGoogleSheetsTableSource:
    """Test worksheet reading."""

    def test_header_row_becomes_keys(self):
        """Test the first row is used as header and short rows are padded."""
        source, service = make_source([
            ["Burmese", "Marathi1", "Marathi2", "English"],
            ["က", "क", "ग", "k"],
            ["ခ", "ख"],
            ["", ""],
        ])
        rows = source.read_table("consonants")

        assert rows == [
            {"Burmese": "က", "Marathi1": "क", "Marathi2": "ग", "English": "k"},
            {"Burmese": "ခ", "Marathi1": "ख", "Marathi2": "", "English": ""},
        ]
        get = service.spreadsheets.return_value.values.return_value.get
        assert get.call_args.kwargs["spreadsheetId"] == "abc123_XYZ-9"
        assert get.call_args.kwargs["range"] == "'Consonants'"

    def test_empty_sheet(self):
        """Test an empty worksheet gives no rows."""
        source, _ = make_source([])
        assert source.read_table("vowels") == []

    def test_service_created_once(self):
        """Test authentication happens once per source."""
        source, _ = make_source([["Tag"], ["Title"]])
        source.read_table("conversations")
        source.read_table("conversations")
        assert source.authenticator.authenticate.call_count == 1

    def test_access_denied(self):
        """Test a 403 becomes SheetsAccessError."""
        source, _ = make_source(error=http_error(403))
        with pytest.raises(SheetsAccessError):
            source.read_table("medials")

    def test_missing_worksheet(self):
        """Test an unknown worksheet is reported as not found."""
        source, _ = make_source(error=http_error(400))
        with pytest.raises(FileNotFoundError):
            source.read_table("special_cases")

    def test_other_http_error(self):
        """Test other API failures become SheetsAccessError."""
        source, _ = make_source(error=http_error(500))
        with pytest.raises(SheetsAccessError):
            source.read_table("vowels")

    @pytest.mark.parametrize("error", [
        httplib2.ServerNotFoundError("Unable to find the server at sheets.googleapis.com"),
        TransportError("connection reset"),
    ])
    def test_network_failure(self, error):
        """Test transport errors become SheetsAccessError."""
        source, _ = make_source(error=error)
        with pytest.raises(SheetsAccessError):
            source.read_table("consonants")

    def test_offline_load_keeps_defaults(self):
        """Test loading from an unreachable spreadsheet warns per table and keeps built-in data."""
        source, _ = make_source(error=httplib2.ServerNotFoundError("Unable to find the server"))
        app = TrainerApp(source=source)
        app.load_data()

        assert len(app.load_warnings) == 5
        assert len(app.topics) == 2
        assert app.transliterate("က") == "क"

    def test_authentication_failure(self):
        """Test a failed OAuth flow raises SheetsAccessError."""
        authenticator = Mock(spec=GoogleSheetsAuthenticator)
        authenticator.authenticate.return_value = False
        source = GoogleSheetsTableSource(SHEET_URL, authenticator)
        with pytest.raises(SheetsAccessError):
            source.read_table("vowels")

    def test_unknown_table(self):
        """Test an unknown table name is rejected before any API call."""
        source, service = make_source([])
        with pytest.raises(ValueError):
            source.read_table("tones")
        service.spreadsheets.assert_not_called()


class TestGoogleSheetsAuthenticator:
    """Test the OAuth flow with mocked Google libraries."""

    def test_missing_credentials_file(self, tmp_path):
        """Test authentication fails cleanly without credentials.json."""
        auth = GoogleSheetsAuthenticator(
            credentials_path=str(tmp_path / "credentials.json"),
            token_path=str(tmp_path / "token.json")
        )
        assert auth.authenticate() is False

    def test_flow_saves_token(self, tmp_path):
        """Test a completed flow stores the token for the next run."""
        credentials_path = tmp_path / "credentials.json"
        credentials_path.write_text("{}")
        token_path = tmp_path / "token.json"

        with patch('burmese_chat_trainer.ingestion.google_auth.InstalledAppFlow') as mock_flow_class:
            mock_creds = MagicMock()
            mock_creds.valid = True
            mock_creds.to_json.return_value = '{"token": "t"}'
            mock_flow_class.from_client_secrets_file.return_value.run_local_server.return_value = mock_creds

            auth = GoogleSheetsAuthenticator(str(credentials_path), str(token_path))
            assert auth.authenticate() is True

        assert token_path.read_text() == '{"token": "t"}'

    def test_service_requires_authentication(self, tmp_path):
        """Test asking for the service before authenticating fails."""
        auth = GoogleSheetsAuthenticator(token_path=str(tmp_path / "token.json"))
        with pytest.raises(SheetsAccessError):
            auth.get_sheets_service()

    def test_service_built_for_sheets(self, tmp_path):
        """Test the Sheets v4 API client is built with the credentials."""
        auth = GoogleSheetsAuthenticator(token_path=str(tmp_path / "token.json"))
        auth._credentials = MagicMock(valid=True)

        with patch('burmese_chat_trainer.ingestion.google_auth.build') as mock_build:
            service = auth.get_sheets_service()

        mock_build.assert_called_once_with('sheets', 'v4', credentials=auth._credentials)
        assert service is mock_build.return_value

    def test_revoke_removes_token(self, tmp_path):
        """Test revoking deletes the stored token."""
        token_path = tmp_path / "token.json"
        token_path.write_text("{}")
        auth = GoogleSheetsAuthenticator(token_path=str(token_path))
        auth.revoke_credentials()
        assert not token_path.exists()
