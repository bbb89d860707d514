"""
OAuth2 access to the Google Sheets API.

A token saved by an earlier run is reused and refreshed when it has expired;
only when no usable token exists is the browser consent flow started.
"""

import logging
import os
from typing import Optional

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from ..config import Config
from ..errors import SheetsAccessError


class GoogleSheetsAuthenticator:
    """Keeps read-only Sheets credentials and the API client built from them."""

    def __init__(self, credentials_path: Optional[str] = None, token_path: Optional[str] = None):
        """
        Args:
            credentials_path: OAuth client file downloaded from Google Cloud Console
            token_path: where the user token is cached between runs
        """
        self.logger = logging.getLogger(__name__)
        self.credentials_path = credentials_path or Config.CREDENTIALS_FILE
        self.token_path = token_path or Config.TOKEN_FILE
        self.scopes = Config.GOOGLE_SHEETS_SCOPES
        self._credentials: Optional[Credentials] = None
        self._service = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self._credentials and self._credentials.valid)

    def authenticate(self) -> bool:
        """
        Obtain valid credentials, from the token cache if possible.

        Returns:
            True when credentials are ready; failures are logged
        """
        try:
            self._credentials = self._load_token()
            if self.is_authenticated:
                return True

            if self._credentials and self._credentials.expired and self._credentials.refresh_token:
                self.logger.info("Refreshing expired Google token")
                self._credentials.refresh(Request())
            else:
                self._credentials = self._run_flow()

            self._save_token()
            return True

        except Exception as e:
            self.logger.error(f"Authentication failed: {e}")
            return False

    def _load_token(self) -> Optional[Credentials]:
        if not os.path.exists(self.token_path):
            return None
        return Credentials.from_authorized_user_file(self.token_path, self.scopes)

    def _run_flow(self) -> Credentials:
        if not os.path.exists(self.credentials_path):
            raise FileNotFoundError(
                f"Credentials file not found: {self.credentials_path}. "
                "Download an OAuth client file from Google Cloud Console to read spreadsheets."
            )

        self.logger.info("Starting Google sign-in in the browser")
        flow = InstalledAppFlow.from_client_secrets_file(self.credentials_path, self.scopes)
        return flow.run_local_server(port=0)

    def _save_token(self) -> None:
        if self._credentials:
            with open(self.token_path, 'w') as token_file:
                token_file.write(self._credentials.to_json())

    def get_sheets_service(self):
        """
        Sheets v4 API client for the current credentials.

        Raises:
            SheetsAccessError: If authenticate() has not succeeded
        """
        if not self.is_authenticated:
            raise SheetsAccessError("Authentication required. Call authenticate() first.")

        if self._service is None:
            self._service = build('sheets', 'v4', credentials=self._credentials)

        return self._service

    def revoke_credentials(self) -> None:
        """Remove the stored token; the next authenticate() runs the full flow."""
        if os.path.exists(self.token_path):
            os.remove(self.token_path)
        self._credentials = None
        self._service = None
