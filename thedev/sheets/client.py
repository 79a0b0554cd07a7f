import logging
from pathlib import Path
from typing import Any

from google.api_core import retry
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..config import AppConfig
from ..errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"
TRANSIENT_STATUSES = {429, 500, 502, 503, 504}


def _is_transient(exc: Exception) -> bool:
    """Only rate limits and server-side hiccups are worth another read"""
    return isinstance(exc, HttpError) and exc.resp.status in TRANSIENT_STATUSES


def _describe(exc: Exception) -> str:
    if isinstance(exc, HttpError):
        return exc.reason or str(exc)
    return str(exc)


class GoogleSheetsClient:
    """Range-based reads and writes against a single spreadsheet"""

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

    def __init__(
        self,
        spreadsheet_id: str | None,
        credentials: service_account.Credentials | None = None,
        service: Any = None,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.service = service
        if self.service is None and credentials is not None:
            self.service = self._build_sheets_service(credentials)

    @classmethod
    def from_config(cls, config: AppConfig) -> "GoogleSheetsClient":
        """Authenticate once from the configured key file or discrete credentials"""
        return cls(config.spreadsheet_id, credentials=cls._load_credentials(config))

    @classmethod
    def _load_credentials(cls, config: AppConfig) -> service_account.Credentials | None:
        if config.credentials_file:
            key_path = Path(config.credentials_file)
            if not key_path.is_absolute():
                key_path = Path.cwd() / key_path
            if not key_path.exists():
                raise ConfigurationError(f"Credentials file not found: {key_path}")
            try:
                return service_account.Credentials.from_service_account_file(str(key_path), scopes=cls.SCOPES)
            except (ValueError, KeyError) as e:
                raise ConfigurationError(f"Invalid credentials file: {key_path}", details=str(e))

        if config.client_email and config.private_key:
            info = {
                "type": "service_account",
                "client_email": config.client_email,
                "private_key": config.private_key,
                "token_uri": TOKEN_URI,
            }
            try:
                return service_account.Credentials.from_service_account_info(info, scopes=cls.SCOPES)
            except (ValueError, KeyError) as e:
                raise ConfigurationError("Invalid GOOGLE_CLIENT_EMAIL / GOOGLE_PRIVATE_KEY", details=str(e))

        logger.warning("No Google credentials configured; spreadsheet requests will fail")
        return None

    def _build_sheets_service(self, credentials: service_account.Credentials):
        """Create and return an authorized Sheets API service object"""
        try:
            return build("sheets", "v4", credentials=credentials, cache_discovery=False)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise ConfigurationError("Could not initialize sheets service", details=str(e))

    def ensure_configured(self) -> None:
        """Fail before any remote call when the spreadsheet cannot be reached"""
        if not self.spreadsheet_id:
            raise ConfigurationError("SHEET_ID is not set")
        if self.service is None:
            raise ConfigurationError("Google service account credentials are not configured")

    @retry.Retry(predicate=_is_transient, timeout=30.0)
    def _get_values(self, range_name: str) -> dict:
        return (
            self.service.spreadsheets()
            .values()
            .get(spreadsheetId=self.spreadsheet_id, range=range_name)
            .execute()
        )

    def read_range(self, range_name: str) -> list[list[str]]:
        """Read a range into a matrix of cells; an empty range gives []"""
        self.ensure_configured()
        try:
            result = self._get_values(range_name)
        except Exception as e:
            logger.error(f"Error reading {range_name}: {e}")
            raise UpstreamError(f"Failed to read {range_name}", details=_describe(e))
        return result.get("values", [])

    def append_rows(self, range_name: str, rows: list[list[Any]]) -> None:
        """Append rows after the existing data in the range"""
        self.ensure_configured()
        try:
            self.service.spreadsheets().values().append(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption="USER_ENTERED",
                insertDataOption="INSERT_ROWS",
                body={"values": rows},
            ).execute()
        except Exception as e:
            logger.error(f"Error appending to {range_name}: {e}")
            raise UpstreamError(f"Failed to append to {range_name}", details=_describe(e))

    def append_row(self, range_name: str, row: list[Any]) -> None:
        self.append_rows(range_name, [row])

    def update_range(self, range_name: str, rows: list[list[Any]]) -> None:
        """Overwrite a fixed range"""
        self.ensure_configured()
        try:
            self.service.spreadsheets().values().update(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption="USER_ENTERED",
                body={"values": rows},
            ).execute()
        except Exception as e:
            logger.error(f"Error updating {range_name}: {e}")
            raise UpstreamError(f"Failed to update {range_name}", details=_describe(e))
