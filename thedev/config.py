import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .timestamps import DEFAULT_TIMEZONE


DEFAULT_PORT = 3000


@dataclass(frozen=True)
class AppConfig:
    """Configuration for the application, built once at startup"""

    spreadsheet_id: str | None = None
    credentials_file: str | None = None
    client_email: str | None = None
    private_key: str | None = None
    port: int = DEFAULT_PORT
    managed_hosting: bool = False
    timezone: str = DEFAULT_TIMEZONE
    log_dir: str | None = None


def normalize_private_key(raw: str | None) -> str | None:
    """Turn escaped newlines in an env-provided private key into real ones"""
    if not raw:
        return None
    if "\n" in raw:
        return raw.strip()
    return raw.replace("\\n", "\n").strip()


def _optional(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_config() -> AppConfig:
    """Load configuration from environment variables

    Nothing here is required: a missing spreadsheet id or missing credentials
    only fail the requests that need the spreadsheet.
    """
    load_dotenv()

    return AppConfig(
        spreadsheet_id=_optional("SHEET_ID"),
        credentials_file=_optional("GOOGLE_APPLICATION_CREDENTIALS") or _optional("GOOGLE_KEY_FILE"),
        client_email=_optional("GOOGLE_CLIENT_EMAIL"),
        private_key=normalize_private_key(os.getenv("GOOGLE_PRIVATE_KEY")),
        port=int(os.getenv("PORT") or DEFAULT_PORT),
        managed_hosting=bool(os.getenv("VERCEL")),
        timezone=_optional("TIMEZONE") or DEFAULT_TIMEZONE,
        log_dir=_optional("LOG_DIR"),
    )
