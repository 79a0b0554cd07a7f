class TheDevError(Exception):
    """Base class for errors that map onto an HTTP response"""

    status_code = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict[str, str]:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ConfigurationError(TheDevError):
    """Spreadsheet id or credentials are missing or unusable"""


class ValidationError(TheDevError):
    """Request is missing required fields"""

    status_code = 400


class UpstreamError(TheDevError):
    """A call to the Google Sheets API failed"""
