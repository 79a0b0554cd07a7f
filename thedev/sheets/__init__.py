from .client import GoogleSheetsClient
from .records import record_to_row, rows_to_records


__all__ = [
    "GoogleSheetsClient",
    "record_to_row",
    "rows_to_records",
]
