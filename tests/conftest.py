import random
import re

import pytest
from fastapi.testclient import TestClient

from thedev.api.main import create_app
from thedev.config import AppConfig
from thedev.sheets.client import GoogleSheetsClient


_RANGE = re.compile(r"^([A-Z]+)(\d*)(?::([A-Z]+)(\d*))?$")


def _column_index(letters: str) -> int:
    index = 0
    for char in letters:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index - 1


def parse_range(range_name: str) -> tuple[str, int, int | None, int, int | None]:
    """Split an A1 range into (tab, first_row, last_row, first_col, last_col), zero-based"""
    tab, _, cells = range_name.rpartition("!")
    if tab.startswith("'") and tab.endswith("'"):
        tab = tab[1:-1].replace("''", "'")
    match = _RANGE.match(cells)
    if not match:
        raise ValueError(f"Unable to parse range: {range_name}")
    first_col, first_row, last_col, last_row = match.groups()
    last_col = last_col or first_col
    return (
        tab,
        int(first_row) - 1 if first_row else 0,
        int(last_row) - 1 if last_row else None,
        _column_index(first_col),
        _column_index(last_col),
    )


class _Request:
    def __init__(self, action):
        self._action = action

    def execute(self):
        return self._action()


class FakeSheetsService:
    """In-memory stand-in for the Sheets v4 service, spreadsheets().values() only"""

    def __init__(self, tabs: dict[str, list[list]] | None = None):
        self.tabs = tabs if tabs is not None else {}
        self.calls: list[tuple[str, str]] = []
        self.requests: list[dict] = []
        self.fail_reads: dict[str, Exception] = {}
        self.fail_writes: Exception | None = None

    def spreadsheets(self):
        return self

    def values(self):
        return self

    def _grid(self, tab: str) -> list[list]:
        if tab not in self.tabs:
            raise Exception(f"Unable to parse range: {tab}")
        return self.tabs[tab]

    def get(self, spreadsheetId, range):
        self.calls.append(("get", range))

        def action():
            tab, first_row, last_row, first_col, last_col = parse_range(range)
            if tab in self.fail_reads:
                raise self.fail_reads[tab]
            grid = self._grid(tab)
            stop = None if last_row is None else last_row + 1
            rows = [[str(cell) for cell in row[first_col : last_col + 1]] for row in grid[first_row:stop]]
            while rows and not rows[-1]:
                rows.pop()
            return {"values": rows} if rows else {"range": range}

        return _Request(action)

    def append(self, spreadsheetId, range, valueInputOption, insertDataOption, body):
        self.calls.append(("append", range))
        self.requests.append({"range": range, "valueInputOption": valueInputOption, "insertDataOption": insertDataOption})

        def action():
            if self.fail_writes:
                raise self.fail_writes
            tab = parse_range(range)[0]
            self._grid(tab).extend(list(row) for row in body["values"])
            return {"updates": {"updatedRows": len(body["values"])}}

        return _Request(action)

    def update(self, spreadsheetId, range, valueInputOption, body):
        self.calls.append(("update", range))

        def action():
            if self.fail_writes:
                raise self.fail_writes
            tab, first_row, _, first_col, _ = parse_range(range)
            grid = self._grid(tab)
            for offset, values in enumerate(body["values"]):
                while len(grid) <= first_row + offset:
                    grid.append([])
                row = grid[first_row + offset]
                row.extend([""] * (first_col + len(values) - len(row)))
                row[first_col : first_col + len(values)] = list(values)
            return {"updatedRows": len(body["values"])}

        return _Request(action)

    def writes(self) -> list[tuple[str, str]]:
        return [call for call in self.calls if call[0] != "get"]


def fixed_clock(timezone: str) -> str:
    return "2025/3/14 下午3:09:26"


@pytest.fixture
def service():
    return FakeSheetsService(
        {
            "Course": [
                ["courseID", "title", "price"],
                ["Course ID", "Course title", "Price (NTD)"],
                ["C1", "Intro to Python", "1200"],
                ["C2", "Data Analysis"],
            ],
            "Booking": [["id", "sessionID", "studentName"]],
            "theDev": [],
        }
    )


@pytest.fixture
def sheets_client(service):
    return GoogleSheetsClient("sheet-123", service=service)


@pytest.fixture
def app(sheets_client):
    app = create_app(AppConfig(spreadsheet_id="sheet-123"), sheets_client=sheets_client, rng=random.Random(7))
    app.state.booking_ledger.clock = fixed_clock
    app.state.feedback_collector.clock = fixed_clock
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def unconfigured_client(service):
    sheets_client = GoogleSheetsClient(None, service=service)
    return TestClient(create_app(AppConfig(), sheets_client=sheets_client))
