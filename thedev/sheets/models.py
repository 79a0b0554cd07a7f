# thedev/sheets/models.py
import re
from dataclasses import asdict, dataclass
from typing import Any

from .records import record_to_row


DEFAULT_TAB = "theDev"
MAX_TAB_NAME_LENGTH = 100
# Characters Google Sheets does not allow in a tab name
_UNSAFE_TAB_CHARS = re.compile(r"[\\/:*?\[\]]")

COURSE_RANGE = "Course!A1:ZZ999"
BOOKING_ID_RANGE = "Booking!A:A"
BOOKING_TAB = "Booking"

BOOKING_FIELDS = [
    "id",
    "sessionID",
    "studentName",
    "studentEmail",
    "studentContact",
    "studentNumber",
    "cost",
    "bookingNote",
    "bookingTime",
]
BOOKING_REQUIRED_FIELDS = ["sessionID", "studentName", "studentEmail", "studentContact"]
BOOKING_DEFAULTS = {"studentNumber": 1, "cost": 0, "bookingNote": ""}

FEEDBACK_HEADERS = ["回报时间", "回报类型", "回报区块", "回报内容", "开发版本号"]
# Suggested values for the client UI; submissions are never checked against them
REPORT_TYPES = ["bug", "优化", "记录", "建议", "其他"]
REPORT_BLOCKS = ["选单", "UX", "战斗", "设定", "商店", "主画面", "其他"]


def to_sheet_tab_name(name: Any) -> str:
    """Turn a free-form project name into a tab name Google Sheets accepts"""
    if not name or not isinstance(name, str):
        return DEFAULT_TAB
    safe = _UNSAFE_TAB_CHARS.sub("_", name).strip()[:MAX_TAB_NAME_LENGTH]
    return safe or DEFAULT_TAB


def sheet_range(tab: str, cells: str) -> str:
    """Build an A1 range with the tab name quoted, e.g. 'My tab'!A1:E1"""
    quoted = tab.replace("'", "''")
    return f"'{quoted}'!{cells}"


@dataclass
class Booking:
    """One row of the Booking tab"""

    id: int | float
    sessionID: Any
    studentName: Any
    studentEmail: Any
    studentContact: Any
    bookingTime: str
    studentNumber: Any = None
    cost: Any = None
    bookingNote: Any = None

    def to_row(self) -> list[Any]:
        return record_to_row(asdict(self), BOOKING_FIELDS, BOOKING_DEFAULTS)


@dataclass
class Feedback:
    """One playtest report; the timestamp is always generated server-side"""

    report_time: str
    report_type: str = ""
    report_block: str = ""
    report_content: str = ""
    dev_version: str = ""

    def to_record(self) -> dict[str, str]:
        """Key the fields by the sheet's header names"""
        return dict(
            zip(
                FEEDBACK_HEADERS,
                [self.report_time, self.report_type, self.report_block, self.report_content, self.dev_version],
            )
        )

    def to_row(self) -> list[str]:
        return record_to_row(self.to_record(), FEEDBACK_HEADERS)
