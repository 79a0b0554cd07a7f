import logging
import random
from collections.abc import Callable, Mapping
from typing import Any

from ..sheets.client import GoogleSheetsClient
from ..sheets.models import (
    DEFAULT_TAB,
    FEEDBACK_HEADERS,
    REPORT_BLOCKS,
    REPORT_TYPES,
    Feedback,
    sheet_range,
    to_sheet_tab_name,
)
from ..sheets.records import rows_to_records
from ..timestamps import DEFAULT_TIMEZONE, now_string

logger = logging.getLogger(__name__)

MOCK_VERSION = "v0.1.0"
MOCK_CONTENTS = [
    "进入选单时偶发闪退",
    "按钮点击反馈不明显，建议加强动效",
    "完成关卡 3 后成就未解锁",
    "设定页面载入较慢",
    "战斗中技能冷却数字不清楚",
]

# Accepted request keys per field, canonical (simplified) name first
PROJECT_KEYS = ("专案", "專案", "项目", "項目", "project")
FIELD_ALIASES = {
    "回报类型": ("回报类型", "回報類型"),
    "回报区块": ("回报区块", "回報區塊"),
    "回报内容": ("回报内容", "回報內容"),
    "开发版本号": ("开发版本号", "開發版本號"),
}


def _first_present(payload: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if payload.get(key) is not None:
            return payload[key]
    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def project_from(payload: Mapping[str, Any]) -> Any:
    """Pick the project name out of a body or query mapping"""
    return _first_present(payload, PROJECT_KEYS)


class FeedbackCollector:
    """Stores playtest feedback, one tab per project"""

    def __init__(
        self,
        sheets_client: GoogleSheetsClient,
        timezone: str = DEFAULT_TIMEZONE,
        clock: Callable[[str], str] = now_string,
        rng: random.Random | None = None,
    ):
        self.sheets_client = sheets_client
        self.timezone = timezone
        self.clock = clock
        self.rng = rng or random.Random()

    def ensure_header(self, tab: str) -> bool:
        """Write the header row if the tab's first cell is empty

        Returns True when the header was written.
        """
        tab = to_sheet_tab_name(tab)
        header_range = sheet_range(tab, "A1:E1")
        rows = self.sheets_client.read_range(header_range)
        if rows and rows[0] and rows[0][0]:
            return False
        logger.info(f"Writing feedback header to tab {tab}")
        self.sheets_client.update_range(header_range, [FEEDBACK_HEADERS])
        return True

    def append(self, feedback: Feedback, tab: str = DEFAULT_TAB) -> str:
        """Append one feedback row, creating the header first if needed"""
        tab = to_sheet_tab_name(tab)
        self.ensure_header(tab)
        self.sheets_client.append_row(sheet_range(tab, "A:E"), feedback.to_row())
        return tab

    def submit(self, payload: Mapping[str, Any]) -> tuple[str, Feedback]:
        """Record client feedback in the project's tab

        Any client-supplied timestamp is ignored.
        """
        self.sheets_client.ensure_configured()
        tab = to_sheet_tab_name(project_from(payload))
        feedback = Feedback(
            report_time=self.clock(self.timezone),
            report_type=_as_text(_first_present(payload, FIELD_ALIASES["回报类型"])),
            report_block=_as_text(_first_present(payload, FIELD_ALIASES["回报区块"])),
            report_content=_as_text(_first_present(payload, FIELD_ALIASES["回报内容"])),
            dev_version=_as_text(_first_present(payload, FIELD_ALIASES["开发版本号"])),
        )
        self.append(feedback, tab)
        logger.info(f"Feedback written to tab {tab}")
        return tab, feedback

    def list_feedback(self, project: Any = None) -> list[dict[str, str]]:
        self.sheets_client.ensure_configured()
        tab = to_sheet_tab_name(project)
        raw = self.sheets_client.read_range(sheet_range(tab, "A1:E999"))
        return rows_to_records(raw, header_row_index=0, first_data_row_index=1)

    def create_mock(self) -> Feedback:
        return Feedback(
            report_time=self.clock(self.timezone),
            report_type=self.rng.choice(REPORT_TYPES),
            report_block=self.rng.choice(REPORT_BLOCKS),
            report_content=self.rng.choice(MOCK_CONTENTS),
            dev_version=MOCK_VERSION,
        )

    def submit_mock(self) -> tuple[str, Feedback]:
        """Write one synthetic report to the default tab"""
        self.sheets_client.ensure_configured()
        feedback = self.create_mock()
        tab = self.append(feedback, DEFAULT_TAB)
        return tab, feedback
