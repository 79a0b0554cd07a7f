import logging

from ..sheets.client import GoogleSheetsClient
from ..sheets.models import COURSE_RANGE
from ..sheets.records import rows_to_records

logger = logging.getLogger(__name__)

# Field names, a descriptive second header, then at least one course
MIN_COURSE_ROWS = 3


class CourseCatalog:
    """Reads the course listing from the Course tab"""

    def __init__(self, sheets_client: GoogleSheetsClient, range_name: str = COURSE_RANGE):
        self.sheets_client = sheets_client
        self.range_name = range_name

    def list_courses(self) -> list[dict[str, str]]:
        """Return one record per course row, skipping the secondary header"""
        raw = self.sheets_client.read_range(self.range_name)
        if len(raw) < MIN_COURSE_ROWS:
            return []
        courses = rows_to_records(raw, header_row_index=0, first_data_row_index=2)
        logger.info(f"Loaded {len(courses)} courses")
        return courses
