from fastapi import Request

from ..bookings.ledger import BookingLedger
from ..courses.catalog import CourseCatalog
from ..feedback.collector import FeedbackCollector


def get_course_catalog(request: Request) -> CourseCatalog:
    return request.app.state.course_catalog


def get_booking_ledger(request: Request) -> BookingLedger:
    return request.app.state.booking_ledger


def get_feedback_collector(request: Request) -> FeedbackCollector:
    return request.app.state.feedback_collector
