from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from pydantic import BaseModel

from ...feedback.collector import FeedbackCollector, project_from
from ..dependencies import get_feedback_collector


router = APIRouter(prefix="/api/feedback", tags=["feedback"])


class FeedbackResponse(BaseModel):
    success: bool
    message: str
    data: dict[str, str]


def _mock_feedback(collector: FeedbackCollector) -> FeedbackResponse:
    tab, feedback = collector.submit_mock()
    return FeedbackResponse(success=True, message=f"Mock feedback written to tab {tab}", data=feedback.to_record())


@router.get("/mock")
def mock_feedback_get(collector: FeedbackCollector = Depends(get_feedback_collector)) -> FeedbackResponse:
    """Write one synthetic report to the default tab (handy from a browser)."""
    return _mock_feedback(collector)


@router.post("/mock")
def mock_feedback_post(collector: FeedbackCollector = Depends(get_feedback_collector)) -> FeedbackResponse:
    """Write one synthetic report to the default tab."""
    return _mock_feedback(collector)


@router.post("")
def submit_feedback(
    payload: dict[str, Any] | None = Body(default=None),
    collector: FeedbackCollector = Depends(get_feedback_collector),
) -> FeedbackResponse:
    """Record one report in the tab named after its project."""
    tab, feedback = collector.submit(payload or {})
    return FeedbackResponse(success=True, message=f"Feedback written to tab {tab}", data=feedback.to_record())


@router.get("")
def list_feedback(
    request: Request,
    collector: FeedbackCollector = Depends(get_feedback_collector),
) -> list[dict[str, str]]:
    """Return the reports stored for a project (query: project)."""
    return collector.list_feedback(project_from(request.query_params))
