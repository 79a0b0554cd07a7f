from fastapi import APIRouter
from pydantic import BaseModel


router = APIRouter(tags=["meta"])

API_DOCS = {
    "health": "/api/health",
    "feedback": "/api/feedback",
    "feedback (submit)": "/api/feedback",
    "feedback (mock)": "/api/feedback/mock",
    "courses": "/api/courses",
    "booking": "/api/booking",
}


class ApiIndex(BaseModel):
    message: str
    docs: dict[str, str]


class HealthStatus(BaseModel):
    ok: bool
    message: str


@router.get("/")
def index() -> ApiIndex:
    """Return a map of the available endpoints."""
    return ApiIndex(message="theDev Backend API", docs=API_DOCS)


@router.get("/api/health")
def health_check() -> HealthStatus:
    """Return health status of the API."""
    return HealthStatus(ok=True, message="Backend running")
