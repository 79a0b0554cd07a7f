import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...courses.catalog import CourseCatalog
from ...errors import TheDevError
from ..dependencies import get_course_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("")
def list_courses(catalog: CourseCatalog = Depends(get_course_catalog)) -> list[dict[str, str]]:
    """Return every course row keyed by the Course tab's header."""
    try:
        return catalog.list_courses()
    except TheDevError as e:
        # Callers only get a generic message; the cause stays in the server log
        logger.error(f"Failed to load courses: {e.message} {e.details or ''}".rstrip())
        return JSONResponse(status_code=500, content={"error": "Could not load courses"})
