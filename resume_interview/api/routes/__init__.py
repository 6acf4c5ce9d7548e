from fastapi import APIRouter

from .extraction import extraction_router
from .questions import question_router
from .resumes import resume_router
from .sessions import session_router

api_router = APIRouter()
api_router.include_router(resume_router, tags=["resumes"])
api_router.include_router(session_router, tags=["sessions"])
api_router.include_router(question_router, tags=["questions"])
api_router.include_router(extraction_router, tags=["extraction"])

__all__ = ["api_router"]
