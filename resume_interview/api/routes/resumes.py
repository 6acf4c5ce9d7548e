import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from resume_interview.api.deps import get_resume_repository
from resume_interview.db import ResumeRepository
from resume_interview.schemas.resume import Resume, ResumeCreate

logger = logging.getLogger(__name__)

resume_router = APIRouter(prefix="/resumes")


@resume_router.post(
    "", response_model=Resume, response_model_exclude_unset=True, status_code=status.HTTP_201_CREATED
)
async def create_resume(
    payload: ResumeCreate,
    resumes: ResumeRepository = Depends(get_resume_repository),
):
    """Persist extracted resume text together with its AI analysis."""
    return await resumes.create(payload)


@resume_router.get("/latest", response_model=Optional[Resume], response_model_exclude_unset=True)
async def get_latest_resume(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    resumes: ResumeRepository = Depends(get_resume_repository),
):
    """
    Most recent resume for a user.
    Returns null when nothing has been uploaded yet.
    """
    resume = await resumes.latest(user_id)
    if resume is None:
        logger.info(f"No resume found (userId={user_id})")
    return resume


@resume_router.get("/{resume_id}", response_model=Resume, response_model_exclude_unset=True)
async def get_resume(
    resume_id: str,
    resumes: ResumeRepository = Depends(get_resume_repository),
):
    return await resumes.get(resume_id)
