from typing import List

from fastapi import APIRouter, Depends, status

from resume_interview.api.deps import get_question_repository, get_session_repository
from resume_interview.db import QuestionRepository, SessionRepository
from resume_interview.schemas.interview import InterviewQuestion, InterviewSession, SessionCreate

session_router = APIRouter(prefix="/sessions")


@session_router.post("", response_model=InterviewSession, status_code=status.HTTP_201_CREATED)
async def create_session(
    payload: SessionCreate,
    sessions: SessionRepository = Depends(get_session_repository),
):
    """Start an interview session for an existing resume."""
    return await sessions.create(payload)


@session_router.get("/{session_id}/questions", response_model=List[InterviewQuestion])
async def list_session_questions(
    session_id: str,
    questions: QuestionRepository = Depends(get_question_repository),
):
    """All questions of a session in creation order, with their current answers."""
    return await questions.list_for_session(session_id)
