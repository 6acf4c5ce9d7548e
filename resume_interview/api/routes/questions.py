from fastapi import APIRouter, Depends, status

from resume_interview.api.deps import get_question_repository
from resume_interview.db import QuestionRepository
from resume_interview.schemas.interview import AnswerUpdate, InterviewQuestion, QuestionCreate

question_router = APIRouter(prefix="/questions")


@question_router.post("", response_model=InterviewQuestion, status_code=status.HTTP_201_CREATED)
async def create_question(
    payload: QuestionCreate,
    questions: QuestionRepository = Depends(get_question_repository),
):
    return await questions.create(payload)


@question_router.patch("/{question_id}", response_model=InterviewQuestion)
async def update_question_answer(
    question_id: str,
    payload: AnswerUpdate,
    questions: QuestionRepository = Depends(get_question_repository),
):
    """Store the user's answer, overwriting any previous one."""
    return await questions.set_answer(question_id, payload.answer)
