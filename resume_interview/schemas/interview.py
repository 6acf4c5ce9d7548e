from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from resume_interview.schemas.resume import CamelModel, ObjectIdStr

QuestionType = Literal["technical", "behavioral"]


# --- Sessions ---

class SessionCreate(CamelModel):
    """Body of POST /api/sessions."""
    resume_id: ObjectIdStr
    user_id: Optional[str] = None


class InterviewSession(CamelModel):
    """One practice run tied to a single resume."""
    id: ObjectIdStr = Field(..., alias="_id")
    user_id: Optional[str] = None
    resume_id: ObjectIdStr
    created_at: datetime


# --- Questions ---

class QuestionCreate(CamelModel):
    """Body of POST /api/questions."""
    session_id: ObjectIdStr
    question: str = Field(..., min_length=1)
    type: QuestionType
    context: Optional[str] = None


class AnswerUpdate(BaseModel):
    """Body of PATCH /api/questions/{id}."""
    answer: str


class InterviewQuestion(CamelModel):
    """A technical or behavioral prompt with an optional stored answer."""
    id: ObjectIdStr = Field(..., alias="_id")
    session_id: ObjectIdStr
    question: str
    answer: Optional[str] = None
    type: QuestionType
    context: Optional[str] = None
    created_at: datetime

    @property
    def is_answered(self) -> bool:
        return bool(self.answer)


# --- Practice Transcript ---

class ChatMessage(BaseModel):
    """One line of the visible interview transcript."""
    role: Literal["user", "ai"]
    content: str
