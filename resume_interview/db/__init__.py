from .database import Database
from .repositories import QuestionRepository, ResumeRepository, SessionRepository

__all__ = [
    "Database",
    "QuestionRepository",
    "ResumeRepository",
    "SessionRepository",
]
