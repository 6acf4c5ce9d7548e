from .resume import (
    AnalysisQuestion, ExtractedText, KeyProject, Resume, ResumeAnalysis, ResumeCreate
)
from .interview import (
    AnswerUpdate, ChatMessage, InterviewQuestion, InterviewSession, QuestionCreate, QuestionType,
    SessionCreate
)

__all__ = [
    "AnalysisQuestion",
    "AnswerUpdate",
    "ChatMessage",
    "ExtractedText",
    "InterviewQuestion",
    "InterviewSession",
    "KeyProject",
    "QuestionCreate",
    "QuestionType",
    "Resume",
    "ResumeAnalysis",
    "ResumeCreate",
    "SessionCreate",
]
