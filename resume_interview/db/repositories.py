"""
Collection-level persistence for resumes, sessions and questions.

Documents are stored with camelCase keys. References (resumeId, sessionId)
are stored as ObjectIds and checked for existence on insert.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from bson import ObjectId
from pymongo import DESCENDING, ASCENDING, ReturnDocument

from resume_interview.core.exceptions import InvalidIdentifierError, RecordNotFoundError
from resume_interview.db.database import Database
from resume_interview.schemas.interview import (
    InterviewQuestion, InterviewSession, QuestionCreate, SessionCreate
)
from resume_interview.schemas.resume import Resume, ResumeCreate

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def to_object_id(value: str, label: str = "id") -> ObjectId:
    """Parse a hex identifier, raising InvalidIdentifierError for malformed values."""
    if not ObjectId.is_valid(value):
        raise InvalidIdentifierError(f"Invalid {label}: {value}", details={label: value})
    return ObjectId(value)


class ResumeRepository:
    def __init__(self, database: Database):
        self.collection = database.resumes

    async def create(self, payload: ResumeCreate) -> Resume:
        now = _now()
        document = payload.model_dump(by_alias=True, exclude_unset=True)
        document.update(createdAt=now, updatedAt=now)
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(f"Resume {result.inserted_id} created ({len(payload.content)} chars)")
        return Resume.model_validate(document)

    async def get(self, resume_id: str) -> Resume:
        document = await self.collection.find_one({"_id": to_object_id(resume_id, "resumeId")})
        if document is None:
            raise RecordNotFoundError(f"Resume not found: {resume_id}")
        return Resume.model_validate(document)

    async def latest(self, user_id: Optional[str] = None) -> Optional[Resume]:
        """Most recent resume for user_id, or across all users when user_id is None."""
        query = {"userId": user_id} if user_id is not None else {}
        document = await self.collection.find_one(
            query, sort=[("createdAt", DESCENDING), ("_id", DESCENDING)]
        )
        return Resume.model_validate(document) if document else None

    async def exists(self, resume_id: ObjectId) -> bool:
        return await self.collection.count_documents({"_id": resume_id}, limit=1) > 0


class SessionRepository:
    def __init__(self, database: Database):
        self.collection = database.sessions
        self.resumes = ResumeRepository(database)

    async def create(self, payload: SessionCreate) -> InterviewSession:
        resume_id = to_object_id(payload.resume_id, "resumeId")
        if not await self.resumes.exists(resume_id):
            raise RecordNotFoundError(f"Resume not found: {payload.resume_id}")

        document = {"userId": payload.user_id, "resumeId": resume_id, "createdAt": _now()}
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(f"Interview session {result.inserted_id} created for resume {resume_id}")
        return InterviewSession.model_validate(document)

    async def exists(self, session_id: ObjectId) -> bool:
        return await self.collection.count_documents({"_id": session_id}, limit=1) > 0


class QuestionRepository:
    def __init__(self, database: Database):
        self.collection = database.questions
        self.sessions = SessionRepository(database)

    async def create(self, payload: QuestionCreate) -> InterviewQuestion:
        session_id = to_object_id(payload.session_id, "sessionId")
        if not await self.sessions.exists(session_id):
            raise RecordNotFoundError(f"Interview session not found: {payload.session_id}")

        document = {
            "sessionId": session_id,
            "question": payload.question,
            "answer": None,
            "type": payload.type,
            "context": payload.context,
            "createdAt": _now(),
        }
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return InterviewQuestion.model_validate(document)

    async def list_for_session(self, session_id: str) -> List[InterviewQuestion]:
        oid = to_object_id(session_id, "sessionId")
        if not await self.sessions.exists(oid):
            raise RecordNotFoundError(f"Interview session not found: {session_id}")

        cursor = self.collection.find({"sessionId": oid}).sort([("createdAt", ASCENDING), ("_id", ASCENDING)])
        documents = await cursor.to_list(length=None)
        return [InterviewQuestion.model_validate(document) for document in documents]

    async def set_answer(self, question_id: str, answer: str) -> InterviewQuestion:
        """Store answer on the question, replacing any previous one."""
        document = await self.collection.find_one_and_update(
            {"_id": to_object_id(question_id, "questionId")},
            {"$set": {"answer": answer}},
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            raise RecordNotFoundError(f"Question not found: {question_id}")
        logger.info(f"Answer saved for question {question_id} ({len(answer)} chars)")
        return InterviewQuestion.model_validate(document)
