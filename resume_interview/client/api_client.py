"""
Async HTTP client for the backend API.

Every failed call (transport error or non-2xx status) raises
NetworkFailureError carrying the server's error message when there is one.
No retries and no timeouts are applied; the user retries by re-submitting.
"""
import logging
from typing import Any, List, Optional, Tuple

import httpx

from resume_interview.core.exceptions import NetworkFailureError
from resume_interview.schemas.interview import InterviewQuestion, InterviewSession, QuestionType
from resume_interview.schemas.resume import Resume, ResumeAnalysis

logger = logging.getLogger(__name__)


class InterviewPrepClient:
    """Thin wrapper over the /api endpoints returning typed records."""

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            base_url: API root, e.g. http://localhost:3001/api
            transport: Optional httpx transport (tests pass httpx.ASGITransport).
        """
        self._client = httpx.AsyncClient(base_url=base_url.rstrip("/") + "/", timeout=None, transport=transport)

    async def __aenter__(self) -> "InterviewPrepClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"API Error: {method} {path} failed: {e}")
            raise NetworkFailureError(f"Request to {path} failed: {e}") from e

        if response.is_error:
            message, kind = _error_message(response)
            logger.error(f"API Error: {method} {path} -> {response.status_code}: {message}")
            raise NetworkFailureError(
                message, details={"status_code": response.status_code, "path": path, "kind": kind}
            )
        return response.json()

    async def extract_text(self, filename: str, content: bytes, mime_type: str) -> str:
        data = await self._request("POST", "extract-text", files={"file": (filename, content, mime_type)})
        return data["text"]

    async def create_resume(
        self, content: str, analysis: Optional[ResumeAnalysis], user_id: Optional[str] = None
    ) -> Resume:
        body = {
            "content": content,
            "analysis": analysis.model_dump(by_alias=True, exclude_unset=True) if analysis else None,
            "userId": user_id,
        }
        return Resume.model_validate(await self._request("POST", "resumes", json=body))

    async def get_latest_resume(self, user_id: Optional[str] = None) -> Optional[Resume]:
        params = {"userId": user_id} if user_id is not None else None
        data = await self._request("GET", "resumes/latest", params=params)
        return Resume.model_validate(data) if data else None

    async def create_interview_session(self, resume_id: str, user_id: Optional[str] = None) -> InterviewSession:
        data = await self._request("POST", "sessions", json={"resumeId": resume_id, "userId": user_id})
        return InterviewSession.model_validate(data)

    async def save_question(
        self, session_id: str, question: str, question_type: QuestionType, context: Optional[str] = None
    ) -> InterviewQuestion:
        body = {"sessionId": session_id, "question": question, "type": question_type, "context": context}
        return InterviewQuestion.model_validate(await self._request("POST", "questions", json=body))

    async def update_question_answer(self, question_id: str, answer: str) -> InterviewQuestion:
        data = await self._request("PATCH", f"questions/{question_id}", json={"answer": answer})
        return InterviewQuestion.model_validate(data)

    async def list_session_questions(self, session_id: str) -> List[InterviewQuestion]:
        data = await self._request("GET", f"sessions/{session_id}/questions")
        return [InterviewQuestion.model_validate(item) for item in data]


def _error_message(response: httpx.Response) -> Tuple[str, Optional[str]]:
    """Server error text plus the AppError kind when the backend reported one."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}", None
    if isinstance(body, dict):
        return str(body.get("error") or body.get("detail") or body), body.get("kind")
    return str(body), None
