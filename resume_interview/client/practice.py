"""
Interview practice orchestration.

Holds the state of one practice run: the resume, its session, the question
records created for it, the active question and the visible transcript.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from resume_interview.client.api_client import InterviewPrepClient
from resume_interview.core.exceptions import AppError, NoResumeError, RecordNotFoundError
from resume_interview.schemas.interview import ChatMessage, InterviewQuestion, InterviewSession, QuestionType
from resume_interview.schemas.resume import Resume
from resume_interview.services.analysis import ResumeAnalyzer

logger = logging.getLogger(__name__)

RESPONSE_PROMPT = "Please provide your response to this question."
RETRY_PROMPT = "Would you like to try answering this question again, or shall we move on to the next one?"
ERROR_REPLY = "Sorry, I encountered an error processing your response. Please try again."
MISSING_CONTEXT = "Not provided"


class InterviewPractice:
    """Chat-style practice over the questions of the latest resume."""

    def __init__(self, api: InterviewPrepClient, analyzer: ResumeAnalyzer):
        self.api = api
        self.analyzer = analyzer
        self.resume: Optional[Resume] = None
        self.session: Optional[InterviewSession] = None
        self.questions: List[InterviewQuestion] = []
        self.current_question: Optional[InterviewQuestion] = None
        self.messages: List[ChatMessage] = []

    async def start(self, user_id: Optional[str] = None) -> Optional[InterviewQuestion]:
        """
        Open a session for the latest resume and materialize its questions.

        Technical questions are created first, then behavioral ones, each in
        analysis order. The first question becomes active.

        Returns:
            The active question, or None if the analysis holds no questions.

        Raises:
            NoResumeError: If no resume has been uploaded yet.
        """
        resume = await self.api.get_latest_resume(user_id)
        if resume is None:
            raise NoResumeError("No resume found. Please upload your resume first to start the interview practice.")
        self.resume = resume
        self.session = await self.api.create_interview_session(resume.id, user_id=user_id)

        questions: List[InterviewQuestion] = []
        analysis = resume.analysis
        if analysis is not None:
            for question_type, items in (
                ("technical", analysis.technical_questions),
                ("behavioral", analysis.behavioral_questions),
            ):
                for item in items:
                    questions.append(
                        await self.api.save_question(self.session.id, item.question, question_type, item.context)
                    )
        self.questions = questions
        logger.info(f"Session {self.session.id} started with {len(questions)} questions")

        self.current_question = None
        self.messages = []
        if questions:
            self._activate(questions[0])
        return self.current_question

    def questions_of_type(self, question_type: QuestionType) -> List[InterviewQuestion]:
        return [question for question in self.questions if question.type == question_type]

    def select_question(self, question_id: str) -> InterviewQuestion:
        """
        Make another question active and reset the transcript to its prompt.

        A stored answer is replayed, followed by an offer to retry or move on.
        """
        question = self._find(question_id)
        self._activate(question)
        if question.answer:
            self.messages.append(ChatMessage(role="user", content=question.answer))
            self.messages.append(ChatMessage(role="ai", content=RETRY_PROMPT))
        return question

    async def submit_answer(self, text: str) -> Optional[str]:
        """
        Save an answer for the active question and ask the AI for guidance.

        Returns:
            The guidance text, or None when the input is blank or no question is active.

        Raises:
            AppError: If saving the answer or requesting guidance fails. The
                      transcript then ends with an apology message.
        """
        answer = text.strip()
        question = self.current_question
        if not answer or question is None:
            return None

        self.messages.append(ChatMessage(role="user", content=answer))
        try:
            updated = await self.api.update_question_answer(question.id, answer)
            self._replace(updated)

            context = f"Question Context: {question.context or MISSING_CONTEXT}\nUser's Answer: {answer}"
            guidance = await self.analyzer.guide(question.question, context)
        except AppError as e:
            logger.error(f"Error in interview response: {e}")
            self.messages.append(ChatMessage(role="ai", content=ERROR_REPLY))
            raise

        self.messages.append(ChatMessage(role="ai", content=guidance))
        return guidance

    def _activate(self, question: InterviewQuestion):
        self.current_question = question
        self.messages = [ChatMessage(role="ai", content=f"{question.question}\n\n{RESPONSE_PROMPT}")]

    def _find(self, question_id: str) -> InterviewQuestion:
        for question in self.questions:
            if question.id == question_id:
                return question
        raise RecordNotFoundError(f"Question not found: {question_id}")

    def _replace(self, updated: InterviewQuestion):
        self.questions = [updated if question.id == updated.id else question for question in self.questions]
        if self.current_question is not None and self.current_question.id == updated.id:
            self.current_question = updated
