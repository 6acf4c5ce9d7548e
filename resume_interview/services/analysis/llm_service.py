import asyncio
import logging
import time
from typing import Any, Optional

from resume_interview.core.config import ClientSettings, get_client_settings
from resume_interview.core.exceptions import InvalidAnalysisFormatError, NetworkFailureError
from resume_interview.core.llm import get_genai_client, get_generation_config
from resume_interview.core.logger import log_async_execution_time
from resume_interview.core.prompts import generate_guidance_prompt, generate_resume_analysis_prompt
from resume_interview.schemas.resume import ResumeAnalysis
from resume_interview.services.analysis.llm_parser import parse_llm_json
from resume_interview.services.analysis.validator import AnalysisInvalid, validate_analysis

logger = logging.getLogger(__name__)


class ResumeAnalyzer:
    """
    Gemini-backed resume analysis and answer guidance.

    Exactly two operations are used by the rest of the application:
    - analyze: resume text -> validated ResumeAnalysis
    - guide: question + context -> free-form markdown guidance

    Calls are made once; there is no retry. Provider failures surface as
    NetworkFailureError and malformed replies as InvalidAnalysisFormatError.
    """

    def __init__(self, client: Any = None, settings: Optional[ClientSettings] = None):
        """
        Args:
            client: A google.genai.Client (or anything exposing models.generate_content).
                    Defaults to the shared client from core.llm.
            settings: Client settings (defaults to get_client_settings()).
        """
        self.settings = settings or get_client_settings()
        self.client = client or get_genai_client(self.settings)
        self.model = self.settings.GEMINI_MODEL

    async def _generate(self, prompt: str, label: str) -> str:
        # The SDK call blocks, keep it off the event loop
        start_time = time.perf_counter()
        logger.info(f"[{label}] Gemini call started ({len(prompt)} chars)")
        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=self.model,
                contents=prompt,
                config=get_generation_config(self.settings),
            )
        except Exception as e:
            logger.error(f"[{label}] Gemini API error: {e}", exc_info=True)
            raise NetworkFailureError(f"AI provider request failed: {e}") from e

        elapsed = time.perf_counter() - start_time
        logger.info(f"[{label}] Gemini call completed in {elapsed:.2f}s")
        return response.text or ""

    @log_async_execution_time
    async def analyze(self, resume_text: str) -> ResumeAnalysis:
        """
        Analyze resume text into skills, experience, projects and question sets.

        Args:
            resume_text: Normalized resume text.

        Returns:
            The validated analysis.

        Raises:
            InvalidAnalysisFormatError: If the reply is not JSON or fails shape validation.
            NetworkFailureError: If the provider call fails.
        """
        raw_text = await self._generate(generate_resume_analysis_prompt(resume_text), "Resume Analysis")
        payload = parse_llm_json(raw_text)

        result = validate_analysis(payload)
        if isinstance(result, AnalysisInvalid):
            logger.error(f"[Resume Analysis] Invalid analysis format: {result.message}")
            raise InvalidAnalysisFormatError(
                "Failed to generate valid analysis format. Please try again.",
                details={"field": result.field, "reason": result.reason},
            )

        analysis = result.analysis
        logger.info(
            f"[Resume Analysis] ✅ {len(analysis.technical_skills)} skills, "
            f"{len(analysis.technical_questions)} technical / {len(analysis.behavioral_questions)} behavioral questions"
        )
        return analysis

    @log_async_execution_time
    async def guide(self, question: str, context: str) -> str:
        """
        Ask for guidance on answering one interview question.

        Args:
            question: The interview question.
            context: Question rationale and the candidate's answer.

        Returns:
            Markdown guidance text.
        """
        guidance = (await self._generate(generate_guidance_prompt(question, context), "Guidance")).strip()
        if not guidance:
            raise InvalidAnalysisFormatError("The AI returned empty guidance. Please try again.")
        return guidance
