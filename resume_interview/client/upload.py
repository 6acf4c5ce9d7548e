"""Resume upload flow: file -> extracted text -> AI analysis -> persisted resume."""
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from resume_interview.client.api_client import InterviewPrepClient
from resume_interview.core.exceptions import EmptyContentError, ResumeFileError
from resume_interview.schemas.resume import Resume
from resume_interview.services.analysis import ResumeAnalyzer

logger = logging.getLogger(__name__)

# Extensions the upload view accepts, with the MIME type sent to the backend
MIME_TYPES_BY_EXTENSION: Dict[str, str] = {
    '.pdf': 'application/pdf',
    '.docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    '.doc': 'application/msword',
    '.txt': 'text/plain',
    '.rtf': 'application/rtf',
}
DEFAULT_MIME_TYPE = 'application/octet-stream'


def guess_mime_type(path: Path) -> str:
    """MIME type for a resume file, by extension; unknown extensions get application/octet-stream."""
    return MIME_TYPES_BY_EXTENSION.get(path.suffix.lower(), DEFAULT_MIME_TYPE)


async def upload_resume(
    file_path: Union[str, Path],
    api: InterviewPrepClient,
    analyzer: ResumeAnalyzer,
    user_id: Optional[str] = None,
) -> Resume:
    """
    Process one resume file end to end.

    Args:
        file_path: Path to the resume document.
        api: Backend client.
        analyzer: AI collaborator used for the analysis step.
        user_id: Optional owner recorded on the resume.

    Returns:
        The persisted resume, analysis included.

    Raises:
        NetworkFailureError: If extraction or persistence fails on the backend.
        ResumeFileError: If the file is missing or unreadable.
        EmptyContentError: If the backend returned blank text.
        InvalidAnalysisFormatError: If the AI reply fails validation.
    """
    path = Path(file_path)
    mime_type = guess_mime_type(path)
    logger.info(f"Processing file: {path.name} Type: {mime_type}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise ResumeFileError(f"Cannot read {path}: {e.strerror or e}", details={"path": str(path)}) from e

    text = await api.extract_text(path.name, data, mime_type)
    if not text.strip():
        raise EmptyContentError("The file appears to be empty")
    logger.info(f"Text extracted, length: {len(text)}")

    analysis = await analyzer.analyze(text)
    resume = await api.create_resume(text, analysis, user_id=user_id)
    logger.info(f"Resume analyzed successfully (id={resume.id})")
    return resume
