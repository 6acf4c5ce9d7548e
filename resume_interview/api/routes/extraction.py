import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile

from resume_interview.schemas.resume import ExtractedText
from resume_interview.services.extraction import extract_text

logger = logging.getLogger(__name__)

extraction_router = APIRouter()


@extraction_router.post("/extract-text", response_model=ExtractedText)
async def extract_text_from_upload(file: Optional[UploadFile] = File(default=None)):
    """
    Converts an uploaded resume (PDF, DOCX, DOC, TXT, RTF) into normalized plain text.

    Flow:
    1. Reject requests without a file (400)
    2. Read the upload into memory
    3. Dispatch on the declared MIME type and normalize the text

    Extraction failures (unsupported type, parser error, empty document) are
    AppErrors and answer 500 with the error message.
    """
    if file is None or not file.filename:
        logger.error("No resume file provided.")
        raise HTTPException(status_code=400, detail="No file uploaded")

    content = await file.read()
    mime_type = file.content_type or ""
    logger.info(f"Received upload '{file.filename}' ({mime_type}, {len(content)} bytes)")

    # Parsers are blocking; keep them off the event loop
    text = await asyncio.to_thread(extract_text, content, mime_type)
    return ExtractedText(text=text)
