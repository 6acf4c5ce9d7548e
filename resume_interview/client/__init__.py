"""
Client application package.

- api_client.py: Async httpx client for the backend API
- upload.py: Resume upload flow (extract -> analyze -> persist)
- practice.py: Interview practice orchestration and transcript
- cli.py: Terminal front-end (upload, dashboard, practice)
"""

from .api_client import InterviewPrepClient
from .practice import InterviewPractice
from .upload import guess_mime_type, upload_resume

__all__ = [
    'InterviewPrepClient',
    'InterviewPractice',
    'guess_mime_type',
    'upload_resume',
]
