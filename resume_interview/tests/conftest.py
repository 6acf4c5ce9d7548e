"""
Shared fixtures: in-process API over mongomock-motor and a scripted Gemini client.
"""
import io
import json
from types import SimpleNamespace

import httpx
import pytest
from mongomock_motor import AsyncMongoMockClient

from resume_interview.client.api_client import InterviewPrepClient
from resume_interview.core.config import Settings
from resume_interview.db import Database
from resume_interview.main import create_app
from resume_interview.services.analysis import ResumeAnalyzer


SAMPLE_ANALYSIS = {
    "technicalSkills": ["Python", "FastAPI", "MongoDB", "React", "Docker"],
    "yearsExperience": 5,
    "keyProjects": [
        {"name": "Job Board", "description": "Built a job board with FastAPI and React."},
        {"name": "Metrics Pipeline", "description": "Streamed service metrics into MongoDB."},
    ],
    "technicalQuestions": [
        {"question": "How do you design a REST API for pagination?", "context": "Built several FastAPI services."},
        {"question": "When would you choose MongoDB over PostgreSQL?", "context": "Listed MongoDB experience."},
    ],
    "behavioralQuestions": [
        {"question": "Tell me about a time you led a team.", "context": "Led a team of 4 developers."},
    ],
}

MODEL_ANALYSIS_REPLY = {
    "technical_skills": ["Python", "FastAPI", "MongoDB", "React", "Docker"],
    "years_experience": 5,
    "key_projects": [
        {"name": "Job Board", "description": "Built a job board with FastAPI and React."},
        {"name": "Metrics Pipeline", "description": "Streamed service metrics into MongoDB."},
    ],
    "technical_questions": [
        {"question": "How do you design a REST API for pagination?", "context": "Built several FastAPI services."},
        {"question": "When would you choose MongoDB over PostgreSQL?", "context": "Listed MongoDB experience."},
        {"question": "How do you keep Docker images small?", "context": "Uses Docker daily."},
    ],
    "behavioral_questions": [
        {"question": "Tell me about a time you led a team.", "context": "Led a team of 4 developers."},
        {"question": "Describe a difficult bug you fixed.", "context": "Production support experience."},
        {"question": "How do you handle disagreements?", "context": "Worked in cross-functional teams."},
    ],
}


class FakeModels:
    """Stands in for google.genai Client.models, replying from a script."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return SimpleNamespace(text=reply)


class FakeGenAIClient:
    def __init__(self, *replies):
        self.models = FakeModels(replies)


def fenced(payload) -> str:
    return "```json\n" + json.dumps(payload) + "\n```"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        MONGODB_URI="mongodb://localhost:27017",
        GEMINI_API_KEY="test-key",
        MONGODB_DATABASE="interview_prep_test",
    )


@pytest.fixture
def database():
    return Database.from_client(AsyncMongoMockClient(), "interview_prep_test")


@pytest.fixture
def app(settings, database):
    return create_app(settings=settings, database=database)


@pytest.fixture
async def http(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
async def api(app):
    client = InterviewPrepClient("http://testserver/api", transport=httpx.ASGITransport(app=app))
    yield client
    await client.aclose()


@pytest.fixture
def make_analyzer(settings):
    def factory(*replies):
        return ResumeAnalyzer(client=FakeGenAIClient(*replies), settings=settings)
    return factory


# --- Document builders ---

def make_pdf(lines) -> bytes:
    """A one-page PDF drawing each line with Helvetica, with a correct xref table."""
    operations = ["BT", "/F1 12 Tf", "72 720 Td", "14 TL"]
    for line in lines:
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        operations.append(f"({escaped}) Tj T*")
    operations.append("ET")
    stream = "\n".join(operations).encode("latin-1") if lines else b""

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(out.tell())
        out.write(f"{number} 0 obj\n".encode() + body + b"\nendobj\n")
    xref_offset = out.tell()
    out.write(f"xref\n0 {len(objects) + 1}\n".encode())
    out.write(b"0000000000 65535 f \n")
    for offset in offsets:
        out.write(f"{offset:010d} 00000 n \n".encode())
    out.write(f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_offset}\n%%EOF\n".encode())
    return out.getvalue()


def make_docx(paragraphs, table_rows=()) -> bytes:
    import docx

    document = docx.Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    if table_rows:
        table = document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for row, values in zip(table.rows, table_rows):
            for cell, value in zip(row.cells, values):
                cell.text = value
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()
