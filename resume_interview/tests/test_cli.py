"""
Tests for the terminal front-end: dashboard rendering, argument parsing and the practice loop.
"""
import pytest

from conftest import SAMPLE_ANALYSIS
from resume_interview.client import cli
from resume_interview.client.cli import build_parser, main, render_dashboard, run_practice
from resume_interview.client.practice import ERROR_REPLY, InterviewPractice
from resume_interview.schemas.resume import ResumeAnalysis


def scripted(lines):
    remaining = list(lines)

    def read_line(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    return read_line


def test_dashboard_without_resume_invites_upload():
    text = render_dashboard(None)
    assert "Welcome to InterviewPrep AI" in text
    assert "upload" in text


async def test_dashboard_shows_analysis(api):
    resume = await api.create_resume("Built APIs.", ResumeAnalysis.model_validate(SAMPLE_ANALYSIS))
    text = render_dashboard(resume)
    assert "Years of experience: 5" in text
    assert "Technical Skills: Python, FastAPI, MongoDB, React, Docker" in text
    assert "  - Job Board: Built a job board with FastAPI and React." in text


def test_parser_reads_subcommands():
    args = build_parser().parse_args(["--user-id", "u1", "upload", "cv.pdf"])
    assert (args.command, args.file, args.user_id) == ("upload", "cv.pdf", "u1")
    assert build_parser().parse_args(["practice"]).command == "practice"
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


async def test_practice_loop_without_resume(api, make_analyzer):
    output = []
    await run_practice(InterviewPractice(api, make_analyzer()), read_line=scripted([]), output=output.append)
    assert output[0].startswith("No Resume Found.")


async def test_practice_loop_answers_selects_and_quits(api, make_analyzer):
    await api.create_resume("Built APIs.", ResumeAnalysis.model_validate(SAMPLE_ANALYSIS), user_id="u1")
    practice = InterviewPractice(api, make_analyzer("Mention cursors."))
    output = []

    await run_practice(
        practice,
        user_id="u1",
        read_line=scripted(["", "I use offsets.", ":select 9", ":select 3", ":list", ":quit", "never read"]),
        output=output.append,
    )

    transcript = "\n".join(output)
    assert "Technical Questions" in transcript and "Behavioral Questions" in transcript
    assert "[AI] Mention cursors." in transcript
    assert "Usage: :select <1-3>" in transcript
    assert practice.current_question.type == "behavioral"
    assert "(Answered)" in output[-1]
    assert "> 3. Tell me about a time you led a team." in output[-1]


async def test_practice_loop_reports_errors_and_continues(api, make_analyzer):
    await api.create_resume("Built APIs.", ResumeAnalysis.model_validate(SAMPLE_ANALYSIS))
    practice = InterviewPractice(api, make_analyzer(RuntimeError("quota exceeded"), "Better."))
    output = []

    await run_practice(
        practice, read_line=scripted(["Offsets.", "Cursors."]), output=output.append
    )

    assert any(line.startswith("Error: Failed to process your response") for line in output)
    assert f"\n[AI] {ERROR_REPLY}" in output
    assert output[-1] == "\n[AI] Better."


def test_upload_of_missing_file_prints_one_line_error(tmp_path, monkeypatch, capsys, settings):
    monkeypatch.setattr(cli, "get_client_settings", lambda: settings)
    monkeypatch.setattr(cli, "ResumeAnalyzer", lambda settings: None)
    missing = tmp_path / "nope.pdf"

    exit_code = main(["--api-url", "http://testserver/api", "upload", str(missing)])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert err.startswith(f"Error: Cannot read {missing}")
    assert "Traceback" not in err
