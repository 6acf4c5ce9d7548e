"""
Terminal front-end for the interview practice client.

Usage:
    resume-interview upload path/to/resume.pdf
    resume-interview dashboard
    resume-interview practice

Inside `practice`, type an answer and press enter, or use:
    :list          show technical and behavioral questions
    :select <n>    switch to question n (numbering from :list)
    :quit          leave the session
"""
import argparse
import asyncio
import logging
import sys
from typing import Callable, List, Optional

from resume_interview.client.api_client import InterviewPrepClient
from resume_interview.client.practice import InterviewPractice
from resume_interview.client.upload import upload_resume
from resume_interview.core.config import get_client_settings
from resume_interview.core.exceptions import AppError, NoResumeError
from resume_interview.core.logger import setup_logger
from resume_interview.schemas.interview import InterviewQuestion
from resume_interview.schemas.resume import Resume
from resume_interview.services.analysis import ResumeAnalyzer

logger = logging.getLogger(__name__)


def render_dashboard(resume: Optional[Resume]) -> str:
    if resume is None:
        return "Welcome to InterviewPrep AI\nGet started by uploading your resume: resume-interview upload <file>"

    analysis = resume.analysis
    lines = ["Resume Analysis", ""]
    if analysis is None:
        lines.append("No analysis stored for this resume.")
        return "\n".join(lines)

    lines.append(f"Years of experience: {analysis.years_experience}")
    lines.append("Technical Skills: " + ", ".join(analysis.technical_skills))
    lines.append("")
    lines.append("Key Projects:")
    for project in analysis.key_projects:
        lines.append(f"  - {project.name}: {project.description}")
    lines.append("")
    lines.append("Start Interview Practice: resume-interview practice")
    return "\n".join(lines)


def render_question_list(practice: InterviewPractice) -> str:
    lines = []
    number = 1
    for question_type, title in (("technical", "Technical Questions"), ("behavioral", "Behavioral Questions")):
        lines.append(title)
        for question in practice.questions_of_type(question_type):
            marker = ">" if practice.current_question and practice.current_question.id == question.id else " "
            status = "  (Answered)" if question.is_answered else ""
            lines.append(f"{marker} {number}. {question.question}{status}")
            number += 1
    return "\n".join(lines)


def _numbered_questions(practice: InterviewPractice) -> List[InterviewQuestion]:
    return practice.questions_of_type("technical") + practice.questions_of_type("behavioral")


def _print_transcript(practice: InterviewPractice, start: int = 0, output: Callable[[str], None] = print):
    for message in practice.messages[start:]:
        speaker = "You" if message.role == "user" else "AI"
        output(f"\n[{speaker}] {message.content}")


async def run_practice(
    practice: InterviewPractice,
    user_id: Optional[str] = None,
    read_line: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
):
    """Interactive loop; AppErrors are shown and the loop continues."""
    try:
        await practice.start(user_id)
    except NoResumeError as e:
        output(f"No Resume Found. {e.message}")
        return
    if practice.current_question is None:
        output("The stored analysis contains no interview questions.")
        return

    output(render_question_list(practice))
    _print_transcript(practice, output=output)

    while True:
        try:
            line = read_line("\n> ").strip()
        except EOFError:
            break
        if not line:
            continue
        if line == ":quit":
            break
        if line == ":list":
            output(render_question_list(practice))
            continue
        if line.startswith(":select"):
            questions = _numbered_questions(practice)
            parts = line.split()
            if len(parts) != 2 or not parts[1].isdigit() or not 1 <= int(parts[1]) <= len(questions):
                output(f"Usage: :select <1-{len(questions)}>")
                continue
            practice.select_question(questions[int(parts[1]) - 1].id)
            _print_transcript(practice, output=output)
            continue

        shown = len(practice.messages) + 1  # the user's own line is already on screen
        try:
            await practice.submit_answer(line)
        except AppError as e:
            output(f"Error: Failed to process your response ({e.message})")
        _print_transcript(practice, start=shown, output=output)


async def _main(args: argparse.Namespace) -> int:
    settings = get_client_settings()
    api_url = args.api_url or settings.API_URL

    async with InterviewPrepClient(api_url) as api:
        if args.command == "dashboard":
            print(render_dashboard(await api.get_latest_resume(args.user_id)))
            return 0

        analyzer = ResumeAnalyzer(settings=settings)
        if args.command == "upload":
            print("Processing resume...")
            resume = await upload_resume(args.file, api, analyzer, user_id=args.user_id)
            print("Resume analyzed successfully!\n")
            print(render_dashboard(resume))
            return 0

        await run_practice(InterviewPractice(api, analyzer), user_id=args.user_id)
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-interview",
        description="Resume-driven interview practice",
        epilog="Reads GEMINI_API_KEY (or VITE_GEMINI_API_KEY) from the environment or .env.",
    )
    parser.add_argument("--api-url", default=None, help="Backend API root (defaults to API_URL)")
    parser.add_argument("--user-id", default=None, help="Owner recorded on resumes and sessions")
    parser.add_argument("--verbose", action="store_true", help="Show log output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    upload_parser = subparsers.add_parser("upload", help="Extract, analyze and store a resume")
    upload_parser.add_argument("file", help="PDF, DOCX, DOC, TXT or RTF resume")
    subparsers.add_parser("dashboard", help="Show the latest resume analysis")
    subparsers.add_parser("practice", help="Practice answering the generated questions")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(log_level=logging.INFO if args.verbose else logging.WARNING, log_to_file=False)
    try:
        return asyncio.run(_main(args))
    except AppError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
