from fastapi import Depends, Request

from resume_interview.core.exceptions import DatabaseConnectionError
from resume_interview.db import Database, QuestionRepository, ResumeRepository, SessionRepository


def get_database(request: Request) -> Database:
    """
    Dependency returning the Database created in the application lifespan.
    """
    database = getattr(request.app.state, "database", None)
    if database is None or not database.is_connected:
        raise DatabaseConnectionError("Database is not connected")
    return database


def get_resume_repository(database: Database = Depends(get_database)) -> ResumeRepository:
    return ResumeRepository(database)


def get_session_repository(database: Database = Depends(get_database)) -> SessionRepository:
    return SessionRepository(database)


def get_question_repository(database: Database = Depends(get_database)) -> QuestionRepository:
    return QuestionRepository(database)
