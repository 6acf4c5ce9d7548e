"""
MongoDB connection lifecycle.

A single Database object is created at process start (FastAPI lifespan),
connected once, stored on app.state and handed to request handlers through
the get_database dependency. Connection failure raises instead of leaving a
half-initialized handle behind.
"""
from __future__ import annotations

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from resume_interview.core.exceptions import DatabaseConnectionError
from resume_interview.core.logger import mask_secrets

logger = logging.getLogger(__name__)

RESUMES = "resumes"
SESSIONS = "interview_sessions"
QUESTIONS = "interview_questions"


class Database:
    """Owns the Mongo client and exposes the three application collections."""

    def __init__(self, uri: str, name: str, client: Optional[AsyncIOMotorClient] = None):
        self.uri = uri
        self.name = name
        self._client = client
        self._db: Optional[AsyncIOMotorDatabase] = client[name] if client is not None else None

    @classmethod
    def from_client(cls, client: AsyncIOMotorClient, name: str) -> "Database":
        """Wrap an already-created client (used by tests and embedding code)."""
        return cls(uri="", name=name, client=client)

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    async def connect(self) -> "Database":
        """
        Open the client and verify the server answers a ping.

        Raises:
            DatabaseConnectionError: If the server cannot be reached.
        """
        if self._db is not None:
            return self

        client = AsyncIOMotorClient(self.uri)
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            logger.error(f"MongoDB connection error ({mask_secrets(self.uri)}): {e}")
            raise DatabaseConnectionError(f"Could not connect to MongoDB: {e}") from e

        self._client = client
        self._db = client[self.name]
        logger.info(f"MongoDB connected successfully (database={self.name})")
        return self

    async def ping(self) -> bool:
        """Liveness check used by /health."""
        if self._db is None:
            return False
        try:
            await self._db.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def close(self):
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._db = None

    def _collection(self, name: str) -> AsyncIOMotorCollection:
        if self._db is None:
            raise DatabaseConnectionError("Database is not connected")
        return self._db[name]

    @property
    def resumes(self) -> AsyncIOMotorCollection:
        return self._collection(RESUMES)

    @property
    def sessions(self) -> AsyncIOMotorCollection:
        return self._collection(SESSIONS)

    @property
    def questions(self) -> AsyncIOMotorCollection:
        return self._collection(QUESTIONS)
