"""
pytest configuration and fixtures.
"""

from __future__ import annotations

import itertools
from typing import Any

import anyio
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from core.errors import StorageError
from main import create_app
from students.dependencies import get_student_repository


class InMemoryStudentRepository:
    """
    Stand-in for StudentRepository that keeps rows in a dict.

    Mirrors the store's behaviour that matters to the handlers: generated ids,
    the unique email constraint, and zero-row writes. Set `failure` to make
    every call raise it.
    """

    def __init__(self) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self.writes = 0
        self.calls = 0
        self.failure: Exception | None = None
        self._ids = itertools.count(1)

    async def _enter(self) -> None:
        self.calls += 1
        # Yield to the event loop like a real round-trip would.
        await anyio.sleep(0)
        if self.failure is not None:
            raise self.failure

    def _email_taken(self, email: str, *, exclude_id: int | None = None) -> bool:
        return any(row["email"] == email and row["id"] != exclude_id for row in self.rows.values())

    async def list_students(self) -> list[dict[str, Any]]:
        await self._enter()
        return [dict(row) for row in self.rows.values()]

    async def get_student(self, student_id: int) -> dict[str, Any]:
        await self._enter()
        row = self.rows.get(student_id)
        if row is None:
            raise StorageError.not_found()
        return dict(row)

    async def create_student(self, *, name: str, email: str, age: int | None = None) -> int:
        await self._enter()
        if self._email_taken(email):
            raise StorageError.conflict("duplicate key value violates unique constraint")
        student_id = next(self._ids)
        self.rows[student_id] = {"id": student_id, "name": name, "email": email, "age": age}
        self.writes += 1
        return student_id

    async def update_student(self, student_id: int, *, name: str, email: str, age: int) -> None:
        await self._enter()
        if student_id not in self.rows:
            raise StorageError.not_found()
        if self._email_taken(email, exclude_id=student_id):
            raise StorageError.conflict("duplicate key value violates unique constraint")
        self.rows[student_id].update(name=name, email=email, age=age)
        self.writes += 1

    async def delete_student(self, student_id: int) -> None:
        await self._enter()
        if self.rows.pop(student_id, None) is None:
            raise StorageError.not_found()
        self.writes += 1


class FakePool:
    """
    Records every call made on it and answers from canned results.

    `results` maps a pool method name (fetch, fetchrow, execute) to either a
    value to return or an exception to raise.
    """

    def __init__(self, **results: Any) -> None:
        self.results = results
        self.calls: list[tuple[str, str, tuple]] = []
        self.closed = False

    async def _answer(self, method: str, sql: str, args: tuple) -> Any:
        self.calls.append((method, " ".join(sql.split()), args))
        result = self.results.get(method)
        if isinstance(result, BaseException):
            raise result
        return result

    async def fetch(self, sql: str, *args: Any) -> Any:
        return await self._answer("fetch", sql, args)

    async def fetchrow(self, sql: str, *args: Any) -> Any:
        return await self._answer("fetchrow", sql, args)

    async def execute(self, sql: str, *args: Any) -> Any:
        return await self._answer("execute", sql, args)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def repo() -> InMemoryStudentRepository:
    return InMemoryStudentRepository()


@pytest.fixture
def app(repo: InMemoryStudentRepository) -> FastAPI:
    """App without the pool lifespan, wired to the in-memory repository."""
    application = create_app(lifespan=None)
    application.dependency_overrides[get_student_repository] = lambda: repo
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
