"""
Student persistence (raw SQL).

Each method runs exactly one statement on the injected pool. Driver errors
never leave this module: they are classified into `StorageError`.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db
from core.errors import StorageError

from .schemas import INT4_MAX, INT4_MIN


def _classify(exc: Exception) -> StorageError:
    if isinstance(exc, asyncpg.UniqueViolationError):
        return StorageError.conflict(str(exc))
    return StorageError.other(str(exc) or exc.__class__.__name__)


# Connectivity problems surface as OSError (refused, reset) or InterfaceError.
_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def _require_storable_id(student_id: int) -> None:
    # The id column is INTEGER: anything outside it cannot match a row.
    if not INT4_MIN <= student_id <= INT4_MAX:
        raise StorageError.not_found(f"student {student_id} does not exist")


class StudentRepository:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self.pool = pool

    async def list_students(self) -> list[dict[str, Any]]:
        try:
            return await db.fetch_all(
                self.pool,
                """
                SELECT id, name, email, age
                FROM students
                """,
            )
        except _DRIVER_ERRORS as exc:
            raise _classify(exc) from exc

    async def get_student(self, student_id: int) -> dict[str, Any]:
        _require_storable_id(student_id)
        try:
            row = await db.fetch_one(
                self.pool,
                """
                SELECT id, name, email, age
                FROM students
                WHERE id = $1
                """,
                student_id,
            )
        except _DRIVER_ERRORS as exc:
            raise _classify(exc) from exc
        if row is None:
            raise StorageError.not_found(f"student {student_id} does not exist")
        return row

    async def create_student(self, *, name: str, email: str, age: int | None = None) -> int:
        try:
            row = await db.fetch_one(
                self.pool,
                """
                INSERT INTO students (name, email, age)
                VALUES ($1, $2, $3)
                RETURNING id
                """,
                name,
                email,
                age,
            )
        except _DRIVER_ERRORS as exc:
            raise _classify(exc) from exc
        if row is None:
            raise StorageError.other("insert returned no id")
        return int(row["id"])

    async def update_student(self, student_id: int, *, name: str, email: str, age: int) -> None:
        _require_storable_id(student_id)
        try:
            status = await db.execute(
                self.pool,
                """
                UPDATE students
                SET name = $1,
                    email = $2,
                    age = $3
                WHERE id = $4
                """,
                name,
                email,
                age,
                student_id,
            )
        except _DRIVER_ERRORS as exc:
            raise _classify(exc) from exc
        if db.affected_rows(status) == 0:
            raise StorageError.not_found(f"student {student_id} does not exist")

    async def delete_student(self, student_id: int) -> None:
        _require_storable_id(student_id)
        try:
            status = await db.execute(
                self.pool,
                """
                DELETE FROM students
                WHERE id = $1
                """,
                student_id,
            )
        except _DRIVER_ERRORS as exc:
            raise _classify(exc) from exc
        if db.affected_rows(status) == 0:
            raise StorageError.not_found(f"student {student_id} does not exist")
