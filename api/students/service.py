"""
Student business logic.

Scope:
- presence checks on create/update payloads
- mapping classified storage errors onto HTTP errors
- operator log lines for every write and every failure
"""

from __future__ import annotations

import logging
from typing import Any

from core.errors import (
    BadRequestError,
    ConflictError,
    InternalError,
    NotFoundError,
    StorageError,
    StorageErrorKind,
)

from . import schemas
from .repository import StudentRepository

logger = logging.getLogger(__name__)

STUDENT_NOT_FOUND = "Student not found"


async def list_students(repo: StudentRepository) -> list[dict[str, Any]]:
    try:
        return await repo.list_students()
    except StorageError as exc:
        logger.exception("Error fetching students: %s", exc.message)
        raise InternalError() from exc


async def get_student(repo: StudentRepository, student_id: int) -> dict[str, Any]:
    try:
        return await repo.get_student(student_id)
    except StorageError as exc:
        if exc.kind is StorageErrorKind.NOT_FOUND:
            raise NotFoundError(STUDENT_NOT_FOUND) from exc
        logger.exception("Error fetching student %s: %s", student_id, exc.message)
        raise InternalError() from exc


async def create_student(repo: StudentRepository, payload: schemas.StudentCreate) -> dict[str, Any]:
    if not payload.name or not payload.email:
        raise BadRequestError("Name and email are required fields")

    try:
        student_id = await repo.create_student(name=payload.name, email=payload.email, age=payload.age)
    except StorageError as exc:
        logger.exception("Error creating student: %s", exc.message)
        if exc.kind is StorageErrorKind.CONFLICT:
            raise ConflictError("This email address is already in use.") from exc
        raise InternalError() from exc

    logger.info("INSERT Operation: New student created with ID: %s", student_id)
    return {"message": "Student created successfully", "studentId": student_id}


async def update_student(
    repo: StudentRepository,
    student_id: int,
    payload: schemas.StudentUpdate,
) -> dict[str, str]:
    # Full replace only: every column must be supplied.
    if not payload.name or not payload.email or not payload.age:
        raise BadRequestError("Please provide name, email, and age to update.")

    try:
        await repo.update_student(student_id, name=payload.name, email=payload.email, age=payload.age)
    except StorageError as exc:
        if exc.kind is StorageErrorKind.NOT_FOUND:
            raise NotFoundError(STUDENT_NOT_FOUND) from exc
        logger.exception("Error updating student %s: %s", student_id, exc.message)
        if exc.kind is StorageErrorKind.CONFLICT:
            raise ConflictError("This email address is already in use by another student.") from exc
        raise InternalError() from exc

    logger.info("UPDATE Operation: Student with ID %s was updated.", student_id)
    return {"message": "Student updated successfully"}


async def delete_student(repo: StudentRepository, student_id: int) -> dict[str, str]:
    try:
        await repo.delete_student(student_id)
    except StorageError as exc:
        if exc.kind is StorageErrorKind.NOT_FOUND:
            raise NotFoundError(STUDENT_NOT_FOUND) from exc
        logger.exception("Error deleting student %s: %s", student_id, exc.message)
        raise InternalError() from exc

    logger.info("DELETE Operation: Student with ID %s was deleted.", student_id)
    return {"message": "Student deleted successfully"}
