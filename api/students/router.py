"""
FastAPI router for the students resource.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from . import schemas, service
from .dependencies import get_student_repository
from .repository import StudentRepository

router = APIRouter()


@router.get("/students", response_model=list[schemas.StudentResponse])
async def list_students(
    repo: StudentRepository = Depends(get_student_repository),
) -> list[dict]:
    return await service.list_students(repo)


@router.get("/students/{student_id}", response_model=schemas.StudentResponse)
async def get_student(
    student_id: int,
    repo: StudentRepository = Depends(get_student_repository),
) -> dict:
    return await service.get_student(repo, student_id)


@router.post(
    "/students",
    response_model=schemas.StudentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_student(
    payload: schemas.StudentCreate | None = None,
    repo: StudentRepository = Depends(get_student_repository),
) -> dict:
    """
    Insert a student. `name` and `email` are required, `age` is optional.
    """
    return await service.create_student(repo, payload or schemas.StudentCreate())


@router.put("/students/{student_id}", response_model=schemas.MessageResponse)
async def update_student(
    student_id: int,
    payload: schemas.StudentUpdate | None = None,
    repo: StudentRepository = Depends(get_student_repository),
) -> dict:
    """
    Replace every field of a student; partial updates are rejected.
    """
    return await service.update_student(repo, student_id, payload or schemas.StudentUpdate())


@router.delete("/students/{student_id}", response_model=schemas.MessageResponse)
async def delete_student(
    student_id: int,
    repo: StudentRepository = Depends(get_student_repository),
) -> dict:
    return await service.delete_student(repo, student_id)
