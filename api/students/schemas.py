"""
Students API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Bounds of a PostgreSQL INTEGER column (students.id, students.age).
INT4_MIN = -2_147_483_648
INT4_MAX = 2_147_483_647


class StudentFields(BaseModel):
    # Presence is checked by the service so a missing field is a 400,
    # not a schema error.
    name: str | None = None
    email: str | None = None
    age: int | None = Field(default=None, ge=INT4_MIN, le=INT4_MAX)


class StudentCreate(StudentFields):
    pass


class StudentUpdate(StudentFields):
    pass


class StudentResponse(BaseModel):
    # The table is owned outside this service; reads accept whatever it holds.
    id: int
    name: str | None = None
    email: str | None = None
    age: int | None = None


class StudentCreatedResponse(BaseModel):
    message: str
    studentId: int


class MessageResponse(BaseModel):
    message: str
