"""
Dependencies for the students routes.
"""

from __future__ import annotations

import asyncpg
from fastapi import Depends

from core import db

from .repository import StudentRepository


def get_student_repository(pool: asyncpg.Pool = Depends(db.get_pool)) -> StudentRepository:
    return StudentRepository(pool)
