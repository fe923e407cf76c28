from __future__ import annotations

from typing import Dict, Type

from .admin import Admin
from .record import Record
from .role import Role
from .student import Student
from .teacher import Teacher

VARIANTS: Dict[Role, Type[Record]] = {
    Role.TEACHER: Teacher,
    Role.ADMIN: Admin,
    Role.STUDENT: Student,
}


def create(role: Role | str, record_id: int) -> Record:
    parsed = role if isinstance(role, Role) else Role.parse(role)
    if parsed is None:
        raise ValueError(f"Unknown role: {role!r}")
    return VARIANTS[parsed](record_id)
