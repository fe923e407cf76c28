from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    TEACHER = "Teacher"
    ADMIN = "Admin"
    STUDENT = "Student"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str | None) -> "Role | None":
        # Case-insensitive, surrounding whitespace ignored
        if text is None:
            return None
        key = text.strip().lower()
        for role in cls:
            if role.value.lower() == key:
                return role
        return None
