from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict

from .record import Normalizer, Record
from .role import Role
from .validation import non_negative, trimmed


@dataclass
class Teacher(Record):
    salary: float = 0.0  # never negative
    subject1: str = ""
    subject2: str = ""

    ROLE: ClassVar[Role] = Role.TEACHER
    NORMALIZERS: ClassVar[Dict[str, Normalizer]] = {
        **Record.NORMALIZERS,
        "salary": non_negative,
        "subject1": trimmed,
        "subject2": trimmed,
    }
