from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict

from .record import Normalizer, Record
from .role import Role
from .validation import verbatim


@dataclass
class Student(Record):
    subject1: str = ""
    subject2: str = ""
    subject3: str = ""

    ROLE: ClassVar[Role] = Role.STUDENT
    NORMALIZERS: ClassVar[Dict[str, Normalizer]] = {
        **Record.NORMALIZERS,
        "subject1": verbatim,
        "subject2": verbatim,
        "subject3": verbatim,
    }
