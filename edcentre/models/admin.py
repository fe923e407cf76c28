from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict

from .record import Normalizer, Record
from .role import Role
from .validation import as_float, as_int, verbatim


@dataclass
class Admin(Record):
    salary: float = 0.0
    employment_type: str = ""  # Full-time / Part-time, free text
    working_hours: int = 0

    ROLE: ClassVar[Role] = Role.ADMIN
    NORMALIZERS: ClassVar[Dict[str, Normalizer]] = {
        **Record.NORMALIZERS,
        "salary": as_float,
        "employment_type": verbatim,
        "working_hours": as_int,
    }
