from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

import typer

from ..data.codec import format_number
from ..models import Record, Role
from ..models.validation import parse_float, parse_int


@dataclass(frozen=True)
class FieldPrompt:
    attr: str
    new: str  # asked when adding
    edit: str  # asked when editing
    parse: Callable[[str], object] | None = None  # None: text, taken as typed


def _common(name: str, telephone: str, email: str) -> Tuple[FieldPrompt, ...]:
    return (
        FieldPrompt("name", name, "Enter new name"),
        FieldPrompt("telephone", telephone, "Enter new telephone"),
        FieldPrompt("email", email, "Enter new email"),
    )


PROMPTS: Dict[Role, Tuple[FieldPrompt, ...]] = {
    Role.TEACHER: _common(
        "Enter Teacher's Name", "Enter Teacher's Telephone No.", "Enter Teacher's Email"
    )
    + (
        FieldPrompt("salary", "Enter Salary", "Enter new salary", parse_float),
        FieldPrompt("subject1", "Enter Subject 1", "Enter subject 1"),
        FieldPrompt("subject2", "Enter Subject 2", "Enter subject 2"),
    ),
    Role.ADMIN: _common("Enter Admin's Name", "Enter Admin's Telephone", "Enter Admin's Email")
    + (
        FieldPrompt("salary", "Enter Salary", "Enter new salary", parse_float),
        FieldPrompt(
            "employment_type", "Employment type (Full-time/Part-time)", "Enter employment type"
        ),
        FieldPrompt("working_hours", "Working Hours", "Enter working hours", parse_int),
    ),
    Role.STUDENT: _common(
        "Enter Student Name", "Enter Student Telephone No.", "Enter Student Email"
    )
    + (
        FieldPrompt("subject1", "Enter Subject 1", "Enter subject 1"),
        FieldPrompt("subject2", "Enter Subject 2", "Enter subject 2"),
        FieldPrompt("subject3", "Enter Subject 3", "Enter subject 3"),
    ),
}

ROLE_CHOICES: Dict[str, Role] = {"1": Role.TEACHER, "2": Role.ADMIN, "3": Role.STUDENT}


def ask(text: str) -> str:
    # Blank input comes back as "" instead of re-prompting
    return typer.prompt(text, default="", show_default=False)


def apply(record: Record, prompt: FieldPrompt, raw: str) -> bool:
    """Assign ``raw`` to the prompted field; numbers that do not parse are ignored."""
    if prompt.parse is None:
        setattr(record, prompt.attr, raw)
        return True
    value = prompt.parse(raw)
    if value is None:
        return False
    setattr(record, prompt.attr, value)
    return True


def fill_new(record: Record) -> None:
    for prompt in PROMPTS[record.role]:
        apply(record, prompt, ask(prompt.new))


def edit_fields(record: Record) -> None:
    # Blank input keeps the current value
    for prompt in PROMPTS[record.role]:
        current = getattr(record, prompt.attr)
        if not isinstance(current, str):
            current = format_number(current)
        raw = ask(f"{prompt.edit} (OR Leave blank and press Enter to keep as '{current}')")
        if raw.strip():
            apply(record, prompt, raw)
