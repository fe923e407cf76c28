from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from ..models import Admin, Record, Role, Student, Teacher

TABLE_RULE = "-" * 78
DETAIL_PREFIX = "       └──> Details -> "


def money(value: float) -> str:
    text = f"${abs(value):,.2f}"
    return f"-{text}" if value < 0 else text


def common_line(r: Record) -> str:
    return f"{r.id:<5} | {r.role.value:<10} | {r.name:<20} | {r.telephone:<12} | {r.email:<25}"


def _teacher_detail(r: Teacher) -> str:
    return f"Salary: {money(r.salary):>8} | Subjects: {r.subject1}, {r.subject2}"


def _admin_detail(r: Admin) -> str:
    return f"Salary: {money(r.salary):>8} | Type: {r.employment_type} | Hours: {r.working_hours}"


def _student_detail(r: Student) -> str:
    return f"Subjects: {r.subject1}, {r.subject2}, {r.subject3}"


DETAILS: Dict[Role, Callable[..., str]] = {
    Role.TEACHER: _teacher_detail,
    Role.ADMIN: _admin_detail,
    Role.STUDENT: _student_detail,
}


def describe(r: Record) -> str:
    return common_line(r) + "\n" + DETAIL_PREFIX + DETAILS[r.role](r)


def table_header() -> str:
    columns = f"{'ID':<5} | {'Role':<10} | {'Name':<20} | {'Telephone':<12} | {'Email':<25}"
    return "\n".join([TABLE_RULE, columns, TABLE_RULE])


def render_records(records: Iterable[Record]) -> str:
    lines: List[str] = [table_header()]
    for r in records:
        lines.append(describe(r))
        lines.append("")
    return "\n".join(lines)
