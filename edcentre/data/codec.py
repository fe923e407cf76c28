"""Row codec for the education centre data file.

Every role shares one 11-column layout. Columns 0-4 hold the common fields
and each role owns a fixed subset of columns 5-10; the columns a role does
not own are written empty. Column positions are the on-disk contract.

Rows are written through ``csv.writer`` with minimal quoting: a cell is only
quoted when it holds a comma or a quote. Line breaks inside a cell are written
as spaces so every record stays on one physical line. Files written before
quoting existed read back unchanged: a line whose quotes do not pair up
cannot have come from the writer, so it is split on bare commas.
"""

from __future__ import annotations

import csv
import io
from typing import Callable, Dict, List, Sequence, Tuple

from ..models import Record, Role, create
from ..models.validation import parse_float, parse_int

COLUMNS: Tuple[str, ...] = (
    "Id",
    "Role",
    "Name",
    "Telephone",
    "Email",
    "Salary",
    "Subject1",
    "Subject2",
    "Subject3",
    "EmploymentType",
    "WorkingHours",
)
HEADER = ",".join(COLUMNS)

(
    ID,
    ROLE,
    NAME,
    TELEPHONE,
    EMAIL,
    SALARY,
    SUBJECT1,
    SUBJECT2,
    SUBJECT3,
    EMPLOYMENT_TYPE,
    WORKING_HOURS,
) = range(len(COLUMNS))

COMMON_COLUMNS = 5

# column index -> record field, per role
LAYOUT: Dict[Role, Dict[int, str]] = {
    Role.TEACHER: {SALARY: "salary", SUBJECT1: "subject1", SUBJECT2: "subject2"},
    Role.ADMIN: {
        SALARY: "salary",
        EMPLOYMENT_TYPE: "employment_type",
        WORKING_HOURS: "working_hours",
    },
    Role.STUDENT: {SUBJECT1: "subject1", SUBJECT2: "subject2", SUBJECT3: "subject3"},
}

# Narrower rows still load, but keep the role defaults
MIN_COLUMNS: Dict[Role, int] = {role: max(cols) + 1 for role, cols in LAYOUT.items()}

NUMERIC_PARSERS: Dict[str, Callable[[str], object]] = {
    "salary": parse_float,
    "working_hours": parse_int,
}


def format_number(value: float | int) -> str:
    # 1500.0 -> "1500", 1500.5 -> "1500.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def one_line(text: str) -> str:
    return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


def encode_fields(record: Record) -> List[str]:
    cells = [""] * len(COLUMNS)
    cells[ID] = str(record.id)
    cells[ROLE] = record.role.value
    cells[NAME] = one_line(record.name)
    cells[TELEPHONE] = one_line(record.telephone)
    cells[EMAIL] = one_line(record.email)
    for col, attr in LAYOUT[record.role].items():
        value = getattr(record, attr)
        cells[col] = one_line(value) if isinstance(value, str) else format_number(value)
    return cells


def join_row(cells: Sequence[str]) -> str:
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(cells)
    return buf.getvalue()[:-1]


def split_row(line: str) -> List[str]:
    if line.count('"') % 2:
        return line.split(",")
    return next(csv.reader([line]), [])


def encode(record: Record) -> str:
    return join_row(encode_fields(record))


def decode_fields(fields: Sequence[str]) -> Record | None:
    """Build a record from one split row, or ``None`` if the row is unusable.

    Unusable means fewer than the five common columns, a non-integer id, or an
    unknown role. Role columns are only read when the row is wide enough for
    that role; unparsable numbers leave the default in place.
    """
    if len(fields) < COMMON_COLUMNS:
        return None
    rid = parse_int(fields[ID])
    if rid is None:
        return None
    role = Role.parse(fields[ROLE])
    if role is None:
        return None

    record = create(role, rid)
    record.update(name=fields[NAME], telephone=fields[TELEPHONE], email=fields[EMAIL])
    if len(fields) < MIN_COLUMNS[role]:
        return record
    for col, attr in LAYOUT[role].items():
        parse = NUMERIC_PARSERS.get(attr)
        if parse is None:
            setattr(record, attr, fields[col])
            continue
        value = parse(fields[col])
        if value is not None:
            setattr(record, attr, value)
    return record


def decode(line: str) -> Record | None:
    try:
        fields = split_row(line)
    except csv.Error:
        return None
    return decode_fields(fields)
