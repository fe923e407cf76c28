from __future__ import annotations

from pathlib import Path

import pytest

from edcentre.data.codec import HEADER
from edcentre.data.loader import load_records
from edcentre.errors import PersistenceError
from edcentre.models import Admin, Repository, Student, Teacher
from edcentre.render.csv_out import csv_text, write_csv


def write_csv_lines(path: Path, rows: list[str]) -> None:
    with path.open("w", encoding="utf-8") as f:
        f.write(HEADER + "\n")
        for r in rows:
            f.write(r + "\n")


def test_malformed_row_is_dropped(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    write_csv_lines(
        p,
        [
            "1,Teacher,Ann,555,ann@x.org,1500,Math,Art,,,",
            "2,Admin,Bob",
            "3,Student,Cy,,,,Physics,Chemistry,Biology,,",
        ],
    )
    result = load_records(p)
    assert [r.id for r in result.records] == [1, 3]
    assert result.skipped == 1
    assert result.error is None and not result.missing


def test_unknown_roles_and_bad_ids_are_skipped(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    write_csv_lines(p, ["x,Teacher,Ann,,,", "4,Parent,Dan,,,", "5,admin,Eve,,,100,,,,Full-time,35"])
    result = load_records(p)
    assert [r.id for r in result.records] == [5]
    assert isinstance(result.records[0], Admin)
    assert result.skipped == 2


def test_next_id_after_load(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    write_csv_lines(p, ["3,Teacher,A,,,", "7,Admin,B,,,", "2,Student,C,,,"])
    result = load_records(p)
    assert result.next_id == 8
    assert [r.id for r in result.records] == [3, 7, 2]


def test_missing_file_means_empty(tmp_path: Path) -> None:
    result = load_records(tmp_path / "absent.csv")
    assert result.missing
    assert result.records == []
    assert result.next_id == 1


def test_header_only_file(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    write_csv_lines(p, [])
    result = load_records(p)
    assert result.records == [] and result.next_id == 1 and result.skipped == 0


def test_blank_lines_are_ignored(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    write_csv_lines(p, ["", "1,Student,Cy,,,", "   ", ""])
    result = load_records(p)
    assert [r.id for r in result.records] == [1]
    assert result.skipped == 0


def test_unreadable_file_falls_back_to_empty(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    p.mkdir()
    result = load_records(p)
    assert result.error
    assert result.records == [] and result.next_id == 1


def test_undecodable_bytes_only_touch_their_cell(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    p.write_bytes(
        HEADER.encode()
        + b"\n1,Teacher,Ann,555,,1500,Math,Art,,,\n"
        + b"2,Student,Jos\xe9,,,,Art,Music,Drama,,\n"
    )
    result = load_records(p)
    assert result.error is None
    assert [r.id for r in result.records] == [1, 2]
    assert result.records[1].name == "Jos\ufffd"
    assert result.records[1].subject3 == "Drama"


def test_stray_quote_damages_only_its_own_line(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    write_csv_lines(
        p,
        [
            "1,Teacher,Ann,555,ann@x.org,1500,Math,Art,,,",
            '2,Student,"Bo,,,,Art,Music,Drama,,',
            "3,Admin,Cy,556,cy@x.org,900,,,,Full-time,40",
            "4,Student,Dee,,,,Physics,Chemistry,Biology,,",
        ],
    )
    result = load_records(p)
    assert [r.id for r in result.records] == [1, 2, 3, 4]
    assert result.skipped == 0
    assert result.records[1].name == '"Bo'
    assert result.records[2].working_hours == 40
    assert result.next_id == 5


def test_csv_text_matches_legacy_format() -> None:
    text = csv_text([Teacher(1, name="Ann", telephone="555", email="a@x.org", salary=1500, subject1="Math", subject2="Art")])
    assert text == HEADER + "\n" + "1,Teacher,Ann,555,a@x.org,1500,Math,Art,,,\n"


def test_save_then_load_keeps_insertion_order(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    repo = Repository.from_records(
        [Student(5, name="Cy"), Teacher(1, name="Ann", salary=99.5), Admin(3, name="Bob", working_hours=8)]
    )
    write_csv(repo, p)
    lines = p.read_text(encoding="utf-8").splitlines()
    assert lines[0] == HEADER
    assert [line.split(",")[0] for line in lines[1:]] == ["5", "1", "3"]

    result = load_records(p)
    assert result.records == repo.records
    assert result.repository().next_id == 6


def test_save_overwrites_whole_file(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    repo = Repository.from_records([Student(1), Student(2), Student(3)])
    write_csv(repo, p)
    repo.remove(repo.find_by_id(2))
    write_csv(repo, p)
    assert len(p.read_text(encoding="utf-8").splitlines()) == 3


def test_save_failure_raises_persistence_error(tmp_path: Path) -> None:
    p = tmp_path / "data.csv"
    p.mkdir()
    with pytest.raises(PersistenceError) as info:
        write_csv([Student(1)], p)
    assert info.value.path == p
