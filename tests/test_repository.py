from __future__ import annotations

import pytest

from edcentre.data.codec import encode
from edcentre.models import Admin, Repository, Role, Student, Teacher, create


def populated() -> Repository:
    return Repository.from_records(
        [
            Teacher(3, name="Ann", subject1="Math"),
            Admin(7, name="Bob", working_hours=20),
            Student(2, name="Cy", subject1="Art"),
            Teacher(4, name="Dee"),
        ]
    )


def test_next_id_follows_max_id() -> None:
    repo = Repository.from_records([Teacher(3), Admin(7), Student(2)])
    assert repo.next_id == 8


def test_next_id_for_empty_repository() -> None:
    assert Repository().next_id == 1
    assert Repository.from_records([]).next_id == 1


def test_allocate_id_is_sequential() -> None:
    repo = populated()
    assert repo.allocate_id() == 8
    assert repo.allocate_id() == 9
    assert repo.next_id == 10


def test_insert_appends_in_order() -> None:
    repo = Repository()
    for role in (Role.STUDENT, Role.TEACHER, Role.ADMIN):
        repo.insert(create(role, repo.allocate_id()))
    assert [r.id for r in repo] == [1, 2, 3]
    assert len(repo) == 3


def test_insert_rejects_duplicate_id() -> None:
    repo = populated()
    with pytest.raises(ValueError):
        repo.insert(Student(7))
    assert len(repo) == 4


def test_insert_with_higher_id_moves_counter() -> None:
    repo = populated()
    repo.insert(Student(20))
    assert repo.next_id == 21


def test_find_by_id() -> None:
    repo = populated()
    assert repo.find_by_id(7).name == "Bob"
    assert repo.find_by_id(99) is None


def test_filter_by_role_ignores_case_and_keeps_order() -> None:
    repo = populated()
    lower = repo.filter_by_role("teacher")
    assert lower == repo.filter_by_role("Teacher")
    assert lower == repo.filter_by_role(Role.TEACHER)
    assert [r.id for r in lower] == [3, 4]
    assert repo.filter_by_role("parent") == []


def test_delete_removes_exactly_one_record() -> None:
    repo = populated()
    before = {r.id: encode(r) for r in repo if r.id != 7}
    target = repo.find_by_id(7)
    assert repo.remove(target)
    assert repo.find_by_id(7) is None
    assert len(repo) == 3
    assert {r.id: encode(r) for r in repo} == before


def test_remove_matches_by_identity() -> None:
    repo = populated()
    twin = Admin(7, name="Bob", working_hours=20)
    assert twin == repo.find_by_id(7)
    assert not repo.remove(twin)
    assert len(repo) == 4
