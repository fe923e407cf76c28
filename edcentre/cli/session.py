from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import typer

from ..data.loader import load_records
from ..errors import PersistenceError
from ..models import Record, Repository, Role, create
from ..models.validation import parse_int
from ..render.csv_out import write_csv
from ..render.table import describe, render_records
from .prompts import ROLE_CHOICES, ask, edit_fields, fill_new

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """One interactive run: the repository plus the file it is saved to.

    Every mutating action saves the whole repository straight away.
    """

    repo: Repository
    data_file: Path

    @classmethod
    def start(cls, data_file: Path) -> "Session":
        result = load_records(data_file)
        if result.missing:
            typer.echo("No existing data file found. Starting with empty records.")
        elif result.error is not None:
            typer.echo(f"Error loading data: {result.error}")
            typer.echo("Starting with empty records.")
        else:
            typer.echo(f"Data loaded successfully. {len(result.records)} records found.")
        return cls(repo=result.repository(), data_file=data_file)

    def save(self) -> bool:
        try:
            write_csv(self.repo, self.data_file)
        except PersistenceError as exc:
            typer.echo(f"Error while saving data: {exc}")
            return False
        typer.echo("Data saved successfully.")
        return True

    def add(self) -> Record | None:
        typer.echo("Select User Group:")
        typer.echo("1. Teacher")
        typer.echo("2. Admin")
        typer.echo("3. Student")
        role = ROLE_CHOICES.get(ask("Your Choice").strip())
        if role is None:
            typer.echo(
                "Invalid role selected. Allowed options are: 1 - Teacher, 2 - Admin, or 3 - Student."
            )
            return None
        record = create(role, self.repo.allocate_id())
        fill_new(record)
        self.repo.insert(record)
        self.save()
        typer.echo(f"\nRecord added successfully! Assigned ID: {record.id}")
        return record

    def view_all(self) -> None:
        if not len(self.repo):
            typer.echo("No records found.")
            return
        typer.echo("All Records:")
        typer.echo(render_records(self.repo))

    def view_by_role(self) -> None:
        text = ask("Enter role to filter (Teacher/Admin/Student)").strip()
        if Role.parse(text) is None:
            typer.echo("Invalid role entered! Please type Teacher, Admin, or Student.")
            typer.echo("Returning to main menu...\n")
            return
        found = self.repo.filter_by_role(text)
        if not found:
            typer.echo(f"No records found for role: {text}")
            return
        typer.echo(f'\nDisplaying Records for role "{text}":')
        typer.echo(render_records(found))

    def edit(self) -> Record | None:
        rid = parse_int(ask("Enter record ID to edit"))
        if rid is None:
            typer.echo("Invalid ID.")
            return None
        record = self.repo.find_by_id(rid)
        if record is None:
            typer.echo("Record not found.")
            return None
        edit_fields(record)
        logger.info(f"Edited {record.role} #{record.id}")
        self.save()
        typer.echo("\nRecord updated successfully.")
        return record

    def delete(self) -> Record | None:
        rid = parse_int(ask("Enter record ID to delete"))
        if rid is None:
            typer.echo("Invalid ID entered. Returning to main menu...\n")
            return None
        record = self.repo.find_by_id(rid)
        if record is None:
            typer.echo(f"Record with ID {rid} not found.\n")
            return None
        typer.echo("\nRecord found:")
        typer.echo(describe(record))
        choice = ask("\nAre you sure you want to delete this record? (1. Yes, 2. No)").strip()
        if choice == "1":
            self.repo.remove(record)
            self.save()
            typer.echo("Record deleted successfully.\n")
            return record
        if choice == "2":
            typer.echo("Operation cancelled. Record not deleted.\n")
        else:
            typer.echo("Invalid choice. Operation aborted.\n")
        return None
