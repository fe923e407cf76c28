from __future__ import annotations

import logging
from pathlib import Path

import typer

from ..config import DEFAULT_LOG_LEVEL, ENV_DATA_FILE, ENV_LOG_FILE, ENV_LOG_LEVEL, Settings
from .prompts import ask
from .session import Session

RULE = "-" * 77

MENU = "\n".join(
    [
        "",
        RULE,
        "\n EDUCATION CENTRE MANAGEMENT INFORMATION SYSTEM",
        "",
        RULE,
        "\n Hello Admin, What would you like to do?",
        "",
        "1. Add New record",
        "2. View All records",
        "3. View records by Role",
        "4. Edit existing record",
        "5. Delete existing record",
        "6. Exit Application",
        "",
    ]
)


def _setup_logging(settings: Settings) -> None:
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    # The terminal is shared with the menu; only problems go there
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(settings.log_file, encoding="utf-8"),
            console,
        ],
        force=True,
    )


def _teardown_logging() -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def run_menu(session: Session) -> None:
    actions = {
        "1": session.add,
        "2": session.view_all,
        "3": session.view_by_role,
        "4": session.edit,
        "5": session.delete,
    }
    while True:
        typer.echo(MENU)
        try:
            choice = ask("Select an option (1-6)").strip()
            typer.echo()
            if choice == "6":
                break
            action = actions.get(choice)
            if action is None:
                typer.echo("Invalid choice. Please try again (Allowed Options: 1, 2, 3, 4, 5, 6).")
                continue
            action()
        except typer.Abort:
            # End of input or Ctrl-C: leave the same way as option 6
            typer.echo()
            break
    session.save()
    typer.echo("Exiting System... Goodbye!")


app = typer.Typer(add_completion=False, help="Education centre records (teachers, admins, students)")


@app.command()
def run(
    data_file: Path | None = typer.Option(
        None, "--data-file", envvar=ENV_DATA_FILE, help="CSV data file (default: ./education_centre_data.csv)"
    ),
    log_level: str = typer.Option(DEFAULT_LOG_LEVEL, "--log-level", envvar=ENV_LOG_LEVEL, help="Log level"),
    log_file: Path | None = typer.Option(
        None, "--log-file", envvar=ENV_LOG_FILE, help="Log file (default: logs/edcentre.log beside the data file)"
    ),
) -> None:
    settings = Settings.resolve(data_file, log_level, log_file)
    _setup_logging(settings)
    logging.getLogger(__name__).info(f"Starting with data file {settings.data_file}")
    try:
        run_menu(Session.start(settings.data_file))
    finally:
        _teardown_logging()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
