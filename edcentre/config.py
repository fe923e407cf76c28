from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

DATA_FILE_NAME = "education_centre_data.csv"
LOG_DIR_NAME = "logs"
LOG_FILE_NAME = "edcentre.log"
DEFAULT_LOG_LEVEL = "INFO"

ENV_DATA_FILE = "EDCENTRE_DATA_FILE"
ENV_LOG_LEVEL = "EDCENTRE_LOG_LEVEL"
ENV_LOG_FILE = "EDCENTRE_LOG_FILE"


def level_from_name(name: str | None) -> int:
    level = getattr(logging, (name or DEFAULT_LOG_LEVEL).upper(), None)
    return level if isinstance(level, int) else logging.INFO


@dataclass(frozen=True)
class Settings:
    data_file: Path
    log_level: int
    log_file: Path

    @classmethod
    def resolve(
        cls,
        data_file: Path | None = None,
        log_level: str | None = None,
        log_file: Path | None = None,
    ) -> "Settings":
        data = Path(data_file) if data_file else Path(DATA_FILE_NAME)
        log = Path(log_file) if log_file else data.parent / LOG_DIR_NAME / LOG_FILE_NAME
        return cls(data_file=data, log_level=level_from_name(log_level), log_file=log)
