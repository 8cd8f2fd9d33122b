# SPDX-License-Identifier: MIT

import csv
import io
import logging
from pathlib import Path
from typing import Optional

from timelog import configuration, time
from timelog.fileio import append_text_locked, write_text_atomic
from timelog.model.record import Record
from timelog.service.error import (
    RecordParseError,
    RecordsNotFoundError,
    StorageError,
)

logger = logging.getLogger(__name__)

HEADER = ["task", "duration_ms", "date", "project"]


class RecordRepository:
    """
    CSV log of completed records.

    Rows are `task,duration_ms,date,project`. Rows written before projects
    existed have only the first three fields.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.RECORD_PATH

    def exists(self) -> bool:
        return self.path.is_file()

    def load_all(self) -> list[Record]:
        if not self.exists():
            raise RecordsNotFoundError()
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Unable to read record file {self.path}: {e}") from e

        records: list[Record] = []
        reader = csv.reader(io.StringIO(content, newline=""))
        for row in reader:
            if reader.line_num == 1 and row[:2] == HEADER[:2]:
                continue
            if len(row) == 0:
                continue
            records.append(self.__convert_row_for_deserialization(row, reader.line_num))
        logger.debug("loaded %d records from %s", len(records), self.path)
        return records

    def append(self, record: Record) -> None:
        try:
            append_text_locked(
                self.path,
                self.__rows_to_text([self.__convert_record_for_serialization(record)]),
                header=self.__rows_to_text([HEADER]),
            )
        except OSError as e:
            raise StorageError(f"Failed to write record to {self.path}: {e}") from e
        logger.debug("appended record %r to %s", record["task"], self.path)

    def save_all(self, records: list[Record]) -> None:
        rows = [HEADER] + [
            self.__convert_record_for_serialization(record) for record in records
        ]
        try:
            write_text_atomic(self.path, self.__rows_to_text(rows))
        except OSError as e:
            raise StorageError(f"Failed to write records to {self.path}: {e}") from e
        logger.debug("rewrote %d records in %s", len(records), self.path)

    def get_all_projects(self) -> list[str]:
        if not self.exists():
            return []
        return sorted(
            {
                record["project"]
                for record in self.load_all()
                if record["project"] is not None
            }
        )

    def __rows_to_text(self, rows: list[list[str]]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerows(rows)
        return buffer.getvalue()

    def __convert_record_for_serialization(self, record: Record) -> list[str]:
        return [
            record["task"],
            str(record["duration_ms"]),
            time.date_to_str(record["date"]),
            record["project"] if record["project"] is not None else "",
        ]

    def __convert_row_for_deserialization(self, row: list[str], line: int) -> Record:
        if len(row) < 3:
            raise RecordParseError(line, "Invalid CSV record format")

        try:
            duration_ms = int(row[1])
        except ValueError:
            raise RecordParseError(line, "Invalid duration")
        if duration_ms < 0:
            raise RecordParseError(line, "Invalid duration")

        try:
            date = time.date_from_str(row[2])
        except ValueError:
            raise RecordParseError(line, "Invalid date")

        project: Optional[str] = None
        if len(row) >= 4 and row[3] != "":
            project = row[3]

        return {
            "task": row[0],
            "duration_ms": duration_ms,
            "date": date,
            "project": project,
        }
