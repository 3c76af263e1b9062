from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

POLAR_COLUMNS = [
    "wind_angle",
    "wind_speed",
    "sail_area",
    "boat_speed",
    "boat_speed_ahead",
    "boat_speed_abeam",
    "vmg",
    "heeling_angle",
    "ticks",
    "converged",
]


class RowWriter:
    def write_row(
        self, record: Mapping[str, Any]
    ) -> None:  # pragma: no cover - protocol-like
        raise NotImplementedError

    def close(self) -> None:
        pass


class CsvRowWriter(RowWriter):
    def __init__(self, path: Path, header: Optional[Sequence[str]] = None) -> None:
        self.path = path
        self._fh = path.open("w", newline="", encoding="utf-8")
        self._header = list(header) if header else list(POLAR_COLUMNS)
        self._writer = csv.writer(self._fh)
        self._writer.writerow(self._header)

    def write_row(self, record: Mapping[str, Any]) -> None:
        row = [record.get(k, 0) for k in self._header]
        self._writer.writerow(row)

    def close(self) -> None:
        self._fh.close()


class JsonlRowWriter(RowWriter):
    def __init__(self, path: Path) -> None:
        self.path = path
        self._fh = path.open("w", encoding="utf-8")

    def write_row(self, record: Mapping[str, Any]) -> None:
        self._fh.write(json.dumps(record) + "\n")

    def close(self) -> None:
        self._fh.close()


class MuxRowWriter(RowWriter):
    def __init__(self, *writers: RowWriter) -> None:
        self._writers = writers

    def write_row(self, record: Mapping[str, Any]) -> None:
        for w in self._writers:
            w.write_row(record)

    def close(self) -> None:
        for w in self._writers:
            w.close()


class SummaryJsonWriter:
    def __init__(self, path: Path) -> None:
        self.path = path

    def write_summary(self, summary: Mapping[str, Any]) -> None:
        self.path.write_text(json.dumps(summary, indent=2), encoding="utf-8")
