"""Iterator, real world: lazily reading a CSV file row by row.

The iterator keeps only the current row in memory. Iterating again rewinds
to the first row, and the file is closed once the last row has been read.
"""

from __future__ import annotations

import csv
from collections.abc import Iterator
from pathlib import Path
from typing import IO

from core.resources_loader import require_dataset


class CsvReadError(OSError):
    pass


class CsvIterator(Iterator[list[str]]):
    def __init__(self, path: str | Path, delimiter: str = ",") -> None:
        self.path = Path(path)
        self.delimiter = delimiter
        self._file: IO[str] | None = None
        self._reader: Iterator[list[str]] | None = None
        self._key = 0
        self._open()

    def _open(self) -> None:
        try:
            self._file = self.path.open(newline="", encoding="utf-8")
        except OSError as exc:
            raise CsvReadError(f'The file "{self.path}" cannot be read.') from exc
        self._reader = csv.reader(self._file, delimiter=self.delimiter)
        self._key = 0

    def rewind(self) -> None:
        if self._file is None or self._file.closed:
            self._open()
            return
        self._file.seek(0)
        self._reader = csv.reader(self._file, delimiter=self.delimiter)
        self._key = 0

    def key(self) -> int:
        """1-based number of the row most recently returned."""
        return self._key

    def close(self) -> None:
        if self._file is not None and not self._file.closed:
            self._file.close()

    @property
    def closed(self) -> bool:
        return self._file is None or self._file.closed

    def __iter__(self) -> "CsvIterator":
        self.rewind()
        return self

    def __next__(self) -> list[str]:
        if self._reader is None or self.closed:
            raise StopIteration
        try:
            row = next(self._reader)
        except StopIteration:
            self.close()
            raise
        self._key += 1
        return row


def main() -> None:
    rows = CsvIterator(require_dataset("cats.csv"))

    for row in rows:
        print(f"{rows.key()}: {row}")
    print(f"File closed after the last row: {rows.closed}")

    print("\nIterating again starts from the first row:")
    for row in rows:
        print(f"{rows.key()}: {', '.join(row[:3])}")
        if rows.key() == 3:
            break
    rows.close()

    try:
        CsvIterator("missing.csv")
    except CsvReadError as exc:
        print(f"\nCsvReadError: {exc}")


if __name__ == "__main__":
    main()
