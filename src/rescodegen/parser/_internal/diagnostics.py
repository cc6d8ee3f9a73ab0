"""Per-parse diagnostics list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from rescodegen.parser.models import ErrorRecord


class Diagnostics:
    """Append-only error records owned by a single parse call."""

    def __init__(self) -> None:
        self._records: list[ErrorRecord] = []

    def add(self, record: ErrorRecord) -> None:
        self._records.append(record)

    @property
    def records(self) -> list[ErrorRecord]:
        return list(self._records)

    def to_list(self) -> list[dict[str, Any]]:
        return [r.to_dict() for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ErrorRecord]:
        return iter(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)
