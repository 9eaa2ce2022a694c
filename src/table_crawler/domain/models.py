from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True, slots=True)
class PageRequest:
    sort_column: str
    sort_direction: SortDirection
    start_row: int

    def to_form(self) -> dict[str, str]:
        return {
            "SortCol": self.sort_column,
            "SortOrder": self.sort_direction.value,
            "StartRow": str(self.start_row),
        }


@dataclass(frozen=True, slots=True)
class Record:
    column1: str
    column2: str
    column3: str
    column4: str

    def to_line(self) -> str:
        return f"{self.column1}, {self.column2}, {self.column3}, {self.column4}"


@dataclass(frozen=True, slots=True)
class PageResult:
    page: int
    start_row: int
    records: tuple[Record, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class RunReport:
    total_pages: int
    output: Path
    pages: list[PageResult] = field(default_factory=list)

    @property
    def records(self) -> list[Record]:
        return [record for page in self.pages for record in page.records]

    @property
    def record_count(self) -> int:
        return sum(len(page.records) for page in self.pages)

    @property
    def failed_pages(self) -> list[int]:
        return [page.page for page in self.pages if not page.ok]
