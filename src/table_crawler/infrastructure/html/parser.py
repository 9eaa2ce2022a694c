from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from table_crawler.domain.models import Record

logger = logging.getLogger(__name__)

MIN_CELLS = 4
EXTRACTOR_MODES = ("structural", "pattern")

_ROW_RE = re.compile(r"<tr[^>]*>[\s\S]*?</tr>")
_CELL_RE = re.compile(r"<td[^>]*>([\s\S]*?)</td>")


def extract_records(html: str, mode: str = "structural") -> list[Record]:
    """
    Pulls every table row with at least four cells out of an HTML page.

    `structural` walks the parsed tree with BeautifulSoup; `pattern` keeps the
    old regex scan over raw markup, which misreads nested or multi-line tags.
    Rows with fewer than four cells are dropped, extra cells are ignored.
    """
    if mode == "structural":
        rows = _cells_from_tree(html)
    elif mode == "pattern":
        rows = _cells_from_pattern(html)
    else:
        raise ValueError(f"Unknown extractor mode: {mode!r}")

    records: list[Record] = []
    skipped = 0
    for cells in rows:
        if len(cells) < MIN_CELLS:
            skipped += 1
            continue
        records.append(Record(*cells[:MIN_CELLS]))
    logger.debug(
        "Rows extracted | mode=%s | rows=%s | records=%s | skipped=%s",
        mode,
        len(rows),
        len(records),
        skipped,
    )
    return records


def _cells_from_pattern(html: str) -> list[list[str]]:
    return [
        [cell.strip() for cell in _CELL_RE.findall(row)]
        for row in _ROW_RE.findall(html)
    ]


def _cells_from_tree(html: str) -> list[list[str]]:
    if not html or not html.strip():
        return []
    soup = BeautifulSoup(html, "lxml")
    rows: list[list[str]] = []
    for row in soup.find_all("tr"):
        cells = row.find_all("td", recursive=False)
        rows.append([cell.get_text().strip() for cell in cells])
    return rows
