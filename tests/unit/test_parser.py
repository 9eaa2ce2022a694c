from pathlib import Path

import pytest

from table_crawler.domain.models import Record
from table_crawler.infrastructure.html.parser import extract_records


def _fixture() -> str:
    return Path("tests/fixtures/records_page.html").read_text(encoding="utf-8")


@pytest.mark.parametrize("mode", ["structural", "pattern"])
def test_extract_records_from_fixture(mode: str) -> None:
    records = extract_records(_fixture(), mode=mode)
    assert records == [
        Record("Adams", "Ann", "Boston", "2001"),
        Record("Baker", "Bob", "Denver", "1999"),
        Record("Clark", "Cy", "Austin", "2010"),
    ]


@pytest.mark.parametrize("mode", ["structural", "pattern"])
def test_no_rows_yields_empty(mode: str) -> None:
    assert extract_records("<html><body><p>nothing here</p></body></html>", mode=mode) == []
    assert extract_records("", mode=mode) == []


@pytest.mark.parametrize("mode", ["structural", "pattern"])
def test_four_cells_make_one_record(mode: str) -> None:
    html = "<table><tr><td>A</td><td>B</td><td>C</td><td>D</td></tr></table>"
    assert extract_records(html, mode=mode) == [Record("A", "B", "C", "D")]


@pytest.mark.parametrize("mode", ["structural", "pattern"])
def test_three_cells_are_dropped(mode: str) -> None:
    html = "<table><tr><td>A</td><td>B</td><td>C</td></tr></table>"
    assert extract_records(html, mode=mode) == []


@pytest.mark.parametrize("mode", ["structural", "pattern"])
def test_six_cells_keep_first_four(mode: str) -> None:
    html = (
        "<table><tr><td>A</td><td>B</td><td>C</td><td>D</td>"
        "<td>E</td><td>F</td></tr></table>"
    )
    assert extract_records(html, mode=mode) == [Record("A", "B", "C", "D")]


def test_pattern_spans_lines_and_trims() -> None:
    html = "<tr>\n  <td>\n A \n</td><td>B</td>\n<td>C</td><td>D</td>\n</tr>"
    assert extract_records(html, mode="pattern") == [Record("A", "B", "C", "D")]


def test_pattern_keeps_inner_markup() -> None:
    html = '<table><tr><td><a href="/m/1">Ann</a></td><td>B</td><td>C</td><td>D</td></tr></table>'
    assert extract_records(html, mode="pattern")[0].column1 == '<a href="/m/1">Ann</a>'
    assert extract_records(html, mode="structural")[0].column1 == "Ann"


def test_unknown_mode_rejected() -> None:
    with pytest.raises(ValueError):
        extract_records("<tr></tr>", mode="dom")
