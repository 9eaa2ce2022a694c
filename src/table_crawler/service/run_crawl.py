from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Iterable, Protocol

from table_crawler.config import Settings
from table_crawler.domain.models import PageResult, Record, RunReport
from table_crawler.infrastructure.html.parser import extract_records
from table_crawler.infrastructure.http.page_client import PageClient
from table_crawler.utils.pages import page_count, start_row

logger = logging.getLogger(__name__)


class PageFetcher(Protocol):
    def fetch_page(self, start_row: int) -> str: ...


Extractor = Callable[[str], list[Record]]


def render_records(records: Iterable[Record]) -> str:
    return "\n".join(record.to_line() for record in records)


class PaginationDriver:
    def __init__(
        self,
        settings: Settings,
        fetcher: PageFetcher,
        extractor: Extractor | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings
        self._fetcher = fetcher
        self._extractor = extractor or (
            lambda html: extract_records(html, mode=settings.extractor)
        )
        self._sleep = sleep
        self._output = Path(settings.output)

    def run(self) -> RunReport:
        settings = self._settings
        total_pages = page_count(settings.total_records, settings.page_size)
        report = RunReport(total_pages=total_pages, output=self._output)
        collected: list[Record] = []

        logger.info(
            "Starting crawl | url=%s | total_records=%s | page_size=%s | pages=%s | output=%s",
            settings.url,
            settings.total_records,
            settings.page_size,
            total_pages,
            self._output,
        )

        for page in range(1, total_pages + 1):
            row = start_row(page, settings.page_size)
            logger.info("Fetching page | page=%s/%s | start_row=%s", page, total_pages, row)
            records: list[Record] = []
            try:
                html = self._fetcher.fetch_page(row)
                records = self._extractor(html)
                for record in records:
                    logger.info("Record | %s", record.to_line())
                collected.extend(records)
                self._write_output(collected)
            except Exception as exc:
                # records extracted before a failed write stay in the result set
                logger.exception("Error fetching page | page=%s | start_row=%s", page, row)
                report.pages.append(
                    PageResult(page=page, start_row=row, records=tuple(records), error=str(exc))
                )
            else:
                report.pages.append(
                    PageResult(page=page, start_row=row, records=tuple(records))
                )
                logger.info(
                    "Page saved | page=%s | records=%s | total=%s",
                    page,
                    len(records),
                    len(collected),
                )
                if page < total_pages and settings.delay_seconds > 0:
                    self._sleep(settings.delay_seconds)

        logger.info(
            "Done | records=%s | output=%s | failed_pages=%s",
            report.record_count,
            self._output,
            report.failed_pages,
        )
        return report

    def _write_output(self, records: list[Record]) -> None:
        self._output.parent.mkdir(parents=True, exist_ok=True)
        self._output.write_text(render_records(records), encoding="utf-8")


def run_crawl(settings: Settings) -> RunReport:
    with PageClient(settings) as client:
        return PaginationDriver(settings, client).run()
