from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import requests

from table_crawler.config import Settings
from table_crawler.domain.errors import RequestFailed
from table_crawler.domain.models import PageRequest

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class PageClient:
    """POSTs one paging form per call and hands back the raw HTML body."""

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self._url = settings.url
        self._sort_column = settings.sort_column
        self._sort_direction = settings.sort_direction
        self._timeout = settings.timeout
        self._artifacts_dir = settings.artifacts_dir
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Content-Type": FORM_CONTENT_TYPE,
                "Cookie": settings.credential,
                "User-Agent": settings.user_agent,
            }
        )

    def __enter__(self) -> PageClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def build_request(self, start_row: int) -> PageRequest:
        if not isinstance(start_row, int) or start_row < 1:
            raise ValueError(f"Invalid start row: {start_row!r}")
        return PageRequest(
            sort_column=self._sort_column,
            sort_direction=self._sort_direction,
            start_row=start_row,
        )

    def fetch_page(self, start_row: int) -> str:
        form = self.build_request(start_row).to_form()
        logger.debug("POST page | url=%s | form=%s", self._url, form)
        response = self._session.post(self._url, data=form, timeout=self._timeout)
        if not response.ok:
            self._save_http_artifact(response, form)
            raise RequestFailed(response.status_code, url=self._url)
        return response.text

    def _save_http_artifact(self, response: requests.Response, form: dict[str, Any]) -> None:
        if self._artifacts_dir is None:
            return
        artifacts = Path(self._artifacts_dir)
        artifacts.mkdir(parents=True, exist_ok=True)
        ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        status = response.status_code
        out = artifacts / f"page_http_{status}_{ts}.txt"
        snippet = response.text[:1000] if response.text else ""
        payload = {
            "url": response.url or self._url,
            "form": form,
            "status": status,
            "headers": dict(response.headers),
            "body_snippet": snippet,
        }
        out.write_text(json.dumps(payload, ensure_ascii=True, indent=2), encoding="utf-8")
        logger.info("HTTP artifact saved | path=%s", out)
