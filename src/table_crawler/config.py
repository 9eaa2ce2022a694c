from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from table_crawler.domain.models import SortDirection

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; TableCrawler/1.0)"


class Settings(BaseModel):
    url: str = Field(..., min_length=1)
    credential: str
    total_records: int = Field(100, ge=0)
    page_size: int = Field(50, ge=1)
    sort_column: str = "LastName"
    sort_direction: SortDirection = SortDirection.ASC
    output: str = "member_records.txt"
    delay_seconds: float = Field(2.0, ge=0)
    timeout: int = Field(20, ge=1)
    user_agent: str = DEFAULT_USER_AGENT
    extractor: Literal["structural", "pattern"] = "structural"
    log_level: str = "INFO"
    artifacts_dir: Path | None = None
