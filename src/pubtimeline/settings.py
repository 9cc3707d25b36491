"""Configuration helpers for pubtimeline."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import structlog
from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_DATA_DIR = Path("data")
DEFAULT_USER_AGENT = "pubtimeline/0.1 (+article lifecycle harvester)"


class Settings(BaseModel):
    """Runtime configuration loaded from env vars with sensible defaults."""

    data_dir: Path = Field(default_factory=lambda: DEFAULT_DATA_DIR)
    log_level: str = "INFO"
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = 30.0

    @property
    def links_path(self) -> Path:
        return self.data_dir / "output_crawl_articles" / "data.txt"

    @property
    def records_path(self) -> Path:
        return self.data_dir / "output_crawl_article_info" / "data.json"

    @property
    def failures_path(self) -> Path:
        return self.data_dir / "output_crawl_article_info" / "errors.txt"

    @property
    def features_path(self) -> Path:
        return self.data_dir / "output_create_csv" / "data.csv"

    def ensure_directories(self) -> None:
        """Create output directories if they are missing."""
        for path in (self.links_path, self.records_path, self.features_path):
            path.parent.mkdir(parents=True, exist_ok=True)

    @classmethod
    def load(cls) -> "Settings":
        load_dotenv()
        return cls(
            data_dir=Path(os.environ.get("PUBTIMELINE_DATA_DIR", DEFAULT_DATA_DIR)),
            log_level=os.environ.get("PUBTIMELINE_LOG_LEVEL", "INFO"),
            user_agent=os.environ.get("PUBTIMELINE_USER_AGENT", DEFAULT_USER_AGENT),
            request_timeout=float(os.environ.get("PUBTIMELINE_REQUEST_TIMEOUT", "30")),
        )


def get_settings() -> Settings:
    """Convenience accessor for lazy modules."""
    settings = Settings.load()
    settings.ensure_directories()
    return settings


def configure_logging(level: str) -> None:
    """Route structlog events through a filter at the configured level."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(numeric))
