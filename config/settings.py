"""Configuration settings for the Scholar patents scraper.

Handles database paths, upstream URLs and HTTP client settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

# Project root directory
ROOT_DIR = Path(__file__).parent.parent

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Database paths
    database_path: Path = ROOT_DIR / os.getenv("DATABASE_PATH", "data/database.sqlite")

    # Upstream
    scholar_base_url: str = os.getenv("SCHOLAR_BASE_URL", "https://scholar.google.com")
    user_agent: str = os.getenv("SCHOLAR_USER_AGENT", DEFAULT_USER_AGENT)
    request_timeout: float = float(os.getenv("SCHOLAR_REQUEST_TIMEOUT", "30"))

    # Batch settings
    scrape_delay: float = float(os.getenv("SCHOLAR_SCRAPE_DELAY", "2.0"))

    class Config:
        arbitrary_types_allowed = True


settings = Settings()
