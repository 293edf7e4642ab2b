"""Data models for scraped patent information."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

DEFAULT_PATENTS_TO_DISPLAY = 3


@dataclass
class PatentRecord:
    """Represents a single patent listed on a Google Scholar profile."""

    title: str
    authors: str = ""
    publication_date: Optional[str] = None
    patent_number: Optional[str] = None
    abstract: Optional[str] = None
    url: Optional[str] = None
    citations: int = 0
    id: Optional[int] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None

    def content(self) -> tuple:
        """Stored fields that come from upstream, without storage identity."""
        return (
            self.title,
            self.authors,
            self.publication_date,
            self.patent_number,
            self.abstract,
            self.url,
            self.citations,
        )


@dataclass
class UserScholarProfile:
    """The part of a user's profile the scraper reads."""

    user_id: str
    google_scholar_url: Optional[str] = None
    patents_to_display: int = DEFAULT_PATENTS_TO_DISPLAY
