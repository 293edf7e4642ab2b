"""
Row parsing strategies for Google Scholar works listings.

Every row of the listing table becomes one PatentRecord. The selectors
track Scholar's current markup; when it drifts, only this module changes.
"""

import re
from typing import Optional
from urllib.parse import urljoin

from bs4 import Tag

from config.settings import settings
from .data import PatentRecord

PATENT_NUMBER_PATTERN = re.compile(r"Patent\s*([\w\s.,/-]+)", re.ASCII)
LEADING_DIGITS_PATTERN = re.compile(r"\d+", re.ASCII)


class RowParser:
    """Turns one listing row element into a PatentRecord."""

    row_selector = ""

    def parse_row(self, row: Tag) -> PatentRecord:
        raise NotImplementedError


def extract_patent_number(venue: str) -> Optional[str]:
    """
    Pull the patent number out of a venue string.

    "US Patent 9,123,456 B2" -> "9,123,456 B2"
    """
    match = PATENT_NUMBER_PATTERN.search(venue or "")
    if not match:
        return None
    return match.group(1).strip() or None


def parse_citation_count(text: Optional[str]) -> int:
    """Parse a citation cell. Empty or non-numeric text counts as 0."""
    match = LEADING_DIGITS_PATTERN.match((text or "").strip())
    if not match:
        return 0
    return int(match.group(0), 10)


def _text(element: Optional[Tag]) -> str:
    return element.get_text().strip() if element is not None else ""


class GoogleScholarRowParser(RowParser):
    """Parses `tr.gsc_a_tr` rows of a Scholar profile works table."""

    row_selector = ".gsc_a_tr"
    title_selector = ".gsc_a_at"
    gray_selector = ".gs_gray"
    year_selector = ".gsc_a_y"
    citations_selector = ".gsc_a_ac"

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url or settings.scholar_base_url

    def parse_row(self, row: Tag) -> PatentRecord:
        title_link = row.select_one(self.title_selector)
        title = _text(title_link)

        url = None
        if title_link is not None and title_link.get("href"):
            url = urljoin(self.base_url, title_link["href"])

        # Authors and venue share a class; position tells them apart
        gray = row.select(self.gray_selector)
        authors = _text(gray[0]) if gray else ""
        venue = _text(gray[-1]) if gray else ""

        publication_date = _text(row.select_one(self.year_selector)) or None
        citations = parse_citation_count(_text(row.select_one(self.citations_selector)))

        return PatentRecord(
            title=title,
            authors=authors,
            publication_date=publication_date,
            patent_number=extract_patent_number(venue),
            abstract=None,
            url=url,
            citations=citations,
        )
