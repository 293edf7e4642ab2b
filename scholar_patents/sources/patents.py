"""
Fetch patents from Google Scholar profiles and store them in SQLite.

This module ties the pieces together: fetch a profile's patents listing,
parse its rows into PatentRecords, and replace the user's stored patents
with the result. An empty scrape never erases previously stored patents.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from bs4 import BeautifulSoup
from pydantic import BaseModel

from config.settings import settings
from .data import (
    DEFAULT_PATENTS_TO_DISPLAY,
    PatentRecord,
    get_db_connection,
    get_scholar_profile_url,
    get_user_profile,
    get_users_with_scholar_url,
    init_patents_table,
    init_users_table,
    list_patents_for_user,
    replace_patents_for_user,
)
from .errors import NoPatentsFound, ParseError, ScrapeError, ScrapeFailed
from .fetcher import ScholarFetcher
from .row_parsers import GoogleScholarRowParser, RowParser

logger = logging.getLogger(__name__)


class RefreshResult(BaseModel):
    """Outcome of refreshing one user's patents."""

    user_id: str
    success: bool
    count: Optional[int] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @classmethod
    def failed(cls, user_id: str, error: ScrapeError) -> "RefreshResult":
        return cls(
            user_id=user_id,
            success=False,
            error=error.message,
            error_kind=error.kind,
        )


def parse_patents_html(html: str, row_parser: Optional[RowParser] = None) -> List[PatentRecord]:
    """
    Parse a Scholar works listing into patent records.

    Args:
        html: Raw HTML of the listing page
        row_parser: Row strategy (defaults to GoogleScholarRowParser)

    Returns:
        One PatentRecord per listing row, in document order. An empty list
        means no rows matched, which is not an error.

    Raises:
        ParseError: if the HTML cannot be loaded or a row cannot be parsed
    """
    row_parser = row_parser or GoogleScholarRowParser()

    if not isinstance(html, (str, bytes)):
        raise ParseError(f"Expected HTML text, got {type(html).__name__}")

    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as e:
        raise ParseError(f"Could not parse Google Scholar page: {type(e).__name__}") from e

    patents = []
    for i, row in enumerate(soup.select(row_parser.row_selector)):
        try:
            patents.append(row_parser.parse_row(row))
        except Exception as e:
            raise ParseError(f"Could not parse row {i + 1}: {type(e).__name__}") from e

    return patents


def scrape_patents(
    profile_url: Optional[str],
    fetcher: Optional[ScholarFetcher] = None,
    row_parser: Optional[RowParser] = None
) -> List[PatentRecord]:
    """
    Fetch and parse the patents listed on a Google Scholar profile.

    Raises:
        InvalidProfileUrl, FetchFailed, ParseError
    """
    fetcher = fetcher or ScholarFetcher()
    html = fetcher.fetch_patents_page(profile_url)
    patents = parse_patents_html(html, row_parser)
    logger.info(f"Parsed {len(patents)} patents from {profile_url}")
    return patents


def reconcile_patents(conn, user_id: str, patents: List[PatentRecord]) -> int:
    """
    Make the stored patents for a user match a fresh scrape.

    Args:
        conn: Database connection
        user_id: Owning user
        patents: Freshly scraped patents

    Returns:
        Number of patents stored

    Raises:
        NoPatentsFound: if patents is empty; storage is left untouched
    """
    if not patents:
        raise NoPatentsFound("No patents found or unable to parse Google Scholar page")

    return replace_patents_for_user(conn, user_id, patents)


def _ensure_tables(conn) -> None:
    init_users_table(conn)
    init_patents_table(conn)


def refresh_patents(
    user_id: str,
    db_path: Optional[Path] = None,
    fetcher: Optional[ScholarFetcher] = None,
    row_parser: Optional[RowParser] = None
) -> RefreshResult:
    """
    Refresh a single user's patents from their Google Scholar profile.

    Args:
        user_id: User whose profile should be scraped
        db_path: Optional custom database path
        fetcher: Optional fetcher (a new ScholarFetcher by default)
        row_parser: Optional row parsing strategy

    Returns:
        RefreshResult with the stored count, or the error kind and message
    """
    conn = None
    try:
        conn = get_db_connection(db_path)
        _ensure_tables(conn)
        profile_url = get_scholar_profile_url(conn, user_id)
        patents = scrape_patents(profile_url, fetcher, row_parser)
        count = reconcile_patents(conn, user_id, patents)
        logger.info(f"Stored {count} patents for user {user_id}")
        return RefreshResult(user_id=user_id, success=True, count=count)

    except NoPatentsFound as e:
        logger.info(f"No patents found for user {user_id}; keeping stored patents")
        return RefreshResult.failed(user_id, e)
    except ScrapeError as e:
        logger.warning(f"Failed to refresh patents for user {user_id}: {e.message}")
        return RefreshResult.failed(user_id, e)
    except Exception as e:
        logger.exception(f"Unexpected error refreshing patents for user {user_id}")
        return RefreshResult.failed(
            user_id, ScrapeFailed(f"Unexpected error: {type(e).__name__}")
        )
    finally:
        if conn is not None:
            conn.close()


def refresh_all_eligible_users(
    db_path: Optional[Path] = None,
    fetcher: Optional[ScholarFetcher] = None,
    row_parser: Optional[RowParser] = None,
    delay_between_requests: Optional[float] = None
) -> List[RefreshResult]:
    """
    Refresh patents for every user with a Google Scholar URL configured.

    Users are processed one at a time. A failure for one user is recorded
    in its result and does not stop the others.

    Args:
        db_path: Optional custom database path
        fetcher: Optional fetcher shared by all users
        row_parser: Optional row parsing strategy
        delay_between_requests: Seconds to wait between users
            (defaults to settings.scrape_delay)

    Returns:
        One RefreshResult per eligible user, in user id order
    """
    if delay_between_requests is None:
        delay_between_requests = settings.scrape_delay

    conn = get_db_connection(db_path)
    try:
        _ensure_tables(conn)
        users = get_users_with_scholar_url(conn)
    finally:
        conn.close()

    if not users:
        logger.info("No users with Google Scholar URLs found")
        return []

    owns_fetcher = fetcher is None
    fetcher = fetcher or ScholarFetcher()
    results = []

    try:
        for i, user in enumerate(users):
            logger.info(f"Processing [{i + 1}/{len(users)}]: {user.user_id}")
            results.append(refresh_patents(user.user_id, db_path, fetcher, row_parser))

            # Rate limiting (skip on last user)
            if delay_between_requests and i < len(users) - 1:
                time.sleep(delay_between_requests)
    finally:
        if owns_fetcher:
            fetcher.close()

    return results


def get_displayed_patents(user_id: str, db_path: Optional[Path] = None) -> List[PatentRecord]:
    """
    Return the patents shown on a user's résumé.

    That is the user's most cited patents, capped at their
    patents_to_display setting. A missing profile or a setting below 1
    falls back to DEFAULT_PATENTS_TO_DISPLAY.
    """
    conn = get_db_connection(db_path)
    try:
        _ensure_tables(conn)
        profile = get_user_profile(conn, user_id)
        limit = profile.patents_to_display if profile is not None else None
        if not limit or limit < 1:
            limit = DEFAULT_PATENTS_TO_DISPLAY
        return list_patents_for_user(conn, user_id, limit=limit)
    finally:
        conn.close()


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python -m scholar_patents.sources.patents <profile_url>")
        sys.exit(1)

    profile_url = sys.argv[1]
    print(f"Scraping patents from: {profile_url}")

    try:
        patents = scrape_patents(profile_url)
    except ScrapeError as e:
        print(f"Error ({e.kind}): {e.message}")
        sys.exit(1)

    print(f"\n{'='*60}")
    print(f"Found {len(patents)} patents (not stored)")
    print(f"{'='*60}")

    for i, patent in enumerate(patents, 1):
        print(f"\n{i}. {patent.title}")
        print(f"   Citations: {patent.citations}")
        if patent.authors:
            print(f"   Authors: {patent.authors}")
        if patent.patent_number:
            print(f"   Patent Number: {patent.patent_number}")
        if patent.publication_date:
            print(f"   Published: {patent.publication_date}")
        if patent.url:
            print(f"   URL: {patent.url}")
