"""Shared fixtures for the patent scraper tests."""

from pathlib import Path

import pytest

from scholar_patents.sources.data import (
    UserScholarProfile,
    get_db_connection,
    init_database,
    store_user_profile,
)
from tests.utils import PROFILE_URL, scholar_page, scholar_row


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """A fresh database with all tables created."""
    path = tmp_path / "test.sqlite"
    init_database(path)
    return path


@pytest.fixture
def conn(db_path):
    connection = get_db_connection(db_path)
    yield connection
    connection.close()


@pytest.fixture
def scholar_user(conn) -> UserScholarProfile:
    """A user with a Google Scholar profile URL configured."""
    profile = UserScholarProfile(user_id="user-1", google_scholar_url=PROFILE_URL)
    store_user_profile(conn, profile)
    return profile


@pytest.fixture
def patents_html() -> str:
    """A listing page with three rows, the last one missing its title link."""
    return scholar_page(
        scholar_row(
            title="Method for aligning widgets",
            href="/citations?view_op=view_citation&user=abc123&citation_for_view=abc123:u5HH",
            authors="J Doe, A Smith",
            venue="US Patent 9,123,456 B2",
            year="2016",
            citations="42",
        ),
        scholar_row(
            title="Widget cooling apparatus",
            href="/citations?view_op=view_citation&user=abc123&citation_for_view=abc123:9yKS",
            authors="J Doe",
            venue="US Patent App. 14/567,890",
            year="2019",
            citations="",
        ),
        scholar_row(
            title=None,
            authors="J Doe",
            venue="Proceedings of Widgets",
            year="",
            citations="n/a",
        ),
    )
