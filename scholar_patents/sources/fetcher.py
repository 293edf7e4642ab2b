"""
Fetch the patents listing page of a Google Scholar profile.

One GET per profile, no retries and no caching. Failures are raised as
InvalidProfileUrl or FetchFailed so the caller can tell a configuration
problem from an upstream one.
"""

import logging
import re
from typing import Optional

import requests

from config.settings import settings
from scholar_patents.scholar_urls import PATENTS_LIST_PATH, PROFILE_ID_PATTERN
from .errors import FetchFailed, InvalidProfileUrl

logger = logging.getLogger(__name__)


def extract_profile_id(profile_url: Optional[str]) -> str:
    """
    Extract the profile owner identifier from a Scholar profile URL.

    Args:
        profile_url: URL such as https://scholar.google.com/citations?user=abc123&hl=en

    Returns:
        The value of the `user` query parameter

    Raises:
        InvalidProfileUrl: if the URL has no `user=` identifier
    """
    if not profile_url:
        raise InvalidProfileUrl("Google Scholar URL not set in your profile")

    match = re.search(PROFILE_ID_PATTERN, profile_url)
    if not match:
        raise InvalidProfileUrl(
            "Invalid Google Scholar URL. Please check your profile URL."
        )
    return match.group(1)


def build_patents_url(profile_id: str, base_url: Optional[str] = None) -> str:
    """Build the "list works, filtered to patents" URL for a profile."""
    base_url = (base_url or settings.scholar_base_url).rstrip("/")
    return base_url + PATENTS_LIST_PATH.format(profile_id=profile_id)


class ScholarFetcher:
    """Fetches Scholar listing pages with a desktop-browser identity."""

    DEFAULT_HEADERS = {
        "Accept": "text/html,application/xhtml+xml",
        "Accept-Language": "en-US,en;q=0.9",
    }

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.base_url = base_url or settings.scholar_base_url
        self.session = requests.Session()
        self.session.headers.update(self.DEFAULT_HEADERS)
        self.session.headers["User-Agent"] = user_agent or settings.user_agent

    def close(self) -> None:
        self.session.close()

    def fetch_patents_page(self, profile_url: Optional[str]) -> str:
        """
        Fetch the raw HTML of the patents listing for a profile.

        Args:
            profile_url: The user's Google Scholar profile URL

        Returns:
            Response body as text

        Raises:
            InvalidProfileUrl: if the URL has no profile identifier
            FetchFailed: on a non-2xx response, timeout or network error
        """
        profile_id = extract_profile_id(profile_url)
        url = build_patents_url(profile_id, self.base_url)
        logger.info(f"Fetching patents page: {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout:
            raise FetchFailed(f"Request timed out after {self.timeout}s")
        except requests.exceptions.RequestException as e:
            raise FetchFailed(f"Network error: {type(e).__name__}")

        if not response.ok:
            raise FetchFailed(
                f"Failed to fetch Google Scholar page: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        return response.text
