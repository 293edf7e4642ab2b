"""Error types raised while scraping patents from Google Scholar."""

from typing import Optional


class ScrapeError(Exception):
    """Base class for every outcome of a refresh that is not a stored result."""

    kind = "scrape_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ScrapeFailed(ScrapeError):
    """The scrape failed; stored patents were left untouched."""

    kind = "scrape_failed"


class InvalidProfileUrl(ScrapeFailed):
    """The profile URL is missing or carries no `user=` identifier."""

    kind = "invalid_profile_url"


class FetchFailed(ScrapeFailed):
    """Upstream returned a non-2xx response or could not be reached."""

    kind = "fetch_failed"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(ScrapeFailed):
    """The listing page could not be parsed."""

    kind = "parse_error"


class NoPatentsFound(ScrapeError):
    """The page parsed fine but listed no patents."""

    kind = "no_patents_found"
