"""Test utilities for building Scholar pages and stubbing HTTP."""

from typing import Dict, Optional, Union

import requests

from scholar_patents.sources.data import PatentRecord

PROFILE_URL = "https://scholar.google.com/citations?user=abc123&hl=en"


def scholar_row(
    title: Optional[str] = "Untitled",
    href: Optional[str] = "/citations?view_op=view_citation&user=abc123&citation_for_view=abc123:x",
    authors: Optional[str] = "J Doe",
    venue: Optional[str] = None,
    year: str = "",
    citations: str = "",
) -> str:
    """Render one `tr.gsc_a_tr` row the way Scholar lays it out."""
    if title is None:
        anchor = ""
    elif href is None:
        anchor = f'<a class="gsc_a_at">{title}</a>'
    else:
        anchor = f'<a href="{href}" class="gsc_a_at">{title}</a>'

    gray = ""
    if authors is not None:
        gray += f'<div class="gs_gray">{authors}</div>'
    if venue is not None:
        gray += f'<div class="gs_gray">{venue}</div>'

    return f"""
        <tr class="gsc_a_tr">
            <td class="gsc_a_t">{anchor}{gray}</td>
            <td class="gsc_a_c"><a href="#" class="gsc_a_ac gs_ibl">{citations}</a></td>
            <td class="gsc_a_y"><span class="gsc_a_h gsc_a_hc gs_ibl">{year}</span></td>
        </tr>
    """


def scholar_page(*rows: str) -> str:
    """Wrap rows in a works table."""
    return f"""
    <html>
    <body>
        <div id="gsc_prf_in">Jane Doe</div>
        <table id="gsc_a_t">
            <tbody id="gsc_a_b">{"".join(rows)}</tbody>
        </table>
    </body>
    </html>
    """


def make_response(status_code: int = 200, text: str = "", reason: str = "OK") -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    response._content = text.encode("utf-8")
    return response


def make_patent(title: str, citations: int = 0, **kwargs) -> PatentRecord:
    return PatentRecord(title=title, authors="J Doe", citations=citations, **kwargs)


class FakeFetcher:
    """Stands in for ScholarFetcher, serving canned pages by profile URL."""

    def __init__(self, pages: Dict[str, Union[str, Exception]]):
        self.pages = pages
        self.calls = []

    def fetch_patents_page(self, profile_url):
        self.calls.append(profile_url)
        page = self.pages[profile_url]
        if isinstance(page, Exception):
            raise page
        return page
