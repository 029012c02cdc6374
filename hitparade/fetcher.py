from typing import Optional

import requests


def build_page_url(base_url: str, page: int) -> str:
    """
    Listing pages are addressed with a 1-based ?p= query parameter.
    """
    sep = "&" if "?" in base_url else "?"
    return f"{base_url}{sep}p={page}"


def fetch_page(
    base_url: str,
    page: int,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    GET one listing page and return the response body as text.
    Network and HTTP errors are raised as requests.RequestException; no retries.
    """
    url = build_page_url(base_url, page)
    http = session or requests
    resp = http.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.text
