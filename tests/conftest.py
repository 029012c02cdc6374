# tests/conftest.py
import pytest


def make_fragment(title: str, artist: str, url: str) -> str:
    """
    One song entry as it appears in the listing: JSON escaped into a JS string,
    so every quote shows up as \\" and values keep their JSON escapes.
    """
    return (
        '{\\"title\\":\\"' + title + '\\",'
        '\\"artist\\":\\"' + artist + '\\",'
        '\\"year\\":1975,\\"place\\":12,'
        '\\"teaserURL\\":\\"' + url + '\\"}'
    )


def make_page(*fragments: str) -> str:
    body = ",".join(fragments)
    return (
        "<html><head><title>SWR1 Hitparade</title></head><body>"
        '<script>self.__next_f.push([1,"[' + body + ']"])</script>'
        "</body></html>"
    )


@pytest.fixture
def fragment():
    return make_fragment


@pytest.fixture
def page():
    return make_page


class FakeFetch:
    """Stands in for fetch_page: pages maps page number -> html or exception."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def __call__(self, base_url, page, session=None, timeout=None):
        self.calls.append(page)
        result = self.pages.get(page, "")
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_fetch():
    return FakeFetch
