"""
Raw triple extraction from listing pages.

The listing embeds its data as JSON that was itself escaped into a string,
so every quote arrives as \" and field values still carry JSON escapes.
Extractors only capture; decoding happens in hitparade.decoder.
"""

import re
from typing import Callable, Iterator, Tuple

from bs4 import BeautifulSoup

RawTriple = Tuple[str, str, str]
Extractor = Callable[[str], Iterator[RawTriple]]

# any character except line terminators (\n, \r, U+2028, U+2029)
_ANY = r"[^\n\r\u2028\u2029]"

# title stops at the first \",\" so it can't run into the next field;
# anything between artist and teaserURL is skipped lazily
TRIPLE_RE = re.compile(
    r'\\"title\\":\\"(?P<title>(?:(?!\\",\\")' + _ANY + r')*?)\\",'
    r'\\"artist\\":\\"(?P<artist>' + _ANY + r'*?)\\",'
    + _ANY + r'*?\\"teaserURL\\":\\"(?P<url>' + _ANY + r'*?)\\"'
)


def iter_raw_triples(text: str) -> Iterator[RawTriple]:
    """
    Yield (raw_title, raw_artist, raw_url) for every non-overlapping match, left to right.
    """
    for m in TRIPLE_RE.finditer(text or ""):
        yield m.group("title"), m.group("artist"), m.group("url")


def iter_script_triples(html: str) -> Iterator[RawTriple]:
    """
    Same scan, restricted to the text of <script> elements (document order).
    """
    soup = BeautifulSoup(html or "", "html.parser")
    for script in soup.find_all("script"):
        yield from iter_raw_triples(script.string or "")


EXTRACTORS = {
    "raw": iter_raw_triples,
    "scripts": iter_script_triples,
}


def get_extractor(mode: str) -> Extractor:
    try:
        return EXTRACTORS[mode]
    except KeyError:
        raise ValueError(f"unknown extract mode {mode!r} (expected one of {sorted(EXTRACTORS)})")
