"""
Page pipeline: fetch -> extract -> decode/filter per page, then one
dedupe + renumber pass over everything that was kept.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

import requests

from hitparade.aggregate import finalize
from hitparade.decoder import KEPT, BAD_ESCAPE, NOT_AUDIO, decode_triple
from hitparade.extractor import Extractor, iter_raw_triples
from hitparade.fetcher import fetch_page

PageResult = Tuple[List[Dict[str, Any]], Dict[str, int]]
Fetch = Callable[..., str]


def new_stats() -> Dict[str, int]:
    return {"matched": 0, KEPT: 0, BAD_ESCAPE: 0, NOT_AUDIO: 0}


def process_page(text: str, marker: str = ".mp3", extract: Extractor = iter_raw_triples) -> PageResult:
    """
    Extract and decode every candidate on one page.
    Returns the kept records (match order) and per-outcome counters.
    """
    records: List[Dict[str, Any]] = []
    stats = new_stats()
    for triple in extract(text):
        stats["matched"] += 1
        rec, status = decode_triple(triple, marker)
        stats[status] += 1
        if rec is not None:
            records.append(rec)
    return records, stats


def scrape(
    base_url: str,
    max_pages: int,
    marker: str = ".mp3",
    extract: Extractor = iter_raw_triples,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    fetch: Fetch = fetch_page,
) -> Tuple[List[Dict[str, Any]], Dict[str, int]]:
    """
    Walk pages 1..max_pages strictly in order and return (songs, summary).

    A page whose fetch fails is reported and contributes nothing;
    the run carries on with the next page.
    """
    all_songs: List[Dict[str, Any]] = []
    summary = new_stats()
    summary.update({"pages": 0, "failed_pages": 0})

    for page in range(1, max_pages + 1):
        print(f"⏳ Page {page}/{max_pages}... ", end="", flush=True)
        summary["pages"] += 1
        try:
            html = fetch(base_url, page, session=session, timeout=timeout)
        except requests.RequestException as e:
            print(f"❌ Error: {e}")
            summary["failed_pages"] += 1
            continue

        records, stats = process_page(html, marker=marker, extract=extract)
        for k, v in stats.items():
            summary[k] += v
        all_songs.extend(records)
        print(f"✅ {len(records)} found.")

    songs = finalize(all_songs)
    summary["unique"] = len(songs)
    return songs, summary
