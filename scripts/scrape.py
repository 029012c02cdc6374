"""
Scrape the SWR1 Hitparade listing into a numbered JSON song list.

Usage:
  python -m scripts.scrape
  python -m scripts.scrape --pages 5 --out data/songs.json
  HITPARADE_EXTRACT_MODE=scripts python -m scripts.scrape
"""

import argparse
from typing import List, Optional

import requests

from hitparade import config
from hitparade.extractor import EXTRACTORS, get_extractor
from hitparade.pipeline import scrape
from hitparade.sink import write_songs


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Scrape hitparade songs (title, artist, mp3) to JSON.")
    ap.add_argument("--base-url", default=config.BASE_URL)
    ap.add_argument("--pages", type=int, default=config.MAX_PAGES, help="Number of listing pages (1..N)")
    ap.add_argument("--out", default=config.OUTPUT_FILE, help="Output JSON file (overwritten)")
    ap.add_argument("--marker", default=config.AUDIO_MARKER, help="Substring that marks an audio URL")
    ap.add_argument("--extract", choices=sorted(EXTRACTORS), default=config.EXTRACT_MODE)
    ap.add_argument("--timeout", type=float, default=config.REQUEST_TIMEOUT)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    extract = get_extractor(args.extract)

    print("🚀 Starting SWR1 scraper...")
    with requests.Session() as session:
        songs, summary = scrape(
            args.base_url,
            args.pages,
            marker=args.marker,
            extract=extract,
            session=session,
            timeout=args.timeout,
        )

    if summary["failed_pages"]:
        print(f"[INFO] {summary['failed_pages']} of {summary['pages']} pages failed to load")
    if summary["bad_escape"] or summary["not_audio"]:
        print(
            f"[INFO] Discarded {summary['bad_escape']} undecodable and "
            f"{summary['not_audio']} non-audio matches"
        )

    try:
        out = write_songs(songs, args.out)
    except OSError as e:
        print(f"[ERROR] Could not write {args.out}: {e}")
        raise SystemExit(1)

    print("------------------------------------------------")
    print(f"🎉 DONE! {len(songs)} songs saved.")
    print(f"📁 File: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
