"""
Re-run dedupe + renumbering over an existing songs file.

Usage:
  python -m scripts.dedupe_songs [songs.json] [--out other.json]
"""

import argparse
from typing import List, Optional

from hitparade import config
from hitparade.aggregate import finalize
from hitparade.sink import load_songs, write_songs


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Deduplicate a songs JSON file by audio URL.")
    ap.add_argument("path", nargs="?", default=config.OUTPUT_FILE)
    ap.add_argument("--out", default=None, help="Write here instead of overwriting the input")
    args = ap.parse_args(argv)

    songs = load_songs(args.path)
    kept = []
    bad = 0
    for rec in songs:
        # entries without a usable audio URL can't be keyed
        if not isinstance(rec, dict) or not isinstance(rec.get("audio"), str) or not rec["audio"]:
            bad += 1
            continue
        kept.append(rec)

    unique = finalize(kept)
    out = write_songs(unique, args.out or args.path)

    print("✅ DEDUPE DONE")
    print("Total songs read :", len(songs))
    print("Bad entries      :", bad)
    print("Unique audio URLs:", len(unique))
    print("Wrote            :", str(out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
