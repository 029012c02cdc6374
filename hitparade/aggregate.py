from typing import Any, Dict, Iterable, List


def dedupe_by_audio(records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Keep one record per audio URL.

    - the LAST record seen for a URL wins (its fields are kept)
    - it sits where the URL first appeared
    """
    latest: Dict[str, Dict[str, Any]] = {}
    for rec in records:
        # dict keeps first-insertion order on overwrite
        latest[rec["audio"]] = rec
    return [dict(rec) for rec in latest.values()]


def renumber(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    for i, rec in enumerate(records, start=1):
        rec["id"] = i
    return records


def finalize(records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return renumber(dedupe_by_audio(records))
