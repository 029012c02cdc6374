import json
from typing import Dict, Any, Optional, Tuple

from hitparade.extractor import RawTriple

# Decode outcomes
KEPT = "kept"
BAD_ESCAPE = "bad_escape"
NOT_AUDIO = "not_audio"

DecodeOutcome = Tuple[Optional[Dict[str, Any]], str]


def decode_json_string(raw: str) -> str:
    """
    Treat raw as the body of a JSON string literal and return its value.
    Raises ValueError on bad escapes, raw control characters, or lone
    surrogates (\\ud83d without its pair) that can't be written as UTF-8.
    """
    value = json.loads('"' + raw + '"')
    value.encode("utf-8")
    return value


def encode_json_string(value: str) -> str:
    return json.dumps(value)[1:-1]


def is_audio_url(url: str, marker: str = ".mp3") -> bool:
    return bool(url) and marker in url


def decode_triple(triple: RawTriple, marker: str = ".mp3") -> DecodeOutcome:
    """
    Turn one raw triple into a song record.

    Returns (record, KEPT), or (None, BAD_ESCAPE) / (None, NOT_AUDIO) for discards.
    The id is a placeholder until the final renumbering.
    """
    raw_title, raw_artist, raw_url = triple
    try:
        url = decode_json_string(raw_url)
        title = decode_json_string(raw_title)
        artist = decode_json_string(raw_artist)
    except ValueError:
        return None, BAD_ESCAPE

    if not is_audio_url(url, marker):
        return None, NOT_AUDIO

    return {
        "id": 0,
        "artist": artist,
        "title": title,
        "audio": url,
    }, KEPT
