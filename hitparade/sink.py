import json
from pathlib import Path
from typing import Any, Dict, List, Union

FIELDS = ("id", "artist", "title", "audio")


def write_songs(songs: List[Dict[str, Any]], path: Union[str, Path]) -> Path:
    """
    Write songs as a pretty-printed JSON array, replacing any existing file.
    The payload is encoded before the file is opened, so an unencodable value
    raises without truncating the previous output. OSError is left to the caller.
    """
    out = Path(path)
    rows = [{k: song.get(k) for k in FIELDS} for song in songs]
    data = json.dumps(rows, ensure_ascii=False, indent=2).encode("utf-8")
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(data)
    return out


def load_songs(path: Union[str, Path]) -> List[Dict[str, Any]]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array, got {type(data).__name__}")
    return data
