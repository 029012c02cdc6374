# tests/test_aggregate.py
from hitparade.aggregate import dedupe_by_audio, finalize, renumber


def _song(title, audio, artist="Queen"):
    return {"id": 0, "artist": artist, "title": title, "audio": audio}


def test_last_record_wins_at_first_position():
    records = [
        _song("First A", "a.mp3"),
        _song("Only B", "b.mp3"),
        _song("Second A", "a.mp3"),
        _song("Only C", "c.mp3"),
    ]
    out = dedupe_by_audio(records)
    assert [r["audio"] for r in out] == ["a.mp3", "b.mp3", "c.mp3"]
    assert out[0]["title"] == "Second A"


def test_renumber_is_dense_and_one_based():
    out = renumber([_song("x", "a.mp3"), _song("y", "b.mp3"), _song("z", "c.mp3")])
    assert [r["id"] for r in out] == [1, 2, 3]


def test_finalize_ids_match_distinct_audio():
    records = [_song(str(i), f"{i % 4}.mp3") for i in range(10)]
    out = finalize(records)
    assert [r["id"] for r in out] == [1, 2, 3, 4]
    assert len({r["audio"] for r in out}) == len(out)


def test_finalize_is_idempotent():
    records = [_song("a", "1.mp3"), _song("b", "2.mp3"), _song("c", "1.mp3")]
    once = finalize(records)
    twice = finalize(once)
    assert twice == once


def test_input_is_not_mutated():
    records = [_song("a", "1.mp3"), _song("b", "1.mp3")]
    finalize(records)
    assert [r["id"] for r in records] == [0, 0]


def test_empty():
    assert finalize([]) == []
