"""Tests for freewrite.entries.catalog."""

from datetime import datetime
from uuid import UUID

from freewrite.entries.catalog import find_entry, sort_catalog
from freewrite.entries.codec import FilenameCodec
from freewrite.entries.models import Entry

codec = FilenameCodec()


def _entry(entry_id: str, created: datetime) -> Entry:
    uid = UUID(entry_id)
    return Entry.from_content(uid, codec.encode(uid, created), created, "text")


A = "00000000-0000-4000-8000-00000000000a"
B = "00000000-0000-4000-8000-00000000000b"
C = "00000000-0000-4000-8000-00000000000c"


def test_newest_first():
    old = _entry(A, datetime(2024, 1, 1))
    mid = _entry(B, datetime(2024, 2, 1))
    new = _entry(C, datetime(2024, 3, 1))
    assert sort_catalog([mid, old, new]) == [new, mid, old]


def test_ties_broken_by_filename():
    same = datetime(2024, 1, 1, 8, 30, 0)
    c, a, b = _entry(C, same), _entry(A, same), _entry(B, same)
    result = sort_catalog([c, a, b])
    assert [e.filename for e in result] == sorted(e.filename for e in (a, b, c))


def test_tiebreak_is_stable_across_input_orders():
    same = datetime(2024, 1, 1)
    entries = [_entry(A, same), _entry(B, same), _entry(C, same)]
    assert sort_catalog(entries) == sort_catalog(reversed(entries))


def test_empty():
    assert sort_catalog([]) == []


def test_find_entry():
    a = _entry(A, datetime(2024, 1, 1))
    b = _entry(B, datetime(2024, 1, 2))
    assert find_entry([a, b], UUID(B)) is b
    assert find_entry([a, b], UUID(C)) is None
