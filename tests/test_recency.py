from recency import RecentSignatures


def test_add_and_contains():
    r = RecentSignatures(max_size=3)
    r.add("pct_15_5000")
    assert "pct_15_5000" in r
    assert "pct_10_5000" not in r
    assert len(r) == 1


def test_evicts_oldest_first():
    r = RecentSignatures(max_size=3)
    for s in ("a", "b", "c", "d"):
        r.add(s)
    assert list(r) == ["b", "c", "d"]
    assert "a" not in r


def test_lookup_does_not_refresh():
    r = RecentSignatures(max_size=2)
    r.add("a")
    r.add("b")
    assert "a" in r  # FIFO, not LRU-on-read
    r.add("c")
    assert "a" not in r and "b" in r and "c" in r


def test_clear():
    r = RecentSignatures(max_size=5)
    r.add("a")
    r.clear()
    assert len(r) == 0 and "a" not in r
