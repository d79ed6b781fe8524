from yestv.playback import PlaybackLog


def test_record_fills_defaults(store):
    log = PlaybackLog(store, max_entries=10)
    entry = log.record({})
    assert entry["event"] == "unknown"
    assert entry["source"] == ""
    assert entry["contentId"] is None
    assert entry["reason"] is None
    assert entry["id"]
    assert entry["timestamp"].endswith("Z")


def test_record_keeps_given_fields(store):
    log = PlaybackLog(store, max_entries=10)
    entry = log.record({"event": "error", "source": "hls", "contentId": 42, "reason": "timeout"})
    assert (entry["event"], entry["source"], entry["contentId"], entry["reason"]) == ("error", "hls", 42, "timeout")
    assert log.list_entries() == [entry]


def test_null_fields_get_defaults(store):
    log = PlaybackLog(store, max_entries=10)
    entry = log.record({"event": None, "source": None})
    assert entry["event"] == "unknown"
    assert entry["source"] == ""


def test_log_is_capped_newest_first(store):
    cap = 5
    log = PlaybackLog(store, max_entries=cap)
    for i in range(cap + 1):
        log.record({"event": f"e{i}"})
    entries = log.list_entries()
    assert len(entries) == cap
    assert [e["event"] for e in entries] == ["e5", "e4", "e3", "e2", "e1"]
