import threading

from raftviz.events import Event, EventLog


def test_append_and_snapshot_keep_order():
    log = EventLog()
    log.append(Event("N1", "N2", "a", 1))
    log.append(Event("N2", "N1", "b", 2))
    assert [e.message for e in log.snapshot()] == ["a", "b"]
    assert len(log) == 2


def test_snapshot_is_a_copy():
    log = EventLog()
    log.record("N1", "N2", "hello")
    snap = log.snapshot()
    log.record("N1", "N3", "again")
    assert len(snap) == 1
    assert len(log.snapshot()) == 2


def test_clear_empties_log():
    log = EventLog()
    log.record("N1", "N2", "x")
    log.clear()
    assert log.snapshot() == ()
    assert len(log) == 0


def test_event_wire_shape():
    e = Event("N1", "N2", "VoteGranted", 1700000000000)
    assert e.to_dict() == {"from": "N1", "to": "N2", "msg": "VoteGranted", "at": 1700000000000}


def test_record_clamps_backwards_clock(monkeypatch):
    log = EventLog()
    ticks = iter([2000, 1000, 3000])
    monkeypatch.setattr("raftviz.events.now_ms", lambda: next(ticks))
    stamps = [log.record("N1", "N2", str(i)).timestamp for i in range(3)]
    assert stamps == [2000, 2000, 3000]


def test_concurrent_records_are_not_lost():
    log = EventLog()

    def writer(name):
        for i in range(200):
            log.record(name, "N1", f"m{i}")

    threads = [threading.Thread(target=writer, args=(f"N{i}",)) for i in range(2, 7)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    events = log.snapshot()
    assert len(events) == 1000
    stamps = [e.timestamp for e in events]
    assert stamps == sorted(stamps)
