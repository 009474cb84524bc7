"""
Unit tests for the shared log store.
"""

import threading

from transform_report.data.schema import LogEntry, LogLevel
from transform_report.data.store import LogStore


def test_append_preserves_insertion_order(store):
    first = LogEntry(message="first")
    second = LogEntry(message="second")

    store.append(LogLevel.INFO, first)
    store.append(LogLevel.WARNING, second)

    snapshot = store.snapshot()
    assert [log.entry.message for log in snapshot] == ["first", "second"]
    assert [log.level for log in snapshot] == [LogLevel.INFO, LogLevel.WARNING]


def test_snapshot_does_not_mutate_or_track_store(store):
    store.append(LogLevel.INFO, LogEntry(message="one"))

    snapshot = store.snapshot()
    store.append(LogLevel.INFO, LogEntry(message="two"))

    assert len(snapshot) == 1
    assert len(store) == 2
    assert isinstance(snapshot, tuple)


def test_clear_empties_store(store):
    for i in range(3):
        store.append(LogLevel.INFO, LogEntry(message=str(i)))

    discarded = store.clear()

    assert discarded == 3
    assert len(store) == 0
    assert store.snapshot() == ()


def test_append_accepts_entries_without_validation(store):
    entry = LogEntry.model_construct(message="no timestamp")

    store.append(LogLevel.ERROR, entry)

    assert store.snapshot()[0].entry is entry


def test_separate_stores_are_independent():
    a, b = LogStore(), LogStore()
    a.append(LogLevel.INFO, LogEntry())

    assert len(a) == 1
    assert len(b) == 0


def test_concurrent_appends_are_not_lost(store):
    threads_count = 8
    per_thread = 250
    barrier = threading.Barrier(threads_count)

    def produce(worker: int) -> None:
        barrier.wait()
        for i in range(per_thread):
            store.append(LogLevel.INFO, LogEntry(message=f"{worker}-{i}"))

    threads = [threading.Thread(target=produce, args=(w,)) for w in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    messages = [log.entry.message for log in store.snapshot()]
    assert len(messages) == threads_count * per_thread
    assert len(set(messages)) == len(messages)


def test_snapshot_while_writing_never_duplicates(store):
    stop = threading.Event()

    def produce() -> None:
        i = 0
        while not stop.is_set():
            store.append(LogLevel.INFO, LogEntry(message=str(i)))
            i += 1

    writer = threading.Thread(target=produce)
    writer.start()
    try:
        for _ in range(50):
            snapshot = store.snapshot()
            messages = [log.entry.message for log in snapshot]
            assert len(messages) == len(set(messages))
            # Insertion order: each snapshot is a prefix of the sequence 0..n-1
            assert messages == [str(i) for i in range(len(messages))]
    finally:
        stop.set()
        writer.join()
