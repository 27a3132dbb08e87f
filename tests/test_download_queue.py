import threading

import pytest

from modregistry.download_queue import DownloadQueue
from modregistry.ids import ProjectId, VersionId


def _pair(n):
    return ProjectId(n), VersionId(n + 1000)


def test_take_returns_items_in_order():
    queue = DownloadQueue()
    pairs = [_pair(n) for n in range(5)]
    for project, version in pairs:
        queue.add(project, version)
    assert queue.take() == pairs


def test_take_empties_queue():
    queue = DownloadQueue()
    queue.add(*_pair(1))
    queue.take()
    assert queue.take() == []
    assert len(queue) == 0


def test_len_counts_queued_downloads():
    queue = DownloadQueue()
    queue.add(*_pair(1))
    queue.add(*_pair(1))
    assert len(queue) == 2


def test_index_passes_batch_to_apply():
    queue = DownloadQueue()
    pairs = [_pair(n) for n in range(3)]
    for pair in pairs:
        queue.add(*pair)
    received = []
    count = queue.index(received.append)
    assert count == 3
    assert received == [pairs]
    assert len(queue) == 0


def test_index_on_empty_queue_skips_apply():
    queue = DownloadQueue()
    received = []
    assert queue.index(received.append) == 0
    assert received == []


def test_index_error_propagates_and_drops_batch():
    queue = DownloadQueue()
    queue.add(*_pair(1))

    def fail(batch):
        raise RuntimeError("database down")

    with pytest.raises(RuntimeError):
        queue.index(fail)
    assert queue.take() == []


def test_concurrent_adds_are_all_kept():
    queue = DownloadQueue()

    def worker():
        for n in range(100):
            queue.add(*_pair(n))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(queue.take()) == 400