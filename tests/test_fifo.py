import pytest

from spellkit.fifo import Queue, main


def test_new_queue_is_empty():
    q = Queue()
    assert q.is_empty()
    assert len(q) == 0


def test_fifo_order():
    q = Queue()
    for v in (10, 20, 30):
        q.enqueue(v)
    assert [q.dequeue(), q.dequeue(), q.dequeue()] == [10, 20, 30]
    assert q.is_empty()


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_queue_reusable_after_emptying():
    q = Queue()
    q.enqueue(1)
    assert q.dequeue() == 1
    q.enqueue(2)
    q.enqueue(3)
    assert q.dequeue() == 2
    assert len(q) == 1


def test_clear_empties_queue():
    q = Queue([1, 2, 3])
    q.clear()
    assert q.is_empty()
    with pytest.raises(IndexError):
        q.dequeue()


def test_drain_yields_all_in_order():
    values = [5, -1, 7, 0]
    q = Queue(values)
    assert list(q.drain()) == values
    assert not q


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out == "Dequeued: 10\nDequeued: 20\nDequeued: 30\n"