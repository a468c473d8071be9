from ordtree.fifo import Queue


def test_fifo_order():
    q = Queue()
    for i in range(3):
        q.enqueue(i)
    assert len(q) == 3
    assert [q.dequeue() for _ in range(3)] == [0, 1, 2]

def test_dequeue_empty_returns_none():
    q = Queue()
    assert q.dequeue() is None
    q.enqueue('a')
    assert q.dequeue() == 'a'
    assert q.dequeue() is None
    assert len(q) == 0
