import collections

class Queue(object):
    """Minimal FIFO queue, used for level order traversals."""

    def __init__(self):
        self._items = collections.deque()

    def enqueue(self, item):
        self._items.append(item)

    def dequeue(self):
        """Removes and returns the head item, or None if the queue is empty."""
        try:
            return self._items.popleft()
        except IndexError:
            return None

    def __len__(self):
        return len(self._items)
