import logging

logger = logging.getLogger(__name__)


# Ordered by priority, higher comes out of the queue first
class PriorityItem:
    def __init__(self, priority, name):
        self.priority = priority
        self.name = name

    def __gt__(self, other):
        if other is None:
            return True
        return self.priority > other.priority

    def __lt__(self, other):
        if other is None:
            return False
        return self.priority < other.priority

    def __str__(self):
        return f"{self.name} with priority {self.priority}"

    def __repr__(self):
        return f"PriorityItem({self.priority!r}, {self.name!r})"


# Binary heap over slots 1..count (slot 0 unused); an item ranks higher
# when item > other, so the item type decides between min and max order
class PriorityQueue:
    def __init__(self, capacity):
        self.capacity = capacity
        self._items = [None] * (capacity + 1)
        self.count = 0

    @classmethod
    def from_items(cls, items):
        items = list(items)
        queue = cls(len(items))
        queue._items[1:] = items
        queue.count = len(items)
        queue._build_heap()
        return queue

    def _swap(self, i, j):
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _sift_up(self, i):
        child = i
        while child > 1:
            parent = child // 2
            if self._items[child] > self._items[parent]:
                self._swap(child, parent)
                child = parent
            else:
                return

    def _sift_down(self, i):
        parent = i
        # while the parent has at least one child
        while 2 * parent <= self.count:
            child = 2 * parent
            if child < self.count and self._items[child + 1] > self._items[child]:
                child += 1

            if self._items[child] > self._items[parent]:
                self._swap(child, parent)
                parent = child
            else:
                return

    def _build_heap(self):
        for i in range(self.count // 2, 0, -1):
            self._sift_down(i)

    def add(self, item):
        if self.count >= self.capacity:
            logger.debug("queue full (capacity %d), dropping %r", self.capacity, item)
            return
        self.count += 1
        self._items[self.count] = item
        self._sift_up(self.count)

    def remove(self):
        if self.empty():
            return
        # Replace the root with the last item and let it sink
        self._items[1] = self._items[self.count]
        self._items[self.count] = None
        self.count -= 1
        self._sift_down(1)

    def front(self):
        if self.empty():
            return None
        return self._items[1]

    def heap_sort(self, items):
        # Sorts in place, highest ranked first; previous contents are discarded
        self.capacity = self.count = len(items)
        self._items[1:] = items
        self._build_heap()

        for i in range(self.capacity):
            items[i] = self.front()
            self.remove()
        return items

    def clear(self):
        for i in range(1, self.count + 1):
            self._items[i] = None
        self.count = 0

    def empty(self):
        return self.count == 0

    def size(self):
        return self.count

    def __len__(self):
        return self.count
