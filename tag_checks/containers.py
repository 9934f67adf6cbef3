"""
MUST HAVE REQUIREMENTS:
- Provide a LIFO stack and a FIFO queue backed by owned, resizable sequences.
- Reject None on push/enqueue instead of storing an absent value.
- Raise a dedicated error on pop/peek/dequeue of an empty container.
- Iterate without mutating: stack from top to bottom, queue from front to back.
"""
# ----------------------------------
# Stack and queue used by the tag matcher
# ----------------------------------
from collections import deque


class ContainerError(IndexError):
    pass


class EmptyStackError(ContainerError):
    pass


class EmptyQueueError(ContainerError):
    pass


class Stack:
    def __init__(self):
        self.items = []

    def push(self, item):
        if item is None:
            raise ValueError("cannot push None onto a stack")
        self.items.append(item)

    def pop(self):
        if not self.items:
            raise EmptyStackError("pop from empty stack")
        return self.items.pop()

    def peek(self):
        if not self.items:
            raise EmptyStackError("peek at empty stack")
        return self.items[-1]

    def is_empty(self):
        return not self.items

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return reversed(self.items)


class Queue:
    def __init__(self):
        self.items = deque()

    def enqueue(self, item):
        if item is None:
            raise ValueError("cannot enqueue None")
        self.items.append(item)

    def dequeue(self):
        if not self.items:
            raise EmptyQueueError("dequeue from empty queue")
        return self.items.popleft()

    def peek(self):
        if not self.items:
            raise EmptyQueueError("peek at empty queue")
        return self.items[0]

    def is_empty(self):
        return not self.items

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
