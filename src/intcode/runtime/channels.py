from collections import deque
from typing import Iterable


class Channel:
    ''' Unbounded FIFO of integers between the host and an engine '''

    def __init__(self, values: Iterable[int] = ()):
        self.queue: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self.queue)

    def push(self, value: int):
        self.queue.append(value)

    def pop(self) -> int | None:
        if not self.queue:
            return None

        return self.queue.popleft()

    def drain(self) -> list[int]:
        values = list(self.queue)
        self.queue.clear()
        return values
