from __future__ import annotations
from collections import deque
from typing import Iterator

from gridiron.constants import LOG_CAPACITY

WELCOME_MESSAGE = "Welcome to Gridiron Strategy! Select a play to begin."


class PlayLog:
    """Newest-first message buffer; entries past ``capacity`` fall off the end."""

    def __init__(self, capacity: int = LOG_CAPACITY):
        if capacity < 1:
            raise ValueError("PlayLog capacity must be >= 1")
        self.capacity = capacity
        self._buf: deque[str] = deque(maxlen=capacity)

    def add(self, message: str) -> None:
        self._buf.appendleft(message)

    def clear(self) -> None:
        self._buf.clear()

    @property
    def entries(self) -> list[str]:
        return list(self._buf)

    def __len__(self) -> int:
        return len(self._buf)

    def __iter__(self) -> Iterator[str]:
        return iter(self._buf)

    def __getitem__(self, idx: int) -> str:
        return self._buf[idx]
