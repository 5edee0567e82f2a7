from __future__ import annotations

import logging

import numpy as np

from .errors import make_config_error

logger = logging.getLogger(__name__)


class Tape:
    """Fixed-size circular tape of wrapping 8-bit cells with a movable cursor."""

    def __init__(self, size: int):
        if not isinstance(size, (int, np.integer)) or isinstance(size, bool) or size < 1:
            raise make_config_error(field='memory_size', value=size)
        self.cells = np.zeros(int(size), dtype=np.uint8)
        self.current_idx = 0
        logger.debug("allocated tape with %d cells", self.size)

    @property
    def size(self) -> int:
        return len(self.cells)

    def clear(self) -> None:
        self.cells.fill(0)
        self.current_idx = 0

    def read(self) -> int:
        return int(self.cells[self.current_idx])

    def write(self, value: int) -> None:
        self.cells[self.current_idx] = np.uint8(value & 0xFF)

    def advance(self) -> None:
        self.current_idx += 1
        if self.current_idx == len(self.cells):
            self.current_idx = 0

    def retreat(self) -> None:
        if self.current_idx == 0:
            self.current_idx = len(self.cells)
        self.current_idx -= 1

    def increment(self) -> None:
        # uint8 scalar arithmetic warns on overflow, so wrap through int
        self.cells[self.current_idx] = np.uint8((int(self.cells[self.current_idx]) + 1) & 0xFF)

    def decrement(self) -> None:
        self.cells[self.current_idx] = np.uint8((int(self.cells[self.current_idx]) - 1) & 0xFF)

    def snapshot(self, start: int = 0, stop: int | None = None) -> bytes:
        return self.cells[start:stop].tobytes()

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"Tape(size={self.size}, current_idx={self.current_idx})"
