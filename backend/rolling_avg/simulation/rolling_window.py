from __future__ import annotations

import math
from collections import deque


class RollingAverage:
    """Fixed-size moving average, as computed on the node before each uplink."""

    def __init__(self, size: int):
        if size < 1:
            raise ValueError("window size must be at least 1")
        self.size = size
        self._samples: deque[float] = deque(maxlen=size)

    def __len__(self) -> int:
        return len(self._samples)

    @property
    def value(self) -> float | None:
        if not self._samples:
            return None
        return math.fsum(self._samples) / len(self._samples)

    def add(self, sample: float) -> float:
        self._samples.append(float(sample))
        return self.value

    def reset(self) -> None:
        self._samples.clear()
