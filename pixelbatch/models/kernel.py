from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class Kernel:
    """
    Value-object holding a 3x3 convolution matrix of signed integers.
    The raw weighted sum is used: there is no normalisation divisor.
    """
    name: str
    weights: Tuple[Tuple[int, int, int], Tuple[int, int, int], Tuple[int, int, int]]

    def __post_init__(self):
        if len(self.weights) != 3 or any(len(row) != 3 for row in self.weights):
            raise ValueError(f"Kernel '{self.name}' must be 3x3")

    def as_array(self) -> np.ndarray:
        return np.array(self.weights, dtype=np.float32)


EDGE_DETECT_KERNEL = Kernel(
    name="edge_detect",
    weights=((1, 1, 1),
             (1, -8, 1),
             (1, 1, 1)),
)

SHARPEN_KERNEL = Kernel(
    name="sharpen",
    weights=((0, -1, 0),
             (-1, 5, -1),
             (0, -1, 0)),
)
