"""
Bounded grid mode: multi-octave value noise upsampled into a TerraGrid.

A single random.Random stream is created per generate() call and consumed
octave by octave in increasing order. Octave k+1 continues the sequence
where octave k stopped, so for fixed (seed, persistence, size) the grid is
bit-identical every time.
"""

import logging
import numbers
import random
from typing import List, Union

from .terra import TerraGrid

logger = logging.getLogger(__name__)


def octave_count(size: int) -> int:
    """floor(log2(size)); 0 for anything below 2."""
    if size < 2:
        return 0
    return size.bit_length() - 1


def stream_seed(numeric_seed: Union[int, float], persistence: float) -> Union[int, str]:
    """
    Seed for the per-call random stream, from numeric_seed * persistence.

    Integer products are used as is. Anything else is reduced to float.hex(),
    because random.Random seeds floats through hash(), and hash(nan) differs
    between processes.
    """
    if isinstance(numeric_seed, numbers.Integral) and abs(numeric_seed) >= 2 ** 63:
        # too big to multiply by a float
        numeric_seed = int(numeric_seed) % 2 ** 64
    product = numeric_seed * persistence
    if isinstance(product, numbers.Integral):
        return int(product)
    return float(product).hex()


def upsample(arr: List[List[float]], i: int, j: int, dx0: float, dy0: float,
             nx: float, ny: float) -> float:
    """Bilinear blend of coarse cell (i, j) at offset (dx0, dy0) from its corner."""
    dx1 = nx - dx0
    dy1 = ny - dy0
    return (arr[j][i] * dx1 * dy1
            + arr[j][i + 1] * dx0 * dy1
            + arr[j + 1][i] * dx1 * dy0
            + arr[j + 1][i + 1] * dx0 * dy0) / (nx * ny)


class GridOctaveSynthesizer:
    def __init__(self, numeric_seed: Union[int, float], persistence: float, size: int) -> None:
        self.persistence = persistence
        self.size = size
        self._rng = random.Random(stream_seed(numeric_seed, persistence))
        self._next_octave = 0

    def random(self) -> float:
        return self._rng.random()

    def lattice(self, freq: int, amp: float) -> List[List[float]]:
        """(freq+1) x (freq+1) coarse grid, drawn row by row."""
        n = freq + 1
        return [[self.random() * amp for _ in range(n)] for _ in range(n)]

    def octave(self, k: int, terra: TerraGrid) -> None:
        if k != self._next_octave:
            raise ValueError(f"octave {k} requested, expected {self._next_octave}")
        self._next_octave += 1

        freq = 2 ** k
        amp = self.persistence ** k
        arr = self.lattice(freq, amp)

        nx = self.size / freq
        ny = self.size / freq
        logger.debug(f"octave {k}: freq={freq} amp={amp} pitch={nx}")

        for ky in range(self.size):
            j = int(ky / ny)
            dy0 = ky - j * ny
            for kx in range(self.size):
                i = int(kx / nx)
                dx0 = kx - i * nx
                terra.add(kx, ky, upsample(arr, i, j, dx0, dy0, nx, ny))

    def run(self) -> TerraGrid:
        terra = TerraGrid(self.size)
        for k in range(octave_count(self.size)):
            self.octave(k, terra)
        return terra.freeze()
