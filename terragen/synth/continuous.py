"""
Unbounded continuous mode.

evaluate() sums bilinearly-interpolated lattice values over octaves of
halving spacing, starting at BASE_SCALE world units. It never touches a
TerraGrid and depends only on (seed, persistence, x, y), so any coordinate
of an infinite world can be queried on its own.
"""

import math
from typing import List

from .lattice import lattice_value

BASE_SCALE = 32
MAX_OCTAVES = 10
MIN_AMPLITUDE = 0.0001


def bilinear(a: float, b: float, c: float, d: float, fx: float, fy: float) -> float:
    top = (1 - fx) * a + fx * b
    bottom = (1 - fx) * c + fx * d
    return (1 - fy) * top + fy * bottom


class ContinuousNoiseEvaluator:
    def __init__(self, seed, persistence: float, base_scale: float = BASE_SCALE) -> None:
        self.seed = seed
        self.persistence = persistence
        self.base_scale = base_scale

    def octave_value(self, x: float, y: float, octave: int) -> float:
        """Interpolated lattice value for a single octave, before amplitude."""
        spacing = self.base_scale / 2 ** octave
        sx = x / spacing
        sy = y / spacing
        ix = math.floor(sx)
        iy = math.floor(sy)
        fx = sx - ix
        fy = sy - iy

        a = lattice_value(self.seed, octave, ix, iy)
        b = lattice_value(self.seed, octave, ix + 1, iy)
        c = lattice_value(self.seed, octave, ix, iy + 1)
        d = lattice_value(self.seed, octave, ix + 1, iy + 1)
        return bilinear(a, b, c, d, fx, fy)

    def octaves(self) -> int:
        """How many octaves a query runs for the current persistence."""
        amp = 1.0
        count = 0
        while amp > MIN_AMPLITUDE and count < MAX_OCTAVES:
            amp *= self.persistence
            count += 1
        return count

    def value(self, x: float, y: float) -> float:
        total = 0.0
        amp = 1.0
        for octave in range(self.octaves()):
            total += self.octave_value(x, y, octave) * amp
            amp *= self.persistence
        return total

    def region(self, x0: float, y0: float, width: int, height: int, step: float = 1.0) -> List[List[float]]:
        return [
            [self.value(x0 + i * step, y0 + j * step) for i in range(width)]
            for j in range(height)
        ]
