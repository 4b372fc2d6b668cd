"""
Lattice hashing for the continuous evaluator.

Every (seed, octave, ix, iy) maps to one fixed pseudo-random value in
[0, 1). Nothing is cached or shared, so lookups can happen at any
coordinate, in any order, from any thread.
"""

import hashlib
import random


def lattice_key(seed, octave: int, ix: int, iy: int) -> str:
    # ':' cannot appear in an integer, so (1, 23) and (12, 3) never collide
    return f"{seed}:{octave}:{ix}:{iy}"


def lattice_value(seed, octave: int, ix: int, iy: int) -> float:
    digest = hashlib.md5(lattice_key(seed, octave, ix, iy).encode("utf-8")).hexdigest()
    rng = random.Random(int(digest[:8], 16))
    return rng.random()
