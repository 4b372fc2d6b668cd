# terragen/generator.py
# -----------------------------------------------------------------------------
# PerlinNoiseGenerator: the public façade.
#
# Holds the three options (map seed, size, persistence) and hands them to the
# synthesis core in terragen/synth/:
#
#     gen = PerlinNoiseGenerator()
#     terra = gen.generate({"map_seed": "abc", "size": 64, "persistence": 0.5})
#     h = gen.evaluate(1234.5, -87.25)
#
# generate() builds a fresh GridOctaveSynthesizer (and so a fresh random
# stream) on every call. evaluate() is stateless apart from the options.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import numbers
import time
import warnings
from typing import Any, List, Mapping, Optional, Union

from .errors import ConfigurationError, InvalidArgument
from .synth.continuous import BASE_SCALE as _BASE_SCALE
from .synth.continuous import ContinuousNoiseEvaluator
from .synth.grid import GridOctaveSynthesizer, octave_count
from .synth.seed import Seed, SeedDeriver, is_number
from .synth.terra import TerraGrid

logger = logging.getLogger(__name__)


class PerlinNoiseGenerator:
    """
    Value-noise height map generator.

    Despite the historical name this is value noise: random scalars on a
    lattice, bilinearly interpolated and summed over octaves.
    """

    SIZE = "size"
    PERSISTENCE = "persistence"
    MAP_SEED = "map_seed"
    BASE_SCALE = _BASE_SCALE

    def __init__(self, options: Optional[Mapping[str, Any]] = None) -> None:
        self._seed = SeedDeriver()
        self._size: Optional[int] = None
        self._persistence: Optional[float] = None
        if options:
            self.set_options(options)

    # -------------------------------------------------------------------------
    # Options
    # -------------------------------------------------------------------------
    def set_options(self, options: Mapping[str, Any]) -> None:
        """Partial update; keys that are absent keep their current value."""
        if self.MAP_SEED in options:
            self.set_seed(options[self.MAP_SEED])
        elif "seed" in options:
            self.set_seed(options["seed"])

        if self.SIZE in options:
            self.set_size(options[self.SIZE])

        if self.PERSISTENCE in options:
            self.set_persistence(options[self.PERSISTENCE])

    configure = set_options

    @property
    def seed(self) -> Optional[Seed]:
        return self._seed.raw

    @property
    def numeric_seed(self) -> Union[int, float, None]:
        return self._seed.numeric

    def set_seed(self, value: Seed) -> None:
        self._seed.set(value)

    @property
    def size(self) -> Optional[int]:
        return self._size

    def set_size(self, size: int) -> None:
        if not isinstance(size, numbers.Integral) or isinstance(size, bool):
            raise InvalidArgument("size", "int", size)
        self._size = int(size)

    def sizes(self) -> Optional[int]:
        """Deprecated alias of :attr:`size`."""
        warnings.warn("sizes() is deprecated, use size", DeprecationWarning, stacklevel=2)
        return self._size

    @property
    def persistence(self) -> Optional[float]:
        return self._persistence

    def set_persistence(self, persistence: float) -> None:
        if not is_number(persistence):
            raise InvalidArgument("persistence", "numeric", persistence)
        self._persistence = persistence

    def octave_count(self) -> int:
        return octave_count(self._size or 0)

    # -------------------------------------------------------------------------
    # Grid mode
    # -------------------------------------------------------------------------
    def generate(self, options: Optional[Mapping[str, Any]] = None) -> TerraGrid:
        if options:
            self.set_options(options)

        if not self._seed.is_set():
            seed = time.time()
            logger.warning(f"No map seed set, falling back to current time {seed} (not reproducible)")
            self.set_seed(seed)

        if self._persistence is None:
            raise ConfigurationError("Persistence must be set")
        if self._size is None:
            raise ConfigurationError("Size must be set")

        logger.info(
            f"Generating {self._size}x{self._size} grid "
            f"(seed={self.seed!r}, persistence={self._persistence}, octaves={self.octave_count()})"
        )
        synth = GridOctaveSynthesizer(self.numeric_seed, self._persistence, self._size)
        terra = synth.run()
        logger.debug("Grid generation finished")
        return terra

    # -------------------------------------------------------------------------
    # Continuous mode
    # -------------------------------------------------------------------------
    def _evaluator(self) -> ContinuousNoiseEvaluator:
        if not self._seed.is_set():
            raise ConfigurationError("Map seed must be set before evaluating noise")
        if self._persistence is None:
            raise ConfigurationError("Persistence must be set")
        return ContinuousNoiseEvaluator(self.seed, self._persistence, self.BASE_SCALE)

    def evaluate(self, x: float, y: float) -> float:
        """Raw (un-normalized) noise at world coordinate (x, y)."""
        return self._evaluator().value(x, y)

    get_noise = evaluate

    def evaluate_region(self, x0: float, y0: float, width: int, height: int,
                        step: float = 1.0) -> List[List[float]]:
        """height rows of width samples, starting at (x0, y0)."""
        return self._evaluator().region(x0, y0, width, height, step)
