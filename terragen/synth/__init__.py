"""
terragen.synth
--------------

The noise synthesis core: seed derivation, lattice hashing, the bounded
grid synthesizer and the unbounded continuous evaluator.
"""

from .seed import SeedDeriver, text_to_seed
from .lattice import lattice_value
from .terra import TerraGrid
from .grid import GridOctaveSynthesizer, octave_count
from .continuous import ContinuousNoiseEvaluator, BASE_SCALE
