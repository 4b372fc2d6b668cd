"""
terragen
--------

Reproducible 2D value-noise height maps for procedural map generation.

Public API:
    from terragen import PerlinNoiseGenerator
    terra = PerlinNoiseGenerator().generate({"map_seed": "abc", "size": 64, "persistence": 0.5})
"""

from .errors import NoiseError, InvalidArgument, ConfigurationError, FrozenGridError
from .generator import PerlinNoiseGenerator
from .synth import TerraGrid, lattice_value, text_to_seed

__version__ = "1.0.0"
