"""
simple_ga - Simple Genetic Algorithm

Evolves fixed-length bit-vector genomes against a caller-supplied fitness
function using truncation selection, single-point crossover, elitism and
per-bit mutation.
"""

__version__ = "0.1.0"

# Expose common submodules for convenience
from .evolution import *  # noqa: F401,F403
from .fitness import *  # noqa: F401,F403
from .generation import *  # noqa: F401,F403
from .utils import *  # noqa: F401,F403
from .config import PRESET_DEFAULT, PRESET_QUICK  # noqa: F401
