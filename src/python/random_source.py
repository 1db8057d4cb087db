"""Random number sources for the motion strategies."""

import numpy as np


class NumpyRandomSource:
    """Uniform [0, 1) floats drawn from a numpy Generator."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._rng.random())
