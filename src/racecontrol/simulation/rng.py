"""Random generator handling."""

import numpy as np


def resolve_rng(rng: np.random.Generator | int | None = None) -> np.random.Generator:
    """Return a generator for ``rng``.

    ``None`` creates a fresh generator, an integer seeds one, and anything
    else is used as-is (it only needs ``uniform``, ``random`` and
    ``integers``).
    """
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    return rng
