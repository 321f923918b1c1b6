"""Reproducible color sampling from a seed. Seed -1 = new random seed each call.
Only placement colors draw from this generator; physics never does."""

import random
from typing import Tuple


def make_rng(seed: int) -> Tuple[random.Random, int]:
    """Return (rng, seed_used). If seed == -1, choose a new random seed."""
    if seed == -1:
        seed_used = random.randint(0, 2**31 - 1)
    else:
        seed_used = seed
    return random.Random(seed_used), seed_used
