"""Reproducible tie-breaking from a seed. Seed -1 = new random seed each call."""

import random
from typing import Tuple


def make_rng(seed: int) -> Tuple[random.Random, int]:
    """
    Return (rng, seed_used). If seed == -1, choose a new random seed; the returned seed_used
    replays the same run when passed back in.
    """
    if seed == -1:
        seed_used = random.randint(0, 2**31 - 1)
    else:
        seed_used = seed
    return random.Random(seed_used), seed_used
