"""A six-sided die."""

from __future__ import annotations

import random
from typing import Optional

CARAS = 6


class Dado:
    """A fair die returning values from 1 to 6."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def tirar(self) -> int:
        """Roll the die."""
        return self._rng.randint(1, CARAS)