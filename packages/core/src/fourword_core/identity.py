from __future__ import annotations

import logging
from typing import AbstractSet, MutableSet

import numpy as np

from fourword_core.errors import IdSpaceExhaustedError

logger = logging.getLogger(__name__)

DEFAULT_ID_BITS = 16
DEFAULT_MAX_ATTEMPTS = 4096


def allocate_section_id(
    used_ids: MutableSet[int],
    rng: np.random.Generator,
    *,
    bits: int = DEFAULT_ID_BITS,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> int:
    """
    Draw a uniformly random `bits`-wide id not yet in `used_ids`.

    The accepted id is added to `used_ids` before it is returned. Collisions
    are redrawn; `max_attempts` consecutive collisions mean the id space is
    too small for the document and raise `IdSpaceExhaustedError`.
    """
    upper = 1 << bits
    for attempt in range(max_attempts):
        section_id = int(rng.integers(upper))
        if section_id not in used_ids:
            used_ids.add(section_id)
            return section_id
        logger.debug("section id %d already used (attempt %d)", section_id, attempt + 1)
    raise IdSpaceExhaustedError(bits=bits, attempts=max_attempts, used=len(used_ids))


class SectionIdAllocator:
    """Issues unique section ids for one run."""

    def __init__(
        self,
        rng: np.random.Generator,
        *,
        bits: int = DEFAULT_ID_BITS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if bits < 1:
            raise ValueError("bits must be positive")
        self.rng = rng
        self.bits = bits
        self.max_attempts = max_attempts
        self._used: set[int] = set()

    def allocate(self) -> int:
        return allocate_section_id(
            self._used, self.rng, bits=self.bits, max_attempts=self.max_attempts
        )

    @property
    def used(self) -> AbstractSet[int]:
        return frozenset(self._used)

    def __len__(self) -> int:
        return len(self._used)
