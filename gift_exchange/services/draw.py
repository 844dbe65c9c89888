from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from ..errors import DuplicateName, InsufficientParticipants
from ..models import Assignment


log = logging.getLogger(__name__)

MAX_DRAW_ATTEMPTS = 100


def shuffled(names: Sequence[str], rng: random.Random) -> list[str]:
    """Unbiased Fisher-Yates shuffle returning a new list."""
    result = list(names)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def has_fixed_point(givers: Sequence[str], receivers: Sequence[str]) -> bool:
    return any(g == r for g, r in zip(givers, receivers))


def _rotated(givers: Sequence[str], rng: random.Random) -> list[str]:
    # Shifting by 1..n-1 never maps a position onto itself.
    offset = rng.randint(1, len(givers) - 1)
    return list(givers[offset:]) + list(givers[:offset])


def draw_assignments(
    names: Sequence[str],
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_DRAW_ATTEMPTS,
) -> list[Assignment]:
    """
    Pair every name with a different name so that each one gives exactly once
    and receives exactly once.

    Givers keep the order of `names`. Receivers come from shuffling until no
    one draws themselves, at most `max_attempts` times; past that a random
    rotation of the givers is used, which is always valid.
    """
    givers = list(names)
    if len(givers) < 2:
        raise InsufficientParticipants()
    if len(set(givers)) != len(givers):
        raise DuplicateName("Each participant must appear only once in the draw.")

    rng = rng or random.Random()

    receivers = None
    for attempt in range(1, max_attempts + 1):
        candidate = shuffled(givers, rng)
        if not has_fixed_point(givers, candidate):
            receivers = candidate
            log.debug("Draw accepted after %d attempt(s)", attempt)
            break

    if receivers is None:
        log.warning(
            "No valid shuffle in %d attempts for %d participants; using rotation",
            max_attempts, len(givers),
        )
        receivers = _rotated(givers, rng)

    return [Assignment(giver=g, receiver=r) for g, r in zip(givers, receivers)]
