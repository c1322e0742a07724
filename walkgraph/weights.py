"""
Random edge-weight generation.

Weights are drawn with a numpy Generator so callers can make assignments
reproducible by passing a seeded ``rng``. Draws outside the configured range
are rejected and resampled.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .logging import get_logger

logger = get_logger(__name__)

MAX_DRAW_ATTEMPTS = 10_000


@dataclass
class RandomWeightOptions:
    """
    Configuration for random_weight.

    Attributes:
        max: Upper bound of the accepted range (inclusive).
        min: Lower bound of the accepted range (inclusive).
        force_integer: Floor the drawn value to an int. Takes precedence over round_to.
        round_to: Round the drawn value to the nearest multiple of this step.
        allow_negative: Give each non-zero draw a random sign.
        allow_zero: Accept a final value of exactly 0.
    """

    max: float = 100
    min: float = 0
    force_integer: bool = False
    round_to: Optional[float] = None
    allow_negative: bool = False
    allow_zero: bool = False

    def __post_init__(self) -> None:
        """Validate RandomWeightOptions invariants."""
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max}).")

        if self.round_to is not None and self.round_to <= 0:
            raise ValueError(f"round_to must be positive, got {self.round_to}.")

        if self.max < 0 and not self.allow_negative:
            raise ValueError(
                f"max is negative ({self.max}) but allow_negative is False."
            )

        if self.min == 0 and self.max == 0 and not self.allow_zero:
            raise ValueError("The range [0, 0] requires allow_zero=True.")


def rng_default(seed: int | None = None) -> np.random.Generator:
    """Return a numpy Generator, seeded when ``seed`` is given."""
    return np.random.default_rng(seed)


def _finalize(value: float, options: RandomWeightOptions) -> float:
    if options.force_integer:
        return int(math.floor(value))
    if options.round_to:
        return round(value / options.round_to) * options.round_to
    return value


def _accepts(value: float, options: RandomWeightOptions) -> bool:
    if value == 0 and not options.allow_zero:
        return False
    return options.min <= value <= options.max


def random_weight(
    options: Optional[RandomWeightOptions] = None,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """
    Draw one random weight.

    The magnitude is uniform over ``[0, max(|min|, |max|))``. When negatives
    are allowed a fair coin picks the sign of every non-zero magnitude. The
    value is then floored (force_integer) or rounded (round_to) and checked
    against the range; rejected values are drawn again.

    Args:
        options: Draw configuration. Defaults to RandomWeightOptions().
        rng: Generator to draw from. Defaults to a fresh unseeded one.

    Returns:
        A value in ``[options.min, options.max]``.

    Raises:
        ValueError: If no acceptable value was drawn in MAX_DRAW_ATTEMPTS
            tries (e.g. force_integer with a range holding no integer).

    Example:
        >>> opts = RandomWeightOptions(min=1, max=10, force_integer=True)
        >>> w = random_weight(opts, rng_default(0))
        >>> 1 <= w <= 10
        True
    """
    if options is None:
        options = RandomWeightOptions()
    if rng is None:
        rng = rng_default()

    scale = max(abs(options.min), abs(options.max))

    for _ in range(MAX_DRAW_ATTEMPTS):
        value = rng.random() * scale
        if options.allow_negative and value > 0 and rng.random() < 0.5:
            value = -value

        value = _finalize(value, options)
        if _accepts(value, options):
            return value

    logger.warning("No acceptable weight after %d draws for %s", MAX_DRAW_ATTEMPTS, options)
    raise ValueError(
        f"Could not draw a weight satisfying {options} in {MAX_DRAW_ATTEMPTS} attempts."
    )
