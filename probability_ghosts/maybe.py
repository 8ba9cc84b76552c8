"""Probability functions which signal invalid input by returning None.

Every function here accepts any float. Nothing is raised for a value outside
of [0, 1]; the caller gets None back instead and has to handle it.
"""

import logging
import math

__all__ = [
    'to_probability',
    'is_valid_probability',
    'complement',
    'binary_entropy',
]


logger = logging.getLogger(__name__)


def to_probability(p: float) -> None | float:
    """Return p if it is in [0, 1], otherwise None.

    Usage:
        >>> to_probability(0.5)
        0.5
        >>> to_probability(-1.0) is None
        True
        >>> to_probability(float('nan')) is None
        True
    """
    # NaN fails both comparisons, so it needs no case of its own.
    if p >= 0.0 and p <= 1.0:
        return p
    logger.debug("Not a probability: %r", p)
    return None


def is_valid_probability(p: float) -> bool:
    """True iff p is in [0, 1]."""
    return p >= 0.0 and p <= 1.0


def complement(p: float) -> None | float:
    """Return 1 - p, or None if p is not a probability.

    Rounding is left as it is, so complement(complement(p)) need not
    reproduce p exactly; 1e-17 comes back as 0.0.
    """
    prob = to_probability(p)
    if prob is None:
        return None
    return 1.0 - prob


def binary_entropy(p: float) -> None | float:
    """Return the binary entropy of a Bernoulli variable with probability p
    as one of its values, or None if p is not a probability.

    Usage:
        >>> binary_entropy(0.5)
        1.0
        >>> binary_entropy(0.0)
        0.0
        >>> binary_entropy(2.0) is None
        True
    """
    prob = to_probability(p)
    if prob is None:
        return None
    # The complement is validated again even though it can't fail for a
    # value that passed the first check.
    comp_prob = complement(prob)
    if comp_prob is None or to_probability(comp_prob) is None:
        return None
    return _information_content(prob) + _information_content(comp_prob)


def _information_content(p: float) -> float:
    # The information content of a zero-probability event is 0 by convention.
    if p == 0.0:
        return 0.0
    return -p * math.log2(p)
