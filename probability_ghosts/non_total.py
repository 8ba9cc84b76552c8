"""Probability functions which assume their input is valid.

Handing one of these functions a value outside of [0, 1] is a bug in the
calling code. The computation is abandoned with a ProbabilityAbort instead of
producing a number.
"""

import logging
import math
from typing import NoReturn

from probability_ghosts.errors import ProbabilityAbort

__all__ = [
    'is_valid_probability',
    'complement',
    'binary_entropy',
]


logger = logging.getLogger(__name__)

_ABORT_MESSAGE = "Probability not between 0 or 1"


def is_valid_probability(p: float) -> bool:
    """True iff p is in [0, 1].

    Usage:
        >>> is_valid_probability(0.5)
        True
        >>> is_valid_probability(-1.0)
        False
        >>> is_valid_probability(float('nan'))
        False
    """
    return p >= 0.0 and p <= 1.0


def _abort(p: float) -> NoReturn:
    logger.debug("Aborting on invalid probability: %r", p)
    raise ProbabilityAbort(_ABORT_MESSAGE, p)


def complement(p: float) -> float:
    """Return 1 - p. Raises ProbabilityAbort if p is not in [0, 1].

    Rounding is left as it is, so complement(complement(p)) need not
    reproduce p exactly; 1e-17 comes back as 0.0.
    """
    if not is_valid_probability(p):
        _abort(p)
    return 1.0 - p


def binary_entropy(p: float) -> float:
    """Return the binary entropy of a Bernoulli variable with probability p
    as one of its values. Raises ProbabilityAbort if p is not in [0, 1].

    Usage:
        >>> binary_entropy(0.5)
        1.0
        >>> binary_entropy(0.0)
        0.0
    """
    comp_p = complement(p)
    if not is_valid_probability(p) or not is_valid_probability(comp_p):
        _abort(p)
    return _information_content(p) + _information_content(comp_p)


def _information_content(p: float) -> float:
    if not is_valid_probability(p):
        _abort(p)
    # The information content of a zero-probability event is 0 by convention.
    if p == 0.0:
        return 0.0
    return -p * math.log2(p)
