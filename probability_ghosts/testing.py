import math
from typing import Iterable

from . import maybe, non_total
from .errors import StyleDisagreementError
from .probabilities import Probability

__all__ = [
    'DEFAULT_GRID',
    'test_styles',
]


DEFAULT_GRID = (
    0.0,
    1.0,
    0.5,
    1 / 3,
    2 / 3,
    1 / math.e,
    1 / math.pi,
    math.sqrt(2) / 2,
    0.1,
    0.9,
)


def test_styles(probabilities: Iterable[float] = None, *,
                tolerance: float = 1e-12) -> list[tuple[float, float, float, float]]:
    """Compute the binary entropy of each probability with all three
    implementations, logging the results as they are produced. Return a
    list of (p, maybe, validated, unchecked) tuples, one per probability. By
    default, the probabilities used are DEFAULT_GRID, which covers both
    endpoints, one half, and a handful of irrational-like fractions.

    Usage:
        rows = test_styles([0.25, 0.75])
        for p, maybe_h, validated_h, unchecked_h in rows:
            print(p, maybe_h)

    Arguments:
        probabilities: The values to evaluate; every one of them must be in
            [0, 1]. Default is DEFAULT_GRID. InvalidProbabilityError
            is raised for the first one that is not.
        tolerance: The largest absolute difference allowed between the
            results of any two implementations for the same probability.
    Return:
        A list of tuples, (p, maybe, validated, unchecked), where p is the
        probability as given and the remaining entries are the entropy in
        bits computed by probability_ghosts.maybe, by the Probability type,
        and by probability_ghosts.non_total, respectively. Raises
        StyleDisagreementError if the entries of any row differ by more than
        the tolerance.
    """

    import logging

    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    if probabilities is None:
        probabilities = DEFAULT_GRID

    rows = []
    for p in probabilities:
        # Raises InvalidProbabilityError for anything outside of [0, 1].
        prob = Probability(p)

        maybe_h = maybe.binary_entropy(p)
        validated_h = prob.binary_entropy()
        unchecked_h = non_total.binary_entropy(p)
        assert maybe_h is not None

        logger.info("p=%.17g maybe=%.17g validated=%.17g unchecked=%.17g",
                    p, maybe_h, validated_h, unchecked_h)

        results = (maybe_h, validated_h, unchecked_h)
        if max(results) - min(results) > tolerance:
            raise StyleDisagreementError(p, results)

        rows.append((p, maybe_h, validated_h, unchecked_h))

    logger.info("Compared %d probabilities", len(rows))
    return rows
