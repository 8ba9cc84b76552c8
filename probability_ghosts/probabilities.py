import logging
import math

from probability_ghosts.errors import InvalidProbabilityError

__all__ = [
    'Probability',
]


logger = logging.getLogger(__name__)


class Probability(float):
    """A numeric value in the range [0, 1].

    Probabilities can only be created by converting a number, and the
    conversion refuses anything outside of [0, 1], NaN included. Once a
    Probability exists, every operation defined on it succeeds. Like floats,
    probabilities are hashable and immutable. Arithmetic on them produces
    plain floats, since the result of an arbitrary calculation is not
    necessarily a probability.

    Usage:
        >>> half = Probability(0.5)
        >>> half
        Probability(0.5)
        >>> half.binary_entropy()
        1.0
        >>> float(half.complement())
        0.5
        >>> Probability(2.0)
        Traceback (most recent call last):
        ...
        probability_ghosts.errors.InvalidProbabilityError: Probability not in [0, 1]: 2.0
    """

    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        result = super().__new__(cls, *args, **kwargs)
        if not 0.0 <= result <= 1.0:
            logger.debug("Rejected probability: %r", float(result))
            raise InvalidProbabilityError(float(result))
        return result

    @classmethod
    def try_from(cls, value) -> 'Probability':
        """Convert a number to a Probability, raising InvalidProbabilityError
        if it is not in [0, 1]."""
        return cls(value)

    def complement(self) -> 'Probability':
        """Return the probability of the event not occurring, 1 - p.

        Rounding is left as it is, so a double complement need not reproduce
        p exactly; Probability(1e-17) comes back as Probability(0.0).
        """
        # 1 - p stays in [0, 1] for every p in [0, 1], so there is nothing
        # to check here.
        return float.__new__(type(self), 1.0 - self)

    def binary_entropy(self) -> float:
        """Return the entropy, in bits, of a Bernoulli variable with this
        probability of success."""
        return self._information_content() + self.complement()._information_content()

    def _information_content(self) -> float:
        # The information content of a zero-probability event is 0 by convention.
        if self == 0.0:
            return 0.0
        return -self * math.log2(self)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({float(self)!r})'

    __str__ = float.__repr__
