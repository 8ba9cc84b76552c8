"""
Validation, complement and binary entropy of probabilities, in three error
handling styles:

    maybe          invalid input gives None
    probabilities  the Probability type refuses invalid values on construction
    non_total      invalid input aborts with ProbabilityAbort
"""

from . import maybe, non_total
from .errors import InvalidProbabilityError, ProbabilityAbort, StyleDisagreementError
from .probabilities import Probability

__version__ = '0.1.0'

__all__ = [
    'maybe',
    'non_total',
    'Probability',
    'InvalidProbabilityError',
    'ProbabilityAbort',
    'StyleDisagreementError',
]
