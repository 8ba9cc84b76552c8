__all__ = [
    'InvalidProbabilityError',
    'ProbabilityAbort',
    'StyleDisagreementError',
]


class InvalidProbabilityError(ValueError):
    """Raised when a value outside of [0, 1] is converted to a Probability.
    The rejected value is kept on the exception as the value attribute."""

    def __init__(self, value: float, message: str = "Probability not in [0, 1]"):
        super().__init__(message, value)
        self.value = value
        self.message = message

    def __str__(self) -> str:
        return f"{self.message}: {self.value!r}"


class ProbabilityAbort(AssertionError):
    """Raised by the unchecked functions when they are handed an invalid
    probability. Passing one is a programming error on the caller's side, so
    this is an AssertionError rather than a ValueError, and is never caught
    within the package."""


class StyleDisagreementError(ArithmeticError):
    """Raised when the entropy styles produce different results for the same
    probability."""
