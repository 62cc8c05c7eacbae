"""
Exceptions raised by the estimation engine.
"""


class EstimationError(Exception):
    """Base class for all engine errors."""


class InvalidParameterError(EstimationError, ValueError):
    """
    Raised when an input violates a precondition of a calculator.

    The engine refuses to compute rather than return numbers that look
    plausible but are wrong (NaN/Infinity ROI, substituted defaults, ...).

    Parameters
    ----------
    errors : list[str] | str
        One message per violated precondition.
    """

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))
