from ._interpolation_error import InterpolationError


class SingularInterpolationError(InterpolationError):
    """Raised when a denominator or pivot vanishes during interpolation."""

    pass
