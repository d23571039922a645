from ._singular_interpolation_error import SingularInterpolationError


class SingularSystemError(SingularInterpolationError):
    """Raised when Gaussian elimination meets a zero pivot after pivoting."""

    pass
