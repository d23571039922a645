from ._singular_interpolation_error import SingularInterpolationError


class DuplicateAbscissaError(SingularInterpolationError):
    """Two nodes share the same x-coordinate.

    Raised before any division takes place: Lagrange and Newton would
    divide by zero and the Vandermonde matrix would be singular.
    """

    pass
