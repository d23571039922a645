from ._interpolation_error import InterpolationError


class InsufficientNodesError(InterpolationError):
    """Raised when fewer than 2 nodes are available for interpolation."""

    pass
