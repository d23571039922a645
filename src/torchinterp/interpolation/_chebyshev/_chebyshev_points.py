import math

import torch
from torch import Tensor


def chebyshev_points(
    n: int,
    a: float = -1.0,
    b: float = 1.0,
    dtype: torch.dtype = torch.float64,
    device: torch.device | str = "cpu",
) -> Tensor:
    """Generate Chebyshev nodes of the first kind on [a, b].

    These are the roots of T_n mapped affinely from [-1, 1] to [a, b].

    Parameters
    ----------
    n : int
        Number of points.
    a : float, optional
        Left end of the interval. Default is -1.
    b : float, optional
        Right end of the interval. Default is 1.
    dtype : torch.dtype, optional
        Data type. Default is float64.
    device : torch.device or str, optional
        Device. Default is "cpu".

    Returns
    -------
    Tensor
        Points x_k = (a+b)/2 + (b-a)/2 * cos((2k+1)*pi/(2n)) for
        k = 0, 1, ..., n-1, shape (n,).

    Raises
    ------
    ValueError
        If ``n`` is negative.

    Notes
    -----
    The points are returned in decreasing order when a < b. They are
    never sorted. If a == b all points coincide.

    Examples
    --------
    >>> chebyshev_points(3, 0.0, 2.0)
    tensor([1.8660, 1.0000, 0.1340], dtype=torch.float64)
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    k = torch.arange(n, dtype=dtype, device=device)
    t = torch.cos((2 * k + 1) * math.pi / (2 * n)) if n > 0 else k
    return (a + b) / 2 + (b - a) / 2 * t
