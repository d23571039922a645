from typing import Tuple

import torch
from torch import Tensor

from ._duplicate_abscissa_error import DuplicateAbscissaError
from ._insufficient_nodes_error import InsufficientNodesError
from ._interpolation_error import InterpolationError


def validate_nodes(x: Tensor, y: Tensor) -> Tuple[Tensor, Tensor]:
    """Check that (x, y) describe a well-posed interpolation problem.

    Parameters
    ----------
    x : Tensor
        Node abscissas, shape (n,).
    y : Tensor
        Node values, shape (n,).

    Returns
    -------
    Tuple[Tensor, Tensor]
        ``x`` and ``y`` promoted to a common floating point dtype.

    Raises
    ------
    ValueError
        If x is not 1-D or y does not match its shape.
    InsufficientNodesError
        If there are fewer than 2 nodes.
    InterpolationError
        If any coordinate is NaN or infinite.
    DuplicateAbscissaError
        If two abscissas coincide within ``n * eps * (max(x) - min(x))``.
    """
    if x.dim() != 1:
        raise ValueError(f"x must be 1-D, got shape {tuple(x.shape)}")
    if y.shape != x.shape:
        raise ValueError(
            f"y must have the same shape as x, got {tuple(y.shape)} "
            f"and {tuple(x.shape)}"
        )

    n = x.shape[0]
    if n < 2:
        raise InsufficientNodesError(f"Need at least 2 nodes, got {n}")

    dtype = torch.promote_types(x.dtype, y.dtype)
    if not dtype.is_floating_point:
        dtype = torch.get_default_dtype()
    x = x.to(dtype)
    y = y.to(dtype)

    if not (torch.all(torch.isfinite(x)) and torch.all(torch.isfinite(y))):
        raise InterpolationError("Node coordinates must be finite")

    # Relative to the spread of the nodes; equal values always collide
    spread = x.max() - x.min()
    tol = n * torch.finfo(dtype).eps * spread

    gaps = (x.unsqueeze(-1) - x.unsqueeze(0)).abs()
    gaps = gaps + torch.diag(torch.full_like(x, float("inf")))
    close = torch.nonzero(gaps <= tol)
    if close.shape[0] > 0:
        i, j = close[0].tolist()
        raise DuplicateAbscissaError(
            f"Nodes {i} and {j} share the abscissa x = {x[i].item()}"
        )

    return x, y
