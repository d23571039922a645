from typing import Optional, Tuple

import torch
from torch import Tensor

from ._interpolate import InterpolationMethod, _Nodes, interpolate
from ._interpolation_error import InterpolationError
from ._sample_grid import sample_grid


def interpolation_curve(
    nodes: _Nodes,
    method: InterpolationMethod = "newton",
    count: int = 200,
) -> Optional[Tuple[Tensor, Tensor]]:
    """Sample the interpolant densely over the node range.

    Parameters
    ----------
    nodes : NodeSet or ActiveNodes
        Interpolation nodes.
    method : {"lagrange", "newton", "vandermonde"}, optional
        Interpolation method. Default is "newton".
    count : int, optional
        Number of samples. Default is 200.

    Returns
    -------
    Tuple[Tensor, Tensor] or None
        ``(grid, values)``, each of shape (count,), or None if the nodes
        cannot be interpolated or the curve is not finite.
    """
    try:
        evaluator = interpolate(nodes, method)
        grid = sample_grid(nodes, count)
    except InterpolationError:
        return None

    values = evaluator(grid)
    if not torch.all(torch.isfinite(values)):
        return None
    return grid, values
