from typing import Optional, Tuple

import torch

from ._node_set import NodeSet


def random_nodes(
    count: int,
    x_range: Tuple[float, float] = (0.0, 1.0),
    y_range: Tuple[float, float] = (0.0, 1.0),
    generator: Optional[torch.Generator] = None,
    dtype: torch.dtype = torch.float64,
    device: torch.device | str = "cpu",
) -> NodeSet:
    """Sample nodes uniformly from a rectangle, sorted by x.

    Parameters
    ----------
    count : int
        Number of nodes.
    x_range : tuple of float, optional
        ``(x_min, x_max)``. Default is ``(0, 1)``.
    y_range : tuple of float, optional
        ``(y_min, y_max)``. Default is ``(0, 1)``.
    generator : torch.Generator, optional
        Random number generator for reproducible samples.
    dtype : torch.dtype, optional
        Data type. Default is float64.
    device : torch.device or str, optional
        Device. Default is "cpu".

    Returns
    -------
    NodeSet
        ``count`` nodes in ascending x order.

    Raises
    ------
    ValueError
        If ``count`` is negative.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    x_min, x_max = x_range
    y_min, y_max = y_range

    u = torch.rand(2, count, generator=generator, dtype=dtype, device=device)
    x = u[0] * (x_max - x_min) + x_min
    y = u[1] * (y_max - y_min) + y_min

    order = torch.argsort(x)
    return NodeSet(x=x[order], y=y[order], batch_size=[count])
