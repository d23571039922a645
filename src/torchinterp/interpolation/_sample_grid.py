import torch
from torch import Tensor

from ._insufficient_nodes_error import InsufficientNodesError
from ._interpolate import _Nodes


def sample_grid(nodes: _Nodes, count: int = 200) -> Tensor:
    """Evenly spaced abscissas spanning the nodes, for plotting.

    Parameters
    ----------
    nodes : NodeSet or ActiveNodes
        Nodes whose x-range the grid covers.
    count : int, optional
        Number of grid points. Default is 200.

    Returns
    -------
    Tensor
        ``count`` points from min(x) to max(x) inclusive, non-decreasing.
        If all abscissas are equal the grid is constant.

    Raises
    ------
    ValueError
        If ``count`` is less than 2.
    InsufficientNodesError
        If ``nodes`` is empty.
    """
    if count < 2:
        raise ValueError(f"count must be at least 2, got {count}")

    x = nodes.x
    if x.numel() == 0:
        raise InsufficientNodesError("Cannot span a grid over zero nodes")

    return torch.linspace(
        x.min().item(),
        x.max().item(),
        count,
        dtype=x.dtype if x.dtype.is_floating_point else None,
        device=x.device,
    )
