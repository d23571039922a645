"""Ordered collection of interpolation nodes."""

from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class NodeSet:
    """Ordered sample points (x[i], y[i]).

    Attributes
    ----------
    x : Tensor
        Abscissas, shape (n,).
    y : Tensor
        Values, shape (n,).

    Notes
    -----
    The batch size is ``[n]``, so a NodeSet may hold 0 or 1 nodes. Such
    sets are valid to edit but are rejected by every interpolation
    method.
    """

    x: Tensor
    y: Tensor


def node_set(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    dtype: Optional[torch.dtype] = torch.float64,
    device: torch.device | str = "cpu",
) -> NodeSet:
    """Create a node set from x and y coordinates.

    Parameters
    ----------
    x : Tensor or sequence of float
        Abscissas, length n.
    y : Tensor or sequence of float
        Values, length n.
    dtype : torch.dtype, optional
        Data type. Default is float64.
    device : torch.device or str, optional
        Device. Default is "cpu".

    Returns
    -------
    NodeSet
        Node set with batch size ``[n]``.

    Raises
    ------
    ValueError
        If x and y are not 1-D sequences of equal length.

    Examples
    --------
    >>> nodes = node_set([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
    >>> nodes.x
    tensor([0., 1., 2.], dtype=torch.float64)
    """
    x = torch.as_tensor(x, dtype=dtype, device=device)
    y = torch.as_tensor(y, dtype=dtype, device=device)

    if x.dim() != 1 or y.dim() != 1:
        raise ValueError("x and y must be 1-D")
    if x.shape[0] != y.shape[0]:
        raise ValueError(
            f"x and y must have the same length, got {x.shape[0]} "
            f"and {y.shape[0]}"
        )

    return NodeSet(x=x, y=y, batch_size=[x.shape[0]])
