from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

import torch

from .._active_nodes import ActiveNodes
from .._insufficient_nodes_error import InsufficientNodesError
from ._chebyshev_config import ChebyshevConfig
from ._chebyshev_points import chebyshev_points

if TYPE_CHECKING:
    from .._node_set import NodeSet


def chebyshev_resample(nodes: NodeSet, config: ChebyshevConfig) -> ActiveNodes:
    """Move the node abscissas onto Chebyshev points.

    The k-th value of the result is the k-th value of ``nodes``. Extra
    source nodes are dropped; missing ones are filled according to
    ``config.missing``.

    Parameters
    ----------
    nodes : NodeSet
        Source nodes. Only their y-values are used.
    config : ChebyshevConfig
        Interval ``[a, b]`` and count ``n``.

    Returns
    -------
    ActiveNodes
        ``n`` nodes with Chebyshev abscissas (in decreasing order).

    Raises
    ------
    InsufficientNodesError
        If ``n`` exceeds the number of source nodes and
        ``config.missing == "error"``.

    Warns
    -----
    UserWarning
        If values are padded with zeros.
    """
    n = config.n
    available = nodes.y.shape[0]

    x = chebyshev_points(
        n, config.a, config.b, dtype=nodes.x.dtype, device=nodes.x.device
    )

    y = nodes.y[:n]
    if n > available:
        if config.missing == "error":
            raise InsufficientNodesError(
                f"Requested {n} Chebyshev nodes but only {available} "
                f"values are available"
            )
        warnings.warn(
            f"Requested {n} Chebyshev nodes but only {available} values are "
            f"available; padding {n - available} values with 0.",
            UserWarning,
            stacklevel=2,
        )
        y = torch.cat([y, y.new_zeros(n - available)])

    return ActiveNodes(x=x, y=y, batch_size=[n])
