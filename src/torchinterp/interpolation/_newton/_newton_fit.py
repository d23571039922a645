from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._validate_nodes import validate_nodes

if TYPE_CHECKING:
    from ._newton import NewtonInterpolant


def newton_fit(x: Tensor, y: Tensor) -> NewtonInterpolant:
    """
    Compute the divided-difference table of the nodes.

    Parameters
    ----------
    x : Tensor
        Node abscissas, shape (n,). Must be pairwise distinct; the order
        is kept.
    y : Tensor
        Node values, shape (n,).

    Returns
    -------
    NewtonInterpolant
        Knots and divided differences f[x[0]], f[x[0], x[1]], ...

    Raises
    ------
    InsufficientNodesError
        If there are fewer than 2 nodes.
    DuplicateAbscissaError
        If two abscissas coincide.

    Notes
    -----
    Order j of the table is

        c[i] <- (c[i] - c[i-1]) / (x[i] - x[i-j]),  i = n-1, ..., j

    starting from c = y. Each order reads only values of the previous
    order, so it is computed as one vectorized step.
    """
    x, y = validate_nodes(x, y)
    n = x.shape[0]

    coeffs = y
    for j in range(1, n):
        updated = (coeffs[j:] - coeffs[j - 1 : -1]) / (x[j:] - x[: n - j])
        coeffs = torch.cat([coeffs[:j], updated])

    from ._newton import NewtonInterpolant

    return NewtonInterpolant(
        knots=x,
        coefficients=coeffs,
        batch_size=[],
    )
