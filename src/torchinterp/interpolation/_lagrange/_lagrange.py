"""Lagrange interpolation."""

from typing import Callable

import torch

from .._validate_nodes import validate_nodes
from ._lagrange_evaluate import lagrange_evaluate


def lagrange(
    x: torch.Tensor,
    y: torch.Tensor,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a Lagrange interpolator from data.

    Nothing is precomputed: every call re-evaluates the Lagrange basis
    from the nodes.

    Parameters
    ----------
    x : Tensor
        Node abscissas, shape (n,). Must be pairwise distinct.
    y : Tensor
        Node values, shape (n,).

    Returns
    -------
    interpolant : Callable[[Tensor], Tensor]
        Function that evaluates the interpolating polynomial.

    Examples
    --------
    >>> f = lagrange(torch.tensor([0.0, 1.0]), torch.tensor([1.0, 3.0]))
    >>> f(torch.tensor([0.5]))
    tensor([2.])
    """
    x, y = validate_nodes(x, y)
    return lambda t: lagrange_evaluate(x, y, t)
