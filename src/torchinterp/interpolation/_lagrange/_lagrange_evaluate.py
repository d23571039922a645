from typing import Union

import torch
from torch import Tensor

from .._validate_nodes import validate_nodes


def lagrange_evaluate(
    x: Tensor,
    y: Tensor,
    t: Union[Tensor, float],
) -> Tensor:
    """Evaluate the Lagrange interpolating polynomial at query points.

    Computes

        p(t) = sum_i y[i] * prod_{j != i} (t - x[j]) / (x[i] - x[j])

    directly from the nodes, without preprocessing.

    Parameters
    ----------
    x : Tensor
        Node abscissas, shape (n,). Must be pairwise distinct.
    y : Tensor
        Node values, shape (n,).
    t : Tensor or float
        Query points, any shape.

    Returns
    -------
    Tensor
        p(t), same shape as ``t``.

    Raises
    ------
    InsufficientNodesError
        If there are fewer than 2 nodes.
    DuplicateAbscissaError
        If two abscissas coincide.

    Notes
    -----
    Costs O(n^2) per query point. The product form loses accuracy for
    many or closely spaced nodes; prefer Newton's form there.

    Examples
    --------
    >>> x = torch.tensor([0.0, 1.0, 2.0])
    >>> y = torch.tensor([0.0, 1.0, 4.0])
    >>> lagrange_evaluate(x, y, torch.tensor(0.5))
    tensor(0.2500)
    """
    x, y = validate_nodes(x, y)
    n = x.shape[0]

    t = torch.as_tensor(t, dtype=x.dtype, device=x.device)
    query_shape = t.shape
    t_flat = t.reshape(-1, 1, 1)  # (M, 1, 1)

    eye = torch.eye(n, dtype=torch.bool, device=x.device)

    # denominators[i, j] = x[i] - x[j], with ones on the diagonal
    denominators = x.unsqueeze(-1) - x.unsqueeze(0)
    denominators = torch.where(eye, torch.ones_like(denominators), denominators)

    # factors[m, i, j] = (t[m] - x[j]) / (x[i] - x[j]) for j != i, else 1
    factors = (t_flat - x.view(1, 1, n)) / denominators
    factors = torch.where(eye, torch.ones_like(factors), factors)

    basis = factors.prod(dim=-1)  # (M, n)
    result = basis @ y

    return result.reshape(query_shape)
