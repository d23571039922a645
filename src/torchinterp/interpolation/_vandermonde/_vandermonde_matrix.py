import torch
from torch import Tensor


def vandermonde_matrix(x: Tensor) -> Tensor:
    """Vandermonde matrix of the node abscissas, powers ascending by column.

    Row i holds 1, x[i], x[i]^2, ..., x[i]^(n-1). Each column is built from
    the previous one by a single multiplication.

    Parameters
    ----------
    x : Tensor
        Node abscissas, shape (n,).

    Returns
    -------
    Tensor
        Square matrix A of shape (n, n) with A[i, j] = x[i]^j.

    Examples
    --------
    >>> vandermonde_matrix(torch.tensor([-1.0, 2.0, 0.5]))
    tensor([[ 1.0000, -1.0000,  1.0000],
            [ 1.0000,  2.0000,  4.0000],
            [ 1.0000,  0.5000,  0.2500]])
    """
    n = x.shape[0]
    column = x.unsqueeze(-1)
    factors = torch.cat(
        [torch.ones_like(column), column.expand(n, max(n - 1, 0))],
        dim=-1,
    )
    return torch.cumprod(factors, dim=-1)
