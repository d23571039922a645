import warnings
from typing import Optional

import torch
from torch import Tensor

from ._singular_system_error import SingularSystemError

_ILL_CONDITIONED_PIVOT_RATIO = 1e-12


def solve_gaussian(
    matrix: Tensor,
    rhs: Tensor,
    rtol: Optional[float] = None,
) -> Tensor:
    """
    Solve a dense linear system Ax = b by Gaussian elimination.

    Rows are exchanged before each elimination step so that the entry of
    largest magnitude in the pivot column sits on the diagonal (partial
    pivoting).

    Parameters
    ----------
    matrix : Tensor
        Square system matrix A, shape (n, n).
    rhs : Tensor
        Right-hand side b, shape (n,).
    rtol : float, optional
        Relative pivot tolerance. A pivot in column j with magnitude at
        or below ``rtol * max(|A[:, j]|)`` is treated as zero. Default is
        ``n * eps`` for the dtype of A.

    Returns
    -------
    Tensor
        Solution x, shape (n,).

    Raises
    ------
    ValueError
        If A is not square or b does not match its size.
    SingularSystemError
        If a zero pivot remains after row exchange.

    Warns
    -----
    RuntimeWarning
        If some pivot is more than twelve orders of magnitude below the
        largest entry of its column in A.

    Notes
    -----
    Row exchanges and eliminations build new tensors instead of writing
    in place, so gradients flow through the solution.
    """
    n = matrix.shape[0]
    if matrix.dim() != 2 or matrix.shape[1] != n:
        raise ValueError(
            f"matrix must be square, got shape {tuple(matrix.shape)}"
        )
    if rhs.shape != (n,):
        raise ValueError(
            f"rhs must have shape ({n},), got {tuple(rhs.shape)}"
        )

    if rtol is None:
        rtol = n * torch.finfo(matrix.dtype).eps

    a = matrix
    b = rhs
    # Column magnitudes of A; row exchanges do not change them
    scales = matrix.abs().amax(dim=0)

    pivots = []
    for i in range(n):
        pivot_row = i + int(torch.argmax(a[i:, i].abs()))
        if pivot_row != i:
            order = list(range(n))
            order[i], order[pivot_row] = pivot_row, i
            index = torch.tensor(order, device=a.device)
            a = a[index]
            b = b[index]

        pivot = a[i, i]
        if pivot.abs() <= rtol * scales[i]:
            raise SingularSystemError(
                f"Zero pivot in column {i}: matrix is singular "
                f"to working precision"
            )
        pivots.append(pivot.abs() / scales[i])

        if i < n - 1:
            factors = a[i + 1 :, i] / pivot
            a = torch.cat(
                [a[: i + 1], a[i + 1 :] - factors.unsqueeze(-1) * a[i]],
                dim=0,
            )
            b = torch.cat([b[: i + 1], b[i + 1 :] - factors * b[i]], dim=0)

    pivots = torch.stack(pivots)
    if pivots.min() < _ILL_CONDITIONED_PIVOT_RATIO:
        warnings.warn(
            f"Pivot ratio {pivots.min().item():.3e} indicates "
            f"a severely ill-conditioned system; the solution may be "
            f"inaccurate.",
            RuntimeWarning,
            stacklevel=2,
        )

    # Back substitution, last unknown first
    x_list = [None] * n
    for i in range(n - 1, -1, -1):
        total = b[i]
        if i < n - 1:
            total = total - torch.dot(a[i, i + 1 :], torch.stack(x_list[i + 1 :]))
        x_list[i] = total / a[i, i]

    return torch.stack(x_list, dim=0)
