from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._newton import NewtonInterpolant


def newton_evaluate(
    interpolant: NewtonInterpolant,
    t: Union[Tensor, float],
) -> Tensor:
    """
    Evaluate a Newton interpolant with nested multiplication.

    Parameters
    ----------
    interpolant : NewtonInterpolant
        Fitted interpolant from :func:`newton_fit`.
    t : Tensor or float
        Query points, any shape.

    Returns
    -------
    Tensor
        p(t), same shape as ``t``.

    Notes
    -----
    Starting from r = c[n-1], applies r <- r * (t - x[i]) + c[i] for
    i = n-2, ..., 0.
    """
    knots = interpolant.knots
    coeffs = interpolant.coefficients
    n = coeffs.shape[0]

    t = torch.as_tensor(t, dtype=coeffs.dtype, device=coeffs.device)

    result = coeffs[n - 1].expand_as(t)
    for i in range(n - 2, -1, -1):
        result = result * (t - knots[i]) + coeffs[i]

    return result
