from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._vandermonde import VandermondeInterpolant


def vandermonde_evaluate(
    interpolant: VandermondeInterpolant,
    t: Union[Tensor, float],
) -> Tensor:
    """Evaluate sum_i c[i] * t^i using Horner's method.

    Parameters
    ----------
    interpolant : VandermondeInterpolant
        Fitted interpolant from :func:`vandermonde_fit`.
    t : Tensor or float
        Query points, any shape.

    Returns
    -------
    Tensor
        p(t), same shape as ``t``.
    """
    coeffs = interpolant.coefficients
    n = coeffs.shape[0]

    t = torch.as_tensor(t, dtype=coeffs.dtype, device=coeffs.device)

    result = coeffs[n - 1].expand_as(t)
    for i in range(n - 2, -1, -1):
        result = result * t + coeffs[i]

    return result
