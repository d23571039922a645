"""Interpolation in the monomial basis."""

from typing import Callable, Optional

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._vandermonde_evaluate import vandermonde_evaluate
from ._vandermonde_fit import vandermonde_fit


@tensorclass
class VandermondeInterpolant:
    """Interpolating polynomial in the power basis.

    Represents p(t) = c[0] + c[1]*t + ... + c[n-1]*t^(n-1).

    Attributes
    ----------
    coefficients : Tensor
        Coefficients in ascending order, shape (n,).
    """

    coefficients: Tensor


def vandermonde(
    x: torch.Tensor,
    y: torch.Tensor,
    rtol: Optional[float] = None,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a Vandermonde interpolator from data.

    This is a convenience function that solves the Vandermonde system
    and returns a callable that evaluates the resulting polynomial.

    Parameters
    ----------
    x : Tensor
        Node abscissas, shape (n,). Must be pairwise distinct.
    y : Tensor
        Node values, shape (n,).
    rtol : float, optional
        Relative pivot tolerance. Default is ``n * eps``.

    Returns
    -------
    interpolant : Callable[[Tensor], Tensor]
        Function that evaluates the interpolating polynomial.
    """
    fitted = vandermonde_fit(x, y, rtol=rtol)
    return lambda t: vandermonde_evaluate(fitted, t)
