"""Newton divided-difference interpolation."""

from typing import Callable

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._newton_evaluate import newton_evaluate
from ._newton_fit import newton_fit


@tensorclass
class NewtonInterpolant:
    """Interpolating polynomial in Newton form.

    Represents

        p(t) = c[0] + c[1](t - x[0]) + c[2](t - x[0])(t - x[1]) + ...

    Attributes
    ----------
    knots : Tensor
        Node abscissas x, shape (n,), in the order used for fitting.
    coefficients : Tensor
        Divided differences, shape (n,). ``coefficients[k]`` is
        f[x[0], ..., x[k]].
    """

    knots: Tensor
    coefficients: Tensor


def newton(
    x: torch.Tensor,
    y: torch.Tensor,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a Newton interpolator from data.

    This is a convenience function that computes the divided differences
    and returns a callable that evaluates the Newton form.

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
    >>> x = torch.tensor([0.0, 1.0, 2.0])
    >>> f = newton(x, x**2)
    >>> f(torch.tensor([3.0]))
    tensor([9.])
    """
    fitted = newton_fit(x, y)
    return lambda t: newton_evaluate(fitted, t)
