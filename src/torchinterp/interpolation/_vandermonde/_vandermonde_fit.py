from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from torch import Tensor

from .._solve_gaussian import solve_gaussian
from .._validate_nodes import validate_nodes
from ._vandermonde_matrix import vandermonde_matrix

if TYPE_CHECKING:
    from ._vandermonde import VandermondeInterpolant


def vandermonde_fit(
    x: Tensor,
    y: Tensor,
    rtol: Optional[float] = None,
) -> VandermondeInterpolant:
    """
    Solve for the monomial coefficients of the interpolating polynomial.

    Builds V[i, j] = x[i]^j and solves V c = y by Gaussian elimination
    with partial pivoting.

    Parameters
    ----------
    x : Tensor
        Node abscissas, shape (n,). Must be pairwise distinct.
    y : Tensor
        Node values, shape (n,).
    rtol : float, optional
        Relative pivot tolerance passed to the solver. Default is
        ``n * eps``.

    Returns
    -------
    VandermondeInterpolant
        Coefficients in ascending powers.

    Raises
    ------
    InsufficientNodesError
        If there are fewer than 2 nodes.
    DuplicateAbscissaError
        If two abscissas coincide.
    SingularSystemError
        If elimination meets a zero pivot (severe ill-conditioning).

    Notes
    -----
    The monomial basis is poorly scaled: the condition number of V grows
    exponentially with n, so this is the least robust of the three
    methods for large node counts.
    """
    x, y = validate_nodes(x, y)

    coeffs = solve_gaussian(vandermonde_matrix(x), y, rtol=rtol)

    # Lazy import to avoid circular dependency
    from ._vandermonde import VandermondeInterpolant

    return VandermondeInterpolant(coefficients=coeffs, batch_size=[])
