from typing import Callable, Literal, Optional, Protocol

from torch import Tensor

from ._lagrange import lagrange
from ._newton import newton
from ._vandermonde import vandermonde

InterpolationMethod = Literal["lagrange", "newton", "vandermonde"]


class _Nodes(Protocol):
    x: Tensor
    y: Tensor


def interpolate(
    nodes: _Nodes,
    method: InterpolationMethod = "newton",
    rtol: Optional[float] = None,
) -> Callable[[Tensor], Tensor]:
    """Build an evaluator for the polynomial through ``nodes``.

    Parameters
    ----------
    nodes : NodeSet or ActiveNodes
        Anything with 1-D ``x`` and ``y`` tensors.
    method : {"lagrange", "newton", "vandermonde"}, optional
        Construction of the interpolating polynomial. Any other value
        selects Newton's method. Default is "newton".
    rtol : float, optional
        Relative pivot tolerance, used by the Vandermonde method only.

    Returns
    -------
    Callable[[Tensor], Tensor]
        Evaluator ``f(t)`` returning p(t) with the shape of ``t``.

    Raises
    ------
    InsufficientNodesError
        If there are fewer than 2 nodes.
    SingularInterpolationError
        If two abscissas coincide or the Vandermonde system is singular.

    Examples
    --------
    >>> nodes = node_set([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
    >>> interpolate(nodes, "lagrange")(torch.tensor(0.5))
    tensor(0.2500, dtype=torch.float64)
    """
    if method == "lagrange":
        return lagrange(nodes.x, nodes.y)
    if method == "vandermonde":
        return vandermonde(nodes.x, nodes.y, rtol=rtol)
    return newton(nodes.x, nodes.y)
