import math
from typing import Optional, Union

from torch import Tensor

from ._interpolate import InterpolationMethod, _Nodes, interpolate
from ._interpolation_error import InterpolationError


def _parse_query(query) -> Optional[float]:
    if query is None or isinstance(query, bool):
        return None
    if isinstance(query, Tensor):
        if query.numel() != 1:
            return None
        query = query.item()
    if isinstance(query, str):
        query = query.strip()
    try:
        value = float(query)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def evaluate_query(
    nodes: _Nodes,
    query: Union[str, float, Tensor, None],
    method: InterpolationMethod = "newton",
) -> Optional[float]:
    """Evaluate the interpolant at a single user-supplied point.

    Unlike :func:`interpolate`, failures are reported as ``None``:

    - the query is empty, not a number, or not finite;
    - the nodes cannot be interpolated (:class:`InterpolationError`);
    - the value overflows to a non-finite number.

    Parameters
    ----------
    nodes : NodeSet or ActiveNodes
        Interpolation nodes.
    query : str, float, Tensor or None
        Query abscissa, e.g. the raw text of an input field.
    method : {"lagrange", "newton", "vandermonde"}, optional
        Interpolation method. Default is "newton".

    Returns
    -------
    float or None
        p(query), or None if there is no result.

    Examples
    --------
    >>> nodes = node_set([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
    >>> evaluate_query(nodes, "0.5")
    0.25
    >>> evaluate_query(nodes, "abc") is None
    True
    """
    t = _parse_query(query)
    if t is None:
        return None

    try:
        value = interpolate(nodes, method)(t).item()
    except InterpolationError:
        return None

    if not math.isfinite(value):
        return None
    return value
