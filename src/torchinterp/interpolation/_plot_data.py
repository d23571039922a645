from typing import NamedTuple, Optional, Union

from torch import Tensor

from ._evaluate_query import evaluate_query
from ._interpolate import InterpolationMethod, _Nodes
from ._interpolation_curve import interpolation_curve


class PlotData(NamedTuple):
    """Series needed to draw an interpolation.

    Parameters
    ----------
    node_x, node_y : Tensor
        Scatter series of the active nodes.
    curve_x, curve_y : Tensor, optional
        Interpolant sampled on the plotting grid. None if there is no
        interpolant.
    query_y : float, optional
        Interpolant value at the query point. None if there is no query
        or no result.
    """

    node_x: Tensor
    node_y: Tensor
    curve_x: Optional[Tensor] = None
    curve_y: Optional[Tensor] = None
    query_y: Optional[float] = None


def interpolation_plot_data(
    nodes: _Nodes,
    method: InterpolationMethod = "newton",
    count: int = 200,
    query: Union[str, float, Tensor, None] = None,
) -> PlotData:
    """Collect everything a renderer needs for one interpolation view.

    Parameters
    ----------
    nodes : NodeSet or ActiveNodes
        Interpolation nodes, usually from :func:`derive_active_nodes`.
    method : {"lagrange", "newton", "vandermonde"}, optional
        Interpolation method. Default is "newton".
    count : int, optional
        Number of curve samples. Default is 200.
    query : str, float, Tensor or None, optional
        Optional single query abscissa.

    Returns
    -------
    PlotData
        Node scatter, curve and query value. Failures show up as None
        fields, never as exceptions.
    """
    curve = interpolation_curve(nodes, method, count)
    curve_x, curve_y = curve if curve is not None else (None, None)

    return PlotData(
        node_x=nodes.x,
        node_y=nodes.y,
        curve_x=curve_x,
        curve_y=curve_y,
        query_y=evaluate_query(nodes, query, method),
    )
