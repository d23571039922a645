from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ._active_nodes import ActiveNodes

if TYPE_CHECKING:
    from .._chebyshev import ChebyshevConfig
    from .._node_set import NodeSet


def derive_active_nodes(
    nodes: NodeSet,
    chebyshev_enabled: bool = False,
    config: Optional[ChebyshevConfig] = None,
) -> ActiveNodes:
    """Select the nodes an interpolation method should use.

    Parameters
    ----------
    nodes : NodeSet
        Raw nodes.
    chebyshev_enabled : bool, optional
        If True, replace the abscissas by Chebyshev nodes. Default False.
    config : ChebyshevConfig, optional
        Interval and count for the Chebyshev nodes. Required when
        ``chebyshev_enabled`` is True.

    Returns
    -------
    ActiveNodes
        ``nodes`` unchanged, or ``chebyshev_resample(nodes, config)``.

    Raises
    ------
    ValueError
        If Chebyshev resampling is enabled without a config.
    """
    if chebyshev_enabled:
        if config is None:
            raise ValueError("chebyshev_enabled requires a ChebyshevConfig")

        from .._chebyshev import chebyshev_resample

        return chebyshev_resample(nodes, config)

    return ActiveNodes(x=nodes.x, y=nodes.y, batch_size=[nodes.x.shape[0]])
