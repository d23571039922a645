import torch

from ._node_set import NodeSet


def node_set_append(nodes: NodeSet, x: float = 0.0, y: float = 0.0) -> NodeSet:
    """Return a copy of ``nodes`` with (x, y) added at the end.

    Parameters
    ----------
    nodes : NodeSet
        Source nodes.
    x, y : float, optional
        Coordinates of the new node. Default is the origin.

    Returns
    -------
    NodeSet
        New node set of length n + 1.
    """
    new_x = torch.tensor([x], dtype=nodes.x.dtype, device=nodes.x.device)
    new_y = torch.tensor([y], dtype=nodes.y.dtype, device=nodes.y.device)

    return NodeSet(
        x=torch.cat([nodes.x, new_x]),
        y=torch.cat([nodes.y, new_y]),
        batch_size=[nodes.x.shape[0] + 1],
    )
