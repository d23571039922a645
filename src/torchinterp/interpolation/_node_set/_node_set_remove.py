import torch

from ._node_set import NodeSet
from ._node_set_update import _check_index


def node_set_remove(nodes: NodeSet, index: int) -> NodeSet:
    """Return a copy of ``nodes`` without the node at ``index``.

    Raises
    ------
    IndexError
        If ``index`` is out of range.
    """
    index = _check_index(nodes, index)

    keep = torch.ones(nodes.x.shape[0], dtype=torch.bool, device=nodes.x.device)
    keep[index] = False

    new_x = nodes.x[keep]
    new_y = nodes.y[keep]
    return NodeSet(x=new_x, y=new_y, batch_size=[new_x.shape[0]])
