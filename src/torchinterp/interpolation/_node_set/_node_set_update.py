from typing import Optional

from ._node_set import NodeSet


def _check_index(nodes: NodeSet, index: int) -> int:
    n = nodes.x.shape[0]
    if not -n <= index < n:
        raise IndexError(f"Node index {index} out of range for {n} nodes")
    return index % n


def node_set_update(
    nodes: NodeSet,
    index: int,
    x: Optional[float] = None,
    y: Optional[float] = None,
) -> NodeSet:
    """Return a copy of ``nodes`` with one coordinate of one node replaced.

    Parameters
    ----------
    nodes : NodeSet
        Source nodes.
    index : int
        Position of the node to edit. Negative indices count from the end.
    x, y : float, optional
        New coordinate values. ``None`` keeps the current value.

    Returns
    -------
    NodeSet
        New node set of the same length.

    Raises
    ------
    IndexError
        If ``index`` is out of range.
    """
    index = _check_index(nodes, index)

    new_x = nodes.x.clone()
    new_y = nodes.y.clone()
    if x is not None:
        new_x[index] = x
    if y is not None:
        new_y[index] = y

    return NodeSet(x=new_x, y=new_y, batch_size=[new_x.shape[0]])
