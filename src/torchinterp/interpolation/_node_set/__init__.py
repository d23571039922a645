from ._node_set import NodeSet, node_set
from ._node_set_append import node_set_append
from ._node_set_remove import node_set_remove
from ._node_set_update import node_set_update
from ._random_nodes import random_nodes
from ._read_nodes_csv import read_nodes_csv

__all__ = [
    "NodeSet",
    "node_set",
    "node_set_append",
    "node_set_remove",
    "node_set_update",
    "random_nodes",
    "read_nodes_csv",
]
