from ._active_nodes import ActiveNodes
from ._derive_active_nodes import derive_active_nodes

__all__ = [
    "ActiveNodes",
    "derive_active_nodes",
]
