from ._lagrange import lagrange
from ._lagrange_evaluate import lagrange_evaluate

__all__ = [
    "lagrange",
    "lagrange_evaluate",
]
