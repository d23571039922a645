from ._vandermonde import (
    VandermondeInterpolant,
    vandermonde,
)
from ._vandermonde_evaluate import vandermonde_evaluate
from ._vandermonde_fit import vandermonde_fit
from ._vandermonde_matrix import vandermonde_matrix

__all__ = [
    "VandermondeInterpolant",
    "vandermonde",
    "vandermonde_evaluate",
    "vandermonde_fit",
    "vandermonde_matrix",
]
