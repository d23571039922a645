from ._newton import (
    NewtonInterpolant,
    newton,
)
from ._newton_evaluate import newton_evaluate
from ._newton_fit import newton_fit

__all__ = [
    "NewtonInterpolant",
    "newton",
    "newton_evaluate",
    "newton_fit",
]
