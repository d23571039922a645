"""torchinterp: polynomial interpolation operators for PyTorch."""

from . import interpolation

__all__ = [
    "interpolation",
]

__version__ = "0.1.0"
