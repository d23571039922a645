from ._chebyshev_config import ChebyshevConfig
from ._chebyshev_points import chebyshev_points
from ._chebyshev_resample import chebyshev_resample

__all__ = [
    "ChebyshevConfig",
    "chebyshev_points",
    "chebyshev_resample",
]
