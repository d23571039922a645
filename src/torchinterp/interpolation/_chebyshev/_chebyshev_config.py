from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ChebyshevConfig:
    """Interval and count for Chebyshev resampling.

    Parameters
    ----------
    a : float
        Left end of the interval.
    b : float
        Right end of the interval.
    n : int
        Number of Chebyshev nodes.
    missing : {"zero", "error"}
        What to do when ``n`` exceeds the number of source nodes.
        ``"zero"`` pads the missing values with 0 and warns (default);
        ``"error"`` raises :class:`InsufficientNodesError`.
    """

    a: float = 0.0
    b: float = 1.0
    n: int = 2
    missing: Literal["zero", "error"] = "zero"

    def __post_init__(self):
        if self.n < 0:
            raise ValueError(f"n must be non-negative, got {self.n}")
        if self.missing not in ("zero", "error"):
            raise ValueError(
                f"missing must be 'zero' or 'error', got {self.missing!r}"
            )
