from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class ActiveNodes:
    """Nodes actually handed to an interpolation method.

    Either the raw coordinates of a :class:`NodeSet` or a Chebyshev
    resampling of it.

    Attributes
    ----------
    x : Tensor
        Abscissas, shape (n,). Expected to be free of duplicates.
    y : Tensor
        Values, shape (n,).
    """

    x: Tensor
    y: Tensor
