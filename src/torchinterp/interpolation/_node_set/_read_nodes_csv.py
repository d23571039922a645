"""Node import from comma-separated tables."""

import os
from typing import IO, Union

import pandas as pd
import torch

from .._insufficient_nodes_error import InsufficientNodesError
from ._node_set import NodeSet, node_set


def read_nodes_csv(
    source: Union[str, os.PathLike, IO[str]],
    dtype: torch.dtype = torch.float64,
) -> NodeSet:
    """Read nodes from a CSV table with ``x`` and ``y`` columns.

    Rows whose x or y cell is missing, empty or not a finite number are
    skipped. Other columns are ignored. Header names are matched after
    stripping whitespace and a leading byte order mark.

    Parameters
    ----------
    source : str, PathLike or text file
        Path to the CSV file, or an open text stream.
    dtype : torch.dtype, optional
        Data type of the returned coordinates. Default is float64.

    Returns
    -------
    NodeSet
        Nodes in file order.

    Raises
    ------
    ValueError
        If the header has no ``x`` or no ``y`` column.
    InsufficientNodesError
        If fewer than 2 valid rows remain.

    Examples
    --------
    >>> import io
    >>> nodes = read_nodes_csv(io.StringIO("x,y\\n0,1\\n1,3\\n"))
    >>> nodes.y
    tensor([1., 3.], dtype=torch.float64)
    """
    data = pd.read_csv(source, skipinitialspace=True, dtype=str)
    data.columns = [str(name).lstrip("\ufeff").strip() for name in data.columns]

    if "x" not in data.columns or "y" not in data.columns:
        raise ValueError(
            f"CSV header must contain 'x' and 'y' columns, "
            f"got {list(data.columns)}"
        )

    x = pd.to_numeric(data["x"].str.strip(), errors="coerce")
    y = pd.to_numeric(data["y"].str.strip(), errors="coerce")

    # Infinite values count as invalid, like empty cells
    valid = x.abs().lt(float("inf")) & y.abs().lt(float("inf"))
    x = x[valid]
    y = y[valid]

    if len(x) < 2:
        raise InsufficientNodesError(
            f"Need at least 2 valid rows, got {len(x)}"
        )

    return node_set(x.tolist(), y.tolist(), dtype=dtype)
