"""Polynomial interpolation of sample nodes for PyTorch tensors.

Every method builds the unique polynomial of degree n - 1 through n
nodes with pairwise distinct abscissas.

Convenience Functions
---------------------
interpolate
    Build an evaluator for a given method ("lagrange", "newton",
    "vandermonde").
lagrange, newton, vandermonde
    Build an evaluator with a specific method.

Lagrange
--------
lagrange_evaluate
    Evaluate the Lagrange form directly from the nodes.

Newton
------
newton_fit
    Compute divided differences.
newton_evaluate
    Evaluate the Newton form by nested multiplication.

Vandermonde
-----------
vandermonde_matrix
    Build V[i, j] = x[i]^j.
vandermonde_fit
    Solve the Vandermonde system for monomial coefficients.
vandermonde_evaluate
    Evaluate the monomial form with Horner's method.
solve_gaussian
    Gaussian elimination with partial pivoting.

Nodes
-----
node_set, node_set_append, node_set_update, node_set_remove
    Create and edit node sets.
read_nodes_csv
    Read nodes from a CSV table with x and y columns.
random_nodes
    Sample nodes uniformly from a rectangle.
chebyshev_points, chebyshev_resample
    Chebyshev abscissas and resampling of a node set.
derive_active_nodes
    Select raw or Chebyshev nodes.

Plotting Support
----------------
sample_grid
    Evenly spaced grid over the node range.
evaluate_query
    Evaluate at one point, returning None on failure.
interpolation_curve
    Grid and interpolant values, or None on failure.
interpolation_plot_data
    Node, curve and query series for a renderer.

Data Types
----------
NodeSet, ActiveNodes
    Node coordinates.
ChebyshevConfig
    Interval and count for Chebyshev resampling.
NewtonInterpolant, VandermondeInterpolant
    Fitted interpolants.
PlotData
    Series for a renderer.

Exceptions
----------
InterpolationError
    Base exception for interpolation.
InsufficientNodesError
    Fewer than 2 nodes.
SingularInterpolationError
    Vanishing denominator or pivot.
DuplicateAbscissaError
    Two nodes share an abscissa.
SingularSystemError
    Zero pivot in the Vandermonde system.
"""

# Import base exception first
from ._interpolation_error import InterpolationError

# Import exception subclasses
from ._duplicate_abscissa_error import DuplicateAbscissaError
from ._insufficient_nodes_error import InsufficientNodesError
from ._singular_interpolation_error import SingularInterpolationError
from ._singular_system_error import SingularSystemError

from ._active_nodes import ActiveNodes, derive_active_nodes
from ._chebyshev import ChebyshevConfig, chebyshev_points, chebyshev_resample
from ._evaluate_query import evaluate_query
from ._interpolate import InterpolationMethod, interpolate
from ._interpolation_curve import interpolation_curve
from ._lagrange import lagrange, lagrange_evaluate
from ._newton import NewtonInterpolant, newton, newton_evaluate, newton_fit
from ._node_set import (
    NodeSet,
    node_set,
    node_set_append,
    node_set_remove,
    node_set_update,
    random_nodes,
    read_nodes_csv,
)
from ._plot_data import PlotData, interpolation_plot_data
from ._sample_grid import sample_grid
from ._solve_gaussian import solve_gaussian
from ._vandermonde import (
    VandermondeInterpolant,
    vandermonde,
    vandermonde_evaluate,
    vandermonde_fit,
    vandermonde_matrix,
)

__all__ = [
    "ActiveNodes",
    "ChebyshevConfig",
    "DuplicateAbscissaError",
    "InsufficientNodesError",
    "InterpolationError",
    "InterpolationMethod",
    "NewtonInterpolant",
    "NodeSet",
    "PlotData",
    "SingularInterpolationError",
    "SingularSystemError",
    "VandermondeInterpolant",
    "chebyshev_points",
    "chebyshev_resample",
    "derive_active_nodes",
    "evaluate_query",
    "interpolate",
    "interpolation_curve",
    "interpolation_plot_data",
    "lagrange",
    "lagrange_evaluate",
    "newton",
    "newton_evaluate",
    "newton_fit",
    "node_set",
    "node_set_append",
    "node_set_remove",
    "node_set_update",
    "random_nodes",
    "read_nodes_csv",
    "sample_grid",
    "solve_gaussian",
    "vandermonde",
    "vandermonde_evaluate",
    "vandermonde_fit",
    "vandermonde_matrix",
]
