"""Tests for the interpolation exception hierarchy."""

import pytest

from torchinterp.interpolation import (
    DuplicateAbscissaError,
    InsufficientNodesError,
    InterpolationError,
    SingularInterpolationError,
    SingularSystemError,
)


class TestExceptionHierarchy:
    """Test that all exceptions inherit from InterpolationError."""

    def test_insufficient_nodes_error_is_interpolation_error(self):
        with pytest.raises(InterpolationError):
            raise InsufficientNodesError("test")

    def test_singular_interpolation_error_is_interpolation_error(self):
        with pytest.raises(InterpolationError):
            raise SingularInterpolationError("test")

    def test_duplicate_abscissa_error_is_singular(self):
        with pytest.raises(SingularInterpolationError):
            raise DuplicateAbscissaError("test")

    def test_singular_system_error_is_singular(self):
        with pytest.raises(SingularInterpolationError):
            raise SingularSystemError("test")

    def test_insufficient_nodes_is_not_singular(self):
        assert not issubclass(InsufficientNodesError, SingularInterpolationError)


class TestExceptionMessages:
    def test_duplicate_abscissa_error_message(self):
        with pytest.raises(DuplicateAbscissaError, match="share the abscissa"):
            raise DuplicateAbscissaError("Nodes 0 and 1 share the abscissa x = 1.0")

    def test_insufficient_nodes_error_message(self):
        with pytest.raises(InsufficientNodesError, match="at least 2"):
            raise InsufficientNodesError("Need at least 2 nodes, got 1")
