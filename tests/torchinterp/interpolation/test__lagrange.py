"""Tests for Lagrange interpolation."""

import math

import pytest
import torch


class TestLagrangeEvaluate:
    def test_parabola_midpoint(self):
        from torchinterp.interpolation import lagrange_evaluate

        x = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)
        y = torch.tensor([0.0, 1.0, 4.0], dtype=torch.float64)

        result = lagrange_evaluate(x, y, torch.tensor(0.5, dtype=torch.float64))

        torch.testing.assert_close(
            result, torch.tensor(0.25, dtype=torch.float64)
        )

    def test_evaluate_at_nodes(self):
        """Test that the interpolant passes through every node."""
        from torchinterp.interpolation import lagrange_evaluate

        x = torch.linspace(0, 1, 8, dtype=torch.float64)
        y = torch.sin(x * math.pi)

        torch.testing.assert_close(
            lagrange_evaluate(x, y, x), y, atol=1e-12, rtol=1e-12
        )

    def test_unsorted_nodes(self):
        from torchinterp.interpolation import lagrange_evaluate

        x = torch.tensor([2.0, 0.0, 1.0], dtype=torch.float64)
        y = x**2

        result = lagrange_evaluate(x, y, 3.0)

        torch.testing.assert_close(
            result, torch.tensor(9.0, dtype=torch.float64)
        )

    def test_preserves_query_shape(self):
        from torchinterp.interpolation import lagrange_evaluate

        x = torch.tensor([0.0, 1.0], dtype=torch.float64)
        y = torch.tensor([1.0, 3.0], dtype=torch.float64)
        t = torch.zeros(2, 3, dtype=torch.float64)

        result = lagrange_evaluate(x, y, t)

        assert result.shape == (2, 3)
        assert torch.all(result == 1.0)

    def test_scalar_query(self):
        from torchinterp.interpolation import lagrange_evaluate

        x = torch.tensor([0.0, 1.0])
        y = torch.tensor([1.0, 3.0])

        result = lagrange_evaluate(x, y, 0.5)

        assert result.dim() == 0
        assert result.dtype == torch.float32
        assert result.item() == pytest.approx(2.0)

    def test_single_node(self):
        from torchinterp.interpolation import (
            InsufficientNodesError,
            lagrange_evaluate,
        )

        with pytest.raises(InsufficientNodesError):
            lagrange_evaluate(torch.tensor([0.0]), torch.tensor([0.0]), 1.0)

    def test_duplicate_abscissa(self):
        from torchinterp.interpolation import (
            DuplicateAbscissaError,
            lagrange_evaluate,
        )

        x = torch.tensor([1.0, 1.0], dtype=torch.float64)
        y = torch.tensor([2.0, 5.0], dtype=torch.float64)

        with pytest.raises(DuplicateAbscissaError):
            lagrange_evaluate(x, y, 0.0)

    def test_non_finite_node(self):
        from torchinterp.interpolation import (
            InterpolationError,
            lagrange_evaluate,
        )

        x = torch.tensor([0.0, float("nan")], dtype=torch.float64)
        y = torch.tensor([2.0, 5.0], dtype=torch.float64)

        with pytest.raises(InterpolationError, match="finite"):
            lagrange_evaluate(x, y, 0.0)

    def test_shape_mismatch(self):
        from torchinterp.interpolation import lagrange_evaluate

        with pytest.raises(ValueError):
            lagrange_evaluate(
                torch.tensor([0.0, 1.0]), torch.tensor([0.0, 1.0, 2.0]), 0.0
            )


class TestLagrange:
    def test_returns_callable(self):
        from torchinterp.interpolation import lagrange

        f = lagrange(torch.tensor([0.0, 1.0]), torch.tensor([1.0, 3.0]))

        torch.testing.assert_close(f(torch.tensor([0.5])), torch.tensor([2.0]))

    def test_validates_eagerly(self):
        from torchinterp.interpolation import DuplicateAbscissaError, lagrange

        with pytest.raises(DuplicateAbscissaError):
            lagrange(torch.tensor([1.0, 1.0]), torch.tensor([2.0, 5.0]))

    def test_integer_nodes_are_promoted(self):
        from torchinterp.interpolation import lagrange

        f = lagrange(torch.tensor([0, 2]), torch.tensor([0, 2]))

        assert f(torch.tensor(1.0)).item() == pytest.approx(1.0)
