"""Tests for Chebyshev points and resampling."""

import math

import pytest
import torch


class TestChebyshevPoints:
    def test_unit_interval_values(self):
        """Test the roots of T_3 on [-1, 1]."""
        from torchinterp.interpolation import chebyshev_points

        x = chebyshev_points(3)
        expected = torch.tensor(
            [math.sqrt(3) / 2, 0.0, -math.sqrt(3) / 2], dtype=torch.float64
        )

        torch.testing.assert_close(x, expected, atol=1e-15, rtol=0)

    def test_scaled_interval(self):
        from torchinterp.interpolation import chebyshev_points

        x = chebyshev_points(3, 0.0, 2.0)
        expected = torch.tensor(
            [1 + math.sqrt(3) / 2, 1.0, 1 - math.sqrt(3) / 2],
            dtype=torch.float64,
        )

        torch.testing.assert_close(x, expected, atol=1e-15, rtol=0)

    def test_decreasing_order(self):
        from torchinterp.interpolation import chebyshev_points

        x = chebyshev_points(10, -3.0, 5.0)

        assert torch.all(x[1:] < x[:-1])

    def test_roots_of_chebyshev_polynomial(self):
        """T_n(cos(theta)) = cos(n theta) vanishes at every point."""
        from torchinterp.interpolation import chebyshev_points

        n = 7
        x = chebyshev_points(n)

        torch.testing.assert_close(
            torch.cos(n * torch.acos(x)),
            torch.zeros(n, dtype=torch.float64),
            atol=1e-12,
            rtol=0,
        )

    def test_zero_points(self):
        from torchinterp.interpolation import chebyshev_points

        assert chebyshev_points(0).shape == (0,)

    def test_negative_count(self):
        from torchinterp.interpolation import chebyshev_points

        with pytest.raises(ValueError):
            chebyshev_points(-1)

    def test_degenerate_interval(self):
        from torchinterp.interpolation import chebyshev_points

        x = chebyshev_points(4, 2.0, 2.0)

        assert torch.all(x == 2.0)


class TestChebyshevConfig:
    def test_defaults(self):
        from torchinterp.interpolation import ChebyshevConfig

        config = ChebyshevConfig()

        assert (config.a, config.b, config.n) == (0.0, 1.0, 2)
        assert config.missing == "zero"

    def test_negative_count(self):
        from torchinterp.interpolation import ChebyshevConfig

        with pytest.raises(ValueError):
            ChebyshevConfig(n=-2)

    def test_invalid_missing(self):
        from torchinterp.interpolation import ChebyshevConfig

        with pytest.raises(ValueError):
            ChebyshevConfig(missing="drop")

    def test_frozen(self):
        import dataclasses

        from torchinterp.interpolation import ChebyshevConfig

        config = ChebyshevConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.n = 5


class TestChebyshevResample:
    def test_same_count_over_node_range(self):
        """n = |nodes| over the node x-range gives n distinct points in range."""
        from torchinterp.interpolation import (
            ActiveNodes,
            ChebyshevConfig,
            chebyshev_resample,
            node_set,
        )

        nodes = node_set([-1.0, 0.5, 2.0, 4.0, 6.0], [1.0, 2.0, 3.0, 4.0, 5.0])
        config = ChebyshevConfig(a=-1.0, b=6.0, n=5)

        active = chebyshev_resample(nodes, config)

        assert isinstance(active, ActiveNodes)
        assert active.x.shape == (5,)
        assert torch.unique(active.x).shape == (5,)
        assert torch.all(active.x >= -1.0) and torch.all(active.x <= 6.0)
        torch.testing.assert_close(active.y, nodes.y)

    def test_truncates_values(self):
        from torchinterp.interpolation import (
            ChebyshevConfig,
            chebyshev_resample,
            node_set,
        )

        nodes = node_set([0.0, 1.0, 2.0, 3.0], [5.0, 6.0, 7.0, 8.0])

        active = chebyshev_resample(nodes, ChebyshevConfig(0.0, 3.0, 2))

        assert active.y.tolist() == [5.0, 6.0]

    def test_pads_values_with_zero(self):
        from torchinterp.interpolation import (
            ChebyshevConfig,
            chebyshev_resample,
            node_set,
        )

        nodes = node_set([0.0, 1.0], [5.0, 6.0])

        with pytest.warns(UserWarning, match="padding 2 values"):
            active = chebyshev_resample(nodes, ChebyshevConfig(0.0, 1.0, 4))

        assert active.y.tolist() == [5.0, 6.0, 0.0, 0.0]
        assert active.x.shape == (4,)

    def test_rejects_padding_when_configured(self):
        from torchinterp.interpolation import (
            ChebyshevConfig,
            InsufficientNodesError,
            chebyshev_resample,
            node_set,
        )

        nodes = node_set([0.0, 1.0], [5.0, 6.0])
        config = ChebyshevConfig(0.0, 1.0, 3, missing="error")

        with pytest.raises(InsufficientNodesError):
            chebyshev_resample(nodes, config)

    def test_zero_count_is_rejected_downstream(self):
        from torchinterp.interpolation import (
            ChebyshevConfig,
            InsufficientNodesError,
            chebyshev_resample,
            interpolate,
            node_set,
        )

        nodes = node_set([0.0, 1.0], [5.0, 6.0])
        active = chebyshev_resample(nodes, ChebyshevConfig(0.0, 1.0, 0))

        assert active.x.shape == (0,)
        with pytest.raises(InsufficientNodesError):
            interpolate(active, "newton")

    @pytest.mark.parametrize("method", ["lagrange", "newton", "vandermonde"])
    def test_degenerate_interval_fails_interpolation(self, method):
        from torchinterp.interpolation import (
            ChebyshevConfig,
            DuplicateAbscissaError,
            chebyshev_resample,
            interpolate,
            node_set,
        )

        nodes = node_set([0.0, 1.0, 2.0], [5.0, 6.0, 7.0])
        active = chebyshev_resample(nodes, ChebyshevConfig(1.0, 1.0, 3))

        with pytest.raises(DuplicateAbscissaError):
            interpolate(active, method)
