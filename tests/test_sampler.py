import pytest

from core import DomainError, ExpressionError, InfixEvaluator
from plot import CoordinateSampler


def test_x_coordinates_strictly_increasing_below_xmax():
    xs = CoordinateSampler().get_x_coordinates(-10, 10)
    assert xs[0] == -10
    assert all(b > a for a, b in zip(xs, xs[1:]))
    assert xs[-1] < 10
    assert 999 <= len(xs) <= 1001


def test_y_matches_pointwise_evaluation():
    sampler = CoordinateSampler()
    xs = sampler.get_x_coordinates(-10, 10)
    ys = sampler.get_y_coordinates("x*x", -10, 10)
    assert len(xs) == len(ys)
    for x, y in zip(xs, ys):
        assert y == InfixEvaluator.evaluate("x*x", x)


def test_zero_domain_returns_empty():
    sampler = CoordinateSampler()
    assert sampler.get_x_coordinates(0, 0) == []
    assert sampler.get_y_coordinates("x", 0, 0) == []


def test_reversed_domain_returns_empty():
    assert CoordinateSampler().get_x_coordinates(5, -5) == []


def test_custom_step_factor():
    xs = CoordinateSampler(step_factor=0.25).get_x_coordinates(0, 1)
    assert xs == [0, 0.25, 0.5, 0.75]


def test_domain_error_propagates():
    with pytest.raises(DomainError):
        CoordinateSampler().get_y_coordinates("sqrt(x)", -1, 1)


def test_sample_frame():
    frame = CoordinateSampler().sample("2*x", 0, 1)
    assert list(frame.columns) == ["x", "y"]
    assert 1000 <= len(frame) <= 1001
    assert (frame["y"] == 2 * frame["x"]).all()


def test_sample_requires_variable():
    with pytest.raises(ExpressionError, match="Need X"):
        CoordinateSampler().sample("2+2", 0, 1)
