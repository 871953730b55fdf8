"""
Backward-pass derivatives vs central finite differences on random inputs.
"""

import numpy as np
import pytest

from aad_graph import (
    make_variable, add, sub, mul, div, power, weighted_power, neg,
    exp, sin, cos, log, sqrt, tanh, erf, norm_cdf,
    finite_difference, check_gradients, gradients, read_value, read_derivative,
)

RNG_SEED = 20240917


def _sample_contexts(n=10):
    rng = np.random.default_rng(RNG_SEED)
    for _ in range(n):
        yield {
            "x": float(rng.uniform(0.2, 1.5)),
            "y": float(rng.uniform(0.5, 2.0)),
        }


def _every_node_type(x, y):
    return (
        div(exp(sin(x) * y), cos(y) + 2.0)
        + weighted_power(0.5, x, 3)
        - x / y
        + tanh(x - y)
        + log(x + 1.0) * sqrt(y)
        + power(y, -2)
        + neg(erf(x * 0.5))
        + norm_cdf(x - y) * x
        + sub(add(x, y), mul(x, x))
    )


@pytest.mark.parametrize("ctx", list(_sample_contexts()))
def test_adjoints_match_bumping(session, ctx):
    x = make_variable("x")
    y = make_variable("y")
    r = _every_node_type(x, y)

    results = check_gradients(r, ctx, eps=1e-6, tol=1e-6)

    assert set(results) == {"x", "y"}
    for check in results.values():
        assert check.ok, check
    # graph is left holding the base-point derivatives
    assert read_derivative(x) == pytest.approx(results["x"].adjoint)
    assert read_derivative(y) == pytest.approx(results["y"].adjoint)


@pytest.mark.parametrize("build", [
    lambda x, y: x + y,
    lambda x, y: x - y,
    lambda x, y: x * y,
    lambda x, y: x / y,
    lambda x, y: weighted_power(-1.5, x, 4) * y,
    lambda x, y: power(x * y, -3),
    lambda x, y: exp(x) * sin(y),
    lambda x, y: cos(x * y),
])
def test_single_rules_match_bumping(session, build):
    x = make_variable("x")
    y = make_variable("y")
    r = build(x, y)
    for ctx in _sample_contexts(3):
        g = gradients(r, ctx)
        for name in ("x", "y"):
            bumped = finite_difference(r, ctx, name, eps=1e-6)
            assert g[name] == pytest.approx(bumped, rel=1e-6, abs=1e-6)


def test_finite_difference_restores_base_point(session):
    x = make_variable("x")
    r = x * x
    d = finite_difference(r, {"x": 3.0}, "x")
    assert d == pytest.approx(6.0, abs=1e-6)
    assert read_value(r) == 9.0
    assert not r.stale


def test_finite_difference_needs_binding(session):
    x = make_variable("x")
    with pytest.raises(KeyError):
        finite_difference(x * 2.0, {}, "x")


def test_check_gradients_flags_mismatch(session):
    x = make_variable("x")
    # a coarse bump on a cubic is off by eps^2
    r = power(x, 3)
    results = check_gradients(r, {"x": 1.0}, eps=0.5, tol=1e-9)
    assert not results["x"].ok
    assert results["x"].abs_error == pytest.approx(0.25)
