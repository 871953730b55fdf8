"""
Graph queries, topological order and graph statistics.
"""

from aad_graph import (
    Mul, Plus, Variable, make_variable, make_constant, exp, power,
    query, variables, get_graph_stats, analyze_graph_complexity,
)
from aad_graph.core.graph_utils import topological_order, variables_by_name


def test_variables_feeding_a_computation(session):
    x = make_variable("x")
    y = make_variable("y")
    z = make_variable("z")
    r = exp(x * y) + power(x, 2) - 3.0
    assert variables(r) == {x, y}
    assert z not in variables(r)
    assert variables(x) == {x}
    assert list(variables_by_name(r)) == ["x", "y"]


def test_query_is_deduplicated(session):
    x = make_variable("x")
    s = x * x
    r = s + s * s
    assert query(r, Variable) == {x}
    assert query(r, "mul") == {s, r.b}


def test_query_shallow_stops_at_matches(session):
    x = make_variable("x")
    y = make_variable("y")
    inner = x * y
    outer = inner * 2.0
    r = outer + 1.0

    assert query(r, Mul) == {outer}
    assert r.find_descendants_matching(lambda n: isinstance(n, Mul)) == {outer}


def test_query_deep_continues_below_matches(session):
    x = make_variable("x")
    y = make_variable("y")
    inner = x * y
    outer = inner * 2.0
    r = outer + 1.0

    assert query(r, Mul, deep=True) == {outer, inner}
    assert r.find_descendants_matching(lambda n: isinstance(n, Mul), deep=True) == {outer, inner}


def test_shallow_match_hides_nested_variables(session):
    # a predicate matching a composite node keeps the search from reaching
    # the variables beneath it
    x = make_variable("x")
    y = make_variable("y")
    s = x * y
    r = s + y
    pred = lambda n: isinstance(n, (Mul, Variable))
    assert query(r, pred) == {s, y}
    assert query(r, pred, deep=True) == {s, x, y}


def test_query_excludes_root(session):
    x = make_variable("x")
    r = (x + 1.0) + 2.0
    assert query(r, Plus) == {r.a}
    assert query(x, Variable) == set()


def test_query_by_function_tag(session):
    x = make_variable("x")
    e = exp(x)
    r = e + x
    assert query(r, "exp") == {e}
    assert query(r, "function") == {e}


def test_topological_order(session):
    x = make_variable("x")
    y = make_variable("y")
    m = x * y
    r = m + x
    assert topological_order(r) == [x, y, m, r]
    assert topological_order(x) == [x]


def test_graph_stats(session):
    x = make_variable("x")
    y = make_variable("y")
    r = x * x + x * y
    stats = get_graph_stats(r)
    assert stats['nodes'] == 5
    assert stats['edges'] == 6
    assert stats['variables'] == 2
    assert stats['max_fan_in'] == 2
    assert stats['max_fan_out'] == 3
    assert stats['shared_nodes'] == 1
    assert stats['kinds'] == {"var": 2, "mul": 2, "plus": 1}


def test_stats_on_leaf(session):
    c = make_constant(1.0)
    stats = get_graph_stats(c)
    assert stats['nodes'] == 1
    assert stats['edges'] == 0
    assert stats['max_fan_out'] == 0


def test_complexity_report(session):
    x = make_variable("x")
    r = exp(x) * x + x
    report = analyze_graph_complexity(r)
    assert report.startswith("Graph Complexity Analysis:")
    assert "Total nodes: 4" in report
    assert "Complexity level: Low" in report
