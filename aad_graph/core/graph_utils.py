"""
Graph utilities

Searching and analysing an expression DAG from its root: predicate queries,
the set of Variables feeding a computation, topological ordering used by the
graph-level passes, and structural statistics.
"""

import numpy as np
from typing import Callable, Dict, List, Optional, Set, Type, Union
from collections import Counter

from .node import Node
from .var import Variable

Selector = Union[Callable[[Node], bool], Type[Node], str]


def _as_predicate(selector: Selector) -> Callable[[Node], bool]:
    if isinstance(selector, type) and issubclass(selector, Node):
        return lambda n: isinstance(n, selector)
    if isinstance(selector, str):
        return lambda n: n.kind == selector or getattr(n, "tag", None) == selector
    if callable(selector):
        return selector
    raise TypeError(f"query selector must be a predicate, Node subclass or kind string, got {selector!r}")


def query(root: Node, selector: Selector, *, deep: bool = False) -> Set[Node]:
    """
    De-duplicated set of descendants of `root` matching `selector`.

    Args:
        root: Node to search from. It is never part of the result, so
            query(x, Variable) is empty for a Variable x. variables() is the
            one helper that includes a Variable root.
        selector: predicate, Node subclass (isinstance match) or kind string
        deep: keep searching beneath nodes that already matched

    Returns:
        set of matching nodes
    """
    return root.find_descendants_matching(_as_predicate(selector), deep=deep)


def variables(root: Node) -> Set[Variable]:
    """Every Variable feeding `root` (the root itself if it is one)."""
    if isinstance(root, Variable):
        return {root}
    return query(root, Variable)


def variables_by_name(root: Node) -> Dict[str, Variable]:
    return {v.name: v for v in sorted(variables(root), key=lambda v: v.name)}


def topological_order(root: Node, expand: Optional[Callable[[Node], bool]] = None) -> List[Node]:
    """
    Post-order of the DAG below `root`: children (left to right) before
    parents, each node exactly once. This is the order the recursive forward
    pass visits nodes in.

    Args:
        root: Node to start from
        expand: if given, only nodes for which it holds are visited; the
            others (and anything reachable only through them) are left out
    """
    if expand is not None and not expand(root):
        return []
    order: List[Node] = []
    seen: Set[int] = {id(root)}
    stack = [(root, iter(root.children()))]
    while stack:
        node, it = stack[-1]
        child = next(it, None)
        if child is None:
            order.append(node)
            stack.pop()
        elif id(child) not in seen:
            seen.add(id(child))
            if expand is None or expand(child):
                stack.append((child, iter(child.children())))
    return order


def get_graph_stats(root: Node) -> Dict:
    """
    Structural statistics of the graph below `root` (no printing).

    Returns:
        dict with node/edge counts, fan-in/fan-out and kind breakdown
    """
    nodes = topological_order(root)
    n_nodes = len(nodes)
    n_edges = sum(len(n.children()) for n in nodes)

    # fan-in: number of children; fan-out: number of parents within this graph
    fan_ins = [len(n.children()) for n in nodes]
    parents = Counter()
    for n in nodes:
        for c in n.children():
            parents[id(c)] += 1
    fan_outs = [parents[id(n)] for n in nodes]

    kinds = Counter(n.kind for n in nodes)
    tags = Counter(getattr(n, "tag", n.kind) for n in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'shared_nodes': sum(1 for f in fan_outs if f > 1),
        'variables': sum(1 for n in nodes if isinstance(n, Variable)),
        'kinds': dict(kinds),
        'operations': dict(tags),
    }


def analyze_graph_complexity(root: Node) -> str:
    """
    Text report of the graph's size, sharing and most common operations.
    """
    stats = get_graph_stats(root)

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total nodes: {stats['nodes']:,}")
    report.append(f"  Total edges: {stats['edges']:,}")
    report.append(f"  Variables: {stats['variables']}")
    report.append(f"  Shared subexpressions: {stats['shared_nodes']}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"
    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
