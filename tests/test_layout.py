import math

import numpy as np
import pytest

from dotplot import LayoutAlgorithm, LayoutConfig, apply_layout, compute_layers, parse_graph
from dotplot.layout import grid_shape, relax_step

MIXED = '''
digraph {
  subgraph cluster_0 { a0 -> a1 -> a2; }
  subgraph cluster_1 { b0 -> b1; }
  start -> a0;
  start -> b0;
  a2 -> end;
  b1 -> end;
  end -> start;
}
'''


def positions(graph):
    return {node_id: node.position for node_id, node in graph.nodes.items()}


@pytest.mark.parametrize('algorithm', list(LayoutAlgorithm))
def test_every_layout_stays_in_unit_square(algorithm):
    graph = parse_graph(MIXED)

    apply_layout(graph, algorithm)

    for x, y in positions(graph).values():
        assert 0.0 <= x <= 1.0
        assert 0.0 <= y <= 1.0


def test_circular_layout_is_symmetric():
    graph = parse_graph('digraph { a; b; c; d; e; }')

    apply_layout(graph, LayoutAlgorithm.CIRCULAR)

    pts = np.array(list(positions(graph).values()))
    offsets = pts - 0.5
    assert np.hypot(offsets[:, 0], offsets[:, 1]).tolist() == pytest.approx([0.35] * 5)
    angles = np.arctan2(offsets[:, 1], offsets[:, 0])
    steps = np.mod(np.diff(angles), 2 * math.pi)
    assert steps.tolist() == pytest.approx([2 * math.pi / 5] * 4)


def test_grid_layout_for_four_nodes():
    graph = parse_graph('digraph { a; b; c; d; }')

    apply_layout(graph, LayoutAlgorithm.GRID)

    assert grid_shape(4) == (2, 2)
    got = positions(graph)
    assert got['a'] == pytest.approx((0.1, 0.1))
    assert got['b'] == pytest.approx((0.9, 0.1))
    assert got['c'] == pytest.approx((0.1, 0.9))
    assert got['d'] == pytest.approx((0.9, 0.9))


@pytest.mark.parametrize('count, shape', [(1, (1, 1)), (3, (2, 2)), (5, (3, 2)), (9, (3, 3))])
def test_grid_shape(count, shape):
    assert grid_shape(count) == shape


def test_hierarchical_chain_flows_top_down():
    graph = parse_graph('digraph G { a -> b; b -> c; }')

    apply_layout(graph, LayoutAlgorithm.HIERARCHICAL)

    a, b, c = (graph.nodes[n] for n in 'abc')
    assert a.y > b.y > c.y
    assert a.y == pytest.approx(0.9)
    assert c.y == pytest.approx(0.1)
    assert a.x == b.x == c.x == pytest.approx(0.5)


def test_simple_cycle_is_layered_completely():
    graph = parse_graph('digraph { a -> b -> c -> a; }')

    layers = compute_layers(graph)

    assert layers == [['a'], ['b'], ['c']]


def test_cycle_repair_follows_placed_predecessor():
    graph = parse_graph('digraph { s -> a; a -> b; b -> a; }')

    assert compute_layers(graph) == [['s'], ['a'], ['b']]


def test_single_layer_sits_in_the_middle_and_fans_out():
    graph = parse_graph('digraph { a; b; }')

    apply_layout(graph, LayoutAlgorithm.HIERARCHICAL)

    assert graph.nodes['a'].position == pytest.approx((0.425, 0.5))
    assert graph.nodes['b'].position == pytest.approx((0.575, 0.5))


def test_subgraphs_get_their_own_columns():
    graph = parse_graph('digraph { subgraph left { l; } subgraph right { r; } }')

    apply_layout(graph, LayoutAlgorithm.HIERARCHICAL)

    assert graph.nodes['l'].x == pytest.approx(0.25)
    assert graph.nodes['r'].x == pytest.approx(0.75)


def test_hierarchical_layout_is_deterministic():
    first = parse_graph(MIXED)
    second = parse_graph(MIXED)

    apply_layout(first, LayoutAlgorithm.HIERARCHICAL)
    apply_layout(second, LayoutAlgorithm.HIERARCHICAL)

    assert positions(first) == positions(second)


def test_relax_step_pulls_endpoints_together():
    moved = relax_step(np.array([[0.0, 0.0], [1.0, 0.0]]), np.array([0]), np.array([1]), 0.1)

    assert moved == pytest.approx(np.array([[0.1, 0.0], [0.9, 0.0]]))


def test_force_layout_attracts_connected_nodes_only():
    graph = parse_graph('digraph { a -> b; c; }')
    apply_layout(graph, LayoutAlgorithm.CIRCULAR, config=LayoutConfig(circle_radius=0.25))
    before = positions(graph)

    apply_layout(graph, LayoutAlgorithm.FORCE_DIRECTED)

    after = positions(graph)
    assert math.dist(after['a'], after['b']) < math.dist(before['a'], before['b'])
    assert after['c'] == pytest.approx(before['c'])


def test_algorithm_override_leaves_graph_selection_alone():
    graph = parse_graph('digraph { a -> b; }')
    graph.set_layout(LayoutAlgorithm.GRID)

    result = apply_layout(graph, LayoutAlgorithm.CIRCULAR)

    assert result is graph
    assert graph.layout is LayoutAlgorithm.GRID


def test_explicit_config_changes_radius():
    graph = parse_graph('digraph { a; b; c; }')

    apply_layout(graph, LayoutAlgorithm.CIRCULAR, config=LayoutConfig(circle_radius=0.2))

    for x, y in positions(graph).values():
        assert math.hypot(x - 0.5, y - 0.5) == pytest.approx(0.2)


def test_graph_method_uses_selected_algorithm():
    graph = parse_graph('digraph { a; b; c; d; }')
    graph.set_layout(LayoutAlgorithm.GRID)

    graph.apply_layout()

    assert graph.nodes['d'].position == pytest.approx((0.9, 0.9))


def test_force_layout_stays_inside_clamp_bounds():
    graph = parse_graph(MIXED)

    apply_layout(graph, LayoutAlgorithm.FORCE_DIRECTED)

    for x, y in positions(graph).values():
        assert 0.1 <= x <= 0.9
        assert 0.1 <= y <= 0.9


def test_force_layout_clamps_wide_start():
    graph = parse_graph('digraph { a; b; c; d; }')

    apply_layout(graph, LayoutAlgorithm.FORCE_DIRECTED, config=LayoutConfig(force_initial_radius=0.45))

    got = positions(graph)
    assert got['a'] == pytest.approx((0.9, 0.5))
    assert got['b'] == pytest.approx((0.5, 0.9))
    assert got['c'] == pytest.approx((0.1, 0.5))
    assert got['d'] == pytest.approx((0.5, 0.1))


def test_force_layout_matches_closed_form_for_one_edge():
    graph = parse_graph('digraph { a -> b; }')

    apply_layout(graph, LayoutAlgorithm.FORCE_DIRECTED)

    # Each pass shrinks the gap by (1 - 2 * 0.02); ten passes from a 0.25 radius.
    half_gap = 0.25 * (1 - 2 * 0.02) ** 10
    assert graph.nodes['a'].position == pytest.approx((0.5 + half_gap, 0.5))
    assert graph.nodes['b'].position == pytest.approx((0.5 - half_gap, 0.5))


def test_hierarchical_fan_out_is_clamped():
    graph = parse_graph('digraph { subgraph left { a; b; c; } subgraph right { d; } }')

    apply_layout(graph, LayoutAlgorithm.HIERARCHICAL, config=LayoutConfig(column_spread=0.6))

    xs = {node_id: x for node_id, (x, _) in positions(graph).items()}
    assert xs['a'] == pytest.approx(0.05)
    assert xs['b'] == pytest.approx(0.25)
    assert xs['c'] == pytest.approx(0.55)
    assert xs['d'] == pytest.approx(0.75)
    assert all(0.05 <= x <= 0.95 for x in xs.values())
