from dotplot import parse_graph
from dotplot.colors import BLUE, RED
from dotplot.model import Edge, EdgeStyle, Node, NodeShape
from dotplot.printer import format_edge, format_node, id_str, print_graph

PIPELINE = '''
digraph Pipeline {
  rankdir=LR;
  start [shape=Mdiamond];
  subgraph cluster_0 {
    style=filled;
    color=lightgrey;
    label="Stage A";
    a0 -> a1;
  }
  subgraph cluster_1 {
    color=blue;
    label="Stage B";
    b0 -> b1 [style=dashed];
  }
  start -> a0;
  start -> b0 [color=red, label="go"];
  a1 -- end;
  end [shape=Msquare];
}
'''


def snapshot(graph):
    return {
        'directed': graph.directed,
        'name': graph.name,
        'attributes': dict(graph.attributes),
        'nodes': [(n.id, n.label, n.shape, n.color) for n in graph.nodes.values()],
        'edges': [(e.source, e.target, e.label, e.color, e.style, e.directed) for e in graph.edges],
        'subgraphs': [(s.id, s.label, s.style, s.color, s.fill_color, list(s.nodes)) for s in graph.subgraphs],
    }


def test_simple_graph_prints_canonical_form():
    graph = parse_graph('digraph G { a -> b; }')

    assert print_graph(graph) == 'digraph G {\n  a [label="a"];\n  b [label="b"];\n  a -> b;\n}\n'


def test_undirected_graph_header():
    graph = parse_graph('graph { a -- b; }')

    assert print_graph(graph).startswith('graph {\n')
    assert '  a -- b;\n' in print_graph(graph)


def test_format_node_lists_non_default_fields():
    node = Node('start', label='Start', shape=NodeShape.MSQUARE, color=BLUE)

    assert format_node(node) == 'start [label="Start", shape="Msquare", color="blue"];'


def test_format_edge_with_attributes():
    edge = Edge('a', 'b', label='x', color=RED, style=EdgeStyle.DOTTED, directed=False)

    assert format_edge(edge) == 'a -- b [label="x", color="red", style="dotted"];'


def test_identifiers_are_quoted_when_needed():
    assert id_str('plain_1') == 'plain_1'
    assert id_str('node') == '"node"'
    assert format_node(Node('node one')) == '"node one";'


def test_printed_graph_parses_back_to_same_model():
    graph = parse_graph(PIPELINE)
    printed = print_graph(graph)
    reparsed = parse_graph(printed)

    assert snapshot(reparsed) == snapshot(graph)
    assert print_graph(reparsed) == printed
