import pytest

from dotplot import Figure, LayoutAlgorithm, parse_graph, print_graph, validate

WORKFLOW = '''
// Build pipeline
digraph Workflow {
  rankdir=TB;
  node [shape=box];

  subgraph cluster_build {
    style=filled;
    color=lightgrey;
    node [style=filled, color=white];
    label="build";
    compile -> link -> package;
  }

  subgraph cluster_test {
    color=blue;
    label="test";
    unit -> integration;
  }

  start [shape=Mdiamond, label="Start"];
  finish [shape=Msquare, label="Finish"];

  start -> compile;
  start -> unit;
  package -> finish;
  integration -> finish;
  integration -> compile [style=dotted, label="retry"];
}
'''


@pytest.mark.parametrize('algorithm', list(LayoutAlgorithm))
def test_workflow_renders_with_every_layout(tmp_path, algorithm):
    fig = Figure()

    axes = fig.add_dot_subplot(WORKFLOW, algorithm)
    path = fig.save_svg(tmp_path / f'{algorithm.value}.svg')

    svg = path.read_text(encoding='utf-8')
    assert svg.startswith('<svg')
    assert '<title>Start</title>' in svg
    assert '>build</text>' in svg
    assert 'fill-opacity="0.3"' in svg
    assert axes.title == 'Workflow'


def test_workflow_model():
    graph = parse_graph(WORKFLOW)
    validate(graph)

    assert len(graph.nodes) == 7
    assert [(e.source, e.target) for e in graph.edges] == [
        ('compile', 'link'),
        ('link', 'package'),
        ('unit', 'integration'),
        ('start', 'compile'),
        ('start', 'unit'),
        ('package', 'finish'),
        ('integration', 'finish'),
        ('integration', 'compile'),
    ]
    build, test = graph.subgraphs
    assert build.fill_color == 'white'
    assert build.nodes == ['compile', 'link', 'package']
    assert test.fill_color == 'blue'
    assert 'retry' in print_graph(graph)
