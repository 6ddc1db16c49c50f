from .model import Graph


class ValidationError(Exception):
    pass


def validate(graph: Graph) -> None:
    """Check the referential invariants of a graph model."""

    for key, node in graph.nodes.items():
        if key != node.id:
            raise ValidationError(f'node stored under key {key!r} has id {node.id!r}')
        for value, axis in ((node.x, 'x'), (node.y, 'y')):
            if value != value:  # NaN
                raise ValidationError(f'node {node.id!r} has a NaN {axis} coordinate')

    for idx, edge in enumerate(graph.edges):
        for end, name in (('source', edge.source), ('target', edge.target)):
            if name not in graph.nodes:
                raise ValidationError(f'edge #{idx} {edge.source!r} -> {edge.target!r}: unknown {end} node {name!r}')

    for subgraph in graph.subgraphs:
        if len(set(subgraph.nodes)) != len(subgraph.nodes):
            raise ValidationError(f'subgraph {subgraph.id!r} lists a member twice')
        for member in subgraph.nodes:
            if member not in graph.nodes:
                raise ValidationError(f'subgraph {subgraph.id!r} references unknown node {member!r}')
